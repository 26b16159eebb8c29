import pytest

from quizprompt.date_action import DateSelectAction, date_action_from_key
from quizprompt.keys import Key, KeyCode, KeyModifiers

A = DateSelectAction
NONE = KeyModifiers.NONE
CTRL = KeyModifiers.CONTROL
ALT = KeyModifiers.ALT
META = KeyModifiers.META
SHIFT = KeyModifiers.SHIFT


@pytest.mark.parametrize(
    "key, expected",
    [
        (Key.special(KeyCode.LEFT), A.GO_TO_PREV_DAY),
        (Key.char("b", CTRL), A.GO_TO_PREV_DAY),
        (Key.char("h"), A.GO_TO_PREV_DAY),
        (Key.special(KeyCode.RIGHT), A.GO_TO_NEXT_DAY),
        (Key.char("f", CTRL), A.GO_TO_NEXT_DAY),
        (Key.char("l"), A.GO_TO_NEXT_DAY),
        (Key.special(KeyCode.UP), A.GO_TO_PREV_WEEK),
        (Key.char("p", CTRL), A.GO_TO_PREV_WEEK),
        (Key.char("k"), A.GO_TO_PREV_WEEK),
        (Key.special(KeyCode.DOWN), A.GO_TO_NEXT_WEEK),
        (Key.char("n", CTRL), A.GO_TO_NEXT_WEEK),
        (Key.char("j"), A.GO_TO_NEXT_WEEK),
        (Key.special(KeyCode.TAB), A.GO_TO_NEXT_WEEK),
    ],
)
def test_day_and_week_bindings(key, expected):
    assert date_action_from_key(key) is expected


@pytest.mark.parametrize(
    "key, expected",
    [
        (Key.special(KeyCode.PAGE_UP), A.GO_TO_PREV_MONTH),
        (Key.char("["), A.GO_TO_PREV_MONTH),
        (Key.special(KeyCode.LEFT, CTRL), A.GO_TO_PREV_MONTH),
        (Key.char("v", ALT), A.GO_TO_PREV_MONTH),
        (Key.char("V", META), A.GO_TO_PREV_MONTH),
        (Key.char("b", ALT), A.GO_TO_PREV_MONTH),
        (Key.char("B", SHIFT), A.GO_TO_PREV_MONTH),
        (Key.special(KeyCode.PAGE_DOWN), A.GO_TO_NEXT_MONTH),
        (Key.char("]"), A.GO_TO_NEXT_MONTH),
        (Key.special(KeyCode.RIGHT, SHIFT), A.GO_TO_NEXT_MONTH),
        (Key.char("v", CTRL), A.GO_TO_NEXT_MONTH),
        (Key.char("f", ALT), A.GO_TO_NEXT_MONTH),
        (Key.char("F"), A.GO_TO_NEXT_MONTH),
    ],
)
def test_month_bindings(key, expected):
    assert date_action_from_key(key) is expected


@pytest.mark.parametrize(
    "key, expected",
    [
        (Key.special(KeyCode.PAGE_UP, CTRL), A.GO_TO_PREV_YEAR),
        (Key.char("{"), A.GO_TO_PREV_YEAR),
        (Key.char("[", CTRL), A.GO_TO_PREV_YEAR),
        (Key.special(KeyCode.UP, CTRL), A.GO_TO_PREV_YEAR),
        (Key.special(KeyCode.PAGE_DOWN, CTRL), A.GO_TO_NEXT_YEAR),
        (Key.char("}"), A.GO_TO_NEXT_YEAR),
        (Key.char("]", ALT), A.GO_TO_NEXT_YEAR),
        (Key.special(KeyCode.DOWN, SHIFT), A.GO_TO_NEXT_YEAR),
    ],
)
def test_year_bindings(key, expected):
    assert date_action_from_key(key) is expected


def test_v_with_alt_and_meta_together_is_not_a_month_move():
    assert date_action_from_key(Key.char("v", ALT | META)) is None


@pytest.mark.parametrize(
    "key",
    [
        Key.char("x"),
        Key.char("v"),
        Key.special(KeyCode.ENTER),
        Key.special(KeyCode.HOME),
        Key.special(KeyCode.BACKSPACE),
    ],
)
def test_unbound_keys(key):
    assert date_action_from_key(key) is None