"""Key bindings of the date selection prompt."""

from __future__ import annotations

import enum

from quizprompt.keys import Key, KeyCode, KeyModifiers

_NONE = KeyModifiers.NONE


class DateSelectAction(enum.Enum):
    """Moves of the date cursor in the calendar."""

    GO_TO_PREV_DAY = "go_to_prev_day"
    GO_TO_NEXT_DAY = "go_to_next_day"
    GO_TO_PREV_WEEK = "go_to_prev_week"
    GO_TO_NEXT_WEEK = "go_to_next_week"
    GO_TO_PREV_MONTH = "go_to_prev_month"
    GO_TO_NEXT_MONTH = "go_to_next_month"
    GO_TO_PREV_YEAR = "go_to_prev_year"
    GO_TO_NEXT_YEAR = "go_to_next_year"


def _is_char(key: Key, chars: str, modifiers: KeyModifiers | None = None) -> bool:
    if key.code is not KeyCode.CHAR or key.character not in chars:
        return False
    return modifiers is None or key.modifiers == modifiers


def _is_code(key: Key, code: KeyCode, modifiers: KeyModifiers | None = None) -> bool:
    if key.code is not code:
        return False
    return modifiers is None or key.modifiers == modifiers


def date_action_from_key(key: Key) -> DateSelectAction | None:
    """Map a key to a calendar move, with standard, emacs and vim bindings."""
    if (
        _is_code(key, KeyCode.LEFT, _NONE)
        or _is_char(key, "b", KeyModifiers.CONTROL)
        or _is_char(key, "h", _NONE)
    ):
        return DateSelectAction.GO_TO_PREV_DAY
    if (
        _is_code(key, KeyCode.RIGHT, _NONE)
        or _is_char(key, "f", KeyModifiers.CONTROL)
        or _is_char(key, "l", _NONE)
    ):
        return DateSelectAction.GO_TO_NEXT_DAY
    if (
        _is_code(key, KeyCode.UP, _NONE)
        or _is_char(key, "p", KeyModifiers.CONTROL)
        or _is_char(key, "k", _NONE)
    ):
        return DateSelectAction.GO_TO_PREV_WEEK
    if (
        _is_code(key, KeyCode.DOWN, _NONE)
        or _is_char(key, "n", KeyModifiers.CONTROL)
        or _is_char(key, "j", _NONE)
        or _is_code(key, KeyCode.TAB)
    ):
        return DateSelectAction.GO_TO_NEXT_WEEK
    if (
        _is_code(key, KeyCode.PAGE_UP, _NONE)
        or _is_char(key, "[", _NONE)
        or _is_code(key, KeyCode.LEFT)
        or _is_char(key, "vV", KeyModifiers.ALT)
        or _is_char(key, "vV", KeyModifiers.META)
        or _is_char(key, "bB")
    ):
        return DateSelectAction.GO_TO_PREV_MONTH
    if (
        _is_code(key, KeyCode.PAGE_DOWN, _NONE)
        or _is_char(key, "]", _NONE)
        or _is_code(key, KeyCode.RIGHT)
        or _is_char(key, "vV", KeyModifiers.CONTROL)
        or _is_char(key, "fF")
    ):
        return DateSelectAction.GO_TO_NEXT_MONTH
    if _is_code(key, KeyCode.PAGE_UP) or _is_char(key, "{[") or _is_code(key, KeyCode.UP):
        return DateSelectAction.GO_TO_PREV_YEAR
    if _is_code(key, KeyCode.PAGE_DOWN) or _is_char(key, "}]") or _is_code(key, KeyCode.DOWN):
        return DateSelectAction.GO_TO_NEXT_YEAR
    return None