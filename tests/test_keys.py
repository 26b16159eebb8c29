import pytest

from quizprompt.keys import Key, KeyCode, KeyModifiers


def test_char_key_defaults_to_no_modifiers():
    key = Key.char("a")
    assert key.code is KeyCode.CHAR
    assert key.character == "a"
    assert key.modifiers == KeyModifiers.NONE


def test_char_key_keeps_modifiers():
    key = Key.char("c", KeyModifiers.CONTROL)
    assert key.modifiers == KeyModifiers.CONTROL
    assert key == Key(KeyCode.CHAR, "c", KeyModifiers.CONTROL)


def test_special_key_has_no_character():
    key = Key.special(KeyCode.LEFT, KeyModifiers.SHIFT)
    assert key.code is KeyCode.LEFT
    assert key.character is None
    assert key.modifiers == KeyModifiers.SHIFT


def test_keys_are_hashable_and_compare_by_value():
    keys = {Key.char("x"), Key.char("x"), Key.special(KeyCode.ENTER)}
    assert len(keys) == 2
    assert Key.special(KeyCode.UP) != Key.special(KeyCode.UP, KeyModifiers.CONTROL)


def test_combined_modifiers_contain_each_part():
    key = Key.char("v", KeyModifiers.ALT | KeyModifiers.META)
    assert KeyModifiers.ALT in key.modifiers
    assert KeyModifiers.META in key.modifiers
    assert KeyModifiers.CONTROL not in key.modifiers
    assert key == Key.char("v", KeyModifiers.META | KeyModifiers.ALT)


@pytest.mark.parametrize("text", ["", "ab"])
def test_char_requires_single_character(text):
    with pytest.raises(ValueError):
        Key.char(text)


def test_special_rejects_char_code():
    with pytest.raises(ValueError):
        Key.special(KeyCode.CHAR)


def test_non_char_key_rejects_character():
    with pytest.raises(ValueError):
        Key(KeyCode.ENTER, "a")


def test_unicode_character_accepted():
    key = Key.char("🌍")
    assert key.character == "🌍"