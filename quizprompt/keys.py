"""Key events delivered to prompts by a terminal backend."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class KeyModifiers(enum.Flag):
    """Modifier keys held while a key was pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


class KeyCode(enum.Enum):
    """Kind of key that was pressed."""

    CHAR = "char"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    TAB = "tab"
    BACKTAB = "backtab"
    DELETE = "delete"
    HOME = "home"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass(frozen=True)
class Key:
    """A single key press: its code, the typed character if any, and modifiers."""

    code: KeyCode
    character: str | None = None
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR:
            if not isinstance(self.character, str) or len(self.character) != 1:
                raise ValueError(
                    f"a character key needs exactly one character, got {self.character!r}"
                )
        elif self.character is not None:
            raise ValueError(f"key {self.code.name} does not carry a character")

    @classmethod
    def char(cls, ch: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> Key:
        """Create the key press of a printable character."""
        return cls(KeyCode.CHAR, ch, modifiers)

    @classmethod
    def special(cls, code: KeyCode, modifiers: KeyModifiers = KeyModifiers.NONE) -> Key:
        """Create the key press of a non-character key such as an arrow."""
        if code is KeyCode.CHAR:
            raise ValueError("use Key.char for character keys")
        return cls(code, None, modifiers)