"""Behaviour shared by every prompt: the key loop, errors and validation results."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol

from quizprompt.keys import Key, KeyCode, KeyModifiers


class ActionResult(enum.Enum):
    """Outcome of an action: whether the prompt must be drawn again."""

    NEEDS_REDRAW = "needs_redraw"
    CLEAN = "clean"

    def merge(self, other: ActionResult) -> ActionResult:
        """Combine two results; a redraw wins over a clean result."""
        if ActionResult.NEEDS_REDRAW in (self, other):
            return ActionResult.NEEDS_REDRAW
        return ActionResult.CLEAN

    def needs_redraw(self) -> bool:
        """Return whether the prompt must be rendered again."""
        return self is ActionResult.NEEDS_REDRAW


class Action(enum.Enum):
    """Actions understood by every prompt, whatever its kind."""

    SUBMIT = "submit"
    CANCEL = "cancel"
    INTERRUPT = "interrupt"


def action_from_key(key: Key) -> Action | None:
    """Map a key to a prompt-independent action, or None if it has none."""
    if key.code is KeyCode.ENTER:
        return Action.SUBMIT
    if key.code is KeyCode.ESCAPE:
        return Action.CANCEL
    if key.code is KeyCode.CHAR:
        if key.character == "\n" and key.modifiers == KeyModifiers.NONE:
            return Action.SUBMIT
        if key.character == "c" and key.modifiers == KeyModifiers.CONTROL:
            return Action.INTERRUPT
    return None


class InquireError(Exception):
    """Base class of every error a prompt raises."""


class OperationCanceledError(InquireError):
    """The user canceled the prompt."""

    def __init__(self) -> None:
        super().__init__("Operation was canceled by the user")


class OperationInterruptedError(InquireError):
    """The user interrupted the prompt."""

    def __init__(self) -> None:
        super().__init__("Operation was interrupted by the user")


class InvalidConfigurationError(InquireError):
    """The prompt was configured with values that cannot work together."""


class CustomError(InquireError):
    """A user-supplied callback, such as a validator, raised an error."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause


@dataclass(frozen=True)
class Validation:
    """Result of validating an answer.

    An invalid result with ``message`` set to None stands for the default
    error message.
    """

    is_valid: bool
    message: str | None = None

    @classmethod
    def valid(cls) -> Validation:
        """The answer is acceptable."""
        return cls(True)

    @classmethod
    def invalid(cls, message: str | None = None) -> Validation:
        """The answer is rejected, with an optional message for the user."""
        return cls(False, message)


class Backend(Protocol):
    """Rendering and input operations that every prompt relies on."""

    def frame_setup(self) -> None:
        """Start drawing a new frame."""

    def frame_finish(self) -> None:
        """Finish drawing the current frame."""

    def read_key(self) -> Key:
        """Block until the next key press and return it."""

    def render_canceled_prompt(self, message: str) -> None:
        """Draw the prompt as canceled."""

    def render_prompt_with_answer(self, message: str, answer: str) -> None:
        """Draw the prompt with its final, formatted answer."""

    def render_error_message(self, message: str | None) -> None:
        """Draw a validation error; None means the default message."""

    def render_help_message(self, message: str) -> None:
        """Draw a help line below the prompt."""


class Prompt(ABC):
    """Base of all prompts; subclasses supply parsing, handling and rendering."""

    def __init__(self, message: str) -> None:
        self.message = message

    @abstractmethod
    def parse_key(self, key: Key) -> Any | None:
        """Turn a key into an action of this prompt, or None to ignore it."""

    @abstractmethod
    def format_answer(self, answer: Any) -> str:
        """Return the text shown to the user as the final answer."""

    def setup(self) -> None:
        """Called once before the first frame is drawn."""

    def pre_cancel(self) -> bool:
        """Called on cancel; return whether the prompt may end."""
        return True

    @abstractmethod
    def submit(self) -> Any | None:
        """Return the answer, or None if the submission is rejected."""

    @abstractmethod
    def handle(self, action: Any) -> ActionResult:
        """Apply an action of this prompt and say whether to redraw."""

    @abstractmethod
    def render(self, backend: Backend) -> None:
        """Draw the prompt's content into the current frame."""

    def run(self, backend: Backend) -> Any:
        """Drive the prompt with keys from the backend until it ends."""
        self.setup()

        last = ActionResult.NEEDS_REDRAW
        while True:
            if last.needs_redraw():
                backend.frame_setup()
                self.render(backend)
                backend.frame_finish()
                last = ActionResult.CLEAN

            key = backend.read_key()
            action = action_from_key(key)

            if action is Action.SUBMIT:
                answer = self.submit()
                if answer is not None:
                    break
                last = ActionResult.NEEDS_REDRAW
            elif action is Action.CANCEL:
                if self.pre_cancel():
                    backend.frame_setup()
                    backend.render_canceled_prompt(self.message)
                    backend.frame_finish()
                    raise OperationCanceledError()
                last = ActionResult.NEEDS_REDRAW
            elif action is Action.INTERRUPT:
                raise OperationInterruptedError()
            else:
                inner = self.parse_key(key)
                if inner is not None:
                    last = self.handle(inner)

        formatted = self.format_answer(answer)
        backend.frame_setup()
        backend.render_prompt_with_answer(self.message, formatted)
        backend.frame_finish()
        return answer