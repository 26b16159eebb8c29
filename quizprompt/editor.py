"""Prompt that collects long text by opening an external editor on a temporary file."""

from __future__ import annotations

import enum
import os
import subprocess
import tempfile
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable, Sequence

from quizprompt.keys import Key, KeyCode
from quizprompt.prompt import (
    ActionResult,
    Backend,
    CustomError,
    OperationCanceledError,
    Prompt,
    Validation,
)

StringFormatter = Callable[[str], str]
StringValidator = Callable[[str], Validation]


class EditorAction(enum.Enum):
    """Actions specific to the editor prompt."""

    OPEN_EDITOR = "open_editor"


def editor_action_from_key(key: Key) -> EditorAction | None:
    """Map a key to an editor action: 'e', with any modifiers, opens the editor."""
    if key.code is KeyCode.CHAR and key.character == "e":
        return EditorAction.OPEN_EDITOR
    return None


@dataclass(frozen=True)
class EditorConfig:
    """Command line used to open the editor."""

    editor_command: str
    editor_command_args: tuple[str, ...] = ()


def default_editor_command() -> str:
    """Return the editor to use: VISUAL, else EDITOR, else the platform default."""
    editor = "notepad" if os.name == "nt" else "nano"
    for variable in ("EDITOR", "VISUAL"):
        value = os.environ.get(variable)
        if value:
            editor = value
    return editor


def _received_formatter(_answer: str) -> str:
    return "<received>"


@dataclass(frozen=True)
class Editor:
    """Settings of an editor prompt; each ``with_*`` method returns an updated copy."""

    DEFAULT_HELP_MESSAGE = None

    message: str
    editor_command: str = field(default_factory=default_editor_command)
    editor_command_args: tuple[str, ...] = ()
    file_extension: str = ".txt"
    predefined_text: str | None = None
    help_message: str | None = None
    formatter: StringFormatter = _received_formatter
    validators: tuple[StringValidator, ...] = ()

    def with_help_message(self, message: str) -> Editor:
        """Set the help message shown below the prompt."""
        return replace(self, help_message=message)

    def with_predefined_text(self, text: str) -> Editor:
        """Set the text written into the temporary file before editing."""
        return replace(self, predefined_text=text)

    def with_file_extension(self, file_extension: str) -> Editor:
        """Set the temporary file's extension, dot included, e.g. ".md"."""
        return replace(self, file_extension=file_extension)

    def with_editor_command(self, editor_command: str) -> Editor:
        """Set the command that opens the editor."""
        return replace(self, editor_command=editor_command)

    def with_args(self, args: Sequence[str]) -> Editor:
        """Set the arguments passed to the editor before the file path."""
        return replace(self, editor_command_args=tuple(args))

    def with_formatter(self, formatter: StringFormatter) -> Editor:
        """Set the function that formats the final answer for display."""
        return replace(self, formatter=formatter)

    def with_validator(self, validator: StringValidator) -> Editor:
        """Append a validator; validators run in order and the first rejection wins."""
        return replace(self, validators=(*self.validators, validator))

    def with_validators(self, validators: Iterable[StringValidator]) -> Editor:
        """Append several validators in the order given."""
        return replace(self, validators=(*self.validators, *validators))

    def prompt(self, backend: Backend) -> str:
        """Run the prompt on ``backend`` and return the submitted text."""
        with EditorPrompt(self) as editor_prompt:
            return editor_prompt.run(backend)

    def prompt_skippable(self, backend: Backend) -> str | None:
        """Like :meth:`prompt`, but return None when the user cancels."""
        try:
            return self.prompt(backend)
        except OperationCanceledError:
            return None


class EditorPrompt(Prompt):
    """Running state of an editor prompt, owning its temporary file."""

    def __init__(self, editor: Editor) -> None:
        super().__init__(editor.message)
        self.config = EditorConfig(editor.editor_command, tuple(editor.editor_command_args))
        self.help_message = editor.help_message
        self.formatter = editor.formatter
        self.validators = tuple(editor.validators)
        self._error: Validation | None = None
        self.path = self._create_file(editor.file_extension, editor.predefined_text)

    @staticmethod
    def _create_file(file_extension: str, predefined_text: str | None) -> Path:
        fd, name = tempfile.mkstemp(prefix="tmp-", suffix=file_extension)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            if predefined_text is not None:
                handle.write(predefined_text)
        return Path(name)

    def __enter__(self) -> EditorPrompt:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Delete the temporary file."""
        self.path.unlink(missing_ok=True)

    def parse_key(self, key: Key) -> EditorAction | None:
        return editor_action_from_key(key)

    def format_answer(self, answer: str) -> str:
        return self.formatter(answer)

    def current_answer(self) -> str:
        """Return the file's content without trailing line breaks."""
        return self.path.read_text(encoding="utf-8").rstrip("\r\n")

    def _validate(self) -> Validation:
        if not self.validators:
            return Validation.valid()
        answer = self.current_answer()
        for validator in self.validators:
            try:
                result = validator(answer)
            except Exception as exc:
                raise CustomError(exc) from exc
            if not result.is_valid:
                return result
        return Validation.valid()

    def submit(self) -> str | None:
        result = self._validate()
        if not result.is_valid:
            self._error = result
            return None
        return self.current_answer()

    def _run_editor(self) -> None:
        subprocess.run(
            [self.config.editor_command, *self.config.editor_command_args, str(self.path)],
            check=False,
        )

    def handle(self, action: EditorAction) -> ActionResult:
        if action is EditorAction.OPEN_EDITOR:
            self._run_editor()
        return ActionResult.NEEDS_REDRAW

    def render(self, backend: Backend) -> None:
        if self._error is not None:
            backend.render_error_message(self._error.message)
        editor_name = Path(self.config.editor_command).stem or "editor"
        backend.render_prompt(self.message, editor_name)
        if self.help_message is not None:
            backend.render_help_message(self.help_message)