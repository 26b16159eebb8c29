# quizprompt

Interactive prompts for terminal programs. Each prompt is a small state
machine. It turns key presses into actions, updates its state and asks a
backend to draw it. You supply the backend. It can be a real terminal or a
scripted list of keys, so prompts are easy to test.

## Prompts

- `DateSelect` (`quizprompt.dateselect`) lets the user move through a
  calendar and pick one day. It supports optional minimum and maximum dates,
  a configurable first day of the week, validators and a formatter. By
  default it starts on today's date and shows the answer as
  "January 1, 2023".
- `Editor` (`quizprompt.editor`) opens an external editor on a temporary
  file and returns the saved text, with trailing line breaks removed. The
  user presses `e` to open the editor and Enter to submit. The editor command
  comes from `VISUAL`, then `EDITOR`, and falls back to `nano` (or `notepad`
  on Windows). Arguments, the file extension and text to prefill the file
  can all be set. The default formatter shows the answer as `<received>`.
  The temporary file is deleted when the prompt ends.

## Usage

Prompts are built with chained `with_*` calls. Each call returns an updated
copy. The finished prompt is then run against a backend:

```python
from datetime import date
import calendar

from quizprompt.dateselect import DateSelect

answer = (
    DateSelect("When do you want to travel?")
    .with_starting_date(date(2021, 8, 1))
    .with_min_date(date(2021, 8, 1))
    .with_max_date(date(2021, 12, 31))
    .with_week_start(calendar.MONDAY)
    .with_help_message("Possible flights will be shown for the selected date")
    .prompt(backend)
)
```

```python
from quizprompt.editor import Editor

text = (
    Editor("Describe the change")
    .with_file_extension(".md")
    .with_predefined_text("# Title\n")
    .prompt(backend)
)
```

`prompt` returns the answer. Escape raises `OperationCanceledError` and
Ctrl-C raises `OperationInterruptedError`. Both errors are defined in
`quizprompt.prompt` and derive from `InquireError`. `prompt_skippable`
returns `None` on cancel instead of raising. A `DateSelect` whose starting
date lies outside its min/max range raises `InvalidConfigurationError`.

## Date keys

| Move | Keys |
| --- | --- |
| previous / next day | Left / Right, Ctrl-B / Ctrl-F, `h` / `l` |
| previous / next week | Up / Down (Tab too), Ctrl-P / Ctrl-N, `k` / `j` |
| previous / next month | PageUp / PageDown, `[` / `]`, modified Left / Right, Alt-V / Ctrl-V |
| previous / next year | modified PageUp / PageDown, `{` / `}`, modified Up / Down |

The key mapping is available on its own as
`quizprompt.date_action.date_action_from_key`.

## Backends

Keys are `quizprompt.keys.Key` values built with `Key.char` and
`Key.special`. A backend is any object with the methods described by the
`quizprompt.prompt.Backend` protocol:

- `frame_setup`, `frame_finish` and `read_key`
- `render_canceled_prompt`, `render_prompt_with_answer`,
  `render_error_message` and `render_help_message`

The date prompt also calls `render_calendar_prompt(message)` and
`render_calendar(month, year, week_start, today, selected_date, min_date,
max_date)`. The editor prompt also calls `render_prompt(message,
editor_name)`.

New prompts can be written by subclassing `quizprompt.prompt.Prompt` and
implementing `parse_key`, `format_answer`, `submit`, `handle` and `render`.
`Prompt.run` drives the key loop.

## Validation

A validator is a callable that takes the current answer and returns
`Validation.valid()` or `Validation.invalid(message)`. Validators run in
order, and the first rejection is kept and passed to
`render_error_message` on every following frame. An exception raised inside
a validator is wrapped in `CustomError`.

## What is not included

The package does not ship a terminal backend. Reading keys from a real
terminal and drawing the calendar or prompt text is left to the backend you
provide. It also has no list-selection prompt. The only prompts are the
date picker and the editor prompt.