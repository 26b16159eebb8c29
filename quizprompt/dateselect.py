"""Prompt that lets the user pick a date from an interactive calendar."""

from __future__ import annotations

import calendar
import datetime
from dataclasses import dataclass, replace
from typing import Callable, Iterable

from quizprompt.date_action import DateSelectAction, date_action_from_key
from quizprompt.keys import Key
from quizprompt.prompt import (
    ActionResult,
    Backend,
    CustomError,
    InvalidConfigurationError,
    OperationCanceledError,
    Prompt,
    Validation,
)

DateFormatter = Callable[[datetime.date], str]
DateValidator = Callable[[datetime.date], Validation]

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def default_date_formatter(date: datetime.date) -> str:
    """Format a date as "Month Day, Year", e.g. "January 1, 2023"."""
    return f"{_MONTH_NAMES[date.month - 1]} {date.day}, {date.year}"


@dataclass(frozen=True)
class DateSelectConfig:
    """Settings that bound and lay out the calendar."""

    min_date: datetime.date | None
    max_date: datetime.date | None
    week_start: int


@dataclass(frozen=True)
class DateSelect:
    """Settings of a date prompt; each ``with_*`` method returns an updated copy.

    ``week_start`` is a weekday number as in the :mod:`calendar` module
    (``calendar.MONDAY`` is 0, ``calendar.SUNDAY`` is 6).
    """

    DEFAULT_HELP_MESSAGE = "arrows to move, []{} move months and years, enter to select"
    DEFAULT_WEEK_START = calendar.SUNDAY
    DEFAULT_VIM_MODE = True

    message: str
    starting_date: datetime.date = None  # type: ignore[assignment]
    min_date: datetime.date | None = None
    max_date: datetime.date | None = None
    help_message: str | None = DEFAULT_HELP_MESSAGE
    formatter: DateFormatter = default_date_formatter
    validators: tuple[DateValidator, ...] = ()
    week_start: int = DEFAULT_WEEK_START

    def __post_init__(self) -> None:
        if self.starting_date is None:
            object.__setattr__(self, "starting_date", datetime.date.today())

    def with_help_message(self, message: str) -> DateSelect:
        """Set the help message shown below the calendar."""
        return replace(self, help_message=message)

    def without_help_message(self) -> DateSelect:
        """Remove the help message."""
        return replace(self, help_message=None)

    def with_default(self, default: datetime.date) -> DateSelect:
        """Same as :meth:`with_starting_date`."""
        return self.with_starting_date(default)

    def with_week_start(self, week_start: int) -> DateSelect:
        """Set the weekday shown in the first column of the calendar."""
        return replace(self, week_start=week_start)

    def with_min_date(self, min_date: datetime.date) -> DateSelect:
        """Set the earliest date that can be selected."""
        return replace(self, min_date=min_date)

    def with_max_date(self, max_date: datetime.date) -> DateSelect:
        """Set the latest date that can be selected."""
        return replace(self, max_date=max_date)

    def with_starting_date(self, starting_date: datetime.date) -> DateSelect:
        """Set the date selected when the calendar is first shown."""
        return replace(self, starting_date=starting_date)

    def with_validator(self, validator: DateValidator) -> DateSelect:
        """Append a validator; validators run in order and the first rejection wins."""
        return replace(self, validators=(*self.validators, validator))

    def with_validators(self, validators: Iterable[DateValidator]) -> DateSelect:
        """Append several validators in the order given."""
        return replace(self, validators=(*self.validators, *validators))

    def with_formatter(self, formatter: DateFormatter) -> DateSelect:
        """Set the function that formats the final answer for display."""
        return replace(self, formatter=formatter)

    def prompt(self, backend: Backend) -> datetime.date:
        """Run the prompt on ``backend`` and return the selected date."""
        return DateSelectPrompt(self).run(backend)

    def prompt_skippable(self, backend: Backend) -> datetime.date | None:
        """Like :meth:`prompt`, but return None when the user cancels."""
        try:
            return self.prompt(backend)
        except OperationCanceledError:
            return None


def _add_months(date: datetime.date, months: int) -> datetime.date:
    total = date.year * 12 + (date.month - 1) + months
    year, month_index = divmod(total, 12)
    if year < datetime.MINYEAR:
        return datetime.date.min
    if year > datetime.MAXYEAR:
        return datetime.date.max
    month = month_index + 1
    day = min(date.day, calendar.monthrange(year, month)[1])
    return datetime.date(year, month, day)


class DateSelectPrompt(Prompt):
    """Running state of a date prompt."""

    def __init__(self, select: DateSelect) -> None:
        if select.min_date is not None and select.min_date > select.starting_date:
            raise InvalidConfigurationError("Min date can not be greater than starting date")
        if select.max_date is not None and select.max_date < select.starting_date:
            raise InvalidConfigurationError("Max date can not be smaller than starting date")
        super().__init__(select.message)
        self.config = DateSelectConfig(select.min_date, select.max_date, select.week_start)
        self.current_date = select.starting_date
        self.help_message = select.help_message
        self.formatter = select.formatter
        self.validators = tuple(select.validators)
        self._error: Validation | None = None

    def parse_key(self, key: Key) -> DateSelectAction | None:
        return date_action_from_key(key)

    def format_answer(self, answer: datetime.date) -> str:
        return self.formatter(answer)

    def _shift_days(self, days: int) -> ActionResult:
        try:
            new_date = self.current_date + datetime.timedelta(days=days)
        except OverflowError:
            new_date = datetime.date.min if days < 0 else datetime.date.max
        return self._update_date(new_date)

    def _shift_months(self, months: int) -> ActionResult:
        return self._update_date(_add_months(self.current_date, months))

    def _update_date(self, new_date: datetime.date) -> ActionResult:
        if new_date == self.current_date:
            return ActionResult.CLEAN
        if self.config.min_date is not None:
            new_date = max(new_date, self.config.min_date)
        if self.config.max_date is not None:
            new_date = min(new_date, self.config.max_date)
        self.current_date = new_date
        return ActionResult.NEEDS_REDRAW

    def _validate(self) -> Validation:
        for validator in self.validators:
            try:
                result = validator(self.current_date)
            except Exception as exc:
                raise CustomError(exc) from exc
            if not result.is_valid:
                return result
        return Validation.valid()

    def submit(self) -> datetime.date | None:
        result = self._validate()
        if not result.is_valid:
            self._error = result
            return None
        return self.current_date

    def handle(self, action: DateSelectAction) -> ActionResult:
        moves = {
            DateSelectAction.GO_TO_PREV_WEEK: lambda: self._shift_days(-7),
            DateSelectAction.GO_TO_NEXT_WEEK: lambda: self._shift_days(7),
            DateSelectAction.GO_TO_PREV_DAY: lambda: self._shift_days(-1),
            DateSelectAction.GO_TO_NEXT_DAY: lambda: self._shift_days(1),
            DateSelectAction.GO_TO_PREV_YEAR: lambda: self._shift_months(-12),
            DateSelectAction.GO_TO_NEXT_YEAR: lambda: self._shift_months(12),
            DateSelectAction.GO_TO_PREV_MONTH: lambda: self._shift_months(-1),
            DateSelectAction.GO_TO_NEXT_MONTH: lambda: self._shift_months(1),
        }
        return moves[action]()

    def render(self, backend: Backend) -> None:
        if self._error is not None:
            backend.render_error_message(self._error.message)
        backend.render_calendar_prompt(self.message)
        backend.render_calendar(
            self.current_date.month,
            self.current_date.year,
            self.config.week_start,
            datetime.date.today(),
            self.current_date,
            self.config.min_date,
            self.config.max_date,
        )
        if self.help_message is not None:
            backend.render_help_message(self.help_message)