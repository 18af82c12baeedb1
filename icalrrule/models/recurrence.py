"""Recurrence rule models for icalrrule.

Canonical in-memory representation of an RFC 5545 RRULE value (section 3.3.10).
The model is write-only: it can be rendered to RRULE text, never parsed back from it.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

from icalrrule.models.calendar_date import CalendarDate
from icalrrule.models.constants import BY_RULE_BOUNDS, MAX_WEEK_ORDINAL, MIN_WEEK_ORDINAL


class Frequency(str, Enum):
    """Base repeat unit of a recurrence."""

    SECONDLY = "SECONDLY"
    MINUTELY = "MINUTELY"
    HOURLY = "HOURLY"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    def to_ical(self) -> str:
        return self.value


class DayOfWeek(str, Enum):
    MONDAY = "MO"
    TUESDAY = "TU"
    WEDNESDAY = "WE"
    THURSDAY = "TH"
    FRIDAY = "FR"
    SATURDAY = "SA"
    SUNDAY = "SU"

    def to_ical(self) -> str:
        return self.value


def _range_label(low: int, high: int, signed: bool) -> str:
    if signed:
        return f"{low}..{high} or -{high}..-{low}"
    return f"{low}..{high}"


def _check_in_range(field: str, value: int, low: int, high: int, signed: bool) -> None:
    magnitude = abs(value) if signed else value
    if not low <= magnitude <= high:
        raise PydanticCustomError(
            "out_of_range",
            "{field} value {value} is not within {bound}",
            {"field": field, "value": value, "bound": _range_label(low, high, signed)},
        )


class Day(BaseModel):
    """A weekday, optionally qualified by a signed ordinal.

    `week_of_year=2, day_of_week=MONDAY` is the second Monday of the interval,
    `week_of_year=-1, day_of_week=SUNDAY` the last Sunday.
    """

    model_config = ConfigDict(frozen=True)

    day_of_week: DayOfWeek
    week_of_year: Optional[int] = Field(None, description="Signed ordinal, 1..53 or -53..-1")

    @field_validator("week_of_year")
    @classmethod
    def _validate_week_of_year(cls, v, info):
        if v is not None:
            _check_in_range(info.field_name, v, MIN_WEEK_ORDINAL, MAX_WEEK_ORDINAL, True)
        return v

    def to_ical(self) -> str:
        prefix = str(self.week_of_year) if self.week_of_year is not None else ""
        return f"{prefix}{self.day_of_week.to_ical()}"


class Until(BaseModel):
    """Recurrence bounded by an end date."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["until"] = "until"
    value: CalendarDate

    @field_validator("value", mode="before")
    @classmethod
    def _wrap_plain_date(cls, v):
        if isinstance(v, (date, str)):
            return {"value": v}
        return v


class Count(BaseModel):
    """Recurrence bounded by a number of occurrences."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["count"] = "count"
    value: int = Field(..., ge=1)


RecurrenceBound = Annotated[Union[Until, Count], Field(discriminator="kind")]


class RecurrenceRule(BaseModel):
    """RRULE value: frequency, interval, an until/count bound and the BY-* refinements.

    Notes:
    - Every assignment is validated; a rejected assignment leaves the previous value in place.
    - BY-* lists are checked element by element against their own range only.
    - `until` and `count` share one `bound` slot, so setting one clears the other.
    - Defaults (INTERVAL=1, WKST=MO) are never injected; unset parts are simply not rendered.
    - Cross-part RFC constraints (e.g. BYSETPOS needing another BY-* part) are not enforced.
    """

    model_config = ConfigDict(validate_assignment=True)

    frequency: Frequency
    interval: Optional[int] = Field(None, ge=1, description="Every N units of the frequency")
    bound: Optional[RecurrenceBound] = None

    by_seconds: Optional[List[int]] = None
    by_minutes: Optional[List[int]] = None
    by_hours: Optional[List[int]] = None
    by_days: Optional[List[Day]] = None
    by_days_of_month: Optional[List[int]] = None
    by_days_of_year: Optional[List[int]] = None
    by_weeks_of_year: Optional[List[int]] = None
    by_months: Optional[List[int]] = None
    by_set_pos: Optional[List[int]] = None

    start_of_workweek: Optional[DayOfWeek] = None

    @model_validator(mode="before")
    @classmethod
    def _collect_bound(cls, data):
        if not isinstance(data, dict) or ("until" not in data and "count" not in data):
            return data
        data = dict(data)
        until = data.pop("until", None)
        count = data.pop("count", None)
        if until is not None and count is not None:
            raise PydanticCustomError(
                "bound_conflict", "until and count are mutually exclusive"
            )
        if until is not None:
            data["bound"] = {"kind": "until", "value": until}
        elif count is not None:
            data["bound"] = {"kind": "count", "value": count}
        return data

    @field_validator(*BY_RULE_BOUNDS)
    @classmethod
    def _validate_by_rule(cls, v, info):
        if v is None:
            return None
        low, high, signed = BY_RULE_BOUNDS[info.field_name]
        for value in v:
            _check_in_range(info.field_name, value, low, high, signed)
        return v

    @property
    def until(self) -> Optional[CalendarDate]:
        return self.bound.value if isinstance(self.bound, Until) else None

    @until.setter
    def until(self, value: Union[CalendarDate, date, datetime, None]) -> None:
        if value is not None:
            self.bound = Until(value=value)
        elif isinstance(self.bound, Until):
            self.bound = None

    @property
    def count(self) -> Optional[int]:
        return self.bound.value if isinstance(self.bound, Count) else None

    @count.setter
    def count(self, value: Optional[int]) -> None:
        if value is not None:
            self.bound = Count(value=value)
        elif isinstance(self.bound, Count):
            self.bound = None

    def to_ical(self) -> str:
        from icalrrule.recurrence.rrule_export import rule_to_rrule

        return rule_to_rrule(self)
