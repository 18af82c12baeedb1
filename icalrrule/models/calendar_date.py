"""Date bound value used for the UNTIL rule part."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CalendarDate(BaseModel):
    """A DATE or DATE-TIME value as rendered inside iCalendar properties.

    Notes:
    - `ignore_time` must match the flag of the event's DTSTART; callers are responsible for that.
    - When `ignore_time` is not given it follows the value type (plain `date` -> date-only).
    - Aware datetimes are rendered in UTC with a trailing 'Z'; naive ones as floating local time.
    """

    model_config = ConfigDict(frozen=True)

    value: Union[date, datetime]
    ignore_time: Optional[bool] = Field(
        None, description="Render only the date part (None: derive from value type)"
    )

    @field_validator("value", mode="before")
    @classmethod
    def _parse_iso_string(cls, v):
        # Keep "2024-05-01" a date and "2024-05-01T10:00:00" a datetime.
        if isinstance(v, str):
            text = v.strip()
            return datetime.fromisoformat(text) if "T" in text else date.fromisoformat(text)
        return v

    @property
    def date_only(self) -> bool:
        if self.ignore_time is not None:
            return self.ignore_time
        return not isinstance(self.value, datetime)

    def to_ical(self) -> str:
        if self.date_only:
            return self.value.strftime("%Y%m%d")
        value = self.value if isinstance(self.value, datetime) else datetime.combine(self.value, time())
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        return value.strftime("%Y%m%dT%H%M%S")
