"""Data models for icalrrule."""

from icalrrule.models.calendar_date import CalendarDate
from icalrrule.models.recurrence import Count, Day, DayOfWeek, Frequency, RecurrenceRule, Until

__all__ = [
    "CalendarDate",
    "Count",
    "Day",
    "DayOfWeek",
    "Frequency",
    "RecurrenceRule",
    "Until",
]
