"""Export RecurrenceRule to iCalendar RRULE strings (export-only)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List

from icalrrule.models.constants import (
    RRULE_KEY_VALUE_SEPARATOR,
    RRULE_PART_SEPARATOR,
    RRULE_PROPERTY_NAME,
)
from icalrrule.models.recurrence import RecurrenceRule

logger = logging.getLogger(__name__)


def _token(value: Any) -> str:
    if isinstance(value, int):
        return str(value)
    return value.to_ical()


def _scalar(attr: str) -> Callable[[RecurrenceRule], List[str]]:
    def tokens(rule: RecurrenceRule) -> List[str]:
        value = getattr(rule, attr)
        return [] if value is None else [_token(value)]

    return tokens


def _each(attr: str) -> Callable[[RecurrenceRule], List[str]]:
    def tokens(rule: RecurrenceRule) -> List[str]:
        return [_token(value) for value in getattr(rule, attr) or []]

    return tokens


@dataclass(frozen=True)
class RRulePart:
    """One rule part of the canonical schema: its key and how to flatten the rule into tokens."""

    key: str
    tokens: Callable[[RecurrenceRule], List[str]]


# Canonical output order. List parts emit one KEY=value pair per element
# (BYDAY=MO;BYDAY=WE), not the comma-joined form.
RRULE_SCHEMA: tuple[RRulePart, ...] = (
    RRulePart("FREQ", _scalar("frequency")),
    RRulePart("INTERVAL", _scalar("interval")),
    RRulePart("UNTIL", _scalar("until")),
    RRulePart("COUNT", _scalar("count")),
    RRulePart("BYSECOND", _each("by_seconds")),
    RRulePart("BYMINUTE", _each("by_minutes")),
    RRulePart("BYHOUR", _each("by_hours")),
    RRulePart("BYDAY", _each("by_days")),
    RRulePart("BYMONTHDAY", _each("by_days_of_month")),
    RRulePart("BYYEARDAY", _each("by_days_of_year")),
    RRulePart("BYWEEKNO", _each("by_weeks_of_year")),
    RRulePart("BYMONTH", _each("by_months")),
    RRulePart("BYSETPOS", _each("by_set_pos")),
    RRulePart("WKST", _scalar("start_of_workweek")),
)


def rule_to_rrule(rule: RecurrenceRule) -> str:
    """Convert a rule to an RRULE value (without the leading 'RRULE:' prefix)."""
    parts: List[str] = []
    for part in RRULE_SCHEMA:
        for token in part.tokens(rule):
            parts.append(f"{part.key}{RRULE_KEY_VALUE_SEPARATOR}{token}")
    encoded = RRULE_PART_SEPARATOR.join(parts)
    logger.debug(f"Encoded recurrence rule: {encoded}")
    return encoded


def rule_to_property_line(rule: RecurrenceRule) -> str:
    """Render the full content line, e.g. 'RRULE:FREQ=WEEKLY;BYDAY=MO'."""
    return f"{RRULE_PROPERTY_NAME}:{rule_to_rrule(rule)}"
