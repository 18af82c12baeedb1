"""Constants for icalrrule.

This module centralizes the RFC 5545 range bounds and property names used throughout the library.
"""


# Property name used when a rule is embedded in a calendar component
RRULE_PROPERTY_NAME = "RRULE"

# Separators of the RRULE value grammar
RRULE_PART_SEPARATOR = ";"
RRULE_KEY_VALUE_SEPARATOR = "="

# Day-of-week ordinal (e.g. "-1SU", "2MO")
MIN_WEEK_ORDINAL = 1
MAX_WEEK_ORDINAL = 53

# BY-* rule part bounds: field name -> (low, high, signed).
# Signed parts accept the negated range as well (counted from the end of the interval).
BY_RULE_BOUNDS: dict[str, tuple[int, int, bool]] = {
    "by_seconds": (0, 60, False),  # 60 allows for leap seconds
    "by_minutes": (0, 59, False),
    "by_hours": (0, 23, False),
    "by_days_of_month": (1, 31, True),
    "by_days_of_year": (1, 366, True),
    "by_weeks_of_year": (1, 53, True),
    "by_months": (1, 12, False),
    "by_set_pos": (1, 366, True),
}
