"""
Value Normalizer - Encodes primitive values the way the webservice expects

- Booleans are sent as "1" / "0"
- Datetimes are sent SQL-style ("2024-05-01 10:00:00"), never ISO "T"-separated
"""

import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional

ISO_DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$")

SQL_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
SQL_DATE_FORMAT = "%Y-%m-%d"


def normalize_value(value: Any, date_only: bool = False) -> Any:
    """
    Encode a single value

    Args:
        value: bool, datetime, date, str, number or nested structure
        date_only: Keep only the date part (e.g. customer birthday)

    Returns:
        Encoded value; anything unrecognized is returned unchanged
    """
    # bool must be checked before anything numeric
    if isinstance(value, bool):
        return "1" if value else "0"

    if isinstance(value, datetime):
        return value.strftime(SQL_DATE_FORMAT if date_only else SQL_DATETIME_FORMAT)

    if isinstance(value, date):
        return value.strftime(SQL_DATE_FORMAT)

    if isinstance(value, str):
        if date_only and "T" in value:
            return value.split("T")[0]
        if ISO_DATETIME_PATTERN.fullmatch(value):
            return value.replace("T", " ", 1)

    return value


def normalize_payload(
    payload: Dict[str, Any],
    date_only_fields: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """
    Normalize every value of a payload in place

    Idempotent: normalized values no longer match any rule.

    Returns:
        The same payload, for chaining
    """
    date_only_fields = set(date_only_fields or ())

    for key in list(payload.keys()):
        payload[key] = normalize_value(payload[key], date_only=key in date_only_fields)

    return payload
