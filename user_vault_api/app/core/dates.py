"""
Calendar helpers for dates of birth.

Dates travel over the wire and sit in the store as ``YYYY-MM-DD``
strings.  ``parse_dob`` is strict: exactly four, two and two ASCII
digits that must also form a real calendar date, so ``2025-1-01`` and
``2025-02-30`` are both rejected.
"""

import re
from datetime import date, datetime

DOB_FORMAT = "%Y-%m-%d"

_DOB_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_dob(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a ``date``.

    Raises ``ValueError`` for malformed strings and for impossible
    dates alike.
    """
    if not isinstance(text, str) or not _DOB_PATTERN.fullmatch(text):
        raise ValueError(f"date of birth must use the YYYY-MM-DD format: {text!r}")
    return datetime.strptime(text, DOB_FORMAT).date()


def format_dob(value: date) -> str:
    # isoformat zero‑pads years below 1000, strftime("%Y") does not on every platform.
    return value.isoformat()


def calculate_age(dob: date, as_of: date) -> int:
    """Return the number of whole years between ``dob`` and ``as_of``.

    One year is subtracted while the birthday has not yet occurred in
    ``as_of``'s year, comparing month first and day only within the
    same month.  The result never drops below zero, which covers birth
    dates in the future.  A 29 February birthday therefore counts on
    1 March in non‑leap years.
    """
    age = as_of.year - dob.year
    if (as_of.month, as_of.day) < (dob.month, dob.day):
        age -= 1
    return max(age, 0)
