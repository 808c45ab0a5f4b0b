import datetime
from typing import Optional, Tuple

# Fixed English names so parsing does not depend on the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_ABBREVIATIONS = tuple(name[:3].lower() for name in MONTH_NAMES)


def month_index(month: Optional[str]) -> int:
    """
    Resolve a month name to a zero-based index.

    Accepts full names and three-letter prefixes in any case, or a month
    number 1-12. Anything else falls back to January (0).
    """
    if not month:
        return 0
    text = month.strip().lower()
    if text.isdigit():
        number = int(text)
        return number - 1 if 1 <= number <= 12 else 0
    prefix = text[:3]
    if prefix in _ABBREVIATIONS:
        return _ABBREVIATIONS.index(prefix)
    return 0


def month_interval(month: Optional[str], year: int = 2022) -> Tuple[datetime.datetime, datetime.datetime]:
    """Return [first day of month, first day of next month) for the given month name."""
    index = month_index(month)
    start = datetime.datetime(year, index + 1, 1)
    if index == 11:
        end = datetime.datetime(year + 1, 1, 1)
    else:
        end = datetime.datetime(year, index + 2, 1)
    return start, end
