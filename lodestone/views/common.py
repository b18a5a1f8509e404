"""Value conversions shared by several views."""

from datetime import datetime, timezone

from lodestone.core.extraction import as_optional_int


def from_epoch(seconds: int | None) -> datetime | None:
    """Convert the epoch seconds embedded in Lodestone date scripts to an aware datetime.

    Epochs the platform cannot represent read as absent.
    """
    if seconds is None:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def grouped_int(raw: str | None) -> int | None:
    """Read a number shown with thousands separators ('1,234,567'); None for '-' placeholders."""
    if raw is None:
        return None
    return as_optional_int(raw.replace(',', ''))
