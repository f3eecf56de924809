# fundraising/domain/shared/records.py
#
# Read access to "campaign-like" records handed over by collaborators.
#
# Design decisions:
#   - Repositories and HTTP handlers pass either mappings (JSON bodies, DB rows)
#     or plain objects (ORM instances, SimpleNamespace). record_value() reads a
#     field from both without the caller having to normalise first.
#   - Date parsing accepts datetime, date and ISO-8601 strings ("2024-06-20",
#     "2024-06-20 12:00:00", "2024-06-20T12:00:00+00:00"). Naive values are
#     interpreted in the tzinfo supplied by the caller.
from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time, tzinfo


def record_value(record: object, name: str, default: object = None) -> object:
    """Field `name` from a mapping or an object; `default` when absent or None."""
    if isinstance(record, Mapping):
        value = record.get(name, default)
    else:
        value = getattr(record, name, default)
    return default if value is None else value


def parse_datetime(value: object, tz: tzinfo | None = None) -> datetime | None:
    """datetime / date / ISO string -> datetime. None stays None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return None
        try:
            parsed = datetime.fromisoformat(stripped)
        except ValueError as err:
            raise ValueError(f"Invalid date value: {value!r}") from err
    else:
        raise ValueError(f"Invalid date value: {value!r}")

    if parsed.tzinfo is None and tz is not None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed
