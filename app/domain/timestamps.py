"""Shared timestamp rendering helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def domain_format_timestamp(moment: datetime) -> str:
    """Render one instant as ISO-8601 UTC with millisecond precision.

    Args:
        moment: Timezone-aware instant.

    Returns:
        str: Timestamp such as `2026-01-31T12:00:00.000Z`.

    Raises:
        ValueError: Raised when `moment` is naive.
    """

    if moment.tzinfo is None:
        raise ValueError("moment must be timezone-aware")
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
