"""Shared validation utilities"""

from datetime import datetime, timezone

from ..exceptions import InvalidArgumentError


def validate_resource_id(value: str, label: str = "product ID") -> int:
    """
    Parse a path identifier into a positive integer.

    Args:
        value: Raw path segment
        label: Name used in the error message

    Returns:
        The identifier as an int

    Raises:
        InvalidArgumentError: If the value is not a positive integer
    """
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Invalid {label} format.") from None

    if parsed <= 0:
        raise InvalidArgumentError(f"Invalid {label} format.")
    return parsed


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with upstream timestamps"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
