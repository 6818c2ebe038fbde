"""
Client-side request errors.

Both map to HTTP 400 with a plain-text body (handlers live in `api/main.py`).
Store failures are `core.db.StoreError`.
"""

from __future__ import annotations

# Postgres `integer` range; larger values are rejected by the driver.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


class MissingParameter(ValueError):
    """A required query parameter was absent or blank."""


class InvalidParameter(ValueError):
    """A query parameter was present but could not be interpreted."""


def require(value: str | None, message: str) -> str:
    """
    Reject an absent or whitespace-only parameter; otherwise return it unchanged.
    """
    if value is None or not value.strip():
        raise MissingParameter(message)
    return value


def _to_int(value: str, name: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise InvalidParameter(f"{name} must be an integer") from exc
    if not INT4_MIN <= parsed <= INT4_MAX:
        raise InvalidParameter(f"{name} is out of range")
    return parsed


def optional_int(value: str | None, name: str) -> int | None:
    """
    Parse an optional integer parameter. Blank counts as absent.
    """
    value = (value or "").strip()
    if not value:
        return None
    return _to_int(value, name)


def required_int(value: str | None, name: str, message: str) -> int:
    return _to_int(require(value, message).strip(), name)
