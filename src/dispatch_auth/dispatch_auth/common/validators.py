from __future__ import annotations

from ..core.exceptions import BadRequestError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise BadRequestError(f"{field_name} must not be empty")
    return value


def require_positive(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise BadRequestError(f"{field_name} must be a positive integer")
    return value


def require_at_most(value: int, field_name: str, limit: int) -> int:
    if value > limit:
        raise BadRequestError(f"{field_name} must be at most {limit}")
    return value
