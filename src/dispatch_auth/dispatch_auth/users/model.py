from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object (no DB access code). ``password_hash`` is never
    the clear-text password.
    """

    user_id: int
    username: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class Dispatcher:
    """Role extension of a dispatcher-role user, one per such user."""

    dispatcher_id: int
    user_id: int
    area_id: int


@dataclass(frozen=True)
class Session:
    session_token: str
    user_id: int
    is_valid: bool = True
