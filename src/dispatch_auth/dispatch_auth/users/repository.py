from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import Dispatcher, Session, User


class AuthRepository(Protocol):
    """Repository interface for users, dispatchers, sessions and profile images.

    Note (DIP): the service layer depends on this interface, never on a concrete
    database. Implementations raise ``RepositoryError`` when storage fails and
    ``DuplicateRecordError`` when a unique constraint (username) is violated.
    """

    async def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        """Insert a user and return its new id."""

        raise NotImplementedError

    async def find_user_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    async def find_user_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    async def create_dispatcher(self, *, user_id: int, area_id: int) -> int:
        """Insert the dispatcher row for ``user_id`` and return its new id."""

        raise NotImplementedError

    async def find_dispatcher_by_id(self, dispatcher_id: int) -> Optional[Dispatcher]:
        raise NotImplementedError

    async def find_dispatcher_by_user_id(self, user_id: int) -> Optional[Dispatcher]:
        raise NotImplementedError

    async def find_profile_image_name_by_user_id(self, user_id: int) -> Optional[str]:
        raise NotImplementedError

    async def create_session(self, *, user_id: int, session_token: str) -> None:
        raise NotImplementedError

    async def find_session_by_token(self, session_token: str) -> Optional[Session]:
        raise NotImplementedError

    async def delete_session(self, session_token: str) -> None:
        raise NotImplementedError
