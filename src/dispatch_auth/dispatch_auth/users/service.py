from __future__ import annotations

import asyncio
import functools
import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar, Union

from ..common.credentials import generate_session_token, hash_password, verify_password
from ..common.images import render_resized
from ..common.validators import require_at_most, require_non_empty, require_positive
from ..core.constants import (
    DEFAULT_IMAGE_ROOT,
    DEFAULT_SESSION_TOKEN_BYTES,
    MAX_PROFILE_IMAGE_DIMENSION,
    PROFILE_IMAGE_FORMAT,
)
from ..core.enums import Role
from ..core.exceptions import (
    BadRequestError,
    ConflictError,
    DuplicateRecordError,
    ImageProcessingError,
    InternalServerError,
    NotFoundError,
    RepositoryError,
    UnauthorizedError,
)
from .repository import AuthRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Same message for unknown username and wrong password.
INVALID_CREDENTIALS = "invalid username or password"


@dataclass(frozen=True)
class LoginResponse:
    """What the HTTP layer returns after register/login.

    ``dispatcher_id`` and ``area_id`` are set only for dispatcher accounts.
    """

    user_id: int
    username: str
    session_token: str
    role: Role
    dispatcher_id: Optional[int] = None
    area_id: Optional[int] = None


def storage_errors_as_internal(method):
    """Re-raise ``RepositoryError`` escaping a use case as ``InternalServerError``."""

    @functools.wraps(method)
    async def wrapper(self, *args, **kwargs):
        try:
            return await method(self, *args, **kwargs)
        except RepositoryError as e:
            logger.exception("Storage failure during %s", method.__name__)
            raise InternalServerError("storage failure") from e

    return wrapper


class AuthService:
    """Use case: account registration, login/logout, sessions, profile images.

    Runs on the event loop; password hashing/verification and image work are
    handed to ``executor`` (the loop's default executor when ``None``).
    """

    def __init__(
        self,
        users: AuthRepository,
        *,
        executor: Optional[Executor] = None,
        image_root: Union[str, Path] = DEFAULT_IMAGE_ROOT,
        password_hash_method: Optional[str] = None,
        session_token_bytes: int = DEFAULT_SESSION_TOKEN_BYTES,
    ):
        self._users = users
        self._executor = executor
        self._image_root = Path(image_root)
        self._password_hash_method = password_hash_method
        self._session_token_bytes = session_token_bytes

    async def _run_blocking(self, func: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, functools.partial(func, *args))

    def _new_session_token(self) -> str:
        return generate_session_token(self._session_token_bytes)

    @storage_errors_as_internal
    async def register(
        self,
        username: str,
        password: str,
        role: Union[Role, str],
        area_id: Optional[int] = None,
    ) -> LoginResponse:
        try:
            role = Role(role)
        except ValueError:
            raise BadRequestError(f"unknown role: {role!r}") from None
        require_non_empty(username, "username")
        require_non_empty(password, "password")
        if role == Role.DISPATCHER and area_id is None:
            raise BadRequestError("area_id is required for dispatcher accounts")

        existing, password_hash = await asyncio.gather(
            self._users.find_user_by_username(username),
            self._run_blocking(hash_password, password, self._password_hash_method),
        )
        if existing is not None:
            raise ConflictError(f"username {username!r} is already taken")

        try:
            user_id = await self._users.create_user(username=username, password_hash=password_hash, role=role)
        except DuplicateRecordError as e:
            # Lost the race against a concurrent registration of the same name.
            raise ConflictError(f"username {username!r} is already taken") from e

        session_token = self._new_session_token()
        await self._users.create_session(user_id=user_id, session_token=session_token)

        dispatcher_id = None
        if role == Role.DISPATCHER:
            dispatcher_id = await self._users.create_dispatcher(user_id=user_id, area_id=area_id)
        else:
            area_id = None

        logger.info("Registered %s user %s (id=%s)", role.value, username, user_id)
        return LoginResponse(
            user_id=user_id,
            username=username,
            session_token=session_token,
            role=role,
            dispatcher_id=dispatcher_id,
            area_id=area_id,
        )

    @storage_errors_as_internal
    async def login(self, username: str, password: str) -> LoginResponse:
        user = await self._users.find_user_by_username(username)
        if user is None:
            logger.info("Login rejected for %r", username)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        ok = await self._run_blocking(verify_password, user.password_hash, password)
        if not ok:
            logger.info("Login rejected for %r", username)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        session_token = self._new_session_token()
        await self._users.create_session(user_id=user.user_id, session_token=session_token)

        dispatcher_id = area_id = None
        if user.role == Role.DISPATCHER:
            dispatcher = await self._users.find_dispatcher_by_user_id(user.user_id)
            if dispatcher is None:
                logger.error("Dispatcher user %s has no dispatcher record", user.user_id)
                raise InternalServerError("dispatcher record missing")
            dispatcher_id, area_id = dispatcher.dispatcher_id, dispatcher.area_id

        logger.info("Login: %s (id=%s)", user.username, user.user_id)
        return LoginResponse(
            user_id=user.user_id,
            username=user.username,
            session_token=session_token,
            role=user.role,
            dispatcher_id=dispatcher_id,
            area_id=area_id,
        )

    @storage_errors_as_internal
    async def logout(self, session_token: str) -> None:
        await self._users.delete_session(session_token)

    @storage_errors_as_internal
    async def validate(self, session_token: str) -> bool:
        """Return the stored validity flag; an unknown token is ``NotFoundError``, not ``False``."""
        session = await self._users.find_session_by_token(session_token)
        if session is None:
            raise NotFoundError("session not found")
        return session.is_valid

    async def get_resized_profile_image(self, user_id: int, width: int, height: int) -> bytes:
        """PNG bytes of the user's profile image resized to exactly ``width`` x ``height``.

        A missing user and a user without an image both raise ``NotFoundError``.
        """
        require_positive(width, "width")
        require_positive(height, "height")
        require_at_most(width, "width", MAX_PROFILE_IMAGE_DIMENSION)
        require_at_most(height, "height", MAX_PROFILE_IMAGE_DIMENSION)

        try:
            filename = await self._users.find_profile_image_name_by_user_id(user_id)
        except RepositoryError as e:
            logger.warning("Profile image lookup failed for user %s: %s", user_id, e)
            raise NotFoundError("profile image not found") from e
        if not filename:
            raise NotFoundError("profile image not found")

        if Path(filename).name != filename or filename in (".", ".."):
            logger.error("Refusing profile image name %r for user %s", filename, user_id)
            raise InternalServerError("invalid profile image reference")

        path = self._image_root / filename
        try:
            return await self._run_blocking(render_resized, path, width, height, PROFILE_IMAGE_FORMAT)
        except ImageProcessingError as e:
            logger.error("Failed to resize profile image for user %s: %s", user_id, e)
            raise InternalServerError("failed to process profile image") from e
