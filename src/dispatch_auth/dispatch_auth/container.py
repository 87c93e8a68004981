from __future__ import annotations

from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_IMAGE_ROOT, DEFAULT_SESSION_TOKEN_BYTES, DEFAULT_WORKER_THREADS
from .users.repository import AuthRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    repository: AuthRepository
    executor: Executor
    owns_executor: bool

    auth_service: AuthService

    def close(self) -> None:
        if self.owns_executor:
            self.executor.shutdown(wait=True)


def build_container(
    *,
    repository: AuthRepository,
    auth_config: dict,
    executor: Optional[Executor] = None,
) -> Container:
    owns_executor = executor is None
    if executor is None:
        executor = ThreadPoolExecutor(
            max_workers=int(auth_config.get("worker_threads", DEFAULT_WORKER_THREADS)),
            thread_name_prefix="auth-worker",
        )

    auth_service = AuthService(
        repository,
        executor=executor,
        image_root=str(auth_config.get("image_root", DEFAULT_IMAGE_ROOT)),
        password_hash_method=auth_config.get("password_hash_method"),
        session_token_bytes=int(auth_config.get("session_token_bytes", DEFAULT_SESSION_TOKEN_BYTES)),
    )

    return Container(
        repository=repository,
        executor=executor,
        owns_executor=owns_executor,
        auth_service=auth_service,
    )
