from __future__ import annotations

import importlib
import logging
from concurrent.futures import Executor
from typing import Optional

from dotenv import load_dotenv

from .config import get_settings_module
from .container import Container, build_container
from .users.repository import AuthRepository

logger = logging.getLogger(__name__)


def create_app(repository: AuthRepository, *, executor: Optional[Executor] = None) -> Container:
    """Load settings for ``APP_ENV`` and wire the auth service around ``repository``."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    auth_config = dict(getattr(settings, "AUTH_CONFIG"))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if bool(getattr(settings, "DEBUG", False)):
        logger.debug(
            "settings=%s image_root=%s workers=%s",
            settings_module,
            auth_config.get("image_root"),
            auth_config.get("worker_threads"),
        )

    return build_container(repository=repository, auth_config=auth_config, executor=executor)
