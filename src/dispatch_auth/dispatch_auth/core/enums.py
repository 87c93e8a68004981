from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role stored on the user row."""

    USER = "user"
    DISPATCHER = "dispatcher"
