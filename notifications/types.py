"""Shared types for the notification package."""

from __future__ import annotations

from enum import Enum
from typing import Callable


class ChannelType(Enum):
    """Closed set of channel selectors understood by the factory."""

    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"


SendFn = Callable[..., None]
