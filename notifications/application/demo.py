"""Demonstration sequence: one notification per channel, then a banner."""

from __future__ import annotations

from ..domain.channels import NotificationChannel
from ..types import SendFn
from .factory import DEMO_CHANNEL_ORDER, create_channels

DEFAULT_RECIPIENT = "user@example.com"
DEFAULT_MESSAGE = "Hello!"
COMPLETION_BANNER = "✔ All requirements were met by a single program"


def run_demo(
    *,
    to: str = DEFAULT_RECIPIENT,
    message: str = DEFAULT_MESSAGE,
    sender: SendFn | None = None,
) -> list[NotificationChannel]:
    """Notify `to` through EMAIL, SMS and PUSH in that order."""
    channels = create_channels(DEMO_CHANNEL_ORDER, sender=sender)
    for channel in channels:
        channel.notify_user(to, message)
    return channels


def print_completion_banner() -> None:
    print("")
    print(COMPLETION_BANNER)
