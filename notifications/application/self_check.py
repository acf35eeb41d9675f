"""Startup self-checks for the channel wiring.

The checks mirror the unit tests: they run once before the demo so a broken
wiring aborts the run instead of printing misleading output.
"""

from __future__ import annotations

from ..adapters.console import send_nowhere
from ..domain.channels import EmailChannel, PushChannel, SmsChannel
from ..domain.notifiers import DefaultNotifier, SmsNotifier
from ..types import ChannelType
from .factory import DEMO_CHANNEL_ORDER, create_channel, create_channels

_EXPECTED_CLASSES = {
    ChannelType.EMAIL: EmailChannel,
    ChannelType.SMS: SmsChannel,
    ChannelType.PUSH: PushChannel,
}


class SelfCheckError(RuntimeError):
    """Raised when one of the startup self-checks fails."""


def run_self_checks() -> None:
    """Run every check in order; raise `SelfCheckError` on the first failure."""
    for channel_type, expected_class in _EXPECTED_CLASSES.items():
        channel = create_channel(channel_type, sender=send_nowhere)
        _check(
            isinstance(channel, expected_class),
            f"factory returned {type(channel).__name__} for {channel_type.name}, "
            f"expected {expected_class.__name__}",
        )

    channels = create_channels(DEMO_CHANNEL_ORDER, sender=send_nowhere)
    _check(len(channels) == 3, f"expected 3 channels, got {len(channels)}")

    default_formatted = DefaultNotifier(send_nowhere).format("test")
    _check(
        default_formatted.startswith("[NOTIFY]"),
        f"DefaultNotifier.format produced {default_formatted!r}",
    )

    sms_formatted = SmsNotifier(send_nowhere).format("test")
    _check(
        sms_formatted.startswith("[SMS]"),
        f"SmsNotifier.format produced {sms_formatted!r}",
    )


def _check(condition: bool, description: str) -> None:
    if not condition:
        raise SelfCheckError(description)
