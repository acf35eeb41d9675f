"""Channel factory: map a `ChannelType` to a fully wired channel.

Mental model refresher:
- Application layer decides which notifier goes with which channel.
- The pairing is fixed policy, not configuration.
- Every call builds a new channel and a new notifier; nothing is cached.
"""

from __future__ import annotations

from typing import Callable, Iterable

from ..domain.channels import EmailChannel, NotificationChannel, PushChannel, SmsChannel
from ..domain.notifiers import DefaultNotifier, SmsNotifier
from ..types import ChannelType, SendFn

ChannelBuilder = Callable[[SendFn | None], NotificationChannel]

DEMO_CHANNEL_ORDER: tuple[ChannelType, ...] = (
    ChannelType.EMAIL,
    ChannelType.SMS,
    ChannelType.PUSH,
)

_BUILDERS: dict[ChannelType, ChannelBuilder] = {
    ChannelType.EMAIL: lambda sender: EmailChannel(DefaultNotifier(sender)),
    ChannelType.PUSH: lambda sender: PushChannel(DefaultNotifier(sender)),
    ChannelType.SMS: lambda sender: SmsChannel(SmsNotifier(sender)),
}

_missing = set(ChannelType) - set(_BUILDERS)
if _missing:
    raise RuntimeError(f"No channel builder registered for: {sorted(t.name for t in _missing)}")


def create_channel(
    channel_type: ChannelType | None,
    *,
    sender: SendFn | None = None,
) -> NotificationChannel:
    """Build a new channel for `channel_type`.

    Raises `ValueError` when the selector is missing or is not a `ChannelType`.
    """
    if channel_type is None:
        raise ValueError("ChannelType is null")
    if not isinstance(channel_type, ChannelType):
        raise ValueError(f"Unsupported channel type: {channel_type!r}")
    return _BUILDERS[channel_type](sender)


def create_channels(
    channel_types: Iterable[ChannelType | None],
    *,
    sender: SendFn | None = None,
) -> list[NotificationChannel]:
    """Build one channel per selector, preserving order."""
    return [create_channel(channel_type, sender=sender) for channel_type in channel_types]


class ChannelFactory:
    """Class-style entrypoint kept for callers that expect `ChannelFactory.create`."""

    create = staticmethod(create_channel)
