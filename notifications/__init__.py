"""Notification channels: notifiers, channel variants and their factory."""

from .channels import (
    DEMO_CHANNEL_ORDER,
    ChannelFactory,
    ChannelType,
    DefaultNotifier,
    EmailChannel,
    NotificationChannel,
    Notifier,
    PushChannel,
    SelfCheckError,
    SmsChannel,
    SmsNotifier,
    create_channel,
    create_channels,
    print_completion_banner,
    run_demo,
    run_self_checks,
    send_nowhere,
    send_via_console,
)

__all__ = [
    "DEMO_CHANNEL_ORDER",
    "ChannelFactory",
    "ChannelType",
    "DefaultNotifier",
    "EmailChannel",
    "NotificationChannel",
    "Notifier",
    "PushChannel",
    "SelfCheckError",
    "SmsChannel",
    "SmsNotifier",
    "create_channel",
    "create_channels",
    "print_completion_banner",
    "run_demo",
    "run_self_checks",
    "send_nowhere",
    "send_via_console",
]
