"""Compatibility facade for the notification channel API.

Module layout by abstraction layer:
- adapters: outbound senders (console)
- domain: notifiers and channel variants
- application: factory, self-checks and the demo run
"""

from .adapters.console import send_nowhere, send_via_console
from .application.demo import print_completion_banner, run_demo
from .application.factory import (
    DEMO_CHANNEL_ORDER,
    ChannelFactory,
    create_channel,
    create_channels,
)
from .application.self_check import SelfCheckError, run_self_checks
from .domain.channels import EmailChannel, NotificationChannel, PushChannel, SmsChannel
from .domain.notifiers import DefaultNotifier, Notifier, SmsNotifier
from .types import ChannelType

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
