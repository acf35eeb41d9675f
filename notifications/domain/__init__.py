"""Domain layer: notifiers and the channels that use them."""

from .channels import EmailChannel, NotificationChannel, PushChannel, SmsChannel
from .notifiers import DefaultNotifier, Notifier, SmsNotifier

__all__ = [
    "DefaultNotifier",
    "EmailChannel",
    "NotificationChannel",
    "Notifier",
    "PushChannel",
    "SmsChannel",
    "SmsNotifier",
]
