"""Notification channel variants.

Each channel owns one notifier for its whole lifetime. A channel only decides
its own name and the label that goes in front of the recipient; formatting and
sending belong to the notifier.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .notifiers import Notifier


class NotificationChannel(ABC):
    label: str

    def __init__(self, notifier: Notifier) -> None:
        self._notifier = notifier

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @abstractmethod
    def name(self) -> str:
        """Return the channel kind, matching the `ChannelType` member name."""

    def notify_user(self, to: str, message: str) -> None:
        """Compose, format and send one message to `to`."""
        text = self._notifier.format(f"{self.label} → {to}: {message}")
        self._deliver(to, text)

    def _deliver(self, to: str, message: str) -> None:
        self._notifier.send(to, message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(notifier={type(self._notifier).__name__})"


class EmailChannel(NotificationChannel):
    label = "Email"

    def name(self) -> str:
        return "EMAIL"


class SmsChannel(NotificationChannel):
    label = "SMS"

    def name(self) -> str:
        return "SMS"


class PushChannel(NotificationChannel):
    label = "Push"

    def name(self) -> str:
        return "PUSH"
