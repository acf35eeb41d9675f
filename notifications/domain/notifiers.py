"""Notifier capability: format a message and hand it to a sender.

Mental model refresher:
- A notifier knows how to tag a message and which sender emits it.
- It does not know which channel is using it.
- The sender is injected, so tests and self-checks can swap the console
  adapter for a recording or silent one.
"""

from __future__ import annotations

from abc import ABC

from ..adapters.console import send_via_console
from ..types import SendFn

DEFAULT_PREFIX = "[NOTIFY]"
SMS_PREFIX = "[SMS]"


class Notifier(ABC):
    """Base notifier. Subclasses override `format` to change the tag."""

    def __init__(self, sender: SendFn | None = None) -> None:
        self._sender = sender or send_via_console

    def format(self, message: str) -> str:
        return f"{DEFAULT_PREFIX} {message}"

    def send(self, to: str, message: str) -> None:
        self._sender(to=to, message=message)


class DefaultNotifier(Notifier):
    """Notifier that keeps the generic `[NOTIFY]` tag."""


class SmsNotifier(Notifier):
    def format(self, message: str) -> str:
        return f"{SMS_PREFIX} {message}"
