"""Adapter layer: outbound sender implementations."""

from .console import send_nowhere, send_via_console

__all__ = [
    "send_nowhere",
    "send_via_console",
]
