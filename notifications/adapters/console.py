"""Console sender adapter.

Mental model refresher:
- This is outbound adapter code.
- A real provider integration would live here; this one writes to stdout.
- Notifiers call it through an injected function and never know which sender
  is underneath.
"""

from __future__ import annotations


def send_via_console(*, to: str, message: str) -> None:
    _ = to
    print(f"SEND: {message}")


def send_nowhere(*, to: str, message: str) -> None:
    """Sender that drops every message. Used by quiet self-checks."""
    _ = (to, message)
    return None
