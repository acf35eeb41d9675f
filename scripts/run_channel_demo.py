#!/usr/bin/env python3
"""Run the channel self-checks, then notify one recipient on every channel."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running this file directly from repository root.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from notifications.application.demo import (  # noqa: E402
    DEFAULT_MESSAGE,
    DEFAULT_RECIPIENT,
    print_completion_banner,
    run_demo,
)
from notifications.application.self_check import SelfCheckError, run_self_checks  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        run_self_checks()
    except SelfCheckError as exc:
        print(f"[SELF-CHECK FAILED] {exc}")
        return 1

    run_demo(to=args.to, message=args.message)
    print_completion_banner()
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send one message through the EMAIL, SMS and PUSH channels."
    )
    parser.add_argument(
        "--to",
        default=DEFAULT_RECIPIENT,
        help=f"Recipient passed to every channel (default: {DEFAULT_RECIPIENT}).",
    )
    parser.add_argument(
        "--message",
        default=DEFAULT_MESSAGE,
        help=f"Message body passed to every channel (default: {DEFAULT_MESSAGE}).",
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
