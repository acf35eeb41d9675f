"""Application layer: channel wiring, self-checks and the demo run."""

from .demo import print_completion_banner, run_demo
from .factory import ChannelFactory, create_channel, create_channels
from .self_check import SelfCheckError, run_self_checks

__all__ = [
    "ChannelFactory",
    "SelfCheckError",
    "create_channel",
    "create_channels",
    "print_completion_banner",
    "run_demo",
    "run_self_checks",
]
