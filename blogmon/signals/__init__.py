"""
Community signals module.

Providers that look up how much attention a post received on community platforms.
"""

from blogmon.signals.base import CommunitySignal, CommunitySignalProvider
from blogmon.signals.hackernews import HackerNewsSignalProvider

__all__ = [
    "CommunitySignal",
    "CommunitySignalProvider",
    "HackerNewsSignalProvider",
]
