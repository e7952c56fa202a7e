"""
Base community-signal abstraction for Blogmon.

A provider answers one question: given a canonical post URL, how much
attention did it get on some community platform?
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class CommunitySignal:
    """
    Popularity counts for one post on a community platform.

    Attributes:
        points: Upvotes/points.
        comments: Number of comments.
        secondary: Score from a secondary platform (0 if unused).
        url: URL the platform associates with the post.
        object_id: Platform identifier of the matching submission.
        title: Submission title.
    """

    points: int = 0
    comments: int = 0
    secondary: int = 0
    url: str = ""
    object_id: str = ""
    title: str = ""


class CommunitySignalProvider(ABC):
    """
    Abstract base class for community-signal lookups.

    Implementations must:
    - Bound every network call with a timeout
    - Return None when the post is simply not known to the platform
    - Raise SignalLookupError on failures (network, status, decoding), so the
      caller can tell "not found" from "could not ask"
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the unique name identifier for this provider (e.g. "hackernews").

        Used for logging.
        """
        pass

    @abstractmethod
    def search_by_url(self, url: str) -> Optional[CommunitySignal]:
        """
        Look up the signal for a post URL.

        Args:
            url: Canonical post URL.

        Returns:
            CommunitySignal if found, None otherwise.

        Raises:
            SignalLookupError: If the lookup failed.
        """
        pass

    def __str__(self) -> str:
        return f"CommunitySignalProvider({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
