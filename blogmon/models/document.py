"""
Core document model for Blogmon.

Defines the Document dataclass representing a single blog post handed to the
engine by a document source. A Document is treated as immutable for the
duration of a scoring pass.
"""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Optional, Union

DocumentId = Union[int, str]


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a timestamp for comparison.

    Aware values are converted to UTC and stripped of tzinfo; naive values are
    taken to be UTC already and returned unchanged.
    """
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class Document:
    """
    Represents a single blog post.

    This is the structure that flows through the engine:
    source -> tokenizer/topics -> scoring -> links/trends.

    Attributes:
        id: Stable, opaque identifier (int or str).
        title: Post title.
        content: Cleaned text (HTML stripped). May be empty.
        raw_content: Raw text, used when no cleaned text exists.
        url: Canonical URL, used for community-signal lookups.
        source_name: Label of the blog/feed the post came from.
        published_at: Publication time, naive (taken as UTC) or aware.
            None means "now" for recency purposes.
        word_count: Word count of the cleaned content (0 if unknown).
    """

    id: DocumentId
    title: str
    content: str = ""
    raw_content: str = ""
    url: str = ""
    source_name: str = ""
    published_at: Optional[datetime] = None
    word_count: int = 0

    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Validate that required fields are present and valid.

        Raises:
            ValueError: If validation fails.
        """
        errors = []

        if self.id is None or (isinstance(self.id, str) and not self.id.strip()):
            errors.append("id is required and cannot be empty")

        if not self.title or not self.title.strip():
            errors.append("title is required and cannot be empty")

        if self.url and not (self.url.startswith("http://") or self.url.startswith("https://")):
            errors.append(f"url must start with http:// or https://, got {self.url}")

        if self.word_count < 0:
            errors.append(f"word_count cannot be negative, got {self.word_count}")

        if errors:
            raise ValueError(f"Document validation failed: {'; '.join(errors)}")

    @property
    def text(self) -> str:
        """
        Text used for scoring: cleaned content, else raw content, else the title.
        """
        return self.content or self.raw_content or self.title

    @property
    def full_text(self) -> str:
        """Title and body together, used for topic extraction."""
        return f"{self.title} {self.content or self.raw_content}"

    def timestamp(self, now: Optional[datetime] = None) -> datetime:
        """
        Publication time as naive UTC, falling back to `now` when the post has no date.

        Args:
            now: Current time (for testing). Defaults to utc_now().
        """
        if self.published_at is not None:
            return as_naive_utc(self.published_at)
        return as_naive_utc(now) if now is not None else utc_now()

    def to_dict(self) -> dict:
        """
        Convert Document to a plain dictionary for storage/serialization.

        Datetime fields are converted to ISO format strings.
        """
        data = asdict(self)
        if self.published_at:
            data["published_at"] = self.published_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Document":
        """
        Create a Document from a dictionary (e.g., from storage).

        Handles conversion of ISO format strings back to datetime objects.
        """
        data = data.copy()

        if data.get("published_at") and isinstance(data["published_at"], str):
            data["published_at"] = datetime.fromisoformat(data["published_at"])

        return cls(**data)

    def __str__(self) -> str:
        return f"[{self.source_name or 'unknown'}] {self.title}"

    def __repr__(self) -> str:
        return f"Document(id={self.id!r}, title={self.title!r}, source_name={self.source_name!r})"
