"""
Exception types for the Blogmon engine.

Empty or malformed input never raises: scorers return sentinel values instead.
These exceptions cover configuration problems, external lookups and storage.
"""

from typing import List, Optional


class BlogmonError(Exception):
    """Base class for all engine errors."""


class ConfigError(BlogmonError):
    """
    Raised when settings fail validation at load time.

    Attributes:
        errors: Every validation problem found (not just the first).
    """

    def __init__(self, errors: List[str], path: Optional[str] = None):
        self.errors = list(errors)
        self.path = path
        location = f" in {path}" if path else ""
        super().__init__(f"Invalid configuration{location}: {'; '.join(self.errors)}")


class SignalLookupError(BlogmonError):
    """Raised when the community-signal provider cannot answer (network, status, decode)."""


class DocumentNotFoundError(BlogmonError):
    """Raised when a document id is unknown to the document source."""

    def __init__(self, document_id):
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id!r}")
