"""
Data models module.

Defines documents, interest profile entries and the engine's result records.
"""

from blogmon.models.document import Document, DocumentId
from blogmon.models.interest import Interest
from blogmon.models.records import ScoreRecord, Link, Trend

__all__ = [
    "Document",
    "DocumentId",
    "Interest",
    "ScoreRecord",
    "Link",
    "Trend",
]
