"""Data models for the news format export pipeline."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger('news_format_exporter')


class ExportState(Enum):
    """Lifecycle of a single generation pass."""
    BUILDING = "building"
    DONE = "done"


class AnchorPosition(Enum):
    """Side of the anchor target an aligned component is attached to."""
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class ExportContent:
    """Represents an article to export: identity, title and HTML body."""

    id: str
    title: Optional[str]
    content: str  # HTML content

    def to_dict(self) -> Dict[str, Any]:
        """Serialize content to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content
        }


@dataclass(frozen=True)
class Fragment:
    """A piece of split markup tagged with the element name that builds it."""

    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'value': self.value}


@dataclass
class ExportResult:
    """Outcome of a generation pass: a complete document or an error, never both."""

    document: Optional[Dict[str, Any]] = None
    bundles: List[str] = field(default_factory=list)
    error: Optional[Exception] = None

    def __post_init__(self) -> None:
        """Drop any payload attached to a failed result."""
        if self.error is not None:
            self.document = None
            self.bundles = []

    @property
    def success(self) -> bool:
        return self.error is None and self.document is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            'success': self.success,
            'document': self.document,
            'bundles': list(self.bundles),
            'error': str(self.error) if self.error else None
        }


__all__ = [
    'ExportState',
    'AnchorPosition',
    'ExportContent',
    'Fragment',
    'ExportResult'
]
