"""Component document exporter.

Turns article HTML into an ordered list of typed components plus the text
styles and layouts they reference, and the list of assets (bundles) that
must accompany the document.

Package Structure:
- exporter: Exporter, the pass driver (classify, build, anchor, assemble)
- component_factory: ordered variant dispatch with children fallback
- splitter: splitting of paragraphs around embedded media
- registry: name to definition store for styles and layouts
- context: per-pass state (settings snapshot, registries, bundles)
- components: one builder per component variant

Basic Usage:
    >>> from exporter import Exporter
    >>> from models import ExportContent
    >>> result = Exporter(ExportContent(id='1', title=None, content='<p>Hi</p>')).export()
    >>> result.document['components'][0]['text']
    'Hi'
"""

from .component_factory import ComponentFactory, DEFAULT_COMPONENTS
from .context import GenerationContext
from .exporter import DOCUMENT_VERSION, Exporter, export_content
from .registry import DefinitionRegistry
from .splitter import MarkupScanner, split_non_markdownable

__all__ = [
    'ComponentFactory',
    'DEFAULT_COMPONENTS',
    'GenerationContext',
    'DOCUMENT_VERSION',
    'Exporter',
    'export_content',
    'DefinitionRegistry',
    'MarkupScanner',
    'split_non_markdownable'
]
