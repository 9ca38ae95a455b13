"""Document assembler: drives one generation pass from article HTML to document JSON."""

import json
import logging
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from exceptions import ExporterError
from models import AnchorPosition, ExportContent, ExportResult, ExportState
from settings import Settings

from .component_factory import ComponentFactory
from .components import Component, Title
from .context import GenerationContext

logger = logging.getLogger('news_format_exporter.exporter')


DOCUMENT_VERSION = '1.0'


class Exporter:
    """
    Exports one article to the component document format.

    The exporter starts in ``ExportState.BUILDING`` and moves to
    ``ExportState.DONE`` only once every node has been classified and built.
    Any ``ExporterError`` aborts the pass: the exporter stays in BUILDING and
    no document is kept.
    """

    def __init__(
        self,
        content: ExportContent,
        settings: Optional[Settings] = None,
        factory: Optional[ComponentFactory] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.content = content
        self.settings = settings if settings is not None else Settings()
        self.factory = factory if factory is not None else ComponentFactory.default()
        self.logger = logger or logging.getLogger('news_format_exporter.exporter')

        self.state = ExportState.BUILDING
        self.context: Optional[GenerationContext] = None
        self._document: Optional[Dict[str, Any]] = None
        self._bundles: List[str] = []

    def generate(self) -> Dict[str, Any]:
        """
        Run the generation pass.

        Returns:
            The document payload

        Raises:
            ExporterError: If any node cannot be split, built or converted
        """
        if self.state is ExportState.DONE:
            return self._document

        self.logger.info(f"Generating document for article {self.content.id}")

        context = GenerationContext(self.settings)
        self.context = context

        try:
            components = self._build_components(context)
            self._anchor_components(components)
            document = self._build_document(components, context)
        except ExporterError as e:
            self.logger.error(f"Generation failed for article {self.content.id}: {str(e)}")
            raise

        self._document = document
        self._bundles = context.bundles
        self.state = ExportState.DONE

        self.logger.info(
            f"Article {self.content.id} generated: {len(document['components'])} components, "
            f"{len(self._bundles)} bundles"
        )
        return document

    def export(self) -> ExportResult:
        """Run the pass and return either the document and bundles or the error."""
        try:
            document = self.generate()
        except ExporterError as e:
            return ExportResult(error=e)
        return ExportResult(document=document, bundles=self.get_bundles())

    def get_document(self) -> Dict[str, Any]:
        self._ensure_done()
        return self._document

    def get_json(self) -> str:
        return json.dumps(self.get_document(), ensure_ascii=False)

    def get_bundles(self) -> List[str]:
        self._ensure_done()
        return list(self._bundles)

    def _ensure_done(self) -> None:
        if self.state is not ExportState.DONE:
            raise RuntimeError("Document has not been generated yet")

    def _build_components(self, context: GenerationContext) -> List[Component]:
        """Classify and build every top-level node in document order."""
        components: List[Component] = []

        if self.content.title and self.content.title.strip():
            components.append(Title(self.content.title, context))

        soup = BeautifulSoup(self.content.content or '', 'lxml')
        root = soup.body or soup

        for node in root.children:
            components.extend(self.factory.components_from_node(node, context))

        return components

    def _anchor_components(self, components: List[Component]) -> None:
        """
        Anchor aligned components to a neighbouring anchor target.

        The previous component is preferred, then the next one. Components
        with no eligible neighbour go back to their default layout.
        """
        for index, component in enumerate(components):
            if component.anchor_position is AnchorPosition.NONE:
                continue

            target = self._find_anchor_target(components, index)
            if target is None:
                self.logger.debug(
                    f"No anchor target for {component.json.get('role')} at position {index}"
                )
                component.clear_anchor()
                continue

            component.anchor_to(target)

    @staticmethod
    def _find_anchor_target(components: List[Component], index: int) -> Optional[Component]:
        candidates = []
        if index > 0:
            candidates.append(components[index - 1])
        if index + 1 < len(components):
            candidates.append(components[index + 1])

        for candidate in candidates:
            if candidate.can_be_anchor_target and candidate.anchor_position is AnchorPosition.NONE:
                return candidate
        return None

    def _build_document(self, components: List[Component], context: GenerationContext) -> Dict[str, Any]:
        settings = context.settings
        return {
            'version': DOCUMENT_VERSION,
            'identifier': str(self.content.id),
            'title': self.content.title or '',
            'language': settings.get_str('language'),
            'layout': {
                'columns': settings.get_int('layout_columns'),
                'width': settings.get_int('layout_width'),
                'margin': settings.get_int('layout_margin'),
                'gutter': settings.get_int('layout_gutter'),
            },
            'components': [component.to_dict() for component in components],
            'componentTextStyles': context.styles.all(),
            'componentLayouts': context.layouts.all(),
        }


def export_content(content: ExportContent, settings: Optional[Settings] = None) -> ExportResult:
    """Convenience wrapper running a single pass with the default variants."""
    return Exporter(content, settings).export()


__all__ = ['Exporter', 'export_content', 'DOCUMENT_VERSION']
