"""Per-pass generation state threaded from the exporter down to every component."""

import logging
import posixpath
from typing import List, Optional
from urllib.parse import unquote, urlparse

from converters import MarkdownConverter
from settings import Settings

from .registry import DefinitionRegistry

logger = logging.getLogger('news_format_exporter.exporter.context')


class GenerationContext:
    """
    Mutable state scoped to exactly one generation pass.

    Holds a snapshot of the settings (one-shot toggles are consumed on the
    snapshot, never on the caller's settings), the style and layout
    registries, the bundle list and the component identifier counter.
    """

    def __init__(self, settings: Settings, markdown: Optional[MarkdownConverter] = None):
        self.settings = settings.copy()
        self.styles = DefinitionRegistry('text style')
        self.layouts = DefinitionRegistry('layout')
        self.markdown = markdown or MarkdownConverter()
        self._bundles: List[str] = []
        self._uid_counter = 0

    def add_bundle(self, url: str) -> str:
        """
        Record an asset that must ship with the document.

        Returns:
            The ``bundle://`` reference components use in place of the URL
        """
        if url not in self._bundles:
            logger.debug(f"Bundling {url}")
            self._bundles.append(url)
        return f'bundle://{bundle_filename(url)}'

    @property
    def bundles(self) -> List[str]:
        return list(self._bundles)

    def next_uid(self) -> str:
        self._uid_counter += 1
        return f'component-{self._uid_counter}'


def bundle_filename(url: str) -> str:
    """Extract the file name of an asset URL, without query string or fragment."""
    path = urlparse(url).path
    return unquote(posixpath.basename(path)) or 'asset'


__all__ = ['GenerationContext', 'bundle_filename']
