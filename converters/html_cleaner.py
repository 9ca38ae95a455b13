"""HTML cleaner for re-serialising split fragments without losing content."""

import logging

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger('news_format_exporter.converters.htmlcleaner')


# Formatting wrappers that may be left empty at a split boundary
INLINE_TAGS = ['a', 'abbr', 'b', 'cite', 'code', 'em', 'i', 'mark', 's', 'small',
               'span', 'strong', 'sub', 'sup', 'u']

# Elements that carry content even without text
EMBEDDED_TAGS = ['img', 'video', 'audio', 'iframe']


class HtmlCleaner:
    """Turns synthetic markup produced by the splitter into well-formed HTML."""

    def __init__(self, logger: logging.Logger = None):
        """Initialize HTML cleaner with optional logger."""
        self.logger = logger or logging.getLogger('news_format_exporter.converters.htmlcleaner')

    def clean(self, markup: str) -> str:
        """
        Re-serialise the first top-level element of ``markup``.

        Unclosed tags are closed, stray closing tags are dropped and inline
        wrappers left empty by a split are removed.

        Args:
            markup: Markup string, usually a re-opened or re-closed container

        Returns:
            Cleaned markup of the first element, or an empty string
        """
        soup = self._parse(markup)
        element = soup.find(True, recursive=False)
        if element is None:
            return ''

        self._remove_empty_elements(element)
        return str(element)

    def is_empty(self, markup: str) -> bool:
        """Check whether markup has neither text nor embedded elements."""
        if not markup or not markup.strip():
            return True

        soup = self._parse(markup)
        if soup.get_text(strip=True):
            return False
        return soup.find(EMBEDDED_TAGS) is None

    def _parse(self, markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, 'html.parser')

    def _remove_empty_elements(self, element: Tag) -> None:
        """Remove inline wrappers that hold no text and no children."""
        removed_count = 0

        # Deepest first, so that emptied parents are caught in the same pass
        for child in reversed(element.find_all(INLINE_TAGS)):
            if child.find():
                continue

            has_text = len(child.get_text()) > 0
            # Anchors keep their target even when empty
            has_important_attrs = child.name == 'a' and (child.get('id') or child.get('name'))

            if not has_text and not has_important_attrs:
                child.decompose()
                removed_count += 1

        if removed_count > 0:
            self.logger.debug(f"Removed {removed_count} empty elements")


__all__ = ['HtmlCleaner', 'INLINE_TAGS', 'EMBEDDED_TAGS']
