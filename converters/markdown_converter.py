"""Markdown converter for turning component markup into the document's text format."""

import logging
import re

from markdownify import MarkdownConverter as MarkdownifyConverter

from exceptions import ConversionError

logger = logging.getLogger('news_format_exporter.converters.markdownconverter')


class MarkdownConverter(MarkdownifyConverter):
    """
    Converts HTML fragments to the Markdown dialect used by text components.

    This class extends markdownify.MarkdownConverter to provide:
    - Inline-only output for headings and quotes
    - Removal of non-markdownable embedded media
    - Fenced code blocks
    - Post-processing of blank lines
    """

    def __init__(self, logger: logging.Logger = None, **kwargs):
        """Initialize markdown converter with logger and markdownify options."""
        markdownify_options = {
            'heading_style': 'ATX',
            'bullets': '-',
            'escape_asterisks': False,
            'escape_underscores': False,
            'wrap': False,
        }

        markdownify_options.update(kwargs)

        super().__init__(**markdownify_options)

        self.logger = logger or logging.getLogger('news_format_exporter.converters.markdownconverter')

    def convert_fragment(self, html_content: str) -> str:
        """
        Convert a fragment of HTML to Markdown.

        Args:
            html_content: Markup of a single component (paragraph, list, heading body)

        Returns:
            Markdown text with surrounding whitespace removed

        Raises:
            ConversionError: If the underlying converter fails
        """
        self.logger.debug(f"Converting fragment to markdown ({len(html_content)} chars)")

        try:
            raw_markdown = super().convert(html_content)
        except Exception as e:
            raise ConversionError(f"Markdown conversion failed: {str(e)}") from e

        return self._post_process_markdown(raw_markdown)

    def _post_process_markdown(self, markdown: str) -> str:
        """Apply post-processing to generated markdown."""
        # Replace 3+ consecutive newlines with 2 newlines
        markdown = re.sub(r'\n{3,}', '\n\n', markdown)
        return markdown.strip()

    def convert_img(self, el, text, parent_tags=None, **kwargs):
        """Embedded images are split into their own components, never inlined."""
        return ''

    def convert_video(self, el, text, parent_tags=None, **kwargs):
        return ''

    def convert_audio(self, el, text, parent_tags=None, **kwargs):
        return ''

    def convert_iframe(self, el, text, parent_tags=None, **kwargs):
        return ''

    def convert_span(self, el, text, parent_tags=None, **kwargs):
        """Handle span elements by keeping their text."""
        return text

    def convert_code(self, el, text, parent_tags=None, **kwargs):
        """Handle inline code and code blocks."""
        parent = el.parent
        if parent and parent.name == 'pre':
            # This will be handled by convert_pre, just return the text
            return text

        return f"`{text}`" if text else ''

    def convert_pre(self, el, text, parent_tags=None, **kwargs):
        """Handle pre elements as fenced code blocks."""
        code_el = el.find('code')
        code_text = code_el.get_text() if code_el else el.get_text()
        if not code_text.strip():
            return ''
        return f"\n\n```\n{code_text.strip()}\n```\n\n"

    def convert_div(self, el, text, parent_tags=None, **kwargs):
        """Regular div - return text content as a block."""
        return f"\n\n{text.strip()}\n\n" if text.strip() else ''


__all__ = ['MarkdownConverter']
