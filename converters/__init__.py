"""Converters package for component markup: fragment cleaning and Markdown conversion."""

import logging

from .html_cleaner import HtmlCleaner
from .markdown_converter import MarkdownConverter

logger = logging.getLogger('news_format_exporter.converters')


def convert_fragment(html_content, logger=None):
    """
    Convenience function to convert a single HTML fragment to Markdown.

    Args:
        html_content: Markup of one text component
        logger: Optional logger instance (uses module logger if not provided)

    Returns:
        str: Markdown text

    Raises:
        ConversionError: If the conversion fails

    Example:
        >>> from converters import convert_fragment
        >>> convert_fragment('<p>Hello <strong>world</strong></p>')
        'Hello **world**'
    """
    if logger is None:
        logger = logging.getLogger('news_format_exporter.converters')

    converter = MarkdownConverter(logger=logger)
    return converter.convert_fragment(html_content)


__all__ = [
    'convert_fragment',
    'MarkdownConverter',
    'HtmlCleaner'
]
