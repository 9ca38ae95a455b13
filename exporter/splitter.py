"""Splits paragraph markup around embedded media that Markdown cannot express."""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from converters import HtmlCleaner
from converters.html_cleaner import EMBEDDED_TAGS
from exceptions import MalformedContentError
from models import Fragment

logger = logging.getLogger('news_format_exporter.exporter.splitter')


TEXT_FRAGMENT = 'p'

NON_MARKDOWNABLE_TAGS = tuple(EMBEDDED_TAGS)

VOID_TAGS = frozenset([
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'param', 'source', 'track', 'wbr',
])


@dataclass(frozen=True)
class EmbeddedMatch:
    """Location of one embedded element inside a markup string."""

    tag_name: str
    start: int
    end: int
    markup: str


class MarkupScanner:
    """Minimal tag scanner used to find split boundaries."""

    EMBEDDED_OPEN_PATTERN = re.compile(
        r'<(' + '|'.join(NON_MARKDOWNABLE_TAGS) + r')\b[^>]*?(/?)>',
        re.IGNORECASE | re.DOTALL
    )
    TAG_PATTERN = re.compile(r'<(/?)([a-zA-Z][a-zA-Z0-9]*)\b[^>]*?(/?)>', re.DOTALL)
    COMMENT_PATTERN = re.compile(r'<!--.*?-->', re.DOTALL)

    def mask_comments(self, markup: str) -> str:
        """Blank out comments, keeping offsets, so tags inside them are never matched."""
        return self.COMMENT_PATTERN.sub(lambda match: ' ' * len(match.group(0)), markup)

    def find_embedded(self, markup: str) -> Optional[EmbeddedMatch]:
        """
        Find the first embedded element, paired or self-closing.

        Args:
            markup: Markup to scan

        Returns:
            The match, or None when the markup holds no embedded element

        Raises:
            MalformedContentError: If a paired element is never closed
        """
        scanned = self.mask_comments(markup)
        match = self.EMBEDDED_OPEN_PATTERN.search(scanned)
        if not match:
            return None

        tag_name = match.group(1).lower()
        self_closing = match.group(2) == '/'

        if tag_name in VOID_TAGS or self_closing:
            end = match.end()
        else:
            closing = re.compile(r'</' + tag_name + r'\s*>', re.IGNORECASE)
            closing_match = closing.search(scanned, match.end())
            if not closing_match:
                raise MalformedContentError(
                    f"No closing </{tag_name}> found for element at offset {match.start()}"
                )
            end = closing_match.end()

        return EmbeddedMatch(tag_name, match.start(), end, markup[match.start():end])

    def open_tags(self, markup: str) -> List[Tuple[str, str]]:
        """
        List the elements still open at the end of ``markup``, outermost first.

        Returns:
            (tag name, opening tag text) pairs
        """
        stack: List[Tuple[str, str]] = []

        for match in self.TAG_PATTERN.finditer(self.mask_comments(markup)):
            is_closing, name, self_closing = match.group(1), match.group(2).lower(), match.group(3)

            if is_closing:
                for index in range(len(stack) - 1, -1, -1):
                    if stack[index][0] == name:
                        del stack[index:]
                        break
                continue

            if self_closing or name in VOID_TAGS:
                continue

            stack.append((name, match.group(0)))

        return stack


def split_non_markdownable(markup: str, cleaner: Optional[HtmlCleaner] = None,
                           scanner: Optional[MarkupScanner] = None) -> List[Fragment]:
    """
    Split text container markup into fragments around embedded media.

    Text before the first embedded element is re-closed as its own container,
    the element becomes a fragment named after its tag, and the remainder is
    re-opened with the same container and inline formatting and split
    recursively. Containers without text are dropped.

    Args:
        markup: Serialised paragraph, e.g. ``<p>Hello <img src="a.png"/> world</p>``
        cleaner: HtmlCleaner used to re-serialise the synthetic halves
        scanner: MarkupScanner used to find boundaries

    Returns:
        Fragments in document order

    Raises:
        MalformedContentError: If an embedded element is never closed
    """
    cleaner = cleaner or HtmlCleaner()
    scanner = scanner or MarkupScanner()

    if cleaner.is_empty(markup):
        return []

    match = scanner.find_embedded(markup)
    if match is None:
        return [Fragment(TEXT_FRAGMENT, markup)]

    left = markup[:match.start]
    right = markup[match.end:]

    open_tags = scanner.open_tags(left)
    if not open_tags:
        open_tags = [(TEXT_FRAGMENT, f'<{TEXT_FRAGMENT}>')]
        left = f'<{TEXT_FRAGMENT}>' + left

    closing = ''.join(f'</{name}>' for name, _ in reversed(open_tags))
    reopening = ''.join(opening for _, opening in open_tags)

    logger.debug(f"Splitting at <{match.tag_name}> ({match.start}:{match.end})")

    fragments: List[Fragment] = []

    left_value = cleaner.clean(left + closing)
    if not cleaner.is_empty(left_value):
        fragments.append(Fragment(TEXT_FRAGMENT, left_value))

    fragments.append(Fragment(match.tag_name, match.markup))

    fragments.extend(split_non_markdownable(cleaner.clean(reopening + right), cleaner, scanner))

    return fragments


__all__ = [
    'EmbeddedMatch',
    'MarkupScanner',
    'split_non_markdownable',
    'NON_MARKDOWNABLE_TAGS',
    'TEXT_FRAGMENT'
]
