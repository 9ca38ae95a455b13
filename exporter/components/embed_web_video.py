"""Embedded web video component for YouTube and Vimeo iframes."""

import re
from typing import List, Optional, Union

from bs4 import Tag

from exceptions import MalformedContentError
from models import Fragment

from .component import Component


YOUTUBE_MATCH = re.compile(
    r'^(?:https?:)?//(?:www\.)?(?:youtube\.com/(?:embed/|watch\?v=)|youtu\.be/)([\w-]+)',
    re.IGNORECASE
)
VIMEO_MATCH = re.compile(r'^(?:https?:)?//(?:player\.)?vimeo\.com/(?:video/)?(\d+)', re.IGNORECASE)


def normalize_video_url(src: str) -> Optional[str]:
    """Return the canonical embed URL for a YouTube or Vimeo source, else None."""
    match = YOUTUBE_MATCH.match(src)
    if match:
        return f'https://www.youtube.com/embed/{match.group(1)}'

    match = VIMEO_MATCH.match(src)
    if match:
        return f'https://player.vimeo.com/video/{match.group(1)}'

    return None


class EmbedWebVideo(Component):
    """An embedded YouTube or Vimeo video."""

    ASPECT_RATIO = 1.777

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if node.name != 'iframe':
            return None
        if normalize_video_url((node.get('src') or '').strip()) is None:
            return None
        return node

    def build(self, text: str) -> None:
        iframe = self.parse_element(text, 'iframe')
        src = (iframe.get('src') or '').strip() if iframe else ''
        if not src:
            raise MalformedContentError(f"Embedded frame has no source: {text[:100]}")

        self.json = {
            'role': 'embedwebvideo',
            'URL': normalize_video_url(src) or src,
            'aspectRatio': self.ASPECT_RATIO,
        }

        self.set_default_layout()

    def set_default_layout(self) -> None:
        self.register_layout('embed-web-video-layout', {
            'columnStart': self.body_column_start(),
            'columnSpan': self.get_int_setting('body_column_span'),
            'margin': {'top': 15, 'bottom': 25},
        })
