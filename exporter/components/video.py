"""Video component."""

from typing import List, Union

from bs4 import Tag

from exceptions import MalformedContentError
from models import Fragment

from .component import Component


def media_source(element: Tag) -> str:
    """Return the element's ``src`` or, failing that, its first ``<source src>``."""
    src = (element.get('src') or '').strip()
    if src:
        return src

    source = element.find('source', src=True)
    return source['src'].strip() if source else ''


class Video(Component):
    """A video component."""

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if node.name == 'video':
            return node
        return None

    def build(self, text: str) -> None:
        video = self.parse_element(text, 'video')
        url = media_source(video) if video else ''
        if not url:
            raise MalformedContentError(f"Video has no source: {text[:100]}")

        self.json = {
            'role': 'video',
            'URL': url,
        }

        poster = (video.get('poster') or '').strip()
        if poster:
            self.json['stillURL'] = self.maybe_bundle_source(poster)
