"""Audio component."""

from typing import List, Union

from bs4 import Tag

from exceptions import MalformedContentError
from models import Fragment

from .component import Component
from .video import media_source


class Audio(Component):
    """An audio component."""

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if node.name == 'audio':
            return node
        return None

    def build(self, text: str) -> None:
        audio = self.parse_element(text, 'audio')
        url = media_source(audio) if audio else ''
        if not url:
            raise MalformedContentError(f"Audio has no source: {text[:100]}")

        self.json = {
            'role': 'audio',
            'URL': url,
        }
