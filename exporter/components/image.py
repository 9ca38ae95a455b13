"""Image component: a bundled photo, optionally anchored beside body text."""

from typing import List, Optional, Union

from bs4 import Tag

from exceptions import MalformedContentError
from models import AnchorPosition, Fragment

from .component import Component


ALIGNMENT_CLASSES = {
    'alignleft': AnchorPosition.LEFT,
    'alignright': AnchorPosition.RIGHT,
}


class Image(Component):
    """An image component."""

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if node.name == 'img':
            return node
        return None

    def build(self, text: str) -> None:
        img = self.parse_element(text, 'img')
        src = img.get('src', '').strip() if img else ''
        if not src:
            raise MalformedContentError(f"Image has no source: {text[:100]}")

        self.json = {
            'role': 'photo',
            'URL': self.maybe_bundle_source(src),
        }

        caption = (img.get('alt') or img.get('title') or '').strip()
        if caption:
            self.json['caption'] = caption

        self.anchor_position = self._detect_alignment(img)
        if self.anchor_position is AnchorPosition.NONE:
            self.set_default_layout()

        self.logger.debug(f"Built photo for {src} (alignment: {self.anchor_position.value})")

    def set_default_layout(self) -> None:
        self.register_layout('full-width-image', {
            'columnStart': 0,
            'columnSpan': self.get_int_setting('layout_columns'),
            'margin': {'top': 15, 'bottom': 25},
        })

    @staticmethod
    def _detect_alignment(img: Tag) -> AnchorPosition:
        for cls in img.get('class', []):
            if cls in ALIGNMENT_CLASSES:
                return ALIGNMENT_CLASSES[cls]

        align: Optional[str] = img.get('align')
        if align and align.strip().lower() in ('left', 'right'):
            return AnchorPosition(align.strip().lower())
        return AnchorPosition.NONE
