"""Pull quote component for blockquotes."""

from typing import List, Union

from bs4 import Tag

from exceptions import MalformedContentError
from models import Fragment

from .component import Component


class Quote(Component):
    """A blockquote rendered as a pull quote."""

    needs_layout_if_anchored = False

    # Quotes can be anchor targets
    can_be_anchor_target = True

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if node.name != 'blockquote' or not node.get_text().strip():
            return None
        return node

    def build(self, text: str) -> None:
        blockquote = self.parse_element(text, 'blockquote')
        if blockquote is None:
            raise MalformedContentError(f"Not a blockquote: {text[:100]}")

        self.json = {
            'role': 'quote',
            'text': self.context.markdown.convert_fragment(blockquote.decode_contents()),
            'format': 'markdown',
        }

        self.register_style('default-pullquote', {
            'fontName': self.get_str_setting('pullquote_font'),
            'fontSize': self.get_int_setting('pullquote_size'),
            'lineHeight': self.get_int_setting('pullquote_line_height'),
            'textColor': self.get_str_setting('pullquote_color'),
            'textTransform': self.get_str_setting('pullquote_transform'),
            'textAlignment': 'left',
        })

        self.set_default_layout()

    def set_default_layout(self) -> None:
        self.register_layout('quote-layout', {
            'columnStart': self.body_column_start(),
            'columnSpan': self.get_int_setting('body_column_span'),
            'margin': {'top': 25, 'bottom': 25},
        })
