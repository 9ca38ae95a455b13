"""Heading component for h1 to h6."""

import re
from typing import List, Union

from bs4 import Tag

from exceptions import MalformedContentError
from models import Fragment

from .component import Component


HEADING_TAG = re.compile(r'^h([1-6])$')


class Heading(Component):
    """A heading component."""

    needs_layout_if_anchored = False

    can_be_anchor_target = True

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if not node.name or not HEADING_TAG.match(node.name):
            return None
        if not node.get_text().strip():
            return None
        return node

    def build(self, text: str) -> None:
        heading = self.parse_element(text, HEADING_TAG)
        if heading is None:
            raise MalformedContentError(f"Not a heading: {text[:100]}")

        level = int(heading.name[1])

        self.json = {
            'role': f'heading{level}',
            'text': self.context.markdown.convert_fragment(heading.decode_contents()),
            'format': 'markdown',
        }

        self.register_style(f'default-heading-{level}', {
            'fontName': self.get_str_setting('header_font'),
            'fontSize': self.get_int_setting(f'header{level}_size'),
            'lineHeight': self.get_int_setting('header_line_height'),
            'textColor': self.get_str_setting('header_color'),
            'textAlignment': 'left',
        })

        self.set_default_layout()

    def set_default_layout(self) -> None:
        self.register_layout('heading-layout', {
            'columnStart': self.body_column_start(),
            'columnSpan': self.get_int_setting('body_column_span'),
            'margin': {'top': 15, 'bottom': 15},
        })
