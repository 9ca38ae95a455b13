"""Divider component for horizontal rules."""

from typing import List, Union

from bs4 import Tag

from models import Fragment

from .component import Component


class Divider(Component):
    """A horizontal rule."""

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if node.name == 'hr':
            return node
        return None

    def build(self, text: str) -> None:
        self.json = {
            'role': 'divider',
            'stroke': {
                'color': self.get_str_setting('divider_color'),
                'width': 1,
            },
        }
        self.set_default_layout()

    def set_default_layout(self) -> None:
        self.register_layout('divider-layout', {
            'columnStart': self.body_column_start(),
            'columnSpan': self.get_int_setting('body_column_span'),
            'margin': {'top': 25, 'bottom': 25},
        })
