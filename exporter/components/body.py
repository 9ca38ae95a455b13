"""Body component: paragraphs and lists rendered as Markdown text."""

from typing import Any, Dict, List, Union

from bs4 import Tag

from models import Fragment

from ..splitter import split_non_markdownable
from .component import Component


class Body(Component):
    """A paragraph or list component."""

    # Body text does not move when something is anchored to it
    needs_layout_if_anchored = False

    can_be_anchor_target = True

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        if node.name not in ('p', 'ul', 'ol'):
            return None

        # Empty paragraphs and lists produce nothing
        if not node.get_text().strip():
            return None

        # Images, videos, audios and iframes cannot be expressed in Markdown,
        # so a paragraph holding any of them is split around them.
        if node.name == 'p':
            return split_non_markdownable(str(node))

        return node

    def build(self, text: str) -> None:
        self.json = {
            'role': 'body',
            'text': self.context.markdown.convert_fragment(text),
            'format': 'markdown',
        }

        if self.get_setting('initial_dropcap') == 'yes':
            # One-shot: only the first body component of the pass gets it
            self.set_setting('initial_dropcap', 'no')
            self.set_initial_dropcap_style()
        else:
            self.set_default_style()

        self.set_default_layout()

    def set_default_layout(self) -> None:
        self.register_layout('body-layout', {
            'columnStart': self.body_column_start(),
            'columnSpan': self.get_int_setting('body_column_span'),
            'margin': {'top': 25, 'bottom': 25},
        })

    def get_default_style(self) -> Dict[str, Any]:
        return {
            'textAlignment': 'left',
            'fontName': self.get_str_setting('body_font'),
            'fontSize': self.get_int_setting('body_size'),
            'lineHeight': self.get_int_setting('body_line_height'),
            'textColor': self.get_str_setting('body_color'),
            'linkStyle': {'textColor': self.get_str_setting('body_link_color')},
        }

    def set_default_style(self) -> None:
        self.register_style('default-body', self.get_default_style())

    def set_initial_dropcap_style(self) -> None:
        style = self.get_default_style()
        style['dropCapStyle'] = {
            'numberOfLines': 2,
            'numberOfCharacters': 1,
            'fontName': self.get_str_setting('dropcap_font'),
            'textColor': self.get_str_setting('dropcap_color'),
        }
        self.register_style('dropcapBodyStyle', style)
