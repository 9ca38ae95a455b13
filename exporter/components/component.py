"""Base class shared by every component variant."""

import copy
import logging
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from models import AnchorPosition, Fragment

from ..context import GenerationContext

logger = logging.getLogger('news_format_exporter.exporter.components')


def compute_column_start(orientation: str, columns: int, span: int) -> int:
    """
    Find the column a body-aligned component starts at.

    Args:
        orientation: 'left', 'right' or 'center'; anything else behaves as 'left'
        columns: Total layout columns
        span: Columns the component spans

    Returns:
        Zero-based start column
    """
    if orientation == 'right':
        return columns - span
    if orientation == 'center':
        return (columns - span) // 2
    return 0


class Component:
    """
    A single component of the exported document.

    Subclasses implement ``node_matches`` to claim source nodes and ``build``
    to fill ``self.json``. The component is built on construction, so the
    order components are created in is the order shared settings (such as
    the one-shot dropcap) are consumed in.
    """

    # Whether other components may anchor to this one
    can_be_anchor_target = False

    # Whether this component switches to an anchor layout once anchored
    needs_layout_if_anchored = True

    def __init__(self, text: str, context: GenerationContext):
        self.text = text
        self.context = context
        self.json: Dict[str, Any] = {}
        self.anchor_position = AnchorPosition.NONE
        self.uid: Optional[str] = None
        self.logger = logging.getLogger(
            f'news_format_exporter.exporter.components.{type(self).__name__.lower()}'
        )

        self.build(text)

    @classmethod
    def node_matches(cls, node: Tag) -> Union[None, Tag, List[Fragment]]:
        """
        Decide whether this variant handles ``node``.

        Returns:
            None for no match, the node itself, or the fragments it splits into
        """
        return None

    def build(self, text: str) -> None:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.json)

    # Settings

    def get_setting(self, key: str) -> Any:
        return self.context.settings.get(key)

    def get_int_setting(self, key: str) -> int:
        return self.context.settings.get_int(key)

    def get_str_setting(self, key: str) -> str:
        return self.context.settings.get_str(key)

    def set_setting(self, key: str, value: Any) -> None:
        self.context.settings.set(key, value)

    # Shared definitions

    def register_style(self, name: str, definition: Dict[str, Any]) -> None:
        self.json['textStyle'] = self.context.styles.register(name, definition)

    def register_layout(self, name: str, definition: Dict[str, Any]) -> None:
        self.json['layout'] = self.context.layouts.register(name, definition)

    def body_column_start(self) -> int:
        return compute_column_start(
            self.get_setting('body_orientation'),
            self.get_int_setting('layout_columns'),
            self.get_int_setting('body_column_span'),
        )

    def set_default_layout(self) -> None:
        """Register the layout used when the component is not anchored."""
        pass

    # Assets

    def maybe_bundle_source(self, url: str) -> str:
        """Return the URL to reference, bundling the asset unless remote images are enabled."""
        if self.get_setting('use_remote_images') == 'yes':
            return url
        return self.context.add_bundle(url)

    # Anchoring

    def set_anchor_target(self) -> str:
        if self.uid is None:
            self.uid = self.context.next_uid()
            self.json['identifier'] = self.uid
        return self.uid

    def anchor_to(self, target: 'Component') -> None:
        self.json['anchor'] = {
            'targetComponentIdentifier': target.set_anchor_target(),
            'targetAnchorPosition': 'center',
            'rangeStart': 0,
            'rangeLength': 1,
        }
        if self.needs_layout_if_anchored:
            self.set_anchor_layout()

    def set_anchor_layout(self) -> None:
        """Place the anchored component beside the body text, on its anchor side."""
        columns = self.get_int_setting('layout_columns')
        span = (columns
                - self.get_int_setting('body_column_span')
                + self.get_int_setting('alignment_offset'))
        span = max(1, min(span, columns))

        start = 0
        if self.anchor_position is AnchorPosition.RIGHT:
            start = columns - span

        self.register_layout(f'anchor-layout-{self.anchor_position.value}', {
            'columnStart': start,
            'columnSpan': span,
        })

    def clear_anchor(self) -> None:
        self.anchor_position = AnchorPosition.NONE
        self.json.pop('anchor', None)
        self.set_default_layout()

    # Markup helpers

    @staticmethod
    def parse_element(markup: str, name: Optional[Union[str, List[str]]] = None) -> Optional[Tag]:
        """Parse markup and return its first element (optionally of the given name)."""
        soup = BeautifulSoup(markup, 'html.parser')
        if name is None:
            return soup.find(True)
        return soup.find(name)


__all__ = ['Component', 'compute_column_start']
