"""Ordered dispatch of document nodes to component variants."""

import logging
from typing import Dict, List, Tuple, Type

from bs4 import Tag

from exceptions import MalformedContentError

from .components import (
    Audio,
    Body,
    Component,
    Divider,
    EmbedWebVideo,
    Heading,
    Image,
    Quote,
    Video,
)
from .context import GenerationContext

logger = logging.getLogger('news_format_exporter.exporter.componentfactory')


# Evaluation order matters: the first variant whose matcher accepts a node
# builds it. Media variants come before Body so that embedded elements are
# claimed directly; Body comes before Divider.
DEFAULT_COMPONENTS: Tuple[Tuple[str, Type[Component]], ...] = (
    ('iframe', EmbedWebVideo),
    ('img', Image),
    ('video', Video),
    ('audio', Audio),
    ('heading', Heading),
    ('blockquote', Quote),
    ('p', Body),
    ('hr', Divider),
)


class ComponentFactory:
    """
    Maps source nodes to built components.

    Variants are consulted in registration order. Split fragments are
    dispatched by their name, so every fragment name the splitter can emit
    (``p``, ``img``, ``video``, ``audio``, ``iframe``) must be registered.
    """

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger('news_format_exporter.exporter.componentfactory')
        self._components: Dict[str, Type[Component]] = {}

    @classmethod
    def default(cls, logger: logging.Logger = None) -> 'ComponentFactory':
        factory = cls(logger)
        for shortname, component_class in DEFAULT_COMPONENTS:
            factory.register(shortname, component_class)
        return factory

    def register(self, shortname: str, component_class: Type[Component]) -> None:
        """
        Register a variant. New shortnames go last; re-registering a shortname
        swaps its class without changing its position.
        """
        self._components[shortname] = component_class

    @property
    def shortnames(self) -> List[str]:
        return list(self._components)

    def component_for(self, shortname: str, markup: str, context: GenerationContext) -> Component:
        """Build the component registered under ``shortname`` from markup."""
        component_class = self._components.get(shortname)
        if component_class is None:
            raise MalformedContentError(f"No component registered for '{shortname}'")
        return component_class(markup, context)

    def components_from_node(self, node, context: GenerationContext) -> List[Component]:
        """
        Build the components for a node, in document order.

        Text nodes, comments and nodes no variant matches (and whose children
        match nothing) produce an empty list.
        """
        if not isinstance(node, Tag):
            return []

        for shortname, component_class in self._components.items():
            matched = component_class.node_matches(node)
            if matched is None:
                continue

            if isinstance(matched, list):
                self.logger.debug(
                    f"<{node.name}> split into {[fragment.name for fragment in matched]}"
                )
                return [self.component_for(fragment.name, fragment.value, context)
                        for fragment in matched]

            self.logger.debug(f"<{node.name}> matched '{shortname}'")
            return [self.component_for(shortname, str(matched), context)]

        # Nothing matched. Maybe it's a container element?
        result: List[Component] = []
        for child in node.children:
            result.extend(self.components_from_node(child, context))
        return result


__all__ = ['ComponentFactory', 'DEFAULT_COMPONENTS']
