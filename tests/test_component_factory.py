"""Tests for node classification and dispatch."""

import unittest

from bs4 import BeautifulSoup

from exceptions import MalformedContentError
from exporter.component_factory import DEFAULT_COMPONENTS, ComponentFactory
from exporter.components import Body, Divider, EmbedWebVideo, Heading, Image, Quote
from exporter.context import GenerationContext
from settings import Settings


def first_node(html):
    """Parse an article body the way the exporter does and return its first node."""
    soup = BeautifulSoup(html, 'lxml')
    return soup.body.contents[0]


class TestComponentFactory(unittest.TestCase):
    def setUp(self):
        self.factory = ComponentFactory.default()
        self.context = GenerationContext(Settings({'initial_dropcap': 'no'}))

    def build(self, html):
        return self.factory.components_from_node(first_node(html), self.context)

    def test_default_order(self):
        """Media variants are consulted before body, body before divider."""
        self.assertEqual(
            self.factory.shortnames,
            ['iframe', 'img', 'video', 'audio', 'heading', 'blockquote', 'p', 'hr']
        )
        self.assertEqual([name for name, _ in DEFAULT_COMPONENTS], self.factory.shortnames)

    def test_paragraph_becomes_body(self):
        components = self.build('<p>Hello</p>')

        self.assertEqual(len(components), 1)
        self.assertIsInstance(components[0], Body)
        self.assertEqual(components[0].json['text'], 'Hello')

    def test_paragraph_with_image_is_split(self):
        components = self.build('<p>Before <img src="a.png"> after</p>')

        self.assertEqual([type(c) for c in components], [Body, Image, Body])
        self.assertEqual(components[0].json['text'], 'Before')
        self.assertEqual(components[2].json['text'], 'after')

    def test_image_only_paragraph_falls_back_to_children(self):
        """A paragraph without text is not a body; its image still is matched."""
        components = self.build('<p><img src="a.png"></p>')

        self.assertEqual(len(components), 1)
        self.assertIsInstance(components[0], Image)

    def test_container_falls_back_to_children(self):
        components = self.build(
            '<div><h2>Title</h2><p>Text</p><blockquote>Quote</blockquote><hr></div>'
        )

        self.assertEqual([type(c) for c in components], [Heading, Body, Quote, Divider])

    def test_empty_nodes_produce_nothing(self):
        self.assertEqual(self.build('<p>   </p>'), [])
        self.assertEqual(self.build('<ul><li> </li></ul>'), [])
        self.assertEqual(self.build('<div><span></span></div>'), [])

    def test_text_node_produces_nothing(self):
        soup = BeautifulSoup('loose text', 'html.parser')

        self.assertEqual(self.factory.components_from_node(soup.contents[0], self.context), [])

    def test_youtube_iframe_is_embedded_video(self):
        components = self.build('<iframe src="https://www.youtube.com/watch?v=abc123"></iframe>')

        self.assertEqual(len(components), 1)
        self.assertIsInstance(components[0], EmbedWebVideo)

    def test_unknown_iframe_is_skipped(self):
        self.assertEqual(self.build('<iframe src="https://example.com/widget"></iframe>'), [])

    def test_unregistered_fragment_name_raises(self):
        factory = ComponentFactory()
        factory.register('p', Body)

        with self.assertRaises(MalformedContentError):
            factory.components_from_node(first_node('<p>Hi <img src="a.png"> there</p>'), self.context)

    def test_register_keeps_position(self):
        class LoudBody(Body):
            pass

        self.factory.register('p', LoudBody)

        self.assertEqual(self.factory.shortnames.index('p'), 6)
        self.assertIsInstance(self.build('<p>Hello</p>')[0], LoudBody)

    def test_register_new_variant_goes_last(self):
        self.factory.register('custom', Body)

        self.assertEqual(self.factory.shortnames[-1], 'custom')


if __name__ == '__main__':
    unittest.main()
