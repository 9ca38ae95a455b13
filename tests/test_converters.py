import unittest
from unittest import mock

from converters import convert_fragment
from converters.html_cleaner import HtmlCleaner
from converters.markdown_converter import MarkdownConverter
from exceptions import ConversionError


class TestMarkdownConverter(unittest.TestCase):
    def setUp(self):
        self.converter = MarkdownConverter()

    def test_paragraph(self):
        """Paragraph markup becomes plain text without surrounding blank lines."""
        self.assertEqual(self.converter.convert_fragment('<p>Hello</p>'), 'Hello')

    def test_emphasis(self):
        markdown = self.converter.convert_fragment('<p><strong>bold</strong> and <em>italic</em></p>')
        self.assertEqual(markdown, '**bold** and *italic*')

    def test_underscores_not_escaped(self):
        self.assertEqual(self.converter.convert_fragment('<p>snake_case_name</p>'), 'snake_case_name')

    def test_span_is_transparent(self):
        self.assertEqual(self.converter.convert_fragment('<p><span class="x">plain</span></p>'), 'plain')

    def test_inline_code(self):
        self.assertEqual(self.converter.convert_fragment('<p>run <code>make</code></p>'), 'run `make`')

    def test_code_block(self):
        markdown = self.converter.convert_fragment('<pre><code>print("hi")</code></pre>')
        self.assertEqual(markdown, '```\nprint("hi")\n```')

    def test_embedded_media_is_dropped(self):
        markdown = self.converter.convert_fragment(
            '<p>a<img src="x.png">b<iframe src="y"></iframe>c</p>'
        )
        self.assertEqual(markdown, 'abc')

    def test_blank_lines_collapsed(self):
        markdown = self.converter.convert_fragment('<div><p>One</p><p></p><p></p><p>Two</p></div>')
        self.assertEqual(markdown, 'One\n\nTwo')

    def test_failure_is_wrapped(self):
        with mock.patch('markdownify.MarkdownConverter.convert', side_effect=RuntimeError('boom')):
            with self.assertRaises(ConversionError) as ctx:
                self.converter.convert_fragment('<p>x</p>')
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_markdownify_options_override_defaults(self):
        converter = MarkdownConverter(bullets='*')

        self.assertEqual(converter.convert_fragment('<ul><li>One</li></ul>'), '* One')

    def test_unknown_keyword_is_rejected(self):
        with self.assertRaises(TypeError):
            convert_fragment('<p>x</p>', config={})

    def test_convenience_function(self):
        self.assertEqual(convert_fragment('<p>Hello <strong>world</strong></p>'), 'Hello **world**')


class TestHtmlCleaner(unittest.TestCase):
    def setUp(self):
        self.cleaner = HtmlCleaner()

    def test_closes_open_tags(self):
        self.assertEqual(self.cleaner.clean('<p><em>text'), '<p><em>text</em></p>')

    def test_drops_stray_closing_tags(self):
        self.assertEqual(self.cleaner.clean('<p>text</em></p>'), '<p>text</p>')

    def test_removes_empty_inline_wrappers(self):
        self.assertEqual(self.cleaner.clean('<p>a<strong><em></em></strong></p>'), '<p>a</p>')

    def test_keeps_whitespace_wrappers(self):
        self.assertEqual(self.cleaner.clean('<p>a<em> </em>b</p>'), '<p>a<em> </em>b</p>')

    def test_keeps_named_anchor(self):
        self.assertEqual(self.cleaner.clean('<p><a id="top"></a>text</p>'), '<p><a id="top"></a>text</p>')

    def test_first_element_only(self):
        self.assertEqual(self.cleaner.clean('<p>one</p><p>two</p>'), '<p>one</p>')
        self.assertEqual(self.cleaner.clean('just text'), '')

    def test_is_empty(self):
        self.assertTrue(self.cleaner.is_empty(''))
        self.assertTrue(self.cleaner.is_empty('<p> <em></em> </p>'))
        self.assertFalse(self.cleaner.is_empty('<p>x</p>'))
        self.assertFalse(self.cleaner.is_empty('<p><img src="a.png"/></p>'))


if __name__ == '__main__':
    unittest.main()
