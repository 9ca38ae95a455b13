"""Tests for the body component: markdown text, dropcap and layout."""

import pytest

from exceptions import MissingSettingError
from exporter import Exporter
from exporter.components import Body, compute_column_start
from exporter.context import GenerationContext
from models import ExportContent
from settings import Settings


def generate(html, **settings):
    exporter = Exporter(ExportContent(id='article', title=None, content=html), Settings(settings))
    document = exporter.generate()
    return exporter, document


class TestBodyText:
    """Test body text conversion."""

    def test_inline_formatting_is_markdown(self):
        _, document = generate('<p>Hello <strong>world</strong></p>', initial_dropcap='no')

        component = document['components'][0]
        assert component['role'] == 'body'
        assert component['format'] == 'markdown'
        assert component['text'] == 'Hello **world**'

    def test_links_are_kept(self):
        _, document = generate('<p>See <a href="https://example.com">this</a></p>')

        assert document['components'][0]['text'] == 'See [this](https://example.com)'

    def test_list_is_one_body(self):
        _, document = generate('<ul><li>One</li><li>Two</li></ul>')

        assert len(document['components']) == 1
        assert document['components'][0]['text'] == '- One\n- Two'


class TestDropcap:
    """Test the one-shot initial dropcap."""

    def test_only_first_body_gets_dropcap(self):
        exporter, document = generate('<p>One</p><p>Two</p><p>Three</p>', initial_dropcap='yes')

        styles = [c['textStyle'] for c in document['components']]
        assert styles == ['dropcapBodyStyle', 'default-body', 'default-body']

    def test_dropcap_is_consumed_on_pass_settings(self):
        settings = Settings({'initial_dropcap': 'yes'})
        exporter = Exporter(ExportContent(id='a', title=None, content='<p>One</p>'), settings)

        exporter.generate()

        assert exporter.context.settings.get('initial_dropcap') == 'no'
        assert settings.get('initial_dropcap') == 'yes'

    def test_dropcap_style_definition(self):
        _, document = generate('<p>One</p>', dropcap_font='Georgia-Bold', dropcap_color='#111111')

        style = document['componentTextStyles']['dropcapBodyStyle']
        assert style['dropCapStyle'] == {
            'numberOfLines': 2,
            'numberOfCharacters': 1,
            'fontName': 'Georgia-Bold',
            'textColor': '#111111',
        }
        assert style['fontName'] == 'AvenirNext-Regular'

    def test_no_dropcap_when_disabled(self):
        _, document = generate('<p>One</p><p>Two</p>', initial_dropcap='no')

        assert 'dropcapBodyStyle' not in document['componentTextStyles']
        assert [c['textStyle'] for c in document['components']] == ['default-body', 'default-body']

    def test_style_registry_is_stable(self):
        """Many paragraphs share one style entry."""
        _, document = generate(''.join(f'<p>Paragraph {i}</p>' for i in range(5)),
                               initial_dropcap='no')

        assert list(document['componentTextStyles']) == ['default-body']
        assert list(document['componentLayouts']) == ['body-layout']


class TestBodyLayout:
    """Test body column placement."""

    @pytest.mark.parametrize('orientation,expected', [
        ('left', 0),
        ('right', 4),
        ('center', 2),
    ])
    def test_column_start(self, orientation, expected):
        _, document = generate('<p>Text</p>', layout_columns=10, body_column_span=6,
                               body_orientation=orientation)

        layout = document['componentLayouts']['body-layout']
        assert layout['columnStart'] == expected
        assert layout['columnSpan'] == 6
        assert layout['margin'] == {'top': 25, 'bottom': 25}

    def test_unknown_orientation_behaves_as_left(self):
        assert compute_column_start('diagonal', 10, 6) == 0

    def test_missing_setting_raises(self):
        context = GenerationContext(Settings({'body_column_span': None}))

        with pytest.raises(MissingSettingError) as excinfo:
            Body('<p>Text</p>', context)

        assert excinfo.value.key == 'body_column_span'
