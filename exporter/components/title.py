"""Title component built from the article title rather than from body markup."""

from .component import Component


class Title(Component):
    """The article title, placed before the body components."""

    def build(self, text: str) -> None:
        self.json = {
            'role': 'title',
            'text': text.strip(),
        }

        self.register_style('default-title', {
            'fontName': self.get_str_setting('title_font'),
            'fontSize': self.get_int_setting('title_size'),
            'lineHeight': self.get_int_setting('title_line_height'),
            'textColor': self.get_str_setting('title_color'),
            'textAlignment': 'left',
        })

        self.set_default_layout()

    def set_default_layout(self) -> None:
        self.register_layout('title-layout', {
            'columnStart': self.body_column_start(),
            'columnSpan': self.get_int_setting('body_column_span'),
            'margin': {'top': 30, 'bottom': 0},
        })
