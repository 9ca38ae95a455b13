"""Settings view consulted by the component builders."""

import copy
import logging
from typing import Any, Dict, Iterator, Mapping, Optional

from exceptions import MissingSettingError

logger = logging.getLogger('news_format_exporter.settings')


DEFAULT_SETTINGS: Dict[str, Any] = {
    # Document layout
    'layout_columns': 7,
    'layout_width': 1024,
    'layout_margin': 30,
    'layout_gutter': 20,
    'language': 'en',

    # Body
    'body_orientation': 'left',
    'body_column_span': 7,
    'alignment_offset': 5,
    'body_font': 'AvenirNext-Regular',
    'body_size': 18,
    'body_line_height': 24,
    'body_color': '#4f4f4f',
    'body_link_color': '#428bca',

    # Dropcap (one-shot: reset to 'no' by the first body component)
    'initial_dropcap': 'yes',
    'dropcap_font': 'Georgia-Bold',
    'dropcap_color': '#4f4f4f',

    # Headings
    'header_font': 'AvenirNext-Bold',
    'header_color': '#333333',
    'header_line_height': 52,
    'header1_size': 48,
    'header2_size': 32,
    'header3_size': 24,
    'header4_size': 21,
    'header5_size': 18,
    'header6_size': 16,

    # Pull quotes
    'pullquote_font': 'AvenirNext-Bold',
    'pullquote_size': 48,
    'pullquote_line_height': 48,
    'pullquote_color': '#53585f',
    'pullquote_transform': 'uppercase',

    # Title
    'title_font': 'AvenirNext-Bold',
    'title_size': 48,
    'title_line_height': 52,
    'title_color': '#333333',

    'divider_color': '#e6e6e6',
    'use_remote_images': 'no',
}


class Settings:
    """Mutable key/value view over exporter settings.

    Reads go through ``get``/``get_int``/``get_str`` which raise
    ``MissingSettingError`` for absent or mistyped values. Each generation
    pass works on its own ``copy()``, so one-shot toggles such as
    ``initial_dropcap`` are consumed per pass.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None, use_defaults: bool = True):
        self._values: Dict[str, Any] = copy.deepcopy(DEFAULT_SETTINGS) if use_defaults else {}
        if values:
            self._values.update(values)

    def get(self, key: str) -> Any:
        if key not in self._values or self._values[key] is None:
            raise MissingSettingError(key)
        return self._values[key]

    def get_str(self, key: str) -> str:
        value = self.get(key)
        if not isinstance(value, str) or not value:
            raise MissingSettingError(key, f"must be a non-empty string, got {value!r}")
        return value

    def get_int(self, key: str) -> int:
        value = self.get(key)
        # bool is an int subclass but never a valid size
        if isinstance(value, bool):
            raise MissingSettingError(key, f"must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise MissingSettingError(key, f"must be an integer, got {value!r}")

    def set(self, key: str, value: Any) -> None:
        logger.debug(f"Setting {key} = {value!r}")
        self._values[key] = value

    def copy(self) -> 'Settings':
        return Settings(self._values, use_defaults=False)

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


__all__ = ['DEFAULT_SETTINGS', 'Settings']
