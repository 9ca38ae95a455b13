"""Tests for configuration loading, merging and validation."""

from argparse import Namespace

import pytest

from config_loader import ConfigLoader, get_nested


def write_config(tmp_path, text):
    path = tmp_path / 'config.yaml'
    path.write_text(text, encoding='utf-8')
    return str(path)


def cli_args(**kwargs):
    defaults = {'log_file': None, 'log_level': None, 'set': None}
    defaults.update(kwargs)
    return Namespace(**defaults)


class TestLoad:
    def test_load_yaml(self, tmp_path):
        path = write_config(tmp_path, 'settings:\n  body_orientation: right\n  layout_columns: 9\n')

        config = ConfigLoader.load(path)

        assert config == {'settings': {'body_orientation': 'right', 'layout_columns': 9}}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader.load(str(tmp_path / 'nope.yaml'))

    def test_empty_file(self, tmp_path):
        assert ConfigLoader.load(write_config(tmp_path, '')) == {}

    def test_non_mapping_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            ConfigLoader.load(write_config(tmp_path, '- a\n- b\n'))

    def test_env_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv('ARTICLE_FONT', 'Georgia')
        path = write_config(tmp_path, 'settings:\n  body_font: ${ARTICLE_FONT}\n')

        config = ConfigLoader.load(path)

        assert config['settings']['body_font'] == 'Georgia'

    def test_unset_env_var_fails_validation(self, tmp_path, monkeypatch):
        monkeypatch.delenv('ARTICLE_FONT_MISSING', raising=False)
        path = write_config(tmp_path, 'settings:\n  body_font: ${ARTICLE_FONT_MISSING}\n')

        config = ConfigLoader.load(path)

        with pytest.raises(ValueError, match='ARTICLE_FONT_MISSING'):
            ConfigLoader.validate(config)


class TestValidate:
    def test_defaults_are_valid(self):
        ConfigLoader.validate({})

    @pytest.mark.parametrize('settings', [
        {'no_such_setting': 1},
        {'layout_columns': 'seven'},
        {'body_size': -1},
        {'layout_columns': True},
        {'layout_columns': 0, 'body_column_span': 0},
        {'body_orientation': 'diagonal'},
        {'initial_dropcap': 'maybe'},
        {'use_remote_images': 1},
        {'layout_columns': 5, 'body_column_span': 6},
    ])
    def test_invalid_settings(self, settings):
        with pytest.raises(ValueError):
            ConfigLoader.validate({'settings': settings})

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            ConfigLoader.validate({'logging': {'level': 'LOUD'}})


class TestMergeWithArgs:
    def test_set_overrides(self):
        config = {'settings': {'body_size': 18}}

        merged = ConfigLoader.merge_with_args(
            config, cli_args(set=['body_size=20', 'body_orientation=center'])
        )

        assert merged['settings'] == {'body_size': 20, 'body_orientation': 'center'}
        assert config['settings'] == {'body_size': 18}

    def test_yes_no_toggles_stay_strings(self):
        merged = ConfigLoader.merge_with_args(
            {'settings': {'use_remote_images': True}}, cli_args(set=['initial_dropcap=no'])
        )

        assert merged['settings'] == {'use_remote_images': 'yes', 'initial_dropcap': 'no'}
        ConfigLoader.validate(merged)

    def test_color_value_kept_as_text(self):
        merged = ConfigLoader.merge_with_args({}, cli_args(set=['body_color=#222222']))

        assert merged['settings']['body_color'] == '#222222'

    def test_logging_args(self):
        merged = ConfigLoader.merge_with_args(
            {'logging': {'level': 'INFO'}}, cli_args(log_file='out.log', log_level='DEBUG')
        )

        assert merged['logging'] == {'level': 'DEBUG', 'file': 'out.log'}

    def test_build_settings(self):
        settings = ConfigLoader.build_settings({'settings': {'layout_columns': 10}})

        assert settings.get_int('layout_columns') == 10
        assert settings.get_int('body_column_span') == 7


def test_get_nested():
    config = {'settings': {'layout': {'columns': 7}}}

    assert get_nested(config, 'settings.layout.columns') == 7
    assert get_nested(config, 'settings.missing', 'fallback') == 'fallback'
    assert get_nested(config, 'settings.layout.columns.deeper') is None
