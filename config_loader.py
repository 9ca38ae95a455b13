"""YAML configuration for the exporter: loading, ${VAR} substitution, CLI overrides and validation."""

import copy
import os
import re
from typing import Any, Dict

import yaml

from settings import DEFAULT_SETTINGS, Settings


class ConfigLoader:
    """
    Loads and checks exporter configuration files.

    A configuration file has two sections::

        settings:       # flat exporter settings, see settings.DEFAULT_SETTINGS
          body_orientation: center
        logging:
          level: INFO
          file: export.log
    """

    ENV_VAR_PATTERN = re.compile(r'\$\{([A-Za-z_][A-Za-z0-9_]*)\}')

    ORIENTATIONS = ['left', 'right', 'center']
    TOGGLES = ['yes', 'no']
    TOGGLE_SETTINGS = ['initial_dropcap', 'use_remote_images']
    INTEGER_SETTINGS = [
        'layout_columns', 'layout_width', 'layout_margin', 'layout_gutter',
        'body_column_span', 'alignment_offset', 'body_size', 'body_line_height',
        'header_line_height', 'pullquote_size', 'pullquote_line_height',
        'title_size', 'title_line_height',
    ] + [f'header{level}_size' for level in range(1, 7)]
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    @classmethod
    def load(cls, config_path: str) -> Dict[str, Any]:
        """
        Read a YAML configuration file.

        Args:
            config_path: Path to the YAML file

        Returns:
            Configuration dictionary with environment variables substituted

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the top level is not a mapping
            yaml.YAMLError: If the file is not valid YAML
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{config_path} must contain a mapping at the top level")

        return cls._substitute(data)

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> None:
        """
        Check setting names, types and ranges.

        Raises:
            ValueError: On the first problem found
        """
        settings = get_nested(config, 'settings', {})
        if not isinstance(settings, dict):
            raise ValueError("settings must be a mapping of setting names to values")

        unknown = sorted(key for key in settings if key not in DEFAULT_SETTINGS)
        if unknown:
            raise ValueError(f"Unknown settings: {unknown}")

        for key, value in settings.items():
            cls._check_substituted(f'settings.{key}', value)

        for key in cls.INTEGER_SETTINGS:
            value = settings.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"settings.{key} must be a non-negative integer")

        merged = dict(DEFAULT_SETTINGS, **settings)

        if merged['body_orientation'] not in cls.ORIENTATIONS:
            raise ValueError(f"settings.body_orientation must be one of: {cls.ORIENTATIONS}")

        for key in cls.TOGGLE_SETTINGS:
            if merged[key] not in cls.TOGGLES:
                raise ValueError(f"settings.{key} must be 'yes' or 'no'")

        if merged['layout_columns'] < 1:
            raise ValueError("settings.layout_columns must be a positive integer")

        if merged['body_column_span'] > merged['layout_columns']:
            raise ValueError("settings.body_column_span cannot exceed settings.layout_columns")

        level = get_nested(config, 'logging.level')
        if level is not None and str(level).upper() not in cls.LOG_LEVELS:
            raise ValueError(f"logging.level must be one of: {cls.LOG_LEVELS}")

    @classmethod
    def merge_with_args(cls, config: Dict[str, Any], args) -> Dict[str, Any]:
        """
        Apply command line overrides on top of a loaded configuration.

        Args:
            config: Loaded configuration (left untouched)
            args: Parsed arguments; ``set`` holds ``KEY=VALUE`` strings

        Returns:
            New configuration dictionary
        """
        merged = copy.deepcopy(config)
        merged['settings'] = merged.get('settings') or {}
        merged['logging'] = merged.get('logging') or {}

        if getattr(args, 'log_file', None):
            merged['logging']['file'] = args.log_file

        if getattr(args, 'log_level', None):
            merged['logging']['level'] = args.log_level

        for assignment in getattr(args, 'set', None) or []:
            key, _, value = assignment.partition('=')
            merged['settings'][key.strip()] = cls._parse_cli_value(value)

        if isinstance(merged['settings'], dict):
            cls._normalize_toggles(merged['settings'])

        return merged

    @classmethod
    def build_settings(cls, config: Dict[str, Any]) -> Settings:
        """Create the settings view for a validated configuration."""
        return Settings(get_nested(config, 'settings', {}))

    @staticmethod
    def _parse_cli_value(value: str) -> Any:
        """Read a --set value as a YAML scalar, keeping the raw text when YAML yields nothing."""
        try:
            parsed = yaml.safe_load(value) if value else None
        except yaml.YAMLError:
            return value
        # '#4f4f4f' is a YAML comment
        return value if parsed is None else parsed

    @classmethod
    def _normalize_toggles(cls, settings: Dict[str, Any]) -> None:
        """YAML reads bare yes/no as booleans; toggles are stored as strings."""
        for key in cls.TOGGLE_SETTINGS:
            if isinstance(settings.get(key), bool):
                settings[key] = 'yes' if settings[key] else 'no'

    @classmethod
    def _substitute(cls, data: Any) -> Any:
        """Replace ${VAR} with the environment value, leaving unknown variables in place."""
        if isinstance(data, dict):
            return {key: cls._substitute(value) for key, value in data.items()}
        if isinstance(data, list):
            return [cls._substitute(item) for item in data]
        if isinstance(data, str):
            return cls.ENV_VAR_PATTERN.sub(
                lambda match: os.environ.get(match.group(1), match.group(0)), data
            )
        return data

    @classmethod
    def _check_substituted(cls, field: str, value: Any) -> None:
        if not isinstance(value, str):
            return
        match = cls.ENV_VAR_PATTERN.search(value)
        if match:
            raise ValueError(
                f"Configuration field '{field}' uses unset environment variable "
                f"{match.group(1)}. Set it or provide a value in the config file."
            )


def get_nested(config: dict, path: str, default: Any = None) -> Any:
    """
    Look up a dotted path such as ``logging.level``.

    Returns:
        The value, or ``default`` when any segment is missing
    """
    value = config
    for key in path.split('.'):
        if not isinstance(value, dict) or key not in value:
            return default
        value = value[key]
    return value


__all__ = ['ConfigLoader', 'get_nested']
