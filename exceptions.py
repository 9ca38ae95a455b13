"""Exception hierarchy for the news format exporter.

Every error raised while generating a document is fatal to the current
generation pass: no partial document is ever returned.
"""


class ExporterError(Exception):
    """Base exception for export-related errors."""
    pass


class MalformedContentError(ExporterError):
    """Exception for markup that cannot be split or built into a component."""
    pass


class MissingSettingError(ExporterError):
    """Exception for a required setting that is absent or of the wrong type."""

    def __init__(self, key: str, reason: str = 'is not set'):
        self.key = key
        super().__init__(f"Setting '{key}' {reason}")


class ConversionError(ExporterError):
    """Exception for failures of the HTML to Markdown converter."""
    pass


__all__ = [
    'ExporterError',
    'MalformedContentError',
    'MissingSettingError',
    'ConversionError'
]
