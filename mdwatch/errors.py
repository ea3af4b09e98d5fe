"""Exception types raised by mdwatch.

Every fatal condition the watcher can hit is an exception rather than a
process exit, so embedding code and tests can observe and recover from it.
The CLI turns them into an ``ERROR:`` line and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class MdwatchError(Exception):
    """Base class for mdwatch errors."""


class ConfigurationError(MdwatchError):
    """The invocation or configuration file cannot be used as given."""


class InvalidDirectoryError(ConfigurationError):
    """An input or output directory is missing or not a directory.

    Attributes:
        path: The offending path.
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"A invalid directory is specified: {path}")


class TemplateLoadError(ConfigurationError):
    """The template could not be loaded or parsed.

    Attributes:
        template_path: Path of the template.
        reason: Human-readable description of the failure.
    """

    def __init__(self, template_path: Path, reason: str):
        self.template_path = template_path
        self.reason = reason
        super().__init__(reason)


class UnsupportedFileError(MdwatchError):
    """A write event arrived for a file that cannot be converted.

    Attributes:
        path: Path from the triggering event.
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)
