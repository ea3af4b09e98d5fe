"""Configuration loading for mdwatch.

Defaults can be kept in an optional ``mdwatch.yaml`` next to where the
watcher is started; command line options override them.

Key pieces:
- load_config: Reads mdwatch.yaml and applies defaults.
- WatchConfig: Validated settings for one watch session.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .debounce import DEFAULT_DEBOUNCE_SECONDS
from .errors import ConfigurationError, InvalidDirectoryError

CONFIG_FILENAME = "mdwatch.yaml"

ON_UNSUPPORTED_CHOICES = ("error", "skip")

DEFAULT_CONFIG = {
    "input": ".",
    "output": ".",
    "template": "",
    "debounce": DEFAULT_DEBOUNCE_SECONDS,
    "on_unsupported": "error",
}


def load_config(project_root: Path) -> dict[str, Any]:
    """Load watcher defaults from mdwatch.yaml.

    Args:
        project_root: Directory that may contain mdwatch.yaml.

    Returns:
        Dictionary of configuration values, with defaults applied.

    Raises:
        ConfigurationError: The file exists but is not a YAML mapping.
    """
    config_path = project_root / CONFIG_FILENAME
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid {CONFIG_FILENAME}: {exc}") from exc
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"{CONFIG_FILENAME} must contain a mapping")
        unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigurationError(
                f"Unknown keys in {CONFIG_FILENAME}: {', '.join(unknown)}"
            )
        config.update(loaded)
    return config


@dataclass(frozen=True)
class WatchConfig:
    """Settings for one watch session.

    Attributes:
        input_dir: Directory to watch.
        output_dir: Directory that receives generated HTML.
        template_path: Optional template wrapping each page.
        debounce: Seconds a file must stay quiet before it is converted.
        on_unsupported: ``"error"`` aborts on non-Markdown writes, ``"skip"``
            logs them and carries on.
    """

    input_dir: Path
    output_dir: Path
    template_path: Path | None = None
    debounce: float = DEFAULT_DEBOUNCE_SECONDS
    on_unsupported: str = "error"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> WatchConfig:
        """Build a config from a mapping shaped like DEFAULT_CONFIG.

        Raises:
            ConfigurationError: A value has the wrong type or is out of range.
        """
        merged = {**DEFAULT_CONFIG, **values}
        input_dir = _path_value(merged, "input")
        output_dir = _path_value(merged, "output")
        template = _path_value(merged, "template", required=False)
        try:
            debounce = float(merged["debounce"])
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"debounce must be a number: {merged['debounce']!r}") from exc
        if debounce < 0:
            raise ConfigurationError("debounce must not be negative")
        on_unsupported = str(merged["on_unsupported"])
        if on_unsupported not in ON_UNSUPPORTED_CHOICES:
            raise ConfigurationError(
                f"on_unsupported must be one of {', '.join(ON_UNSUPPORTED_CHOICES)}"
            )
        return cls(
            input_dir=input_dir,
            output_dir=output_dir,
            template_path=template,
            debounce=debounce,
            on_unsupported=on_unsupported,
        )

    def validate(self) -> None:
        """Check that both directories exist.

        Raises:
            InvalidDirectoryError: Either directory is missing or not a directory.
        """
        for directory in (self.input_dir, self.output_dir):
            if not directory.is_dir():
                raise InvalidDirectoryError(directory)


def _path_value(values: Mapping[str, Any], key: str, required: bool = True) -> Path | None:
    """Read a path setting, rejecting blanks and non-text values.

    Raises:
        ConfigurationError: The value is missing (when required) or not a path.
    """
    value = values.get(key)
    if value is None or value == "":
        if required:
            raise ConfigurationError(f"{key} must name a directory")
        return None
    if not isinstance(value, (str, os.PathLike)):
        raise ConfigurationError(f"{key} must be a path, not {value!r}")
    return Path(value)
