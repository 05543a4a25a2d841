"""Configuration loading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from ..interfaces.config import ConsoleConfig
from .paths import default_config_path


def load_config(path: str | Path | None = None) -> ConsoleConfig:
    """Load console configuration from ``config.yml``.

    Args:
        path: Optional path override. Defaults to ``<project_root>/config.yml``;
            when that default file is absent the built-in defaults are used.

    Returns:
        A :class:`~askpath.interfaces.config.ConsoleConfig` populated from YAML.

    Raises:
        FileNotFoundError: An explicit ``path`` does not exist.
        ValueError: The file or one of its sections is not a mapping.
    """

    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found at {config_path}")
    else:
        config_path = default_config_path()
        if not config_path.exists():
            return ConsoleConfig()

    with config_path.open("r", encoding="utf-8") as handle:
        raw: Mapping[str, Any] = yaml.safe_load(handle) or {}

    if not isinstance(raw, Mapping):
        raise ValueError(f"config file {config_path} must be a mapping at the top level")
    console = _section(raw, "console")
    logging_section = _section(raw, "logging")
    log_file = logging_section.get("file")

    return ConsoleConfig(
        version=str(raw.get("version", "0.0.0")),
        color=bool(console.get("color", True)),
        icon=str(console.get("icon", "👉")),
        progress_style=str(console.get("progress_style", "braille-rotate")),
        log_level=str(logging_section.get("level", "WARNING")).upper(),
        log_file=Path(log_file) if log_file else None,
    )


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, Mapping):
        raise ValueError(
            f"config section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section
