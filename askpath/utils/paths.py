"""Utility helpers for resolving project paths."""

from __future__ import annotations

from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[2]


def project_root() -> Path:
    """Return the absolute path to the project root directory."""

    return _PROJECT_ROOT


def default_config_path() -> Path:
    """Return the path of the ``config.yml`` shipped at the project root."""

    return project_root() / "config.yml"
