from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from askpath.interfaces import ConsoleConfig
from askpath.utils import config as config_module
from askpath.utils.config import load_config
from askpath.utils.paths import default_config_path, project_root


def _write(path: Path, data: dict) -> Path:
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return path


def test_load_config_reads_every_section(tmp_path) -> None:
    path = _write(
        tmp_path / "config.yml",
        {
            "version": "2.0.0",
            "console": {"color": False, "icon": ">", "progress_style": "slashdot"},
            "logging": {"level": "debug", "file": str(tmp_path / "askpath.log")},
        },
    )

    config = load_config(path)

    assert config == ConsoleConfig(
        version="2.0.0",
        color=False,
        icon=">",
        progress_style="slashdot",
        log_level="DEBUG",
        log_file=tmp_path / "askpath.log",
    )


def test_missing_sections_fall_back_to_defaults(tmp_path) -> None:
    path = _write(tmp_path / "config.yml", {"version": "1.0"})

    config = load_config(path)

    assert config.icon == "👉"
    assert config.progress_style == "braille-rotate"
    assert config.log_file is None


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == ConsoleConfig()


def test_explicit_missing_path_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yml")


def test_missing_default_file_gives_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "default_config_path", lambda: tmp_path / "absent.yml")

    assert load_config() == ConsoleConfig()


def test_shipped_config_loads() -> None:
    config = load_config(Path(__file__).resolve().parents[1] / "config.yml")

    assert config.version == "1.1.1"
    assert config.log_level == "WARNING"


def test_unknown_progress_style_is_rejected(tmp_path) -> None:
    path = _write(tmp_path / "config.yml", {"console": {"progress_style": "spinner"}})

    with pytest.raises(ValueError, match="progress_style"):
        load_config(path)


@pytest.mark.parametrize(
    "data, section",
    [
        ({"console": True}, "console"),
        ({"console": "plain"}, "console"),
        ({"logging": ["debug"]}, "logging"),
    ],
)
def test_section_that_is_not_a_mapping_is_rejected(tmp_path, data, section) -> None:
    path = _write(tmp_path / "config.yml", data)

    with pytest.raises(ValueError, match=f"'{section}' must be a mapping"):
        load_config(path)


def test_top_level_list_is_rejected(tmp_path) -> None:
    path = tmp_path / "config.yml"
    path.write_text("- version\n- 1.0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_config(path)


def test_default_config_path_sits_at_project_root() -> None:
    assert default_config_path() == project_root() / "config.yml"
    assert default_config_path().parent == Path(__file__).resolve().parents[1]
