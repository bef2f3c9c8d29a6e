from __future__ import annotations

from pathlib import Path

import pytest

from mdhtml.converter_config import (
    ConverterConfig,
    ConverterConfigError,
    global_config_path,
    load_converter_config,
)


def test_global_config_path_prefers_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MDHTML_CONFIG", str(tmp_path / "custom.yaml"))
    assert global_config_path() == tmp_path / "custom.yaml"


def test_global_config_path_uses_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("MDHTML_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert global_config_path() == tmp_path / "mdhtml" / "config.yaml"


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    assert load_converter_config(tmp_path / "missing.yaml") == ConverterConfig()


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_converter_config(path) == ConverterConfig()


def test_config_values_are_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("max_heading_level: 6\nencoding: latin-1\n", encoding="utf-8")

    config = load_converter_config(path)
    assert config.max_heading_level == 6
    assert config.encoding == "latin-1"


def test_config_is_read_from_env_path(_isolated_config: Path) -> None:
    _isolated_config.write_text("max_heading_level: 3\n", encoding="utf-8")
    assert load_converter_config().max_heading_level == 3


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("max_heading_level: [\n", "Invalid YAML"),
        ("- a\n- b\n", "Expected mapping YAML"),
        ("max_heading_level: 0\n", "max_heading_level must be a positive integer"),
        ("max_heading_level: true\n", "max_heading_level must be a positive integer"),
        ("encoding: ''\n", "encoding must be a non-empty string"),
        ("encoding: not-a-codec\n", "Unknown encoding"),
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConverterConfigError, match=message):
        load_converter_config(path)


def test_cli_override_wins_over_config() -> None:
    config = ConverterConfig(max_heading_level=6)
    assert config.with_overrides(max_heading_level=2).max_heading_level == 2
    assert config.with_overrides().max_heading_level == 6


def test_unreadable_config_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConverterConfigError, match="Could not read config"):
        load_converter_config(tmp_path)
