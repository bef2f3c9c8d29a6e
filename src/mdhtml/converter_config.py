from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml


class ConverterConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class ConverterConfig:
    max_heading_level: int | None = None
    encoding: str = "utf-8"

    def with_overrides(self, *, max_heading_level: int | None = None) -> ConverterConfig:
        if max_heading_level is None:
            return self
        return replace(self, max_heading_level=max_heading_level)


_DEFAULT_CONFIG = ConverterConfig()


def global_config_path() -> Path:
    override = os.environ.get("MDHTML_CONFIG")
    if override:
        return Path(override).expanduser()
    root = os.environ.get("XDG_CONFIG_HOME")
    if root:
        base = Path(root)
    else:
        base = Path.home() / ".config"
    return base / "mdhtml" / "config.yaml"


def load_converter_config(path: Path | None = None) -> ConverterConfig:
    config_path = path if path is not None else global_config_path()
    data = _load_yaml_mapping(config_path)
    if not data:
        return _DEFAULT_CONFIG

    source = str(config_path)
    return ConverterConfig(
        max_heading_level=_parse_max_heading_level(data.get("max_heading_level"), source=source),
        encoding=_parse_encoding(data.get("encoding"), source=source),
    )


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConverterConfigError(f"Could not read config at {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConverterConfigError(f"Invalid YAML at {path}: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, Mapping):
        raise ConverterConfigError(f"Expected mapping YAML at {path}")
    return dict(loaded)


def _parse_max_heading_level(value: object, *, source: str) -> int | None:
    if value is None:
        return _DEFAULT_CONFIG.max_heading_level
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConverterConfigError(f"max_heading_level must be a positive integer in {source}")
    return value


def _parse_encoding(value: object, *, source: str) -> str:
    if value is None:
        return _DEFAULT_CONFIG.encoding
    if not isinstance(value, str) or not value.strip():
        raise ConverterConfigError(f"encoding must be a non-empty string in {source}")
    try:
        codecs.lookup(value.strip())
    except LookupError as exc:
        raise ConverterConfigError(f"Unknown encoding {value!r} in {source}") from exc
    return value.strip()
