from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    config_path = tmp_path_factory.mktemp("config") / "config.yaml"
    monkeypatch.setenv("MDHTML_CONFIG", str(config_path))
    return config_path
