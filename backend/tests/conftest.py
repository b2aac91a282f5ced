from __future__ import annotations

from pathlib import Path

import pytest
from services.config_manager import CONFIG_DIR_ENV, MAX_LCS_CELLS_ENV, ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point the config singleton at a throwaway directory for each test"""
    config_dir = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    monkeypatch.delenv(MAX_LCS_CELLS_ENV, raising=False)
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()
