"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from services.diff_generator import DEFAULT_MAX_LCS_CELLS

logger = logging.getLogger("resume_diff.config")

CONFIG_DIR_ENV = "RESUME_DIFF_CONFIG_DIR"
MAX_LCS_CELLS_ENV = "RESUME_DIFF_MAX_LCS_CELLS"


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        # Priority: explicit argument, env var, home directory, temp directory
        config_dir = config_dir or os.environ.get(CONFIG_DIR_ENV)
        if not config_dir:
            config_dir = os.path.expanduser("~/.resume_diff")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)
            tmp_dir = Path(tempfile.gettempdir()) / "resume_diff"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.info("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config: %s", e)
            return config

        for section, values in stored.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section] = {**config[section], **values}
            else:
                config[section] = values
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {"maxLcsCells": DEFAULT_MAX_LCS_CELLS},
            "logging": {"level": "INFO"},
            "server": {"host": "0.0.0.0", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        try:
            self._config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

        logger.info("Configuration saved to %s", self._config_file)

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def max_lcs_cells(self) -> int:
        """Token-pair threshold for the LCS engine; the env var wins over the file"""
        override = os.environ.get(MAX_LCS_CELLS_ENV)
        if override:
            try:
                return int(override)
            except ValueError:
                logger.warning("Ignoring non-integer %s=%r", MAX_LCS_CELLS_ENV, override)
        return int(self._config.get("diff", {}).get("maxLcsCells", DEFAULT_MAX_LCS_CELLS))

    def log_level(self) -> str:
        return str(self._config.get("logging", {}).get("level", "INFO")).upper()
