"""
Configuration Manager - Handle diff backend settings persistence
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "report": {
        "title": "Text File Diff Result",
        "timestampFormat": "%Y-%m-%d %H:%M:%S",
        "downloadFilename": "diff_result.html",
    },
    "limits": {
        # (m+1)*(n+1) LCS table cells; 0 disables the check
        "maxTableCells": 25_000_000,
    },
    "server": {"host": "0.0.0.0", "port": 8000},
}


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1st choice: environment variable
        config_dir = os.environ.get("TEXT_DIFF_CONFIG_DIR")

        # 2nd choice: ~/.text_diff
        if not config_dir:
            config_dir = os.path.expanduser("~/.text_diff")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            print(f"Warning: Cannot write to {config_dir}: {e}")
            self._config_file = None

        # Fallback: temp dir when the preferred location is not writable
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "text_diff"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            print(f"Using temporary config path: {self._config_file}")

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
        """Load configuration from file, filling gaps from the defaults"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file, encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"Error loading config: {e}")
            return self._default_config()

        if not isinstance(stored, dict):
            print(f"Error loading config: expected an object in {self._config_file}")
            return self._default_config()

        return self._merge(self._default_config(), stored)

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return copy.deepcopy(DEFAULT_CONFIG)

    @staticmethod
    def _same_type(default: Any, value: Any) -> bool:
        if isinstance(default, bool) or isinstance(value, bool):
            return type(default) is type(value)
        return isinstance(value, type(default))

    @classmethod
    def _merge(cls, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Overlay stored values on base; values of the wrong type keep the base value"""
        for key, value in override.items():
            if key not in base:
                base[key] = value
            elif isinstance(base[key], dict):
                if not isinstance(value, dict):
                    print(f"Warning: Ignoring config '{key}': expected an object")
                    continue
                section = dict(base[key])
                for name, item in value.items():
                    if name in section and not cls._same_type(section[name], item):
                        print(
                            f"Warning: Ignoring config '{key}.{name}': expected "
                            f"{type(section[name]).__name__}, got {type(item).__name__}"
                        )
                        continue
                    section[name] = item
                base[key] = section
            elif not cls._same_type(base[key], value):
                print(f"Warning: Ignoring config '{key}': expected {type(base[key]).__name__}")
            else:
                base[key] = value
        return base

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config = self._merge(self._config, config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")
