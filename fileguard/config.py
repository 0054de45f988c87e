#!/usr/bin/env python3
"""
fileguard Configuration Management
"""

import copy
import os
from pathlib import Path
from typing import Any

from .config_store import ConfigStore
from .core.codecs import TextEncoding
from .core.constants import DEFAULT_SECTOR_SIZE
from .utils.logger import get_logger

logger = get_logger(__name__)


class Config:
    """Configuration manager for fileguard"""

    DEFAULT_CONFIG = {
        "general": {"verbose": False},
        "accessor": {
            "default_encoding": "ascii",
            "sector_size": DEFAULT_SECTOR_SIZE,
        },
        "memory": {"max_buffer_mb": 512},
        "logging": {"level": "WARNING"},
    }

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path or self._get_default_config_path()

        if os.path.exists(self.config_path):
            self.load_config()

    def _get_default_config_path(self) -> str:
        """Get default configuration file path"""
        return str(Path.home() / ".fileguard" / "config.json")

    def load_config(self):
        """Load configuration from file"""
        user_config = ConfigStore.load(self.config_path)
        if user_config is not None:
            self._merge_config(user_config)

    def save_config(self) -> bool:
        """Save configuration to file"""
        return ConfigStore.save(self.config_path, self.config)

    def _merge_config(self, user_config: dict[str, Any]):
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: str | None = None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value):
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def get_default_encoding(self) -> TextEncoding:
        """Get the encoding used when none is given"""
        name = self.get("accessor", "default_encoding", "ascii")
        try:
            return TextEncoding.from_name(name)
        except ValueError:
            logger.warning(f"Unsupported default_encoding '{name}', using ascii")
            return TextEncoding.ASCII

    def get_sector_size(self) -> int:
        """Get the sector size used by align when none is given"""
        value = self.get("accessor", "sector_size", DEFAULT_SECTOR_SIZE)
        try:
            sector = int(value)
        except (TypeError, ValueError):
            sector = 0
        if sector <= 0:
            logger.warning(f"Invalid sector_size '{value}', using {DEFAULT_SECTOR_SIZE}")
            return DEFAULT_SECTOR_SIZE
        return sector

    def get_max_buffer_mb(self) -> int:
        """Get the largest buffer the accessor may allocate, in MB"""
        return int(self.get("memory", "max_buffer_mb", 512))

    def get_log_level(self) -> str:
        return str(self.get("logging", "level", "WARNING"))

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.config)

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]
