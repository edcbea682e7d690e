"""Configuration management for the Duke CLI application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .task_list import MAX_STORED_TASKS
from .ui import DEFAULT_DIVIDER_WIDTH

logger = logging.getLogger(__name__)


@dataclass
class ConfigModel:
    """Global configuration model for Duke CLI."""

    # File paths
    data_dir: str = "~/.duke"
    data_file: str = "tasks.txt"

    # Behavior settings
    persist: bool = True  # Load tasks at startup and save after every change
    max_tasks: int = MAX_STORED_TASKS

    # Display preferences
    divider_width: int = DEFAULT_DIVIDER_WIDTH
    no_color: bool = False

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir)
        if self.max_tasks < 1:
            raise ValueError(f"max_tasks must be positive, got {self.max_tasks}")
        if self.divider_width < 0:
            raise ValueError(f"divider_width cannot be negative, got {self.divider_width}")

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "data_file": self.data_file,
            "persist": self.persist,
            "max_tasks": self.max_tasks,
            "divider_width": self.divider_width,
            "no_color": self.no_color,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a YAML mapping")

        known = {f.name for f in fields(cls)}
        for key in set(data) - known:
            logger.warning("Ignoring unknown configuration key: %s", key)

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"

    def get_data_path(self) -> Path:
        """Get the path of the saved task file."""
        return Path(self.data_dir) / self.data_file


class Config:
    """Configuration manager for Duke CLI."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or create default."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    config = ConfigModel.from_yaml(f.read())
                logger.info("Loaded configuration from %s", config_path)
            except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
                logger.warning("Failed to load config from %s: %s. Using default configuration.", config_path, e)
        else:
            cls.save(config, config_path)
            logger.info("Created default configuration at %s", config_path)

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, 'w', encoding='utf-8') as f:
                f.write(config.to_yaml())
            logger.info("Configuration saved to %s", config_path)
        except OSError as e:
            logger.error("Failed to save config to %s: %s", config_path, e)

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, discarding any cached instance."""
    return Config.reload(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
