"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from .models import ConfigModel

DEFAULT_CONFIG_NAME = "blogindex.yaml"
CONFIG_ENV_VAR = "BLOGINDEX_CONFIG"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            config_path = Path(env_path) if env_path else Path.cwd() / DEFAULT_CONFIG_NAME
        self.config_path = Path(config_path)
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no file exists."""
        if self._config is None:
            if self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                self._config = ConfigModel()
        return self._config

    @property
    def base_dir(self) -> Path:
        """Directory that relative config paths resolve against."""
        return self.config_path.parent

    def _resolve(self, value: str) -> Path:
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    @property
    def articles_root(self) -> Path:
        """Get articles root path. Not created if missing."""
        return self._resolve(self.config.articles_root)

    @property
    def output_path(self) -> Path:
        """Get output artifact path."""
        return self._resolve(self.config.output.path)


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        if not isinstance(config_data, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_path}")

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
