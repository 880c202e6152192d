# geocode/config/config.py

import copy
import logging
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from . import defaults

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'GEOCODE_CONFIG'


class Config:
    """Configuration manager with YAML override support."""

    def __init__(self, config_file: Optional[Path] = None):
        self.settings = self.load_defaults()

        # Auto-discover config.yml with fallback locations
        if config_file is None:
            config_file = self._find_config_file()

        if config_file is not None:
            config_file = Path(config_file)
            if config_file.exists():
                try:
                    self._load_yaml_config(config_file)
                    logger.debug(f"Loaded configuration from {config_file}")
                except (OSError, yaml.YAMLError) as e:
                    logger.warning(f"Config file loading failed: {e} - using defaults")
            else:
                logger.warning(f"Config file {config_file} not found - using defaults")

    def _find_config_file(self) -> Optional[Path]:
        """Find config.yml with multiple fallback locations."""
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)

        project_root = defaults.PROJECT_ROOT

        potential_locations = [
            project_root / 'config.yml',
            project_root / 'config' / 'config.yml',
            Path.cwd() / 'config.yml',
            Path.home() / '.geocode' / 'config.yml',
        ]

        for location in potential_locations:
            if location.exists() and location.is_file():
                return location

        return None

    def load_defaults(self) -> Dict[str, Any]:
        """Load default configuration settings."""
        return {
            'geocoding': copy.deepcopy(defaults.GEOCODING),
            'logging': copy.deepcopy(defaults.LOGGING),
        }

    def _load_yaml_config(self, config_file: Path):
        """Load and merge configuration from a YAML file."""
        with open(config_file, 'r') as file:
            yaml_config = yaml.safe_load(file)
            if yaml_config:
                if not isinstance(yaml_config, dict):
                    raise yaml.YAMLError(
                        f"expected a mapping at the top of {config_file}, "
                        f"got {type(yaml_config).__name__}"
                    )
                self._deep_merge(self.settings, yaml_config)

    def _deep_merge(self, base: dict, override: dict):
        """Deep merge override into base dictionary."""
        for key, value in override.items():
            if isinstance(value, dict) and key in base and isinstance(base[key], dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split(".")
        value = self.settings

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    @property
    def geocoding(self) -> Dict[str, Any]:
        return self.settings['geocoding']

    @property
    def logging(self) -> Dict[str, Any]:
        return self.settings['logging']


# Global configuration instance
config = Config()
