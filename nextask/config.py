"""
Configuration management for NexTask.
Loads config.yaml and exposes the values the application reads:
logging, the settings file, the web server and the onboarding slides.
"""

import yaml
import os
from typing import Any, Dict, List
import logging

from nextask.apps.onboarding.flow import Slide, slides_from_config


# Shipped inside the package as package data
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'data', 'config.yaml')


class Config:
    """
    Application configuration loaded from YAML
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        """
        Load configuration from YAML file

        Args:
            config_path: Path to config.yaml
        """
        self.logger = logging.getLogger(__name__)

        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            self._config = yaml.safe_load(f) or {}

        if not isinstance(self._config, dict):
            raise ValueError(f"Configuration must be a mapping: {config_path}")

        self._expand_paths(self._config)

        # Bad slide entries are dropped here rather than on first render
        self.slides: List[Slide] = slides_from_config(self.get('onboarding.slides'))

        self.logger.info(f"Configuration loaded from {config_path} ({len(self.slides)} onboarding slides)")

    def _expand_paths(self, config: Dict):
        """Recursively expand environment variables and ~ in string values"""
        for key, value in config.items():
            if isinstance(value, dict):
                self._expand_paths(value)
            elif isinstance(value, str) and ('$' in value or '~' in value):
                config[key] = os.path.expandvars(os.path.expanduser(value))

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            path: Configuration path (e.g., 'web.port')
            default: Default value if path doesn't exist

        Returns:
            Configuration value
        """
        value = self._config

        for key in path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def log_level(self) -> int:
        return getattr(logging, str(self.get('logging.level', 'INFO')).upper(), logging.INFO)

    @property
    def log_console(self) -> bool:
        return bool(self.get('logging.console', True))

    @property
    def log_file(self) -> str:
        return self.get('logging.file') or ''

    @property
    def settings_file(self) -> str:
        return self.get('settings.file') or 'settings.json'

    @property
    def web_enabled(self) -> bool:
        return bool(self.get('web.enabled', True))

    @property
    def web_host(self) -> str:
        return str(self.get('web.host', '127.0.0.1'))

    @property
    def web_port(self) -> int:
        return int(self.get('web.port', 5000))
