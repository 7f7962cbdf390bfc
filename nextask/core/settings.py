"""
Settings Management Module
Key-value persistence for values that outlive a session (the onboarding flag)
"""

import json
import os
import logging
import threading


HAS_ONBOARDED_KEY = 'hasOnboarded'


class SettingsManager:
    """Manages user settings persistence"""

    DEFAULT_SETTINGS = {}

    def __init__(self, settings_file='settings.json', logger=None):
        """
        Initialize settings manager

        Args:
            settings_file: Path to settings JSON file
            logger: Logger instance (optional)
        """
        self.settings_file = settings_file
        self.logger = logger or logging.getLogger(__name__)
        self.lock = threading.Lock()
        self.settings = self.load()

    def load(self):
        """Load settings from file, falling back to defaults"""
        if not os.path.exists(self.settings_file):
            return self.DEFAULT_SETTINGS.copy()

        try:
            with open(self.settings_file, 'r') as f:
                loaded_settings = json.load(f)
        except (OSError, ValueError) as e:
            self.logger.warning(f"Failed to load settings: {e}. Using defaults.")
            return self.DEFAULT_SETTINGS.copy()

        if not isinstance(loaded_settings, dict):
            self.logger.warning("Invalid settings format, using defaults")
            return self.DEFAULT_SETTINGS.copy()

        settings = self.DEFAULT_SETTINGS.copy()
        settings.update(loaded_settings)
        return settings

    def save(self) -> bool:
        """
        Save settings to file

        Returns:
            True if successful, False otherwise
        """
        try:
            directory = os.path.dirname(self.settings_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.settings_file, 'w') as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            self.logger.error(f"Failed to save settings: {e}")
            return False

        self.logger.debug(f"Settings saved to {self.settings_file}")
        return True

    def get(self, key, default=None):
        """
        Get a setting value

        Args:
            key: Setting key
            default: Default value if key doesn't exist

        Returns:
            Setting value or default
        """
        return self.settings.get(key, default)

    def set(self, key, value) -> bool:
        """
        Set a setting value and write it through to disk

        The in-memory value is rolled back when the write fails, so a
        later get() never reports a value that was not persisted.

        Returns:
            True if the value was persisted
        """
        with self.lock:
            missing = object()
            previous = self.settings.get(key, missing)
            self.settings[key] = value

            if self.save():
                self.logger.info(f"Setting stored: {key}")
                return True

            if previous is missing:
                del self.settings[key]
            else:
                self.settings[key] = previous
            return False
