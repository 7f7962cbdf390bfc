"""
Navigation state machine for UI screens.
"""

from enum import Enum
from typing import Optional
import logging


class Screen(Enum):
    """Available screens in the application"""
    ONBOARDING = "onboarding"
    HOME = "home"


class NavigationManager:
    """
    Manage UI navigation and state transitions
    """

    def __init__(self, initial_screen: Screen = Screen.ONBOARDING):
        """
        Initialize navigation manager

        Args:
            initial_screen: Starting screen
        """
        self.logger = logging.getLogger(__name__)
        self.current_screen = initial_screen
        self.previous_screen: Optional[Screen] = None

        self.logger.info(f"Navigation initialized at {self.current_screen}")

    def navigate_to(self, screen: Screen):
        """
        Navigate to a new screen

        Args:
            screen: Target screen
        """
        self.previous_screen = self.current_screen
        self.current_screen = screen

        self.logger.info(f"Navigated from {self.previous_screen.value} to {self.current_screen.value}")

    def is_on_screen(self, screen: Screen) -> bool:
        """
        Check if currently on a specific screen

        Args:
            screen: Screen to check

        Returns:
            True if on specified screen
        """
        return self.current_screen == screen
