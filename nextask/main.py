"""
NexTask - Main Application
Onboarding slides followed by the To-Do list screen
"""

import sys
import os
import logging
import signal

from nextask.config import Config, DEFAULT_CONFIG_PATH
from nextask.core.settings import SettingsManager
from nextask.ui.navigation import NavigationManager, Screen
from nextask.apps.onboarding import OnboardingFlow
from nextask.apps.todo import TodoManager, HomeScreen
from nextask.web.webserver import NexTaskWebServer


class NexTaskApp:
    """
    Main NexTask application
    """

    def __init__(self, config_path: str):
        """
        Initialize application

        Args:
            config_path: Path to config.yaml
        """
        self.config = Config(config_path)

        self._setup_logging()
        self.logger = logging.getLogger(__name__)
        self.logger.info("=" * 50)
        self.logger.info("NexTask starting...")
        self.logger.info("=" * 50)

        self.settings = SettingsManager(self.config.settings_file)
        self.navigation = NavigationManager(Screen.ONBOARDING)

        self.onboarding = OnboardingFlow(
            self.settings,
            self.navigation,
            self.config.slides
        )

        # Task state lives for this session only
        self.todo_manager = TodoManager()
        self.home_screen = HomeScreen(self.todo_manager)

        self.running = False
        self.web_server = None

    def _setup_logging(self):
        """Configure logging"""
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        handlers = []

        # Console handler
        if self.config.log_console:
            handlers.append(logging.StreamHandler())

        # File handler
        log_file = self.config.log_file
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        logging.basicConfig(
            level=self.config.log_level,
            format=log_format,
            handlers=handlers
        )

    def start(self):
        """Decide the first screen and serve the API until interrupted"""
        if self.onboarding.check_onboarding():
            self.logger.info("Already onboarded, opening tasks")
        else:
            self.logger.info(f"Showing onboarding ({len(self.onboarding.slides)} slides)")

        self.running = True

        if not self.config.web_enabled:
            self.logger.info("Web interface disabled, nothing to serve")
            return

        try:
            host = self.config.web_host
            port = self.config.web_port
            self.web_server = NexTaskWebServer(self, host, port)
            self.web_server.run()
            self.logger.info(f"Web interface available at http://{host}:{port}")
            self.logger.info("Press Ctrl+C to exit")

            signal.signal(signal.SIGINT, self._signal_handler)
            signal.signal(signal.SIGTERM, self._signal_handler)
            signal.pause()

        except KeyboardInterrupt:
            self.logger.info("Received interrupt signal")
            self.stop()

    def _signal_handler(self, signum, frame):
        """Handle shutdown signals"""
        self.logger.info(f"Received signal {signum}")
        self.stop()
        sys.exit(0)

    def stop(self):
        """Clean shutdown"""
        self.logger.info("Shutting down...")
        self.running = False
        self.home_screen.close()
        self.logger.info("NexTask stopped")


def main():
    """Main entry point"""
    if len(sys.argv) > 1:
        config_path = sys.argv[1]
    else:
        config_path = os.environ.get('NEXTASK_CONFIG', DEFAULT_CONFIG_PATH)

    if not os.path.exists(config_path):
        print(f"ERROR: Configuration file not found: {config_path}")
        print(f"Usage: {os.path.basename(sys.argv[0])} [config_path]")
        sys.exit(1)

    app = NexTaskApp(config_path)
    app.start()


if __name__ == '__main__':
    main()
