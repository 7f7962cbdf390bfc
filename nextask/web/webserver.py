"""
Flask web server for NexTask.
Serves the JSON API for:
- Onboarding slides (continue / skip / swipe)
- To-Do lists and tasks
"""

from flask import Flask, jsonify
import logging
import threading

from nextask.apps.onboarding import routes as onboarding_routes
from nextask.apps.todo import routes as todo_routes


class NexTaskWebServer:
    """
    Web server exposing the application state over HTTP
    """

    def __init__(self, app_instance, host: str = '127.0.0.1', port: int = 5000):
        """
        Initialize web server

        Args:
            app_instance: NexTaskApp instance whose components are served
            host: Interface to bind
            port: Port to run server on
        """
        self.logger = logging.getLogger(__name__)
        self.app_instance = app_instance
        self.host = host
        self.port = port
        self.flask_app = Flask(__name__)

        onboarding_routes.init_routes(app_instance.onboarding)
        todo_routes.init_routes(app_instance.todo_manager, app_instance.home_screen)
        self.flask_app.register_blueprint(onboarding_routes.onboarding_bp)
        self.flask_app.register_blueprint(todo_routes.todo_bp)

        self._setup_routes()

    def _setup_routes(self):
        """Setup Flask routes"""

        @self.flask_app.route('/api/screen')
        def screen():
            """Screen currently shown"""
            return jsonify({'screen': self.app_instance.navigation.current_screen.value})

        @self.flask_app.errorhandler(404)
        def not_found(error):
            return jsonify({'error': 'Not found'}), 404

    def run(self):
        """Start the web server in a separate thread"""
        thread = threading.Thread(target=self._run_server, daemon=True)
        thread.start()
        self.logger.info(f"Web server started on {self.host}:{self.port}")

    def _run_server(self):
        """Internal method to run Flask server"""
        self.flask_app.run(host=self.host, port=self.port, debug=False, use_reloader=False)
