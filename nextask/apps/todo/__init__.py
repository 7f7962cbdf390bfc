"""
To-Do List App Module

Provides the task screen for NexTask including:
- TodoManager: in-memory lists and tasks
- HomeScreen: view state of the task screen
- Flask Blueprint: REST API routes
"""

from .models import Task, TodoList
from .manager import TodoManager
from .screen import HomeScreen
from .routes import todo_bp, init_routes

__all__ = ['Task', 'TodoList', 'TodoManager', 'HomeScreen', 'todo_bp', 'init_routes']
