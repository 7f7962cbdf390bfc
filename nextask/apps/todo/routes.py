"""
To-Do List API Routes

Flask Blueprint for To-Do list REST API endpoints.
"""

import logging
from flask import Blueprint, jsonify, request

# Create Blueprint
todo_bp = Blueprint('todo', __name__)
logger = logging.getLogger(__name__)

# Set by the web server
todo_manager = None
home_screen = None


def init_routes(manager, screen):
    """
    Initialize routes with the session's TodoManager and HomeScreen

    Args:
        manager: TodoManager instance
        screen: HomeScreen bound to the same manager
    """
    global todo_manager, home_screen
    todo_manager = manager
    home_screen = screen
    logger.info("Initialized To-Do routes")


def _list_payload(todo_list):
    unchecked, checked = todo_manager.partition(todo_list)
    payload = todo_list.to_dict()
    payload['unchecked'] = [task.to_dict() for task in unchecked]
    payload['checked'] = [task.to_dict() for task in checked]
    payload['mass_checked'] = todo_manager.is_mass_checked(todo_list.id)
    payload['completed'] = todo_manager.is_completed(todo_list)
    return payload


@todo_bp.route('/api/todos', methods=['GET'])
def get_todos():
    """Get the home screen view of all todos"""
    try:
        return jsonify(home_screen.render())
    except Exception as e:
        logger.error(f"Failed to render todos: {e}")
        return jsonify({'error': str(e)}), 500


@todo_bp.route('/api/todos', methods=['POST'])
def add_todo():
    """Create a todo with a title and its initial tasks"""
    try:
        data = request.get_json(silent=True) or {}
        title = data.get('title', '')
        tasks = data.get('tasks', [])

        if not isinstance(title, str) or not title.strip():
            return jsonify({'error': 'Todo title is required'}), 400
        if not isinstance(tasks, list) or not all(isinstance(text, str) for text in tasks):
            return jsonify({'error': 'Tasks must be a list of strings'}), 400

        todo_list = todo_manager.create_list(title, tasks)
        if todo_list is None:
            return jsonify({'error': 'At least one task is required'}), 400

        return jsonify({'success': True, 'todo': _list_payload(todo_list)}), 201

    except Exception as e:
        logger.error(f"Failed to add todo: {e}")
        return jsonify({'error': str(e)}), 500


@todo_bp.route('/api/todos/<list_id>', methods=['GET'])
def get_todo(list_id):
    """Get one todo with its tasks split into unchecked and checked"""
    todo_list = todo_manager.get_list(list_id)
    if todo_list is None:
        return jsonify({'error': 'Todo not found'}), 404

    return jsonify(_list_payload(todo_list))


@todo_bp.route('/api/todos/<list_id>/tasks', methods=['POST'])
def add_task(list_id):
    """Add a task to a todo"""
    try:
        data = request.get_json(silent=True) or {}
        text = data.get('text', '')

        if not isinstance(text, str) or not text.strip():
            return jsonify({'error': 'Task text is required'}), 400

        if todo_manager.get_list(list_id) is None:
            return jsonify({'error': 'Todo not found'}), 404

        task = todo_manager.add_task(list_id, text)
        if task is None:
            return jsonify({'error': 'Task could not be added'}), 400

        return jsonify({'success': True, 'task': task.to_dict()}), 201

    except Exception as e:
        logger.error(f"Failed to add task: {e}")
        return jsonify({'error': str(e)}), 500


@todo_bp.route('/api/todos/<list_id>/tasks/<task_id>', methods=['PUT'])
def toggle_task(list_id, task_id):
    """Toggle task checked status"""
    todo_list = todo_manager.get_list(list_id)
    task = todo_list.find_task(task_id) if todo_list else None
    if task is None:
        return jsonify({'error': 'Task not found'}), 404

    todo_manager.toggle_task(list_id, task_id)
    return jsonify({'success': True, 'task': task.to_dict()})


@todo_bp.route('/api/todos/<list_id>/toggle_all', methods=['POST'])
def toggle_all(list_id):
    """Mass-check or mass-uncheck every task of a todo"""
    todo_list = todo_manager.get_list(list_id)
    if todo_list is None:
        return jsonify({'error': 'Todo not found'}), 404

    todo_manager.toggle_all(list_id)
    return jsonify({'success': True, 'todo': _list_payload(todo_list)})


@todo_bp.route('/api/todos/<list_id>/show_checked', methods=['POST'])
def show_checked(list_id):
    """Show or hide the completed tasks of a todo"""
    if todo_manager.get_list(list_id) is None:
        return jsonify({'error': 'Todo not found'}), 404

    visible = home_screen.toggle_checked_items(list_id)
    return jsonify({'success': True, 'show_checked': visible})
