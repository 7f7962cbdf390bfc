"""
Home screen state for the To-Do app.

Holds what the task screen needs besides the lists themselves: the
"new todo" form, per-list draft task text and the collapsible checked
groups. render() turns everything into a plain dict for the web layer.
"""

import logging
from typing import Any, Dict, List

from .manager import TodoManager
from .models import TodoList


class HomeScreen:
    """
    To-Do list screen bound to a TodoManager
    """

    def __init__(self, manager: TodoManager):
        """
        Initialize home screen

        Args:
            manager: TodoManager owning the lists shown here
        """
        self.logger = logging.getLogger(__name__)
        self.manager = manager

        # New todo form
        self.form_visible = False
        self.form_title = ""
        self.task_inputs: List[str] = [""]

        # Per-list view state
        self.drafts: Dict[str, str] = {}
        self.show_checked: Dict[str, bool] = {}

        self.needs_render = True
        self._unsubscribe = manager.subscribe(self._on_change)

    def _on_change(self, manager: TodoManager):
        self.needs_render = True

    def close(self):
        """Detach from the manager"""
        self._unsubscribe()

    # -------------------- new todo form --------------------

    def open_form(self):
        self.form_visible = True

    def close_form(self):
        self.form_visible = False

    def set_task_input(self, index: int, text: str):
        """Replace the text of one task input field"""
        if 0 <= index < len(self.task_inputs):
            self.task_inputs[index] = text

    def add_task_input(self) -> bool:
        """
        Append an empty task input, only if the last one has text

        Returns:
            True if a field was added
        """
        if not self.task_inputs[-1].strip():
            return False

        self.task_inputs.append("")
        return True

    def can_submit(self) -> bool:
        return bool(self.form_title.strip()) and any(text.strip() for text in self.task_inputs)

    def submit(self) -> bool:
        """
        Create a todo from the form; the form is reset and closed on success

        Returns:
            True if a todo was created
        """
        todo_list = self.manager.create_list(self.form_title, self.task_inputs)
        if todo_list is None:
            return False

        self.form_title = ""
        self.task_inputs = [""]
        self.form_visible = False
        return True

    # -------------------- per-list actions --------------------

    def set_draft(self, list_id: str, text: str):
        self.drafts[list_id] = text

    def submit_task(self, list_id: str) -> bool:
        """Add the draft task text to a list and clear the draft on success"""
        task = self.manager.add_task(list_id, self.drafts.get(list_id, ""))
        if task is None:
            return False

        self.drafts[list_id] = ""
        return True

    def toggle_checked_items(self, list_id: str) -> bool:
        """
        Show or hide the checked group of a list

        Returns:
            New visibility of the checked group
        """
        self.show_checked[list_id] = not self.show_checked.get(list_id, False)
        return self.show_checked[list_id]

    # -------------------- rendering --------------------

    def _render_list(self, todo_list: TodoList) -> Dict[str, Any]:
        unchecked, checked = self.manager.partition(todo_list)
        show_checked = self.show_checked.get(todo_list.id, False)
        count = len(checked)

        return {
            'id': todo_list.id,
            'title': todo_list.title,
            'mass_checked': self.manager.is_mass_checked(todo_list.id),
            'completed': self.manager.is_completed(todo_list),
            'unchecked': [task.to_dict() for task in unchecked],
            'checked': [task.to_dict() for task in checked] if show_checked else [],
            'checked_count': count,
            'show_checked': show_checked,
            'checked_toggle_label': f"{'Hide' if show_checked else 'Show'} {count} Completed" if count else None,
            'draft': self.drafts.get(todo_list.id, ""),
        }

    def render(self) -> Dict[str, Any]:
        """
        Build the view model of the whole screen

        Returns:
            Dictionary with the form state and one entry per list
        """
        self.needs_render = False
        todos = [self._render_list(todo_list) for todo_list in self.manager.lists]
        self.logger.debug(f"Rendered {len(todos)} todos")

        return {
            'header': "Your Tasks",
            'todos': todos,
            'form': {
                'visible': self.form_visible,
                'title': self.form_title,
                'task_inputs': list(self.task_inputs),
                'can_submit': self.can_submit(),
            }
        }
