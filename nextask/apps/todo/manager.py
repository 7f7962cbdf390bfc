"""
To-Do List Manager

Owns the in-memory task lists for the session and notifies view bindings
whenever they change. Nothing here is persisted.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .models import Task, TodoList


Subscriber = Callable[['TodoManager'], None]


class TodoManager:
    """Manages To-Do lists and their tasks"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.lock = threading.Lock()
        self._lists: List[TodoList] = []
        # Mass-check state lives here, not on the list
        self._mass_checked: Dict[str, bool] = {}
        self._subscribers: List[Subscriber] = []

    # -------------------- observation --------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked after every successful mutation

        Args:
            callback: Called with this manager as its only argument

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception as e:
                self.logger.error(f"Subscriber {callback!r} failed: {e}", exc_info=True)

    # -------------------- reads --------------------

    @property
    def lists(self) -> List[TodoList]:
        """Snapshot of the lists in creation order"""
        return list(self._lists)

    def get_list(self, list_id: str) -> Optional[TodoList]:
        for todo_list in self._lists:
            if todo_list.id == list_id:
                return todo_list
        return None

    def is_mass_checked(self, list_id: str) -> bool:
        return self._mass_checked.get(list_id, False)

    @staticmethod
    def partition(todo_list: TodoList) -> Tuple[List[Task], List[Task]]:
        """
        Split a list's tasks into (unchecked, checked), each in insertion order
        """
        unchecked = [task for task in todo_list.tasks if not task.checked]
        checked = [task for task in todo_list.tasks if task.checked]
        return unchecked, checked

    @staticmethod
    def is_completed(todo_list: TodoList) -> bool:
        """True when the list has tasks and all of them are checked"""
        return bool(todo_list.tasks) and all(task.checked for task in todo_list.tasks)

    # -------------------- mutations --------------------

    def create_list(self, title: str, task_texts: Sequence[str]) -> Optional[TodoList]:
        """
        Create a new To-Do list

        Blank entries in task_texts are dropped.

        Args:
            title: List title
            task_texts: Texts of the initial tasks

        Returns:
            The new list, or None if the title is blank or no task text remains
        """
        if not title or not title.strip():
            self.logger.error("Todo title is required.")
            return None

        texts = [text for text in task_texts if text and text.strip()]
        if not texts:
            self.logger.error("At least one task is required.")
            return None

        with self.lock:
            todo_list = TodoList(title, [Task(text) for text in texts])
            self._lists.append(todo_list)

        self.logger.info(f"Created todo '{title}' with {len(texts)} tasks")
        self._notify()
        return todo_list

    def add_task(self, list_id: str, text: str) -> Optional[Task]:
        """
        Append a task to an existing list

        Returns:
            The new task, or None if the text is blank or the list is unknown
        """
        if not text or not text.strip():
            self.logger.error("Task text is required.")
            return None

        with self.lock:
            todo_list = self.get_list(list_id)
            if todo_list is None:
                self.logger.error(f"Todo not found: {list_id}")
                return None

            task = Task(text)
            todo_list.tasks.append(task)

        self.logger.info(f"Added task to '{todo_list.title}': {text}")
        self._notify()
        return task

    def toggle_task(self, list_id: str, task_id: str):
        """Flip the checked flag of one task; unknown ids are ignored"""
        with self.lock:
            todo_list = self.get_list(list_id)
            task = todo_list.find_task(task_id) if todo_list else None
            if task is None:
                self.logger.debug(f"Toggle ignored, no task {task_id} in todo {list_id}")
                return

            task.checked = not task.checked

        status = "checked" if task.checked else "unchecked"
        self.logger.info(f"Marked task as {status}: {task.text}")
        self._notify()

    def toggle_all(self, list_id: str):
        """
        Mass-check: set every task to the negation of the list's
        mass-checked flag, then flip the flag

        The flag is not recomputed from the tasks, so individual toggles
        between two calls do not affect what the next call does.
        """
        with self.lock:
            todo_list = self.get_list(list_id)
            if todo_list is None:
                self.logger.debug(f"Mass check ignored, no todo {list_id}")
                return

            target = not self.is_mass_checked(list_id)
            for task in todo_list.tasks:
                task.checked = target
            self._mass_checked[list_id] = target

        self.logger.info(f"Mass {'checked' if target else 'unchecked'} '{todo_list.title}'")
        self._notify()
