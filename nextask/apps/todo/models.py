"""
To-Do data model: task lists ("Todos") and their checkable tasks.
"""

import uuid
from typing import Dict, List, Any, Optional


def new_id() -> str:
    """Allocate a session-unique identifier"""
    return str(uuid.uuid4())


class Task:
    """A single checkable item"""

    def __init__(self, text: str, checked: bool = False, task_id: Optional[str] = None):
        self.id = task_id or new_id()
        self.text = text
        self.checked = checked

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'text': self.text, 'checked': self.checked}

    def __repr__(self):
        return f"Task(id={self.id!r}, text={self.text!r}, checked={self.checked})"


class TodoList:
    """A titled, ordered collection of tasks"""

    def __init__(self, title: str, tasks: Optional[List[Task]] = None, list_id: Optional[str] = None):
        self.id = list_id or new_id()
        self.title = title
        self.tasks: List[Task] = list(tasks or [])

    def find_task(self, task_id: str) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'tasks': [task.to_dict() for task in self.tasks]
        }

    def __repr__(self):
        return f"TodoList(id={self.id!r}, title={self.title!r}, tasks={len(self.tasks)})"
