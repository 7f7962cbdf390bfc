"""
Unit tests for the To-Do home screen state
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from nextask.apps.todo import TodoManager, HomeScreen


def _screen():
    manager = TodoManager()
    return manager, HomeScreen(manager)


def test_form_adds_input_only_after_text():
    _, screen = _screen()

    assert not screen.add_task_input(), "Blank last input must not add a field"
    assert screen.task_inputs == [""]

    screen.set_task_input(0, "Milk")
    assert screen.add_task_input()
    assert screen.task_inputs == ["Milk", ""]


def test_form_submit_creates_and_resets():
    manager, screen = _screen()
    screen.open_form()
    screen.form_title = "Groceries"
    screen.set_task_input(0, "Milk")
    screen.add_task_input()
    screen.set_task_input(1, "Eggs")
    screen.add_task_input()

    assert screen.can_submit()
    assert screen.submit()

    assert [task.text for task in manager.lists[0].tasks] == ["Milk", "Eggs"]
    assert screen.form_title == ""
    assert screen.task_inputs == [""]
    assert not screen.form_visible


def test_form_submit_rejected_keeps_input():
    manager, screen = _screen()
    screen.open_form()
    screen.set_task_input(0, "Milk")

    assert not screen.can_submit()
    assert not screen.submit()
    assert manager.lists == []
    assert screen.task_inputs == ["Milk"]
    assert screen.form_visible


def test_submit_task_clears_draft():
    manager, screen = _screen()
    todo_list = manager.create_list("T", ["a"])

    screen.set_draft(todo_list.id, "   ")
    assert not screen.submit_task(todo_list.id)
    assert screen.drafts[todo_list.id] == "   "

    screen.set_draft(todo_list.id, "b")
    assert screen.submit_task(todo_list.id)
    assert screen.drafts[todo_list.id] == ""
    assert [task.text for task in todo_list.tasks] == ["a", "b"]


def test_render_hides_checked_group_until_shown():
    manager, screen = _screen()
    todo_list = manager.create_list("Groceries", ["Milk", "Eggs"])
    manager.toggle_task(todo_list.id, todo_list.tasks[0].id)

    view = screen.render()['todos'][0]
    assert [task['text'] for task in view['unchecked']] == ["Eggs"]
    assert view['checked'] == []
    assert view['checked_count'] == 1
    assert view['checked_toggle_label'] == "Show 1 Completed"

    assert screen.toggle_checked_items(todo_list.id)
    view = screen.render()['todos'][0]
    assert [task['text'] for task in view['checked']] == ["Milk"]
    assert view['checked_toggle_label'] == "Hide 1 Completed"


def test_render_completed_and_mass_checked():
    manager, screen = _screen()
    todo_list = manager.create_list("T", ["a", "b"])

    view = screen.render()['todos'][0]
    assert not view['completed']
    assert not view['mass_checked']
    assert view['checked_toggle_label'] is None

    manager.toggle_all(todo_list.id)
    view = screen.render()['todos'][0]
    assert view['completed']
    assert view['mass_checked']


def test_manager_changes_mark_screen_dirty():
    manager, screen = _screen()
    screen.render()
    assert not screen.needs_render

    manager.create_list("T", ["a"])
    assert screen.needs_render

    screen.render()
    screen.close()
    manager.create_list("U", ["b"])
    assert not screen.needs_render, "Closed screen should no longer be notified"


if __name__ == '__main__':
    import pytest
    sys.exit(pytest.main([__file__, '-v']))
