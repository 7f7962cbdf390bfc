"""
Unit tests for the onboarding flow and its hand-off to the task screen
"""

import os
import sys
import tempfile
import threading
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from nextask.apps.onboarding import OnboardingFlow, Slide, DEFAULT_SLIDES, slides_from_config
from nextask.core.settings import SettingsManager, HAS_ONBOARDED_KEY
from nextask.ui.navigation import NavigationManager, Screen


class MemoryStore:
    """Key-value store that can be told to fail"""

    def __init__(self, values=None, fail_set=False, fail_get=False):
        self.values = dict(values or {})
        self.fail_set = fail_set
        self.fail_get = fail_get
        self.set_calls = 0

    def get(self, key, default=None):
        if self.fail_get:
            raise OSError("storage unavailable")
        return self.values.get(key, default)

    def set(self, key, value):
        self.set_calls += 1
        if self.fail_set:
            return False
        self.values[key] = value
        return True


def _flow(store=None, slides=None):
    navigation = NavigationManager(Screen.ONBOARDING)
    return OnboardingFlow(store if store is not None else MemoryStore(), navigation, slides), navigation


def test_starts_on_first_slide():
    flow, navigation = _flow()

    assert flow.current_index == 0
    assert flow.current_slide == DEFAULT_SLIDES[0]
    assert flow.continue_button_text == "Continue"
    assert flow.show_skip_button
    assert flow.indicators() == [True, False, False]
    assert navigation.is_on_screen(Screen.ONBOARDING)


def test_advance_walks_slides_then_completes():
    store = MemoryStore()
    flow, navigation = _flow(store)

    assert flow.advance()
    assert flow.advance()
    assert flow.is_last_slide
    assert flow.continue_button_text == "Get Started"
    assert not flow.show_skip_button
    assert store.set_calls == 0, "Nothing is stored before the last slide"

    assert flow.advance()
    assert flow.completed
    assert store.values[HAS_ONBOARDED_KEY] == "true"
    assert navigation.is_on_screen(Screen.HOME)


def test_skip_from_any_slide():
    store = MemoryStore()
    flow, navigation = _flow(store)
    flow.advance()

    assert flow.skip()
    assert flow.completed
    assert store.values[HAS_ONBOARDED_KEY] == "true"
    assert navigation.is_on_screen(Screen.HOME)


def test_completed_is_terminal():
    store = MemoryStore()
    flow, navigation = _flow(store)
    flow.skip()

    assert not flow.advance()
    assert not flow.skip()
    flow.go_to(1)
    assert store.set_calls == 1
    assert navigation.previous_screen == Screen.ONBOARDING


def test_continue_failure_stays_on_last_slide():
    store = MemoryStore(fail_set=True)
    flow, navigation = _flow(store)
    flow.go_to(2)

    assert not flow.advance()
    assert not flow.completed
    assert flow.is_last_slide
    assert navigation.is_on_screen(Screen.ONBOARDING)


def test_skip_failure_does_not_navigate():
    store = MemoryStore(fail_set=True)
    flow, navigation = _flow(store)

    assert not flow.skip()
    assert not flow.completed
    assert flow.current_index == 0
    assert navigation.is_on_screen(Screen.ONBOARDING)

    # Storage recovers, user retries
    store.fail_set = False
    assert flow.skip()
    assert navigation.is_on_screen(Screen.HOME)


def test_check_onboarding_with_flag_goes_home():
    flow, navigation = _flow(MemoryStore({HAS_ONBOARDED_KEY: "true"}))

    assert flow.check_onboarding()
    assert flow.completed
    assert navigation.is_on_screen(Screen.HOME)


def test_check_onboarding_without_flag_shows_slides():
    flow, navigation = _flow(MemoryStore({HAS_ONBOARDED_KEY: "false"}))

    assert not flow.check_onboarding()
    assert not flow.completed
    assert navigation.is_on_screen(Screen.ONBOARDING)


def test_check_onboarding_read_failure_shows_slides():
    flow, navigation = _flow(MemoryStore(fail_get=True))

    assert not flow.check_onboarding()
    assert navigation.is_on_screen(Screen.ONBOARDING)


def test_go_to_clamps_index():
    flow, _ = _flow()

    flow.go_to(10)
    assert flow.current_index == 2
    flow.go_to(-3)
    assert flow.current_index == 0


def test_flag_survives_restart():
    with tempfile.TemporaryDirectory() as tmp:
        settings_file = os.path.join(tmp, 'settings.json')

        flow, _ = _flow(SettingsManager(settings_file))
        assert not flow.check_onboarding()
        assert flow.skip()

        # New process: fresh store reading the same file
        flow, navigation = _flow(SettingsManager(settings_file))
        assert flow.check_onboarding()
        assert navigation.is_on_screen(Screen.HOME)


def test_slides_from_config():
    slides = slides_from_config([
        {'title': 'One', 'description': 'first'},
        {'description': 'no title'},
        {'title': 'Two'},
    ])

    assert slides == [Slide('One', 'first'), Slide('Two', '')]
    assert slides_from_config(None) == list(DEFAULT_SLIDES)
    assert slides_from_config([]) == list(DEFAULT_SLIDES)
    assert slides_from_config(3) == list(DEFAULT_SLIDES)
    assert slides_from_config("Welcome") == list(DEFAULT_SLIDES)


def test_single_slide_flow():
    flow, navigation = _flow(slides=[Slide('Only', '')])

    assert flow.continue_button_text == "Get Started"
    assert not flow.show_skip_button
    assert flow.advance()
    assert navigation.is_on_screen(Screen.HOME)


def test_render():
    flow, _ = _flow()
    flow.advance()

    view = flow.render()

    assert view['index'] == 1
    assert view['total'] == 3
    assert view['slide']['title'] == "Manage Your Tasks"
    assert view['continue_text'] == "Continue"
    assert view['indicators'] == [False, True, False]
    assert view['completed'] is False


class SlowStore(MemoryStore):
    """Store whose writes take long enough for requests to overlap"""

    def set(self, key, value):
        time.sleep(0.05)
        return super().set(key, value)


def test_concurrent_finish_stores_flag_once():
    store = SlowStore()
    flow, navigation = _flow(store)
    flow.go_to(2)
    screens = []
    navigation.navigate_to = lambda screen: screens.append(screen)

    results = []
    threads = [
        threading.Thread(target=lambda: results.append(flow.advance())),
        threading.Thread(target=lambda: results.append(flow.advance())),
        threading.Thread(target=lambda: results.append(flow.skip())),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.set_calls == 1, f"Flag written {store.set_calls} times"
    assert screens == [Screen.HOME], f"Navigated {len(screens)} times"
    assert sorted(results) == [False, False, True]


if __name__ == '__main__':
    import pytest
    sys.exit(pytest.main([__file__, '-v']))
