"""
Onboarding flow: the one-time slide sequence shown before first use.
"""

import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional

from nextask.core.settings import HAS_ONBOARDED_KEY
from nextask.ui.navigation import NavigationManager, Screen


class Slide(NamedTuple):
    title: str
    description: str


DEFAULT_SLIDES = (
    Slide(
        "Welcome to NexTask",
        "NexTask is your go-to app for managing tasks efficiently. Organize your daily "
        "tasks and set reminders to stay on top of your schedule.",
    ),
    Slide(
        "Manage Your Tasks",
        "Create and manage tasks with ease. Track your progress and prioritize your "
        "tasks to boost productivity.",
    ),
    Slide(
        "Stay Organized",
        "With NexTask, you can keep everything organized in one place. Never miss a "
        "deadline and stay on top of your goals.",
    ),
)


def slides_from_config(raw: Optional[Iterable[Mapping[str, Any]]]) -> List[Slide]:
    """
    Build slides from the `onboarding.slides` config entries

    Entries without a title are skipped. Falls back to the default slides
    when nothing usable is configured, including when the value is not a list.
    """
    if not isinstance(raw, (list, tuple)):
        return list(DEFAULT_SLIDES)

    slides = []
    for entry in raw:
        if not isinstance(entry, Mapping) or not entry.get('title'):
            continue
        slides.append(Slide(str(entry['title']), str(entry.get('description', ''))))
    return slides or list(DEFAULT_SLIDES)


class OnboardingFlow:
    """
    Linear slide sequence ending in the Completed state

    Reaching Completed (by advancing past the last slide or skipping)
    stores the onboarding flag and moves navigation to the home screen.
    Navigation only happens once the flag has been stored.
    """

    def __init__(self, settings, navigation: NavigationManager, slides: Optional[Iterable[Slide]] = None):
        """
        Initialize onboarding flow

        Args:
            settings: Key-value store with get(key) and set(key, value) -> bool
            navigation: NavigationManager used for the hand-off
            slides: Slides to show (defaults to DEFAULT_SLIDES)
        """
        self.logger = logging.getLogger(__name__)
        self.settings = settings
        self.navigation = navigation
        self.slides: List[Slide] = list(slides) if slides is not None else list(DEFAULT_SLIDES)
        if not self.slides:
            raise ValueError("Onboarding needs at least one slide")

        self.lock = threading.Lock()
        self.current_index = 0
        self.completed = False

    def check_onboarding(self) -> bool:
        """
        Skip straight to the home screen if onboarding was already done

        Returns:
            True if the stored flag was set
        """
        try:
            has_onboarded = self.settings.get(HAS_ONBOARDED_KEY)
        except Exception as e:
            self.logger.error(f"Failed to check onboarding status: {e}")
            return False

        if has_onboarded == "true":
            with self.lock:
                self.completed = True
                self.navigation.navigate_to(Screen.HOME)
            return True

        return False

    # -------------------- transitions --------------------

    def advance(self) -> bool:
        """
        Continue: go to the next slide, or finish on the last one

        Returns:
            True if the flow moved (to a slide or to Completed)
        """
        with self.lock:
            if self.completed:
                return False

            if self.current_index < len(self.slides) - 1:
                self.current_index += 1
                self.logger.debug(f"Onboarding slide {self.current_index + 1} of {len(self.slides)}")
                return True

            return self._complete()

    def skip(self) -> bool:
        """Finish onboarding from any slide"""
        with self.lock:
            if self.completed:
                return False

            self.logger.info(f"Onboarding skipped at slide {self.current_index + 1}")
            return self._complete()

    def go_to(self, index: int):
        """Sync the current slide with a swipe"""
        with self.lock:
            if self.completed:
                return
            self.current_index = max(0, min(index, len(self.slides) - 1))

    def _complete(self) -> bool:
        # Caller holds self.lock
        try:
            stored = self.settings.set(HAS_ONBOARDED_KEY, "true")
        except Exception as e:
            self.logger.error(f"Failed to set onboarding status: {e}")
            return False

        if not stored:
            self.logger.error("Failed to set onboarding status")
            return False

        self.completed = True
        self.navigation.navigate_to(Screen.HOME)
        self.logger.info("Onboarding completed")
        return True

    # -------------------- view --------------------

    @property
    def current_slide(self) -> Slide:
        return self.slides[self.current_index]

    @property
    def is_last_slide(self) -> bool:
        return self.current_index == len(self.slides) - 1

    @property
    def continue_button_text(self) -> str:
        return "Get Started" if self.is_last_slide else "Continue"

    @property
    def show_skip_button(self) -> bool:
        return not self.is_last_slide

    def indicators(self) -> List[bool]:
        return [index == self.current_index for index in range(len(self.slides))]

    def render(self) -> Dict[str, Any]:
        return {
            'completed': self.completed,
            'index': self.current_index,
            'total': len(self.slides),
            'slide': self.current_slide._asdict(),
            'continue_text': self.continue_button_text,
            'show_skip': self.show_skip_button,
            'indicators': self.indicators(),
        }
