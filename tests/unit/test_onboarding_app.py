"""Unit tests for the step sequencer app."""

from __future__ import annotations

from typing import Any

from launchpad.core.provisioning import build_completion_data
from launchpad.core.wizard import WizardStore
from launchpad.models import OnboardingState
from launchpad.tui.onboarding.app import OnboardingApp
from launchpad.tui.onboarding.screens import (
    STEP_SCREENS,
    CompletionScreen,
    ProjectDetailsScreen,
)


class _FakeTimer:
    def __init__(self) -> None:
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class _Harness:
    """Wires an app to its store without starting Textual."""

    def __init__(self, monkeypatch: Any, store: WizardStore, settings: Any) -> None:
        self.app = OnboardingApp(settings=settings, store=store)
        self.switched: list[object] = []
        self.timers: list[tuple[float, Any, _FakeTimer]] = []

        def fake_set_timer(delay: float, callback: Any) -> _FakeTimer:
            timer = _FakeTimer()
            self.timers.append((delay, callback, timer))
            return timer

        monkeypatch.setattr(self.app, "switch_screen", self.switched.append)
        monkeypatch.setattr(self.app, "set_timer", fake_set_timer)
        self.app._shown_step = store.state.current_step
        store.subscribe(self.app._on_state_changed)


def test_step_screens_cover_every_step() -> None:
    assert [screen.STEP_INDEX for screen in STEP_SCREENS] == list(range(7))


def test_sign_in_schedules_single_auto_advance(monkeypatch: Any, store, settings, github_user) -> None:
    """Auth success should advance to project details after the configured delay."""
    harness = _Harness(monkeypatch, store, settings)

    store.set_user(github_user)

    assert len(harness.timers) == 1
    delay, callback, _timer = harness.timers[0]
    assert delay == settings.auto_advance_delay
    assert store.state.current_step == 0

    callback()

    assert store.state.current_step == 1
    assert isinstance(harness.switched[-1], ProjectDetailsScreen)
    assert len(harness.timers) == 1


def test_state_change_rearms_pending_auto_advance(monkeypatch: Any, store, settings, github_user) -> None:
    harness = _Harness(monkeypatch, store, settings)

    store.set_user(github_user)
    store.update_project_config({"name": "web-portal"})

    assert len(harness.timers) == 2
    assert harness.timers[0][2].stopped is True
    assert harness.timers[1][2].stopped is False


def test_stale_auto_advance_does_nothing(monkeypatch: Any, store, settings, github_user) -> None:
    """A timer that fires after the user already moved on must not skip a step."""
    harness = _Harness(monkeypatch, store, settings)
    store.set_user(github_user)
    _delay, callback, _timer = harness.timers[0]

    store.next_step()
    callback()

    assert store.state.current_step == 1


def test_completion_moves_from_provisioning_to_completion(monkeypatch: Any, settings) -> None:
    store = WizardStore(OnboardingState(current_step=5))
    harness = _Harness(monkeypatch, store, settings)

    store.complete(build_completion_data())

    assert store.state.current_step == 6
    assert len(harness.switched) == 1
    assert isinstance(harness.switched[0], CompletionScreen)


def test_navigation_switches_screen_once_per_step(monkeypatch: Any, store, settings, github_user) -> None:
    harness = _Harness(monkeypatch, store, settings)
    store.set_user(github_user)
    store.next_step()
    store.update_project_config({"name": "web-portal"})
    store.prev_step()

    assert [type(s).__name__ for s in harness.switched] == [
        "ProjectDetailsScreen",
        "AuthScreen",
    ]
