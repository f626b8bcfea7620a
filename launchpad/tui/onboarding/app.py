"""Onboarding TUI App: the step sequencer.

Owns the wizard store and shows exactly one step screen at a time.
"""

import logging
from typing import Optional

from textual.app import App
from textual.timer import Timer

from launchpad.config import Settings, get_settings
from launchpad.core.navigation import go_next, should_auto_advance
from launchpad.core.wizard import PROVISIONING_STEP, WizardStore
from launchpad.models import CompletionData, OnboardingState
from launchpad.tui.common.base_screen import StepScreen
from launchpad.tui.onboarding.screens import STEP_SCREENS

logger = logging.getLogger(__name__)


class OnboardingApp(App[Optional[CompletionData]]):
    """Self-service project onboarding wizard.

    Walks the user through:
    1. Sign-in with an identity provider
    2. Project details
    3. Template selection
    4. Environment and compliance configuration
    5. Review
    6. Provisioning
    7. Completion
    """

    CSS_PATH = "../common/theme.tcss"
    TITLE = "Launchpad"
    SUB_TITLE = "Self-Service Onboarding Wizard"

    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        ("q", "app.quit", "Quit"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[WizardStore] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.store = store or WizardStore()
        self._shown_step: Optional[int] = None
        self._auto_advance_timer: Optional[Timer] = None
        self._unsubscribe = None

    def on_mount(self) -> None:
        """Subscribe to the store and show the current step."""
        self._unsubscribe = self.store.subscribe(self._on_state_changed)
        self._shown_step = self.store.state.current_step
        self.push_screen(self.build_step_screen(self._shown_step))

    def on_unmount(self) -> None:
        self._cancel_auto_advance()
        if self._unsubscribe is not None:
            self._unsubscribe()

    def build_step_screen(self, step: int) -> StepScreen:
        return STEP_SCREENS[step](self.store, self.settings)

    def _on_state_changed(self, state: OnboardingState) -> None:
        # Any change invalidates a pending auto-advance; it is re-armed below if still due
        self._cancel_auto_advance()

        if state.current_step != self._shown_step:
            logger.info("Step %s -> %s", self._shown_step, state.current_step)
            self._shown_step = state.current_step
            self.switch_screen(self.build_step_screen(state.current_step))

        if state.current_step == PROVISIONING_STEP and state.is_complete:
            go_next(self.store)
            return

        if should_auto_advance(state):
            self._auto_advance_timer = self.set_timer(
                self.settings.auto_advance_delay, self._auto_advance
            )

    def _cancel_auto_advance(self) -> None:
        if self._auto_advance_timer is not None:
            self._auto_advance_timer.stop()
            self._auto_advance_timer = None

    def _auto_advance(self) -> None:
        """Leave the auth step once, if it is still the right thing to do."""
        self._auto_advance_timer = None
        if should_auto_advance(self.store.state):
            go_next(self.store)
