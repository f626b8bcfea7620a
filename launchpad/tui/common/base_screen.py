"""Shared base screen for wizard steps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Optional

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from launchpad.core.navigation import go_next, go_previous, show_next
from launchpad.models import OnboardingState
from launchpad.tui.common.keybindings import with_step_bindings
from launchpad.tui.common.widgets import StepIndicator, WizardNav

if TYPE_CHECKING:
    from launchpad.config import Settings
    from launchpad.core.wizard import WizardStore


class StepScreen(Screen):
    """Base class for one wizard step.

    The store is injected by the shell; subclasses read their slice of
    state from it and write back only through its update operations.
    """

    STEP_INDEX: ClassVar[int] = 0
    TITLE_TEXT: ClassVar[str] = ""
    SUBTITLE_TEXT: ClassVar[str] = ""

    BINDINGS = with_step_bindings()

    def __init__(self, store: "WizardStore", settings: "Settings") -> None:
        super().__init__()
        self._store = store
        self._settings = settings
        self._unsubscribe: Optional[Callable[[], None]] = None

    @property
    def state(self) -> OnboardingState:
        return self._store.state

    def compose(self) -> ComposeResult:
        yield Header()
        yield StepIndicator(id="step-indicator")
        with VerticalScroll(id="step-body"):
            yield Static(self.TITLE_TEXT, id="step-title")
            yield Static(self.SUBTITLE_TEXT, id="step-subtitle")
            yield from self.compose_step()
        yield WizardNav(id="wizard-nav")
        yield Footer()

    def compose_step(self) -> ComposeResult:
        """Step-specific widgets, placed between the title and the nav bar."""
        yield from ()

    def on_mount(self) -> None:
        self.query_one(StepIndicator).show_step(self.STEP_INDEX)
        self._unsubscribe = self._store.subscribe(self._on_store_changed)
        self.refresh_navigation()
        self.on_step_mount()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_step_mount(self) -> None:
        """Hook for subclasses; runs after the base mount wiring."""
        return

    def on_state_changed(self, state: OnboardingState) -> None:
        """Hook for subclasses; runs after every store mutation."""
        return

    def _on_store_changed(self, state: OnboardingState) -> None:
        if not self.is_mounted:
            return
        self.refresh_navigation()
        self.on_state_changed(state)

    def refresh_navigation(self) -> None:
        self.query_one(WizardNav).update_for(self.state)

    def on_wizard_nav_next(self, _message: WizardNav.Next) -> None:
        self.action_next_step()

    def on_wizard_nav_previous(self, _message: WizardNav.Previous) -> None:
        self.action_go_back()

    def action_next_step(self) -> None:
        """Move forward when the current step allows it."""
        if not show_next(self.state.current_step):
            return
        if not go_next(self._store):
            self.notify("Complete this step before continuing", severity="warning", timeout=2)

    def action_go_back(self) -> None:
        go_previous(self._store)

    def action_quit(self) -> None:
        """Quit the wizard from any step."""
        self.app.exit()
