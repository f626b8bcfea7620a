"""Navigation rules for the step sequencer."""

from __future__ import annotations

from launchpad.core.wizard import (
    AUTH_STEP,
    COMPLETION_STEP,
    PROVISIONING_STEP,
    REVIEW_STEP,
    WizardStore,
    can_proceed_from,
)
from launchpad.models import OnboardingState


def show_next(step: int) -> bool:
    """The Next control is only rendered on the form steps (1-4)."""
    return AUTH_STEP < step <= REVIEW_STEP


def show_previous(step: int) -> bool:
    """Previous is available from step 1 up to and including provisioning."""
    return AUTH_STEP < step <= PROVISIONING_STEP


def next_enabled(state: OnboardingState) -> bool:
    return show_next(state.current_step) and can_proceed_from(state, state.current_step)


def should_auto_advance(state: OnboardingState) -> bool:
    """True when the auth step has produced a user and may move on."""
    return (
        state.current_step == AUTH_STEP
        and state.user is not None
        and can_proceed_from(state, AUTH_STEP)
    )


def go_next(store: WizardStore) -> bool:
    """Perform the "next" transition if permitted. Returns True if it moved."""
    state = store.state
    if state.current_step >= COMPLETION_STEP or not store.can_proceed():
        return False
    store.next_step()
    return True


def go_previous(store: WizardStore) -> bool:
    """Perform the "previous" transition if permitted. Returns True if it moved."""
    if not show_previous(store.state.current_step):
        return False
    store.prev_step()
    return True
