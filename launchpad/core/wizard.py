"""Wizard state container: the single owner of OnboardingState."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from launchpad.models import (
    CompletionData,
    OnboardingState,
    ProjectConfig,
    ProvisioningStep,
    Template,
    User,
    ValidationResult,
)

logger = logging.getLogger(__name__)

STEP_TITLES: list[str] = [
    "Authentication",
    "Project Details",
    "Template Selection",
    "Configuration",
    "Review",
    "Provisioning",
    "Complete",
]

TOTAL_STEPS = len(STEP_TITLES)

# Step indices, in wizard order
AUTH_STEP = 0
DETAILS_STEP = 1
TEMPLATES_STEP = 2
CONFIGURATION_STEP = 3
REVIEW_STEP = 4
PROVISIONING_STEP = 5
COMPLETION_STEP = 6

StateListener = Callable[[OnboardingState], None]
ConfigUpdate = Union[ProjectConfig, Mapping[str, Any]]


def can_proceed_from(state: OnboardingState, step: int) -> bool:
    """Return whether forward navigation is allowed from ``step``.

    Each step only looks at the fields it is responsible for.
    """
    config = state.project_config
    if step == AUTH_STEP:
        return state.user is not None
    if step == DETAILS_STEP:
        return bool(config.name and config.project_type and config.language)
    if step == TEMPLATES_STEP:
        return len(state.selected_templates) > 0
    if step == CONFIGURATION_STEP:
        return bool(config.environment and config.data_store)
    if step == REVIEW_STEP:
        return not any(r.type == "error" for r in state.validation_results)
    if step == PROVISIONING_STEP:
        return True
    if step == COMPLETION_STEP:
        return state.is_complete
    return False


def _unique_by_id(templates: Sequence[Template]) -> list[Template]:
    seen: set[str] = set()
    unique: list[Template] = []
    for template in templates:
        if template.id in seen:
            continue
        seen.add(template.id)
        unique.append(template)
    return unique


class WizardStore:
    """Holds the onboarding state and exposes the only ways to change it.

    Every mutation replaces the state with a new value derived from the
    previous one and then notifies subscribers synchronously. The store
    is owned by the app and handed to each step screen; there is no
    module-level instance.
    """

    def __init__(self, state: Optional[OnboardingState] = None) -> None:
        self._state = state or OnboardingState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> OnboardingState:
        return self._state

    @property
    def total_steps(self) -> int:
        return TOTAL_STEPS

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _commit(self, **changes: Any) -> None:
        self._state = self._state.model_copy(update=changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener %r failed", listener)

    # Navigation

    def next_step(self) -> None:
        """Advance one step, clamped to the last step."""
        self._commit(current_step=min(self._state.current_step + 1, TOTAL_STEPS - 1))

    def prev_step(self) -> None:
        """Go back one step, clamped to the first step."""
        self._commit(current_step=max(self._state.current_step - 1, 0))

    # Data updates

    def update_project_config(
        self, config: Optional[ConfigUpdate] = None, **fields: Any
    ) -> None:
        """Shallow-merge a partial config; later writes for a key win.

        Empty strings are stored as None so a cleared input reads as missing.
        """
        if isinstance(config, ProjectConfig):
            changes = config.model_dump(exclude_unset=True)
        else:
            changes = dict(config or {})
        changes.update(fields)
        changes = {k: (None if v == "" else v) for k, v in changes.items()}

        merged = {**self._state.project_config.model_dump(), **changes}
        self._commit(project_config=ProjectConfig.model_validate(merged))

    def update_selected_templates(self, templates: Sequence[Template]) -> None:
        """Replace the selected templates; duplicate IDs are collapsed."""
        self._commit(selected_templates=_unique_by_id(templates))

    def update_validation_results(self, results: Sequence[ValidationResult]) -> None:
        self._commit(validation_results=list(results))

    def update_provisioning_steps(self, steps: Sequence[ProvisioningStep]) -> None:
        self._commit(provisioning=list(steps))

    def set_user(self, user: User) -> None:
        """Store the authenticated user and seed owner/team from it."""
        config = self._state.project_config.model_copy(
            update={"owner": user.email, "team": user.team}
        )
        logger.info("Authenticated %s via %s", user.email, user.provider or "unknown")
        self._commit(user=user, project_config=config)

    def complete(self, completion_data: CompletionData) -> None:
        """Mark onboarding complete. Only the first call has an effect."""
        if self._state.is_complete:
            logger.warning("Onboarding already complete; ignoring completion payload")
            return
        logger.info("Onboarding complete: %s", completion_data.repository_url)
        self._commit(is_complete=True, completion_data=completion_data)

    def reset(self) -> None:
        """Discard all progress and start over."""
        self._state = OnboardingState()
        self._commit()

    # Derived state

    def can_proceed(self) -> bool:
        """Proceed predicate for the current step."""
        return can_proceed_from(self._state, self._state.current_step)

    def can_proceed_from(self, step: int) -> bool:
        return can_proceed_from(self._state, step)
