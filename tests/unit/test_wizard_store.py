"""Unit tests for the wizard state container."""

from __future__ import annotations

import logging

import pytest

from launchpad.core.provisioning import build_completion_data, initial_steps
from launchpad.core.wizard import (
    COMPLETION_STEP,
    TOTAL_STEPS,
    WizardStore,
    can_proceed_from,
)
from launchpad.models import OnboardingState, ProjectConfig, ValidationResult


def test_initial_state_is_empty(store: WizardStore) -> None:
    state = store.state
    assert state.current_step == 0
    assert state.user is None
    assert state.selected_templates == []
    assert state.is_complete is False
    assert store.total_steps == TOTAL_STEPS == 7


def test_prev_step_clamps_at_zero(store: WizardStore) -> None:
    store.prev_step()
    assert store.state.current_step == 0


def test_next_step_clamps_at_last_step() -> None:
    store = WizardStore(OnboardingState(current_step=COMPLETION_STEP))
    store.next_step()
    assert store.state.current_step == COMPLETION_STEP


def test_update_project_config_merges_and_later_write_wins(store: WizardStore) -> None:
    store.update_project_config({"name": "first", "language": "python"})
    store.update_project_config(name="second")

    config = store.state.project_config
    assert config.name == "second"
    assert config.language == "python"


def test_update_project_config_accepts_partial_model(store: WizardStore) -> None:
    store.update_project_config({"environment": "staging"})
    store.update_project_config(ProjectConfig(data_store="redis"))

    config = store.state.project_config
    assert config.environment == "staging"
    assert config.data_store == "redis"


def test_update_project_config_treats_empty_string_as_missing(store: WizardStore) -> None:
    store.update_project_config({"framework": "Django"})
    store.update_project_config({"framework": ""})

    assert store.state.project_config.framework is None


def test_update_project_config_rejects_unknown_enum(store: WizardStore) -> None:
    with pytest.raises(ValueError):
        store.update_project_config({"environment": "qa"})


def test_set_user_seeds_owner_and_team(store: WizardStore, github_user) -> None:
    store.update_project_config({"owner": "someone@else.com", "team": "Other"})
    store.set_user(github_user)

    config = store.state.project_config
    assert store.state.user == github_user
    assert config.owner == "alex.chen@company.com"
    assert config.team == "Platform Engineering"


def test_update_selected_templates_collapses_duplicates(store: WizardStore, catalog) -> None:
    vpc = catalog["infra-basic-vpc"]
    react = catalog["repo-react-starter"]
    store.update_selected_templates([vpc, react, vpc])

    assert [t.id for t in store.state.selected_templates] == ["infra-basic-vpc", "repo-react-starter"]


def test_complete_only_first_call_takes_effect(store: WizardStore, caplog) -> None:
    first = build_completion_data()
    second = first.model_copy(update={"repository_url": "https://example.com/other"})

    store.complete(first)
    with caplog.at_level(logging.WARNING, logger="launchpad.core.wizard"):
        store.complete(second)

    assert store.state.is_complete is True
    assert store.state.completion_data == first
    assert "already complete" in caplog.text


def test_reset_discards_progress(store: WizardStore, github_user) -> None:
    store.set_user(github_user)
    store.next_step()
    store.complete(build_completion_data())

    store.reset()

    assert store.state == OnboardingState()


def test_listeners_are_notified_and_can_unsubscribe(store: WizardStore) -> None:
    seen: list[int] = []
    unsubscribe = store.subscribe(lambda state: seen.append(state.current_step))

    store.next_step()
    unsubscribe()
    store.next_step()

    assert seen == [1]


def test_failing_listener_does_not_block_others(store: WizardStore, caplog) -> None:
    seen: list[int] = []

    def broken(_state: OnboardingState) -> None:
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda state: seen.append(state.current_step))

    with caplog.at_level(logging.ERROR, logger="launchpad.core.wizard"):
        store.next_step()

    assert seen == [1]
    assert "listener" in caplog.text


def test_proceed_predicate_per_step(store: WizardStore, github_user, catalog) -> None:
    assert store.can_proceed_from(0) is False
    store.set_user(github_user)
    assert store.can_proceed_from(0) is True

    assert store.can_proceed_from(1) is False
    store.update_project_config(
        {"name": "web-portal", "project_type": "web-app", "language": "typescript"}
    )
    assert store.can_proceed_from(1) is True

    assert store.can_proceed_from(2) is False
    store.update_selected_templates([catalog["infra-basic-vpc"]])
    assert store.can_proceed_from(2) is True

    assert store.can_proceed_from(3) is False
    store.update_project_config({"environment": "development"})
    assert store.can_proceed_from(3) is False
    store.update_project_config({"data_store": "none"})
    assert store.can_proceed_from(3) is True

    store.update_validation_results(
        [ValidationResult(field="budget", message="High", type="warning")]
    )
    assert store.can_proceed_from(4) is True
    store.update_validation_results(
        [ValidationResult(field="templates", message="Missing", type="error")]
    )
    assert store.can_proceed_from(4) is False

    assert store.can_proceed_from(5) is True
    assert store.can_proceed_from(6) is False
    store.complete(build_completion_data())
    assert store.can_proceed_from(6) is True


def test_proceed_predicate_ignores_other_steps_fields() -> None:
    state = OnboardingState(project_config=ProjectConfig(environment="production", data_store="postgres"))
    # Configuration passes even though nothing else is filled in
    assert can_proceed_from(state, 3) is True
    assert can_proceed_from(state, 1) is False


def test_update_provisioning_steps_replaces_list(store: WizardStore) -> None:
    steps = initial_steps()
    store.update_provisioning_steps(steps)
    store.update_provisioning_steps(steps[:2])

    assert [s.id for s in store.state.provisioning] == ["validate-config", "create-repo"]
