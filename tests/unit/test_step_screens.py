"""Unit tests for form step screens writing into the shared store."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from launchpad.core.provisioning import initial_steps, progress
from launchpad.core.wizard import WizardStore
from launchpad.models import OnboardingState, ProjectConfig
from launchpad.tui.common.widgets.step_indicator import render_steps as render_indicator
from launchpad.tui.onboarding.screens.configuration import ConfigurationScreen
from launchpad.tui.onboarding.screens.project_details import ProjectDetailsScreen
from launchpad.tui.onboarding.screens.provisioning import ProvisioningScreen, render_steps
from launchpad.tui.onboarding.screens.review import ReviewScreen
from launchpad.tui.onboarding.screens.templates import TemplateSelectionScreen


def _quiet(monkeypatch: Any, screen: Any, *names: str) -> None:
    for name in names:
        monkeypatch.setattr(screen, name, lambda *_args, **_kwargs: None)


def test_details_field_is_validated_and_merged(monkeypatch: Any, store, settings) -> None:
    screen = ProjectDetailsScreen(store, settings)
    _quiet(monkeypatch, screen, "_render_errors", "_render_status")

    screen.set_field("name", "ab")
    assert screen._errors == {"name": "Project name must be at least 3 characters"}
    # Invalid input still reaches the shared config
    assert store.state.project_config.name == "ab"

    screen.set_field("name", "web-portal")
    assert screen._errors == {}
    assert store.state.project_config.name == "web-portal"


def test_details_draft_starts_from_existing_config(settings) -> None:
    store = WizardStore(
        OnboardingState(project_config=ProjectConfig(name="billing-api", language="go"))
    )
    screen = ProjectDetailsScreen(store, settings)

    assert screen._draft["name"] == "billing-api"
    assert screen._draft["language"] == "go"
    assert screen._draft["framework"] == ""


def test_changing_language_clears_framework(monkeypatch: Any, store, settings) -> None:
    screen = ProjectDetailsScreen(store, settings)
    _quiet(monkeypatch, screen, "_render_errors", "_render_status")
    options: list[list[tuple[str, str]]] = []
    fake_widget = SimpleNamespace(set_options=options.append, display=False)
    monkeypatch.setattr(screen, "query_one", lambda *_args, **_kwargs: fake_widget)

    screen.select_language("python")
    screen.set_field("framework", "Django")
    screen.select_language("go")

    assert store.state.project_config.language == "go"
    assert store.state.project_config.framework is None
    assert options[-1] == [("Gin", "Gin"), ("Echo", "Echo"), ("Fiber", "Fiber")]
    assert fake_widget.display is True


def test_configuration_budget_only_written_when_changed(store, settings) -> None:
    screen = ConfigurationScreen(store, settings)
    commits: list[int] = []
    store.subscribe(lambda _state: commits.append(1))

    screen.set_budget("not a number")
    assert commits == []

    screen.set_budget("1500")
    assert store.state.project_config.budget == 1500
    assert len(commits) == 1


def test_configuration_compliance_and_tags(store, settings) -> None:
    screen = ConfigurationScreen(store, settings)

    screen.toggle_compliance("gdpr")
    screen.toggle_compliance("hipaa")
    screen.toggle_compliance("gdpr")
    screen.set_tag("CostCenter", "CC-42")
    screen.set_tag("Team", "Payments")
    screen.set_tag("Team", "")
    screen.select_data_store("postgres")

    config = store.state.project_config
    assert config.compliance == ["hipaa"]
    assert config.tags == {"CostCenter": "CC-42"}
    assert config.data_store == "postgres"


def test_templates_toggle_updates_store(monkeypatch: Any, store, settings) -> None:
    screen = TemplateSelectionScreen(store, settings)
    _quiet(monkeypatch, screen, "_render_list")

    screen.toggle("infra-basic-vpc")
    screen.toggle("repo-api-fastapi")
    screen.toggle("infra-basic-vpc")
    screen.toggle("no-such-template")

    assert [t.id for t in store.state.selected_templates] == ["repo-api-fastapi"]


def test_templates_filter_cycles(monkeypatch: Any, store, settings) -> None:
    screen = TemplateSelectionScreen(store, settings)
    _quiet(monkeypatch, screen, "_apply_filter")

    seen = []
    for _ in range(3):
        screen.action_cycle_filter()
        seen.append(screen._filter)

    assert seen == ["infrastructure", "repository", "all"]


def test_review_revalidates_only_when_inputs_change(store, settings, catalog) -> None:
    store.update_project_config({"name": "web-portal", "environment": "production"})
    store.update_selected_templates([catalog["infra-basic-vpc"]])
    screen = ReviewScreen(store, settings)
    commits: list[int] = []
    store.subscribe(lambda _state: commits.append(1))

    screen.revalidate()
    screen.revalidate()
    assert len(commits) == 1
    assert [r.field for r in store.state.validation_results] == ["compliance"]

    store.update_project_config({"compliance": ["sox"]})
    screen.revalidate()
    assert store.state.validation_results == []


def test_provisioning_screen_runs_in_exclusive_worker(monkeypatch: Any, store, settings) -> None:
    screen = ProvisioningScreen(store, settings)
    workers: list[bool] = []

    def fake_run_worker(coro: Any, exclusive: bool = False) -> None:
        workers.append(exclusive)
        coro.close()

    monkeypatch.setattr(screen, "run_worker", fake_run_worker)

    screen.start_provisioning()

    assert workers == [True]
    assert screen._runner is not None


def test_provisioning_render_marks_current_step() -> None:
    steps = initial_steps()
    steps[0] = steps[0].model_copy(update={"status": "completed", "details": "All good"})
    text = render_steps(steps, current_index=1).plain

    assert "✓ Validate Configuration" in text
    assert "All good" in text
    assert "▶ ○ Create Repository" in text
    assert progress(steps) == (1, 6, 17)


def test_step_indicator_marks_finished_steps() -> None:
    text = render_indicator(2).plain

    assert text.startswith("✓ Authentication")
    assert "✓ Project Details" in text
    assert "3 Template Selection" in text
    assert "7 Complete" in text
