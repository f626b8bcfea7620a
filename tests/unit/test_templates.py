"""Unit tests for template filtering, selection and estimates."""

from __future__ import annotations

from launchpad.core.constants import TEMPLATE_CATALOG
from launchpad.core.templates import (
    estimated_minutes,
    filter_templates,
    is_selected,
    resource_preview,
    selection_caption,
    toggle_template,
    total_estimated_minutes,
)


def test_all_filter_keeps_whole_catalog() -> None:
    assert filter_templates(TEMPLATE_CATALOG, "all") == TEMPLATE_CATALOG


def test_type_filter_narrows_catalog() -> None:
    infra = filter_templates(TEMPLATE_CATALOG, "infrastructure")
    repos = filter_templates(TEMPLATE_CATALOG, "repository")

    assert {t.type for t in infra} == {"infrastructure"}
    assert {t.type for t in repos} == {"repository"}
    assert len(infra) + len(repos) == len(TEMPLATE_CATALOG)


def test_project_context_does_not_hide_templates() -> None:
    templates = filter_templates(
        TEMPLATE_CATALOG, "all", project_type="data-pipeline", language="rust"
    )
    assert templates == TEMPLATE_CATALOG


def test_toggle_twice_restores_selection(catalog) -> None:
    vpc = catalog["infra-basic-vpc"]

    selected = toggle_template([], vpc)
    assert is_selected(selected, "infra-basic-vpc")

    selected = toggle_template(selected, vpc)
    assert selected == []


def test_toggle_removes_by_id_not_identity(catalog) -> None:
    vpc = catalog["infra-basic-vpc"]
    selected = toggle_template([vpc], vpc.model_copy())
    assert selected == []


def test_estimated_minutes_reads_leading_integer(catalog) -> None:
    assert estimated_minutes(catalog["infra-serverless"]) == 25
    odd = catalog["infra-serverless"].model_copy(update={"estimated_time": "about an hour"})
    assert estimated_minutes(odd) == 0


def test_total_estimated_minutes(catalog) -> None:
    picked = [catalog["infra-basic-vpc"], catalog["repo-react-starter"]]
    assert total_estimated_minutes(picked) == 20
    assert total_estimated_minutes([]) == 0


def test_resource_preview_truncates_with_count(catalog) -> None:
    assert resource_preview(catalog["infra-basic-vpc"]) == (
        "VPC, Subnets, Internet Gateway +3 more"
    )
    short = catalog["repo-react-starter"].model_copy(update={"resources": ["A", "B"]})
    assert resource_preview(short) == "A, B"


def test_selection_caption_pluralizes() -> None:
    assert selection_caption(0) == "0 templates selected"
    assert selection_caption(1) == "1 template selected"
    assert selection_caption(3) == "3 templates selected"
