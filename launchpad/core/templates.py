"""Template catalog filtering, selection and time estimates."""

from __future__ import annotations

import re
from typing import Literal, Sequence

from launchpad.models import Template

TemplateFilter = Literal["all", "infrastructure", "repository"]

TEMPLATE_FILTERS: list[TemplateFilter] = ["all", "infrastructure", "repository"]

_LEADING_INT_RE = re.compile(r"^\s*(\d+)")

# Resources listed inline before collapsing into "+N more"
RESOURCE_PREVIEW_COUNT = 3


def _is_relevant(template: Template, project_type: str, language: str) -> bool:
    # Loose relevance check: every branch admits the template, so in
    # practice only the type filter narrows the catalog.
    if project_type == "web-app" and template.id == "repo-react-starter":
        return True
    if language == "python" and template.id == "repo-api-fastapi":
        return True
    if template.type == "infrastructure":
        return True
    return True


def filter_templates(
    catalog: Sequence[Template],
    type_filter: TemplateFilter = "all",
    project_type: str = "",
    language: str = "",
) -> list[Template]:
    """Templates matching the type filter and the relevance heuristic."""
    return [
        t
        for t in catalog
        if (type_filter == "all" or t.type == type_filter)
        and _is_relevant(t, project_type, language)
    ]


def is_selected(selected: Sequence[Template], template_id: str) -> bool:
    return any(t.id == template_id for t in selected)


def toggle_template(selected: Sequence[Template], template: Template) -> list[Template]:
    """Add the template if absent, remove it (by ID) if present."""
    if is_selected(selected, template.id):
        return [t for t in selected if t.id != template.id]
    return [*selected, template]


def estimated_minutes(template: Template) -> int:
    """Leading integer of the estimate ("15 minutes" -> 15); 0 if none."""
    match = _LEADING_INT_RE.match(template.estimated_time)
    return int(match.group(1)) if match else 0


def total_estimated_minutes(templates: Sequence[Template]) -> int:
    return sum(estimated_minutes(t) for t in templates)


def resource_preview(template: Template, limit: int = RESOURCE_PREVIEW_COUNT) -> str:
    """Comma-joined first resources, with a "+N more" suffix when truncated."""
    shown = ", ".join(template.resources[:limit])
    hidden = len(template.resources) - limit
    if hidden > 0:
        shown += f" +{hidden} more"
    return shown


def selection_caption(count: int) -> str:
    return f"{count} template{'' if count == 1 else 's'} selected"
