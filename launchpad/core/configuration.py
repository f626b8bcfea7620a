"""Helpers for the Configuration step (budget, compliance, resource tags)."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence


def parse_budget(raw: str) -> int:
    """Parse the monthly budget input. Invalid or negative input means 0 (no limit)."""
    try:
        value = int(raw.strip())
    except ValueError:
        return 0
    return max(value, 0)


def format_budget(budget: Optional[int]) -> str:
    if budget and budget > 0:
        return f"${budget}/month"
    return "No limit"


def toggle_compliance(current: Sequence[str], option_id: str) -> list[str]:
    if option_id in current:
        return [c for c in current if c != option_id]
    return [*current, option_id]


def update_tag(tags: Mapping[str, str], key: str, value: str) -> dict[str, str]:
    """Set a resource tag; an empty value removes the key entirely."""
    updated = dict(tags)
    if value:
        updated[key] = value
    else:
        updated.pop(key, None)
    return updated


def tag_display_value(tags: Mapping[str, str], key: str, environment: Optional[str]) -> str:
    """Value shown in a tag input. The Environment tag falls back to the chosen environment."""
    if key == "Environment":
        return tags.get(key) or environment or ""
    return tags.get(key, "")


def format_compliance(compliance: Sequence[str]) -> str:
    return ", ".join(compliance) if compliance else "None"
