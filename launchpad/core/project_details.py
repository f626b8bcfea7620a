"""Field validation for the Project Details step."""

from __future__ import annotations

import re
from typing import Mapping, Optional

from launchpad.core.constants import FRAMEWORKS

# Lowercase letters, digits and hyphens only
_NAME_RE = re.compile(r"^[a-z0-9-]+$")

NAME_MIN_LENGTH = 3
DESCRIPTION_MIN_LENGTH = 10

REQUIRED_FIELDS = ("name", "display_name", "description", "project_type", "language")


def field_error(field: str, value: str) -> Optional[str]:
    """Return the error message for a single field, or None if it is valid.

    Fields without rules (project_type, language, framework) are always valid.
    """
    if field == "name":
        if not value:
            return "Project name is required"
        if not _NAME_RE.match(value):
            return "Project name must be lowercase letters, numbers, and hyphens only"
        if len(value) < NAME_MIN_LENGTH:
            return f"Project name must be at least {NAME_MIN_LENGTH} characters"
        return None
    if field == "display_name":
        if not value:
            return "Display name is required"
        return None
    if field == "description":
        if not value:
            return "Description is required"
        if len(value) < DESCRIPTION_MIN_LENGTH:
            return f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"
        return None
    return None


def validate_field(field: str, value: str, errors: Mapping[str, str]) -> dict[str, str]:
    """Re-check one field and return the updated field->message map.

    Other fields' entries are left untouched.
    """
    updated = dict(errors)
    message = field_error(field, value)
    if message:
        updated[field] = message
    else:
        updated.pop(field, None)
    return updated


def is_details_valid(draft: Mapping[str, str], errors: Mapping[str, str]) -> bool:
    """No outstanding field errors and every required field populated."""
    if errors:
        return False
    return all(draft.get(field) for field in REQUIRED_FIELDS)


def frameworks_for(language: str) -> list[str]:
    return list(FRAMEWORKS.get(language, []))
