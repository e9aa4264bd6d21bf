"""Project name grammar.

A project name is kebab-case: lowercase letters, digits and hyphens,
starting with a letter, with no two hyphens in a row, and at most 214
characters long (the npm package name limit).
"""

from __future__ import annotations

import re

from create_effect_agent.errors import ValidationError

MAX_NAME_LENGTH = 214
DEFAULT_PROJECT_NAME = "my-effect-lib"

_ALLOWED_CHARS = re.compile(r"[a-z0-9-]+")


def project_name_problem(name: str) -> str | None:
    """Describe the first grammar rule name violates, or None if it is valid."""
    if not name:
        return "Project name must not be empty."
    if len(name) > MAX_NAME_LENGTH:
        return (
            f"Project name must be at most {MAX_NAME_LENGTH} characters "
            f"(got {len(name)})."
        )
    if not ("a" <= name[0] <= "z"):
        return f"Project name '{name}' must start with a lowercase letter (a-z)."
    if not _ALLOWED_CHARS.fullmatch(name):
        return (
            f"Project name '{name}' must be kebab-case: only lowercase letters, "
            f"digits, and hyphens are allowed."
        )
    if "--" in name:
        return f"Project name '{name}' must not contain consecutive hyphens ('--')."
    return None


def validate_project_name(name: str) -> str:
    """Return name unchanged if it is valid kebab-case.

    Raises:
        ValidationError: With a message naming the violated rule.
    """
    problem = project_name_problem(name)
    if problem is not None:
        raise ValidationError(problem)
    return name
