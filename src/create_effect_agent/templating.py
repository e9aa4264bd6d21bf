"""Placeholder substitution for text templates.

Templates mark variables as ``{{name}}``. Substitution is literal and
single-pass: a substituted value is never scanned again, so a value
that itself contains ``{{other}}`` is written out unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from create_effect_agent.errors import MissingVariablesError

# A placeholder is one or more word characters between double braces.
PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def substitute(text: str, variables: Mapping[str, str]) -> str:
    """Replace every ``{{key}}`` in text with its value from variables.

    Placeholders whose name is not in variables are left untouched.

    Example:
        >>> substitute("Hello {{name}}, welcome to {{project}}",
        ...            {"name": "Alice", "project": "Effect"})
        'Hello Alice, welcome to Effect'
    """
    if not variables:
        return text

    keys = sorted(variables, key=len, reverse=True)
    pattern = re.compile(
        r"\{\{(" + "|".join(re.escape(key) for key in keys) + r")\}\}"
    )

    # One scan over the original text: replacements are never re-read.
    return pattern.sub(lambda match: variables[match.group(1)], text)


def extract_variable_names(text: str) -> list[str]:
    """Return the distinct placeholder names in text, in first-occurrence order.

    Example:
        >>> extract_variable_names("Hello {{name}}, welcome to {{project}} {{name}}")
        ['name', 'project']
    """
    names: list[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(text):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


def validate_coverage(text: str, variables: Mapping[str, str]) -> None:
    """Check that variables supplies every placeholder text requires.

    Raises:
        MissingVariablesError: Listing each placeholder with no value.
    """
    missing = [name for name in extract_variable_names(text) if name not in variables]
    if missing:
        raise MissingVariablesError(missing)


def render_template(text: str, variables: Mapping[str, str]) -> str:
    """Validate coverage, then substitute. Used by the built-in templates."""
    validate_coverage(text, variables)
    return substitute(text, variables)
