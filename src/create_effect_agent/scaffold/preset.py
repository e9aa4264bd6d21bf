"""Preset files: pre-recorded answers for unattended generation.

A preset is a small YAML mapping, for example::

    package_manager: pnpm
    rule_formats: [Claude, Cursor, AggregatedAgentsDoc]
    platform_pack: backend
    effectiveness_level: senior
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from create_effect_agent.errors import ValidationError
from create_effect_agent.models.config import Preset


def _format_pydantic_errors(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_preset(source: str, filename: str = "<string>") -> Preset:
    """Parse and validate preset YAML text.

    An empty document is an empty preset.

    Raises:
        ValidationError: On YAML syntax errors or unknown/invalid fields.
    """
    try:
        raw = yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise ValidationError(f"Preset {filename} is not valid YAML: {exc}") from exc

    if raw is None:
        return Preset()
    if not isinstance(raw, dict):
        raise ValidationError(
            f"Preset {filename} must be a mapping, got {type(raw).__name__}."
        )

    try:
        return Preset.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(
            f"Invalid preset {filename}: {_format_pydantic_errors(exc)}"
        ) from exc


def load_preset(path: Path) -> Preset:
    """Load a preset from a YAML file.

    Raises:
        ValidationError: If the file is missing or its content is invalid.
    """
    if not path.is_file():
        raise ValidationError(f"Preset file not found: {path}")
    return parse_preset(path.read_text(encoding="utf-8"), filename=str(path))
