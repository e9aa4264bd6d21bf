"""Cursor rules: .cursor/rules/agent.md."""

from __future__ import annotations

from create_effect_agent.models.config import ResolvedConfig
from create_effect_agent.scaffold.rules.guidance import level_patterns, pack_notes
from create_effect_agent.templating import render_template

CURSOR_RULES_PATH = ".cursor/rules/agent.md"

CURSOR_TEMPLATE = """# Agent Rules for {{projectName}}

## Project Context
{{projectName}} is an Effect-TS library{{levelSuffix}}.

## Effect Patterns
{{levelPatterns}}- Keep side effects inside Effect

## TypeScript Guidelines
{{packNotes}}- Use strict TypeScript settings
- Prefer readonly interfaces
- Use branded types for domain-specific values

## Testing
- Write tests for all non-trivial functions
- Use `Effect.runSync` for simple effect testing
- Test error cases explicitly
"""


def render_cursor_rules(config: ResolvedConfig) -> dict[str, str]:
    level = config.effectiveness_level.value
    suffix = "" if level == "none" else f" demonstrating {level} level patterns"
    content = render_template(
        CURSOR_TEMPLATE,
        {
            "projectName": config.project_name,
            "levelSuffix": suffix,
            "levelPatterns": level_patterns(config),
            "packNotes": pack_notes(config),
        },
    )
    return {CURSOR_RULES_PATH: content}
