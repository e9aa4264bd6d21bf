"""Windsurf rules: .windsurf/rules.md."""

from __future__ import annotations

from create_effect_agent.models.config import ResolvedConfig
from create_effect_agent.scaffold.rules.guidance import level_patterns, pack_notes
from create_effect_agent.templating import render_template

WINDSURF_RULES_PATH = ".windsurf/rules.md"

WINDSURF_TEMPLATE = """# Development Guidelines for {{projectName}}

## Effect Programming Patterns

### Core Principles
- **Type Safety First**: Leverage TypeScript's strict mode for compile-time guarantees
- **Effect Everything**: Wrap all side effects in Effect for composability and testability
- **Explicit Errors**: Use TaggedError classes for discriminated unions
{{levelSection}}{{packSection}}
## Testing Strategy
- Test all public APIs
- Use `Effect.runSync` for pure effects
- Mock Effect.Services in tests
- Test error conditions explicitly
"""


def render_windsurf_rules(config: ResolvedConfig) -> dict[str, str]:
    patterns = level_patterns(config)
    notes = pack_notes(config)
    level_section = ""
    if patterns:
        title = config.effectiveness_level.value.capitalize()
        level_section = f"\n### {title} Patterns\n{patterns}"
    pack_section = ""
    if notes:
        pack_section = f"\n## TypeScript Configuration\n{notes}"

    content = render_template(
        WINDSURF_TEMPLATE,
        {
            "projectName": config.project_name,
            "levelSection": level_section,
            "packSection": pack_section,
        },
    )
    return {WINDSURF_RULES_PATH: content}
