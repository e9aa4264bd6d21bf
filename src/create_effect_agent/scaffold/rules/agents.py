"""Per-agent guidance documents: docs/agents/<Agent>.md."""

from __future__ import annotations

from create_effect_agent.models.config import ResolvedConfig, RuleFormat
from create_effect_agent.scaffold.rules.guidance import (
    level_patterns,
    level_phrase,
    workflow_commands,
)
from create_effect_agent.templating import render_template

AGENT_DOCS_DIR = "docs/agents"

AGENT_TIPS: dict[RuleFormat, str] = {
    RuleFormat.claude: (
        "Focus on understanding the Effect composition patterns. Ask for "
        "clarification on complex type signatures and effect flows."
    ),
    RuleFormat.openai: (
        "Remember that an Effect is not a Promise: it describes a computation "
        "and composes before it runs. Avoid imperative control flow."
    ),
    RuleFormat.gemini: (
        "Study the error handling patterns carefully. TaggedError classes "
        "enable type-safe error discrimination with `Effect.catchTag`."
    ),
}

AGENT_TEMPLATE = """# {{agent}} Guidelines for {{projectName}}

## Project Overview
{{projectName}} is a {{levelPhrase}}Effect-TS library with agentic development support.

## Effect Programming

### Key Patterns to Follow
{{levelPatterns}}- Keep every side effect inside Effect

### Code Style
- Use TypeScript strict mode
- Prefer readonly interfaces and branded types
- Write comprehensive tests with Vitest
- Format code with Prettier

## Development Workflow

```bash
{{workflow}}```

### Key Files
- `src/index.ts` - Main library exports and examples
- `test/index.test.ts` - Test suite
- `tsconfig.json` - TypeScript configuration
- `vitest.config.ts` - Test runner configuration

## {{agent}} Specific Tips

{{tips}}
"""


def agent_doc_path(agent: RuleFormat) -> str:
    return f"{AGENT_DOCS_DIR}/{agent.value}.md"


def render_agent_doc(config: ResolvedConfig, agent: RuleFormat) -> dict[str, str]:
    """Render the guidance document for one agent format."""
    if agent not in AGENT_TIPS:
        raise ValueError(f"{agent.value} is not an agent rule format")
    content = render_template(
        AGENT_TEMPLATE,
        {
            "agent": agent.value,
            "projectName": config.project_name,
            "levelPhrase": level_phrase(config),
            "levelPatterns": level_patterns(config),
            "workflow": workflow_commands(config),
            "tips": AGENT_TIPS[agent],
        },
    )
    return {agent_doc_path(agent): content}


def render_claude_doc(config: ResolvedConfig) -> dict[str, str]:
    return render_agent_doc(config, RuleFormat.claude)


def render_openai_doc(config: ResolvedConfig) -> dict[str, str]:
    return render_agent_doc(config, RuleFormat.openai)


def render_gemini_doc(config: ResolvedConfig) -> dict[str, str]:
    return render_agent_doc(config, RuleFormat.gemini)
