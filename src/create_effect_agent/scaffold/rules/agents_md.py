"""Aggregated agent guidance: docs/agents/Agents.md.

Summarizes whichever of Claude, OpenAI and Gemini are selected. With
none of them selected there is nothing to aggregate and no file is
produced.
"""

from __future__ import annotations

from create_effect_agent.models.config import ResolvedConfig
from create_effect_agent.scaffold.rules.agents import AGENT_DOCS_DIR, AGENT_TIPS, agent_doc_path
from create_effect_agent.scaffold.rules.guidance import (
    level_patterns,
    level_phrase,
    workflow_commands,
)
from create_effect_agent.templating import render_template

AGENTS_MD_PATH = f"{AGENT_DOCS_DIR}/Agents.md"

AGENTS_MD_TEMPLATE = """# Agent Guidelines for {{projectName}}

## Project Context
{{projectName}} is a {{levelPhrase}}Effect-TS library with comprehensive development tooling.

## Supported Agents
This project includes guidance for: {{agentList}}

## Core Principles

### Effect Programming
- **Functional Composition**: Effects compose like functions, not promises
- **Type Safety**: TypeScript strict mode catches errors at compile time
- **Explicit Errors**: TaggedError classes enable type-safe error handling
- **Dependency Injection**: Effect.Services with Layers provide testability
{{levelSection}}
### Development Workflow
```bash
{{workflow}}```

## Agent-Specific Guidance
{{agentSections}}
## File Structure
- `src/index.ts` - Main library exports
- `test/` - Test suite
- `tsconfig.json` - TypeScript configuration
- `vitest.config.ts` - Test runner setup
- `docs/agents/` - Agent-specific guidance
"""


def render_agents_md(config: ResolvedConfig) -> dict[str, str]:
    agents = config.selected_agents
    if not agents:
        return {}

    patterns = level_patterns(config)
    level_section = ""
    if patterns:
        title = config.effectiveness_level.value.capitalize()
        level_section = f"\n### {title} Level Patterns\n{patterns}"

    agent_sections = "".join(
        f"\n### {agent.value}\n{AGENT_TIPS[agent]}\nSee `{agent_doc_path(agent)}`.\n"
        for agent in agents
    )
    content = render_template(
        AGENTS_MD_TEMPLATE,
        {
            "projectName": config.project_name,
            "levelPhrase": level_phrase(config),
            "agentList": ", ".join(agent.value for agent in agents),
            "levelSection": level_section,
            "workflow": workflow_commands(config),
            "agentSections": agent_sections,
        },
    )
    return {AGENTS_MD_PATH: content}
