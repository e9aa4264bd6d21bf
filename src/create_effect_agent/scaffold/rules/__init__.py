"""Rule-file renderers, one per RuleFormat.

The registry must cover the closed RuleFormat set exactly; a format
without a renderer is a programming defect and fails the render.
"""

from __future__ import annotations

from collections.abc import Callable

from create_effect_agent.errors import TemplateError
from create_effect_agent.models.config import ResolvedConfig, RuleFormat
from create_effect_agent.scaffold.rules.agents import (
    render_claude_doc,
    render_gemini_doc,
    render_openai_doc,
)
from create_effect_agent.scaffold.rules.agents_md import render_agents_md
from create_effect_agent.scaffold.rules.cursor import render_cursor_rules
from create_effect_agent.scaffold.rules.vscode import render_vscode_settings
from create_effect_agent.scaffold.rules.windsurf import render_windsurf_rules

RuleRenderer = Callable[[ResolvedConfig], dict[str, str]]

RULE_RENDERERS: dict[RuleFormat, RuleRenderer] = {
    RuleFormat.cursor: render_cursor_rules,
    RuleFormat.vscode: render_vscode_settings,
    RuleFormat.windsurf: render_windsurf_rules,
    RuleFormat.claude: render_claude_doc,
    RuleFormat.openai: render_openai_doc,
    RuleFormat.gemini: render_gemini_doc,
    RuleFormat.aggregated_agents_doc: render_agents_md,
}


def missing_rule_renderers(
    renderers: dict[RuleFormat, RuleRenderer] | None = None,
) -> list[RuleFormat]:
    """Rule formats with no registered renderer."""
    registry = RULE_RENDERERS if renderers is None else renderers
    return [fmt for fmt in RuleFormat if fmt not in registry]


def render_rule_files(
    config: ResolvedConfig,
    renderers: dict[RuleFormat, RuleRenderer] | None = None,
) -> dict[str, str]:
    """Render the files of every selected rule format.

    Raises:
        TemplateError: If a selected format has no renderer, or two
            formats claim the same output path.
    """
    registry = RULE_RENDERERS if renderers is None else renderers
    files: dict[str, str] = {}
    for fmt in config.rule_formats:
        renderer = registry.get(fmt)
        if renderer is None:
            raise TemplateError(f"No renderer registered for rule format '{fmt.value}'")
        for path, content in renderer(config).items():
            if path in files:
                raise TemplateError(f"Rule format '{fmt.value}' overwrites {path}")
            files[path] = content
    return files


__all__ = [
    "RULE_RENDERERS",
    "RuleRenderer",
    "missing_rule_renderers",
    "render_rule_files",
]
