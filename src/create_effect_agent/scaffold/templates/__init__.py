"""Built-in project templates, keyed by template kind."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from create_effect_agent.models.config import ResolvedConfig, TemplateKind
from create_effect_agent.scaffold.templates.basic import basic_stub_pairs, render_basic_template
from create_effect_agent.scaffold.templates.stubs import StubPair
from create_effect_agent.scaffold.templates.supermemory import (
    render_supermemory_template,
    supermemory_stub_pairs,
)

TemplateRenderer = Callable[[ResolvedConfig], dict[str, str]]


@dataclass(frozen=True)
class ProjectTemplate:
    """A template's renderer and the stub pairs its output must keep in sync."""

    render: TemplateRenderer
    stub_pairs: Callable[[ResolvedConfig], tuple[StubPair, ...]]


TEMPLATE_RENDERERS: dict[TemplateKind, ProjectTemplate] = {
    TemplateKind.basic: ProjectTemplate(render_basic_template, basic_stub_pairs),
    TemplateKind.supermemory: ProjectTemplate(render_supermemory_template, supermemory_stub_pairs),
}

__all__ = [
    "TEMPLATE_RENDERERS",
    "ProjectTemplate",
    "StubPair",
    "TemplateRenderer",
    "render_basic_template",
    "render_supermemory_template",
]
