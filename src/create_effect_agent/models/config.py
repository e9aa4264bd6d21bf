"""Configuration models for project generation.

GenerateConfig captures the raw command-line input. The resolver turns
it into a ResolvedConfig, which is the only thing the renderer and the
writer ever read. Both are frozen: nothing mutates a configuration
after it has been built.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class PackageManager(str, Enum):
    """Package manager the generated project documents and uses."""

    npm = "npm"
    pnpm = "pnpm"
    bun = "bun"


class TemplateKind(str, Enum):
    """Closed set of project templates."""

    basic = "basic"
    supermemory = "supermemory"


class RuleFormat(str, Enum):
    """IDE and agent guidance formats that can be rendered."""

    cursor = "Cursor"
    vscode = "VSCode"
    windsurf = "Windsurf"
    claude = "Claude"
    openai = "OpenAI"
    gemini = "Gemini"
    aggregated_agents_doc = "AggregatedAgentsDoc"


# Agent formats that also feed the aggregated Agents.md document.
AGENT_FORMATS: tuple[RuleFormat, ...] = (
    RuleFormat.claude,
    RuleFormat.openai,
    RuleFormat.gemini,
)


class PlatformPack(str, Enum):
    """Which standard type-library surface tsconfig targets."""

    none = "none"
    backend = "backend"
    frontend = "frontend"


class EffectivenessLevel(str, Enum):
    """How elaborate the generated example source and docs are."""

    none = "none"
    junior = "junior"
    intermediate = "intermediate"
    senior = "senior"


def normalize_rule_formats(formats: object) -> tuple[RuleFormat, ...]:
    """Collapse duplicates and order rule formats canonically.

    Selection order carries no meaning, so two selections with the same
    members always normalize to the same tuple.
    """
    if formats is None:
        return ()
    if isinstance(formats, (str, RuleFormat)):
        formats = [formats]
    selected = {RuleFormat(value) for value in formats}  # type: ignore[union-attr]
    return tuple(member for member in RuleFormat if member in selected)


class Preset(BaseModel):
    """Pre-recorded answers loaded from a YAML preset file.

    Every field is optional; a missing field falls through to the
    interactive prompt (or to the default in non-interactive mode).
    """

    model_config = {"extra": "forbid", "frozen": True}

    template: str | None = None
    package_manager: PackageManager | None = None
    rule_formats: tuple[RuleFormat, ...] | None = None
    platform_pack: PlatformPack | None = None
    effectiveness_level: EffectivenessLevel | None = None

    @field_validator("rule_formats", mode="before")
    @classmethod
    def _normalize_rule_formats(cls, value: object) -> tuple[RuleFormat, ...] | None:
        if value is None:
            return None
        return normalize_rule_formats(value)


class GenerateConfig(BaseModel):
    """Raw input for one generate invocation, as parsed from the CLI."""

    model_config = {"extra": "forbid", "frozen": True}

    path: str
    name: str | None = None
    non_interactive: bool = False
    skip_git: bool = False
    template: str | None = None
    preset: Preset | None = None


class ResolvedConfig(BaseModel):
    """Fully validated configuration that drives rendering and writing."""

    model_config = {"extra": "forbid", "frozen": True}

    path: Path
    name: str | None = None
    non_interactive: bool = False
    skip_git: bool = False
    project_name: str
    package_manager: PackageManager = PackageManager.npm
    template_kind: TemplateKind = TemplateKind.basic
    rule_formats: tuple[RuleFormat, ...] = ()
    platform_pack: PlatformPack = PlatformPack.none
    effectiveness_level: EffectivenessLevel = EffectivenessLevel.none

    @field_validator("rule_formats", mode="before")
    @classmethod
    def _normalize_rule_formats(cls, value: object) -> tuple[RuleFormat, ...]:
        return normalize_rule_formats(value)

    @property
    def selected_agents(self) -> list[RuleFormat]:
        """Agent formats (Claude, OpenAI, Gemini) among the selected rule formats."""
        return [fmt for fmt in AGENT_FORMATS if fmt in self.rule_formats]


class GeneratedProject(BaseModel):
    """Record of a successful generation, created once at the end of a run."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str
    absolute_path: Path
    resolved_config: ResolvedConfig
    timestamp: datetime
    files: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class ResolveContext:
    """Process state the resolver is allowed to see, passed explicitly.

    Attributes:
        cwd: Directory relative target paths are resolved against.
        env: Snapshot of environment variables.
    """

    cwd: Path
    env: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_process(cls) -> ResolveContext:
        """Capture the current working directory and environment."""
        return cls(cwd=Path.cwd(), env=dict(os.environ))
