"""Shared guidance text for the rule-file renderers."""

from __future__ import annotations

from create_effect_agent.models.config import (
    EffectivenessLevel,
    PlatformPack,
    ResolvedConfig,
)
from create_effect_agent.scaffold.package_managers import commands_for

LEVEL_PATTERNS: dict[EffectivenessLevel, list[str]] = {
    EffectivenessLevel.junior: [
        "Use `Effect.sync` for pure computations",
        "Use `Effect.tryPromise` for async operations",
        "Chain effects with `Effect.flatMap` and `Effect.gen`",
    ],
    EffectivenessLevel.intermediate: [
        "Implement Effect.Services for dependency injection",
        "Provide service implementations with Layers",
        "Handle errors explicitly with `Effect.catchTag`",
    ],
    EffectivenessLevel.senior: [
        "Design error taxonomies with TaggedError classes",
        "Implement Effect.Services for external dependencies",
        "Compose effects with `Effect.gen`, `Effect.all` and `Effect.race`",
    ],
}

PACK_NOTES: dict[PlatformPack, list[str]] = {
    PlatformPack.frontend: [
        "Include DOM and DOM.Iterable lib types for browser APIs",
        "Use JSX and React types when appropriate",
    ],
    PlatformPack.backend: [
        "DOM lib types are excluded; target server runtimes",
        "Use Node.js types for server-side APIs",
    ],
}


def bullet_list(items: list[str]) -> str:
    return "".join(f"- {item}\n" for item in items)


def level_patterns(config: ResolvedConfig) -> str:
    """Markdown bullets for the effectiveness level, empty for 'none'."""
    return bullet_list(LEVEL_PATTERNS.get(config.effectiveness_level, []))


def pack_notes(config: ResolvedConfig) -> str:
    """Markdown bullets for the platform pack, empty for 'none'."""
    return bullet_list(PACK_NOTES.get(config.platform_pack, []))


def level_phrase(config: ResolvedConfig) -> str:
    """'senior level ' style qualifier, or '' when no level was chosen."""
    if config.effectiveness_level is EffectivenessLevel.none:
        return ""
    return f"{config.effectiveness_level.value} level "


def workflow_commands(config: ResolvedConfig) -> str:
    cmds = commands_for(config.package_manager)
    return (
        f"# Test\n{cmds.script('test')}\n\n"
        f"# Build\n{cmds.script('build')}\n\n"
        f"# Type check\n{cmds.script('typecheck')}\n"
    )
