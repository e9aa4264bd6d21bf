"""Data models - re-exports all public model classes."""

from create_effect_agent.models.config import (
    AGENT_FORMATS,
    EffectivenessLevel,
    GenerateConfig,
    GeneratedProject,
    PackageManager,
    PlatformPack,
    Preset,
    ResolveContext,
    ResolvedConfig,
    RuleFormat,
    TemplateKind,
)

__all__ = [
    "AGENT_FORMATS",
    "EffectivenessLevel",
    "GenerateConfig",
    "GeneratedProject",
    "PackageManager",
    "PlatformPack",
    "Preset",
    "ResolveContext",
    "ResolvedConfig",
    "RuleFormat",
    "TemplateKind",
]
