"""Configuration resolution: CLI input + preset + prompts + defaults.

resolve() is the single place where a GenerateConfig becomes a
ResolvedConfig. It performs every validation up front and has no
filesystem or process side effects, so a failure here leaves the
target directory untouched.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from create_effect_agent.errors import GenerateError, ValidationError
from create_effect_agent.logging import get_logger
from create_effect_agent.models.config import (
    EffectivenessLevel,
    GenerateConfig,
    PackageManager,
    PlatformPack,
    Preset,
    ResolveContext,
    ResolvedConfig,
    RuleFormat,
    TemplateKind,
    normalize_rule_formats,
)
from create_effect_agent.prompts import Choice, Prompter
from create_effect_agent.scaffold.naming import (
    DEFAULT_PROJECT_NAME,
    project_name_problem,
    validate_project_name,
)

logger = get_logger("resolver")

E = TypeVar("E")

TEMPLATE_CHOICES: list[Choice] = [
    Choice("Basic Effect Library", TemplateKind.basic, "Minimal Effect-TS library"),
    Choice(
        "Supermemory Effect Library",
        TemplateKind.supermemory,
        "Effect-TS library wired to effect-supermemory",
    ),
]

PACKAGE_MANAGER_CHOICES: list[Choice] = [
    Choice("npm", PackageManager.npm, "Node Package Manager"),
    Choice("pnpm", PackageManager.pnpm, "Performant NPM"),
    Choice("bun", PackageManager.bun, "Fast JavaScript runtime & bundler"),
]

RULE_FORMAT_CHOICES: list[Choice] = [
    Choice("Cursor", RuleFormat.cursor, ".cursor/rules/agent.md"),
    Choice("VS Code", RuleFormat.vscode, ".vscode/settings.json"),
    Choice("Windsurf", RuleFormat.windsurf, ".windsurf/rules.md"),
    Choice("Claude", RuleFormat.claude, "docs/agents/Claude.md"),
    Choice("OpenAI", RuleFormat.openai, "docs/agents/OpenAI.md"),
    Choice("Gemini", RuleFormat.gemini, "docs/agents/Gemini.md"),
    Choice("Agents.md", RuleFormat.aggregated_agents_doc, "Aggregated agent guidance"),
]

PLATFORM_PACK_CHOICES: list[Choice] = [
    Choice("None", PlatformPack.none, "Basic TypeScript configuration"),
    Choice("Back-end", PlatformPack.backend, "Node.js types, exclude DOM"),
    Choice("Front-end", PlatformPack.frontend, "DOM types, JSX guidance"),
]

EFFECTIVENESS_LEVEL_CHOICES: list[Choice] = [
    Choice("None", EffectivenessLevel.none, "Basic Effect usage"),
    Choice("Junior", EffectivenessLevel.junior, "Basic Effect examples and comments"),
    Choice("Intermediate", EffectivenessLevel.intermediate, "Effect.Service + Layer examples"),
    Choice("Senior", EffectivenessLevel.senior, "Error taxonomy and composability notes"),
]


def resolve_template_kind(template_id: str | None) -> TemplateKind:
    """Map a --template value onto the closed set of template kinds.

    Raises:
        GenerateError: With step 'template' if the id is unknown.
    """
    if template_id is None:
        return TemplateKind.basic
    try:
        return TemplateKind(template_id)
    except ValueError:
        available = ", ".join(kind.value for kind in TemplateKind)
        raise GenerateError(
            f"Unknown template '{template_id}'. Available templates: {available}.",
            step="template",
            context={"template": template_id},
        ) from None


def _resolve_path(raw_path: str, context: ResolveContext) -> Path:
    if not raw_path or not raw_path.strip():
        raise ValidationError("Path is required.")
    path = Path(raw_path)
    if not path.is_absolute():
        path = context.cwd / path
    # Collapse ".." segments lexically; the target may not exist yet.
    return Path(os.path.normpath(path))


def _ask(question: Callable[[], Any], what: str) -> Any:
    """Run one prompt, turning terminal aborts into a ValidationError."""
    try:
        return question()
    except (KeyboardInterrupt, EOFError):
        raise ValidationError(f"Prompt aborted while asking for {what}.") from None


def _coerce(enum_type: Callable[[Any], E], value: Any, what: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        raise ValidationError(f"Invalid {what}: {value!r}.") from None


def _prompt_project_name(raw: GenerateConfig, prompter: Prompter) -> str:
    default = raw.name or DEFAULT_PROJECT_NAME
    return _ask(
        lambda: prompter.text("Project name:", default=default, validate=project_name_problem),
        "the project name",
    )


def _prompt_template_kind(raw: GenerateConfig, preset: Preset, prompter: Prompter) -> TemplateKind:
    template_id = raw.template or preset.template
    if template_id is not None:
        return resolve_template_kind(template_id)
    value = _ask(
        lambda: prompter.select("Select a template:", TEMPLATE_CHOICES),
        "the template",
    )
    return _coerce(TemplateKind, value, "template")


def _prompt_answers(prompter: Prompter, preset: Preset) -> dict[str, Any]:
    """Ask the remaining questions in their fixed order, skipping preset answers."""
    answers: dict[str, Any] = {}

    if preset.package_manager is not None:
        answers["package_manager"] = preset.package_manager
    else:
        value = _ask(
            lambda: prompter.select("Package manager:", PACKAGE_MANAGER_CHOICES),
            "the package manager",
        )
        answers["package_manager"] = _coerce(PackageManager, value, "package manager")

    if preset.rule_formats is not None:
        answers["rule_formats"] = preset.rule_formats
    else:
        values = _ask(
            lambda: prompter.multi_select("Select IDE and agent rules:", RULE_FORMAT_CHOICES),
            "the rule formats",
        )
        try:
            answers["rule_formats"] = normalize_rule_formats(values)
        except ValueError as exc:
            raise ValidationError(f"Invalid rule format selection: {exc}") from None

    if preset.platform_pack is not None:
        answers["platform_pack"] = preset.platform_pack
    else:
        value = _ask(
            lambda: prompter.select("TypeScript pack:", PLATFORM_PACK_CHOICES),
            "the TypeScript pack",
        )
        answers["platform_pack"] = _coerce(PlatformPack, value, "TypeScript pack")

    if preset.effectiveness_level is not None:
        answers["effectiveness_level"] = preset.effectiveness_level
    else:
        value = _ask(
            lambda: prompter.select("Effect pack:", EFFECTIVENESS_LEVEL_CHOICES),
            "the Effect pack",
        )
        answers["effectiveness_level"] = _coerce(EffectivenessLevel, value, "Effect pack")

    return answers


def _default_answers(preset: Preset) -> dict[str, Any]:
    return {
        "package_manager": preset.package_manager or PackageManager.npm,
        "rule_formats": preset.rule_formats or (),
        "platform_pack": preset.platform_pack or PlatformPack.none,
        "effectiveness_level": preset.effectiveness_level or EffectivenessLevel.none,
    }


def resolve(
    raw: GenerateConfig,
    prompter: Prompter | None = None,
    context: ResolveContext | None = None,
) -> ResolvedConfig:
    """Merge CLI input, preset answers, prompts and defaults into a ResolvedConfig.

    The project name is settled and validated before anything else is
    looked at. In non-interactive mode no prompt is ever shown.

    Args:
        raw: Parsed command-line input.
        prompter: Prompt capability; required unless raw.non_interactive.
        context: Working directory and environment snapshot used to
            resolve relative paths. Defaults to the current process.

    Returns:
        The frozen, fully validated configuration.

    Raises:
        ValidationError: On an invalid name or path, an aborted prompt, or
            interactive mode without a prompter.
        GenerateError: With step 'template' for an unknown template id.
    """
    preset = raw.preset or Preset()
    resolve_context = context or ResolveContext.from_process()

    if raw.non_interactive:
        project_name = raw.name if raw.name is not None else DEFAULT_PROJECT_NAME
        validate_project_name(project_name)
        template_kind = resolve_template_kind(raw.template or preset.template)
        path = _resolve_path(raw.path, resolve_context)
        answers = _default_answers(preset)
    elif prompter is None:
        raise ValidationError("Interactive mode requires a terminal; pass --yes to use defaults.")
    else:
        project_name = _prompt_project_name(raw, prompter)
        validate_project_name(project_name)
        template_kind = _prompt_template_kind(raw, preset, prompter)
        path = _resolve_path(raw.path, resolve_context)
        answers = _prompt_answers(prompter, preset)

    resolved = ResolvedConfig(
        path=path,
        name=raw.name,
        non_interactive=raw.non_interactive,
        skip_git=raw.skip_git,
        project_name=project_name,
        template_kind=template_kind,
        **answers,
    )
    logger.debug(
        "Resolved %s: package_manager=%s template=%s rules=%s pack=%s level=%s",
        resolved.project_name,
        resolved.package_manager.value,
        resolved.template_kind.value,
        ",".join(fmt.value for fmt in resolved.rule_formats) or "-",
        resolved.platform_pack.value,
        resolved.effectiveness_level.value,
    )
    return resolved
