"""create-effect-agent generate -- scaffold a new Effect-TS library.

Resolves configuration from flags, an optional preset and interactive
prompts, writes the rendered project into an absent or empty directory,
and starts a best-effort git initialization unless --no-git is given.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from create_effect_agent.cli.output import (
    render_git_status,
    render_next_steps,
    render_success,
)
from create_effect_agent.errors import ScaffoldError
from create_effect_agent.logging import configure_logging
from create_effect_agent.models.config import GenerateConfig, ResolveContext
from create_effect_agent.prompts import RichPrompter
from create_effect_agent.scaffold.generate import generate_project
from create_effect_agent.scaffold.package_managers import commands_for
from create_effect_agent.scaffold.preset import load_preset

console = Console()


def generate(
    path: str = typer.Argument(..., help="Target directory (must be absent or empty)"),
    name: Optional[str] = typer.Option(
        None, "--name", help="Project name in kebab-case (default: my-effect-lib)"
    ),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Non-interactive mode with defaults"
    ),
    no_git: bool = typer.Option(False, "--no-git", help="Skip git initialization"),
    template: Optional[str] = typer.Option(
        None, "--template", help="Project template: basic or supermemory (prompted when omitted)"
    ),
    preset: Optional[str] = typer.Option(
        None, "--preset", help="YAML file with pre-recorded answers"
    ),
    wait_git: bool = typer.Option(
        False, "--wait-git", help="Wait for git initialization and report its result"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Show debug logging"),
) -> None:
    """Generate a new Effect-TS library project.

    Interactive by default: prompts for the project name, template,
    package manager, IDE/agent rule files, TypeScript pack and Effect pack.
    Use --yes to accept defaults without prompting.
    """
    configure_logging(verbose=verbose)

    try:
        raw = GenerateConfig(
            path=path,
            name=name,
            non_interactive=yes,
            skip_git=no_git,
            template=template,
            preset=load_preset(Path(preset)) if preset else None,
        )
        outcome = generate_project(
            raw,
            prompter=None if yes else RichPrompter(console),
            context=ResolveContext.from_process(),
        )
    except ScaffoldError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    project = outcome.project
    render_success(project, console)

    waited = False
    if outcome.git_task is not None and wait_git:
        waited = outcome.git_task.wait()
    render_git_status(outcome.git_task, console, waited)

    cmds = commands_for(project.resolved_config.package_manager)
    render_next_steps(project, console, cmds.install, cmds.script("test"))
