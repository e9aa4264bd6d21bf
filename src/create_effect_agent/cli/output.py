"""Rich terminal output for the generate command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.tree import Tree

if TYPE_CHECKING:
    from create_effect_agent.models.config import GeneratedProject
    from create_effect_agent.vcs import GitInitTask


def build_file_tree(project: GeneratedProject) -> Tree:
    """Nest the written relative paths under the project directory."""
    root = Tree(f"[bold]{project.absolute_path}[/bold]")
    branches: dict[str, Tree] = {}
    for path in project.files:
        *parents, filename = path.split("/")
        node = root
        prefix = ""
        for part in parents:
            prefix = f"{prefix}/{part}" if prefix else part
            if prefix not in branches:
                branches[prefix] = node.add(f"[blue]{part}/[/blue]")
            node = branches[prefix]
        node.add(filename)
    return root


def render_success(project: GeneratedProject, console: Console) -> None:
    """Print the success headline and the tree of generated files."""
    config = project.resolved_config
    console.print(
        f"[green][bold]✓ Project {project.name} created![/bold][/green] "
        f"[dim](template={config.template_kind.value}, "
        f"package manager={config.package_manager.value})[/dim]"
    )
    console.print(build_file_tree(project))


def render_git_status(task: GitInitTask | None, console: Console, waited: bool) -> None:
    """Report the git step: skipped, running in the background, or its result."""
    if task is None:
        console.print("[dim]Skipped git initialization (--no-git).[/dim]")
        return
    if not waited:
        console.print("[dim]Initializing git repository in the background...[/dim]")
        return
    if task.succeeded:
        console.print("[green]✓[/green] Git repository initialized")
    else:
        reason = task.error.message if task.error else "did not finish"
        console.print(f"[yellow]⚠ Git initialization failed: {reason}[/yellow]")


def render_next_steps(project: GeneratedProject, console: Console, install: str, test: str) -> None:
    console.print()
    console.print("[bold]Next steps:[/bold]")
    console.print(f"  cd {project.absolute_path}")
    console.print(f"  {install}")
    console.print(f"  {test}")
