"""The generate pipeline.

resolve -> check target -> render -> write -> (background git init).
Every step before the git step is fatal on failure. The git step runs
detached and its outcome never changes the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from create_effect_agent.fs import FileSystem, LocalFileSystem
from create_effect_agent.logging import get_logger
from create_effect_agent.models.config import GenerateConfig, GeneratedProject, ResolveContext
from create_effect_agent.prompts import Prompter
from create_effect_agent.scaffold.renderer import render
from create_effect_agent.scaffold.resolver import resolve
from create_effect_agent.scaffold.writer import check_target, write_files
from create_effect_agent.vcs import GitInitTask, VersionControl

logger = get_logger("generate")


@dataclass
class GenerateOutcome:
    """Result of a successful generate run.

    Attributes:
        project: The immutable record of what was generated.
        git_task: The background git initialization, or None when
            skipped with --no-git.
    """

    project: GeneratedProject
    git_task: GitInitTask | None = None


def generate_project(
    raw: GenerateConfig,
    *,
    prompter: Prompter | None = None,
    context: ResolveContext | None = None,
    fs: FileSystem | None = None,
    git: VersionControl | None = None,
) -> GenerateOutcome:
    """Generate a project from raw CLI input.

    Args:
        raw: Parsed command-line input.
        prompter: Prompt capability for interactive runs.
        context: Working directory and environment snapshot.
        fs: Filesystem adapter. Defaults to the local disk.
        git: Version control client for the background init step.

    Returns:
        GenerateOutcome with the project record and the started git task.

    Raises:
        ValidationError: Bad input or a non-empty/non-directory target.
        GenerateError: Unknown template id.
        TemplateError: A template broke a rendering invariant.
        FileError: A directory or file could not be written.
    """
    fs = fs or LocalFileSystem()

    config = resolve(raw, prompter=prompter, context=context)
    check_target(config.path, fs)
    files = render(config)
    written = write_files(config.path, files, fs)

    project = GeneratedProject(
        name=config.project_name,
        absolute_path=config.path,
        resolved_config=config,
        timestamp=datetime.now(timezone.utc),
        files=written,
    )
    logger.info("Project %s created at %s", project.name, project.absolute_path)

    git_task = None
    if not config.skip_git:
        git_task = GitInitTask(config.path, client=git).start()

    return GenerateOutcome(project=project, git_task=git_task)
