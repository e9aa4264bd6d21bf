"""Tests for create_effect_agent.cli.output."""

from __future__ import annotations

from datetime import datetime, timezone
from io import StringIO

from rich.console import Console

from create_effect_agent.cli.output import build_file_tree, render_git_status, render_success
from create_effect_agent.errors import GitError
from create_effect_agent.models.config import GeneratedProject
from create_effect_agent.vcs import GitInitTask


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, no_color=True), buffer


def _project(make_config) -> GeneratedProject:
    config = make_config()
    return GeneratedProject(
        name=config.project_name,
        absolute_path=config.path,
        resolved_config=config,
        timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc),
        files=["README.md", "docs/agents/Claude.md", "docs/agents/Gemini.md", "src/index.ts"],
    )


class TestBuildFileTree:
    """Test build_file_tree()."""

    def test_directories_shared(self, make_config):
        tree = build_file_tree(_project(make_config))
        labels = [str(child.label) for child in tree.children]
        assert labels == ["README.md", "[blue]docs/[/blue]", "[blue]src/[/blue]"]

        docs = tree.children[1]
        assert [str(child.label) for child in docs.children] == ["[blue]agents/[/blue]"]
        assert [str(c.label) for c in docs.children[0].children] == ["Claude.md", "Gemini.md"]


class TestRenderSuccess:
    """Test render_success()."""

    def test_headline_and_files(self, make_config):
        console, buffer = _console()
        render_success(_project(make_config), console)
        output = buffer.getvalue()
        assert "Project demo-lib created!" in output
        assert "Claude.md" in output


class TestRenderGitStatus:
    """Test render_git_status()."""

    def test_skipped(self):
        console, buffer = _console()
        render_git_status(None, console, waited=False)
        assert "Skipped git initialization" in buffer.getvalue()

    def test_background(self, tmp_path):
        console, buffer = _console()
        render_git_status(GitInitTask(tmp_path), console, waited=False)
        assert "in the background" in buffer.getvalue()

    def test_failure_reason(self, tmp_path):
        task = GitInitTask(tmp_path)
        task.error = GitError("git executable not found: git", "init")
        console, buffer = _console()
        render_git_status(task, console, waited=True)
        assert "git executable not found" in buffer.getvalue()
