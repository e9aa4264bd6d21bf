"""Best-effort git initialization for generated projects.

GitClient runs the git executable. GitInitTask runs init -> add ->
commit on a background thread after the project has been written;
the first failing step stops the sequence, and the failure is logged
as a warning and kept on the task. Nothing here ever raises into the
generate pipeline.
"""

from __future__ import annotations

import subprocess
import threading
from pathlib import Path
from typing import Protocol

from create_effect_agent.errors import GitError
from create_effect_agent.logging import get_logger

logger = get_logger("vcs")

DEFAULT_COMMIT_MESSAGE = "Initial commit"

# Upper bound per git call so a wedged git cannot hold the process open.
GIT_TIMEOUT_SECONDS = 60


class VersionControl(Protocol):
    """Version control operations used after a project is written."""

    def init_repo(self, directory: Path) -> None: ...

    def stage_all(self, directory: Path) -> None: ...

    def commit(self, directory: Path, message: str) -> None: ...


class GitClient:
    """VersionControl implementation that shells out to git."""

    def __init__(self, executable: str = "git", timeout: float = GIT_TIMEOUT_SECONDS) -> None:
        self.executable = executable
        self.timeout = timeout

    def _run(self, step: str, directory: Path, *args: str) -> None:
        command = [self.executable, *args]
        try:
            subprocess.run(
                command,
                cwd=str(directory),
                check=True,
                capture_output=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise GitError(f"git executable not found: {self.executable}", step) from exc
        except subprocess.TimeoutExpired as exc:
            raise GitError(f"git {step} timed out after {self.timeout}s", step) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or b"").decode("utf-8", errors="replace").strip()
            detail = f": {stderr}" if stderr else ""
            raise GitError(f"git {step} failed with exit code {exc.returncode}{detail}", step) from exc

    def init_repo(self, directory: Path) -> None:
        self._run("init", directory, "init")

    def stage_all(self, directory: Path) -> None:
        self._run("add", directory, "add", ".")

    def commit(self, directory: Path, message: str) -> None:
        self._run("commit", directory, "commit", "-m", message)


class GitInitTask:
    """Initialize a repository in the background: init, stage all, commit.

    The task owns its completion signal. Callers may wait() on it (tests
    do) but the generate pipeline does not have to. The worker thread is
    not a daemon, so an in-flight commit finishes before the interpreter
    exits.

    Attributes:
        directory: Project directory to initialize.
        completed_steps: Names of the steps that succeeded, in order.
        error: The GitError that stopped the sequence, if any.
    """

    def __init__(
        self,
        directory: Path,
        client: VersionControl | None = None,
        message: str = DEFAULT_COMMIT_MESSAGE,
    ) -> None:
        self.directory = directory
        self.client = client or GitClient()
        self.message = message
        self.completed_steps: list[str] = []
        self.error: GitError | None = None
        self._done = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def succeeded(self) -> bool:
        return self.done and self.error is None

    def start(self) -> GitInitTask:
        """Launch the background thread. Returns self for chaining."""
        if self._thread is not None:
            raise RuntimeError("GitInitTask already started")
        self._thread = threading.Thread(
            target=self.run,
            name=f"git-init-{self.directory.name}",
            daemon=False,
        )
        self._thread.start()
        return self

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the task finishes. Returns False on timeout."""
        return self._done.wait(timeout)

    def run(self) -> None:
        """Run the three steps in order on the calling thread."""
        steps = (
            ("init", lambda: self.client.init_repo(self.directory)),
            ("add", lambda: self.client.stage_all(self.directory)),
            ("commit", lambda: self.client.commit(self.directory, self.message)),
        )
        try:
            for name, step in steps:
                try:
                    step()
                except GitError as exc:
                    self.error = exc
                    break
                except Exception as exc:  # noqa: BLE001
                    self.error = GitError(f"git {name} failed: {exc}", name)
                    break
                self.completed_steps.append(name)

            if self.error is not None:
                logger.warning(
                    "Git initialization failed at '%s' (git may not be available): %s",
                    self.error.step,
                    self.error.message,
                )
            else:
                logger.info("Git repository initialized in %s", self.directory)
        finally:
            self._done.set()
