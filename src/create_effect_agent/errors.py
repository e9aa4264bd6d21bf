"""Error taxonomy for project generation.

Every failure the generate pipeline can surface derives from
ScaffoldError, so the CLI edge can catch one type and turn it into
an exit code. GitError is the exception: it only ever reaches the
logger, never the caller.
"""

from __future__ import annotations

from typing import Any, Literal

GenerateStep = Literal["template", "rules", "git"]


class ScaffoldError(Exception):
    """Base class for all errors raised while generating a project."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ScaffoldError):
    """Raised when user input or the target directory fails validation.

    Covers bad project names, non-empty or non-directory targets,
    malformed preset files, and aborted prompts.
    """


class GenerateError(ScaffoldError):
    """Raised when a generation step cannot run with the given choices.

    Attributes:
        step: The pipeline step that rejected the input (e.g. 'template'
            for an unknown template id).
        context: Optional structured details for diagnostics.
    """

    def __init__(
        self,
        message: str,
        step: GenerateStep,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.step = step
        self.context = context or {}
        super().__init__(message)


class FileError(ScaffoldError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)


class TemplateError(ScaffoldError):
    """Raised when rendered output breaks an internal invariant.

    This signals a programming defect in a template, never a problem
    with user input.
    """


class MissingVariablesError(TemplateError):
    """Raised when a template references placeholders with no value."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing template variables: {', '.join(missing)}")


class GitError(ScaffoldError):
    """Raised by the best-effort git initialization step."""

    def __init__(self, message: str, step: str) -> None:
        self.step = step
        super().__init__(message)
