"""Template renderer: ResolvedConfig -> RenderedFileSet.

render() composes the base template with the selected rule files and
then checks the invariants every rendered file set must hold before
anything is handed to the writer. A failed check is a defect in a
template, reported as TemplateError.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath

from create_effect_agent.errors import TemplateError
from create_effect_agent.logging import get_logger
from create_effect_agent.models.config import ResolvedConfig
from create_effect_agent.scaffold.rules import render_rule_files
from create_effect_agent.scaffold.templates import TEMPLATE_RENDERERS, StubPair

logger = get_logger("renderer")

RenderedFileSet = dict[str, str]

_EXPORT_PATTERN = re.compile(r"^export\s+(?:const|class|function|interface|type)\s+(\w+)", re.MULTILINE)


def check_relative_path(path: str) -> None:
    """Raise TemplateError unless path is a relative POSIX path inside the root."""
    if not path or "\\" in path:
        raise TemplateError(f"Rendered path {path!r} is not a POSIX path")
    pure = PurePosixPath(path)
    if pure.is_absolute():
        raise TemplateError(f"Rendered path {path!r} is absolute")
    if ".." in pure.parts:
        raise TemplateError(f"Rendered path {path!r} escapes the project root")


def check_no_placeholders(files: RenderedFileSet) -> None:
    """Raise TemplateError if any content still holds a '{{' token."""
    leftovers = sorted(path for path, content in files.items() if "{{" in content)
    if leftovers:
        raise TemplateError(
            f"Unsubstituted placeholders remain in: {', '.join(leftovers)}"
        )


def _imported_names(test: str, specifier: str) -> list[str]:
    pattern = re.compile(r"import\s*\{([^}]*)\}\s*from\s*'" + re.escape(specifier) + "'")
    match = pattern.search(test)
    if match is None:
        return []
    return [name.strip() for name in match.group(1).split(",") if name.strip()]


def check_stub_symbols(pairs: tuple[StubPair, ...], files: RenderedFileSet) -> None:
    """Raise TemplateError unless each test stub imports exactly what its source exports."""
    for pair in pairs:
        source = files.get(pair.source_path)
        test = files.get(pair.test_path)
        if source is None or test is None:
            raise TemplateError(
                f"Template must render both {pair.source_path} and {pair.test_path}"
            )

        exported = _EXPORT_PATTERN.findall(source)
        imported = _imported_names(test, pair.import_specifier)
        expected = list(pair.symbols)

        if exported != expected or sorted(imported) != sorted(expected):
            raise TemplateError(
                f"Stub symbols out of sync in {pair.source_path}: "
                f"source exports {exported}, {pair.test_path} imports {imported}, "
                f"expected {expected}"
            )


def render(config: ResolvedConfig) -> RenderedFileSet:
    """Render the complete file set for a resolved configuration.

    Returns:
        Mapping of relative POSIX path to file content, ordered by path.

    Raises:
        TemplateError: If a rendered file set breaks an invariant (leftover
            placeholder, unsafe path, colliding paths, stub symbol mismatch).
    """
    template = TEMPLATE_RENDERERS.get(config.template_kind)
    if template is None:
        raise TemplateError(f"No renderer registered for template '{config.template_kind.value}'")

    files: RenderedFileSet = dict(template.render(config))
    check_stub_symbols(template.stub_pairs(config), files)

    for path, content in render_rule_files(config).items():
        if path in files:
            raise TemplateError(f"Rule file {path} collides with a template file")
        files[path] = content

    for path in files:
        check_relative_path(path)
    check_no_placeholders(files)

    logger.debug("Rendered %d files for %s", len(files), config.project_name)
    return dict(sorted(files.items()))
