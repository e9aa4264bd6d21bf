"""Interactive prompt capability used by the configuration resolver.

The resolver only depends on the Prompter protocol. RichPrompter is
the terminal implementation; tests supply a scripted one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from create_effect_agent.errors import ValidationError

# Returns a problem description, or None when the answer is acceptable.
Validator = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Choice:
    """One selectable option in a select or multi-select prompt."""

    label: str
    value: Any
    description: str = ""


class Prompter(Protocol):
    """Capability interface for asking the user questions."""

    def select(self, message: str, options: Sequence[Choice]) -> Any: ...

    def multi_select(self, message: str, options: Sequence[Choice]) -> list[Any]: ...

    def text(
        self,
        message: str,
        default: str | None = None,
        validate: Validator | None = None,
    ) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...


class RichPrompter:
    """Prompter that asks questions on the terminal with rich.prompt."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _print_options(self, message: str, options: Sequence[Choice]) -> None:
        table = Table(title=message, title_justify="left", show_header=False, box=None)
        table.add_column("#", style="bold cyan", justify="right")
        table.add_column("Option", style="bold")
        table.add_column("Description", style="dim")
        for index, option in enumerate(options, 1):
            table.add_row(str(index), option.label, option.description)
        self.console.print(table)

    def select(self, message: str, options: Sequence[Choice]) -> Any:
        self._print_options(message, options)
        numbers = [str(i) for i in range(1, len(options) + 1)]
        answer = Prompt.ask(
            "Choose one",
            choices=numbers,
            default="1",
            console=self.console,
        )
        return options[int(answer) - 1].value

    def multi_select(self, message: str, options: Sequence[Choice]) -> list[Any]:
        self._print_options(message, options)
        answer = Prompt.ask(
            "Choose any (comma-separated numbers, empty for none)",
            default="",
            show_default=False,
            console=self.console,
        )
        selected: list[Any] = []
        for token in answer.replace(" ", "").split(","):
            if not token:
                continue
            if not token.isdigit() or not 1 <= int(token) <= len(options):
                raise ValidationError(f"Invalid selection '{token}' for: {message}")
            value = options[int(token) - 1].value
            if value not in selected:
                selected.append(value)
        return selected

    def text(
        self,
        message: str,
        default: str | None = None,
        validate: Validator | None = None,
    ) -> str:
        if default is None:
            answer = Prompt.ask(message, console=self.console)
        else:
            answer = Prompt.ask(message, default=default, console=self.console)
        answer = answer.strip()
        if validate is not None:
            problem = validate(answer)
            if problem is not None:
                raise ValidationError(problem)
        return answer

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, default=default, console=self.console)
