"""create-effect-agent CLI entry point."""

import typer

from create_effect_agent import __version__
from create_effect_agent.cli.generate_cmd import generate

app = typer.Typer(
    name="create-effect-agent",
    help="Bootstrap Effect-TS libraries with agentic development tooling",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register subcommands
app.command()(generate)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"create-effect-agent {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Bootstrap Effect-TS libraries with agentic development tooling."""
