"""`sentinel` command line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from sentinel.core.constants import MIGRATIONS_TAG
from sentinel.core.result import Failure, Success
from sentinel.infrastructure.templating import DIRECTIVE_BINDINGS
from sentinel.presentation.provider import SentinelServiceProvider

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Sentinel CLI (publish, directives).",
)


@app.callback()
def _main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command(name="publish", help="Copy package assets (migrations) into the application.")
def publish(
    tag: Annotated[
        str,
        typer.Option("--tag", help="Publish tag."),
    ] = MIGRATIONS_TAG,
    destination: Annotated[
        Path | None,
        typer.Option(
            "--destination",
            "-d",
            help="Target directory (defaults to SENTINEL_MIGRATIONS_PATH).",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite files that already exist."),
    ] = False,
) -> None:
    provider = SentinelServiceProvider()
    provider.register()
    provider.boot()

    match provider.publisher.publish(tag, destination, force=force):
        case Success(value=paths):
            if not paths:
                typer.echo(f"Nothing to publish for tag [{tag}].")
                return
            for path in paths:
                typer.echo(f"Published [{path}]")
        case Failure(error=err):
            typer.echo(f"error: {err.message}", err=True)
            raise typer.Exit(code=1)


@app.command(name="directives", help="List the template block tags and their checks.")
def directives() -> None:
    for binding in DIRECTIVE_BINDINGS:
        typer.echo(f"{binding.open_tag:<12} {binding.close_tag:<15} {binding.query}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
