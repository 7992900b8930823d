"""routeplate command-line interface powered by Typer."""

import logging
from typing import Annotated

import typer

from routeplate.routing import compile as compile_route
from routeplate.routing import match as match_route

app = typer.Typer(name="routeplate", add_completion=False, no_args_is_help=True)

VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")]


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------


@app.command("compile")
def compile_command(
    template: Annotated[str, typer.Argument(help="Route template, e.g. users/{id}.")],
    verbose: VerboseOption = False,
) -> None:
    """Print the compiled descriptor for TEMPLATE as JSON."""
    _configure_logging(verbose)
    typer.echo(compile_route(template).model_dump_json(indent=2))


@app.command("match")
def match_command(
    template: Annotated[str, typer.Argument(help="Route template, e.g. users/{id}.")],
    path: Annotated[str, typer.Argument(help="Request path to test.")],
    max_length: Annotated[
        int | None, typer.Option("--max-length", help="Reject normalized paths longer than this.")
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Match PATH against TEMPLATE and print the result as JSON."""
    _configure_logging(verbose)
    result = match_route(path, compile_route(template), max_length=max_length)
    if result is None:
        typer.echo("No match", err=True)
        raise typer.Exit(1)
    typer.echo(result.model_dump_json(indent=2))
