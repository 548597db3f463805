"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

import pynub as nb

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import describe, run_pipeline, to_table
from ._registery import BENCHMARKS, CONSOLE

app = typer.Typer(help="Benchmarks comparing pynub containers with plain lists.")


@app.command()
def show() -> None:
    """Show the registered benchmarks."""
    CONSOLE.print(describe(BENCHMARKS))


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only run this category.")
    ] = None,
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Log level of the pynub logger.")
    ] = None,
) -> None:
    """Run benchmarks and print the median time per call."""
    nb.setup_logger(level=log_level)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    match run_pipeline(category):
        case nb.Ok(stats):
            CONSOLE.print(to_table(stats))
        case nb.Err(msg):
            CONSOLE.print(f"✗ {msg}", style="bold red")
            raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
