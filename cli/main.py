#!/usr/bin/env python3
"""
unistate CLI - Unidirectional State Container

Main entrypoint for the unistate command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import counter
from unistate.logging_config import setup_logging
from unistate.metrics import metrics_config, start_metrics_server

# Initialize Typer app
app = typer.Typer(
    name="unistate",
    help="Unidirectional state container CLI",
    add_completion=False,
)

# Console for rich output
console = Console()

# Add standalone commands; unknown "-N" tokens are decrement operations, not options
app.command(
    name="counter",
    context_settings={"ignore_unknown_options": True},
)(counter.counter_command)


@app.callback()
def setup():
    """Configure logging and, when enabled, the metrics endpoint."""
    setup_logging()
    start_metrics_server(*metrics_config())


@app.command()
def version():
    """Show version information."""
    from cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]unistate[/bold]", f"v{__version__}")
    table.add_row("Dispatch", "actions, thunks")
    table.add_row("Subscribers", "callbacks, projections")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
