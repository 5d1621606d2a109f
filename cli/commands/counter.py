"""
Counter command: drive a counter store from the terminal and render it
"""

import json
from concurrent.futures import ThreadPoolExecutor
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from unistate.core import Subscriber, canonical_json_str
from unistate.core.errors import InvalidOperationError
from unistate.counter import CounterState, counter_store, parse_operation
from unistate.logging_config import get_logger

console = Console()
logger = get_logger(__name__)


class TerminalCounter(Subscriber):
    """Renders the counter field of CounterState, one line per notification."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self.rendered: List[int] = []

    def select(self, state: CounterState) -> int:
        return state.counter

    def receive(self, selection: int) -> None:
        self.rendered.append(selection)
        if not self.quiet:
            console.print(f"Counter: [bold cyan]{selection}[/bold cyan]")


def _submit_to(executor: ThreadPoolExecutor, action):
    """Thunk that performs the dispatch on executor and returns its future."""

    def thunk(dispatch):
        return executor.submit(dispatch, action)

    return thunk


def counter_command(
    ops: List[str] = typer.Argument(
        None,
        help="Operations to dispatch in order: +N increments, -N decrements",
    ),
    start: int = typer.Option(0, "--start", help="Initial counter value"),
    threaded: bool = typer.Option(
        False,
        "--threaded",
        "-t",
        help="Dispatch each operation from a worker thread via a thunk",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Dispatch counter operations and render every state change.

    Examples:
        unistate counter +5 -2
        unistate counter --start 10 -3 +1
        unistate counter --threaded +1 +1 +1
        unistate counter --json +5 -2
    """
    ops = ops or []
    try:
        actions = [parse_operation(op) for op in ops]
    except InvalidOperationError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    store = counter_store(start)
    view = TerminalCounter(quiet=json_output)

    with view.connect(store) as conn:
        if threaded:
            with ThreadPoolExecutor(max_workers=1) as executor:
                for action in actions:
                    # Wait for each worker dispatch so operations stay ordered
                    future = conn.dispatch(_submit_to(executor, action))
                    future.result()
        else:
            for action in actions:
                conn.dispatch(action)

    final_state = store.get_state()
    logger.info("Dispatched %d operations, final counter %d", len(actions), final_state.counter)

    if json_output:
        output = {
            "dispatched": len(actions),
            "observed": view.rendered,
            "final_state": final_state,
        }
        print(canonical_json_str(output, indent=2))
        return

    table = Table(title="Counter Summary")
    table.add_column("Field", style="green")
    table.add_column("Value", style="cyan", justify="right")
    table.add_row("Operations", str(len(actions)))
    table.add_row("Renders", str(len(view.rendered)))
    table.add_row("Final counter", str(final_state.counter))
    console.print(table)
