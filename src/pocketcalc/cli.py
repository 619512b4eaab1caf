"""Command line front end for pocketcalc.

Usage:
    pocketcalc press 1 + 2 Enter      # Named key tokens
    pocketcalc run "1+2*3="           # Every character is a key
    pocketcalc repl                   # Interactive keypad
    pocketcalc -v run "5/0="          # With debug logging
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pocketcalc.adapters import ConsoleDisplay, KeyboardAdapter, tokenize_keys
from pocketcalc.engine import Calculator, create_calculator
from pocketcalc.exceptions import CalculatorError

app = typer.Typer(
    name="pocketcalc",
    help="Four-function keypad calculator",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _new_calculator() -> Calculator:
    try:
        return create_calculator()
    except CalculatorError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(2) from e


def _feed(adapter: KeyboardAdapter, keys: list[str]) -> None:
    for key in adapter.handle_keys(keys):
        err_console.print(f"[yellow]Skipped unknown key:[/yellow] {key!r}")


def _show(calculator: Calculator) -> None:
    style = "bold red" if calculator.is_error else "bold green"
    console.print(calculator.display, style=style, markup=False, highlight=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every operation"),
) -> None:
    """Four-function keypad calculator."""
    configure_logging(verbose)


@app.command("press")
def cmd_press(
    keys: list[str] = typer.Argument(help="Key tokens, e.g. 1 + 2 Enter"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the display after every key"),
) -> None:
    """Press keys one token at a time and print the display."""
    calculator = _new_calculator()
    display = ConsoleDisplay(console) if trace else None
    _feed(KeyboardAdapter.attach(calculator, display), keys)
    if not trace:
        _show(calculator)


@app.command("run")
def cmd_run(
    text: str = typer.Argument(help='Keys as text, e.g. "12+3=" or "1+2 enter"'),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the display after every key"),
) -> None:
    """Type a string of keys and print the display."""
    calculator = _new_calculator()
    display = ConsoleDisplay(console) if trace else None
    _feed(KeyboardAdapter.attach(calculator, display), tokenize_keys(text))
    if not trace:
        _show(calculator)


@app.command("repl")
def cmd_repl() -> None:
    """Interactive keypad; type keys and press Return to see the display."""
    calculator = _new_calculator()
    adapter = KeyboardAdapter.attach(calculator)
    console.print("[dim]Type keys, Return to apply. 'q' quits.[/dim]")
    _show(calculator)

    while True:
        try:
            line = console.input("[bold cyan]>[/bold cyan] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip().lower() in QUIT_WORDS:
            break

        _feed(adapter, tokenize_keys(line))
        _show(calculator)
