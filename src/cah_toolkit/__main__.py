"""CLI entry point for cah_toolkit."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cah_toolkit import __version__
from cah_toolkit.builder import BuildError, BuilderConfig, RunResult, generate_decks
from cah_toolkit.utils.logging_utils import configure_run_logging, reset_run_logging

console = Console()
logger = logging.getLogger("cah_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cah-toolkit",
        description=(
            "Generate Cards Against Humanity card images and 10x7 deck sheets "
            "for Tabletop Simulator from CardTextBlack/*.txt and CardTextWhite/*.txt"
        ),
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Folder holding CardTextBlack/, CardTextWhite/ and CardBacks/ (default: current directory).",
    )
    parser.add_argument(
        "--font",
        type=str,
        default=None,
        help="TrueType font for card text (default: Arial or another system sans-serif).",
    )
    parser.add_argument(
        "--no-cards",
        action="store_true",
        help="Only write deck sheets, skip individual card images.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log batch and card detail (DEBUG).",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings, errors and the summary.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_summary(result: RunResult, log_path: Path) -> None:
    """Print run summary, output folders and card back locations."""
    console.print()

    table = Table(box=box.ROUNDED, border_style="cyan")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Black decks", f"[bold]{result.black_decks}[/bold]")
    table.add_row("White decks", f"[bold]{result.white_decks}[/bold]")
    table.add_row("Cards generated", f"[bold]{result.total_cards}[/bold]")
    table.add_row("Card images", str(result.cards_dir))
    table.add_row("Deck sheets", str(result.decks_dir))
    for kind, path in result.card_backs.items():
        marker = "" if path.is_file() else " [yellow](missing)[/yellow]"
        table.add_row(f"{kind.display_name} card back", f"{path}{marker}")
    table.add_row("Log file", str(log_path))
    table.add_row("Time", f"{result.elapsed_seconds:.1f}s")

    console.print(table)
    print_failures_report(result)

    console.print()
    if result.succeeded:
        console.print("[green]✔[/green] [bold green]Done![/bold green] Import the sheets as a 10x7 Custom Deck.")
    else:
        console.print("[yellow]⚠[/yellow] Finished with errors, see the table above and the log file.")
    console.print()


def print_failures_report(result: RunResult) -> None:
    """Print a table of failed files and images."""
    if not result.failures:
        return

    console.print()
    console.print(f"[red]✘ {len(result.failures)} item(s) could not be generated:[/red]")
    failed_table = Table(box=box.SIMPLE, border_style="red", show_header=True)
    failed_table.add_column("Kind", style="dim")
    failed_table.add_column("Stage", style="dim")
    failed_table.add_column("Source", style="white")
    failed_table.add_column("Error", style="red")
    for f in result.failures:
        error = f.error[:60] + "..." if len(f.error) > 60 else f.error
        failed_table.add_row(f.kind.display_name, f.stage, f.source, error)
    console.print(failed_table)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    root_dir = Path(args.root).resolve() if args.root is not None else Path.cwd()
    if not root_dir.is_dir():
        parser.error(f"root folder not found: {root_dir}")

    config = BuilderConfig(
        root_dir=root_dir,
        font_path=Path(args.font) if args.font else None,
        write_cards=not args.no_cards,
    )

    if args.verbose:
        console_level = logging.DEBUG
    elif args.quiet:
        console_level = logging.WARNING
    else:
        console_level = logging.INFO
    handlers = configure_run_logging(
        config.log_path,
        level=min(logging.INFO, console_level),
        console_level=console_level,
    )

    try:
        console.print(Panel.fit(
            "[bold]CAH Deck Builder[/bold]\n"
            f"[dim]{root_dir}[/dim]",
            border_style="magenta",
        ))
        logger.info(f"Working directory: {root_dir}")

        try:
            result = generate_decks(config)
        except (BuildError, OSError) as e:
            logger.error(f"Generation aborted: {e}")
            console.print(f"[red]✘[/red] Generation aborted: {e}")
            return 1

        print_summary(result, config.log_path)
        return 0 if result.succeeded else 1
    finally:
        reset_run_logging(handlers)


if __name__ == "__main__":
    raise SystemExit(main())
