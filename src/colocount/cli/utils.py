"""Shared CLI utilities — Rich console, logging, error handling, result tables."""

from __future__ import annotations

import functools
import logging
import traceback
from collections.abc import Sequence
from typing import Any, Callable

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn
from rich.table import Table

from colocount.core.models import PAIR_LABELS

console = Console()

# Set by the --verbose flag on the top-level CLI group.
verbose: bool = False


def configure_logging(debug: bool = False) -> None:
    """Route colocount log records through Rich."""
    logger = logging.getLogger("colocount")
    logger.handlers.clear()
    handler = RichHandler(console=console, show_path=False, show_time=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def error_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator wrapping CLI commands with standard error handling.

    Catches ColocalizationError and missing files (exit 1) and unexpected
    exceptions (exit 2). With --verbose, unexpected errors include the
    full traceback.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        from colocount.core.exceptions import ColocalizationError

        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except (ColocalizationError, FileNotFoundError) as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1)
        except Exception as e:
            if verbose:
                console.print(f"[red]Internal error:[/red] {e}")
                console.print(traceback.format_exc())
            else:
                console.print(
                    f"[red]Internal error:[/red] {type(e).__name__}: {e}\n"
                    "[dim]Use --verbose for the full traceback.[/dim]"
                )
            raise SystemExit(2)

    return wrapper


def make_progress() -> Progress:
    """Create a Rich progress bar for CLI operations."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    )


def print_results(
    info: Sequence[str],
    per_frame_pixels: Any,
    per_frame_percent: Any,
    total_pixels: Sequence[int],
    total_percent: Sequence[float],
    title: str = "Colocalisation",
) -> None:
    """Render per-frame and whole-stack results as a Rich table."""
    for line in info:
        console.print(f"[dim]{line}[/dim]")

    table = Table(show_header=True, title=title)
    table.add_column("frame", style="bold")
    for label in PAIR_LABELS:
        table.add_column(f"px {label}", justify="right")
    for label in PAIR_LABELS:
        table.add_column(f"% {label}", justify="right")

    for i, (pixels, percent) in enumerate(zip(per_frame_pixels, per_frame_percent), start=1):
        table.add_row(
            str(i),
            *(str(int(p)) for p in pixels),
            *(f"{float(p):.2f}" for p in percent),
        )
    table.add_row(
        "total",
        *(str(int(p)) for p in total_pixels),
        *(f"{float(p):.2f}" for p in total_percent),
        style="green",
    )
    console.print(table)
