"""colocount show — display a saved colocalisation result."""

from __future__ import annotations

from pathlib import Path

import click

from colocount.cli.utils import error_handler, print_results


@click.command()
@click.argument("result", type=click.Path(exists=True, dir_okay=False))
@error_handler
def show(result: str) -> None:
    """Display the contents of a colocalisation MAT-file."""
    from colocount.io import load_mat

    data = load_mat(Path(result))
    print_results(
        data["info"],
        data["ResultsPerFrame_pixels"],
        data["ResultsPerFrame_percent"],
        data["totalColocPixels"],
        data["totalColocPercent"],
        title=Path(result).name,
    )
