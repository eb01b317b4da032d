"""colocount config-template — write a starter settings file."""

from __future__ import annotations

from pathlib import Path

import click

from colocount.cli.utils import console, error_handler


@click.command("config-template")
@click.argument("output", type=click.Path())
@click.option("--overwrite", is_flag=True, help="Overwrite output file if it exists.")
@error_handler
def config_template(output: str, overwrite: bool) -> None:
    """Write a YAML settings template to OUTPUT."""
    from colocount.core.config import AnalysisSettings

    out_path = Path(output).expanduser()
    if out_path.exists() and not overwrite:
        console.print(
            f"[red]Error:[/red] Output file already exists: {out_path}\n"
            "Use --overwrite to replace it."
        )
        raise SystemExit(1)

    AnalysisSettings(channel_names=("GFP", "DAPI", "none")).to_yaml(out_path)
    console.print(f"[green]Wrote settings template to {out_path}[/green]")
