"""colocount analyze — colocalisation of one image stack."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import click

from colocount.cli.utils import console, error_handler, make_progress, print_results


def _check_output(path: Path, overwrite: bool) -> None:
    """Exit with a clear message if ``path`` cannot be written."""
    if path.is_dir():
        console.print(f"[red]Error:[/red] Output path is a directory: {path}")
        raise SystemExit(1)
    if not path.parent.exists():
        console.print(f"[red]Error:[/red] Parent directory does not exist: {path.parent}")
        raise SystemExit(1)
    if path.exists() and not overwrite:
        console.print(
            f"[red]Error:[/red] Output file already exists: {path}\n"
            "Use --overwrite to replace it."
        )
        raise SystemExit(1)


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False))
@click.option("--ch1", default=None, help="Fluorophore in channel 1 (e.g., GFP).")
@click.option("--ch2", default=None, help="Fluorophore in channel 2.")
@click.option(
    "--ch3", default=None,
    help="Fluorophore in channel 3, or 'none' for a two-channel image.",
)
@click.option(
    "--filter/--no-filter", "median_filter", default=None,
    help="Median filter every channel before binarising.  [default: no-filter]",
)
@click.option(
    "--mask", "mask_path", type=click.Path(exists=True, dir_okay=False), default=None,
    help="Binary ROI mask, same width and height as the image.",
)
@click.option(
    "--find-mask", is_flag=True,
    help="Use the file starting with 'mask' next to the image as ROI mask.",
)
@click.option(
    "-o", "--output", type=click.Path(), default=None,
    help="MAT-file to write.  [default: colocAnalysis.mat beside the image]",
)
@click.option("--csv", "csv_path", type=click.Path(), default=None, help="Also write a CSV table.")
@click.option(
    "--config", "config_path", type=click.Path(exists=True, dir_okay=False), default=None,
    help="YAML settings file; command-line options take precedence.",
)
@click.option(
    "--workers", type=click.IntRange(min=1), default=1, show_default=True,
    help="Frames processed concurrently.",
)
@click.option("--overwrite", is_flag=True, help="Overwrite output files if they exist.")
@error_handler
def analyze(
    image: str,
    ch1: str | None,
    ch2: str | None,
    ch3: str | None,
    median_filter: bool | None,
    mask_path: str | None,
    find_mask: bool,
    output: str | None,
    csv_path: str | None,
    config_path: str | None,
    workers: int,
    overwrite: bool,
) -> None:
    """Quantify pixel colocalisation between the channels of IMAGE."""
    from colocount.core.config import AnalysisSettings
    from colocount.core.exceptions import InvalidArgumentError
    from colocount.io import find_mask_file, load_mask, load_stack, save_csv, save_mat
    from colocount.io.results import DEFAULT_RESULT_NAME
    from colocount.measure import ColocalizationPipeline

    image_path = Path(image).expanduser()

    if mask_path is not None and find_mask:
        raise InvalidArgumentError("mask", "use either --mask or --find-mask, not both")

    if config_path is not None:
        settings = AnalysisSettings.from_yaml(Path(config_path))
        names = list(settings.channel_names)
        for i, value in enumerate((ch1, ch2, ch3)):
            if value is not None:
                names[i] = value
        settings = dataclasses.replace(
            settings,
            channel_names=tuple(names),
            median_filter=settings.median_filter if median_filter is None else median_filter,
        )
    else:
        if ch1 is None or ch2 is None:
            raise InvalidArgumentError("ch1/ch2", "channel labels are required without --config")
        settings = AnalysisSettings(
            channel_names=(ch1, ch2, "none" if ch3 is None else ch3),
            median_filter=bool(median_filter),
        )

    out_path = Path(output).expanduser() if output else image_path.parent / DEFAULT_RESULT_NAME
    _check_output(out_path, overwrite)
    csv_out = Path(csv_path).expanduser() if csv_path else None
    if csv_out is not None:
        _check_output(csv_out, overwrite)

    resolved_mask: Path | None = Path(mask_path) if mask_path else None
    if find_mask:
        resolved_mask = find_mask_file(image_path.parent)
        if resolved_mask is None:
            console.print("[yellow]Mask image not found. Analysing entire image.[/yellow]")

    stack = load_stack(image_path)
    mask = load_mask(resolved_mask) if resolved_mask is not None else None
    if resolved_mask is not None:
        console.print(f"Using mask image [bold]{resolved_mask.name}[/bold] to analyse region of interest.")

    pipeline = ColocalizationPipeline(settings, workers=workers)
    with make_progress() as progress:
        task = progress.add_task("Analysing...", total=stack.shape[0])

        def on_progress(current: int, total: int, label: str) -> None:
            progress.update(
                task, total=total, completed=current,
                description=f"Analysed {label}",
            )

        result = pipeline.run(stack, mask, progress_callback=on_progress)

    save_mat(result, out_path)
    if csv_out is not None:
        save_csv(result, csv_out)

    console.print()
    print_results(
        result.metadata.info_lines(),
        result.per_frame_pixels,
        result.per_frame_percent,
        result.aggregate.total_pixels,
        result.aggregate.total_percent,
        title=image_path.name,
    )
    console.print(f"[green]Saved results to {out_path}[/green]")
    if csv_out is not None:
        console.print(f"[green]Saved table to {csv_out}[/green]")
