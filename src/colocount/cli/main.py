"""colocount CLI — top-level Click group."""

from __future__ import annotations

import click


@click.group(invoke_without_command=True)
@click.version_option(package_name="colocount")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging and full tracebacks on errors.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """colocount — pixel colocalisation between fluorescence channels."""
    from colocount.cli import utils

    utils.verbose = verbose
    utils.configure_logging(debug=verbose)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    """Register all subcommands — imports deferred to avoid loading heavy deps at startup."""
    from colocount.cli.analyze import analyze
    from colocount.cli.config_cmd import config_template
    from colocount.cli.show import show

    cli.add_command(analyze)
    cli.add_command(config_template)
    cli.add_command(show)


_register_commands()
