#!/usr/bin/env python3
"""
Main CLI Entry Point for AutoTrackr

Provides a command-line interface to the flip ledger engine.
"""

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    AutoTrackr - Vehicle Flip Ledger

    Track flip profitability, parse quick expense entries, and export
    bookkeeping and tax reports.
    """
    ctx.ensure_object(dict)

    if config_env:
        import os

        os.environ["AUTOTRACKR_ENV"] = config_env

    if debug:
        import logging
        import os

        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("autotrackr").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from autotrackr import __author__, __version__

    click.echo(f"AutoTrackr v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Export Directory: {config_obj.output_dir}")
    click.echo(f"  Tax Year: {config_obj.reports.tax_year or 'current year'}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .export import export  # noqa: E402
from .ledger import parse, totals  # noqa: E402

main.add_command(parse)
main.add_command(totals)
main.add_command(export)


if __name__ == "__main__":
    main()
