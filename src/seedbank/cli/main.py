#!/usr/bin/env python3
"""
Main CLI Entry Point for Seed Bank

Provides the command-line interface for turning production bank records into
integration test fixtures.
"""

import logging
import os

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
    Seed Bank - Production Record Obfuscation

    Replaces personal information in a bank records snapshot so it can seed
    the integration test environment.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["SEEDBANK_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("seedbank").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from seedbank import __author__, __version__

    click.echo(f"Seed Bank v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration (sensitive values redacted)."""
    config_dict = ctx.obj["config"].to_dict()

    click.echo("Current Configuration:")
    for name, value in config_dict.items():
        if isinstance(value, dict):
            click.echo(f"  {name}:")
            for nested_name, nested_value in value.items():
                click.echo(f"    {nested_name}: {nested_value}")
        else:
            click.echo(f"  {name}: {value}")


from .obfuscate import obfuscate  # noqa: E402

main.add_command(obfuscate)


if __name__ == "__main__":
    main()
