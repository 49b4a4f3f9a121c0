#!/usr/bin/env python3
"""
Obfuscate CLI - Production Records to Integration Fixtures

Loads the production snapshot, obfuscates it, points the integration test
properties at the result and saves the obfuscated snapshot.
"""

import logging
from pathlib import Path

import click

from ..errors import ObfuscationError
from ..obfuscation import obfuscate as obfuscate_records
from ..obfuscation import verify_record_counts
from ..records import BankRecordsDataStore, PropertiesFileError, RecordLoadError, update_integ_properties

logger = logging.getLogger(__name__)


@click.command()
@click.option("--source-dir", help="Directory with production record CSVs (default: from config)")
@click.option("--source-suffix", help="File name suffix of the production record CSVs")
@click.option("--output-dir", help="Directory for obfuscated record CSVs (default: from config)")
@click.option("--suffix", help="File name suffix for obfuscated record CSVs (default: _prod)")
@click.option("--properties-file", help="Integration test properties file to update")
@click.option("--skip-properties", is_flag=True, help="Don't update the integration test properties")
@click.option("--salt", help="Salt for synthetic ids; a fixed salt makes ids reproducible")
@click.option("--dry-run", is_flag=True, help="Obfuscate and verify without writing anything")
@click.pass_context
def obfuscate(
    ctx: click.Context,
    source_dir: str | None,
    source_suffix: str | None,
    output_dir: str | None,
    suffix: str | None,
    properties_file: str | None,
    skip_properties: bool,
    salt: str | None,
    dry_run: bool,
) -> None:
    """
    Obfuscate production records for the integration test suite.

    Examples:
      seedbank obfuscate
      seedbank obfuscate --source-dir data/prod --output-dir data/integ --dry-run
      seedbank obfuscate --properties-file src/test/resources/persister_integ.properties
    """
    config = ctx.obj["config"]
    persister = config.persister

    source = BankRecordsDataStore(
        Path(source_dir) if source_dir else persister.source_dir,
        source_suffix if source_suffix is not None else persister.source_suffix,
    )
    sink = BankRecordsDataStore(
        Path(output_dir) if output_dir else persister.output_dir,
        suffix if suffix is not None else persister.persisted_suffix,
    )
    props_path = Path(properties_file) if properties_file else persister.integ_properties

    source_files = {path.resolve() for path in source.file_paths().values()}
    sink_files = {path.resolve() for path in sink.file_paths().values()}
    if source_files & sink_files:
        raise click.ClickException("Refusing to overwrite the source records; use another suffix or output dir")

    if ctx.obj.get("verbose", False):
        click.echo(f"Source: {source.data_dir} (suffix '{source.suffix}')")
        click.echo(f"Output: {sink.data_dir} (suffix '{sink.suffix}')")
        click.echo(f"Mode: {'Dry run' if dry_run else 'Write records'}")
        click.echo()

    try:
        logger.info("Loading production records")
        original = source.load()

        logger.info("Obfuscating records")
        obfuscated = obfuscate_records(original, salt=salt or config.obfuscation.remap_salt)

        if not dry_run:
            logger.info("Saving obfuscated records")
            if props_path is not None and not skip_properties:
                update_integ_properties(props_path, sink.suffix)
            elif not skip_properties:
                logger.warning("No integration properties file configured, skipping update")
            sink.save(obfuscated)

        counts = verify_record_counts(original, obfuscated)

    except (ObfuscationError, RecordLoadError, PropertiesFileError, FileNotFoundError) as e:
        click.echo(f"❌ Obfuscation failed: {e}", err=True)
        raise click.ClickException(str(e)) from e

    click.echo(f"✅ Obfuscated {counts}")
    if dry_run:
        click.echo("\n💡 This was a dry run. Nothing was written.")
    else:
        click.echo(f"   Saved to: {sink.data_dir}")
