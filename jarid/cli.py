"""Command line interface for jarid."""

import json
import sys
import zipfile
from typing import Optional

import click

from jarid import __version__
from jarid.archive import JarArchive
from jarid.config import JaridConfig, ResolverConfig, load_config
from jarid.errors import ExposerFailure, InvalidConfiguration
from jarid.exposers.factory import exposer_factory
from jarid.logging import add_log_file, get_logger, set_log_level
from jarid.resolver import IdentityResolver


@click.group()
@click.version_option(version=__version__, prog_name="jarid")
def main():
    """jarid - guess the Maven coordinates of Java archives."""


@main.command()
@click.argument("archives", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "-c", type=click.Path(exists=True), help="Configuration file path (YAML or JSON)")
@click.option("--exposer", "-e", "exposers", multiple=True, help="Exposer to run, in order (can be used multiple times, overrides config)")
@click.option("--log-level", type=str, help="Logging level (overrides config)")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write log records to this file")
@click.option("--debug", is_flag=True, help="Log every candidate found")
@click.option("--candidates/--no-candidates", default=False, help="Include candidate lists in the output")
def identify(
    archives: tuple[str, ...],
    config: Optional[str],
    exposers: tuple[str, ...],
    log_level: Optional[str],
    log_file: Optional[str],
    debug: bool,
    candidates: bool,
):
    """Print the identity of each ARCHIVE as one JSON object per line."""
    try:
        jarid_config = load_config(config) if config else JaridConfig()
        if exposers:
            jarid_config.resolver = ResolverConfig(exposers=list(exposers), debug=jarid_config.resolver.debug)
        if debug:
            jarid_config.resolver.debug = True
        if log_level:
            jarid_config = JaridConfig.from_dict({**jarid_config.to_dict(), "log_level": log_level})
    except (InvalidConfiguration, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    level = "DEBUG" if debug else jarid_config.log_level.value
    set_log_level(level)
    if log_file:
        add_log_file(log_file, level=level)
    logger = get_logger("jarid.cli")

    resolver = IdentityResolver.from_config(jarid_config.resolver)
    logger.debug(f"Exposers: {jarid_config.resolver.exposers}")

    failures = 0
    for path in archives:
        try:
            with JarArchive(path) as archive:
                identity = resolver.analyze(archive)
        except (zipfile.BadZipFile, ExposerFailure) as e:
            logger.error(f"Failed to identify {path}: {e}")
            failures += 1
            continue

        result = identity.to_dict() if candidates else {
            "group_id": identity.group_id,
            "artifact_id": identity.artifact_id,
            "version": identity.version,
            "name": identity.name,
            "vendor": identity.vendor,
        }
        click.echo(json.dumps({"archive": path, **result}, ensure_ascii=False))

    if failures:
        logger.warning(f"{failures}/{len(archives)} archives could not be identified")
        sys.exit(1)


@main.command(name="exposers")
def list_exposers():
    """List the registered exposer names."""
    for name in exposer_factory.get_supported_names():
        click.echo(name)


if __name__ == "__main__":
    main()
