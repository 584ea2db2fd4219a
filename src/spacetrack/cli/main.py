"""Spacetrack CLI main entry point with global options."""

import click

from .. import __version__
from ..config import load_config, resolve_config_path
from ..context import SpaceTrackContext
from ..errors import ConfigError
from ..logs import configure_logging
from ..models.config import LOG_LEVELS
from .helpers import fail


@click.group()
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    help="Config file (overrides $SPACETRACK_CONFIG, ./spacetrack.yml, ~/.spacetrack.yaml)",
)
@click.option(
    "--work-dir",
    type=click.Path(file_okay=False),
    help="Folder where fetched records are persisted",
)
@click.option(
    "--secret-file",
    type=click.Path(dir_okay=False),
    help="File holding the base64 passphrase that decrypts the credentials",
)
@click.option(
    "--log-level",
    type=click.Choice([*LOG_LEVELS, "warn"], case_sensitive=False),
    default=None,
    help="Log level (default: config file value, else info)",
)
@click.option(
    "--log-file",
    "log_files",
    multiple=True,
    type=click.Path(dir_okay=False),
    help="Also log into this file (repeatable)",
)
@click.option("--console/--no-console", default=None, help="Log to stderr")
@click.option("--identity", default=None, help="Space-track identity (user name or email)")
@click.option("--password", default=None, help="Space-track password")
@click.version_option(__version__, prog_name="spacetrack")
@click.pass_context
def cli(
    ctx,
    config_file,
    work_dir,
    secret_file,
    log_level,
    log_files,
    console,
    identity,
    password,
):
    """Spacetrack - fetch data from space-track.org into local files."""
    ctx.ensure_object(SpaceTrackContext)

    path = resolve_config_path(config_file)
    try:
        config = load_config(path)
        configure_logging(
            config.logger, level=log_level, log_files=log_files, console=console
        )
    except ConfigError as e:
        fail(str(e))

    # Command line values win over the config file
    if work_dir:
        config.work_dir = work_dir
    if secret_file:
        config.secret_file = secret_file
    if identity:
        config.auth.identity = identity
    if password:
        config.auth.password = password

    ctx.obj.config = config
    ctx.obj.config_path = path


# Register commands at module level so tests can import cli with commands attached
from .commands.all_ import all_
from .commands.cdm import cdm
from .commands.credentials import credentials
from .commands.decay import decay
from .commands.fields import fields
from .commands.gp import gp

cli.add_command(gp)
cli.add_command(decay)
cli.add_command(cdm)
cli.add_command(fields)
cli.add_command(credentials)
cli.add_command(all_)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
