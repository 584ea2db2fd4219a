"""CLI helper utilities shared across commands."""

import functools
import logging
import sys
import time
from datetime import timedelta
from typing import Iterable, List, Optional, Sequence

import click
import requests

from ..client import SpaceTrackClient
from ..config import parse_interval, save_cookie
from ..context import SpaceTrackContext
from ..credentials import read_passphrase_file
from ..errors import ConfigError, ContentTypeError, ResponseError, SpaceTrackError
from ..models.records import records_for
from ..persist import Persister, batch_folder, get_persister
from ..query import Format, Predicate, PredicateParser, QueryError, SpaceRequest

logger = logging.getLogger(__name__)


def fail(message: str) -> None:
    """Print an error the way every command does and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def check_filters(filters: Iterable[str]) -> List[Predicate]:
    """Validate ``--filter`` values before anything touches the network.

    Raises:
        click.BadParameter: On the first invalid filter, with the field's
            help text appended when there is one.
    """
    try:
        return PredicateParser().check_all(filters)
    except QueryError as e:
        message = str(e)
        if e.help_text:
            message += f"\n\n{e.help_text}"
        raise click.BadParameter(message, param_hint="'--filter'") from e


def output_options(f):
    """Options shared by every fetching command."""
    f = click.option(
        "--interval",
        default=None,
        help="Fetch again every INTERVAL (e.g. 10m, 1h, 1h30m); 5m to 24h",
    )(f)
    f = click.option(
        "--dry-run",
        is_flag=True,
        help="Print the query URL and exit without contacting space-track",
    )(f)
    f = click.option(
        "--one-file/--per-row",
        "one_file",
        default=None,
        help="Write the whole batch into one file, or one file per row",
    )(f)
    f = click.option(
        "--format",
        "fmt",
        type=click.Choice(Format.values(), case_sensitive=False),
        default=None,
        help="Output file format (default: config file value, else json)",
    )(f)
    f = click.option(
        "--limit",
        type=int,
        default=-1,
        help="Maximum number of rows; zero or negative means no limit",
    )(f)
    return f


def load_secret(ctx: SpaceTrackContext) -> None:
    """Read the passphrase from the configured secret file, if any."""
    config = ctx.config
    if not config.secret_file or config.auth.secret:
        return
    try:
        config.auth.secret = read_passphrase_file(config.secret_file)
    except FileNotFoundError:
        raise ConfigError(f"secret file not found: {config.secret_file}") from None


def _fetch_once(
    client: SpaceTrackClient,
    request: SpaceRequest,
    persister: Persister,
    work_dir: str,
) -> int:
    rows = client.fetch(request)
    records = records_for(request.request_class, rows)
    if not records:
        logger.info("no %s records returned", request.request_class.kind)
        click.echo(f"No {request.request_class.kind} records returned")
        return 0

    folder = batch_folder(work_dir, request.request_class.kind)
    written = persister.persist(folder, records)
    click.echo(f"{len(records)} {request.request_class.kind} records written to {folder}")
    return written


def run_request(
    ctx: SpaceTrackContext,
    request: SpaceRequest,
    fmt: Optional[str],
    one_file: Optional[bool],
    dry_run: bool,
    interval: Optional[str],
) -> None:
    """Fetch ``request`` and persist the rows, once or every ``interval``."""
    run_requests(ctx, [request], fmt, one_file, dry_run, interval)


def run_requests(
    ctx: SpaceTrackContext,
    space_requests: Sequence[SpaceRequest],
    fmt: Optional[str],
    one_file: Optional[bool],
    dry_run: bool,
    interval: Optional[str],
) -> None:
    """Fetch every request in turn through one logged-in client.

    With a single request and no interval a failed fetch ends the command.
    Otherwise the failure is logged and the next request (or the next run)
    goes ahead.
    """
    if dry_run:
        for request in space_requests:
            click.echo(request.url())
        return

    config = ctx.config
    if not config.work_dir:
        fail("work directory is required: use --work-dir or set work_dir in the config file")

    try:
        period: Optional[timedelta] = None
        interval = interval or config.interval
        if interval:
            period = parse_interval(interval)

        out_format = Format.parse(fmt) if fmt else config.format
        write_one_file = config.one_file if one_file is None else one_file
        jobs = [
            (request, get_persister(write_one_file, out_format, request.request_class.kind))
            for request in space_requests
        ]
        keep_going = period is not None or len(jobs) > 1

        load_secret(ctx)
        on_cookie = None
        if ctx.config_path is not None:
            on_cookie = functools.partial(save_cookie, path=ctx.config_path)

        with SpaceTrackClient(config.auth, on_cookie=on_cookie) as client:
            while True:
                for request, persister in jobs:
                    try:
                        _fetch_once(client, request, persister, config.work_dir)
                    except (ResponseError, ContentTypeError, requests.RequestException) as e:
                        if not keep_going:
                            raise
                        logger.warning("space-track %s fetch: %s", request.request_class.kind, e)

                if period is None:
                    break
                logger.info("next fetch in %s", period)
                time.sleep(period.total_seconds())
    except (SpaceTrackError, QueryError) as e:
        fail(str(e))
    except requests.RequestException as e:
        fail(f"request to space-track failed: {e}")
