"""All command - fetch GP, decay and CDM data in one run."""

import click

from ...context import pass_context
from ...query import Predicate
from ..helpers import output_options, run_requests
from .cdm import cdm_request
from .decay import decay_request
from .gp import gp_request


@click.command(name="all")
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Look back DAYS days for every class",
)
@output_options
@pass_context
def all_(ctx, days, limit, fmt, one_file, dry_run, interval):
    """Fetch GP records for objects still in orbit, then decay and CDM messages.

    All three classes share one login. A class that fails is logged as a
    warning and the next one is fetched anyway.

    Examples:
        spacetrack --work-dir data all
        spacetrack --work-dir data all --days 3 --format csv --interval 6h
    """
    gp = gp_request(
        [Predicate("DECAY_DATE", "=null-val"), Predicate("EPOCH", f">now-{days}")],
        limit=limit,
    )
    run_requests(
        ctx,
        [gp, decay_request(days, limit), cdm_request(days, limit)],
        fmt,
        one_file,
        dry_run,
        interval,
    )
