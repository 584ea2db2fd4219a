"""Decay command - fetch recent decay messages."""

import click

from ...context import pass_context
from ...query import Limit, OrderBy, Predicate, RequestClass, SpaceRequest
from ..helpers import output_options, run_request


def decay_request(days: int = 1, limit: int = -1) -> SpaceRequest:
    return SpaceRequest(
        request_class=RequestClass.DECAY,
        predicates=[Predicate("DECAY_EPOCH", f">now-{days}")],
        limit=Limit(limit),
        order_by=OrderBy("NORAD_CAT_ID"),
    )


@click.command()
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Decays whose epoch falls within the last DAYS days",
)
@output_options
@pass_context
def decay(ctx, days, limit, fmt, one_file, dry_run, interval):
    """Fetch decay messages, ordered by NORAD catalog id."""
    run_request(ctx, decay_request(days, limit), fmt, one_file, dry_run, interval)
