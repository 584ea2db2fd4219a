"""CDM command - fetch recent public conjunction data messages."""

import click

from ...context import pass_context
from ...query import Limit, OrderBy, Predicate, RequestClass, SpaceRequest
from ..helpers import output_options, run_request


def cdm_request(days: int = 1, limit: int = -1) -> SpaceRequest:
    return SpaceRequest(
        request_class=RequestClass.CDM_PUBLIC,
        predicates=[Predicate("CREATED", f">now-{days}")],
        limit=Limit(limit),
        order_by=OrderBy("CDM_ID"),
    )


@click.command()
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Messages created within the last DAYS days",
)
@output_options
@pass_context
def cdm(ctx, days, limit, fmt, one_file, dry_run, interval):
    """Fetch public conjunction data messages, ordered by CDM id."""
    run_request(ctx, cdm_request(days, limit), fmt, one_file, dry_run, interval)
