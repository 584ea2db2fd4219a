"""GP command - fetch general perturbations (TLE) data."""

from typing import Iterable, List

import click

from ...context import pass_context
from ...query import (
    DEFAULT_REGISTRY,
    Limit,
    OrderBy,
    Predicate,
    RequestClass,
    Sort,
    SpaceRequest,
)
from ...query.types import GP_SORTABLE_FIELDS
from ..helpers import check_filters, output_options, run_request


def _matching(names: Iterable[str], incomplete: str) -> List[str]:
    # Answer in the case the user started typing in, lower by default
    prefix = incomplete.upper()
    lower = not incomplete.isupper()
    return [name.lower() if lower else name for name in names if name.startswith(prefix)]


def complete_filter(ctx, param, incomplete):
    """Offer filterable field names for ``--filter``."""
    return _matching(DEFAULT_REGISTRY.fields, incomplete)


def complete_orderby(ctx, param, incomplete):
    """Offer sortable GP fields for ``--orderby``."""
    return _matching(GP_SORTABLE_FIELDS, incomplete)


def gp_request(
    predicates: List[Predicate],
    orderby: str = "NORAD_CAT_ID",
    sort: str = "asc",
    limit: int = -1,
    skip: int = -1,
) -> SpaceRequest:
    return SpaceRequest(
        request_class=RequestClass.GP,
        predicates=predicates,
        limit=Limit(limit, skip),
        order_by=OrderBy(orderby, Sort.parse(sort)),
    )


@click.command()
@click.option(
    "-f",
    "--filter",
    "filters",
    multiple=True,
    shell_complete=complete_filter,
    help="Filter as field<op>value, e.g. epoch<now-30 (repeatable)",
)
@click.option(
    "--orderby",
    default="norad_cat_id",
    show_default=True,
    shell_complete=complete_orderby,
    help="Field to order by; fields that can't be sorted on are ignored",
)
@click.option(
    "--sort",
    type=click.Choice(Sort.values(), case_sensitive=False),
    default="asc",
    show_default=True,
)
@click.option("--skip", type=int, default=-1, help="Rows to skip, used with --limit")
@output_options
@pass_context
def gp(ctx, filters, orderby, sort, skip, limit, fmt, one_file, dry_run, interval):
    """Fetch GP (TLE) records matching every --filter.

    Filters are validated before any request is made.

    Examples:
        spacetrack gp -f epoch<now-30 -f decay_date<>null-val --limit 10
        spacetrack gp -f object_name=ISS --format csv --one-file
        spacetrack gp -f object_id=1998-067A -f mean_motion>15 --dry-run
    """
    request = gp_request(check_filters(filters), orderby, sort, limit, skip)
    run_request(ctx, request, fmt, one_file, dry_run, interval)
