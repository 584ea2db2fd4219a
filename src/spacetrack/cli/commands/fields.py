"""Fields command - list the fields usable in --filter."""

import textwrap

import click

from ...query import DEFAULT_REGISTRY
from ..helpers import fail


def _describe(name: str) -> str:
    return f"{name}\n{textwrap.indent(DEFAULT_REGISTRY.help_for(name), '  ')}"


@click.command()
@click.argument("field", required=False)
def fields(field):
    """List filterable fields, or show the accepted values for FIELD."""
    if field:
        if field not in DEFAULT_REGISTRY:
            fail(f"field {field!r} can not be used as a filter")
        click.echo(_describe(field.upper()))
        return

    for name in DEFAULT_REGISTRY.fields:
        click.echo(_describe(name))
