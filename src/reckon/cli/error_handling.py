"""CLI error handling helpers."""

import logging
from contextlib import contextmanager
from typing import Iterator

import click

from reckon.domain.errors import DomainError

logger = logging.getLogger(__name__)


@contextmanager
def domain_errors(ctx: click.Context) -> Iterator[None]:
    """Report a DomainError raised inside the block on stderr and exit 1.

    Other exceptions propagate unchanged.
    """
    try:
        yield
    except DomainError as error:
        logger.debug("aborting on %s", type(error).__name__, exc_info=error)
        click.echo(f"Error: {error}", err=True)
        ctx.exit(1)
