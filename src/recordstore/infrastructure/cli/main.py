import logging

import click

from recordstore.infrastructure.bootstrap import settings
from recordstore.infrastructure.cli.order_commands import order_create, order_list, order_show
from recordstore.infrastructure.cli.record_commands import (
    record_add,
    record_delete,
    record_list,
    record_lookup,
    record_show,
    record_update,
)


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity (default from RECORDSTORE_LOG_LEVEL, else WARNING).",
)
def cli(log_level: str | None) -> None:
    """Record Store: catalog and order management."""
    level = (log_level or settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def record() -> None:
    """Manage catalog records."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
record.add_command(record_add)
record.add_command(record_delete)
record.add_command(record_list)
record.add_command(record_lookup)
record.add_command(record_show)
record.add_command(record_update)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
