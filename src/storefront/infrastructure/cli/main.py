import logging

import click

from storefront.infrastructure.bootstrap import settings
from storefront.infrastructure.cli.catalog_commands import catalog, home
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_approve,
    product_availability,
    product_delete,
    product_list,
    product_update,
)
from storefront.infrastructure.cli.session_commands import (
    session_login,
    session_logout,
    session_whoami,
)
from storefront.infrastructure.config import ConfigurationError
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Storefront — digital products shop and admin"""
    try:
        level = logging.DEBUG if verbose else settings().log_level
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(level)


@cli.group()
def product() -> None:
    """Manage products (admin)."""


@cli.group()
def session() -> None:
    """Sign in and out."""


# Register subcommands
cli.add_command(catalog)
cli.add_command(home)
product.add_command(product_add)
product.add_command(product_approve)
product.add_command(product_availability)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
session.add_command(session_login)
session.add_command(session_logout)
session.add_command(session_whoami)
