import logging

import click

from storefront.infrastructure.cli.product_commands import (
    product_create,
    product_history,
    product_list,
    product_record_price,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.sale_commands import sale_create, sale_list, sale_show
from storefront.infrastructure.config import load_settings


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront pricing and sales ledger."""
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage catalog products and prices."""


@cli.group()
def sale() -> None:
    """Record and inspect sales."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_history)
product.add_command(product_list)
product.add_command(product_record_price)
product.add_command(product_show)
product.add_command(product_update)
sale.add_command(sale_create)
sale.add_command(sale_list)
sale.add_command(sale_show)
