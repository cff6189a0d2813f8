"""CLI commands for the Product aggregate and its price history."""

from __future__ import annotations

import click

from storefront.application.create_product import CreateProductHandler
from storefront.application.dto import NewProductSpec, ProductDTO
from storefront.application.price_history import (
    RecordPriceHistoryHandler,
    ShowPriceHistoryHandler,
)
from storefront.application.show_product import ListProductsHandler, ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    price_history_repository,
    product_repository,
)
from storefront.infrastructure.config import Settings


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}  '{dto.name}'")
    click.echo(f"Owner:         {dto.owner_id}")
    click.echo(f"Cost price:    {dto.cost_price}")
    click.echo(f"Selling price: {dto.selling_price}")
    click.echo(f"Offer:         {dto.offer_percentage} off -> {dto.offer_price}")
    if dto.quantity is not None:
        click.echo(f"Quantity:      {dto.quantity}")


@click.command("create")
@click.option("--owner", required=True, help="Owning customer ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--cost-price", required=True, help="Cost price (e.g. 80.00).")
@click.option("--selling-price", required=True, help="Selling price (e.g. 200.00).")
@click.option("--offer", "offer_percentage", default=None, help="Discount percentage (0-100).")
@click.option("--quantity", type=int, default=None, help="Units in stock.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--category", "category_name", default="", help="Category name.")
@click.pass_obj
def product_create(
    settings: Settings,
    owner: str,
    name: str,
    cost_price: str,
    selling_price: str,
    offer_percentage: str | None,
    quantity: int | None,
    description: str,
    category_name: str,
) -> None:
    """Add a new product to the catalog."""
    spec = NewProductSpec(
        owner_id=owner,
        name=name,
        cost_price=cost_price,
        selling_price=selling_price,
        offer_percentage=offer_percentage,
        quantity=quantity,
        description=description,
        category_name=category_name,
    )

    try:
        handler = CreateProductHandler(product_repository(settings), settings.currency)
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--selling-price", default=None, help="New selling price.")
@click.option("--offer", "offer_percentage", default=None, help="New discount percentage.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    selling_price: str | None,
    offer_percentage: str | None,
) -> None:
    """Change a product's selling price and/or discount."""
    try:
        handler = UpdateProductHandler(
            product_repo=product_repository(settings),
            history_repo=price_history_repository(settings),
        )
        dto = handler.handle(
            product_id,
            selling_price=selling_price,
            offer_percentage=offer_percentage,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")
    _display_product(dto)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: str) -> None:
    """Show a single product."""
    try:
        dto = ShowProductHandler(product_repository(settings)).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("list")
@click.option("--owner", required=True, help="Owning customer ID.")
@click.pass_obj
def product_list(settings: Settings, owner: str) -> None:
    """List the products owned by a customer."""
    try:
        products = ListProductsHandler(product_repository(settings)).handle(owner)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Price':>10} {'Offer':>7} {'Charged':>10}")
    click.echo("-" * 89)
    for p in products:
        click.echo(
            f"{p.id:<38} {p.name:<20} {p.selling_price:>10} "
            f"{p.offer_percentage:>7} {p.offer_price:>10}"
        )


@click.command("history")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_history(settings: Settings, product_id: str) -> None:
    """Show the superseded prices of a product, oldest first."""
    try:
        entries = ShowPriceHistoryHandler(price_history_repository(settings)).handle(
            product_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No price history.")
        return

    click.echo(f"{'Recorded at':<34} {'Price':>10} {'Offer':>7}")
    click.echo("-" * 53)
    for e in entries:
        click.echo(f"{e.recorded_at:<34} {e.price:>10} {e.offer_percentage:>7}")


@click.command("record-price")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="Price to record.")
@click.option("--offer", "offer_percentage", default=None, help="Discount percentage.")
@click.pass_obj
def product_record_price(
    settings: Settings,
    product_id: str,
    price: str,
    offer_percentage: str | None,
) -> None:
    """Append a price history entry by hand."""
    try:
        handler = RecordPriceHistoryHandler(
            product_repo=product_repository(settings),
            history_repo=price_history_repository(settings),
        )
        dto = handler.handle(product_id, price, offer_percentage)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Recorded {dto.price} ({dto.offer_percentage} off) for product {product_id}")
