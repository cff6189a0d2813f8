"""CLI commands for the Sale aggregate."""

from __future__ import annotations

import click

from storefront.application.create_sale import CreateSaleHandler
from storefront.application.dto import SaleDTO, SaleItemSpec, SaleRequest
from storefront.application.show_sale import ListSalesHandler, ShowSaleHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, sale_repository
from storefront.infrastructure.config import Settings


def _parse_items(raw: str) -> list[SaleItemSpec]:
    """Parse 'prod-a:3,prod-b:2' into a SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(SaleItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_sale(dto: SaleDTO) -> None:
    """Shared formatting for displaying a sale."""
    click.echo(f"Sale #{dto.id}  ({dto.sale_type}, {dto.payment_type})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Store:    {dto.store_id}")
    click.echo(f"Date:     {dto.sale_date}")
    click.echo()
    click.echo(f"  {'Product':<38} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*65}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<38} {item.quantity_sold:>5} "
            f"{item.selling_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Sale Total':<45} {dto.total_amount:>20}")


@click.command("create")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--store", "store_id", required=True, help="Store ID.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--payment-type", required=True, help="Payment type (e.g. CARD).")
@click.option("--sale-type", default="ONLINE", show_default=True, help="ONLINE or IN_STORE.")
@click.option("--discount", "cumulative_discount", default="0", help="Cumulative discount.")
@click.option("--freight", "freight_price", default="0", help="Freight price.")
@click.option("--user", "user_id", default=None, help="Buying user ID.")
@click.pass_obj
def sale_create(
    settings: Settings,
    items: str,
    store_id: str,
    address: str,
    payment_type: str,
    sale_type: str,
    cumulative_discount: str,
    freight_price: str,
    user_id: str | None,
) -> None:
    """Record a sale priced from the current catalog."""
    request = SaleRequest(
        items=_parse_items(items),
        store_id=store_id,
        address=address,
        payment_type=payment_type,
        sale_type=sale_type,
        cumulative_discount=cumulative_discount,
        freight_price=freight_price,
        user_id=user_id,
    )

    try:
        handler = CreateSaleHandler(
            sale_repo=sale_repository(settings),
            product_repo=product_repository(settings),
            currency=settings.currency,
        )
        dto = handler.handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("show")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID to display.")
@click.pass_obj
def sale_show(settings: Settings, sale_id: int) -> None:
    """Show details of a recorded sale."""
    try:
        dto = ShowSaleHandler(sale_repository(settings)).handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("list")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def sale_list(settings: Settings, customer_id: str) -> None:
    """List the sales attributed to a customer."""
    try:
        handler = ListSalesHandler(sale_repository(settings))
        sales = handler.handle(customer_id)
        count = handler.count(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{count} sale(s) for customer {customer_id}")
    for dto in sales:
        click.echo(
            f"  #{dto.id:<6} {dto.sale_date}  {len(dto.items):>3} line(s)  "
            f"{dto.total_amount:>12}"
        )
