"""CLI commands for orders."""

from __future__ import annotations

import json

import click

from recordstore.application.create_order import CreateOrderHandler
from recordstore.application.dto import OrderDTO
from recordstore.application.list_orders import ListOrdersHandler
from recordstore.application.query import OrderQuery
from recordstore.application.show_order import ShowOrderHandler
from recordstore.application.validation import parse_create_order
from recordstore.domain.exceptions import DomainException
from recordstore.infrastructure.bootstrap import order_repository, record_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"  Record:    {dto.record_id}")
    click.echo(f"  Quantity:  {dto.quantity}")
    click.echo(f"  Total:     ${dto.total_price:.2f}")
    click.echo(f"  Placed:    {dto.order_date:%Y-%m-%d %H:%M UTC}")
    click.echo(f"  Customer:  {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"  Ship to:   {dto.shipping_address}")


@click.command("create")
@click.option("--record", "record_id", required=True, help="ID of the record to buy.")
@click.option("--quantity", required=True, help="Number of copies.")
@click.option("--name", "customer_name", required=True, help="Customer name.")
@click.option("--email", "customer_email", required=True, help="Customer email.")
@click.option("--address", "shipping_address", required=True, help="Shipping address.")
def order_create(
    record_id: str,
    quantity: str,
    customer_name: str,
    customer_email: str,
    shipping_address: str,
) -> None:
    """Place an order for a record (deducts stock)."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        record_repo=record_repository(),
    )

    try:
        command = parse_create_order({
            "recordId": record_id,
            "quantity": quantity,
            "customerName": customer_name,
            "customerEmail": customer_email,
            "shippingAddress": shipping_address,
        })
        dto = handler.handle(command)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created  (total=${dto.total_price:.2f})")


@click.command("list")
@click.option("--page", default=None, help="Page number (default 1).")
@click.option("--limit", default=None, help="Orders per page (default 10, max 100).")
@click.option("--sort-by", default=None, help="Field to sort by (default orderDate).")
@click.option("--sort-order", default=None, help="asc or desc (default desc).")
def order_list(
    page: str | None, limit: str | None, sort_by: str | None, sort_order: str | None
) -> None:
    """List orders, newest first."""
    query = OrderQuery.from_params(
        {"page": page, "limit": limit, "sortBy": sort_by, "sortOrder": sort_order}
    )
    result = ListOrdersHandler(order_repo=order_repository()).handle(query)

    if not result.data:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<24} {'Record':<24} {'Qty':>5} {'Total':>10} {'Customer':<20}")
    click.echo("-" * 87)
    for o in result.data:
        click.echo(
            f"{o.id:<24} {o.record_id:<24} {o.quantity:>5} "
            f"{'$' + format(o.total_price, '.2f'):>10} {o.customer_name[:20]:<20}"
        )
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total} order(s))")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON.")
def order_show(order_id: str, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
    else:
        _display_order(dto)
