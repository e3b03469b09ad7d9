"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import authenticate, reports_errors, user_option


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("place")
@user_option
@reports_errors
def order_place(user_id: str) -> None:
    """Turn your cart into an order (takes the stock)."""
    actor = authenticate(user_id)
    dto = PlaceOrderHandler(bootstrap.unit_of_work()).handle(actor)
    click.echo("Order placed, cart emptied.")
    _display_order(dto)


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@user_option
@reports_errors
def order_cancel(order_id: int, user_id: str) -> None:
    """Cancel an order and put its items back in stock."""
    actor = authenticate(user_id)
    handler = CancelOrderHandler(
        bootstrap.unit_of_work(),
        block_threshold=bootstrap.settings().cancel_block_threshold,
    )
    result = handler.handle(order_id, actor)

    click.echo(f"Order #{result.order_id} cancelled.")
    for product_id in result.skipped_product_ids:
        click.echo(f"  note: product {product_id} no longer exists, not restocked")
    if result.user_blocked:
        click.echo(
            "Your account is now blocked due to repeated cancellations.",
            err=True,
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@user_option
@reports_errors
def order_show(order_id: int, user_id: str) -> None:
    """Show details of an existing order."""
    actor = authenticate(user_id)
    _display_order(ShowOrderHandler(bootstrap.unit_of_work()).handle(actor, order_id))


@click.command("list")
@user_option
@reports_errors
def order_list(user_id: str) -> None:
    """List your orders."""
    actor = authenticate(user_id)
    orders = ListOrdersHandler(bootstrap.unit_of_work()).handle(actor)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Created':<22} {'Total':>10}")
    click.echo("-" * 51)
    for dto in orders:
        click.echo(f"{dto.id:<6} {dto.status:<10} {dto.created_at:<22} {dto.total:>10}")
