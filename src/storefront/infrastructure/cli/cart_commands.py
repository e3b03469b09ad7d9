"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import authenticate, reports_errors, user_option


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*37}")
    for line in dto.items:
        name = line.product_name or f"(deleted {line.product_id})"
        click.echo(f"  {name:<20} {line.quantity:>5} {line.unit_price or '-':>10}")


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@user_option
@reports_errors
def cart_add(product_id: str, quantity: int, user_id: str) -> None:
    """Add a product to your cart."""
    actor = authenticate(user_id)
    _display_cart(AddToCartHandler(bootstrap.unit_of_work()).handle(actor, product_id, quantity))


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
@user_option
@reports_errors
def cart_remove(product_id: str, user_id: str) -> None:
    """Remove a product from your cart."""
    actor = authenticate(user_id)
    _display_cart(RemoveFromCartHandler(bootstrap.unit_of_work()).handle(actor, product_id))


@click.command("show")
@user_option
@reports_errors
def cart_show(user_id: str) -> None:
    """Show your cart at current catalog prices."""
    actor = authenticate(user_id)
    _display_cart(ShowCartHandler(bootstrap.unit_of_work()).handle(actor))
