"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import authenticate, reports_errors, user_option


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--description", default="", help="Free-text description.")
@user_option
@reports_errors
def product_add(name: str, price: str, stock: int, description: str, user_id: str) -> None:
    """Add a new product to the catalog (admin)."""
    actor = authenticate(user_id)
    dto = AddProductHandler(bootstrap.unit_of_work()).handle(
        actor, name=name, price=price, stock=stock, description=description
    )
    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price} ({dto.stock} in stock)")


@click.command("list")
@reports_errors
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(bootstrap.unit_of_work()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 74)
    for p in products:
        click.echo(f"{p.id:<34} {p.name:<20} {p.price:>10} {p.stock:>7}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@user_option
@reports_errors
def product_update(product_id: str, price: str | None, stock: int | None, user_id: str) -> None:
    """Update a product's price and/or stock (admin)."""
    actor = authenticate(user_id)
    dto = UpdateProductHandler(bootstrap.unit_of_work()).handle(
        actor, product_id, new_price=price, new_stock=stock
    )
    click.echo(f"Product {dto.id} now {dto.price} with {dto.stock} in stock")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@user_option
@reports_errors
def product_delete(product_id: str, user_id: str) -> None:
    """Remove a product from the catalog (admin)."""
    actor = authenticate(user_id)
    DeleteProductHandler(bootstrap.unit_of_work()).handle(actor, product_id)
    click.echo(f"Product {product_id} deleted.")
