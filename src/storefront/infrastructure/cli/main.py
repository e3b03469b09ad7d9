import click

from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.cart_commands import cart_add, cart_remove, cart_show
from storefront.infrastructure.cli.common import reports_errors
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_list,
    order_place,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from storefront.infrastructure.cli.user_commands import user_register, user_show
from storefront.infrastructure.config import ConfigurationError
from storefront.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Storefront: cart checkout and order cancellation."""
    try:
        current = bootstrap.settings()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))
    configure_logging(current.log_level, current.log_format)


@cli.group()
def db() -> None:
    """Manage the datastore."""


@db.command("init")
@reports_errors
def db_init() -> None:
    """Create all tables (existing data is kept)."""
    bootstrap.init_database()
    click.echo("Database initialised.")


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def cart() -> None:
    """Manage your cart."""


@cli.group()
def order() -> None:
    """Place, cancel and inspect orders."""


# Register subcommands
user.add_command(user_register)
user.add_command(user_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_cancel)
order.add_command(order_list)
order.add_command(order_place)
order.add_command(order_show)
