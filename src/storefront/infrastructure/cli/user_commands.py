"""CLI commands for the User aggregate."""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.application.show_user import ShowUserHandler
from storefront.domain.model.user import Role
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import authenticate, reports_errors, user_option


@click.command("register")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address (must be unique).")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role]),
    default=Role.CUSTOMER.value,
    show_default=True,
)
@reports_errors
def user_register(name: str, email: str, role: str) -> None:
    """Register a new user."""
    dto = RegisterUserHandler(bootstrap.unit_of_work()).handle(name=name, email=email, role=role)
    click.echo(f"User {dto.id} registered ({dto.role})")


@click.command("show")
@click.option("--id", "target_id", default=None, help="User to show (defaults to yourself).")
@user_option
@reports_errors
def user_show(target_id: str | None, user_id: str) -> None:
    """Show a user's role and cancellation record."""
    actor = authenticate(user_id)
    dto = ShowUserHandler(bootstrap.unit_of_work()).handle(actor, target_id or actor.user_id)
    click.echo(f"User {dto.id}  ({dto.role})")
    click.echo(f"Name:          {dto.name}")
    click.echo(f"Email:         {dto.email}")
    click.echo(f"Cancellations: {dto.cancel_count}")
    click.echo(f"Blocked:       {'yes' if dto.blocked else 'no'}")
