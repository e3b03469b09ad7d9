"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import functools

import click
from sqlalchemy.exc import SQLAlchemyError

from storefront.application.access_gate import AccessGate
from storefront.application.dto import Actor
from storefront.domain.exceptions import DomainException, StorageError
from storefront.infrastructure import bootstrap
from storefront.infrastructure.logging_config import (
    bind_request_context,
    clear_request_context,
)

user_option = click.option(
    "--user", "user_id", required=True, envvar="STOREFRONT_USER",
    help="ID of the acting user (or set STOREFRONT_USER).",
)


def reports_errors(func):
    """Turn domain and storage failures into a clean CLI error."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        except StorageError as exc:
            raise click.ClickException(f"{exc} (safe to retry)")
        except SQLAlchemyError as exc:
            raise click.ClickException(f"Storage failure: {exc}")
        finally:
            clear_request_context()

    return wrapper


def authenticate(user_id: str) -> Actor:
    """Run the access gate; blocked or unknown users never get further."""
    actor = AccessGate(bootstrap.unit_of_work()).authenticate(user_id)
    bind_request_context(user_id=actor.user_id, role=actor.role.value)
    return actor
