"""Relational schema for the storefront datastore (SQLAlchemy Core).

Money is stored as decimal strings to keep exact values on every
backend.  Order lines deliberately carry no foreign key to products: a
product may be deleted while orders that bought it live on.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.engine import Engine

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False, default=""),
    Column("price", String(32), nullable=False),
    Column("currency", String(3), nullable=False, default="USD"),
    Column("stock", Integer, nullable=False, default=0),
)

# Names are unique regardless of case, matching the catalog lookup.
Index("uq_products_name", func.lower(products.c.name), unique=True)

users = Table(
    "users",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("email", String(320), nullable=False, unique=True),
    Column("role", String(20), nullable=False, default="customer"),
    Column("cancel_count", Integer, nullable=False, default=0),
    Column("blocked", Boolean, nullable=False, default=False),
)

carts = Table(
    "carts",
    metadata,
    Column("user_id", String(64), primary_key=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

cart_items = Table(
    "cart_items",
    metadata,
    Column("user_id", String(64), ForeignKey("carts.user_id"), primary_key=True),
    Column("product_id", String(64), primary_key=True),
    Column("position", Integer, nullable=False),
    Column("quantity", Integer, nullable=False),
)

orders = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", String(64), nullable=False, index=True),
    Column("status", String(20), nullable=False),
    Column("total_amount", String(32), nullable=False),
    Column("currency", String(3), nullable=False, default="USD"),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

order_items = Table(
    "order_items",
    metadata,
    Column("order_id", Integer, ForeignKey("orders.id"), primary_key=True),
    Column("position", Integer, primary_key=True),
    Column("product_id", String(64), nullable=False),
    Column("product_name", String(200), nullable=False),
    Column("quantity", Integer, nullable=False),
    Column("unit_price", String(32), nullable=False),
)


def create_schema(engine: Engine) -> None:
    metadata.create_all(engine)
