"""CLI tests using click's CliRunner against a throwaway SQLite file."""

import pytest
from click.testing import CliRunner

from storefront.domain.model.product import Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STOREFRONT_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("STOREFRONT_CANCEL_BLOCK_THRESHOLD", "2")
    monkeypatch.setattr(
        "storefront.infrastructure.cli.main.configure_logging", lambda *a, **k: None
    )
    bootstrap.reset()

    runner = CliRunner()
    result = runner.invoke(cli, ["db", "init"])
    assert result.exit_code == 0, result.output

    with bootstrap.unit_of_work() as uow:
        uow.users.save(User(id="alice", name="Alice", email="alice@shop.test"))
        uow.users.save(User(id="root", name="Root", email="root@shop.test", role=Role.ADMIN))
        uow.products.save(Product(id="w1", name="Widget", price=Money.of("10.00"), stock=5))
        uow.commit()

    yield runner
    bootstrap.reset()


def _ok(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


class TestCheckoutFlow:

    def test_place_order_from_cart(self, runner):
        _ok(runner, "cart", "add", "--product", "w1", "--quantity", "2", "--user", "alice")
        out = _ok(runner, "order", "place", "--user", "alice")

        assert "Order #1" in out
        assert "$20.00" in out
        assert "Widget" in _ok(runner, "product", "list")
        assert "Cart is empty." in _ok(runner, "cart", "show", "--user", "alice")
        with bootstrap.unit_of_work() as uow:
            assert uow.products.get_by_id("w1").stock == 3

    def test_empty_cart_is_an_error(self, runner):
        result = runner.invoke(cli, ["order", "place", "--user", "alice"])
        assert result.exit_code != 0
        assert "is empty" in result.output

    def test_unknown_user_rejected(self, runner):
        result = runner.invoke(cli, ["cart", "show", "--user", "mallory"])
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_user_from_environment(self, runner):
        result = runner.invoke(cli, ["order", "list"], env={"STOREFRONT_USER": "alice"})
        assert result.exit_code == 0
        assert "No orders found." in result.output


class TestCancellationFlow:

    def _buy(self, runner):
        _ok(runner, "cart", "add", "--product", "w1", "--user", "alice")
        out = _ok(runner, "order", "place", "--user", "alice")
        return out.split("Order #")[1].split()[0]

    def test_self_cancellations_block_at_threshold(self, runner):
        first = self._buy(runner)
        assert "cancelled" in _ok(runner, "order", "cancel", "--id", first, "--user", "alice")

        second = self._buy(runner)
        result = runner.invoke(cli, ["order", "cancel", "--id", second, "--user", "alice"])
        assert result.exit_code == 0
        assert "blocked" in result.output

        result = runner.invoke(cli, ["cart", "show", "--user", "alice"])
        assert result.exit_code != 0
        assert "blocked" in result.output

        shown = _ok(runner, "user", "show", "--id", "alice", "--user", "root")
        assert "Cancellations: 2" in shown
        assert "Blocked:       yes" in shown

    def test_double_cancel_reports_error(self, runner):
        order_id = self._buy(runner)
        _ok(runner, "order", "cancel", "--id", order_id, "--user", "root")
        result = runner.invoke(cli, ["order", "cancel", "--id", order_id, "--user", "root"])
        assert result.exit_code != 0
        assert "already cancelled" in result.output


class TestCatalogCommands:

    def test_customer_cannot_add_product(self, runner):
        result = runner.invoke(
            cli, ["product", "add", "--name", "X", "--price", "1", "--stock", "1",
                  "--user", "alice"],
        )
        assert result.exit_code != 0
        assert "Only admins" in result.output

    def test_admin_updates_stock(self, runner):
        out = _ok(runner, "product", "update", "--id", "w1", "--stock", "9", "--user", "root")
        assert "9 in stock" in out

    def test_register_user(self, runner):
        out = _ok(runner, "user", "register", "--name", "Carol", "--email", "carol@shop.test")
        assert "registered (customer)" in out


def test_bad_log_level_is_a_clean_cli_error(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STOREFRONT_DATABASE_URL", f"sqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "verbose")
    bootstrap.reset()
    try:
        result = CliRunner().invoke(cli, ["db", "init"])
    finally:
        bootstrap.reset()

    assert result.exit_code == 1
    assert not isinstance(result.exception, ValueError)
    assert "STOREFRONT_LOG_LEVEL must be one of" in result.output
