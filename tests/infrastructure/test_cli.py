"""End-to-end tests of the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {"STOREFRONT_DATA_DIR": str(tmp_path), "STOREFRONT_CURRENCY": "USD"}

    def _run(*args: str):
        return runner.invoke(cli, list(args), env=env)

    return _run


def _create_product(run, owner: str, price: str, offer: str) -> str:
    result = run(
        "product", "create",
        "--owner", owner,
        "--name", f"Item {price}",
        "--cost-price", "1",
        "--selling-price", price,
        "--offer", offer,
    )
    assert result.exit_code == 0, result.output
    return result.output.splitlines()[0].split()[1]


def test_sale_priced_from_catalog(run, tmp_path):
    a = _create_product(run, "owner-a", "200", "25")
    b = _create_product(run, "owner-b", "50", "0")

    result = run(
        "sale", "create",
        "--items", f"{a}:3,{b}:2",
        "--store", "store-1",
        "--address", "1 Main St",
        "--payment-type", "CARD",
    )
    assert result.exit_code == 0, result.output
    assert "$550.00" in result.output
    assert "Customer: owner-a" in result.output

    sales = json.loads((tmp_path / "sales.json").read_text())
    assert len(sales) == 1
    assert sales[0]["total_amount"] == "550.00"


def test_unknown_product_fails_without_writing(run, tmp_path):
    a = _create_product(run, "owner-a", "200", "25")
    result = run(
        "sale", "create",
        "--items", f"{a}:1,ghost:1",
        "--store", "store-1",
        "--address", "1 Main St",
        "--payment-type", "CARD",
    )
    assert result.exit_code != 0
    assert "ghost" in result.output
    assert json.loads((tmp_path / "sales.json").read_text()) == []


def test_update_and_history(run):
    a = _create_product(run, "owner-a", "100", "0")

    assert run("product", "update", "--id", a, "--offer", "10").exit_code == 0
    assert run("product", "update", "--id", a, "--offer", "10").exit_code == 0
    assert run("product", "update", "--id", a, "--offer", "0").exit_code == 0

    result = run("product", "history", "--id", a)
    assert result.exit_code == 0, result.output
    rows = result.output.splitlines()[2:]
    assert len(rows) == 2
    assert rows[0].split()[-2:] == ["$100.00", "0%"]
    assert rows[1].split()[-2:] == ["$100.00", "10%"]


def test_update_missing_product(run):
    result = run("product", "update", "--id", "nope", "--selling-price", "5")
    assert result.exit_code != 0
    assert "not found" in result.output


def test_sale_list_and_show(run):
    a = _create_product(run, "owner-a", "10", "0")
    run(
        "sale", "create",
        "--items", f"{a}:2",
        "--store", "store-1",
        "--address", "1 Main St",
        "--payment-type", "CASH",
        "--sale-type", "IN_STORE",
    )

    listed = run("sale", "list", "--customer", "owner-a")
    assert listed.exit_code == 0, listed.output
    assert "1 sale(s) for customer owner-a" in listed.output

    shown = run("sale", "show", "--id", "1")
    assert shown.exit_code == 0, shown.output
    assert "IN_STORE" in shown.output
    assert "$20.00" in shown.output


def test_bad_items_format(run):
    result = run(
        "sale", "create",
        "--items", "no-quantity",
        "--store", "s",
        "--address", "a",
        "--payment-type", "CARD",
    )
    assert result.exit_code != 0
    assert "Expected 'ProductId:Quantity'" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ("product", "show", "--id", "A"),
        ("product", "update", "--id", "A", "--offer", "10"),
        ("product", "list", "--owner", "owner-a"),
        ("product", "history", "--id", "A"),
        ("sale", "show", "--id", "1"),
        ("sale", "list", "--customer", "owner-a"),
        (
            "sale", "create",
            "--items", "A:1",
            "--store", "s",
            "--address", "a",
            "--payment-type", "CARD",
        ),
    ],
)
def test_unusable_data_dir_reports_error(tmp_path, args):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    env = {"STOREFRONT_DATA_DIR": str(blocker / "sub"), "STOREFRONT_CURRENCY": "USD"}

    result = CliRunner().invoke(cli, list(args), env=env)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Cannot create" in result.output
