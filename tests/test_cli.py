"""Command line interface driven through Typer's test runner."""

from __future__ import annotations

import json
import sys

import httpx
import pytest
from typer.testing import CliRunner

from dodopayments import DodoPayments
from dodopayments.cli import main as cli_main
from dodopayments.core.config import read_user_env_vars
from tests import factories
from tests.conftest import BASE_URL

runner = CliRunner()


@pytest.fixture()
def cli_client(monkeypatch, http_client, settings):
    def make_client() -> DodoPayments:
        return DodoPayments("sk_test_abcdefgh", base_url=BASE_URL, http_client=http_client, settings=settings)

    monkeypatch.setattr(cli_main, "make_client", make_client)


def test_no_arguments_prints_help():
    result = runner.invoke(cli_main.app, [])

    assert "doctor" in result.output
    assert "list" in result.output


def test_doctor_reports_healthy_configuration(cli_client, router):
    router.json("GET", "checkout/supported_countries", ["US", "GB", "IN"])

    result = runner.invoke(cli_main.app, ["doctor"])

    assert result.exit_code == 0, result.output
    assert "3 supported countries" in result.output
    assert "sk_t...efgh" in result.output
    assert "sk_test_abcdefgh" not in result.output


def test_doctor_fails_when_api_is_unreachable(cli_client, router):
    router.add("GET", "checkout/supported_countries", httpx.Response(401, json={"message": "bad key"}))

    result = runner.invoke(cli_main.app, ["doctor"])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_list_products_as_table(cli_client, router):
    router.json(
        "GET",
        "products",
        {"items": [factories.product_list_item("pdt_1"), factories.product_list_item("pdt_2")]},
    )

    result = runner.invoke(cli_main.app, ["list", "products", "--page-size", "2"])

    assert result.exit_code == 0, result.output
    assert "pdt_1" in result.output
    assert "pdt_2" in result.output
    assert router.last.url.params["page_size"] == "2"


def test_list_as_json(cli_client, router):
    router.json("GET", "customers", {"items": [factories.customer("cus_9")]})

    result = runner.invoke(cli_main.app, ["list", "customers", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data[0]["customer_id"] == "cus_9"


def test_list_empty_resource(cli_client, router):
    router.json("GET", "payouts", {"items": []})

    result = runner.invoke(cli_main.app, ["list", "payouts"])

    assert result.exit_code == 0
    assert "No payouts found" in result.output


def test_list_reports_api_errors(cli_client, router):
    router.add("GET", "discounts", httpx.Response(403, json={"message": "forbidden"}))

    result = runner.invoke(cli_main.app, ["list", "discounts"])

    assert result.exit_code == 1
    assert "Request failed" in result.output


def test_list_rejects_unknown_resource(cli_client):
    result = runner.invoke(cli_main.app, ["list", "invoices"])

    assert result.exit_code != 0


def test_countries(cli_client, router):
    router.json("GET", "checkout/supported_countries", ["US", "DE"])

    result = runner.invoke(cli_main.app, ["countries"])

    assert result.exit_code == 0
    assert "US DE" in result.output


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout")
def test_setup_writes_user_env(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(cli_main.app, ["setup"], input="test_mode\nsk_new\n\n")

    assert result.exit_code == 0, result.output
    assert read_user_env_vars() == {
        "DODO_PAYMENTS_API_KEY": "sk_new",
        "DODO_PAYMENTS_ENVIRONMENT": "test_mode",
    }


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout")
def test_setup_rejects_unknown_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    result = runner.invoke(cli_main.app, ["setup"], input="staging\n")

    assert result.exit_code != 0
    assert read_user_env_vars() == {}
