"""Discounts, addons, brands and supported countries."""

from __future__ import annotations

import httpx
import pytest

from dodopayments import NotFoundError
from dodopayments.core.domain.brands import BrandVerificationStatus
from dodopayments.core.domain.enums import CountryCode, DiscountType
from tests import factories


def test_discount_create_without_code(client, router):
    router.json("POST", "discounts", factories.discount(code="X7K2QZ"))

    discount = client.discounts.create(amount=1000, type="percentage", usage_limit=10)

    assert discount.type is DiscountType.PERCENTAGE
    assert router.last_json() == {"amount": 1000, "type": "percentage", "usage_limit": 10}


def test_discount_update_list_delete(client, router):
    router.json("PATCH", "discounts/dsc_1", factories.discount(usage_limit=5))
    router.json("GET", "discounts", {"items": [factories.discount()]})
    router.add("DELETE", "discounts/dsc_1", httpx.Response(204))

    assert client.discounts.update("dsc_1", usage_limit=5).usage_limit == 5
    page = client.discounts.list(product_id="pdt_1")
    client.discounts.delete("dsc_1")

    assert page.items[0].code == "SPRING"
    assert router.calls[1].url.params["product_id"] == "pdt_1"
    assert router.last.method == "DELETE"


def test_discount_retrieve_missing_raises(client, router):
    router.add("GET", "discounts/dsc_404", httpx.Response(404, json={"message": "not found"}))

    with pytest.raises(NotFoundError):
        client.discounts.retrieve("dsc_404")


def test_addons(client, router):
    router.json("POST", "addons", factories.addon())
    router.json("GET", "addons/adn_1", factories.addon())
    router.json("PATCH", "addons/adn_1", factories.addon(price=700))
    router.json("GET", "addons", {"items": [factories.addon()]})

    created = client.addons.create(currency="USD", name="Extra seat", price=500, tax_category="saas")
    assert router.last_json() == {"currency": "USD", "name": "Extra seat", "price": 500, "tax_category": "saas"}

    assert client.addons.retrieve("adn_1").id == created.id
    assert client.addons.update("adn_1", price=700).price == 700
    assert client.addons.list(page_size=5).items[0].name == "Extra seat"


def test_addon_update_images_sends_no_body(client, router):
    router.json("PUT", "addons/adn_1/images", {"image_id": "img_1", "url": "https://upload.test/img_1"})

    upload = client.addons.update_images("adn_1")

    assert upload.image_id == "img_1"
    assert router.last.content == b""


def test_brands(client, router):
    router.json("POST", "brands", factories.brand())
    router.json("PATCH", "brands/bra_1", factories.brand(statement_descriptor="ACME INC"))
    router.json("GET", "brands", {"items": [factories.brand(), factories.brand("bra_2", verification_status="Hold")]})
    router.json("PUT", "brands/bra_1/images", {"image_id": "img_2", "url": "https://upload.test/img_2"})

    client.brands.create(name="Acme", statement_descriptor="ACME")
    updated = client.brands.update("bra_1", statement_descriptor="ACME INC")
    brands = client.brands.list()
    upload = client.brands.update_images("bra_1")

    assert updated.statement_descriptor == "ACME INC"
    assert [brand.verification_status for brand in brands.items] == [
        BrandVerificationStatus.SUCCESS,
        BrandVerificationStatus.HOLD,
    ]
    assert upload.url == "https://upload.test/img_2"


def test_supported_countries(client, router):
    router.json("GET", "checkout/supported_countries", ["US", "IN", "ZZ"])

    countries = client.misc.list_supported_countries()

    assert countries[:2] == [CountryCode("US"), CountryCode("IN")]
    assert not countries[2].is_known()
