"""Products, product images, files and short links."""

from __future__ import annotations

import httpx

from dodopayments.core.domain.products import OneTimePrice, RecurringPrice
from tests import factories


def test_create_serializes_price_type(client, router):
    router.json("POST", "products", factories.product())
    price = OneTimePrice(currency="USD", discount=0, price=2500, purchasing_power_parity=False)

    product = client.products.create(name="Pro plan", price=price, tax_category="saas")

    assert isinstance(product.price, OneTimePrice)
    assert router.last_json() == {
        "name": "Pro plan",
        "price": {
            "type": "one_time_price",
            "currency": "USD",
            "discount": 0,
            "price": 2500,
            "purchasing_power_parity": False,
        },
        "tax_category": "saas",
    }


def test_retrieve_recurring_product(client, router):
    recurring = {
        "type": "recurring_price",
        "currency": "EUR",
        "discount": 0,
        "payment_frequency_count": 1,
        "payment_frequency_interval": "Month",
        "price": 900,
        "purchasing_power_parity": False,
        "subscription_period_count": 1,
        "subscription_period_interval": "Year",
    }
    router.json("GET", "products/pdt_1", factories.product(is_recurring=True, price=recurring))

    product = client.products.retrieve("pdt_1")

    assert isinstance(product.price, RecurringPrice)
    assert product.price.payment_frequency_interval.value == "Month"


def test_update_returns_nothing(client, router):
    router.add("PATCH", "products/pdt_1", httpx.Response(200))

    assert client.products.update("pdt_1", name="Pro plan v2", image_id=None) is None
    assert router.last_json() == {"name": "Pro plan v2", "image_id": None}


def test_list_sends_boolean_filters(client, router):
    router.json("GET", "products", {"items": [factories.product_list_item()]})

    page = client.products.list(archived=False, recurring=True)

    assert page.items[0].price == 2500
    assert router.last.url.params["archived"] == "false"
    assert router.last.url.params["recurring"] == "true"


def test_archive_and_unarchive(client, router):
    router.add("DELETE", "products/pdt_1", httpx.Response(200))
    router.add("POST", "products/pdt_1/unarchive", httpx.Response(200))

    client.products.archive("pdt_1")
    client.products.unarchive("pdt_1")

    assert [request.method for request in router.calls] == ["DELETE", "POST"]


def test_update_files(client, router):
    router.json("PUT", "products/pdt_1/files", {"file_id": "fil_1", "url": "https://upload.test/fil_1"})

    upload = client.products.update_files("pdt_1", file_name="guide.pdf")

    assert upload.file_id == "fil_1"
    assert router.last_json() == {"file_name": "guide.pdf"}


def test_image_upload_url(client, router):
    router.json("PUT", "products/pdt_1/images", {"url": "https://upload.test/img", "image_id": "img_1"})

    image = client.products.images.update("pdt_1", force_update=True)

    assert image.image_id == "img_1"
    assert router.last.url.params["force_update"] == "true"


def test_short_links(client, router):
    router.json(
        "POST",
        "products/pdt_1/short_links",
        {"full_url": "https://checkout.test/buy/pdt_1", "short_url": "https://dodo.test/spring"},
    )
    router.json(
        "GET",
        "products/short_links",
        {
            "items": [
                {
                    "created_at": factories.TS,
                    "full_url": "https://checkout.test/buy/pdt_1",
                    "product_id": "pdt_1",
                    "short_url": "https://dodo.test/spring",
                }
            ]
        },
    )

    link = client.products.short_links.create("pdt_1", slug="spring")
    page = client.products.short_links.list(product_id="pdt_1")

    assert link.short_url == "https://dodo.test/spring"
    assert page.items[0].product_id == "pdt_1"
    assert router.calls[0].method == "POST"
    assert router.last.url.params["product_id"] == "pdt_1"
