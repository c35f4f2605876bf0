"""Page-number and cursor pagination."""

from __future__ import annotations

import httpx
import pytest

from dodopayments import (
    CursorPagePagination,
    DefaultPageNumberPagination,
    DodoPaymentsError,
    RequestOptions,
)
from dodopayments.core.domain.payments import PaymentListResponse
from tests import factories


def _page_number(request: httpx.Request) -> int:
    return int(request.url.params.get("page_number", "0"))


@pytest.fixture()
def three_payment_pages(router):
    pages = {
        0: [factories.payment_list_item("pay_1"), factories.payment_list_item("pay_2")],
        1: [factories.payment_list_item("pay_3")],
    }

    def respond(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": pages.get(_page_number(request), [])})

    router.add("GET", "payments", respond)
    return pages


def test_first_page_is_typed(client, three_payment_pages):
    page = client.payments.list(page_size=2)

    assert isinstance(page, DefaultPageNumberPagination)
    assert [item.payment_id for item in page.items] == ["pay_1", "pay_2"]
    assert all(isinstance(item, PaymentListResponse) for item in page.items)


def test_next_page_increments_page_number_and_keeps_filters(client, router, three_payment_pages):
    page = client.payments.list(page_size=2, status="succeeded")

    assert page.has_next_page()
    second = page.next_page()

    request = router.last
    assert request.url.params["page_number"] == "1"
    assert request.url.params["page_size"] == "2"
    assert request.url.params["status"] == "succeeded"
    assert [item.payment_id for item in second.items] == ["pay_3"]


def test_iteration_walks_every_page(client, router, three_payment_pages):
    ids = [payment.payment_id for payment in client.payments.list(page_size=2)]

    assert ids == ["pay_1", "pay_2", "pay_3"]
    # The empty third page ends the walk.
    assert [_page_number(request) for request in router.calls] == [0, 1, 2]


def test_empty_page_has_no_next_page(client, router):
    router.json("GET", "payments", {"items": []})

    page = client.payments.list()

    assert not page.has_next_page()
    with pytest.raises(DodoPaymentsError):
        page.next_page()
    assert list(page) == []


def test_iter_pages_yields_each_page(client, three_payment_pages):
    pages = list(client.payments.list(page_size=2).iter_pages())

    assert [len(page.items) for page in pages] == [2, 1, 0]


def test_request_options_are_reused_for_following_pages(client, router, three_payment_pages):
    page = client.payments.list(request_options=RequestOptions(extra_headers={"X-Trace": "t1"}))
    page.next_page()

    assert all(request.headers["X-Trace"] == "t1" for request in router.calls)


def test_cursor_pagination_follows_iterator(client, router):
    def respond(request: httpx.Request) -> httpx.Response:
        cursor = request.url.params.get("iterator")
        if cursor is None:
            return httpx.Response(
                200,
                json={"data": [factories.webhook_details("wh_1")], "iterator": "cur_2", "done": False},
            )
        assert cursor == "cur_2"
        return httpx.Response(200, json={"data": [factories.webhook_details("wh_2")], "done": True})

    router.add("GET", "webhooks", respond)

    page = client.webhooks.list(limit=1)

    assert isinstance(page, CursorPagePagination)
    assert page.items[0].id == "wh_1"
    assert [hook.id for hook in page] == ["wh_1", "wh_2"]
    assert router.calls[0].url.params["limit"] == "1"
    assert router.calls[1].url.params["limit"] == "1"


def test_cursor_page_without_iterator_is_last(client, router):
    router.json("GET", "webhooks", {"data": [factories.webhook_details()], "done": False})

    page = client.webhooks.list()

    assert not page.has_next_page()


def test_unbound_page_cannot_paginate():
    page = DefaultPageNumberPagination[PaymentListResponse].from_wire(
        {"items": [factories.payment_list_item()]}
    )

    with pytest.raises(DodoPaymentsError):
        page.next_page()
