"""Products, their images and short links."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dodopayments.adapters.resources._base import SyncAPIResource, build_params, path_param
from dodopayments.core.domain.products import (
    ImageUpdateParams,
    ImageUpdateResponse,
    Product,
    ProductCreateParams,
    ProductListParams,
    ProductListResponse,
    ProductUpdateFilesParams,
    ProductUpdateFilesResponse,
    ProductUpdateParams,
    ShortLinkCreateParams,
    ShortLinkListParams,
    ShortLinkListResponse,
    ShortLinkNewResponse,
)
from dodopayments.core.interfaces.contracts import (
    ProductImagesContract,
    ProductsContract,
    ShortLinksContract,
)
from dodopayments.core.interfaces.requester import Requester
from dodopayments.core.pagination import DefaultPageNumberPagination
from dodopayments.core.request_options import RequestOptions


def _product_path(id: str, suffix: str = "") -> str:
    return f"products/{path_param('id', id)}{suffix}"


class ProductImagesResource(SyncAPIResource, ProductImagesContract):
    def update(
        self,
        id: str,
        params: ImageUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> ImageUpdateResponse:
        """Reserve an upload URL for the product image.

        `force_update` replaces an existing image and is sent as a query parameter.
        """

        query = build_params(ImageUpdateParams, params, fields)
        return self._put(
            _product_path(id, "/images"),
            query=query,
            cast_to=ImageUpdateResponse,
            options=request_options,
        )


class ShortLinksResource(SyncAPIResource, ShortLinksContract):
    def create(
        self,
        id: str,
        params: ShortLinkCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> ShortLinkNewResponse:
        body = build_params(ShortLinkCreateParams, params, fields)
        return self._post(
            _product_path(id, "/short_links"),
            body=body,
            cast_to=ShortLinkNewResponse,
            options=request_options,
        )

    def list(
        self,
        params: ShortLinkListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[ShortLinkListResponse]:
        query = build_params(ShortLinkListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[ShortLinkListResponse],
            "products/short_links",
            query=query,
            options=request_options,
        )


class ProductsResource(SyncAPIResource, ProductsContract):
    def __init__(self, requester: Requester) -> None:
        super().__init__(requester)
        self.images = ProductImagesResource(requester)
        self.short_links = ShortLinksResource(requester)

    def create(
        self,
        params: ProductCreateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> Product:
        body = build_params(ProductCreateParams, params, fields)
        return self._post("products", body=body, cast_to=Product, options=request_options)

    def retrieve(
        self,
        id: str,
        /,
        *,
        request_options: RequestOptions | None = None,
    ) -> Product:
        return self._get(_product_path(id), cast_to=Product, options=request_options)

    def update(
        self,
        id: str,
        params: ProductUpdateParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> None:
        body = build_params(ProductUpdateParams, params, fields)
        return self._patch(_product_path(id), body=body, cast_to=None, options=request_options)

    def list(
        self,
        params: ProductListParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **filters: Any,
    ) -> DefaultPageNumberPagination[ProductListResponse]:
        query = build_params(ProductListParams, params, filters)
        return self._get_page(
            DefaultPageNumberPagination[ProductListResponse],
            "products",
            query=query,
            options=request_options,
        )

    def archive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None:
        return self._delete(_product_path(id), options=request_options)

    def unarchive(self, id: str, /, *, request_options: RequestOptions | None = None) -> None:
        return self._post(_product_path(id, "/unarchive"), cast_to=None, options=request_options)

    def update_files(
        self,
        id: str,
        params: ProductUpdateFilesParams | Mapping[str, Any] | None = None,
        /,
        *,
        request_options: RequestOptions | None = None,
        **fields: Any,
    ) -> ProductUpdateFilesResponse:
        """Register a downloadable file; upload the bytes to the returned URL."""

        body = build_params(ProductUpdateFilesParams, params, fields)
        return self._put(
            _product_path(id, "/files"),
            body=body,
            cast_to=ProductUpdateFilesResponse,
            options=request_options,
        )
