"""
Fake Store API client.
"""
import os
import logging
import httpx
from typing import List
from storefront.errors import FakeStoreError
from storefront.models.product import Product, ProductCreate

log = logging.getLogger("fakestore")


class FakeStoreClient:
    """Async HTTP client for the Fake Store API. One attempt per call, no retries."""

    def __init__(self, base_url: str = None, timeout: float = None):
        self.base_url = base_url or os.getenv("FAKESTORE_API_URL", "https://fakestoreapi.com")
        if timeout is None:
            timeout = float(os.getenv("FAKESTORE_TIMEOUT", "10.0"))
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            follow_redirects=True
        )

    async def close(self):
        await self.client.aclose()

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, endpoint, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise FakeStoreError(
                f"API error: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise FakeStoreError(f"Request error: {str(e)}") from e

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise FakeStoreError(f"Invalid JSON from API: {e}", status_code=response.status_code) from e

    async def get_all_products(self) -> List[Product]:
        response = await self._request("GET", "/products")
        try:
            return [Product.model_validate(p) for p in self._json(response)]
        except (TypeError, ValueError) as e:
            raise FakeStoreError(f"Unexpected products payload: {e}") from e

    async def create_product(self, payload: ProductCreate) -> dict:
        """POST a new product and return the raw JSON the service echoes back."""
        response = await self._request(
            "POST",
            "/products",
            json=payload.model_dump(),
            headers={"Content-Type": "application/json"},
        )
        body = self._json(response)
        if not isinstance(body, dict) or "id" not in body:
            raise FakeStoreError(f"Unexpected create response: {body!r}", status_code=response.status_code)
        log.info(f"Created product #{body['id']} '{payload.title}'")
        return body
