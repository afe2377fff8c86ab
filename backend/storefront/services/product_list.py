"""
Product collection shown by the dashboard.

Loaded once from the Fake Store API when the view starts, then grown in
place by `ingest` after each successful create. Never re-fetched.
"""
import logging
from typing import List

from storefront.errors import FakeStoreError, LoadError
from storefront.models.product import Product
from storefront.services.fakestore import FakeStoreClient
from storefront.services.observable import Observable

log = logging.getLogger("products")


class ListSynchronizer(Observable):
    """Sole writer of the product collection."""

    def __init__(self, client: FakeStoreClient):
        super().__init__()
        self._client = client
        self._products: List[Product] = []
        self.loading = False

    @property
    def products(self) -> List[Product]:
        """Newest first. A copy, so callers cannot mutate the collection."""
        return list(self._products)

    async def _fetch(self) -> List[Product]:
        try:
            return await self._client.get_all_products()
        except FakeStoreError as e:
            raise LoadError(f"Failed to load products: {e}") from e

    async def load(self) -> None:
        """Replace the collection with the remote one. Failures are logged, never raised."""
        self.loading = True
        self._notify()
        try:
            self._products = await self._fetch()
            log.info(f"Loaded {len(self._products)} products")
        except LoadError as e:
            log.error(f"{e}")
        finally:
            self.loading = False
            self._notify()

    def ingest(self, product: Product) -> None:
        """Prepend a freshly created product. No de-duplication, no re-sort."""
        self._products = [product, *self._products]
        log.info(f"Ingested product #{product.id} '{product.title}' ({len(self._products)} total)")
        self._notify()
