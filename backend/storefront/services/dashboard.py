"""
One dashboard session: a form controller wired to a product list.
"""
import logging
from typing import Optional

from storefront.services.fakestore import FakeStoreClient
from storefront.services.product_form import FormController
from storefront.services.product_list import ListSynchronizer

log = logging.getLogger("dashboard")


class Dashboard:
    """Owns the shared Fake Store client and both components."""

    def __init__(self, client: Optional[FakeStoreClient] = None):
        self.client = client or FakeStoreClient()
        self.products = ListSynchronizer(self.client)
        self.form = FormController(self.client, on_created=self.products.ingest)

    async def start(self):
        """Initial load; meant to run as a background task so views can show it loading."""
        log.info(f"Loading products from {self.client.base_url}")
        await self.products.load()

    async def close(self):
        await self.client.close()
