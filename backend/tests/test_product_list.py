"""
Unit tests for the list synchronizer: initial load and ingest.
"""
import httpx
import pytest

from storefront.models.product import Product


class TestLoad:

    @pytest.mark.asyncio
    async def test_load_replaces_collection(self, dashboard, fake_products):
        await dashboard.products.load()
        assert [p.id for p in dashboard.products.products] == [p["id"] for p in fake_products]
        assert dashboard.products.loading is False

    @pytest.mark.asyncio
    async def test_loading_flag_while_in_flight(self, dashboard):
        flags = []
        dashboard.products.subscribe(lambda s: flags.append(s.loading))
        await dashboard.products.load()
        assert flags == [True, False]

    @pytest.mark.asyncio
    async def test_failed_load_is_swallowed(self, dashboard, mock_fakestore_api):
        mock_fakestore_api["list_products"].mock(return_value=httpx.Response(500))
        await dashboard.products.load()
        assert dashboard.products.products == []
        assert dashboard.products.loading is False

    @pytest.mark.asyncio
    async def test_failed_reload_keeps_stale_collection(self, dashboard, mock_fakestore_api, fake_products):
        await dashboard.products.load()
        mock_fakestore_api["list_products"].mock(side_effect=httpx.ConnectError("refused"))
        await dashboard.products.load()
        assert len(dashboard.products.products) == len(fake_products)


class TestIngest:

    @pytest.mark.asyncio
    async def test_ingest_prepends(self, dashboard):
        a, b, p = Product(id=1, title="A"), Product(id=2, title="B"), Product(id=3, title="P")
        dashboard.products.ingest(b)
        dashboard.products.ingest(a)
        assert dashboard.products.products == [a, b]

        dashboard.products.ingest(p)
        assert dashboard.products.products == [p, a, b]

    @pytest.mark.asyncio
    async def test_ingest_does_not_deduplicate(self, dashboard):
        p = Product(id=3, title="P")
        dashboard.products.ingest(p)
        dashboard.products.ingest(p)
        assert dashboard.products.products == [p, p]

    @pytest.mark.asyncio
    async def test_ingest_does_not_refetch(self, dashboard, mock_fakestore_api):
        await dashboard.products.load()
        dashboard.products.ingest(Product(id=30, title="New"))
        assert mock_fakestore_api["list_products"].call_count == 1
        assert dashboard.products.products[0].id == 30

    @pytest.mark.asyncio
    async def test_snapshots_are_not_mutated(self, dashboard):
        snapshot = dashboard.products.products
        dashboard.products.ingest(Product(id=1))
        assert snapshot == []
