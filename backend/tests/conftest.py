"""
Shared fixtures for the test suite.

Key design decisions:
- Uses respx to mock all Fake Store API calls (no real HTTP).
- POST /products echoes the body back with a fresh id, like the real demo API.
- Every test gets its own FakeStoreClient / Dashboard.
"""
import json
from pathlib import Path

import pytest
import pytest_asyncio
import respx
import httpx

# Ensure env is loaded before anything else
from dotenv import load_dotenv

backend_dir = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=backend_dir / ".env", override=True)

from storefront.services.dashboard import Dashboard
from storefront.services.fakestore import FakeStoreClient

BASE_URL = "https://fakestoreapi.com"
CREATED_ID = 21

# ── Fake product catalog ──

FAKE_PRODUCTS = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 109.95,
        "description": "Your perfect pack for everyday use.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
        "rating": {"rate": 3.9, "count": 120},
    },
    {
        "id": 2,
        "title": "Mens Casual T-Shirt",
        "price": 22.3,
        "description": "Slim-fitting style in a durable fabric.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
        "rating": {"rate": 4.1, "count": 259},
    },
    {
        "id": 9,
        "title": "WD 2TB External Hard Drive",
        "price": 64.0,
        "description": "USB 3.0 portable storage.",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
        "rating": {"rate": 3.3, "count": 203},
    },
    {
        "id": 7,
        "title": "White Gold Plated Princess Ring",
        "price": 9.99,
        "description": "Classic ring for special occasions.",
        "category": "jewelery",
        "image": "",
    },
]

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


class FakeUpload:
    """Stands in for fastapi.UploadFile."""

    def __init__(self, content: bytes = PNG_BYTES, filename: str = "photo.png", content_type: str = "image/png"):
        self.content = content
        self.filename = filename
        self.content_type = content_type

    async def read(self) -> bytes:
        return self.content


class BrokenUpload(FakeUpload):
    async def read(self) -> bytes:
        raise OSError("disk went away")


def _echo_create(request: httpx.Request) -> httpx.Response:
    body = json.loads(request.content)
    return httpx.Response(201, json={"id": CREATED_ID, **body})


# ── respx mock setup ──


@pytest.fixture(autouse=True)
def mock_fakestore_api():
    """Intercept all HTTP calls to fakestoreapi.com and return canned data."""
    with respx.mock(assert_all_called=False) as router:
        # GET /products
        router.get(f"{BASE_URL}/products", name="list_products").mock(
            return_value=httpx.Response(200, json=FAKE_PRODUCTS)
        )

        # POST /products
        router.post(f"{BASE_URL}/products", name="create_product").mock(
            side_effect=_echo_create
        )

        yield router


# ── Clients ──


@pytest_asyncio.fixture
async def fakestore_client():
    client = FakeStoreClient(base_url=BASE_URL)
    yield client
    await client.close()


@pytest_asyncio.fixture
async def dashboard(fakestore_client):
    return Dashboard(fakestore_client)


@pytest.fixture
def valid_draft_fields():
    return {
        "title": "Handmade Mug",
        "price": "19.5",
        "description": "Stoneware, dishwasher safe.",
        "category": "kitchen",
    }


@pytest.fixture
def fake_products():
    return FAKE_PRODUCTS


@pytest.fixture
def created_id():
    return CREATED_ID


@pytest.fixture
def upload():
    return FakeUpload()


@pytest.fixture
def broken_upload():
    return BrokenUpload()
