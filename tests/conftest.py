import base64
import json

import pytest

from photoshoot.config import Settings
from tests.helpers import SHOP_DOMAIN, image_bytes


@pytest.fixture
def settings():
    return Settings(
        shopify_domain=SHOP_DOMAIN,
        shopify_storefront_token="storefront-token",
        shopify_api_version="2025-01",
        gemini_api_key="gemini-key",
        gemini_model="gemini-2.5-flash-image",
        max_image_bytes=1024 * 1024,
        http_timeout_seconds=5.0,
    )


@pytest.fixture
def pet_png():
    return image_bytes("PNG", "white")


@pytest.fixture
def pet_image_base64(pet_png):
    return base64.b64encode(pet_png).decode("ascii")


@pytest.fixture
def graphql_variables():
    """Reads the variables of the last Storefront query a transport saw."""
    def read(transport):
        graphql = [r for r in transport.requests if r.url.host == SHOP_DOMAIN][-1]
        return json.loads(graphql.content)["variables"]

    return read
