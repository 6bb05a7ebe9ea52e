"""Shopify Storefront lookup and product image download.

Resolves a product id to its catalog image URL, preferring the featured
image and falling back to the first entry of the product's image list, then
downloads that image into memory with a size cap.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from photoshoot.config import Settings
from photoshoot.errors import NotFound, UpstreamError
from photoshoot.imaging import sniff_mime_type
from photoshoot.models import CatalogResponse, ProductImage

logger = logging.getLogger(__name__)

PRODUCT_IMAGE_QUERY = """
query ProductImage($id: ID!) {
  product(id: $id) {
    title
    featuredImage { url }
    images(first: 1) { edges { node { url } } }
  }
}
"""


def product_gid(product_id: str) -> str:
    return f"gid://shopify/Product/{product_id}"


def storefront_url(domain: str, api_version: str = "") -> str:
    if api_version:
        return f"https://{domain}/api/{api_version}/graphql.json"
    return f"https://{domain}/api/graphql.json"


def extract_image_url(body: str) -> Optional[str]:
    """Pull the product image URL out of a raw Storefront response body.

    A body that is not JSON, or JSON of an unexpected shape, is logged and
    treated as "no product data" rather than raised.
    """
    try:
        parsed = CatalogResponse.model_validate_json(body)
    except ValidationError as e:
        logger.warning(f"Unparseable catalog response ({e.error_count()} errors): {body[:500]!r}")
        return None

    if parsed.errors:
        logger.warning(f"Catalog returned GraphQL errors: {parsed.errors}")

    product = parsed.data.product if parsed.data else None
    if product is None:
        return None

    if product.featuredImage and product.featuredImage.url:
        return product.featuredImage.url

    edges = product.images.edges if product.images else None
    if edges:
        first = edges[0]
        if first and first.node and first.node.url:
            return first.node.url
    return None


async def resolve_product_image_url(client: httpx.AsyncClient, settings: Settings, product_id: str) -> str:
    gid = product_gid(product_id)
    logger.info(f"Looking up product image for {gid}")

    response = await client.post(
        storefront_url(settings.shopify_domain, settings.shopify_api_version),
        headers={
            "Content-Type": "application/json",
            "X-Shopify-Storefront-Access-Token": settings.shopify_storefront_token,
        },
        json={"query": PRODUCT_IMAGE_QUERY, "variables": {"id": gid}},
    )
    if not response.is_success:
        logger.error(f"Catalog error {response.status_code}: {response.text}")
        raise UpstreamError("catalog")

    image_url = extract_image_url(response.text)
    if not image_url:
        logger.info(f"No image found for {gid}")
        raise NotFound("product image")
    return image_url


async def fetch_product_image(client: httpx.AsyncClient, url: str, max_bytes: int) -> ProductImage:
    """Download the image at `url`, refusing bodies larger than `max_bytes`."""
    logger.info(f"Downloading product image from {url}")

    async with client.stream("GET", url, follow_redirects=True) as response:
        if not response.is_success:
            logger.error(f"Image host returned {response.status_code} for {url}")
            raise UpstreamError("image host")

        buffer = bytearray()
        async for chunk in response.aiter_bytes():
            buffer.extend(chunk)
            if len(buffer) > max_bytes:
                logger.error(f"Product image at {url} exceeds {max_bytes} bytes")
                raise UpstreamError("image host")
        content_type = response.headers.get("content-type", "").split(";")[0].strip().lower()

    data = bytes(buffer)
    mime_type = content_type if content_type.startswith("image/") else sniff_mime_type(data)
    logger.info(f"Downloaded {len(data)} bytes of product image ({mime_type})")
    return ProductImage(url=url, data=data, mime_type=mime_type)
