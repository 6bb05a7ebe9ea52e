from io import BytesIO
from types import SimpleNamespace

import httpx
from PIL import Image

SHOP_DOMAIN = "test-shop.myshopify.com"
PRODUCT_IMAGE_URL = "https://cdn/x.jpg"


def image_bytes(fmt: str = "PNG", color: str = "red") -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color).save(buffer, format=fmt)
    return buffer.getvalue()


def catalog_body(featured_url=None, edge_urls=()) -> dict:
    return {
        "data": {
            "product": {
                "title": "Bandana",
                "featuredImage": {"url": featured_url} if featured_url else None,
                "images": {"edges": [{"node": {"url": url}} for url in edge_urls]},
            }
        }
    }


def gemini_response(*candidates_parts, block_reason=None):
    """Build an SDK-shaped response; each argument is one candidate's list of parts."""
    candidates = [SimpleNamespace(content=SimpleNamespace(parts=list(parts))) for parts in candidates_parts]
    return SimpleNamespace(candidates=candidates, prompt_feedback=SimpleNamespace(block_reason=block_reason))


def text_part(text: str):
    return SimpleNamespace(text=text, inline_data=None)


def image_part(data: bytes, mime_type: str = "image/png"):
    return SimpleNamespace(text="", inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def make_transport(catalog=None, catalog_status=200, image=None, image_status=200, image_type="image/jpeg"):
    """MockTransport answering the Storefront endpoint and the product image URL."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.host == SHOP_DOMAIN:
            if isinstance(catalog, str):
                return httpx.Response(catalog_status, text=catalog)
            return httpx.Response(catalog_status, json=catalog if catalog is not None else {})
        return httpx.Response(
            image_status,
            content=image if image is not None else image_bytes("JPEG"),
            headers={"content-type": image_type},
        )

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport
