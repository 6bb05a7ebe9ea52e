"""The photoshoot pipeline.

Runs the three collaborator calls strictly in order, each needing the
previous one's result:

    catalog lookup -> product image download -> image generation

Every stage either returns its value or raises a `PhotoshootError`; the first
error ends the request. Nothing is retried or cached.
"""

import binascii
import logging
from typing import Optional

import httpx

from photoshoot.catalog import fetch_product_image, resolve_product_image_url
from photoshoot.config import Settings
from photoshoot.errors import ConfigurationError, InvalidRequest
from photoshoot.generation import generate_image
from photoshoot.imaging import decode_base64_image, sniff_mime_type
from photoshoot.models import GeneratedImage, PhotoshootPayload
from photoshoot.prompts import build_prompt

logger = logging.getLogger(__name__)


def validate_payload(payload: PhotoshootPayload) -> bytes:
    """Check required fields and return the decoded pet image."""
    product_id = (payload.productId or "").strip()
    pet_image_base64 = (payload.petImageBase64 or "").strip()
    if not product_id or not pet_image_base64:
        raise InvalidRequest()

    try:
        pet_image = decode_base64_image(pet_image_base64)
    except (binascii.Error, ValueError) as e:
        logger.info(f"Pet image is not valid base64: {e}")
        raise InvalidRequest("Pet image is not valid base64") from e
    if not pet_image:
        raise InvalidRequest()
    return pet_image


async def generate_photoshoot(
    payload: PhotoshootPayload,
    settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None,
) -> GeneratedImage:
    pet_image = validate_payload(payload)
    product_id = payload.productId.strip()

    missing = settings.missing()
    if missing:
        logger.error(f"Missing configuration: {', '.join(missing)}")
        raise ConfigurationError()

    if http_client is None:
        async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
            return await _run(client, settings, product_id, pet_image, payload.instructions)
    return await _run(http_client, settings, product_id, pet_image, payload.instructions)


async def _run(
    client: httpx.AsyncClient,
    settings: Settings,
    product_id: str,
    pet_image: bytes,
    instructions: Optional[str],
) -> GeneratedImage:
    image_url = await resolve_product_image_url(client, settings, product_id)
    product_image = await fetch_product_image(client, image_url, settings.max_image_bytes)
    prompt = build_prompt(instructions)
    return await generate_image(settings, prompt, pet_image, sniff_mime_type(pet_image), product_image)
