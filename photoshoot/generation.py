import logging
from typing import Any, List, Optional, Tuple

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from photoshoot.config import Settings
from photoshoot.errors import NoImageReturned, UpstreamError
from photoshoot.imaging import encode_base64_image
from photoshoot.models import GeneratedImage, ProductImage

logger = logging.getLogger(__name__)

# One attempt per request, no SDK retry
NO_RETRY = {"retry": None}

_configured_api_key = None


def configure_client(api_key: str) -> None:
    """Configure the SDK once per API key; it holds a process-wide client."""
    global _configured_api_key
    if api_key != _configured_api_key:
        genai.configure(api_key=api_key)
        _configured_api_key = api_key


def build_contents(prompt: str, pet_image: bytes, pet_mime_type: str, product_image: ProductImage) -> List[dict]:
    """One user turn: prompt, pet (image 1), product (image 2)."""
    return [
        {
            "role": "user",
            "parts": [
                {"text": prompt},
                {"inline_data": {"mime_type": pet_mime_type, "data": pet_image}},
                {"inline_data": {"mime_type": product_image.mime_type, "data": product_image.data}},
            ],
        }
    ]


def find_inline_image(response: Any) -> Optional[Tuple[Any, str]]:
    """First part carrying inline image data across all candidates, or None.

    Every lookup is guarded so an empty or oddly shaped response reads as
    "no image" instead of raising.
    """
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            inline_data = getattr(part, "inline_data", None)
            data = getattr(inline_data, "data", None) if inline_data else None
            if data:
                return data, getattr(inline_data, "mime_type", None) or "image/png"
    return None


async def generate_image(
    settings: Settings,
    prompt: str,
    pet_image: bytes,
    pet_mime_type: str,
    product_image: ProductImage,
) -> GeneratedImage:
    configure_client(settings.gemini_api_key)
    model = genai.GenerativeModel(model_name=settings.gemini_model)
    contents = build_contents(prompt, pet_image, pet_mime_type, product_image)

    logger.info(f"Sending photoshoot request to {settings.gemini_model}")
    try:
        response = await model.generate_content_async(contents, request_options=NO_RETRY)
    except google_exceptions.GoogleAPIError as e:
        # Raw upstream detail stays in the server log
        logger.error(f"Gemini error: {e}")
        raise UpstreamError("generation") from e

    found = find_inline_image(response)
    if found is None:
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None) if feedback else None
        logger.warning(f"No image in Gemini response. Block reason: {block_reason or 'Unknown'}")
        raise NoImageReturned()

    data, mime_type = found
    image_base64 = data if isinstance(data, str) else encode_base64_image(data)
    logger.info(f"Gemini returned an image ({mime_type})")
    return GeneratedImage(image_base64=image_base64, mime_type=mime_type)
