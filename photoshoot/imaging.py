import base64
from io import BytesIO

from PIL import Image, UnidentifiedImageError

DEFAULT_MIME_TYPE = "image/jpeg"


def sniff_mime_type(data: bytes, default: str = DEFAULT_MIME_TYPE) -> str:
    """Best-effort MIME type of raw image bytes, falling back to `default`."""
    try:
        with Image.open(BytesIO(data)) as image:
            return Image.MIME.get(image.format, default)
    except (UnidentifiedImageError, OSError, ValueError):
        return default


def decode_base64_image(value: str) -> bytes:
    # Tolerate a browser data URL even though the form strips the prefix
    if value.startswith("data:") and "," in value:
        value = value.split(",", 1)[1]
    return base64.b64decode(value)


def encode_base64_image(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
