import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_SHOPIFY_API_VERSION = "2025-01"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-image"
DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Settings:
    shopify_domain: str = ""
    shopify_storefront_token: str = ""
    shopify_api_version: str = DEFAULT_SHOPIFY_API_VERSION
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    def missing(self) -> List[str]:
        """Names of required environment variables that are not set."""
        required = {
            "SHOPIFY_DOMAIN": self.shopify_domain,
            "SHOPIFY_STOREFRONT_TOKEN": self.shopify_storefront_token,
            "GEMINI_API_KEY": self.gemini_api_key,
        }
        return [name for name, value in required.items() if not value]


def _split_origins(raw: str) -> List[str]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]


def get_settings() -> Settings:
    """Read settings from the environment on every call."""
    return Settings(
        shopify_domain=os.getenv("SHOPIFY_DOMAIN", "").strip(),
        shopify_storefront_token=os.getenv("SHOPIFY_STOREFRONT_TOKEN", ""),
        # Blank means the unversioned Storefront endpoint
        shopify_api_version=os.getenv("SHOPIFY_API_VERSION", DEFAULT_SHOPIFY_API_VERSION).strip(),
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        max_image_bytes=int(os.getenv("MAX_IMAGE_BYTES", DEFAULT_MAX_IMAGE_BYTES)),
        http_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS)),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
    )
