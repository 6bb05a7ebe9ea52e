from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


# --- Inbound / outbound bodies ---
class PhotoshootPayload(BaseModel):
    # Optional at the schema level so missing fields surface as our own 400
    productId: Optional[str] = Field(None, description="Shopify product id, numeric part of the product GID.")
    petImageBase64: Optional[str] = Field(None, description="Base64 encoded pet photo, without a data: prefix.")
    instructions: Optional[str] = Field(None, description="Optional free-text styling instructions.")

    @field_validator("productId", mode="before")
    @classmethod
    def _coerce_product_id(cls, value: Union[str, int, None]):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class PhotoshootResponse(BaseModel):
    imageBase64: str = Field(..., description="Raw base64 of the generated image, no MIME prefix.")


class ErrorResponse(BaseModel):
    error: str


# --- Shopify Storefront payload; every field optional so parsing never assumes shape ---
class ShopifyImage(BaseModel):
    url: Optional[str] = None


class ShopifyImageEdge(BaseModel):
    node: Optional[ShopifyImage] = None


class ShopifyImageConnection(BaseModel):
    edges: Optional[List[Optional[ShopifyImageEdge]]] = None


class ShopifyProduct(BaseModel):
    title: Optional[str] = None
    featuredImage: Optional[ShopifyImage] = None
    images: Optional[ShopifyImageConnection] = None


class ShopifyProductData(BaseModel):
    product: Optional[ShopifyProduct] = None


class CatalogResponse(BaseModel):
    data: Optional[ShopifyProductData] = None
    errors: Optional[List[Any]] = None


# --- Pipeline values ---
@dataclass
class ProductImage:
    url: str
    data: bytes
    mime_type: str


@dataclass
class GeneratedImage:
    image_base64: str
    mime_type: str = "image/png"
