import logging
import os

import uvicorn
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from photoshoot import __version__
from photoshoot.config import get_settings
from photoshoot.errors import PhotoshootError
from photoshoot.logging_setup import setup_logging
from photoshoot.models import ErrorResponse, PhotoshootPayload, PhotoshootResponse
from photoshoot.orchestrator import generate_photoshoot

# --- 1. Configuration ---
setup_logging()
logger = logging.getLogger(__name__)
settings = get_settings()

if settings.missing():
    logger.warning(f"Not configured: {', '.join(settings.missing())}. Photoshoot requests will fail until set.")

# --- 2. FastAPI Application Setup ---
app = FastAPI(
    title="AI Pet Photoshoot API",
    description="Puts a customer's pet into a store product photo using the Shopify catalog and Gemini.",
    version=__version__,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request, exc: RequestValidationError):
    # Error entries carry the offending input, which may be a whole image
    problems = [{"loc": error.get("loc"), "type": error.get("type")} for error in exc.errors()]
    logger.info(f"Rejected request body: {problems}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


# --- 3. API Endpoints ---
@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post(
    "/generate-photoshoot",
    response_model=PhotoshootResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing productId or pet image."},
        404: {"model": ErrorResponse, "description": "The product has no catalog image."},
        500: {"model": ErrorResponse, "description": "Catalog, image host or image model failure."},
    },
)
async def generate_photoshoot_endpoint(payload: PhotoshootPayload):
    logger.info(f"Received photoshoot request for product: {payload.productId}")
    try:
        # Settings are re-read so a rotated key applies without a restart
        image = await generate_photoshoot(payload, get_settings())
    except PhotoshootError as e:
        logger.warning(f"Photoshoot failed with {e.status_code}: {type(e).__name__}")
        return error_response(e.status_code, e.message)
    except Exception:
        logger.exception("Unhandled error during photoshoot generation")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")

    logger.info("Photoshoot generation successful.")
    return PhotoshootResponse(imageBase64=image.image_base64)


# --- 4. Run the Application ---
def main():
    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))


if __name__ == "__main__":
    main()
