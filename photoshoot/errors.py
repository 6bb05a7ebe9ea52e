"""Failure classes of the photoshoot pipeline.

Each error knows the HTTP status it maps to and the message that is safe to
show the browser. Upstream detail (raw bodies, SDK messages) is logged where
the error is raised and never stored here.
"""


class PhotoshootError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidRequest(PhotoshootError):
    status_code = 400
    message = "Missing productId or image"


class NotFound(PhotoshootError):
    status_code = 404

    def __init__(self, what: str):
        self.what = what
        super().__init__(f"Could not find {what}")


class UpstreamError(PhotoshootError):
    status_code = 500

    MESSAGES = {
        "catalog": "Catalog request failed",
        "image host": "Product image download failed",
        "generation": "Image generation failed",
    }

    def __init__(self, collaborator: str):
        self.collaborator = collaborator
        super().__init__(self.MESSAGES.get(collaborator, "Upstream request failed"))


class NoImageReturned(PhotoshootError):
    status_code = 500
    message = "No image returned from the image model"


class ConfigurationError(PhotoshootError):
    """Required settings are missing; the client only sees the generic error."""

    status_code = 500
    message = "Server error"
