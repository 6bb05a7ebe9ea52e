"""AI pet photoshoot: composites a customer's pet with a catalog product."""

__version__ = "1.0.0"
