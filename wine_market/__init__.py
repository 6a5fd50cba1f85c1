"""Wine marketplace API: catalog queries, shopping carts and orders."""

__version__ = "1.0.0"
