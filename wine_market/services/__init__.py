# Services

from .catalog import CatalogService

__all__ = ["CatalogService"]
