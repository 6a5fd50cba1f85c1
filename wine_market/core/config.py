"""Wine Market Configuration"""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_CATALOG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "data", "wines.json"
)


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Wine Market"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Catalog
    catalog_path: str = DEFAULT_CATALOG_PATH
    default_page_limit: int = 21
    recommendation_min_points: float = 90
    recommendation_count: int = 5
    similar_wines_count: int = 4

    # Cart pricing
    tax_rate: float = 0.1
    shipping_fee: float = 10.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def catalog_exists(self) -> bool:
        """Check if the catalog file is present"""
        return os.path.exists(self.catalog_path)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
