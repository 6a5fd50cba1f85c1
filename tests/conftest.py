"""Shared fixtures: a small catalog on disk and the stores built on top of it."""
import json
import random

import pytest
from fastapi.testclient import TestClient

from wine_market.core.config import Settings
from wine_market.database import CartDatabase, OrderDatabase, ProfileDatabase, WineCatalog
from wine_market.main import create_app
from wine_market.services import CatalogService

SAMPLE_WINES = [
    {
        "title": "Alpha 2016 Pomerol",
        "price": 10,
        "points": 91,
        "variety": "Merlot",
        "type": "red",
        "country": "France",
        "region_1": "Pomerol",
        "region_2": "Bordeaux",
        "winery": "Alpha Estate",
        "description": "Plum and cocoa.",
    },
    {
        "title": "Beta 2018 Meursault",
        "price": 20,
        "points": 88,
        "variety": "Chardonnay",
        "type": "white",
        "country": "France",
        "region_1": "Meursault",
        "region_2": "Burgundy",
        "winery": "Beta",
        "description": "Buttery apple.",
        "thumbnail": "https://img.example/beta.jpg",
    },
    {
        "title": "Gamma 2015 Pauillac",
        "price": 35,
        "points": 93,
        "variety": "Cabernet Sauvignon",
        "type": "red",
        "country": "France",
        "region_1": "Pauillac",
        "region_2": "Bordeaux",
        "winery": "Gamma",
        "description": "Cassis and cedar.",
    },
    {
        "title": "Delta 2017 Saint-Émilion",
        "price": None,
        "points": 90,
        "variety": "Merlot",
        "type": "red",
        "region_1": "Saint-Émilion",
        "region_2": "Bordeaux",
        "winery": "Delta",
        "description": "Soft and round.",
    },
    {
        "title": "Echo 2019 Sancerre Rouge",
        "price": 15,
        "points": 85,
        "variety": "Pinot Noir",
        "type": "red",
        "region_1": "Sancerre",
        "region_2": None,
        "winery": "Echo Merlot Cellars",
        "description": "Bright cherry.",
        "country": "France",
        "province": "Loire Valley",
    },
]


def write_catalog(path, wines):
    path.write_text(json.dumps(wines), encoding="utf-8")
    return path


@pytest.fixture
def catalog_file(tmp_path):
    return write_catalog(tmp_path / "wines.json", SAMPLE_WINES)


@pytest.fixture
def settings(catalog_file):
    return Settings(catalog_path=str(catalog_file))


@pytest.fixture
def wine_catalog(catalog_file):
    return WineCatalog(str(catalog_file))


@pytest.fixture
def catalog_service(wine_catalog):
    return CatalogService(wine_catalog, rng=random.Random(7))


@pytest.fixture
def cart_db(catalog_service):
    return CartDatabase(catalog_service, tax_rate=0.1, shipping_fee=10.0)


@pytest.fixture
def order_db(cart_db):
    return OrderDatabase(cart_db)


@pytest.fixture
def profile_db(catalog_service):
    return ProfileDatabase(catalog_service)


@pytest.fixture
def shipping_address():
    return {
        "name": "Camille Martin",
        "street": "1 Quai des Chartrons",
        "city": "Bordeaux",
        "postalCode": "33000",
    }


@pytest.fixture
def test_client(settings):
    """Client around a fresh app; the context manager runs the lifespan."""
    with TestClient(create_app(settings)) as client:
        yield client
