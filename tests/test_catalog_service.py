import math
import random

import pytest

from wine_market.core.exceptions import ValidationError
from wine_market.database import WineCatalog
from wine_market.services import CatalogService

from .conftest import write_catalog


def titles(wines):
    return [w.title.split()[0] for w in wines]


class TestPaginate:

    def test_first_page(self, catalog_service):
        page = catalog_service.paginate(1, 2)

        assert titles(page.items) == ["Alpha", "Beta"]
        assert page.total == 5
        assert page.page == 1
        assert page.limit == 2
        assert page.total_pages == 3

    def test_last_partial_page(self, catalog_service):
        assert titles(catalog_service.paginate(3, 2).items) == ["Echo"]

    def test_page_past_the_end_is_empty(self, catalog_service):
        page = catalog_service.paginate(9, 2)

        assert page.items == []
        assert page.total == 5
        assert page.page == 9

    @pytest.mark.parametrize("page, limit", [(None, None), ("abc", "xyz"), (0, 0), (-2, -5)])
    def test_defaults_for_missing_or_bad_values(self, catalog_service, page, limit):
        result = catalog_service.paginate(page, limit)

        assert result.page == 1
        assert result.limit == 21
        assert len(result.items) == 5
        assert result.total_pages == 1

    @pytest.mark.parametrize("page, expected", [
        ("2.5", ["Gamma", "Delta"]),
        ("3abc", ["Echo"]),
        (" 2", ["Gamma", "Delta"]),
    ])
    def test_page_uses_leading_integer(self, catalog_service, page, expected):
        result = catalog_service.paginate(page, "2.9")

        assert result.limit == 2
        assert titles(result.items) == expected

    @pytest.mark.parametrize("page", [1, 2, 3, 4])
    @pytest.mark.parametrize("limit", [1, 2, 3, 5, 7])
    def test_page_size_matches_remaining_records(self, catalog_service, page, limit):
        result = catalog_service.paginate(page, limit)

        assert len(result.items) == max(0, min(5 - (page - 1) * limit, limit))
        assert result.total_pages == math.ceil(5 / limit)


class TestSearch:

    @pytest.mark.parametrize("query", ["", None, "   "])
    def test_empty_query_matches_nothing(self, catalog_service, query):
        assert catalog_service.search(query) == []

    def test_matches_title_case_insensitively(self, catalog_service):
        assert titles(catalog_service.search("PAUILLAC")) == ["Gamma"]

    def test_matches_description(self, catalog_service):
        assert titles(catalog_service.search("cherry")) == ["Echo"]

    def test_matches_winery_but_not_variety(self, catalog_service):
        # "Merlot" is the variety of Alpha and Delta; only Echo's winery names it
        assert titles(catalog_service.search("merlot")) == ["Echo"]

    def test_no_match(self, catalog_service):
        assert catalog_service.search("retsina") == []


class TestFilter:

    def test_no_criteria_returns_everything(self, catalog_service):
        assert len(catalog_service.filter()) == 5

    def test_blank_strings_are_ignored(self, catalog_service):
        assert len(catalog_service.filter(region="  ", variety="")) == 5

    def test_region_matches_either_region_field(self, catalog_service):
        assert titles(catalog_service.filter(region="pomerol")) == ["Alpha"]
        assert titles(catalog_service.filter(region="Bordeaux")) == ["Alpha", "Gamma", "Delta"]

    def test_all_criteria_must_hold(self, catalog_service):
        results = catalog_service.filter(region="Bordeaux", variety="Merlot")

        assert titles(results) == ["Alpha", "Delta"]

    def test_price_bounds_are_inclusive(self, catalog_service):
        results = catalog_service.filter(min_price=10, max_price=20)

        assert titles(results) == ["Alpha", "Beta", "Echo"]

    def test_wines_without_price_fail_price_bounds(self, catalog_service):
        assert "Delta" not in titles(catalog_service.filter(min_price=0))

    def test_combined_region_variety_and_price(self, catalog_service):
        results = catalog_service.filter(region="Bordeaux", variety="merlot", max_price=50)

        assert titles(results) == ["Alpha"]

    @pytest.mark.parametrize("bound", ["", "   "])
    def test_blank_price_bounds_are_ignored(self, catalog_service, bound):
        results = catalog_service.filter(region="Bordeaux", min_price=bound, max_price=bound)

        assert titles(results) == ["Alpha", "Gamma", "Delta"]

    @pytest.mark.parametrize("field", ["min_price", "max_price", "min_rating"])
    def test_non_numeric_bounds_are_rejected(self, catalog_service, field):
        with pytest.raises(ValidationError):
            catalog_service.filter(**{field: "cheap"})

    def test_type(self, catalog_service):
        assert titles(catalog_service.filter(wine_type="White")) == ["Beta"]

    def test_country_skips_wines_without_country(self, catalog_service):
        assert titles(catalog_service.filter(country="fra")) == ["Alpha", "Beta", "Gamma", "Echo"]

    def test_rating_is_a_minimum(self, catalog_service):
        assert titles(catalog_service.filter(min_rating=91)) == ["Alpha", "Gamma"]
        assert titles(catalog_service.filter(min_rating="90")) == ["Alpha", "Gamma", "Delta"]

    def test_type_country_and_rating_combine(self, catalog_service):
        results = catalog_service.filter(wine_type="red", country="France", min_rating=88)

        assert titles(results) == ["Alpha", "Gamma"]

    def test_unknown_region_logs_diagnostics(self, catalog_service, caplog):
        with caplog.at_level("INFO"):
            assert catalog_service.filter(region="Bordeaux Nord") == []

        assert "similar regions: bordeaux" in caplog.text


class TestRecommend:

    def test_only_top_rated_wines(self, catalog_service):
        picks = catalog_service.recommend("user-1")

        assert sorted(w.id for w in picks) == [0, 2, 3]

    def test_at_most_five(self, tmp_path):
        path = write_catalog(
            tmp_path / "many.json",
            [{"title": f"W{i}", "points": 90 + i % 5} for i in range(12)]
            + [{"title": "Low", "points": 80}],
        )
        service = CatalogService(WineCatalog(str(path)), rng=random.Random(1))

        picks = service.recommend("anyone")

        assert len(picks) == 5
        assert len({w.id for w in picks}) == 5
        assert all(w.points >= 90 for w in picks)

    def test_empty_catalog(self, tmp_path):
        service = CatalogService(WineCatalog(str(tmp_path / "none.json")))

        assert service.recommend("anyone") == []


class TestUniqueValues:

    def test_regions_sorted_and_deduplicated(self, catalog_service):
        assert catalog_service.unique_regions() == [
            "Bordeaux",
            "Burgundy",
            "Meursault",
            "Pauillac",
            "Pomerol",
            "Saint-Émilion",
            "Sancerre",
        ]

    def test_varieties_sorted_and_deduplicated(self, catalog_service):
        assert catalog_service.unique_varieties() == [
            "Cabernet Sauvignon",
            "Chardonnay",
            "Merlot",
            "Pinot Noir",
        ]


class TestWineDetails:

    def test_similar_wines_share_two_traits(self, catalog_service):
        details = catalog_service.get_wine_details(0)

        assert details.title == "Alpha 2016 Pomerol"
        # Gamma: same region_2 and points within 5; Delta: same variety and region_2
        assert [w.id for w in details.similar_wines] == [2, 3]

    def test_wine_is_not_similar_to_itself(self, catalog_service):
        details = catalog_service.get_wine_details(3)

        assert 3 not in [w.id for w in details.similar_wines]

    def test_unknown_wine(self, catalog_service):
        assert catalog_service.get_wine_details("nope") is None
