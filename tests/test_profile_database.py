import pytest

from wine_market.core.exceptions import WineNotFoundError
from wine_market.models.profile import PreferencesUpdate, TastingNoteRequest

from .conftest import SAMPLE_WINES, write_catalog


def test_new_profile_has_default_preferences(profile_db):
    profile = profile_db.get_profile("u1")

    assert profile.user_id == "u1"
    assert profile.favorite_wines == []
    assert profile.tasting_notes == []
    assert profile.preferences.favorite_regions == []
    taste = profile.preferences.taste_preferences
    assert (taste.sweetness, taste.acidity, taste.tannin, taste.body) == (0.5, 0.5, 0.5, 0.5)


def test_add_favorite_is_idempotent(profile_db):
    profile_db.add_favorite("u1", 2)
    profile = profile_db.add_favorite("u1", "2")

    assert profile.favorite_wines == [2]


def test_add_unknown_favorite_raises_not_found(profile_db):
    with pytest.raises(WineNotFoundError):
        profile_db.add_favorite("u1", 42)

    assert profile_db.get_profile("u1").favorite_wines == []


@pytest.mark.parametrize("wine_id", [1, "1", 3, "abc"])
def test_remove_favorite_ignores_absent_wines(profile_db, wine_id):
    profile_db.add_favorite("u1", 0)
    profile_db.add_favorite("u1", 1)

    profile = profile_db.remove_favorite("u1", wine_id)

    expected = [0] if str(wine_id) == "1" else [0, 1]
    assert profile.favorite_wines == expected


def test_favorite_wines_resolve_to_catalog_records(profile_db, catalog_file, wine_catalog):
    profile_db.add_favorite("u1", 4)
    profile_db.add_favorite("u1", 0)

    assert [w.title for w in profile_db.favorite_wines("u1")] == [
        "Echo 2019 Sancerre Rouge",
        "Alpha 2016 Pomerol",
    ]

    write_catalog(catalog_file, SAMPLE_WINES[:2])
    wine_catalog.reload()

    assert [w.id for w in profile_db.favorite_wines("u1")] == [0]


def test_add_tasting_note(profile_db):
    note = profile_db.add_tasting_note(
        "u1",
        TastingNoteRequest(wine_id=2, rating=4.5, notes="Still closed", aromas=["cassis", "cedar"]),
    )

    assert note.wine_id == 2
    assert note.rating == 4.5
    assert note.aromas == ["cassis", "cedar"]
    assert note.tasting_data == {}
    assert note.id

    profile = profile_db.get_profile("u1")
    assert [n.id for n in profile.tasting_notes] == [note.id]
    assert profile.updated_at == note.date


def test_tasting_note_ids_are_unique(profile_db):
    first = profile_db.add_tasting_note("u1", TastingNoteRequest(wine_id=0))
    second = profile_db.add_tasting_note("u1", TastingNoteRequest(wine_id=0))

    assert first.id != second.id


def test_tasting_note_for_unknown_wine_is_rejected(profile_db):
    with pytest.raises(WineNotFoundError):
        profile_db.add_tasting_note("u1", TastingNoteRequest(wine_id=99))

    assert profile_db.get_profile("u1").tasting_notes == []


def test_update_preferences_merges_over_current(profile_db):
    profile_db.update_preferences(
        "u1",
        PreferencesUpdate(favorite_regions=["Bordeaux"], taste_preferences={"tannin": 0.9}),
    )
    profile = profile_db.update_preferences(
        "u1",
        PreferencesUpdate(favorite_varieties=["Merlot"], taste_preferences={"body": 0.2}),
    )

    prefs = profile.preferences
    assert prefs.favorite_regions == ["Bordeaux"]
    assert prefs.favorite_varieties == ["Merlot"]
    assert prefs.taste_preferences.tannin == 0.9
    assert prefs.taste_preferences.body == 0.2
    assert prefs.taste_preferences.sweetness == 0.5


def test_profiles_are_per_user_and_returned_as_copies(profile_db):
    profile = profile_db.add_favorite("u1", 0)
    profile.favorite_wines.append(3)

    assert profile_db.get_profile("u1").favorite_wines == [0]
    assert profile_db.get_profile("u2").favorite_wines == []
