"""Favorites, tasting notes and preferences for the wine market"""

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Iterator

from ..core.exceptions import WineNotFoundError
from ..models.profile import (
    Preferences,
    PreferencesUpdate,
    TastingNote,
    TastingNoteRequest,
    UserProfile,
)
from ..models.wine import Wine
from .locks import UserLocks
from .wines import parse_wine_id

if TYPE_CHECKING:
    from ..services.catalog import CatalogService

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ProfileDatabase:
    """
    In-memory user profiles keyed by user id.

    Profiles are created on first access, like carts. Wine references are
    checked against the catalog when they are added.
    """

    def __init__(self, catalog: "CatalogService"):
        self.catalog = catalog
        self.profiles: dict[str, UserProfile] = {}
        self._locks = UserLocks()

    @contextmanager
    def _locked(self, user_id: str) -> Iterator[UserProfile]:
        with self._locks.for_user(user_id):
            yield self._get_or_create(user_id)

    def get_profile(self, user_id: str) -> UserProfile:
        with self._locked(user_id) as profile:
            return profile.model_copy(deep=True)

    def favorite_wines(self, user_id: str) -> list[Wine]:
        """Favorites resolved against the current catalog; vanished wines are skipped"""
        favorites = self.get_profile(user_id).favorite_wines
        wines = [self.catalog.get_wine(wine_id) for wine_id in favorites]
        return [w for w in wines if w]

    def add_favorite(self, user_id: str, wine_id: Any) -> UserProfile:
        """Add a wine to the favorites. Adding it twice has no effect."""
        wine = self._require_wine(wine_id)

        with self._locked(user_id) as profile:
            if wine.id not in profile.favorite_wines:
                profile.favorite_wines.append(wine.id)
                profile.updated_at = _now()
                logger.info(f"User {user_id}: wine {wine.id} added to favorites")
            return profile.model_copy(deep=True)

    def remove_favorite(self, user_id: str, wine_id: Any) -> UserProfile:
        """Remove a wine from the favorites; unknown ids are ignored"""
        parsed = parse_wine_id(wine_id)

        with self._locked(user_id) as profile:
            if parsed in profile.favorite_wines:
                profile.favorite_wines.remove(parsed)
                profile.updated_at = _now()
            return profile.model_copy(deep=True)

    def add_tasting_note(self, user_id: str, request: TastingNoteRequest) -> TastingNote:
        wine = self._require_wine(request.wine_id)
        note = TastingNote(
            id=uuid.uuid4().hex,
            wine_id=wine.id,
            date=_now(),
            rating=request.rating,
            notes=request.notes,
            aromas=request.aromas,
            tasting_data=request.tasting_data,
        )

        with self._locked(user_id) as profile:
            profile.tasting_notes.append(note)
            profile.updated_at = note.date

        logger.info(f"User {user_id}: tasting note {note.id} for wine {wine.id}")
        return note.model_copy(deep=True)

    def update_preferences(self, user_id: str, update: PreferencesUpdate) -> UserProfile:
        """Merge the given preference fields over the current ones"""
        changes = update.model_dump(exclude_unset=True, exclude_none=True)

        with self._locked(user_id) as profile:
            current = profile.preferences.model_dump()
            taste = changes.pop("taste_preferences", {})
            current.update(changes)
            current["taste_preferences"].update(taste)

            profile.preferences = Preferences.model_validate(current)
            profile.updated_at = _now()
            return profile.model_copy(deep=True)

    def _require_wine(self, wine_id: Any) -> Wine:
        wine = self.catalog.get_wine(wine_id)
        if not wine:
            raise WineNotFoundError(wine_id)
        return wine

    def _get_or_create(self, user_id: str) -> UserProfile:
        profile = self.profiles.get(user_id)
        if profile is None:
            now = _now()
            profile = UserProfile(user_id=user_id, created_at=now, updated_at=now)
            self.profiles[user_id] = profile
            logger.debug(f"Created profile for user {user_id}")
        return profile
