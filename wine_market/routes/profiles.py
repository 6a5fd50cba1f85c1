"""User profile API routes: favorites, tasting notes and preferences"""

from fastapi import APIRouter, Depends

from ..database.profiles import ProfileDatabase
from ..models.profile import PreferencesUpdate, TastingNote, TastingNoteRequest, UserProfile
from ..models.wine import Wine
from .deps import get_profile_db

router = APIRouter(prefix="/api/users", tags=["Profiles"])


@router.get("/{user_id}/profile", response_model=UserProfile)
async def get_profile(user_id: str, profile_db: ProfileDatabase = Depends(get_profile_db)):
    """Get the user's favorites, tasting notes and preferences"""
    return profile_db.get_profile(user_id)


@router.get("/{user_id}/favorites", response_model=list[Wine])
async def list_favorites(user_id: str, profile_db: ProfileDatabase = Depends(get_profile_db)):
    """Favorite wines as full catalog records"""
    return profile_db.favorite_wines(user_id)


@router.post("/{user_id}/favorites/{wine_id}", response_model=UserProfile)
async def add_favorite(
    user_id: str,
    wine_id: str,
    profile_db: ProfileDatabase = Depends(get_profile_db),
):
    return profile_db.add_favorite(user_id, wine_id)


@router.delete("/{user_id}/favorites/{wine_id}", response_model=UserProfile)
async def remove_favorite(
    user_id: str,
    wine_id: str,
    profile_db: ProfileDatabase = Depends(get_profile_db),
):
    return profile_db.remove_favorite(user_id, wine_id)


@router.post("/{user_id}/tasting-notes", response_model=TastingNote, status_code=201)
async def add_tasting_note(
    user_id: str,
    request: TastingNoteRequest,
    profile_db: ProfileDatabase = Depends(get_profile_db),
):
    """Record a tasting note for a catalog wine"""
    return profile_db.add_tasting_note(user_id, request)


@router.put("/{user_id}/preferences", response_model=UserProfile)
async def update_preferences(
    user_id: str,
    request: PreferencesUpdate,
    profile_db: ProfileDatabase = Depends(get_profile_db),
):
    """Update some or all preferences"""
    return profile_db.update_preferences(user_id, request)
