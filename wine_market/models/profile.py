"""User profile models: favorites, tasting notes and taste preferences"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from .base import CamelModel


class TastePreferences(CamelModel):
    """Palate sliders, each between 0 and 1"""
    sweetness: float = Field(default=0.5, ge=0, le=1)
    acidity: float = Field(default=0.5, ge=0, le=1)
    tannin: float = Field(default=0.5, ge=0, le=1)
    body: float = Field(default=0.5, ge=0, le=1)


class Preferences(CamelModel):
    favorite_regions: list[str] = []
    favorite_varieties: list[str] = []
    taste_preferences: TastePreferences = Field(default_factory=TastePreferences)


class TastingNote(CamelModel):
    """A user's note on one wine"""
    id: str
    wine_id: int
    date: datetime
    rating: Optional[float] = None
    notes: Optional[str] = None
    aromas: list[str] = []
    tasting_data: dict[str, Any] = {}


class UserProfile(CamelModel):
    """Everything kept about a user besides their cart and orders"""
    user_id: str
    favorite_wines: list[int] = []
    tasting_notes: list[TastingNote] = []
    preferences: Preferences = Field(default_factory=Preferences)
    created_at: datetime
    updated_at: datetime


class TastingNoteRequest(CamelModel):
    """Request to record a tasting note"""
    wine_id: int
    rating: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None
    aromas: list[str] = []
    tasting_data: dict[str, Any] = {}


class TastePreferencesUpdate(CamelModel):
    sweetness: Optional[float] = Field(default=None, ge=0, le=1)
    acidity: Optional[float] = Field(default=None, ge=0, le=1)
    tannin: Optional[float] = Field(default=None, ge=0, le=1)
    body: Optional[float] = Field(default=None, ge=0, le=1)


class PreferencesUpdate(CamelModel):
    """Partial preferences; fields left out keep their current value"""
    favorite_regions: Optional[list[str]] = None
    favorite_varieties: Optional[list[str]] = None
    taste_preferences: Optional[TastePreferencesUpdate] = None
