"""Pydantic models for API request/response.

Entry models use the dictionaryapi.dev field names (``partOfSpeech``) so a
front-end can consume the same shape it would get from the upstream API.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from domain.model.audio import first_playable_audio
from domain.model.entry import WordEntry

PlaybackStateName = Literal["stopped", "playing", "paused", "completed"]


class PhoneticModel(BaseModel):
    text: Optional[str] = None
    audio: Optional[str] = Field(None, description="Raw audio URL as stored")


class DefinitionModel(BaseModel):
    definition: str = ""
    example: Optional[str] = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class MeaningModel(BaseModel):
    partOfSpeech: str = ""
    definitions: list[DefinitionModel] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class WordEntryModel(BaseModel):
    """Response model for one dictionary entry."""
    word: str
    phonetic: Optional[str] = None
    phonetics: list[PhoneticModel] = Field(default_factory=list)
    origin: Optional[str] = None
    meanings: list[MeaningModel] = Field(default_factory=list)
    audio_url: Optional[str] = Field(None, description="First playable pronunciation URL")
    is_favorite: bool = False
    is_playing: bool = False

    @classmethod
    def from_entry(
        cls,
        entry: WordEntry,
        is_favorite: bool = False,
        is_playing: bool = False,
    ) -> 'WordEntryModel':
        return cls(
            **entry.to_dict(),
            audio_url=first_playable_audio(entry),
            is_favorite=is_favorite,
            is_playing=is_playing,
        )


class SearchResponse(BaseModel):
    """Response model for word search."""
    word: str = Field(..., description="Trimmed query")
    entries: list[WordEntryModel]


class FavoritesResponse(BaseModel):
    """Response model for favorites, sorted by word (case-insensitive)."""
    favorites: list[WordEntryModel]
    total: int


class FavoriteStatusResponse(BaseModel):
    word: str
    is_favorite: bool


class PlaybackToggleRequest(BaseModel):
    url: Optional[str] = Field(None, description="Raw audio URL; protocol-relative URLs are accepted")


class PlaybackStatusResponse(BaseModel):
    current_url: Optional[str] = None
    state: PlaybackStateName
    notice: Optional[str] = Field(None, description="Last playback failure, cleared by the next play request")
