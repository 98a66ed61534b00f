"""Dictionary entry domain models.

Entries are decoded from dictionaryapi.dev payloads and from the favorites
store. Decoding is tolerant: missing or wrong-typed fields fall back to
defaults, and malformed list elements are dropped one by one instead of
failing the whole entry.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

logger = logging.getLogger(__name__)


# ── Coercion helpers ─────────────────────────────────────────


def _optional_str(value: Any) -> str | None:
    """Trimmed string, or None when absent, not a string, or blank."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def _required_str(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _mapping_list(value: Any) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def _string_set(value: Any) -> list[str]:
    """Ordered, de-duplicated list of non-blank strings."""
    if not isinstance(value, list):
        return []
    seen: set[str] = set()
    result: list[str] = []
    for item in value:
        text = _optional_str(item)
        if text is None or text in seen:
            continue
        seen.add(text)
        result.append(text)
    return result


# ── Value Objects ────────────────────────────────────────────


@dataclass(frozen=True)
class Phonetic:
    """One pronunciation variant: display text and/or a raw audio URL."""
    text: str | None = None
    audio: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Phonetic':
        return cls(
            text=_optional_str(data.get('text')),
            audio=_optional_str(data.get('audio')),
        )

    def to_dict(self) -> dict[str, Any]:
        return {'text': self.text, 'audio': self.audio}


@dataclass(frozen=True)
class Definition:
    """A single definition within a meaning."""
    definition: str = ""
    example: str | None = None
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Definition':
        return cls(
            definition=_required_str(data.get('definition')),
            example=_optional_str(data.get('example')),
            synonyms=_string_set(data.get('synonyms')),
            antonyms=_string_set(data.get('antonyms')),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'definition': self.definition,
            'example': self.example,
            'synonyms': list(self.synonyms),
            'antonyms': list(self.antonyms),
        }


@dataclass(frozen=True)
class Meaning:
    """One part-of-speech sense of an entry."""
    part_of_speech: str = ""
    definitions: list[Definition] = field(default_factory=list)
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Meaning':
        return cls(
            part_of_speech=_required_str(data.get('partOfSpeech')),
            definitions=[Definition.from_dict(d) for d in _mapping_list(data.get('definitions'))],
            synonyms=_string_set(data.get('synonyms')),
            antonyms=_string_set(data.get('antonyms')),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'partOfSpeech': self.part_of_speech,
            'definitions': [d.to_dict() for d in self.definitions],
            'synonyms': list(self.synonyms),
            'antonyms': list(self.antonyms),
        }


@dataclass(frozen=True)
class WordEntry:
    """One dictionary result for a word (Value Object).

    ``word`` is always a string; ``key`` is its lowercase form and is what
    favorites are keyed by.
    """
    word: str = ""
    phonetic: str | None = None
    phonetics: list[Phonetic] = field(default_factory=list)
    origin: str | None = None
    meanings: list[Meaning] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.word.lower()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'WordEntry':
        """Decode an entry mapping. Never raises for missing or odd fields."""
        return cls(
            word=_required_str(data.get('word')),
            phonetic=_optional_str(data.get('phonetic')),
            phonetics=[Phonetic.from_dict(p) for p in _mapping_list(data.get('phonetics'))],
            origin=_optional_str(data.get('origin')),
            meanings=[Meaning.from_dict(m) for m in _mapping_list(data.get('meanings'))],
        )

    @classmethod
    def from_json(cls, text: str) -> 'WordEntry | None':
        """Decode a JSON string. Returns None if it is not a JSON object."""
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as e:
            logger.debug("Entry is not valid JSON", extra={"error": str(e)})
            return None
        if not isinstance(data, Mapping):
            logger.debug("Entry JSON is not an object", extra={"type": type(data).__name__})
            return None
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization. None stays null."""
        return {
            'word': self.word,
            'phonetic': self.phonetic,
            'phonetics': [p.to_dict() for p in self.phonetics],
            'origin': self.origin,
            'meanings': [m.to_dict() for m in self.meanings],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
