"""Pronunciation audio: URL normalization and playback state."""

from enum import Enum

from domain.model.entry import WordEntry


class PlaybackState(str, Enum):
    """States reported by the audio engine."""
    STOPPED = 'stopped'
    PLAYING = 'playing'
    PAUSED = 'paused'
    COMPLETED = 'completed'


def normalize_audio_url(raw: str | None) -> str | None:
    """Map a raw audio string to an absolute playable URL.

    Protocol-relative URLs ("//host/a.mp3") get an https scheme, http(s)
    URLs pass through trimmed, everything else is unplayable.

    Example:
        normalize_audio_url("//x.mp3") → "https://x.mp3"
        normalize_audio_url("ftp://x.mp3") → None
    """
    if raw is None:
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None
    if trimmed.startswith('//'):
        return f"https:{trimmed}"
    if trimmed.startswith(('http://', 'https://')):
        return trimmed
    return None


def first_playable_audio(entry: WordEntry) -> str | None:
    """First phonetic audio (in API order) that normalizes to a URL."""
    for phonetic in entry.phonetics:
        url = normalize_audio_url(phonetic.audio)
        if url is not None:
            return url
    return None
