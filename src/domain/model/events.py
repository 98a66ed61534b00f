"""Change notifications published to the rendering layer."""

from dataclasses import dataclass
from enum import Enum


class ChangeTopic(str, Enum):
    """Which part of the session state changed."""
    RESULTS = 'results'
    FAVORITES = 'favorites'
    PLAYBACK = 'playback'
    CONNECTIVITY = 'connectivity'
    NOTICE = 'notice'


@dataclass(frozen=True)
class ChangeEvent:
    topic: ChangeTopic
    message: str | None = None
