"""Lookup outcome domain models."""

from dataclasses import dataclass, field

from domain.model.entry import WordEntry
from domain.model.errors import DictionaryLookupError, LookupErrorKind


@dataclass(frozen=True)
class LookupFailure:
    """Tagged lookup failure: a closed ``kind`` plus a user-facing message."""
    kind: LookupErrorKind
    message: str
    status_code: int | None = None

    @classmethod
    def from_error(cls, error: DictionaryLookupError) -> 'LookupFailure':
        return cls(
            kind=error.kind,
            message=error.message,
            status_code=getattr(error, 'status_code', None),
        )


@dataclass(frozen=True)
class SearchOutcome:
    """Immutable result of one search.

    Either ``entries`` or ``failure`` carries the result; a failed search
    never carries partial entries.
    """
    word: str
    entries: list[WordEntry] = field(default_factory=list)
    failure: LookupFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
