"""Vocabulary index: dictionary form -> entry metadata.

Indexes are built once per level/language selection and never mutated
afterwards, so any number of scans can share one instance. Rebuilding
always returns a new index; callers swap the reference.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any, Self

from services.errors import DataError


class PartOfSpeech(StrEnum):
    """Closed set of parts of speech carried by vocabulary entries."""

    NOUN = auto()
    VERB = auto()
    ADJECTIVE = auto()
    EXPRESSION = auto()
    PARTICLE = auto()
    OTHER = auto()


class Level(StrEnum):
    """TOPIK level an entry belongs to."""

    I = "I"
    II = "II"


# Parts of speech that can carry verbal endings
VERB_POS = frozenset({PartOfSpeech.VERB, PartOfSpeech.ADJECTIVE, PartOfSpeech.EXPRESSION})

# Level selection -> levels visible to the matcher
LEVEL_SELECTIONS: Mapping[str, frozenset[Level]] = MappingProxyType({
    "I": frozenset({Level.I}),
    "II": frozenset({Level.II}),
    "ALL": frozenset({Level.I, Level.II}),
})

# Loose spellings found in word lists
_POS_ALIASES = {
    "n": PartOfSpeech.NOUN,
    "v": PartOfSpeech.VERB,
    "adj": PartOfSpeech.ADJECTIVE,
    "exp": PartOfSpeech.EXPRESSION,
    "expr": PartOfSpeech.EXPRESSION,
    "adverb": PartOfSpeech.OTHER,
    "pronoun": PartOfSpeech.OTHER,
    "numeral": PartOfSpeech.OTHER,
    "determiner": PartOfSpeech.OTHER,
    "interjection": PartOfSpeech.OTHER,
    "conjunction": PartOfSpeech.OTHER,
}

_LEVEL_ALIASES = {
    "i": Level.I, "1": Level.I, "topik i": Level.I, "topik1": Level.I,
    "ii": Level.II, "2": Level.II, "topik ii": Level.II, "topik2": Level.II,
}


def parse_pos(value: Any) -> PartOfSpeech:
    """Parse a raw POS value. Missing values map to OTHER."""
    if value is None or value == "":
        return PartOfSpeech.OTHER
    if isinstance(value, PartOfSpeech):
        return value
    key = str(value).strip().lower()
    try:
        return PartOfSpeech(key)
    except ValueError:
        if key in _POS_ALIASES:
            return _POS_ALIASES[key]
    raise DataError(f"Unknown part of speech: {value!r}")


def parse_level(value: Any) -> Level:
    """Parse a raw level value. Missing values map to TOPIK I."""
    if value is None or value == "":
        return Level.I
    if isinstance(value, Level):
        return value
    level = _LEVEL_ALIASES.get(str(value).strip().lower())
    if level is None:
        raise DataError(f"Unknown level: {value!r}")
    return level


def resolve_levels(selection: str) -> frozenset[Level] | None:
    """Map a level selection (I, II, ALL) to levels. None if unrecognized."""
    return LEVEL_SELECTIONS.get(str(selection).strip().upper())


@dataclass(frozen=True, slots=True)
class VocabularyEntry:
    """A single dictionary-form vocabulary item."""

    word: str
    pos: PartOfSpeech = PartOfSpeech.OTHER
    level: Level = Level.I
    translations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.word, str) or not self.word.strip():
            raise DataError(f"Vocabulary entry has no dictionary form: {self.word!r}")
        if not isinstance(self.translations, Mapping):
            raise DataError(f"Translations for {self.word!r} must be a mapping")
        # Private read-only copy of the caller's mapping
        object.__setattr__(self, "word", self.word.strip())
        object.__setattr__(self, "pos", parse_pos(self.pos))
        object.__setattr__(self, "level", parse_level(self.level))
        object.__setattr__(self, "translations", MappingProxyType({
            str(lang): str(text) for lang, text in self.translations.items() if text
        }))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_level: Level | str | None = None) -> Self:
        """Parse a raw word-list record.

        Expected shape: ``{"word", "pos", "level", "translations"}``. Only
        ``word`` is required.

        Raises:
            DataError: If the record is malformed.
        """
        if not isinstance(data, Mapping):
            raise DataError(f"Vocabulary entry must be an object, got {type(data).__name__}")
        translations = data.get("translations")
        if translations is None:
            translations = {}
        return cls(
            word=data.get("word", ""),
            pos=data.get("pos"),
            level=data.get("level", default_level),
            translations=translations,
        )

    def translate(self, language: str) -> str | None:
        """Translation for a language, falling back to English."""
        return self.translations.get(language) or self.translations.get("en")


class VocabularyIndex:
    """Read-only mapping from dictionary form to VocabularyEntry."""

    __slots__ = ("_entries", "_max_key_length")

    def __init__(self, entries: Mapping[str, VocabularyEntry] | None = None) -> None:
        self._entries: Mapping[str, VocabularyEntry] = MappingProxyType(dict(entries or {}))
        self._max_key_length = max((len(k) for k in self._entries), default=0)

    @classmethod
    def build(cls, entries: Iterable[VocabularyEntry | Mapping[str, Any]], level: str | None = None) -> Self:
        """Build an index from entries or raw records.

        Duplicate dictionary forms resolve last-write-wins.

        Args:
            entries: VocabularyEntry objects or raw word-list records.
            level: Optional level selection (I, II, ALL) restricting which
                   entries are indexed.

        Raises:
            DataError: If any entry is malformed or the level is unknown.
        """
        allowed = None
        if level is not None:
            allowed = resolve_levels(level)
            if allowed is None:
                raise DataError(f"Unknown level selection: {level!r}")

        table: dict[str, VocabularyEntry] = {}
        for raw in entries:
            entry = raw if isinstance(raw, VocabularyEntry) else VocabularyEntry.from_dict(raw)
            if allowed is not None and entry.level not in allowed:
                continue
            table[entry.word] = entry
        return cls(table)

    def lookup(self, word: str) -> VocabularyEntry | None:
        """Look up a dictionary form. Unknown keys return None."""
        return self._entries.get(word)

    @property
    def max_key_length(self) -> int:
        """Length of the longest dictionary form in the index."""
        return self._max_key_length

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __iter__(self) -> Iterator[VocabularyEntry]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"VocabularyIndex({len(self)} entries)"


def build_index(entries: Iterable[VocabularyEntry | Mapping[str, Any]], level: str | None = None) -> VocabularyIndex:
    """Build a fresh VocabularyIndex. See VocabularyIndex.build."""
    return VocabularyIndex.build(entries, level=level)
