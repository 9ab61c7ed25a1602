"""Span matcher: find vocabulary in running Korean text.

Scans each run of Hangul syllables left to right. At every position the
longest window that reduces to a vocabulary entry wins; the scan then
resumes after it, so the returned spans are sorted and never overlap.

Pure: no I/O, no state between calls. Safe to run concurrently against a
shared VocabularyIndex.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from services import hangul
from services.conjugation import MAX_ENDING_LENGTH, StemCandidate, extract_stems_for_lookup
from services.errors import ConfigurationError
from services.particles import is_attached_particle, is_particle, leading_particle
from services.vocabulary import (
    VERB_POS,
    Level,
    PartOfSpeech,
    VocabularyEntry,
    VocabularyIndex,
    resolve_levels,
)


SUPPORTED_LANGUAGES = frozenset({"en", "zh", "ja"})
FALLBACK_LANGUAGE = "en"


# ============================================================================
# Data Types
# ============================================================================


@dataclass(frozen=True, slots=True)
class AnnotatorConfig:
    """The part of the user configuration the matcher depends on."""

    target_language: str = "en"
    level: str = "ALL"
    levels: frozenset[Level] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        language = str(self.target_language).strip().lower()
        if language not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                f"Unsupported target language: {self.target_language!r} "
                f"(expected one of {', '.join(sorted(SUPPORTED_LANGUAGES))})"
            )
        levels = resolve_levels(self.level)
        if levels is None:
            raise ConfigurationError(f"Unknown level: {self.level!r} (expected I, II or ALL)")
        object.__setattr__(self, "target_language", language)
        object.__setattr__(self, "level", str(self.level).strip().upper())
        object.__setattr__(self, "levels", levels)

    @classmethod
    def coerce(cls, config: "AnnotatorConfig | Mapping[str, Any] | None") -> Self:
        """Accept a config object, a mapping with the config keys, or None.

        Mappings may use either ``target_language`` or ``targetLanguage``.
        Extra keys (enabled, font size, ...) are ignored.
        """
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        if isinstance(config, Mapping):
            language = config.get("target_language", config.get("targetLanguage", "en"))
            return cls(target_language=language, level=config.get("level", "ALL"))
        raise ConfigurationError(f"Unsupported config type: {type(config).__name__}")


@dataclass(frozen=True, slots=True)
class AnnotationSpan:
    """A matched run of text and the entry it resolved to.

    ``start``/``end`` are codepoint offsets into the scanned text
    (half-open), and ``surface == text[start:end]``.
    """

    start: int
    end: int
    surface: str
    entry: VocabularyEntry
    translation: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "start": self.start,
            "end": self.end,
            "surface": self.surface,
            "dictionary_form": self.entry.word,
            "pos": str(self.entry.pos),
            "level": str(self.entry.level),
            "translation": self.translation,
        }


# ============================================================================
# Matching Passes
# ============================================================================


def _visible(entry: VocabularyEntry | None, levels: frozenset[Level]) -> bool:
    """Entries outside the selected levels, and particles, never match."""
    return entry is not None and entry.level in levels and entry.pos != PartOfSpeech.PARTICLE


def strict_pass(
    candidates: list[StemCandidate],
    index: VocabularyIndex,
    levels: frozenset[Level],
) -> VocabularyEntry | None:
    """First candidate whose entry respects its POS constraint."""
    for candidate in candidates:
        entry = index.lookup(candidate.stem)
        if not _visible(entry, levels):
            continue
        if not candidate.verb_only or entry.pos in VERB_POS:
            return entry
    return None


def lenient_pass(
    candidates: list[StemCandidate],
    index: VocabularyIndex,
    levels: frozenset[Level],
) -> VocabularyEntry | None:
    """First candidate present in the index, POS constraints ignored.

    Covers entries whose POS is missing or wrong in the word list.
    """
    for candidate in candidates:
        entry = index.lookup(candidate.stem)
        if _visible(entry, levels):
            return entry
    return None


def match_window(window: str, index: VocabularyIndex, levels: frozenset[Level]) -> VocabularyEntry | None:
    """Resolve one window: strict pass, then lenient pass if strict found nothing."""
    candidates = extract_stems_for_lookup(window)
    return strict_pass(candidates, index, levels) or lenient_pass(candidates, index, levels)


def resolve_translation(entry: VocabularyEntry, language: str, surface: str) -> str:
    """Requested language, else English, else the surface text itself."""
    return entry.translations.get(language) or entry.translations.get(FALLBACK_LANGUAGE) or surface


# ============================================================================
# Public API
# ============================================================================


def _match_at(
    run: str,
    pos: int,
    index: VocabularyIndex,
    levels: frozenset[Level],
    max_window: int,
) -> tuple[int, VocabularyEntry] | None:
    """Longest window starting at pos that resolves to an entry."""
    longest = min(len(run), pos + max_window)
    for end in range(longest, pos, -1):
        window = run[pos:end]
        if is_particle(window) or (pos > 0 and is_attached_particle(window)):
            continue
        entry = match_window(window, index, levels)
        if entry is not None:
            return end, entry
    return None


def _skip_attached_particle(
    run: str,
    pos: int,
    index: VocabularyIndex,
    levels: frozenset[Level],
    max_window: int,
) -> int:
    """Position after a particle glued to the previous match.

    학교에서 resumes after 에서, so 서 is never read as a word. The particle
    is kept when a match starting there runs past it (한국과학 -> 과학).
    """
    particle = leading_particle(run, pos)
    if not particle:
        return pos
    following = _match_at(run, pos, index, levels, max_window)
    if following is not None and following[0] > pos + len(particle):
        return pos
    return pos + len(particle)


def annotate(
    text: str,
    index: VocabularyIndex,
    config: AnnotatorConfig | Mapping[str, Any] | None = None,
) -> list[AnnotationSpan]:
    """Find vocabulary spans in text.

    Args:
        text: Plain text, possibly mixing Korean with other scripts.
        index: Vocabulary to match against.
        config: Target language and level selection.

    Returns:
        Spans sorted by start offset, pairwise non-overlapping. Unmatched
        text simply produces no span.

    Raises:
        ConfigurationError: If the language or level is not recognized.
    """
    config = AnnotatorConfig.coerce(config)
    if not text or not isinstance(index, VocabularyIndex) or not len(index):
        return []

    max_window = index.max_key_length + MAX_ENDING_LENGTH
    spans: list[AnnotationSpan] = []

    for offset, run in hangul.hangul_runs(text):
        pos = 0
        while pos < len(run):
            found = _match_at(run, pos, index, config.levels, max_window)
            if found is None:
                pos += 1
                continue
            end, entry = found
            surface = run[pos:end]
            spans.append(AnnotationSpan(
                start=offset + pos,
                end=offset + end,
                surface=surface,
                entry=entry,
                translation=resolve_translation(entry, config.target_language, surface),
            ))
            pos = _skip_attached_particle(run, end, index, config.levels, max_window)

    return spans


def lookup_word(
    word: str,
    index: VocabularyIndex,
    config: AnnotatorConfig | Mapping[str, Any] | None = None,
) -> VocabularyEntry | None:
    """Resolve a single surface word to its entry, as the matcher would.

    Unlike annotate, the whole word is one window: no shorter fallback.
    """
    config = AnnotatorConfig.coerce(config)
    if not word or is_particle(word) or not isinstance(index, VocabularyIndex):
        return None
    return match_window(word, index, config.levels)
