"""Surface token -> dictionary-form stem candidates.

Korean predicates show up in text inflected (먹었어요, 공부해요, 갑니다).
This module reverses the common endings so the candidates can be looked up
against a vocabulary index. It does not decide which candidate is right;
it only tags each one with whether a noun may legitimately match it.
"""

from dataclasses import dataclass

from services import hangul

from .data import (
    AMBIGUOUS_ENDINGS,
    BATCHIM_ENDINGS,
    CONTRACTED_TAILS,
    CONTRACTED_VOWELS,
    EXTRA_VERB_ENDINGS,
    HA_IRREGULAR_ENDINGS,
    PAST_TAILS,
    VERB_ENDINGS,
    VERB_ONLY_ENDINGS,
)


DICTIONARY_MARKER = "다"


@dataclass(frozen=True, slots=True)
class StemCandidate:
    """A possible dictionary-form (or stem) for a surface token."""

    stem: str
    verb_only: bool = False  # Only valid against verb/adjective/expression entries


class _CandidateSet:
    """Insertion-ordered stems where an unconstrained sighting always wins."""

    def __init__(self) -> None:
        self._seen: dict[str, bool] = {}

    def add(self, stem: str, verb_only: bool) -> None:
        if not stem:
            return
        if stem not in self._seen:
            self._seen[stem] = verb_only
        elif not verb_only:
            self._seen[stem] = False

    def add_with_marker(self, stem: str, verb_only: bool) -> None:
        """Add a stem and, unless it already has one, its 다 form."""
        self.add(stem, verb_only)
        if stem and not stem.endswith(DICTIONARY_MARKER):
            self.add(stem + DICTIONARY_MARKER, verb_only)

    def to_list(self) -> list[StemCandidate]:
        return [StemCandidate(stem, verb_only) for stem, verb_only in self._seen.items()]


def is_verbal_modifier_stem(stem: str) -> bool:
    """Heuristic for the 는/은 ambiguity.

    After stripping 는/은, a single-syllable stem is almost always a verb
    modifier (서는, 가는, 먹은) while longer stems are usually a noun with
    the topic particle (학교는, 친구는). Approximate; tune here.
    """
    return len(stem) == 1


def _strip_ending(word: str, ending: str) -> str | None:
    """Remove ending from word, or None if it doesn't apply.

    The word must be strictly longer than the ending so the stem is never
    empty.
    """
    if word.endswith(ending) and len(word) > len(ending):
        return word[: -len(ending)]
    return None


def _add_ha_irregular(word: str, candidates: _CandidateSet) -> None:
    """해/했 contractions back to 하 (공부해요 -> 공부하다)."""
    for suffix, base in HA_IRREGULAR_ENDINGS:
        if word.endswith(suffix):
            candidates.add_with_marker(word[: len(word) - len(suffix)] + base, True)


def _add_regular_endings(word: str, candidates: _CandidateSet) -> None:
    for ending in VERB_ENDINGS:
        stem = _strip_ending(word, ending)
        if stem is None:
            continue
        verb_only = ending in VERB_ONLY_ENDINGS
        if not verb_only and ending in AMBIGUOUS_ENDINGS and is_verbal_modifier_stem(stem):
            verb_only = True
        candidates.add_with_marker(stem, verb_only)


def _add_extra_endings(word: str, candidates: _CandidateSet) -> None:
    for ending in EXTRA_VERB_ENDINGS:
        stem = _strip_ending(word, ending)
        if stem is not None:
            candidates.add_with_marker(stem, True)


def _add_batchim_endings(word: str, candidates: _CandidateSet) -> None:
    """Endings fused into the last stem syllable (갑니다, 간다, 갈)."""
    for final, tail in BATCHIM_ENDINGS:
        if not word.endswith(tail) or len(word) <= len(tail):
            continue
        host = word[-len(tail) - 1]
        if hangul.final_consonant(host) != final:
            continue
        prefix = word[: -len(tail) - 1]
        candidates.add_with_marker(prefix + hangul.with_final(host, ""), True)


def _add_vowel_contractions(word: str, candidates: _CandidateSet) -> None:
    """아/어 absorbed into an open stem (가요, 봐, 갔어요, 마셨다)."""
    for tail in CONTRACTED_TAILS:
        if not word.endswith(tail) or len(word) <= len(tail):
            continue
        host = word[-len(tail) - 1]
        syllable = hangul.decompose(host)
        if syllable is None or syllable.final:
            continue
        prefix = word[: -len(tail) - 1]
        for medial in CONTRACTED_VOWELS.get(syllable.medial, ()):
            candidates.add_with_marker(prefix + hangul.with_medial(host, medial), True)

    # Bare informal form with a changed vowel (봐, 써, 마셔): only the
    # dictionary form is a candidate
    syllable = hangul.decompose(word[-1])
    if syllable is not None and not syllable.final and not word.endswith(DICTIONARY_MARKER):
        for medial in CONTRACTED_VOWELS.get(syllable.medial, ()):
            if medial != syllable.medial:
                candidates.add(word[:-1] + hangul.with_medial(word[-1], medial) + DICTIONARY_MARKER, True)

    for tail in PAST_TAILS:
        if not word.endswith(tail) or len(word) <= len(tail):
            continue
        host = word[-len(tail) - 1]
        syllable = hangul.decompose(host)
        if syllable is None or syllable.final != "ㅆ":
            continue
        prefix = word[: -len(tail) - 1]
        open_host = hangul.with_final(host, "")
        for medial in CONTRACTED_VOWELS.get(syllable.medial, ()):
            candidates.add_with_marker(prefix + hangul.with_medial(open_host, medial), True)


def extract_stems_for_lookup(word: str) -> list[StemCandidate]:
    """Produce dictionary-form candidates for a surface token.

    Candidates come out in insertion order, identity first:

    1. The token itself (unconstrained).
    2. The token minus 다, when it ends in 다 (unconstrained).
    3. 하다 irregular contractions mapped back to 하 (verb-only).
    4. Regular endings stripped, with and without 다 re-attached.
       Verb-only when the ending can't follow a noun; 는/은 are verb-only
       only for single-syllable stems (see is_verbal_modifier_stem).
    5. Supplementary verbal endings, batchim-fused endings and vowel
       contractions (verb-only).

    The same stem reached by several rules keeps a single entry, and an
    unconstrained derivation overrides a verb-only one. Order carries no
    ranking.

    Args:
        word: Surface token as it appears in text.

    Returns:
        List of StemCandidate. Empty input yields just the identity.

    Examples:
        >>> [c.stem for c in extract_stems_for_lookup("서고")]
        ['서고', '서', '서다']
    """
    if not word:
        return [StemCandidate(word, False)]

    candidates = _CandidateSet()
    candidates.add(word, False)

    if word.endswith(DICTIONARY_MARKER):
        candidates.add(word[:-1], False)

    _add_ha_irregular(word, candidates)
    _add_regular_endings(word, candidates)
    _add_extra_endings(word, candidates)
    _add_batchim_endings(word, candidates)
    _add_vowel_contractions(word, candidates)

    return candidates.to_list()


def extract_stems(word: str) -> list[str]:
    """Possible stems of a conjugated word, without POS constraints.

    Covers the identity, the bare stem and the regular ending table only.
    """
    stems = _CandidateSet()
    stems.add(word, False)
    if word.endswith(DICTIONARY_MARKER):
        stems.add(word[:-1], False)
    for ending in VERB_ENDINGS:
        stem = _strip_ending(word, ending)
        if stem is not None:
            stems.add_with_marker(stem, False)
    return [c.stem for c in stems.to_list()] if word else [word]
