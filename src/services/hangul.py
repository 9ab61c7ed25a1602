"""Hangul syllable-block arithmetic.

A precomposed syllable (U+AC00..U+D7A3) is laid out as

    0xAC00 + (initial * 21 + medial) * 28 + final

so splitting a block into its initial consonant, medial vowel and final
consonant (batchim) is plain integer arithmetic.
"""

from dataclasses import dataclass


SYLLABLE_BASE = 0xAC00
SYLLABLE_LAST = 0xD7A3

_MEDIAL_COUNT = 21
_FINAL_COUNT = 28

# Compatibility jamo, indexed by position in the block layout
INITIALS = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)
MEDIALS = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ", "ㅙ",
    "ㅚ", "ㅛ", "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ", "ㅣ",
)
FINALS = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Bright (yang) vowels take 아-series endings, everything else takes 어
BRIGHT_VOWELS = frozenset({"ㅏ", "ㅗ"})


@dataclass(frozen=True, slots=True)
class Syllable:
    """A decomposed syllable block."""

    initial: str
    medial: str
    final: str = ""


def is_syllable(char: str) -> bool:
    """Check if a single character is a precomposed Hangul syllable."""
    return len(char) == 1 and SYLLABLE_BASE <= ord(char) <= SYLLABLE_LAST


def is_hangul(text: str) -> bool:
    """Check if text is non-empty and made only of Hangul syllables."""
    return bool(text) and all(is_syllable(c) for c in text)


def decompose(char: str) -> Syllable | None:
    """Split a syllable block into jamo. Returns None for anything else."""
    if not is_syllable(char):
        return None
    code = ord(char) - SYLLABLE_BASE
    initial, rest = divmod(code, _MEDIAL_COUNT * _FINAL_COUNT)
    medial, final = divmod(rest, _FINAL_COUNT)
    return Syllable(INITIALS[initial], MEDIALS[medial], FINALS[final])


def compose(initial: str, medial: str, final: str = "") -> str:
    """Build a syllable block from compatibility jamo.

    Raises:
        ValueError: If any component is not a valid jamo for its slot.
    """
    try:
        i = INITIALS.index(initial)
        m = MEDIALS.index(medial)
        f = FINALS.index(final)
    except ValueError as e:
        raise ValueError(f"Cannot compose syllable from {initial!r}, {medial!r}, {final!r}") from e
    return chr(SYLLABLE_BASE + (i * _MEDIAL_COUNT + m) * _FINAL_COUNT + f)


def final_consonant(char: str) -> str:
    """Return the batchim of a syllable ('' when open or not Hangul)."""
    syllable = decompose(char)
    return syllable.final if syllable else ""


def has_final_consonant(char: str) -> bool:
    return bool(final_consonant(char))


def last_vowel(char: str) -> str:
    """Return the medial vowel of a syllable ('' when not Hangul)."""
    syllable = decompose(char)
    return syllable.medial if syllable else ""


def with_final(char: str, final: str) -> str:
    """Replace the batchim of a syllable (use '' to drop it)."""
    syllable = decompose(char)
    if syllable is None:
        raise ValueError(f"Not a Hangul syllable: {char!r}")
    return compose(syllable.initial, syllable.medial, final)


def with_medial(char: str, medial: str) -> str:
    """Replace the vowel of a syllable, keeping initial and batchim."""
    syllable = decompose(char)
    if syllable is None:
        raise ValueError(f"Not a Hangul syllable: {char!r}")
    return compose(syllable.initial, medial, syllable.final)


def hangul_runs(text: str) -> list[tuple[int, str]]:
    """Split text into maximal runs of syllable blocks.

    Returns:
        List of (start_offset, run) pairs in text order. Offsets are
        codepoint indices into ``text``.
    """
    runs: list[tuple[int, str]] = []
    start = -1
    for i, char in enumerate(text):
        if is_syllable(char):
            if start < 0:
                start = i
        elif start >= 0:
            runs.append((start, text[start:i]))
            start = -1
    if start >= 0:
        runs.append((start, text[start:]))
    return runs
