"""
Conjugation package - Korean ending normalization and conjugation generation.

This package provides:
- Rule tables (VERB_ENDINGS, VERB_ONLY_ENDINGS, HA_IRREGULAR_ENDINGS, ...)
- Stem extraction (extract_stems_for_lookup, extract_stems)
- Conjugation generation (generate_conjugations, could_be_conjugation_of)

Usage:
    from services.conjugation import extract_stems_for_lookup
"""

from .data import (
    AMBIGUOUS_ENDINGS,
    BATCHIM_ENDINGS,
    EXTRA_VERB_ENDINGS,
    HA_IRREGULAR_ENDINGS,
    MAX_ENDING_LENGTH,
    VERB_ENDINGS,
    VERB_ONLY_ENDINGS,
)

from .normalizer import (
    DICTIONARY_MARKER,
    StemCandidate,
    extract_stems,
    extract_stems_for_lookup,
    is_verbal_modifier_stem,
)

from .generator import (
    could_be_conjugation_of,
    generate_conjugations,
    infinitive,
)

__all__ = [
    # Data
    "AMBIGUOUS_ENDINGS",
    "BATCHIM_ENDINGS",
    "EXTRA_VERB_ENDINGS",
    "HA_IRREGULAR_ENDINGS",
    "MAX_ENDING_LENGTH",
    "VERB_ENDINGS",
    "VERB_ONLY_ENDINGS",
    # Normalizer
    "DICTIONARY_MARKER",
    "StemCandidate",
    "extract_stems",
    "extract_stems_for_lookup",
    "is_verbal_modifier_stem",
    # Generator
    "could_be_conjugation_of",
    "generate_conjugations",
    "infinitive",
]
