"""WordWise services module."""

from .errors import AnnotatorError, ConfigurationError, DataError
from .vocabulary import (
    Level,
    PartOfSpeech,
    VocabularyEntry,
    VocabularyIndex,
    build_index,
)
from .conjugation import (
    StemCandidate,
    extract_stems,
    extract_stems_for_lookup,
    generate_conjugations,
)
from .particles import PARTICLES, is_particle
from .matcher import (
    AnnotationSpan,
    AnnotatorConfig,
    annotate,
    lookup_word,
)
from .wordlist import KoreanWordList
from .annotator import ConfigChange, KoreanAnnotator

__all__ = [
    # Errors
    "AnnotatorError",
    "ConfigurationError",
    "DataError",
    # Vocabulary
    "Level",
    "PartOfSpeech",
    "VocabularyEntry",
    "VocabularyIndex",
    "build_index",
    # Normalizer
    "StemCandidate",
    "extract_stems",
    "extract_stems_for_lookup",
    "generate_conjugations",
    # Particles
    "PARTICLES",
    "is_particle",
    # Matcher
    "AnnotationSpan",
    "AnnotatorConfig",
    "annotate",
    "lookup_word",
    # Shell
    "KoreanWordList",
    "ConfigChange",
    "KoreanAnnotator",
]
