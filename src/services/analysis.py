"""Analysis service - provides text annotation functions for the API.

This module contains the main functions used by the API:
- annotate_text: Vocabulary spans with translations
- annotate_html: Ruby-markup annotation plus stylesheet
- deconjugate_word: Resolve one conjugated word to its dictionary entry
- conjugate_word: Generate common conjugations
- extract_stems_raw: Raw stem candidates for debugging
"""

from functools import lru_cache

from models import (
    AnnotateResponse,
    AnnotateHtmlResponse,
    ConjugateResponse,
    DeconjugateResponse,
    Span,
    StemCandidateItem,
    StemsResponse,
    UserConfig,
)
from services.annotator import KoreanAnnotator
from services.conjugation import extract_stems_for_lookup, generate_conjugations
from services.matcher import AnnotatorConfig
from services.rendering import format_annotations, render_ruby
from services.vocabulary import VocabularyIndex
from services.wordlist import KoreanWordList


# ============================================================================
# Annotator Cache
# ============================================================================


@lru_cache(maxsize=4)
def get_index(level: str) -> VocabularyIndex:
    """Index for a (validated) level selection, built once per process."""
    return KoreanWordList.get_instance().build_index(level)


@lru_cache(maxsize=16)
def get_annotator(level: str, target_language: str) -> KoreanAnnotator:
    """Annotator for a request's settings. Annotators of one level share an index."""
    config = UserConfig(level=level, target_language=target_language)
    return KoreanAnnotator(KoreanWordList.get_instance(), config, index=get_index(level))


def _annotator(target_language: str, level: str) -> KoreanAnnotator:
    # Normalizes case and raises ConfigurationError before touching the cache
    config = AnnotatorConfig(target_language, level)
    return get_annotator(config.level, config.target_language)


def _candidates(word: str) -> list[StemCandidateItem]:
    return [StemCandidateItem(stem=c.stem, verb_only=c.verb_only) for c in extract_stems_for_lookup(word)]


# ============================================================================
# Analysis Functions
# ============================================================================


def annotate_text(text: str, target_language: str = "en", level: str = "ALL") -> AnnotateResponse:
    """Annotate text and return spans with a readable summary."""
    spans = _annotator(target_language, level).annotate(text)
    return AnnotateResponse(
        spans=[Span(**span.to_dict()) for span in spans],
        count=len(spans),
        text_result=format_annotations(spans),
    )


def annotate_html(
    text: str,
    target_language: str = "en",
    level: str = "ALL",
    show_highlight: bool = False,
    font_size: int = 100,
) -> AnnotateHtmlResponse:
    """Annotate text as ruby markup."""
    annotator = _annotator(target_language, level)
    spans = annotator.annotate(text)
    return AnnotateHtmlResponse(
        html=render_ruby(text, spans, show_highlight=show_highlight),
        stylesheet=annotator.stylesheet(font_size),
        count=len(spans),
    )


def deconjugate_word(word: str, target_language: str = "en", level: str = "ALL") -> DeconjugateResponse | None:
    """Resolve a conjugated word to its dictionary entry. None if nothing matches."""
    annotator = _annotator(target_language, level)
    entry = annotator.lookup(word)
    if entry is None:
        return None
    return DeconjugateResponse(
        word=word,
        dictionary_form=entry.word,
        pos=str(entry.pos),
        level=str(entry.level),
        translation=annotator.translate(entry, word),
        candidates=_candidates(word),
    )


def conjugate_word(word: str) -> ConjugateResponse:
    """Generate common conjugations from a dictionary form."""
    return ConjugateResponse(word=word, conjugations=generate_conjugations(word))


def extract_stems_raw(word: str) -> StemsResponse:
    """Raw normalizer output for debugging."""
    candidates = _candidates(word)
    return StemsResponse(word=word, candidates=candidates, count=len(candidates))
