"""Pydantic models for WordWise API requests and responses."""

from typing import Literal

from pydantic import BaseModel, Field


# ============================================================================
# Configuration
# ============================================================================


class UserConfig(BaseModel):
    """User-facing annotation settings.

    Only ``level`` and ``target_language`` change what gets matched; the
    rest only affects how results are displayed.
    """
    level: Literal["I", "II", "ALL"] = Field("ALL", description="TOPIK level to annotate")
    target_language: str = Field("en", description="Translation language code (en, zh, ja)")
    enabled: bool = Field(True, description="Annotate at all")
    show_highlight: bool = Field(False, description="Underline annotated words")
    font_size: int = Field(100, ge=50, le=300, description="Annotation font size in percent")


# ============================================================================
# Request Models
# ============================================================================


class AnnotateRequest(BaseModel):
    """Request body for text annotation."""
    text: str = Field(..., min_length=1, max_length=10000, description="Korean text to annotate")
    target_language: str = Field("en", description="Translation language code")
    level: str = Field("ALL", description="TOPIK level: I, II or ALL")


class AnnotateHtmlRequest(AnnotateRequest):
    """Request body for ruby-markup annotation."""
    show_highlight: bool = Field(False, description="Add the highlight class to ruby tags")
    font_size: int = Field(100, ge=50, le=300, description="Annotation font size in percent")


class DeconjugateRequest(BaseModel):
    """Request body for dictionary-form lookup of one word."""
    word: str = Field(..., min_length=1, max_length=100, description="Conjugated word to resolve")
    target_language: str = Field("en", description="Translation language code")
    level: str = Field("ALL", description="TOPIK level: I, II or ALL")


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    word: str = Field(..., min_length=1, max_length=50, description="Dictionary form ending in 다")


class StemsRequest(BaseModel):
    """Request body for raw stem extraction."""
    word: str = Field(..., min_length=1, max_length=100, description="Surface token")


# ============================================================================
# Response Components
# ============================================================================


class Span(BaseModel):
    """Single annotated span of the input text."""
    start: int = Field(..., description="Start offset (codepoints, inclusive)")
    end: int = Field(..., description="End offset (codepoints, exclusive)")
    surface: str = Field(..., description="Text as written")
    dictionary_form: str = Field(..., description="Matched dictionary form")
    pos: str = Field(..., description="Part of speech")
    level: str = Field(..., description="TOPIK level of the entry")
    translation: str = Field(..., description="Translation in the requested language")


class StemCandidateItem(BaseModel):
    """One dictionary-form candidate for a surface token."""
    stem: str
    verb_only: bool = Field(..., description="Only valid against verb/adjective/expression entries")


# ============================================================================
# Response Models
# ============================================================================


class AnnotateResponse(BaseModel):
    """Response body for /annotate."""
    spans: list[Span]
    count: int = Field(..., description="Number of spans found")
    text_result: str = Field(..., description="Human-readable text format")


class AnnotateHtmlResponse(BaseModel):
    """Response body for /annotate_html."""
    html: str = Field(..., description="Input text with ruby annotations")
    stylesheet: str = Field(..., description="CSS for the ruby annotations")
    count: int


class DeconjugateResponse(BaseModel):
    """Response for /deconjugate."""
    word: str = Field(..., description="Input word")
    dictionary_form: str = Field(..., description="Matched dictionary form")
    pos: str = Field(..., description="Part of speech")
    level: str = Field(..., description="TOPIK level")
    translation: str = Field(..., description="Translation in the requested language")
    candidates: list[StemCandidateItem] = Field(default_factory=list)


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    word: str = Field(..., description="Dictionary form")
    conjugations: list[str] = Field(..., description="Common surface forms")


class StemsResponse(BaseModel):
    """Response for /stems."""
    word: str
    candidates: list[StemCandidateItem]
    count: int
