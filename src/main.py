"""WordWise FastAPI application - Korean vocabulary annotation API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from models import (
    AnnotateRequest,
    AnnotateHtmlRequest,
    DeconjugateRequest,
    ConjugateRequest,
    StemsRequest,
    AnnotateResponse,
    AnnotateHtmlResponse,
    DeconjugateResponse,
    ConjugateResponse,
    StemsResponse,
)
from services.errors import AnnotatorError
from services.wordlist import KoreanWordList
from services.analysis import (
    annotate_text,
    annotate_html,
    deconjugate_word,
    conjugate_word,
    extract_stems_raw,
)


VERSION = "0.1.3"


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the word lists on startup."""
    _ = KoreanWordList.get_instance()
    yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="WordWise Korean API",
    description="""Korean text annotation API for language learners.

## Features
- **Annotation**: Find TOPIK vocabulary in running Korean text
- **Conjugation-aware**: 먹었어요, 공부해요, 갑니다 resolve to their dictionary forms
- **Particle-safe**: 은/는/이/가 and friends are never annotated
- **Translations**: English, Chinese and Japanese, falling back to English

## Endpoints
- `/annotate` - Spans with dictionary forms and translations
- `/annotate_html` - Same, rendered as ruby markup
- `/deconjugate` - Resolve a single conjugated word
- `/conjugate` - Generate conjugations from a dictionary form
- `/stems` - Raw stem candidates (debug)
""",
    version=VERSION,
    lifespan=lifespan,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "wordwise", "version": VERSION}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str | int]:
    """Detailed health check."""
    wordlist = KoreanWordList.get_instance()
    return {"status": "healthy", "version": VERSION, "entries": wordlist.entry_count}


# ============================================================================
# Annotation Endpoints
# ============================================================================


@app.post("/annotate", response_model=AnnotateResponse, tags=["Annotation"])
async def annotate_endpoint(request: AnnotateRequest) -> AnnotateResponse:
    """
    Annotate Korean text with dictionary forms and translations.

    Returns spans with:
    - Codepoint offsets into the input text
    - Surface text and matched dictionary form
    - Translation in the requested language (English fallback)
    """
    try:
        return annotate_text(request.text, request.target_language, request.level)
    except AnnotatorError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Annotation failed: {e!s}") from e


@app.post("/annotate_html", response_model=AnnotateHtmlResponse, tags=["Annotation"])
async def annotate_html_endpoint(request: AnnotateHtmlRequest) -> AnnotateHtmlResponse:
    """
    Annotate Korean text as HTML ruby markup.

    Returns the escaped text with `<ruby>` tags around each match and the
    stylesheet sized for the requested font size.
    """
    try:
        return annotate_html(
            request.text,
            request.target_language,
            request.level,
            show_highlight=request.show_highlight,
            font_size=request.font_size,
        )
    except AnnotatorError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Annotation failed: {e!s}") from e


# ============================================================================
# Conjugation Endpoints
# ============================================================================


@app.post("/deconjugate", response_model=DeconjugateResponse, tags=["Conjugation"])
async def deconjugate_endpoint(request: DeconjugateRequest) -> DeconjugateResponse:
    """
    Resolve a conjugated word to its dictionary entry.

    e.g. 먹었어요 -> 먹다, 공부해요 -> 공부하다
    """
    try:
        result = deconjugate_word(request.word, request.target_language, request.level)
    except AnnotatorError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Deconjugation failed: {e!s}") from e
    if result is None:
        raise HTTPException(status_code=404, detail=f"No vocabulary entry for {request.word!r}")
    return result


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """Generate common conjugations from a dictionary form."""
    try:
        return conjugate_word(request.word)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e


# ============================================================================
# Debug Endpoints
# ============================================================================


@app.post("/stems", response_model=StemsResponse, tags=["Debug"])
async def stems_endpoint(request: StemsRequest) -> StemsResponse:
    """Raw stem candidates for a surface token."""
    try:
        return extract_stems_raw(request.word)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Stem extraction failed: {e!s}") from e


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
