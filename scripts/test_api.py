#!/usr/bin/env python3
"""Test the WordWise API endpoints against the bundled word lists.

Runs in-process through FastAPI's TestClient, no server needed:
  pytest scripts/test_api.py
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add src to python path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root / "src"))

from main import VERSION, app
from services import analysis
from services.annotator import KoreanAnnotator


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as client:
        yield client


# ============================================================================
# Health
# ============================================================================


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "wordwise", "version": VERSION}


def test_health(client):
    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert data["entries"] > 0


# ============================================================================
# Annotation
# ============================================================================


def test_annotate(client):
    text = "학교에서 밥을 먹었어요"
    response = client.post("/annotate", json={"text": text})
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 3
    assert [s["dictionary_form"] for s in data["spans"]] == ["학교", "밥", "먹다"]
    for span in data["spans"]:
        assert text[span["start"]:span["end"]] == span["surface"]
    assert "먹었어요 → 먹다 (eat)" in data["text_result"]


def test_annotate_verb_only_connective(client):
    data = client.post("/annotate", json={"text": "서고"}).json()
    assert [s["dictionary_form"] for s in data["spans"]] == ["서다"]


def test_annotate_target_language(client):
    data = client.post("/annotate", json={"text": "친구", "target_language": "zh"}).json()
    assert data["spans"][0]["translation"] == "朋友"


def test_annotate_level_filter(client):
    data = client.post("/annotate", json={"text": "학교", "level": "II"}).json()
    assert data["count"] == 0
    assert data["spans"] == []


def test_annotate_bad_config(client):
    response = client.post("/annotate", json={"text": "학교", "target_language": "fr"})
    assert response.status_code == 400
    response = client.post("/annotate", json={"text": "학교", "level": "III"})
    assert response.status_code == 400


def test_annotate_validation(client):
    assert client.post("/annotate", json={"text": ""}).status_code == 422
    assert client.post("/annotate", json={}).status_code == 422


def test_annotate_html(client):
    response = client.post(
        "/annotate_html",
        json={"text": "책을 읽어요", "show_highlight": True, "font_size": 150},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert '<ruby class="word-wise-korean word-wise-highlight">읽어요<rt>read</rt></ruby>' in data["html"]
    assert "font-size: 0.9em" in data["stylesheet"]


# ============================================================================
# Conjugation
# ============================================================================


def test_deconjugate(client):
    response = client.post("/deconjugate", json={"word": "공부했어요"})
    assert response.status_code == 200
    data = response.json()
    assert data["dictionary_form"] == "공부하다"
    assert data["pos"] == "verb"
    assert data["level"] == "I"
    assert data["translation"] == "study"
    assert data["candidates"][0] == {"stem": "공부했어요", "verb_only": False}


def test_deconjugate_not_found(client):
    response = client.post("/deconjugate", json={"word": "hello"})
    assert response.status_code == 404


def test_conjugate(client):
    response = client.post("/conjugate", json={"word": "가다"})
    assert response.status_code == 200
    forms = response.json()["conjugations"]
    assert forms[0] == "가다"
    assert "갑니다" in forms
    assert "갔어요" in forms


def test_stems(client):
    data = client.post("/stems", json={"word": "서고"}).json()
    assert data["count"] == 3
    assert data["candidates"] == [
        {"stem": "서고", "verb_only": False},
        {"stem": "서", "verb_only": True},
        {"stem": "서다", "verb_only": True},
    ]


def test_requests_share_annotators(client):
    client.post("/annotate", json={"text": "학교", "target_language": "ZH", "level": "i"})
    annotator = analysis.get_annotator("I", "zh")
    assert isinstance(annotator, KoreanAnnotator)
    assert annotator is analysis.get_annotator("I", "zh")
    assert annotator.index is analysis.get_annotator("I", "en").index
    assert annotator.index is analysis.get_index("I")
