#!/usr/bin/env python3
"""Tests for vocabulary entries and the index."""

import sys
from pathlib import Path

import pytest

# Add src to python path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root / "src"))

from services.errors import AnnotatorError, DataError
from services.vocabulary import (
    Level,
    PartOfSpeech,
    VocabularyEntry,
    VocabularyIndex,
    build_index,
    parse_level,
    parse_pos,
    resolve_levels,
)


def test_parse_pos():
    assert parse_pos("verb") is PartOfSpeech.VERB
    assert parse_pos(" Noun ") is PartOfSpeech.NOUN
    assert parse_pos("adj") is PartOfSpeech.ADJECTIVE
    assert parse_pos("adverb") is PartOfSpeech.OTHER
    assert parse_pos(None) is PartOfSpeech.OTHER
    assert parse_pos("") is PartOfSpeech.OTHER
    with pytest.raises(DataError):
        parse_pos("gerund")


def test_parse_level():
    assert parse_level("I") is Level.I
    assert parse_level("ii") is Level.II
    assert parse_level(2) is Level.II
    assert parse_level("topik1") is Level.I
    assert parse_level(None) is Level.I
    with pytest.raises(DataError):
        parse_level("III")


def test_resolve_levels():
    assert resolve_levels("I") == frozenset({Level.I})
    assert resolve_levels("II") == frozenset({Level.II})
    assert resolve_levels("all") == frozenset({Level.I, Level.II})
    assert resolve_levels("beginner") is None


def test_entry_from_dict():
    entry = VocabularyEntry.from_dict({
        "word": "먹다",
        "pos": "verb",
        "level": "I",
        "translations": {"en": "eat", "zh": "吃", "ja": ""},
    })
    assert entry.word == "먹다"
    assert entry.pos is PartOfSpeech.VERB
    assert entry.level is Level.I
    assert dict(entry.translations) == {"en": "eat", "zh": "吃"}


def test_entry_defaults():
    entry = VocabularyEntry.from_dict({"word": "아주"})
    assert entry.pos is PartOfSpeech.OTHER
    assert entry.level is Level.I
    assert len(entry.translations) == 0

    entry = VocabularyEntry.from_dict({"word": "경제"}, default_level="II")
    assert entry.level is Level.II


def test_entry_translations_are_frozen():
    source = {"en": "school"}
    entry = VocabularyEntry("학교", translations=source)
    source["en"] = "changed"
    assert entry.translations["en"] == "school"
    with pytest.raises(TypeError):
        entry.translations["en"] = "x"


def test_entry_translate_falls_back_to_english():
    entry = VocabularyEntry("학교", translations={"en": "school", "zh": "学校"})
    assert entry.translate("zh") == "学校"
    assert entry.translate("ja") == "school"
    assert VocabularyEntry("학교").translate("en") is None


def test_malformed_entries():
    with pytest.raises(DataError):
        VocabularyEntry.from_dict({"pos": "noun"})
    with pytest.raises(DataError):
        VocabularyEntry.from_dict({"word": "   "})
    with pytest.raises(DataError):
        VocabularyEntry.from_dict("먹다")
    with pytest.raises(DataError):
        VocabularyEntry.from_dict({"word": "먹다", "translations": ["eat"]})
    # Data errors are ValueErrors for callers that don't care
    assert issubclass(DataError, AnnotatorError)
    assert issubclass(DataError, ValueError)


def test_build_index_lookup():
    index = build_index([
        {"word": "학교", "pos": "noun", "translations": {"en": "school"}},
        VocabularyEntry("먹다", PartOfSpeech.VERB, translations={"en": "eat"}),
    ])
    assert len(index) == 2
    assert "학교" in index
    assert index.lookup("먹다").translations["en"] == "eat"
    assert index.lookup("가다") is None
    assert index.max_key_length == 2
    assert {e.word for e in index} == {"학교", "먹다"}


def test_duplicates_last_write_wins():
    index = build_index([
        {"word": "서", "pos": "noun", "translations": {"en": "west"}},
        {"word": "서", "pos": "noun", "translations": {"en": "standing"}},
    ])
    assert len(index) == 1
    assert index.lookup("서").translations["en"] == "standing"


def test_build_index_level_filter():
    entries = [
        {"word": "학교", "level": "I"},
        {"word": "경제", "level": "II"},
    ]
    assert [e.word for e in build_index(entries, level="I")] == ["학교"]
    assert [e.word for e in build_index(entries, level="II")] == ["경제"]
    assert len(build_index(entries, level="ALL")) == 2
    with pytest.raises(DataError):
        build_index(entries, level="III")


def test_build_index_rejects_malformed():
    with pytest.raises(DataError):
        build_index([{"word": "학교"}, {"word": ""}])


def test_empty_index():
    index = VocabularyIndex()
    assert len(index) == 0
    assert index.max_key_length == 0
    assert index.lookup("학교") is None


def test_rebuild_leaves_old_index_untouched():
    first = build_index([{"word": "학교"}])
    second = build_index([{"word": "학교"}, {"word": "친구"}])
    assert len(first) == 1
    assert len(second) == 2
    assert first is not second
