#!/usr/bin/env python3
"""Tests for stem extraction and conjugation generation.

Covers:
- 하다 irregular: 공부해요 -> 공부하다
- POS-guarded stripping: 서고 -> 서다 (verb-only), 학교는 -> 학교 (free)
- Batchim-fused and contracted endings: 갑니다, 간다, 가요, 갔어요
"""

import sys
from pathlib import Path

# Add src to python path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root / "src"))

from services.conjugation import (
    StemCandidate,
    VERB_ENDINGS,
    could_be_conjugation_of,
    extract_stems,
    extract_stems_for_lookup,
    generate_conjugations,
    infinitive,
    is_verbal_modifier_stem,
)
from services.conjugation import normalizer


def stems_of(word: str) -> dict[str, bool]:
    return {c.stem: c.verb_only for c in extract_stems_for_lookup(word)}


# ============================================================================
# Normalizer
# ============================================================================


def test_identity_comes_first():
    candidates = extract_stems_for_lookup("먹었어요")
    assert candidates[0] == StemCandidate("먹었어요", False)


def test_empty_input_yields_identity_only():
    assert extract_stems_for_lookup("") == [StemCandidate("", False)]


def test_bare_stem_of_dictionary_form():
    stems = stems_of("먹다")
    assert stems["먹다"] is False
    assert stems["먹"] is False


def test_verb_only_connective():
    assert extract_stems_for_lookup("서고") == [
        StemCandidate("서고", False),
        StemCandidate("서", True),
        StemCandidate("서다", True),
    ]


def test_ha_irregular_round_trip():
    stems = stems_of("공부해요")
    assert stems["공부하다"] is True
    assert stems["공부하"] is True


def test_ha_irregular_past():
    for word in ("공부했어요", "공부했습니다", "공부했다", "공부했었어요"):
        assert "공부하다" in stems_of(word), word


def test_bare_ha_contraction():
    stems = stems_of("해요")
    assert stems["하다"] is True


def test_regular_past_polite():
    stems = stems_of("먹었어요")
    assert stems["먹"] is True
    assert stems["먹다"] is True


def test_topic_marker_after_multi_syllable_noun_is_free():
    stems = stems_of("학교는")
    assert stems["학교"] is False


def test_single_syllable_modifier_is_verb_only():
    stems = stems_of("서는")
    assert stems["서"] is True
    assert stems["서다"] is True


def test_verbal_modifier_heuristic():
    assert is_verbal_modifier_stem("서")
    assert is_verbal_modifier_stem("가")
    assert not is_verbal_modifier_stem("학교")
    assert not is_verbal_modifier_stem("친구")


def test_object_particle_stem_is_free():
    stems = stems_of("밥을")
    assert stems["밥"] is False


def test_token_not_longer_than_ending_is_not_stripped():
    assert [c.stem for c in extract_stems_for_lookup("고")] == ["고"]
    assert all(c.stem for c in extract_stems_for_lookup("었어요"))
    assert "" not in stems_of("어요")


def test_no_duplicate_stems():
    for word in ("먹었어요", "공부하고", "갔습니다", "학교는"):
        stems = [c.stem for c in extract_stems_for_lookup(word)]
        assert len(stems) == len(set(stems)), word


def test_unconstrained_sighting_relaxes_constraint():
    candidates = normalizer._CandidateSet()
    candidates.add("서", True)
    candidates.add("서", False)
    candidates.add("서", True)
    assert candidates.to_list() == [StemCandidate("서", False)]


def test_deterministic():
    assert extract_stems_for_lookup("마셨어요") == extract_stems_for_lookup("마셨어요")


def test_batchim_endings():
    assert stems_of("갑니다")["가다"] is True
    assert stems_of("갑니까")["가다"] is True
    assert stems_of("갑시다")["가다"] is True
    assert stems_of("간다")["가다"] is True
    assert stems_of("간")["가다"] is True
    assert stems_of("갈")["가다"] is True
    assert "공부하다" in stems_of("공부합니다")


def test_vowel_contractions():
    assert stems_of("가요")["가다"] is True
    assert stems_of("봐요")["보다"] is True
    assert stems_of("마셔요")["마시다"] is True
    assert stems_of("줘요")["주다"] is True
    assert stems_of("돼요")["되다"] is True
    assert stems_of("가서")["가다"] is True
    assert stems_of("써요")["쓰다"] is True
    assert stems_of("바빠요")["바쁘다"] is True
    assert stems_of("켜요")["켜다"] is True
    assert stems_of("켜서")["켜다"] is True


def test_bare_informal_form():
    assert stems_of("봐")["보다"] is True
    assert stems_of("써")["쓰다"] is True
    assert stems_of("마셔")["마시다"] is True
    assert stems_of("바빠")["바쁘다"] is True
    # An unchanged vowel yields no new dictionary form
    assert "사다" not in stems_of("사")


def test_contracted_past():
    assert stems_of("갔어요")["가다"] is True
    assert stems_of("왔다")["오다"] is True
    assert stems_of("마셨어요")["마시다"] is True
    assert stems_of("봤습니다")["보다"] is True
    assert stems_of("썼어요")["쓰다"] is True
    assert stems_of("바빴다")["바쁘다"] is True
    assert stems_of("켰어요")["켜다"] is True


def test_extra_verb_endings():
    assert stems_of("가세요")["가다"] is True
    assert stems_of("읽으세요")["읽다"] is True
    assert stems_of("먹는다")["먹다"] is True
    assert stems_of("먹습니까")["먹다"] is True
    assert stems_of("가면")["가다"] is True


def test_extract_stems_plain():
    stems = extract_stems("먹었어요")
    assert stems[0] == "먹었어요"
    assert "먹다" in stems
    assert extract_stems("") == [""]


def test_ending_table_is_longest_first():
    lengths = [len(e) for e in VERB_ENDINGS]
    assert lengths == sorted(lengths, reverse=True)
    assert len(VERB_ENDINGS) == len(set(VERB_ENDINGS))


# ============================================================================
# Generator
# ============================================================================


def test_infinitive():
    assert infinitive("먹") == "먹어"
    assert infinitive("받") == "받아"
    assert infinitive("가") == "가"
    assert infinitive("보") == "봐"
    assert infinitive("마시") == "마셔"
    assert infinitive("주") == "줘"
    assert infinitive("공부하") == "공부해"
    assert infinitive("쓰") == "써"
    assert infinitive("바쁘") == "바빠"
    assert infinitive("아프") == "아파"
    assert infinitive("예쁘") == "예뻐"
    assert infinitive("켜") == "켜"


def test_generate_consonant_stem():
    forms = generate_conjugations("먹다")
    assert forms[0] == "먹다"
    for expected in ("먹어요", "먹었어요", "먹습니다", "먹고", "먹으니까", "먹는", "먹은", "먹을"):
        assert expected in forms, expected


def test_generate_vowel_stem():
    forms = generate_conjugations("가다")
    for expected in ("가요", "갔어요", "갑니다", "가서", "가니까", "간", "갈"):
        assert expected in forms, expected


def test_generate_ha_verb():
    forms = generate_conjugations("공부하다")
    for expected in ("공부해요", "공부했어요", "공부합니다", "공부한"):
        assert expected in forms, expected


def test_generate_contracting_vowels():
    assert "봐요" in generate_conjugations("보다")
    assert "봤어요" in generate_conjugations("보다")
    assert "마셔요" in generate_conjugations("마시다")


def test_generate_follows_vowel_harmony():
    forms = generate_conjugations("바쁘다")
    assert "바빠요" in forms
    assert "바빴어요" in forms
    assert "바뻐요" not in forms
    assert "써요" in generate_conjugations("쓰다")
    assert "켜요" in generate_conjugations("켜다")


def test_generate_non_dictionary_form():
    assert generate_conjugations("학교") == ["학교"]
    assert generate_conjugations("다") == ["다"]


def test_generated_forms_normalize_back():
    for base in ("먹다", "가다", "공부하다", "보다", "마시다", "쓰다", "바쁘다", "켜다"):
        for form in generate_conjugations(base):
            assert could_be_conjugation_of(form, base), (form, base)


def test_could_be_conjugation_of():
    assert could_be_conjugation_of("서고", "서다")
    assert could_be_conjugation_of("공부해요", "공부하다")
    assert not could_be_conjugation_of("먹었어요", "가다")


def main():
    """Run all tests and print a short report."""
    tests = [(name, fn) for name, fn in globals().items() if name.startswith("test_") and callable(fn)]
    print("=" * 60)
    print("CONJUGATION TESTS")
    print("=" * 60)
    failed = 0
    for name, fn in tests:
        try:
            fn()
            print(f"  ✓ {name}")
        except AssertionError as e:
            failed += 1
            print(f"  ✗ {name}: {e}")
    print(f"\n{len(tests) - failed}/{len(tests)} passed")


if __name__ == "__main__":
    main()
