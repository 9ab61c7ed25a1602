"""Generate common conjugated forms from a dictionary form.

Used to expand vocabulary with common variations and to check whether a
surface word could be an inflection of a given dictionary form.
"""

from services import hangul

from .normalizer import DICTIONARY_MARKER, extract_stems_for_lookup


# Open-syllable stems absorb 아/어: 보+아 -> 봐, 주+어 -> 줘
_VOWEL_CONTRACTION = {
    "ㅗ": "ㅘ",
    "ㅜ": "ㅝ",
    "ㅣ": "ㅕ",
    "ㅚ": "ㅙ",
}

# Stems ending in these vowels swallow the 아/어 entirely: 가+아 -> 가
_ABSORBING_VOWELS = frozenset({"ㅏ", "ㅓ", "ㅐ", "ㅔ", "ㅕ"})


def infinitive(stem: str) -> str:
    """Build the 아/어 form of a stem (먹 -> 먹어, 가 -> 가, 보 -> 봐, 하 -> 해).

    Irregular stems (ㄷ, ㅂ, ㅅ, 르, ㄹ) are conjugated as if regular.
    """
    if stem.endswith("하"):
        return stem[:-1] + "해"

    last = stem[-1]
    syllable = hangul.decompose(last)
    if syllable is None:
        return stem + "어"

    if syllable.final:
        return stem + ("아" if syllable.medial in hangul.BRIGHT_VOWELS else "어")
    if syllable.medial in _ABSORBING_VOWELS:
        return stem
    if syllable.medial == "ㅡ":
        # ㅡ drops and harmony follows the syllable before it: 바쁘 -> 바빠, 쓰 -> 써
        previous = hangul.last_vowel(stem[-2]) if len(stem) > 1 else ""
        medial = "ㅏ" if previous in hangul.BRIGHT_VOWELS else "ㅓ"
        return stem[:-1] + hangul.with_medial(last, medial)
    if syllable.medial in _VOWEL_CONTRACTION:
        return stem[:-1] + hangul.with_medial(last, _VOWEL_CONTRACTION[syllable.medial])
    return stem + "어"


def _past(stem: str) -> str:
    """Past stem: the 아/어 form with ㅆ fused in (먹었, 갔, 봤, 했)."""
    inf = infinitive(stem)
    return inf[:-1] + hangul.with_final(inf[-1], "ㅆ")


def _attach(stem: str, with_batchim: str, final: str, without_batchim: str) -> str:
    """Pick the ending for closed vs open stems.

    Closed stems take ``with_batchim`` as-is (먹 + 습니다). Open stems get
    ``final`` fused into the last syllable and then ``without_batchim``
    (가 + ㅂ + 니다).
    """
    last = stem[-1]
    if hangul.has_final_consonant(last):
        return stem + with_batchim
    if final:
        return stem[:-1] + hangul.with_final(last, final) + without_batchim
    return stem + without_batchim


def generate_conjugations(dictionary_form: str) -> list[str]:
    """Generate common conjugations of a 다-final dictionary form.

    Args:
        dictionary_form: e.g. 먹다, 가다, 공부하다

    Returns:
        The dictionary form followed by its common surface forms, without
        duplicates. Words not ending in 다 come back unchanged.

    Examples:
        >>> generate_conjugations("가다")[:4]
        ['가다', '가요', '가', '갔어요']
    """
    if not dictionary_form.endswith(DICTIONARY_MARKER) or len(dictionary_form) < 2:
        return [dictionary_form]

    stem = dictionary_form[:-1]
    if not hangul.is_syllable(stem[-1]):
        return [dictionary_form]

    inf = infinitive(stem)
    past = _past(stem)

    forms = [
        dictionary_form,
        # Informal polite / plain
        inf + "요",
        inf,
        # Past
        past + "어요",
        past + "습니다",
        past + "다",
        # Formal polite
        _attach(stem, "습니다", "ㅂ", "니다"),
        # Connectives
        stem + "고",
        stem + "지만",
        inf + "서",
        _attach(stem, "으니까", "", "니까"),
        # Modifiers: present, past, future
        stem + "는",
        _attach(stem, "은", "ㄴ", ""),
        _attach(stem, "을", "ㄹ", ""),
    ]
    return list(dict.fromkeys(forms))


def could_be_conjugation_of(word: str, base_form: str) -> bool:
    """Check if a word could be a conjugated form of a base word."""
    if word == base_form:
        return True

    base_stem = base_form[:-1] if base_form.endswith(DICTIONARY_MARKER) else base_form
    for candidate in extract_stems_for_lookup(word):
        stem = candidate.stem
        clean = stem[:-1] if stem.endswith(DICTIONARY_MARKER) else stem
        if clean == base_stem or stem == base_form:
            return True
    return False
