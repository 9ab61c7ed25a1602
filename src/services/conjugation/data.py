"""Rule tables for Korean ending normalization.

All tables are immutable, ordered longest-first where matching order
matters, and shared process-wide.
"""

from types import MappingProxyType


def _longest_first(endings: tuple[str, ...]) -> tuple[str, ...]:
    """Deduplicate (keeping first sighting) and sort by length, descending."""
    return tuple(sorted(dict.fromkeys(endings), key=len, reverse=True))


# =============================================================================
# Regular endings
# =============================================================================

VERB_ENDINGS = _longest_first((
    # Present tense
    "습니다", "입니다",
    "어요", "아요", "여요",
    "어", "아", "여",
    "은", "는", "를",

    # Past tense
    "었습니다", "았습니다", "였습니다",
    "었어요", "았어요", "였어요",
    "었어", "았어", "였어",
    "었다", "았다", "였다",

    # Future / modifier
    "을", "를", "은", "는",
    "겠습니다", "겠어요", "겠어",

    # Connectors
    "고", "지만", "거나", "면서",
    "어서", "아서", "여서",
    "니까", "으니까",

    # Other forms
    "지", "게", "도록",
))

# Endings that cannot follow a noun: a stem left by stripping one of these
# only matches verbs, adjectives and expressions (서고 -> 서다, not 서 "west").
VERB_ONLY_ENDINGS = frozenset({
    # Tense
    "었습니다", "았습니다", "였습니다",
    "었어요", "았어요", "였어요",
    "었어", "았어", "였어",
    "었다", "았다", "였다",
    # Present polite / informal
    "어요", "아요", "여요",
    "어", "아", "여",
    # Future / volition
    "겠습니다", "겠어요", "겠어",
    # Connectors
    "고", "지만", "거나", "면서",
    "어서", "아서", "여서",
    "니까", "으니까",
    # Other
    "지", "게", "도록",
})

# Verbal modifier (먹는, 서는) or noun + topic particle (학교는)
AMBIGUOUS_ENDINGS = frozenset({"는", "은"})


# =============================================================================
# 하다 irregular
# =============================================================================

# 하 + 여 contracts to 해, 하 + 였 to 했. Surface suffix -> base syllable,
# longest suffix first; on equal length the earlier row wins.
HA_IRREGULAR_ENDINGS: tuple[tuple[str, str], ...] = (
    ("했습니다", "하"),
    ("했었어요", "하"),
    ("했어요", "하"),
    ("했었어", "하"),
    ("했어", "하"),
    ("했다", "하"),
    ("해요", "하"),
    ("해서", "하"),
    ("해도", "하"),
    ("하고", "하"),
    ("했", "하"),
    ("해", "하"),
)


# =============================================================================
# Supplementary verbal endings
# =============================================================================

# Always verb-only; applied after the regular table
EXTRA_VERB_ENDINGS = _longest_first((
    "으세요", "습니까", "으면",
    "는다", "세요", "면",
))

# Endings whose first jamo fuses into the stem's last syllable as batchim:
# (final consonant, syllables that follow). 갑니다 = 가 + ㅂ니다.
BATCHIM_ENDINGS: tuple[tuple[str, str], ...] = (
    ("ㅂ", "니다"),
    ("ㅂ", "니까"),
    ("ㅂ", "시다"),
    ("ㄴ", "다"),
    ("ㄴ", ""),   # past/adjectival modifier: 간, 예쁜
    ("ㄹ", ""),   # future modifier: 갈
)


# =============================================================================
# Vowel contraction
# =============================================================================

# Contracted medial -> stem medials it may have come from when 아/어 was
# absorbed. 가+아 -> 가, 보+아 -> 봐, 마시+어 -> 마셔, 주+어 -> 줘, 되+어 -> 돼,
# 쓰+어 -> 써, 바쁘+아 -> 바빠, 켜+어 -> 켜
CONTRACTED_VOWELS = MappingProxyType({
    "ㅏ": ("ㅏ", "ㅡ"),
    "ㅓ": ("ㅓ", "ㅡ"),
    "ㅐ": ("ㅐ",),
    "ㅔ": ("ㅔ",),
    "ㅕ": ("ㅣ", "ㅕ"),
    "ㅘ": ("ㅗ",),
    "ㅝ": ("ㅜ",),
    "ㅙ": ("ㅚ",),
})

# What may follow a contracted 아/어 syllable (가요, 가서, 가도)
CONTRACTED_TAILS = _longest_first(("요", "서", "도"))

# What may follow a contracted past syllable carrying ㅆ (갔어요, 왔다)
PAST_TAILS = _longest_first((
    "습니다", "습니까",
    "어요", "어서", "지만", "는데",
    "어", "다", "고", "지", "죠",
))


# Longest surface material any rule can remove, in syllables. The matcher
# uses this to bound how far past a dictionary form a window can reach.
MAX_ENDING_LENGTH = max(
    max(len(e) for e in VERB_ENDINGS),
    max(len(e) for e in EXTRA_VERB_ENDINGS),
    max(len(s) for s, _ in HA_IRREGULAR_ENDINGS),
    max(len(t) + 1 for _, t in BATCHIM_ENDINGS),
    max(len(t) + 1 for t in CONTRACTED_TAILS),
    max(len(t) + 1 for t in PAST_TAILS),
)
