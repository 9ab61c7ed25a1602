"""Standalone Korean grammatical particles.

Particles are never annotated, even when a word list happens to contain
one as an entry.
"""

PARTICLES = frozenset({
    # Subject / topic / object
    "이", "가", "은", "는", "을", "를",
    # Possessive
    "의",
    # Location / direction / source
    "에", "에서", "에게", "한테", "께", "로", "으로", "부터", "까지",
    # Conjunctive / comitative
    "와", "과", "랑", "이랑",
    # Additive / delimiting / comparative
    "도", "만", "처럼",
})

# Particles only when glued to a preceding word (학교하고, 나보다). Standing
# alone they are forms of the verbs 하다 and 보다.
ATTACHED_PARTICLES = PARTICLES | frozenset({"하고", "보다"})


def is_particle(token: str) -> bool:
    """Check if a token is exactly a standalone particle."""
    return token in PARTICLES


def is_attached_particle(token: str) -> bool:
    """Check if a token is a particle when it follows another syllable."""
    return token in ATTACHED_PARTICLES


MAX_PARTICLE_LENGTH = max(len(p) for p in ATTACHED_PARTICLES)


def leading_particle(text: str, start: int = 0) -> str:
    """Longest attached particle that text starts with at ``start`` ('' if none)."""
    for length in range(min(MAX_PARTICLE_LENGTH, len(text) - start), 0, -1):
        candidate = text[start:start + length]
        if candidate in ATTACHED_PARTICLES:
            return candidate
    return ""
