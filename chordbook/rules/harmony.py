"""
Harmony Module - Roman Numerals to Chord Names

This module encodes the music theory needed to turn a scale degree
written as a roman numeral into a concrete chord symbol in a key:

    resolve_roman("V7", "C")   → "G7"
    resolve_roman("vi", "C")   → "Am"
    resolve_roman("IV", "G")   → "C"
    resolve_roman("vii°", "C") → "Bdim"

Tokens or keys that cannot be resolved come back unchanged rather than
raising, so a caller can still display them as-is.
"""

from typing import Dict, List, Optional


# =============================================================================
# CONSTANTS: The Building Blocks of Music Theory
# =============================================================================

# The 12 notes in Western music, spelled with sharps
CHROMATIC_SCALE = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Semitone offset of each degree of the major scale from its root
MAJOR_STEPS = [0, 2, 4, 5, 7, 9, 11]      # W-W-H-W-W-W-H

# Bare (lowercased) roman numeral → scale degree
DEGREE_MAP: Dict[str, int] = {
    "i": 1,
    "ii": 2,
    "iii": 3,
    "iv": 4,
    "v": 5,
    "vi": 6,
    "vii": 7,
}

# Keys offered first in the key picker
FEATURED_KEYS = ("C", "G", "D", "A", "E", "F")

DIMINISHED_MARK = "°"

# Roman numeral labels for the diatonic triads of a major key
ROMAN_NUMERALS = ["I", "ii", "iii", "IV", "V", "vi", "vii°"]


# =============================================================================
# CORE FUNCTIONS
# =============================================================================

def get_note_index(note: str) -> Optional[int]:
    """Index of a note in the chromatic scale (0-11), None if unknown."""
    if note in CHROMATIC_SCALE:
        return CHROMATIC_SCALE.index(note)
    return None


def parse_degree(token: str) -> Optional[int]:
    """
    Extract the scale degree (1-7) from a roman-numeral token.

    Everything except the numeral letters is discarded, so "V7",
    "vii°" and "Imaj7" parse as 5, 7 and 1.
    """
    core = "".join(ch for ch in token.lower() if ch in "iv")
    return DEGREE_MAP.get(core)


def resolve_roman(token: str, key: str) -> str:
    """
    Convert a roman-numeral degree token to a chord symbol in a key.

    Case carries the quality: lowercase is a minor triad. Suffixes:
        maj7  → major seventh  ("Imaj7" in C → "Cmaj7")
        7     → dominant 7th on non-minor, non-diminished tokens
        °     → diminished     ("vii°" in C → "Bdim")

    Args:
        token: Degree token such as "I", "vi", "V7", "ii°", "Imaj7"
        key: Sharp-spelled key root from CHROMATIC_SCALE

    Returns:
        The chord symbol, or the token unchanged if either the degree
        or the key cannot be resolved
    """
    degree = parse_degree(token)
    key_index = get_note_index(key)
    if degree is None or key_index is None:
        return token

    root = CHROMATIC_SCALE[(key_index + MAJOR_STEPS[degree - 1]) % 12]
    is_dim = DIMINISHED_MARK in token
    is_minor = token == token.lower() and not is_dim

    # "Imaj7" also contains "7", so maj7 has to win first
    if "maj7" in token:
        return f"{root}maj7"
    if "7" in token and not is_dim and not is_minor:
        return f"{root}7"
    if is_dim:
        return f"{root}dim"
    if is_minor:
        return f"{root}m"
    return root


def is_resolved(token: str, chord_name: str) -> bool:
    """
    True when resolve_roman actually produced a chord for token.

    Resolved names start with a note letter and tokens never do, so an
    unchanged token is the only unresolved outcome.
    """
    return chord_name != token


def degrees_to_chords(key: str, tokens: List[str]) -> List[str]:
    """Resolve a whole pattern of degree tokens in one go."""
    return [resolve_roman(token, key) for token in tokens]


def get_diatonic_chords(key: str) -> List[str]:
    """The seven diatonic triads of a major key, e.g. C → [C, Dm, Em, F, G, Am, Bdim]."""
    return degrees_to_chords(key, ROMAN_NUMERALS)
