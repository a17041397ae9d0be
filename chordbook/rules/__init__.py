"""
Rules Subpackage - Music theory and lookup rules

Usage:
    from chordbook.rules import generate_progression
    from chordbook.data import get_style

    chords = generate_progression(get_style("jpop"), "G")
    print([c.name for c in chords])   # ['G', 'D', 'Em', 'C']
"""

from chordbook.rules.harmony import resolve_roman, is_resolved, CHROMATIC_SCALE, FEATURED_KEYS
from chordbook.rules.shapes import find_chord_shape, find_shape_with_fallback
from chordbook.rules.progression import ResolvedChord, generate_progression, resolve_pattern
