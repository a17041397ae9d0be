"""
Progression Generator - Style + Key → Ordered Chords

Picks one of a style's degree patterns at random and resolves every token
through the harmony rules and the chord library:

    style "jpop", key "G"
         │
         ▼
    pattern = ["I", "V", "vi", "IV"]        (random choice)
         │
         ▼
    names   = ["G", "D", "Em", "C"]         (resolve_roman)
         │
         ▼
    shapes  = [G, D, Em, C]                 (find_shape_with_fallback)

A chord missing from the library keeps its slot with shape=None.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import logging
import random

from chordbook.data.catalog import ChordCatalog
from chordbook.data.schema import ChordShape, ProgressionStyle
from chordbook.rules.harmony import resolve_roman
from chordbook.rules.shapes import find_shape_with_fallback


logger = logging.getLogger(__name__)


# =============================================================================
# RESOLVED CHORD DATA CLASS
# =============================================================================

@dataclass(frozen=True)
class ResolvedChord:
    """One slot of a generated progression."""
    degree: str
    name: str
    shape: Optional[ChordShape] = None

    @property
    def has_shape(self) -> bool:
        return self.shape is not None

    def to_dict(self) -> dict:
        return {
            "degree": self.degree,
            "name": self.name,
            "shape_id": self.shape.id if self.shape else None,
        }


# =============================================================================
# GENERATION
# =============================================================================

def resolve_pattern(
    pattern: Sequence[str],
    key: str,
    catalog: Optional[ChordCatalog] = None
) -> List[ResolvedChord]:
    """Resolve each degree token of a pattern in order."""
    chords = []
    for token in pattern:
        name = resolve_roman(token, key)
        shape = find_shape_with_fallback(name, catalog)
        if shape is None:
            logger.debug("No shape for %s (%s in %s)", name, token, key)
        chords.append(ResolvedChord(degree=token, name=name, shape=shape))
    return chords


def generate_progression(
    style: ProgressionStyle,
    key: str,
    rng: Optional[random.Random] = None,
    catalog: Optional[ChordCatalog] = None
) -> List[ResolvedChord]:
    """
    Generate a progression for a style in a key.

    Args:
        style: Style whose patterns are the candidates
        key: Key root, e.g. "C" or "F#"
        rng: Source of randomness with a choice() method. Defaults to
             the random module; pass random.Random(seed) to pin the pick.
        catalog: Chord library to resolve against (packaged one by default)

    Returns:
        One ResolvedChord per token of the chosen pattern, in order
    """
    chooser = rng if rng is not None else random
    pattern = chooser.choice(style.patterns)
    logger.debug("Style %s in %s: picked %s", style.id, key, "-".join(pattern))
    return resolve_pattern(pattern, key, catalog)


def degrees_of(progression: Sequence[ResolvedChord]) -> List[str]:
    """The degree tokens of a progression, in order."""
    return [chord.degree for chord in progression]
