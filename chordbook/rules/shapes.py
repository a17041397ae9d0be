"""
Shape Resolver - Chord Names to Fingerings

Exact symbol lookup against the chord library, plus the single fallback
used when generating progressions: an uncatalogued maj7 chord falls back
to its plain triad so at least the triad gets a diagram.
"""

from typing import Optional

from chordbook.data.catalog import ChordCatalog, get_chord_catalog
from chordbook.data.schema import ChordShape


MAJ7_SUFFIX = "maj7"


def find_chord_shape(name: str, catalog: Optional[ChordCatalog] = None) -> Optional[ChordShape]:
    """Return the catalog shape whose symbol is exactly name, else None."""
    if catalog is None:
        catalog = get_chord_catalog()
    return catalog.find(name)


def find_shape_with_fallback(name: str, catalog: Optional[ChordCatalog] = None) -> Optional[ChordShape]:
    """
    Exact lookup, retrying with "maj7" stripped ("Dmaj7" → "D").

    No other fuzzy matching is done; enharmonic spellings such as
    "A#" and "Bb" are different names.
    """
    shape = find_chord_shape(name, catalog)
    if shape is None and MAJ7_SUFFIX in name:
        shape = find_chord_shape(name.replace(MAJ7_SUFFIX, ""), catalog)
    return shape
