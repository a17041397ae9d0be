"""
Data Subpackage

This package holds the static libraries the engine reads:
    - schema.py: Pydantic models for chord shapes and progression styles
    - catalog.py: YAML loading and the cached, indexed catalogs
    - chords.yaml / styles.yaml: the shipped library data

The core data structure is the ChordShape, which contains:
    - name: Chord symbol used for lookups ("C", "F#m", "G7")
    - strings: Six fret values, low E to high e (-1 muted, 0 open)
    - fingers: Optional finger hints per string
    - quality, tags, and an optional diagram start fret
"""

from chordbook.data.schema import ChordShape, ProgressionStyle
from chordbook.data.catalog import (
    CatalogError,
    ChordCatalog,
    get_chord_catalog,
    get_progression_styles,
    get_style,
    load_chord_catalog,
    load_progression_styles,
)
