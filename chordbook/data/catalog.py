"""
Catalog Module - Loading the Static Chord and Style Libraries

The chord library and the progression styles ship as YAML files next to
this module. They are parsed once, validated against the schemas in
schema.py, and cached as immutable collections.

Usage:
    from chordbook.data.catalog import get_chord_catalog, get_style

    catalog = get_chord_catalog()
    print(catalog.find("Am").label)   # 'A minor'
    print(get_style("jpop").patterns[0])
"""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union
import logging

import yaml
from pydantic import ValidationError

from chordbook.data.schema import CatalogFile, ChordShape, ProgressionStyle, StylesFile


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

CHORDS_FILE = "chords.yaml"
STYLES_FILE = "styles.yaml"

PathLike = Union[str, Path]


class CatalogError(Exception):
    """Raised when a catalog file is missing or malformed."""


# =============================================================================
# CHORD CATALOG
# =============================================================================

class ChordCatalog:
    """
    Immutable, indexed collection of chord shapes.

    Lookups by chord symbol return the first shape defined with that
    symbol, mirroring a linear scan over the source list.
    """

    def __init__(self, shapes: Sequence[ChordShape]):
        self._shapes: Tuple[ChordShape, ...] = tuple(shapes)
        self._by_name: Dict[str, ChordShape] = {}
        for shape in self._shapes:
            self._by_name.setdefault(shape.name, shape)

    def __iter__(self) -> Iterator[ChordShape]:
        return iter(self._shapes)

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"ChordCatalog({len(self)} shapes)"

    @property
    def shapes(self) -> Tuple[ChordShape, ...]:
        return self._shapes

    @property
    def names(self) -> List[str]:
        return [shape.name for shape in self._shapes]

    def find(self, name: str) -> Optional[ChordShape]:
        """Exact match on the chord symbol, None when not catalogued."""
        return self._by_name.get(name)


# =============================================================================
# YAML LOADING
# =============================================================================

def _read_yaml(path: Optional[PathLike], default_name: str) -> dict:
    """Read a YAML mapping from path, or from the packaged default file."""
    try:
        if path is None:
            text = resources.files("chordbook.data").joinpath(default_name).read_text(encoding="utf-8")
            source = default_name
        else:
            text = Path(path).read_text(encoding="utf-8")
            source = str(path)
    except OSError as e:
        raise CatalogError(f"Could not read catalog file '{path or default_name}': {e}") from e

    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in '{source}': {e}") from e

    if not isinstance(document, dict):
        raise CatalogError(f"Catalog file '{source}' must contain a mapping at top level")

    logger.debug("Loaded catalog document %s", source)
    return document


def load_chord_catalog(path: Optional[PathLike] = None) -> ChordCatalog:
    """
    Build a ChordCatalog from a YAML file.

    Args:
        path: Catalog file to read. Defaults to the packaged chords.yaml.

    Returns:
        A new ChordCatalog

    Raises:
        CatalogError: If the file cannot be read or fails validation
    """
    document = _read_yaml(path, CHORDS_FILE)
    try:
        parsed = CatalogFile.model_validate(document)
    except ValidationError as e:
        raise CatalogError(f"Chord catalog failed validation: {e}") from e

    logger.info("Chord catalog ready: %d shapes", len(parsed.chords))
    return ChordCatalog(parsed.chords)


def load_progression_styles(path: Optional[PathLike] = None) -> Tuple[ProgressionStyle, ...]:
    """Load and validate the progression styles YAML file."""
    document = _read_yaml(path, STYLES_FILE)
    try:
        parsed = StylesFile.model_validate(document)
    except ValidationError as e:
        raise CatalogError(f"Progression styles failed validation: {e}") from e

    logger.info("Progression styles ready: %s", [s.id for s in parsed.styles])
    return tuple(parsed.styles)


# =============================================================================
# CACHED DEFAULTS
# =============================================================================

@lru_cache(maxsize=1)
def get_chord_catalog() -> ChordCatalog:
    """The packaged chord library, built on first use."""
    return load_chord_catalog()


@lru_cache(maxsize=1)
def get_progression_styles() -> Tuple[ProgressionStyle, ...]:
    """The packaged progression styles, built on first use."""
    return load_progression_styles()


def get_style(style_id: str, styles: Optional[Sequence[ProgressionStyle]] = None) -> ProgressionStyle:
    """
    Look up a progression style by id.

    Raises:
        ValueError: If no style has that id
    """
    if styles is None:
        styles = get_progression_styles()
    for style in styles:
        if style.id == style_id:
            return style
    valid = [s.id for s in styles]
    raise ValueError(f"Unknown style '{style_id}'. Valid styles are: {valid}")
