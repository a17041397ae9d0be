"""
Schema definitions for the chord and progression catalogs.

This module defines the Pydantic models that validate the static catalog
data shipped with the package. Every record in chords.yaml and styles.yaml
must conform to these schemas; records are frozen once built.

Fret values are listed low string to high string (E A D G B e):
    -1 = muted string (not sounded)
     0 = open string
     n = fretted at fret n
"""

from typing import List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# VALID OPTIONS
# =============================================================================

NUM_STRINGS = 6

# Standard tuning, low to high
STRING_NAMES = ["E", "A", "D", "G", "B", "e"]

MUTED = -1
OPEN = 0

# Highest finger number (1 = index ... 4 = pinky, 0 = open/none)
MAX_FINGER = 4

ChordQuality = Literal["major", "minor", "dominant", "maj7", "other"]


# =============================================================================
# CHORD SHAPE
# =============================================================================

class ChordShape(BaseModel):
    """
    A single fingering in the chord library.

    Attributes:
        id: Unique identifier (e.g. "c-major")
        name: Chord symbol used for lookups (e.g. "C", "F#m", "Cmaj7")
        label: Human-readable label (e.g. "C major")
        strings: Six fret values, low string first
        fingers: Optional finger hints per string (None where unused)
        quality: One of ChordQuality
        tags: Free-text descriptive tags
        start_fret: Optional explicit first fret of the diagram window

    Example:
        >>> shape = ChordShape(
        ...     id="am",
        ...     name="Am",
        ...     label="A minor",
        ...     strings=[-1, 0, 2, 2, 1, 0],
        ...     fingers=[None, 0, 2, 3, 1, 0],
        ...     quality="minor",
        ...     tags=["ballad", "open"],
        ... )
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Unique identifier for this shape",
        examples=["c-major", "fsharp-minor"]
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Chord symbol matched by the shape resolver",
        examples=["C", "F#m", "G7"]
    )

    label: str = Field(
        ...,
        min_length=1,
        description="Display label",
        examples=["C major", "F# minor"]
    )

    strings: Tuple[int, ...] = Field(
        ...,
        description="Fret value per string, low to high",
        examples=[[-1, 3, 2, 0, 1, 0]]
    )

    fingers: Optional[Tuple[Optional[int], ...]] = Field(
        default=None,
        description="Finger hint per string, parallel to strings",
    )

    quality: ChordQuality = Field(
        ...,
        description="Chord quality",
        examples=["major", "minor"]
    )

    tags: Tuple[str, ...] = Field(
        default=(),
        description="Descriptive tags",
        examples=[["campfire", "open"]]
    )

    start_fret: Optional[int] = Field(
        default=None,
        ge=1,
        description="Explicit first fret shown in the diagram",
    )

    # ---------------------------
    # Custom Validators
    # ---------------------------

    @field_validator('strings')
    @classmethod
    def validate_strings(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Ensure there is exactly one fret value >= -1 per string"""
        if len(v) != NUM_STRINGS:
            raise ValueError(
                f"A shape needs exactly {NUM_STRINGS} fret values. "
                f"Got {len(v)}: {list(v)}"
            )
        bad = [fret for fret in v if fret < MUTED]
        if bad:
            raise ValueError(f"Fret values must be >= {MUTED}. Got: {bad}")
        return v

    @field_validator('fingers')
    @classmethod
    def validate_fingers(cls, v: Optional[Tuple[Optional[int], ...]]) -> Optional[Tuple[Optional[int], ...]]:
        """Ensure finger hints are parallel to strings and in range"""
        if v is None:
            return v
        if len(v) != NUM_STRINGS:
            raise ValueError(
                f"Finger hints must have {NUM_STRINGS} entries. Got {len(v)}"
            )
        bad = [f for f in v if f is not None and not 0 <= f <= MAX_FINGER]
        if bad:
            raise ValueError(f"Finger numbers must be 0-{MAX_FINGER}. Got: {bad}")
        return v

    # ---------------------------
    # Convenience accessors
    # ---------------------------

    def finger_for(self, string_index: int) -> Optional[int]:
        if self.fingers is None:
            return None
        return self.fingers[string_index]


# =============================================================================
# PROGRESSION STYLE
# =============================================================================

class ProgressionStyle(BaseModel):
    """
    A mood/style grouping of candidate progressions.

    Each pattern is an ordered list of roman-numeral degree tokens
    such as ["I", "V", "vi", "IV"].
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, examples=["jpop", "ballad"])
    label: str = Field(..., min_length=1, examples=["J-POP Hook"])
    accent: str = Field(default="", description="Visual accent token for UIs")
    description: str = Field(default="")
    patterns: Tuple[Tuple[str, ...], ...] = Field(
        ...,
        min_length=1,
        description="Candidate degree patterns",
        examples=[[["I", "V", "vi", "IV"]]]
    )

    @field_validator('patterns')
    @classmethod
    def validate_patterns(cls, v: Tuple[Tuple[str, ...], ...]) -> Tuple[Tuple[str, ...], ...]:
        """Ensure every pattern has at least one non-blank token"""
        for pattern in v:
            if not pattern:
                raise ValueError("Patterns must contain at least one degree token")
            if any(not token.strip() for token in pattern):
                raise ValueError(f"Blank degree token in pattern {list(pattern)}")
        return v


class CatalogFile(BaseModel):
    """Top-level layout of a chord catalog YAML document."""

    chords: List[ChordShape]

    @model_validator(mode='after')
    def check_unique(self) -> "CatalogFile":
        ids = [c.id for c in self.chords]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"Duplicate chord ids: {dupes}")
        return self


class StylesFile(BaseModel):
    """Top-level layout of a progression styles YAML document."""

    styles: List[ProgressionStyle]

    @model_validator(mode='after')
    def check_unique(self) -> "StylesFile":
        ids = [s.id for s in self.styles]
        dupes = sorted({i for i in ids if ids.count(i) > 1})
        if dupes:
            raise ValueError(f"Duplicate style ids: {dupes}")
        return self
