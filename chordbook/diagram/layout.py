"""
Diagram Layout Engine - Chord Shapes to Drawable Geometry

Turns a ChordShape's raw fret values into coordinates for a horizontal
fretboard diagram: strings run left to right (low E at the bottom) and
fret boundaries are vertical lines.

    2fr                            ← offset label when start_fret > 1
     o ‖───┼───┼───┤   e
       ‖─●─┼───┼───┤   B           ● fretted (finger hint inside)
     x ‖───┼───┼───┤   ...         o open, x muted, ‖ nut

The window shows at least three frets and never starts below fret 1.
Every valid shape produces a geometry; nothing here raises.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from chordbook.data.schema import ChordShape, MUTED, OPEN


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_FRET_SPAN = 3

# A window start at or below this max fret keeps the diagram at the nut
NUT_POSITION_MAX = 4

MARKER_OPEN = "open"
MARKER_MUTED = "muted"
MARKER_FRETTED = "fretted"


class DiagramCanvas(BaseModel):
    """Canvas dimensions and stroke widths for a chord diagram."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(default=220, gt=0)
    height: float = Field(default=120, gt=0)
    padding_x: float = Field(default=20, ge=0)
    padding_y: float = Field(default=18, ge=0)
    # Open/mute markers sit this far left of the first fret line
    marker_offset: float = Field(default=10, ge=0)
    nut_thickness: float = Field(default=4, gt=0)
    fret_thickness: float = Field(default=2, gt=0)

    @property
    def inner_width(self) -> float:
        return self.width - self.padding_x * 2

    @property
    def inner_height(self) -> float:
        return self.height - self.padding_y * 2


DEFAULT_CANVAS = DiagramCanvas()


# =============================================================================
# GEOMETRY DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class StringMarker:
    """What to draw for one string: ring, cross or filled dot."""
    string_index: int
    kind: str
    fret: int
    x: float
    y: float
    finger: Optional[int] = None
    in_window: bool = True


@dataclass(frozen=True)
class FretLine:
    """A vertical fret boundary; position 0 is the left edge of the window."""
    position: int
    x: float
    thickness: float


@dataclass(frozen=True)
class Barre:
    """One finger held across several strings at the same fret."""
    fret: int
    finger: int
    low_string: int
    high_string: int
    x: float
    y_start: float
    y_end: float


@dataclass(frozen=True)
class DiagramGeometry:
    start_fret: int
    fret_span: int
    markers: Tuple[StringMarker, ...]
    fret_lines: Tuple[FretLine, ...]
    string_lanes: Tuple[float, ...]
    has_nut: bool
    fret_label: Optional[str]
    barres: Tuple[Barre, ...] = ()
    width: float = DEFAULT_CANVAS.width
    height: float = DEFAULT_CANVAS.height

    def marker_for(self, string_index: int) -> StringMarker:
        return self.markers[string_index]


# =============================================================================
# FRET WINDOW
# =============================================================================

def _max_fret(strings: Sequence[int]) -> int:
    positive = [fret for fret in strings if fret > 0]
    return max(positive) if positive else 1


def get_start_fret(strings: Sequence[int], explicit: Optional[int] = None) -> int:
    """
    First fret of the diagram window.

    Shapes that stay within the first four frets sit at the nut; higher
    shapes start at their lowest fretted position. An explicit start is
    used as given. Either way the window is then pulled up so the highest
    fret is no more than three frets past the start, and floored at 1.
    """
    positive = [fret for fret in strings if fret > 0]
    max_fret = _max_fret(strings)

    if explicit is not None:
        start = explicit
    elif max_fret <= NUT_POSITION_MAX:
        start = 1
    else:
        start = min(positive)

    if start + MIN_FRET_SPAN < max_fret:
        start = max_fret - MIN_FRET_SPAN
    return max(start, 1)


def get_fret_span(strings: Sequence[int], start_fret: int) -> int:
    """Number of frets shown, never fewer than MIN_FRET_SPAN."""
    return max(MIN_FRET_SPAN, _max_fret(strings) - start_fret)


# =============================================================================
# LAYOUT
# =============================================================================

def _string_lanes(num_strings: int, canvas: DiagramCanvas) -> List[float]:
    """y of each string's lane; the lowest string is drawn at the bottom."""
    step = canvas.inner_height / (num_strings - 1)
    return [
        canvas.padding_y + (num_strings - 1 - index) * step
        for index in range(num_strings)
    ]


def _fret_lines(start_fret: int, fret_span: int, canvas: DiagramCanvas) -> List[FretLine]:
    lines = []
    for position in range(fret_span + 1):
        x = canvas.padding_x + (position / fret_span) * canvas.inner_width
        is_nut = position == 0 and start_fret == 1
        thickness = canvas.nut_thickness if is_nut else canvas.fret_thickness
        lines.append(FretLine(position=position, x=x, thickness=thickness))
    return lines


def _fret_x(fret: int, start_fret: int, fret_span: int, canvas: DiagramCanvas) -> float:
    """Centre of the cell between fret boundaries fret-1 and fret."""
    return canvas.padding_x + ((fret - start_fret + 0.5) / fret_span) * canvas.inner_width


def _find_barres(
    shape: ChordShape,
    start_fret: int,
    fret_span: int,
    lanes: Sequence[float],
    canvas: DiagramCanvas
) -> List[Barre]:
    if shape.fingers is None:
        return []

    groups: Dict[Tuple[int, int], List[int]] = {}
    for index, fret in enumerate(shape.strings):
        finger = shape.fingers[index]
        if fret > 0 and finger:
            groups.setdefault((finger, fret), []).append(index)

    barres = []
    for (finger, fret), strings in sorted(groups.items(), key=lambda item: (item[0][1], item[0][0])):
        if len(strings) < 2:
            continue
        low, high = min(strings), max(strings)
        barres.append(Barre(
            fret=fret,
            finger=finger,
            low_string=low,
            high_string=high,
            x=_fret_x(fret, start_fret, fret_span, canvas),
            y_start=lanes[low],
            y_end=lanes[high],
        ))
    return barres


def layout_chord(shape: ChordShape, canvas: Optional[DiagramCanvas] = None) -> DiagramGeometry:
    """
    Compute the diagram geometry for a chord shape.

    Args:
        shape: The fingering to lay out
        canvas: Canvas dimensions (DEFAULT_CANVAS when omitted)

    Returns:
        DiagramGeometry with one marker per string, span+1 fret lines,
        the "Nfr" offset label when the window starts above fret 1,
        and any barres implied by the finger hints
    """
    if canvas is None:
        canvas = DEFAULT_CANVAS

    strings = shape.strings
    start_fret = get_start_fret(strings, shape.start_fret)
    fret_span = get_fret_span(strings, start_fret)
    lanes = _string_lanes(len(strings), canvas)
    nut_side_x = canvas.padding_x - canvas.marker_offset

    markers = []
    for index, fret in enumerate(strings):
        y = lanes[index]
        if fret == OPEN:
            markers.append(StringMarker(index, MARKER_OPEN, fret, nut_side_x, y))
        elif fret == MUTED:
            markers.append(StringMarker(index, MARKER_MUTED, fret, nut_side_x, y))
        else:
            finger = shape.finger_for(index) or None
            in_window = start_fret <= fret <= start_fret + fret_span - 1
            markers.append(StringMarker(
                string_index=index,
                kind=MARKER_FRETTED,
                fret=fret,
                x=_fret_x(fret, start_fret, fret_span, canvas),
                y=y,
                finger=finger,
                in_window=in_window,
            ))

    return DiagramGeometry(
        start_fret=start_fret,
        fret_span=fret_span,
        markers=tuple(markers),
        fret_lines=tuple(_fret_lines(start_fret, fret_span, canvas)),
        string_lanes=tuple(lanes),
        has_nut=start_fret == 1,
        fret_label=f"{start_fret}fr" if start_fret > 1 else None,
        barres=tuple(_find_barres(shape, start_fret, fret_span, lanes, canvas)),
        width=canvas.width,
        height=canvas.height,
    )
