"""
Text Rendering - Chord Diagrams and Progression Sheets for the Terminal

A plain-text drawing surface for DiagramGeometry. The high e string is
printed on top, as a player looks down at the neck:

    A minor
    e o ‖---|---|---|
    B   ‖-1-|---|---|
    G   ‖---|-3-|---|
    D   ‖---|-2-|---|
    A o ‖---|---|---|
    E x ‖---|---|---|
"""

from typing import List, Optional, Sequence

from chordbook.data.schema import ChordShape, ProgressionStyle, STRING_NAMES
from chordbook.diagram.layout import (
    DiagramGeometry,
    MARKER_FRETTED,
    MARKER_MUTED,
    MARKER_OPEN,
    layout_chord,
)
from chordbook.rules.harmony import CHROMATIC_SCALE, get_diatonic_chords
from chordbook.rules.progression import ResolvedChord, degrees_of


NUT = "‖"
FRET = "|"
FRETTED_DOT = "*"
SHEET_WIDTH = 50

MISSING_SHAPE_MESSAGE = "Not in the chord library. Try another key."


# =============================================================================
# CHORD DIAGRAM
# =============================================================================

def _string_row(geometry: DiagramGeometry, string_index: int) -> str:
    marker = geometry.marker_for(string_index)
    name = STRING_NAMES[string_index] if string_index < len(STRING_NAMES) else str(string_index)

    if marker.kind == MARKER_OPEN:
        prefix = "o"
    elif marker.kind == MARKER_MUTED:
        prefix = "x"
    else:
        prefix = " "

    cells = ["-"] * geometry.fret_span
    suffix = ""
    if marker.kind == MARKER_FRETTED:
        if marker.in_window:
            cells[marker.fret - geometry.start_fret] = str(marker.finger) if marker.finger else FRETTED_DOT
        else:
            suffix = f"  ({marker.fret}fr)"

    body = "".join(f"-{cell}-{FRET}" for cell in cells)
    left = NUT if geometry.has_nut else FRET
    return f"{name} {prefix} {left}{body}{suffix}"


def render_diagram(shape: ChordShape, geometry: Optional[DiagramGeometry] = None) -> str:
    """Draw a chord shape as a text fretboard diagram."""
    if geometry is None:
        geometry = layout_chord(shape)

    lines = [shape.label]
    if geometry.fret_label:
        lines.append("    " + geometry.fret_label)
    for index in reversed(range(len(geometry.markers))):
        lines.append(_string_row(geometry, index))

    for barre in geometry.barres:
        low = STRING_NAMES[barre.low_string]
        high = STRING_NAMES[barre.high_string]
        lines.append(f"barre: finger {barre.finger} at fret {barre.fret} ({low}-{high})")

    return "\n".join(lines)


# =============================================================================
# PROGRESSION SHEET
# =============================================================================

def _boxed(text: str) -> str:
    return f"║ {text}".ljust(SHEET_WIDTH + 1) + "║"


def format_progression_sheet(
    style: ProgressionStyle,
    key: str,
    progression: Sequence[ResolvedChord]
) -> str:
    """Format a generated progression as a chord sheet with diagrams."""
    lines: List[str] = []
    lines.append("╔" + "═" * SHEET_WIDTH + "╗")
    lines.append("║" + " PROGRESSION ".center(SHEET_WIDTH) + "║")
    lines.append("╠" + "═" * SHEET_WIDTH + "╣")

    lines.append(_boxed(f"Style: {style.label}"))
    lines.append(_boxed(f"Key: {key}"))
    lines.append("╠" + "─" * SHEET_WIDTH + "╣")

    lines.append(_boxed("Degrees: " + " — ".join(degrees_of(progression))))
    lines.append(_boxed("Chords:  " + " → ".join(chord.name for chord in progression)))
    if key in CHROMATIC_SCALE:
        lines.append(_boxed("Diatonic: " + " ".join(get_diatonic_chords(key))))
    lines.append("╚" + "═" * SHEET_WIDTH + "╝")

    for chord in progression:
        lines.append("")
        lines.append(f"[{chord.degree}] {chord.name}")
        if chord.shape is None:
            lines.append(f"  {MISSING_SHAPE_MESSAGE}")
        else:
            lines.append(render_diagram(chord.shape))

    return "\n".join(lines)
