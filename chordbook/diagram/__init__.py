"""
Diagram Subpackage

    - layout.py: fret window selection and diagram coordinates
"""

from chordbook.diagram.layout import (
    DiagramCanvas,
    DiagramGeometry,
    get_fret_span,
    get_start_fret,
    layout_chord,
)
