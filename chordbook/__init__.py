"""
chordbook - Guitar Chord Diagrams and Progression Generator

Looks up chord fingerings, generates short progressions in a key and
style, lays each chord out as a fretboard diagram and maps it to
playback frequencies.

Subpackages:
    - chordbook.data: Chord/style schemas and the packaged catalogs
    - chordbook.rules: Roman numerals, shape lookup, progression generation
    - chordbook.diagram: Fret window and diagram geometry
    - chordbook.audio: Pitch mapping and tone synthesis
    - chordbook.app: Text rendering and CLI

Example usage:
    from chordbook.data import get_style
    from chordbook.rules import generate_progression

    chords = generate_progression(get_style("jpop"), "C")
    print([c.name for c in chords])   # ['C', 'G', 'Am', 'F']
"""

__version__ = "0.1.0"
