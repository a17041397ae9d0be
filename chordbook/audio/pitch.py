"""
Pitch Mapper - Chord Shapes to Playback Events

Each sounded string becomes one event whose frequency is the open-string
frequency raised by the fretted number of equal-tempered semitones:

    freq = OPEN_STRING_FREQ[string] * 2 ** (fret / 12)

Muted strings never produce an event. All events of one chord share a
start time, and a progression places chord i at i * BEAT_DURATION.
"""

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

import numpy as np

from chordbook.data.schema import ChordShape, OPEN


# =============================================================================
# CONSTANTS
# =============================================================================

# Standard tuning E2 A2 D3 G3 B3 E4, in Hz
OPEN_STRING_FREQ = (82.41, 110.0, 146.83, 196.0, 246.94, 329.63)

SEMITONES_PER_OCTAVE = 12

# Open strings ring a little quieter than fretted ones
OPEN_GAIN = 0.08
FRETTED_GAIN = 0.12

# Seconds between successive chords of a progression
BEAT_DURATION = 1.4

# Seconds each note sounds before it is stopped
NOTE_LENGTH = 1.5


@dataclass(frozen=True)
class PlaybackEvent:
    """One string of one chord, ready for a tone generator."""
    string_index: int
    frequency: float
    start: float
    gain: float
    duration: float = NOTE_LENGTH


def fret_frequencies(strings: Sequence[int], tuning: Sequence[float] = OPEN_STRING_FREQ) -> np.ndarray:
    """
    Frequency per string for a list of fret values (NaN where muted).
    """
    frets = np.asarray(strings, dtype=float)
    base = np.asarray(tuning, dtype=float)
    freqs = base * np.power(2.0, frets / SEMITONES_PER_OCTAVE)
    return np.where(frets < 0, np.nan, freqs)


def to_playback_events(shape: ChordShape, start_offset: float = 0.0) -> List[PlaybackEvent]:
    """
    Playback events for a chord shape, lowest string first.

    Args:
        shape: The fingering to sound
        start_offset: Start time in seconds shared by every string

    Returns:
        One PlaybackEvent per non-muted string
    """
    freqs = fret_frequencies(shape.strings)
    events = []
    for index, fret in enumerate(shape.strings):
        if fret < 0:
            continue
        events.append(PlaybackEvent(
            string_index=index,
            frequency=float(freqs[index]),
            start=start_offset,
            gain=OPEN_GAIN if fret == OPEN else FRETTED_GAIN,
        ))
    return events


def schedule_progression(
    shapes: Sequence[Optional[ChordShape]],
    beat: float = BEAT_DURATION
) -> List[PlaybackEvent]:
    """
    Events for a whole progression, one chord per beat.

    Slots without a shape stay silent but still take up their beat.
    Every chord except the last is cut at the next beat, so chords never
    overlap.
    Accepts shapes directly or anything with a .shape attribute
    (e.g. ResolvedChord).
    """
    events: List[PlaybackEvent] = []
    last = len(shapes) - 1
    for index, item in enumerate(shapes):
        shape = getattr(item, "shape", item)
        if shape is None:
            continue
        chord = to_playback_events(shape, start_offset=index * beat)
        if index < last:
            chord = [replace(e, duration=min(e.duration, beat)) for e in chord]
        events.extend(chord)
    return events
