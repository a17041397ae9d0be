"""
Audio Subpackage

    - pitch.py: fret values → frequencies and playback timing
    - synth.py: sine rendering of playback events and WAV export
"""

from chordbook.audio.pitch import (
    BEAT_DURATION,
    OPEN_STRING_FREQ,
    PlaybackEvent,
    schedule_progression,
    to_playback_events,
)
from chordbook.audio.synth import render_events, write_wav
