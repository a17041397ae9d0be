"""
Synth Module - Rendering Playback Events to Audio

A minimal tone generator for previewing chords: every PlaybackEvent is a
sine oscillator whose gain ramps exponentially from its velocity down to
near silence over DECAY_TIME, and which stops after its duration.
"""

from pathlib import Path
from typing import Sequence, Union
import logging
import wave

import numpy as np

from chordbook.audio.pitch import PlaybackEvent


logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

SAMPLE_RATE = 44100

# Seconds for the gain to fall to FLOOR_GAIN
DECAY_TIME = 1.4
FLOOR_GAIN = 0.0001

PCM_MAX = 32767


def envelope(gain: float, n_samples: int, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Exponential ramp gain → FLOOR_GAIN over DECAY_TIME, then held."""
    t = np.arange(n_samples) / sample_rate
    ratio = FLOOR_GAIN / gain
    progress = np.minimum(t / DECAY_TIME, 1.0)
    return gain * np.power(ratio, progress)


def render_events(events: Sequence[PlaybackEvent], sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Mix a set of events into one mono float32 buffer.

    The buffer is long enough for the last event to finish. An empty
    event list renders to an empty buffer.
    """
    if not events:
        return np.zeros(0, dtype=np.float32)

    end = max(event.start + event.duration for event in events)
    buffer = np.zeros(int(np.ceil(end * sample_rate)), dtype=np.float64)

    for event in events:
        offset = int(round(event.start * sample_rate))
        n_samples = min(int(event.duration * sample_rate), len(buffer) - offset)
        if n_samples <= 0 or event.gain <= 0:
            continue
        t = np.arange(n_samples) / sample_rate
        tone = np.sin(2 * np.pi * event.frequency * t)
        buffer[offset:offset + n_samples] += tone * envelope(event.gain, n_samples, sample_rate)

    logger.debug("Rendered %d events into %.2fs of audio", len(events), len(buffer) / sample_rate)
    return buffer.astype(np.float32)


def write_wav(samples: np.ndarray, path: Union[str, Path], sample_rate: int = SAMPLE_RATE) -> Path:
    """
    Write mono samples as 16-bit PCM.

    Samples are only scaled down when they would clip.
    """
    path = Path(path)
    data = np.asarray(samples, dtype=np.float64)
    peak = float(np.max(np.abs(data))) if data.size else 0.0
    if peak > 1.0:
        data = data / peak

    pcm = (np.clip(data, -1.0, 1.0) * PCM_MAX).astype("<i2")
    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        wf.writeframes(pcm.tobytes())

    logger.info("Wrote %s (%d samples)", path, len(pcm))
    return path
