"""Output layer - assemble MIDI files and read them back.

This layer handles:
- Exact size prediction for a sequence
- Event stream and header generation
- Writing to buffers, streams and paths
- Decoding written files for inspection
"""

from .midi import (
    MIDIFile,
    build_events,
    file_byte_size,
    fingerprint,
    track_byte_size,
)
from .reader import DECODE_ERRORS, load_midi, read_messages, read_notes

__all__ = [
    "MIDIFile",
    "build_events",
    "file_byte_size",
    "fingerprint",
    "track_byte_size",
    "DECODE_ERRORS",
    "load_midi",
    "read_messages",
    "read_notes",
]
