"""minismf - smallest-possible Standard MIDI Files for pitch sequences.

Architecture Layers:
    1. core/     - Pitches, sequences and sets, with text parsing
    2. encoding/ - Channel voice messages and chunk headers (wire format)
    3. output/   - File assembly, size prediction, fingerprints, read-back
"""

__version__ = "0.3.0"

# Core layer
from .core import (
    PitchClass,
    Pitch,
    PitchSequence,
    PitchSet,
    Note,
    convert,
    parse,
    parse_sequence,
    parse_set,
    PitchParseError,
    InvalidFormat,
    UnknownPitchClass,
    InvalidOctave,
    SequenceParseError,
    SetParseError,
)

# Encoding layer
from .encoding import (
    EventKind,
    ChannelVoiceMessage,
    MIDIFormat,
    FileHeader,
    TrackHeader,
)

# Output layer
from .output import (
    MIDIFile,
    build_events,
    file_byte_size,
    fingerprint,
    track_byte_size,
    read_messages,
    read_notes,
)

__all__ = [
    # Core
    "PitchClass",
    "Pitch",
    "PitchSequence",
    "PitchSet",
    "Note",
    "convert",
    "parse",
    "parse_sequence",
    "parse_set",
    "PitchParseError",
    "InvalidFormat",
    "UnknownPitchClass",
    "InvalidOctave",
    "SequenceParseError",
    "SetParseError",
    # Encoding
    "EventKind",
    "ChannelVoiceMessage",
    "MIDIFormat",
    "FileHeader",
    "TrackHeader",
    # Output
    "MIDIFile",
    "build_events",
    "file_byte_size",
    "fingerprint",
    "track_byte_size",
    "read_messages",
    "read_notes",
]
