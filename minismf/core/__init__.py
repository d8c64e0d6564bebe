"""Core types and constants for minismf."""

from .errors import (
    PitchParseError,
    InvalidFormat,
    UnknownPitchClass,
    InvalidOctave,
    SequenceParseError,
    SetParseError,
)
from .pitch import PitchClass, Pitch, chromatic_offset, convert, parse
from .sequence import PitchSequence, PitchSet, parse_sequence, parse_set
from .note import Note
from .constants import (
    PITCH_NAMES,
    SILENCE_NOTE_NUMBER,
    DEFAULT_VELOCITY,
    DEFAULT_DIVISION,
    DEFAULT_TRACKS,
)

__all__ = [
    "PitchParseError",
    "InvalidFormat",
    "UnknownPitchClass",
    "InvalidOctave",
    "SequenceParseError",
    "SetParseError",
    "PitchClass",
    "Pitch",
    "chromatic_offset",
    "convert",
    "parse",
    "PitchSequence",
    "PitchSet",
    "parse_sequence",
    "parse_set",
    "Note",
    "PITCH_NAMES",
    "SILENCE_NOTE_NUMBER",
    "DEFAULT_VELOCITY",
    "DEFAULT_DIVISION",
    "DEFAULT_TRACKS",
]
