"""Encoding layer - wire form of MIDI events and chunk headers."""

from .events import EventKind, ChannelVoiceMessage, status_nibble, status_byte
from .chunks import MIDIFormat, FileHeader, TrackHeader

__all__ = [
    "EventKind",
    "ChannelVoiceMessage",
    "status_nibble",
    "status_byte",
    "MIDIFormat",
    "FileHeader",
    "TrackHeader",
]
