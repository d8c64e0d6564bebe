"""SMF chunk headers.

The header chunk ('MThd') is defined by the Standard MIDI File format; the
track header ('MTrk' plus length) is the fixed prefix of a track chunk, kept
separate so the event stream can be written after it.
"""

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

from ..core.constants import (
    HEADER_CHUNK_TYPE,
    HEADER_LENGTH,
    TRACK_CHUNK_TYPE,
)

_HEADER_STRUCT = struct.Struct(">4sIHHH")
_TRACK_HEADER_STRUCT = struct.Struct(">4sI")


class MIDIFormat(IntEnum):
    """SMF format word."""

    FORMAT_0 = 0  # Single track
    FORMAT_1 = 1  # One or more simultaneous tracks
    FORMAT_2 = 2  # One or more independent tracks


@dataclass(frozen=True)
class FileHeader:
    """Header chunk: tag, length 6, format, track count and division."""

    format: MIDIFormat
    tracks: int
    division: int
    chunk_type: bytes = HEADER_CHUNK_TYPE
    length: int = HEADER_LENGTH

    def to_bytes(self) -> bytes:
        return _HEADER_STRUCT.pack(
            self.chunk_type,
            self.length,
            int(self.format),
            self.tracks,
            self.division,
        )

    def write_to(self, sink: BinaryIO) -> None:
        sink.write(self.to_bytes())


@dataclass(frozen=True)
class TrackHeader:
    """Track chunk prefix: tag and the exact byte length of the events."""

    length: int
    chunk_type: bytes = TRACK_CHUNK_TYPE

    def to_bytes(self) -> bytes:
        return _TRACK_HEADER_STRUCT.pack(self.chunk_type, self.length)

    def write_to(self, sink: BinaryIO) -> None:
        sink.write(self.to_bytes())
