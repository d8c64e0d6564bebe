"""MIDI file assembly - smallest single-track file for a pitch sequence.

Every pitch becomes an attack followed, `division` ticks later, by a release.
Only the first attack carries a status byte (NoteOn, channel 0); every other
event relies on running status, and releases are NoteOn with velocity 0:

    first attack   delta status note velocity   4 bytes
    later attacks  delta        note velocity   3 bytes
    releases       delta        note 0          3 bytes

so a track of n pitches is 4 + 3(n - 1) + 3n = 6n + 1 bytes. Changing the
event layout in build_events() means re-deriving track_byte_size().
"""

import io
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterable, List, Union

from ..core import Pitch, PitchSequence, parse_sequence
from ..core.constants import (
    DEFAULT_CHANNEL,
    DEFAULT_DIVISION,
    DEFAULT_TRACKS,
    DEFAULT_VELOCITY,
    HEADER_CHUNK_SIZE,
    MAX_DELTA_TIME,
    TRACK_HEADER_SIZE,
)
from ..encoding import (
    ChannelVoiceMessage,
    EventKind,
    FileHeader,
    MIDIFormat,
    TrackHeader,
)


def track_byte_size(note_count: int) -> int:
    """Size in bytes of the event stream for `note_count` pitches."""
    return 6 * note_count + 1


def file_byte_size(note_count: int) -> int:
    """Size in bytes of a whole file for `note_count` pitches."""
    return HEADER_CHUNK_SIZE + TRACK_HEADER_SIZE + track_byte_size(note_count)


def build_events(
    sequence: Iterable[Pitch],
    division: int = DEFAULT_DIVISION,
    velocity: int = DEFAULT_VELOCITY,
) -> List[ChannelVoiceMessage]:
    """
    Build the ordered attack/release events for a sequence.

    Args:
        sequence: Pitches in playing order
        division: Ticks each pitch is held; only the low byte is used
        velocity: Attack velocity (silence always attacks at 0)

    Returns:
        Two messages per pitch, attack then release
    """
    delta_time = division & MAX_DELTA_TIME
    if delta_time != division:
        warnings.warn(
            f"division {division} does not fit a one-byte delta-time, "
            f"notes will last {delta_time} ticks"
        )

    events = []
    for index, pitch in enumerate(sequence):
        kind = EventKind.NOTE_ON if index == 0 else EventKind.RUNNING_STATUS
        events.append(
            ChannelVoiceMessage.create(0, pitch, velocity, kind, DEFAULT_CHANNEL)
        )
        events.append(
            ChannelVoiceMessage.create(
                delta_time, pitch, 0, EventKind.RUNNING_STATUS, DEFAULT_CHANNEL
            )
        )
    return events


def fingerprint(sequence: Iterable[Pitch]) -> str:
    """
    Lookup key for a sequence: its note numbers in decimal, concatenated.

    Distinct sequences of equal length get distinct keys as long as their
    note numbers have the same digit count at each position. Without a
    separator, [1, 23] and [12, 3] both give '123'.
    """
    return "".join(str(pitch.convert()) for pitch in sequence)


@dataclass(frozen=True)
class MIDIFile:
    """Single-track, single-channel MIDI file for a pitch sequence.

    Attributes:
        sequence: Pitches to play, one `division` of ticks each (not empty)
        format: SMF format (FORMAT_0 for a single track)
        tracks: Track count written to the header
        division: Ticks per quarter note

    Raises:
        ValueError: If the sequence is empty
    """

    sequence: PitchSequence
    format: MIDIFormat = MIDIFormat.FORMAT_0
    tracks: int = DEFAULT_TRACKS
    division: int = DEFAULT_DIVISION

    def __post_init__(self):
        if not isinstance(self.sequence, PitchSequence):
            object.__setattr__(self, "sequence", PitchSequence(self.sequence))
        object.__setattr__(self, "format", MIDIFormat(self.format))
        # 6n + 1 only describes a track with at least one note
        if not self.sequence:
            raise ValueError("MIDIFile needs at least one pitch")

    @classmethod
    def from_text(
        cls,
        text: str,
        format: MIDIFormat = MIDIFormat.FORMAT_0,
        tracks: int = DEFAULT_TRACKS,
        division: int = DEFAULT_DIVISION,
    ) -> "MIDIFile":
        """Parse 'C:4,D:4,...' and build a file from it."""
        return cls(parse_sequence(text), format, tracks, division)

    def fingerprint(self) -> str:
        return fingerprint(self.sequence)

    def header(self) -> FileHeader:
        return FileHeader(self.format, self.tracks, self.division)

    def track_size(self) -> int:
        return track_byte_size(len(self.sequence))

    def track_header(self) -> TrackHeader:
        return TrackHeader(self.track_size())

    def events(self) -> List[ChannelVoiceMessage]:
        return build_events(self.sequence, self.division)

    def size(self) -> int:
        """Size of the file in bytes once written."""
        return file_byte_size(len(self.sequence))

    def write_to(self, sink: BinaryIO) -> None:
        """
        Write the whole file to a binary sink.

        Header chunk, track header, then every event in order. A failing
        sink leaves whatever was already written in place.
        """
        self.header().write_to(sink)
        self.track_header().write_to(sink)
        for event in self.events():
            event.write_to(sink)

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        self.write_to(buffer)
        return buffer.getvalue()

    def write_file(self, path: Union[str, Path]) -> None:
        """Write the file to `path`, replacing any existing file."""
        with open(path, "wb") as f:
            self.write_to(f)
