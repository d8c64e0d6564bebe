"""Channel voice messages - one MIDI event on the wire.

A NoteOn with velocity 0 means the same as a NoteOff, and a status byte equal
to the previous one may be left out (running status). Together these let a
whole melody be written with a single status byte.
"""

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Dict, Optional

from ..core.constants import (
    DEFAULT_CHANNEL,
    MAX_CHANNEL,
    MAX_DELTA_TIME,
    MAX_VELOCITY,
)
from ..core.pitch import Pitch


class EventKind(Enum):
    """Channel message kinds, plus running status (no status byte)."""

    RUNNING_STATUS = "running_status"
    NOTE_OFF = "note_off"
    NOTE_ON = "note_on"
    POLYPHONIC_AFTERTOUCH = "polyphonic_aftertouch"
    CONTROL_CHANGE = "control_change"
    PROGRAM_CHANGE = "program_change"
    AFTERTOUCH = "aftertouch"
    PITCH_WHEEL_CHANGE = "pitch_wheel_change"


# High nibble of the status byte. Running status is 0, below every real nibble.
STATUS_NIBBLES: Dict[EventKind, int] = {
    EventKind.RUNNING_STATUS: 0b0000,
    EventKind.NOTE_OFF: 0b1000,
    EventKind.NOTE_ON: 0b1001,
    EventKind.POLYPHONIC_AFTERTOUCH: 0b1010,
    EventKind.CONTROL_CHANGE: 0b1011,
    EventKind.PROGRAM_CHANGE: 0b1100,
    EventKind.AFTERTOUCH: 0b1101,
    EventKind.PITCH_WHEEL_CHANGE: 0b1110,
}


def status_nibble(kind: EventKind) -> int:
    return STATUS_NIBBLES[kind]


def status_byte(kind: EventKind, channel: int) -> Optional[int]:
    """Status byte for `kind` on `channel`, None for running status."""
    if kind is EventKind.RUNNING_STATUS:
        return None
    return (status_nibble(kind) << 4) | channel


@dataclass(frozen=True)
class ChannelVoiceMessage:
    """Encoded channel voice message.

    Attributes:
        delta_time: Ticks since the previous event (one byte)
        status: Status byte, or None to reuse the previous one
        note: Note number byte
        velocity: Velocity byte (0-127)
    """

    delta_time: int
    status: Optional[int]
    note: int
    velocity: int

    def __post_init__(self):
        if not 0 <= self.delta_time <= MAX_DELTA_TIME:
            raise ValueError(f"delta_time must fit in one byte, got {self.delta_time}")
        if self.status is not None and not 0x80 <= self.status <= 0xFF:
            raise ValueError(f"status must be a status byte (0x80-0xFF), got {self.status}")
        if not 0 <= self.note <= 0xFF:
            raise ValueError(f"note must fit in one byte, got {self.note}")
        if not 0 <= self.velocity <= MAX_VELOCITY:
            raise ValueError(f"velocity must be 0-{MAX_VELOCITY}, got {self.velocity}")

    @classmethod
    def create(
        cls,
        delta_time: int,
        pitch: Pitch,
        velocity: int,
        kind: EventKind,
        channel: int = DEFAULT_CHANNEL,
    ) -> "ChannelVoiceMessage":
        """
        Build a message for a pitch.

        Args:
            delta_time: Ticks since the previous event (unit set by the file's division)
            pitch: Pitch to play or release
            velocity: Velocity (0-127); forced to 0 when the pitch is silence
            kind: EventKind of the message; RUNNING_STATUS omits the status byte
            channel: MIDI channel (0-15)

        Raises:
            ValueError: If channel or velocity is out of range
        """
        if not 0 <= channel <= MAX_CHANNEL:
            raise ValueError(f"channel must be 0-{MAX_CHANNEL}, got {channel}")
        if not 0 <= velocity <= MAX_VELOCITY:
            raise ValueError(f"velocity must be 0-{MAX_VELOCITY}, got {velocity}")

        if pitch.is_silence:
            velocity = 0

        return cls(
            delta_time=delta_time,
            status=status_byte(kind, channel),
            note=pitch.convert() & 0xFF,
            velocity=velocity,
        )

    @property
    def is_running_status(self) -> bool:
        return self.status is None

    @property
    def size(self) -> int:
        """Encoded length in bytes (3 with running status, else 4)."""
        return 3 if self.status is None else 4

    def to_bytes(self) -> bytes:
        if self.status is None:
            return bytes((self.delta_time, self.note, self.velocity))
        return bytes((self.delta_time, self.status, self.note, self.velocity))

    def write_to(self, sink: BinaryIO) -> None:
        """Write delta-time, [status], note and velocity to a binary sink."""
        sink.write(self.to_bytes())
