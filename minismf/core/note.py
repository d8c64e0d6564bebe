"""Note data class - a timed note as read back from a MIDI file."""

from dataclasses import dataclass

from .constants import PITCH_NAMES


@dataclass
class Note:
    """A sounding note decoded from a file."""

    pitch: int  # MIDI note number (0-127)
    onset: float  # Start time in seconds
    offset: float  # End time in seconds
    velocity: int = 64  # MIDI velocity (0-127)

    @property
    def duration(self) -> float:
        """Note duration in seconds."""
        return self.offset - self.onset

    @property
    def pitch_name(self) -> str:
        """Get note name (e.g., 'C4', 'A#3')."""
        octave = (self.pitch // 12) - 1
        name = PITCH_NAMES[self.pitch % 12]
        return f"{name}{octave}"
