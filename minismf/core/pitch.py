"""Pitch model - one playable pitch (or silence) and its MIDI note number.

A pitch is written as '<class>:<octave>', e.g. 'C:4' (middle C), 'Db:5' or
'rest:0'. Pitch classes accept common enharmonic spellings case-insensitively.
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Dict, Optional

from .constants import (
    PAIR_SEPARATOR,
    PITCH_NAMES,
    SILENCE_NAME,
    SILENCE_NOTE_NUMBER,
)
from .errors import InvalidFormat, InvalidOctave, UnknownPitchClass


class PitchClass(Enum):
    """The 12 chromatic pitch classes (sharps canonical) plus silence."""

    C = "C"
    C_SHARP = "C#"
    D = "D"
    D_SHARP = "D#"
    E = "E"
    F = "F"
    F_SHARP = "F#"
    G = "G"
    G_SHARP = "G#"
    A = "A"
    A_SHARP = "A#"
    B = "B"
    SILENCE = SILENCE_NAME

    @property
    def is_silence(self) -> bool:
        return self is PitchClass.SILENCE

    @classmethod
    def parse(cls, text: str) -> "PitchClass":
        """
        Parse a pitch class from any recognized spelling.

        Args:
            text: Spelling such as 'C#', 'Dflat', 'D♭', 'db' or 'rest'

        Returns:
            Matching PitchClass

        Raises:
            UnknownPitchClass: If no spelling matches (case-insensitive)
        """
        try:
            return _SPELLINGS[text.lower()]
        except KeyError:
            raise UnknownPitchClass(text) from None


# Semitones above C, used for note number math
CHROMATIC_OFFSETS: Dict[PitchClass, int] = {
    PitchClass.C: 0,
    PitchClass.C_SHARP: 1,
    PitchClass.D: 2,
    PitchClass.D_SHARP: 3,
    PitchClass.E: 4,
    PitchClass.F: 5,
    PitchClass.F_SHARP: 6,
    PitchClass.G: 7,
    PitchClass.G_SHARP: 8,
    PitchClass.A: 9,
    PitchClass.A_SHARP: 10,
    PitchClass.B: 11,
}

# Position of each class in the pitch ordering; silence sorts last
PITCH_CLASS_ORDINALS: Dict[PitchClass, int] = {
    **CHROMATIC_OFFSETS,
    PitchClass.SILENCE: 12,
}

_SPELLING_GROUPS = (
    (PitchClass.C, ("c", "bsharp", "b#")),
    (PitchClass.C_SHARP, ("csharp", "c#", "dflat", "d♭", "db")),
    (PitchClass.D, ("d",)),
    (PitchClass.D_SHARP, ("dsharp", "d#", "eflat", "e♭", "eb")),
    (PitchClass.E, ("e", "fflat", "f♭", "fb")),
    (PitchClass.F, ("f", "esharp", "e#")),
    (PitchClass.F_SHARP, ("fsharp", "f#", "gflat", "g♭", "gb")),
    (PitchClass.G, ("g",)),
    (PitchClass.G_SHARP, ("gsharp", "g#", "aflat", "a♭", "ab")),
    (PitchClass.A, ("a",)),
    (PitchClass.A_SHARP, ("asharp", "a#", "bflat", "b♭", "bb")),
    (PitchClass.B, ("b", "cflat", "c♭", "cb")),
    (PitchClass.SILENCE, ("rest", "empty")),
)
_SPELLINGS: Dict[str, PitchClass] = {
    name: pitch_class for pitch_class, names in _SPELLING_GROUPS for name in names
}

# Unsigned decimal, as accepted for a 32-bit octave
_OCTAVE_PATTERN = re.compile(r"\+?[0-9]+")
_MAX_OCTAVE = 0xFFFFFFFF


def chromatic_offset(pitch_class: PitchClass) -> int:
    """Semitones above C for a sounding pitch class."""
    return CHROMATIC_OFFSETS[pitch_class]


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """A key on the keyboard: pitch class plus octave.

    Middle C is Pitch(PitchClass.C, 4). The octave is not checked against the
    nominal MIDI range of -1 to 9; out-of-range pitches convert to
    out-of-range note numbers.
    """

    pitch_class: PitchClass
    octave: int

    def convert(self) -> int:
        """MIDI note number (silence is SILENCE_NOTE_NUMBER)."""
        return convert(self)

    @property
    def is_silence(self) -> bool:
        return self.pitch_class.is_silence

    @property
    def name(self) -> str:
        """Scientific pitch name (e.g., 'C4', 'A#3'); 'rest' for silence."""
        if self.is_silence:
            return SILENCE_NAME
        return f"{PITCH_NAMES[chromatic_offset(self.pitch_class)]}{self.octave}"

    @property
    def frequency(self) -> Optional[float]:
        """Equal-tempered frequency in Hz (A4 = 440 Hz), None for silence."""
        if self.is_silence:
            return None
        return 440.0 * (2 ** ((self.convert() - 69) / 12.0))

    def _sort_key(self):
        return (PITCH_CLASS_ORDINALS[self.pitch_class], self.octave)

    def __lt__(self, other):
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return f"{self.pitch_class.value}{PAIR_SEPARATOR}{self.octave}"

    @classmethod
    def parse(cls, text: str) -> "Pitch":
        return parse(text)


def convert(pitch: Pitch) -> int:
    """
    Convert a pitch to its MIDI note number.

    Sounding pitches map to 12 * (octave + 1) + chromatic offset, so C:4 is 60.
    Silence maps to SILENCE_NOTE_NUMBER whatever its octave, a value no real
    note number can take.
    """
    if pitch.is_silence:
        return SILENCE_NOTE_NUMBER
    return 12 * (pitch.octave + 1) + chromatic_offset(pitch.pitch_class)


def parse(text: str) -> Pitch:
    """
    Parse a '<class>:<octave>' pair.

    Args:
        text: Pair such as 'C#:5' or 'rest:0'

    Returns:
        Parsed Pitch

    Raises:
        InvalidFormat: If the text does not split into exactly two parts
        UnknownPitchClass: If the class part is not a recognized spelling
        InvalidOctave: If the octave part is not an unsigned integer
    """
    parts = text.split(PAIR_SEPARATOR)
    if len(parts) != 2:
        raise InvalidFormat(text)

    class_text, octave_text = parts
    pitch_class = PitchClass.parse(class_text)

    if not _OCTAVE_PATTERN.fullmatch(octave_text):
        raise InvalidOctave(octave_text)
    octave = int(octave_text)
    if octave > _MAX_OCTAVE:
        raise InvalidOctave(octave_text)

    return Pitch(pitch_class, octave)
