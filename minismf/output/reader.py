"""Read generated files back through standard MIDI parsers.

Used to inspect what a player will actually see. Files holding silence or
out-of-range pitches have note bytes of 0x80 and above, which parsers reject;
their errors are passed through unchanged.
"""

import io
from pathlib import Path
from typing import BinaryIO, List, Union

import mido
import pretty_midi

from ..core import Note

MIDISource = Union[bytes, str, Path, BinaryIO]

# What mido raises on truncated chunks or stray status bytes in note data
DECODE_ERRORS = (OSError, EOFError, ValueError, IndexError, KeyError)


def _open(source: MIDISource) -> Union[str, BinaryIO]:
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(source)
    if isinstance(source, Path):
        return str(source)
    return source


def load_midi(source: MIDISource) -> mido.MidiFile:
    """Parse a MIDI file from bytes, a path or a binary stream."""
    handle = _open(source)
    if isinstance(handle, str):
        return mido.MidiFile(handle)
    return mido.MidiFile(file=handle)


def read_messages(source: MIDISource) -> List[mido.Message]:
    """
    Decode the channel messages of a file, in playing order.

    Running status is expanded by the parser, so every message carries its
    type and channel. Releases stay 'note_on' messages with velocity 0.
    """
    midi = load_midi(source)
    return [msg for msg in mido.merge_tracks(midi.tracks) if not msg.is_meta]


def read_notes(source: MIDISource) -> List[Note]:
    """
    Decode a file into timed notes.

    Times are in seconds at the reader's default tempo (120 BPM), since no
    tempo event is written.
    """
    midi = pretty_midi.PrettyMIDI(_open(source))

    notes = [
        Note(
            pitch=midi_note.pitch,
            onset=float(midi_note.start),
            offset=float(midi_note.end),
            velocity=midi_note.velocity,
        )
        for instrument in midi.instruments
        for midi_note in instrument.notes
    ]
    notes.sort(key=lambda n: (n.onset, n.pitch))
    return notes
