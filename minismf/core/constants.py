"""Global constants for minismf."""

# Canonical (sharp) spelling of each chromatic pitch class
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

# Text spelling of silence in "class:octave" pairs
SILENCE_NAME = "rest"

# convert() result for silence, the largest unsigned 32-bit value
SILENCE_NOTE_NUMBER = 0xFFFFFFFF

# Separators for textual input
PAIR_SEPARATOR = ":"
LIST_SEPARATOR = ","

# MIDI ranges
MAX_CHANNEL = 15
MAX_VELOCITY = 127
MAX_DELTA_TIME = 0xFF

# Encoder defaults
DEFAULT_VELOCITY = 0x64
DEFAULT_CHANNEL = 0
DEFAULT_TRACKS = 1
DEFAULT_DIVISION = 1  # ticks per quarter note

# Chunk layout
HEADER_CHUNK_TYPE = b"MThd"  # 0x4d 0x54 0x68 0x64
TRACK_CHUNK_TYPE = b"MTrk"  # 0x4d 0x54 0x72 0x6b
HEADER_LENGTH = 6
HEADER_CHUNK_SIZE = 14  # tag + length + format + tracks + division
TRACK_HEADER_SIZE = 8  # tag + length
