"""Tests for MIDI file assembly, size prediction and fingerprints."""

import io
import warnings

import numpy as np
import pytest
from pathlib import Path

# Add package root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from minismf.core import Pitch, PitchClass, PitchSequence, parse_sequence
from minismf.encoding import MIDIFormat
from minismf.output import (
    MIDIFile,
    build_events,
    file_byte_size,
    fingerprint,
    track_byte_size,
)

ALL_CLASSES = list(PitchClass)


def random_sequence(rng, length, max_octave=9):
    """Random pitches (silence included) from a numpy generator."""
    return PitchSequence(
        Pitch(ALL_CLASSES[int(c)], int(o))
        for c, o in zip(
            rng.integers(0, len(ALL_CLASSES), size=length),
            rng.integers(0, max_octave + 1, size=length),
        )
    )


class TestSizes:
    """Tests for the closed-form size formulas."""

    def test_track_size_formula(self):
        for n in range(200):
            assert track_byte_size(n) == 6 * n + 1

    def test_file_size_formula(self):
        for n in range(200):
            assert file_byte_size(n) == 22 + track_byte_size(n)

    def test_known_sizes(self):
        assert file_byte_size(1) == 29
        assert file_byte_size(3) == 41
        assert file_byte_size(12) == 95

    def test_written_bytes_match_prediction(self):
        rng = np.random.default_rng(42)
        for length in list(range(1, 40)) + [255, 1000]:
            midi_file = MIDIFile(random_sequence(rng, length))
            data = midi_file.to_bytes()
            assert len(data) == file_byte_size(length)
            assert len(data) == midi_file.size()

    def test_track_length_field_matches_event_bytes(self):
        rng = np.random.default_rng(7)
        for length in (1, 2, 5, 64):
            data = MIDIFile(random_sequence(rng, length)).to_bytes()
            declared = int.from_bytes(data[18:22], "big")
            assert declared == len(data) - 22
            assert declared == track_byte_size(length)


class TestBuildEvents:
    """Tests for the attack/release event stream."""

    def test_two_events_per_pitch(self):
        events = build_events(parse_sequence("C:4,D:4,E:4,F:4"), 1)
        assert len(events) == 8

    def test_single_explicit_status(self):
        rng = np.random.default_rng(3)
        events = build_events(random_sequence(rng, 50), 1)
        explicit = [e for e in events if e.status is not None]
        assert explicit == [events[0]]
        assert events[0].status == 0x90

    def test_attacks_and_releases(self):
        events = build_events(parse_sequence("C:4,D:4"), 4)
        attacks, releases = events[0::2], events[1::2]
        assert [e.delta_time for e in attacks] == [0, 0]
        assert [e.velocity for e in attacks] == [0x64, 0x64]
        assert [e.delta_time for e in releases] == [4, 4]
        assert [e.velocity for e in releases] == [0, 0]
        assert [e.note for e in events] == [60, 60, 62, 62]

    def test_silence_attack_is_silent(self):
        events = build_events(parse_sequence("rest:0,C:4"), 1)
        assert events[0].velocity == 0
        assert events[0].status == 0x90
        assert events[2].velocity == 0x64

    def test_custom_velocity(self):
        events = build_events(parse_sequence("C:4"), 1, velocity=80)
        assert events[0].velocity == 80

    def test_large_division_truncates_with_warning(self):
        with pytest.warns(UserWarning, match="division 300"):
            events = build_events(parse_sequence("C:4"), 300)
        assert events[1].delta_time == 300 & 0xFF

    def test_division_in_range_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            build_events(parse_sequence("C:4"), 255)


class TestMIDIFileBytes:
    """Byte-exact checks of whole files."""

    def test_single_note(self):
        midi_file = MIDIFile.from_text("C:4", MIDIFormat.FORMAT_0, 1, 1)
        data = midi_file.to_bytes()
        assert midi_file.size() == 29
        assert data[:14] == b"MThd\x00\x00\x00\x06\x00\x00\x00\x01\x00\x01"
        assert data[14:22] == b"MTrk\x00\x00\x00\x07"
        assert data[22:26] == bytes([0x00, 0x90, 0x3C, 0x64])
        assert data[26:29] == bytes([0x01, 0x3C, 0x00])
        assert len(data) == 29

    def test_three_notes(self):
        midi_file = MIDIFile(parse_sequence("C:4,D:4,E:4"))
        data = midi_file.to_bytes()
        assert midi_file.size() == 41
        assert data[22:] == bytes([
            0x00, 0x90, 0x3C, 0x64,
            0x01, 0x3C, 0x00,
            0x00, 0x3E, 0x64,
            0x01, 0x3E, 0x00,
            0x00, 0x40, 0x64,
            0x01, 0x40, 0x00,
        ])

    def test_header_fields(self):
        midi_file = MIDIFile(parse_sequence("C:4"), MIDIFormat.FORMAT_1, tracks=3, division=96)
        data = midi_file.to_bytes()
        assert data[8:14] == b"\x00\x01\x00\x03\x00\x60"
        assert data[26] == 96

    def test_int_format_accepted(self):
        assert MIDIFile(parse_sequence("C:4"), 2).format is MIDIFormat.FORMAT_2

    def test_list_of_pitches_accepted(self):
        midi_file = MIDIFile([Pitch(PitchClass.C, 4)])
        assert isinstance(midi_file.sequence, PitchSequence)
        assert midi_file.to_bytes() == MIDIFile.from_text("C:4").to_bytes()

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValueError, match="at least one pitch"):
            MIDIFile(PitchSequence([]))

    def test_frozen(self):
        midi_file = MIDIFile.from_text("C:4")
        with pytest.raises(AttributeError):
            midi_file.division = 2

    def test_write_to_stream(self):
        midi_file = MIDIFile.from_text("C:4,G:4")
        buffer = io.BytesIO()
        midi_file.write_to(buffer)
        assert buffer.getvalue() == midi_file.to_bytes()

    def test_write_file(self, tmp_path):
        midi_file = MIDIFile.from_text("C:4,E:4,G:4,rest:0")
        output_path = tmp_path / "chord.mid"
        midi_file.write_file(output_path)
        assert output_path.read_bytes() == midi_file.to_bytes()
        assert output_path.stat().st_size == midi_file.size()

    def test_write_file_str_path(self, tmp_path):
        output_path = tmp_path / "melody.mid"
        MIDIFile.from_text("A:3").write_file(str(output_path))
        assert output_path.stat().st_size == 29

    def test_write_file_missing_directory(self, tmp_path):
        with pytest.raises(OSError):
            MIDIFile.from_text("C:4").write_file(tmp_path / "missing" / "out.mid")

    def test_failing_sink_propagates(self):
        class FailingSink:
            def __init__(self):
                self.written = b""

            def write(self, data):
                if len(self.written) >= 22:
                    raise OSError("disk full")
                self.written += data
                return len(data)

        sink = FailingSink()
        with pytest.raises(OSError, match="disk full"):
            MIDIFile.from_text("C:4,D:4").write_to(sink)
        # Headers stay written
        assert len(sink.written) == 22

    def test_parse_error_propagates(self):
        from minismf.core import SequenceParseError

        with pytest.raises(SequenceParseError):
            MIDIFile.from_text("C:4,")


class TestFingerprint:
    """Tests for the concatenated note-number fingerprint."""

    def test_known_values(self):
        assert fingerprint(parse_sequence("C:4,D:5,C#:8,D#:3")) == "607410951"
        assert MIDIFile.from_text("C:4,C#:8,D:5,D#:3").fingerprint() == "601097451"

    def test_silence(self):
        assert fingerprint(parse_sequence("C:4,rest:0")) == "604294967295"

    def test_deterministic(self):
        rng = np.random.default_rng(11)
        sequence = random_sequence(rng, 30)
        copy = PitchSequence(list(sequence))
        assert fingerprint(sequence) == fingerprint(copy)

    def test_distinct_when_digit_widths_match(self):
        """Octaves 0-6 keep every note number at two digits."""
        rng = np.random.default_rng(5)
        seen = {}
        for _ in range(500):
            sequence = PitchSequence(
                Pitch(ALL_CLASSES[int(c)], int(o))
                for c, o in zip(rng.integers(0, 12, size=4), rng.integers(0, 7, size=4))
            )
            key = fingerprint(sequence)
            assert seen.setdefault(key, sequence) == sequence

    def test_differs_at_changed_position(self):
        base = parse_sequence("C:4,D:4,E:4")
        changed = parse_sequence("C:4,D#:4,E:4")
        assert fingerprint(base) != fingerprint(changed)

    def test_known_collision_without_separator(self):
        """No separator or fixed width: [12, 123] and [121, 23] both give '12123'.

        Kept as is; files already indexed by this key depend on it.
        """
        first = parse_sequence("C:0,D#:9")  # 12, 123
        second = parse_sequence("C#:9,B:0")  # 121, 23
        assert first != second
        assert fingerprint(first) == fingerprint(second) == "12123"
