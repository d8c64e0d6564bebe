"""Pitch containers - ordered sequences and deduplicated sets.

Both parse from comma-separated '<class>:<octave>' pairs, e.g. 'C:4,D:4,E:4'.
"""

from typing import Iterable, Iterator, Tuple, Type

from .constants import LIST_SEPARATOR
from .errors import PitchParseError, SequenceParseError, SetParseError
from .pitch import Pitch, parse


class PitchSequence:
    """Ordered, immutable list of pitches - the song to encode.

    Order and duplicates are preserved.
    """

    __slots__ = ("_pitches",)

    def __init__(self, pitches: Iterable[Pitch] = ()):
        self._pitches: Tuple[Pitch, ...] = tuple(pitches)

    @property
    def pitches(self) -> Tuple[Pitch, ...]:
        return self._pitches

    def __len__(self) -> int:
        return len(self._pitches)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self._pitches)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return PitchSequence(self._pitches[index])
        return self._pitches[index]

    def __eq__(self, other):
        if not isinstance(other, PitchSequence):
            return NotImplemented
        return self._pitches == other._pitches

    def __hash__(self):
        return hash(self._pitches)

    def __repr__(self) -> str:
        return f"PitchSequence({list(self._pitches)!r})"

    def __str__(self) -> str:
        return LIST_SEPARATOR.join(str(pitch) for pitch in self._pitches)

    @classmethod
    def parse(cls, text: str) -> "PitchSequence":
        return parse_sequence(text)


class PitchSet:
    """Deduplicated, immutable collection of pitches.

    Iteration order is the pitch ordering (class ordinal, then octave), not
    the insertion order, so contents hash and diff the same on every run.
    """

    __slots__ = ("_pitches",)

    def __init__(self, pitches: Iterable[Pitch] = ()):
        self._pitches: Tuple[Pitch, ...] = tuple(sorted(set(pitches)))

    def pitches(self) -> Tuple[Pitch, ...]:
        """Read-only view of the pitches in sorted order."""
        return self._pitches

    def __len__(self) -> int:
        return len(self._pitches)

    def __contains__(self, pitch) -> bool:
        return pitch in self._pitches

    def __eq__(self, other):
        if not isinstance(other, PitchSet):
            return NotImplemented
        return self._pitches == other._pitches

    def __hash__(self):
        return hash(self._pitches)

    def __repr__(self) -> str:
        return f"PitchSet({list(self._pitches)!r})"

    def __str__(self) -> str:
        return LIST_SEPARATOR.join(str(pitch) for pitch in self._pitches)

    @classmethod
    def parse(cls, text: str) -> "PitchSet":
        return parse_set(text)


def _parse_elements(text: str, error_type: Type[SequenceParseError]) -> Iterator[Pitch]:
    for index, element in enumerate(text.split(LIST_SEPARATOR)):
        try:
            yield parse(element)
        except PitchParseError as e:
            raise error_type(index, e) from e


def parse_sequence(text: str) -> PitchSequence:
    """
    Parse comma-separated pitches into a sequence.

    A trailing comma leaves an empty last element, which fails at its index.

    Args:
        text: List such as 'C:4,D:4,E:4'

    Returns:
        PitchSequence in input order

    Raises:
        SequenceParseError: At the first element that fails to parse
    """
    return PitchSequence(_parse_elements(text, SequenceParseError))


def parse_set(text: str) -> PitchSet:
    """
    Parse comma-separated pitches into a set, collapsing duplicates.

    Raises:
        SetParseError: At the first element that fails to parse
    """
    return PitchSet(_parse_elements(text, SetParseError))
