"""Parse errors for pitches and pitch lists."""


class PitchParseError(ValueError):
    """Base class for errors raised while parsing a single pitch."""

    def __init__(self, message: str, input: str) -> None:
        super().__init__(message)
        self.input = input


class InvalidFormat(PitchParseError):
    """Input is not a single '<class>:<octave>' pair."""

    def __init__(self, input: str) -> None:
        super().__init__(
            f"Invalid pitch format (expected '<class>:<octave>', found {input!r})",
            input,
        )


class UnknownPitchClass(PitchParseError):
    """Pitch class text matches none of the recognized spellings."""

    def __init__(self, input: str) -> None:
        super().__init__(f"Unknown pitch class {input!r}", input)


class InvalidOctave(PitchParseError):
    """Octave text is not an unsigned 32-bit decimal integer."""

    def __init__(self, input: str) -> None:
        super().__init__(f"Invalid octave {input!r}", input)


class SequenceParseError(ValueError):
    """A pitch list failed to parse at element `index`.

    The per-element failure is kept on `error` and chained as `__cause__`.
    """

    kind = "sequence"

    def __init__(self, index: int, error: PitchParseError) -> None:
        super().__init__(f"Invalid pitch at index {index} of {self.kind}: {error}")
        self.index = index
        self.error = error


class SetParseError(SequenceParseError):
    kind = "set"
