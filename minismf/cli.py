"""Command-line interface for minismf.

Provides commands for:
- write: Encode a pitch sequence to a MIDI file
- size: Predict file size for a note count
- fingerprint: Print the lookup key of a sequence
- pitches: Parse and list pitches (sequence or set)
- inspect: Decode a MIDI file and list its messages
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import PitchSequence, SequenceParseError, parse_sequence, parse_set
from .core.constants import DEFAULT_DIVISION, DEFAULT_TRACKS
from .encoding import MIDIFormat
from .output import MIDIFile, file_byte_size, track_byte_size

app = typer.Typer(
    name="minismf",
    help="Smallest-possible MIDI files for pitch sequences",
    rich_markup_mode="markdown",
)
console = Console()


def _parse_or_exit(text: str) -> PitchSequence:
    try:
        return parse_sequence(text)
    except SequenceParseError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def write(
    sequence: str = typer.Argument(..., help="Pitches, e.g. 'C:4,D:4,E:4'"),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Output MIDI file path (default: <fingerprint>.mid)"
    ),
    midi_format: int = typer.Option(
        int(MIDIFormat.FORMAT_0), "-f", "--format", min=0, max=2, help="SMF format (0, 1 or 2)"
    ),
    tracks: int = typer.Option(
        DEFAULT_TRACKS, "--tracks", min=0, max=0xFFFF, help="Track count in the header"
    ),
    division: int = typer.Option(
        DEFAULT_DIVISION, "-d", "--division", min=0, max=0xFFFF, help="Ticks per quarter note"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Encode a pitch sequence to a MIDI file.

    **Examples:**

        minismf write "C:4,D:4,E:4"

        minismf write "C:4,rest:0,Eb:4" -o melody.mid --division 2
    """
    midi_file = MIDIFile(
        _parse_or_exit(sequence),
        format=MIDIFormat(midi_format),
        tracks=tracks,
        division=division,
    )
    key = midi_file.fingerprint()

    if output is None:
        output = Path(f"{key}.mid")

    try:
        midi_file.write_file(output)
    except OSError as e:
        console.print(f"[red]Error: could not write {escape(str(output))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(data={
            "output": str(output),
            "notes_count": len(midi_file.sequence),
            "size": midi_file.size(),
            "fingerprint": key,
        })
    else:
        console.print(f"[green]Wrote {len(midi_file.sequence)} notes ({midi_file.size()} bytes)[/green]")
        console.print(f"  Output: {escape(str(output))}")
        console.print(f"  Fingerprint: {key}")


@app.command()
def size(
    note_count: int = typer.Argument(..., min=0, help="Number of notes in the sequence"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Show the exact track and file size for a sequence length."""
    track_size = track_byte_size(note_count)
    total_size = file_byte_size(note_count)

    if json_output:
        console.print_json(data={
            "notes_count": note_count,
            "track_size": track_size,
            "file_size": total_size,
        })
        return

    console.print(f"  Track chunk data: {track_size} bytes")
    console.print(f"  [bold]File: {total_size} bytes[/bold]")


@app.command()
def fingerprint(
    sequence: str = typer.Argument(..., help="Pitches, e.g. 'C:4,D:4,E:4'"),
):
    """Print the fingerprint (lookup key) of a sequence."""
    parsed = _parse_or_exit(sequence)
    console.print(MIDIFile(parsed).fingerprint(), highlight=False)


@app.command()
def pitches(
    text: str = typer.Argument(..., help="Pitches, e.g. 'C:4,Db:4,rest:0'"),
    unique: bool = typer.Option(
        False, "-u", "--unique", help="Parse as a set (sorted, duplicates removed)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Parse pitches and show their MIDI note numbers."""
    try:
        parsed = parse_set(text).pitches() if unique else parse_sequence(text).pitches
    except SequenceParseError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_output:
        console.print_json(data=[
            {"pitch": str(pitch), "number": pitch.convert()} for pitch in parsed
        ])
        return

    table = Table(title="Set" if unique else "Sequence")
    table.add_column("#", style="dim")
    table.add_column("Pitch", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("MIDI", style="magenta")

    for index, pitch in enumerate(parsed):
        table.add_row(str(index), str(pitch), pitch.name, str(pitch.convert()))

    console.print(table)


@app.command()
def inspect(
    input_file: Path = typer.Argument(..., help="MIDI file to decode"),
    notes: bool = typer.Option(
        False, "-n", "--notes", help="Show timed notes instead of raw messages"
    ),
):
    """Decode a MIDI file and list what a player will see."""
    from .output import DECODE_ERRORS, load_midi, read_messages, read_notes

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {escape(str(input_file))}[/red]")
        raise typer.Exit(1)

    try:
        midi = load_midi(input_file)
        if notes:
            decoded = read_notes(input_file)
        else:
            decoded = read_messages(input_file)
    except DECODE_ERRORS as e:
        console.print(f"[red]Error: could not decode {escape(str(input_file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold]MIDI File:[/bold] {escape(input_file.name)}")
    console.print(f"  Format: {midi.type}, tracks: {len(midi.tracks)}, division: {midi.ticks_per_beat}")
    console.print(f"  Size: {input_file.stat().st_size} bytes")

    if notes:
        _show_notes_table(decoded)
    else:
        _show_messages_table(decoded)


def _show_messages_table(messages):
    """Display decoded channel messages in a table."""
    table = Table(title="Messages")
    table.add_column("Delta", style="yellow")
    table.add_column("Type", style="cyan")
    table.add_column("Channel", style="dim")
    table.add_column("Note", style="green")
    table.add_column("Velocity", style="magenta")

    for msg in messages:
        table.add_row(
            str(msg.time),
            msg.type,
            str(getattr(msg, "channel", "")),
            str(getattr(msg, "note", "")),
            str(getattr(msg, "velocity", "")),
        )

    console.print(table)


def _show_notes_table(notes):
    """Display notes in a table."""
    table = Table(title="Notes")
    table.add_column("Pitch", style="cyan")
    table.add_column("Onset (s)", style="green")
    table.add_column("Duration (s)", style="yellow")
    table.add_column("Velocity", style="magenta")

    for note in notes:
        table.add_row(
            note.pitch_name,
            f"{note.onset:.3f}",
            f"{note.duration:.3f}",
            str(note.velocity),
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
