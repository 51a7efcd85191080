"""Contains high-level functions for writing the clips of a parsed EDL to a CSV file."""

import csv
from typing import TextIO

from .document import Document
from .fields import format_edit_type, format_reel
from .line import Clip, ClipLine, FrameCodeModeLine, NoteLine

CLIP_FIELDNAMES = [
    # Zero-based position of the clip in Document.lines
    "line_number",
    "edit_index",
    "reel",
    "edit_channels",
    "edit_type",
    "transition_duration",
    "source_in",
    "source_out",
    "record_in",
    "record_out",
    "record_duration",
    # Notes directly following the clip, such as "* FROM CLIP NAME:" comments
    "notes",
]

NOTE_SEPARATOR = " | "


def clips_with_notes(document: Document) -> list[tuple[int, Clip, list[str]]]:
    """Pair each clip with the note lines that immediately follow it.

    A frame code mode line or the next clip ends the run of notes belonging to a clip.  Notes that
    appear before the first clip are not attached to anything.
    """
    result: list[tuple[int, Clip, list[str]]] = []
    collecting_notes = False
    for line_number, line in enumerate(document.lines):
        match line:
            case ClipLine(clip=clip):
                result.append((line_number, clip, []))
                collecting_notes = True
            case NoteLine(text=text):
                if collecting_notes:
                    result[-1][2].append(text)
            case FrameCodeModeLine():
                collecting_notes = False
    return result


def write_clips_csv(output_file: TextIO, document: Document, frame_rate: int = 30) -> None:
    writer = csv.DictWriter(output_file, fieldnames=CLIP_FIELDNAMES)
    writer.writeheader()
    for line_number, clip, notes in clips_with_notes(document):
        writer.writerow(
            {
                "line_number": str(line_number),
                "edit_index": f"{clip.edit_index:03}",
                "reel": format_reel(clip.reel),
                "edit_channels": clip.edit_channels.value,
                "edit_type": format_edit_type(clip.edit_type),
                "transition_duration": (
                    f"{clip.transition_duration:03}"
                    if clip.transition_duration is not None
                    else ""
                ),
                "source_in": str(clip.source_in),
                "source_out": str(clip.source_out),
                "record_in": str(clip.record_in),
                "record_out": str(clip.record_out),
                "record_duration": str(clip.record_duration(frame_rate)),
                "notes": NOTE_SEPARATOR.join(notes),
            }
        )
