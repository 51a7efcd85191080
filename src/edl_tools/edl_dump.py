import argparse
import sys

from colorama import Fore, Style, just_fix_windows_console

import edl_tools.edl as edl
import edl_tools.edl.edl_csv as edl_csv


class EDLDumpArgs(argparse.Namespace):
    input_edl_file: list[str]
    require_final_newline: bool
    frame_rate: int
    csv: str | None


def parse_args(argv: list[str] | None = None) -> EDLDumpArgs:
    parser = argparse.ArgumentParser(
        prog="edl_dump",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Parse a CMX3600 edit decision list and dump its contents.",
    )
    parser.add_argument(
        "input_edl_file",
        type=str,
        nargs=1,
        help="Input EDL text file.",
    )
    parser.add_argument(
        "--require-final-newline",
        action="store_true",
        help="Reject files whose last line does not end with a line terminator.  By default, the "
        "end of the file also ends the last line.",
    )
    parser.add_argument(
        "--frame-rate",
        type=int,
        default=30,
        help="Frame rate used to calculate clip durations.  Timecodes themselves are always "
        "validated against a 30 fps frame limit.",
    )
    parser.add_argument(
        "--csv",
        type=str,
        help="Write a table of clips to this CSV file instead of printing the whole EDL.",
    )

    return parser.parse_args(argv, namespace=EDLDumpArgs())


def format_clip(clip: edl.Clip, frame_rate: int) -> str:
    transition = (
        f"{clip.transition_duration:03}" if clip.transition_duration is not None else "   "
    )
    return (
        f"{clip.edit_index:03}  {edl.format_reel(clip.reel):<8} "
        f"{clip.edit_channels.value:<5} {edl.format_edit_type(clip.edit_type):<4} {transition} "
        f"{clip.source_in} {clip.source_out} {clip.record_in} {clip.record_out} "
        f"({clip.record_duration(frame_rate)} frames)"
    )


def format_line(line: edl.Line, frame_rate: int) -> str:
    match line:
        case edl.ClipLine(clip=clip):
            return f"{Fore.CYAN}{format_clip(clip, frame_rate)}{Style.RESET_ALL}"
        case edl.FrameCodeModeLine(mode=mode):
            return f"{Fore.YELLOW}FCM: {mode.value}{Style.RESET_ALL}"
        case edl.NoteLine(text=text):
            return f"{Fore.GREEN}{text}{Style.RESET_ALL}"


def dump_document(document: edl.Document, frame_rate: int) -> None:
    print(f"{Fore.MAGENTA}TITLE: {document.title}{Style.RESET_ALL}")
    for line in document.lines:
        print(format_line(line, frame_rate))
    print(f"{len(document.lines)} lines, {len(document.clips)} clips.")


def main(argv: list[str] | None = None) -> None:
    just_fix_windows_console()
    args = parse_args(argv)
    input_edl_filename = args.input_edl_file[0]
    assert input_edl_filename is not None

    with open(input_edl_filename, mode="rb") as file:
        data = file.read()

    try:
        document = edl.parse_document(data, require_final_newline=args.require_final_newline)
    except edl.EDLParseError as e:
        location = f" (line {edl.line_number(data, e.position)})" if e.position is not None else ""
        print(f"{Fore.RED}ERROR:  {e}{location}{Style.RESET_ALL}", file=sys.stderr)
        sys.exit(1)

    # Durations are recalculated at the requested frame rate, which can be lower than the frame
    # numbers that appear in the file.
    for clip in document.clips:
        try:
            clip.record_duration(args.frame_rate)
        except ValueError as e:
            print(
                f"{Fore.RED}ERROR:  Edit {clip.edit_index:03}: {e}{Style.RESET_ALL}",
                file=sys.stderr,
            )
            sys.exit(1)

    if args.csv is not None:
        with open(args.csv, mode="wt", newline="") as csv_file:
            edl_csv.write_clips_csv(csv_file, document, frame_rate=args.frame_rate)
        print(f"Wrote {len(document.clips)} clips to {args.csv}.")
        return

    dump_document(document, args.frame_rate)


if __name__ == "__main__":
    main()
