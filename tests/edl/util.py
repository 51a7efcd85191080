import edl_tools.edl as edl

# Sample EDL with the usual layout written by most editing software: a title, a frame code mode
# declaration, and clip lines each followed by a clip name comment.
SAMPLE_EDL = (
    b"TITLE: ZAMA\n"
    b"FCM: NON-DROP FRAME\n"
    b"\n"
    b"001  AX       V     C        00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16\n"
    b"* FROM CLIP NAME: ZAMA_TRAILER_V1.MOV\n"
    b"\n"
    b"002  001b     AA/V  D    030 00:10:04:12 00:10:09:00 01:00:03:16 01:00:08:04\n"
    b"* FROM CLIP NAME: INTERVIEW_A.MXF\n"
)


def make_tc(text: str) -> edl.TimeCode:
    """Shorthand for building an expected timecode from its text form."""
    hours, minutes, seconds, frames = (int(part) for part in text.split(":"))
    return edl.TimeCode(hours=hours, minutes=minutes, seconds=seconds, frames=frames)


SAMPLE_CLIP_1 = edl.Clip(
    edit_index=1,
    reel=edl.BlackReel(),
    edit_channels=edl.EditChannels.VIDEO,
    edit_type=edl.Cut(),
    source_in=make_tc("00:00:00:00"),
    source_out=make_tc("00:00:03:16"),
    record_in=make_tc("01:00:00:00"),
    record_out=make_tc("01:00:03:16"),
)

SAMPLE_CLIP_2 = edl.Clip(
    edit_index=2,
    reel=edl.IndexReel(index=1, is_b_roll=True),
    edit_channels=edl.EditChannels.AUDIO_1_AUDIO_2_VIDEO,
    edit_type=edl.Dissolve(),
    transition_duration=30,
    source_in=make_tc("00:10:04:12"),
    source_out=make_tc("00:10:09:00"),
    record_in=make_tc("01:00:03:16"),
    record_out=make_tc("01:00:08:04"),
)

SAMPLE_DOCUMENT = edl.Document(
    title="ZAMA",
    lines=(
        edl.FrameCodeModeLine(mode=edl.FrameCodeMode.NON_DROP_FRAME),
        edl.ClipLine(clip=SAMPLE_CLIP_1),
        edl.NoteLine(text="* FROM CLIP NAME: ZAMA_TRAILER_V1.MOV"),
        edl.ClipLine(clip=SAMPLE_CLIP_2),
        edl.NoteLine(text="* FROM CLIP NAME: INTERVIEW_A.MXF"),
    ),
)
