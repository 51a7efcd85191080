from dataclasses import dataclass, replace

import pytest

import edl_tools.edl as edl
from tests.edl.util import SAMPLE_CLIP_1, SAMPLE_CLIP_2, make_tc

# ======================== CLIP LINE TESTS ========================


@dataclass
class ClipLineTestCase:
    name: str
    input: bytes
    parsed: edl.Clip
    end: int | None = None  # defaults to the length of the input


@pytest.mark.parametrize(
    "tc",
    [
        ClipLineTestCase(
            "cut from black",
            b"001  AX       V     C        00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            SAMPLE_CLIP_1,
        ),
        ClipLineTestCase(
            "dissolve from b-roll",
            b"002  001b     AA/V  D    030 00:10:04:12 00:10:09:00 01:00:03:16 01:00:08:04",
            SAMPLE_CLIP_2,
        ),
        ClipLineTestCase(
            "single spaces and tabs",
            b"002 001b\tAA/V D\t030 00:10:04:12 00:10:09:00\t01:00:03:16 01:00:08:04",
            SAMPLE_CLIP_2,
        ),
        ClipLineTestCase(
            "leading and trailing whitespace, stops at terminator",
            b"  001  AX  V  C  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16  \t\nNEXT",
            SAMPLE_CLIP_1,
            end=67,
        ),
        ClipLineTestCase(
            "CRLF terminator",
            b"001  AX       V     C        00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16\r\n",
            SAMPLE_CLIP_1,
            end=77,
        ),
        ClipLineTestCase(
            "wipe",
            b"010  123      A2/V  W005 015 00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.Clip(
                edit_index=10,
                reel=edl.IndexReel(index=123),
                edit_channels=edl.EditChannels.AUDIO_2_VIDEO,
                edit_type=edl.Wipe(pattern_index=5),
                transition_duration=15,
                source_in=make_tc("00:00:00:00"),
                source_out=make_tc("00:00:03:16"),
                record_in=make_tc("01:00:00:00"),
                record_out=make_tc("01:00:03:16"),
            ),
        ),
        ClipLineTestCase(
            "key background",
            b"999  BL       B     KB   001 00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            replace(
                SAMPLE_CLIP_1,
                edit_index=999,
                edit_channels=edl.EditChannels.AUDIO_1_VIDEO,
                edit_type=edl.KeyBackground(),
                transition_duration=1,
            ),
        ),
    ],
    ids=lambda tc: tc.name,
)
def test_parse_clip_line(tc: ClipLineTestCase) -> None:
    end, clip = edl.parse_clip_line(tc.input, 0)
    assert clip == tc.parsed
    assert end == (tc.end if tc.end is not None else len(tc.input))


@dataclass
class ClipLineFailureTestCase:
    name: str
    input: bytes
    error: type[edl.EDLParseError]
    position: int


@pytest.mark.parametrize(
    "tc",
    [
        ClipLineFailureTestCase(
            "bad edit index",
            b"01   AX  V  C  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.InvalidEditIndexError,
            0,
        ),
        ClipLineFailureTestCase(
            "bad reel",
            b"001  9999  V  C  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.InvalidReelError,
            5,
        ),
        ClipLineFailureTestCase(
            "bad channels",
            b"001  AX  A3  C  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.InvalidChannelsError,
            9,
        ),
        ClipLineFailureTestCase(
            "bad edit type",
            b"001  AX  V  X  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.InvalidEditTypeError,
            12,
        ),
        ClipLineFailureTestCase(
            "dissolve without duration",
            b"001  AX  V  D  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.InvalidTransitionDurationError,
            15,
        ),
        ClipLineFailureTestCase(
            "cut with duration",
            b"001  AX  V  C  030 00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.InvalidTimecodeError,
            15,
        ),
        ClipLineFailureTestCase(
            "timecode out of range",
            b"001  AX  V  C  00:00:00:00 00:00:03:30 01:00:00:00 01:00:03:16",
            edl.InvalidTimecodeFieldError,
            36,
        ),
        ClipLineFailureTestCase(
            "missing record out",
            b"001  AX  V  C  00:00:00:00 00:00:03:16 01:00:00:00\n",
            edl.UnexpectedEOFError,
            50,
        ),
        ClipLineFailureTestCase(
            "missing record out at end of input",
            b"001  AX  V  C  00:00:00:00 00:00:03:16 01:00:00:00   ",
            edl.UnexpectedEOFError,
            53,
        ),
        ClipLineFailureTestCase(
            "line ends after edit type",
            b"001  AX  V  W001\n00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
            edl.UnexpectedEOFError,
            16,
        ),
        ClipLineFailureTestCase(
            "extra token",
            b"001  AX  V  C  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16 EXTRA",
            edl.UnexpectedTokenError,
            63,
        ),
        ClipLineFailureTestCase(
            "blank line",
            b"   \n",
            edl.UnexpectedEOFError,
            3,
        ),
        ClipLineFailureTestCase(
            "comment",
            b"* FROM CLIP NAME: A001C003",
            edl.InvalidEditIndexError,
            0,
        ),
    ],
    ids=lambda tc: tc.name,
)
def test_parse_clip_line_failure(tc: ClipLineFailureTestCase) -> None:
    with pytest.raises(tc.error) as exc_info:
        edl.parse_clip_line(tc.input, 0)
    assert exc_info.value.position == tc.position


def test_clip_validation() -> None:
    with pytest.raises(edl.ValidationError, match="A cut must not have a transition duration."):
        replace(SAMPLE_CLIP_1, transition_duration=30)
    with pytest.raises(edl.ValidationError, match="A transition duration is required"):
        replace(SAMPLE_CLIP_2, transition_duration=None)
    with pytest.raises(edl.ValidationError, match="Edit index must be between 1 and 999."):
        replace(SAMPLE_CLIP_1, edit_index=1000)
    with pytest.raises(edl.ValidationError, match="Transition duration must be between"):
        replace(SAMPLE_CLIP_2, transition_duration=0)


def test_clip_durations() -> None:
    assert SAMPLE_CLIP_1.source_duration() == 106
    assert SAMPLE_CLIP_1.record_duration() == 106
    assert SAMPLE_CLIP_2.source_duration() == 138
    assert SAMPLE_CLIP_2.record_duration() == 138
    assert SAMPLE_CLIP_1.record_duration(frame_rate=25) == 91


# ======================== FRAME CODE MODE LINE TESTS ========================


@pytest.mark.parametrize(
    "input,mode,end",
    [
        (b"FCM: NON-DROP FRAME", edl.FrameCodeMode.NON_DROP_FRAME, 19),
        (b"FCM: DROP FRAME\n", edl.FrameCodeMode.DROP_FRAME, 15),
        (b"FCM:DROP FRAME", edl.FrameCodeMode.DROP_FRAME, 14),
        (b"FCM:\tNON-DROP FRAME  \r\n001", edl.FrameCodeMode.NON_DROP_FRAME, 22),
    ],
)
def test_parse_fcm_line(input: bytes, mode: edl.FrameCodeMode, end: int) -> None:
    assert edl.parse_fcm_line(input, 0) == (end, mode)


@pytest.mark.parametrize(
    "input,failure",
    [
        (b"FCM: DROP", "Unknown frame code mode 'DROP'"),
        (b"FCM: drop frame", "Unknown frame code mode 'drop frame'"),
        (b"FCM: NON DROP FRAME", "Unknown frame code mode"),
        (b"FCM: DROP FRAME EXTRA", "Unknown frame code mode"),
        (b"FCM:", "Unknown frame code mode ''"),
        (b"FCN: DROP FRAME", "Expected an FCM: marker."),
        (b" FCM: DROP FRAME", "Expected an FCM: marker."),
    ],
)
def test_parse_fcm_line_failure(input: bytes, failure: str) -> None:
    with pytest.raises(edl.InvalidFrameCodeModeError, match=failure):
        edl.parse_fcm_line(input, 0)


# ======================== NOTE LINE TESTS ========================


def test_parse_note_line() -> None:
    assert edl.parse_note_line(b"* FROM CLIP NAME: A001\n002", 0) == (22, "* FROM CLIP NAME: A001")
    assert edl.parse_note_line(b"xx* COMMENT\r\n", 2) == (12, "* COMMENT")
    assert edl.parse_note_line(b"\n", 0) == (0, "")
    with pytest.raises(edl.UnterminatedLineError, match="missing a line terminator"):
        edl.parse_note_line(b"* COMMENT", 0)
    assert edl.parse_note_line(b"* COMMENT", 0, allow_unterminated=True) == (9, "* COMMENT")


# ======================== LINE ALTERNATION TESTS ========================


@dataclass
class LineTestCase:
    name: str
    input: bytes
    parsed: edl.Line


@pytest.mark.parametrize(
    "tc",
    [
        LineTestCase(
            "clip",
            b"001  AX       V     C        00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16\n",
            edl.ClipLine(clip=SAMPLE_CLIP_1),
        ),
        LineTestCase(
            "frame code mode",
            b"FCM: DROP FRAME\n",
            edl.FrameCodeModeLine(mode=edl.FrameCodeMode.DROP_FRAME),
        ),
        LineTestCase(
            "comment",
            b"* FROM CLIP NAME: A001C003\n",
            edl.NoteLine(text="* FROM CLIP NAME: A001C003"),
        ),
        LineTestCase(
            "bad frame code mode is kept as a note",
            b"FCM: 25 FPS\n",
            edl.NoteLine(text="FCM: 25 FPS"),
        ),
        # Clip lines that fail a field check are demoted to notes rather than failing the file.
        LineTestCase(
            "clip with bad timecode is kept as a note",
            b"001  AX  V  C  00:00:00:00 00:00:03:30 01:00:00:00 01:00:03:16\n",
            edl.NoteLine(text="001  AX  V  C  00:00:00:00 00:00:03:30 01:00:00:00 01:00:03:16"),
        ),
        LineTestCase(
            "clip with drop frame timecode is kept as a note",
            b"001  AX  V  C  00:00:00;00 00:00:03;16 01:00:00;00 01:00:03;16\n",
            edl.NoteLine(text="001  AX  V  C  00:00:00;00 00:00:03;16 01:00:00;00 01:00:03;16"),
        ),
        LineTestCase(
            "dissolve without duration is kept as a note",
            b"002  001  V  D  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16\n",
            edl.NoteLine(text="002  001  V  D  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16"),
        ),
    ],
    ids=lambda tc: tc.name,
)
def test_parse_line(tc: LineTestCase) -> None:
    end, line = edl.parse_line(tc.input, 0)
    assert line == tc.parsed
    assert end == len(tc.input) - 1


def test_parse_line_unterminated() -> None:
    for input in [
        b"001  AX  V  C  00:00:00:00 00:00:03:16 01:00:00:00 01:00:03:16",
        b"FCM: DROP FRAME",
        b"* COMMENT",
    ]:
        end, _ = edl.parse_line(input, 0)
        assert end == len(input)
        with pytest.raises(edl.UnterminatedLineError):
            edl.parse_line(input, 0, allow_unterminated=False)
