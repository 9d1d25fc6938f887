from audioscribe.export import (
    active_segment_index,
    base_file_name,
    export_file_name,
    format_transcription,
    segment_start_seconds,
    timestamp_to_seconds,
)
from audioscribe.models import TranscriptSegment

SEGMENTS = (
    TranscriptSegment("[00:01 - 00:05]", "Speaker 1, [Judge 1]", "Good morning."),
    TranscriptSegment("[00:06 - 00:09]", "Speaker 2", "Morning."),
    TranscriptSegment("[01:10 - 01:12]", "[noise]", "Yes, sir."),
)


def test_format_transcription():
    assert format_transcription(SEGMENTS[:2]) == (
        "[00:01 - 00:05] Speaker 1, [Judge 1]: Good morning.\n"
        "[00:06 - 00:09] Speaker 2: Morning.\n"
    )
    assert format_transcription([]) == ""


def test_base_file_name():
    assert base_file_name(None) == "download"
    assert base_file_name("") == "download"
    assert base_file_name("hearing.mp3") == "hearing"
    assert base_file_name("day.1.hearing.wav") == "day.1.hearing"
    assert base_file_name("noextension") == "noextension"
    assert base_file_name(".webm") == ".webm"
    assert export_file_name("hearing.mp3", "summary") == "hearing_summary.txt"


def test_timestamp_to_seconds():
    assert timestamp_to_seconds("[01:30") == 90
    assert timestamp_to_seconds("[00:01 - 00:05]") == 1
    assert timestamp_to_seconds("[noise]") == 0
    assert segment_start_seconds(SEGMENTS[2]) == 70


def test_active_segment_index():
    assert active_segment_index(SEGMENTS, 0.5, 80) == -1
    assert active_segment_index(SEGMENTS, 1, 80) == 0
    assert active_segment_index(SEGMENTS, 5.9, 80) == 0
    assert active_segment_index(SEGMENTS, 6, 80) == 1
    assert active_segment_index(SEGMENTS, 75, 80) == 2
    assert active_segment_index(SEGMENTS, 80, 80) == -1
    assert active_segment_index((), 3, 10) == -1


def test_export_file_name_drops_control_characters():
    assert export_file_name("bad\nname.mp3", "summary") == "badname_summary.txt"
