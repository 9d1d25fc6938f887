import pytest

from audioscribe.errors import EmptySection, MissingSection
from audioscribe.response_extractor import extract_sections, extract_summary


def test_extract_sections_basic():
    raw = (
        "Response 1: Full Transcription + Diarization\n"
        "[00:01 - 00:05] Speaker 1, [Judge 1]: Good morning.\n"
        "Response 2: Summary of Transcription\n"
        "The hearing opened."
    )
    block, summary = extract_sections(raw)
    assert block == "[00:01 - 00:05] Speaker 1, [Judge 1]: Good morning."
    assert summary == "The hearing opened."


def test_leading_and_trailing_content_is_ignored():
    raw = (
        "Sure, here you go.\n\n"
        "Response 1: Full Transcription + Diarization\n\n"
        "[00:01 - 00:02] Speaker 1: Hi.\n\n"
        "Response 2: Summary of Transcription\n\n"
        "  A greeting.\nSecond line.  \n"
    )
    block, summary = extract_sections(raw)
    assert block == "[00:01 - 00:02] Speaker 1: Hi."
    assert summary == "A greeting.\nSecond line."


def test_missing_summary_marker():
    raw = "Response 1: Full Transcription + Diarization\n[00:01 - 00:02] Speaker 1: Hi."
    with pytest.raises(MissingSection) as excinfo:
        extract_sections(raw)
    assert excinfo.value.section == "summary"


def test_missing_summary_reported_before_transcript():
    with pytest.raises(MissingSection) as excinfo:
        extract_sections("nothing useful here")
    assert excinfo.value.section == "summary"


def test_missing_transcript_marker():
    raw = "Response 2: Summary of Transcription\nThe hearing opened."
    with pytest.raises(MissingSection) as excinfo:
        extract_sections(raw)
    assert excinfo.value.section == "transcript"


def test_reversed_markers_fail():
    raw = (
        "Response 2: Summary of Transcription\nThe hearing opened.\n"
        "Response 1: Full Transcription + Diarization\n[00:01 - 00:02] Speaker 1: Hi."
    )
    with pytest.raises(MissingSection) as excinfo:
        extract_sections(raw)
    assert excinfo.value.section == "transcript"


def test_empty_summary():
    raw = (
        "Response 1: Full Transcription + Diarization\n"
        "[00:01 - 00:02] Speaker 1: Hi.\n"
        "Response 2: Summary of Transcription\n   \n\t"
    )
    with pytest.raises(EmptySection) as excinfo:
        extract_sections(raw)
    assert excinfo.value.section == "summary"


def test_empty_transcript():
    raw = (
        "Response 1: Full Transcription + Diarization\n  \n"
        "Response 2: Summary of Transcription\nThe hearing opened."
    )
    with pytest.raises(EmptySection) as excinfo:
        extract_sections(raw)
    assert excinfo.value.section == "transcript"


def test_extract_summary_uses_first_marker():
    raw = "Response 2: Summary of Transcription one Response 2: Summary of Transcription two"
    assert extract_summary(raw) == "one Response 2: Summary of Transcription two"
