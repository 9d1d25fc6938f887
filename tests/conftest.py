import pytest

TRANSCRIPT_MARKER = "Response 1: Full Transcription + Diarization"
SUMMARY_MARKER = "Response 2: Summary of Transcription"


def _build(lines, summary="The hearing opened."):
    return "\n".join([TRANSCRIPT_MARKER, *lines, SUMMARY_MARKER, summary])


@pytest.fixture
def build_response():
    return _build


@pytest.fixture
def raw_response():
    return _build(
        [
            "[00:01 - 00:05] Speaker 1, [Judge 1]: Good morning.",
            "[00:06 - 00:09] Speaker 2, [Lead Counsel]: Morning, Your Honour.",
            "[00:10 - 00:11] [noise]: Yes, sir.",
        ]
    )
