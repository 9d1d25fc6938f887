"""
Locate the transcript and summary sections in a model response.

The model is instructed to answer with two headed sections, in order::

    Response 1: Full Transcription + Diarization
    [00:01 - 00:05] Speaker 1, [Judge 1]: Good morning.
    Response 2: Summary of Transcription
    The hearing opened.

:func:`extract_sections` returns the trimmed body of each section or raises
one of the typed errors from :mod:`audioscribe.errors`.
"""

from typing import Tuple

from .errors import (
    SUMMARY_SECTION,
    TRANSCRIPT_SECTION,
    EmptySection,
    MissingSection,
)

TRANSCRIPT_MARKER = "Response 1: Full Transcription + Diarization"
SUMMARY_MARKER = "Response 2: Summary of Transcription"


def extract_summary(raw_text: str) -> str:
    """Return everything after the summary marker, trimmed."""
    start = raw_text.find(SUMMARY_MARKER)
    if start == -1:
        raise MissingSection(SUMMARY_SECTION)
    summary = raw_text[start + len(SUMMARY_MARKER):].strip()
    if not summary:
        raise EmptySection(SUMMARY_SECTION)
    return summary


def extract_transcript_block(raw_text: str) -> str:
    """Return the text between the transcript marker and the summary marker."""
    start = raw_text.find(TRANSCRIPT_MARKER)
    if start == -1:
        raise MissingSection(TRANSCRIPT_SECTION)
    body_start = start + len(TRANSCRIPT_MARKER)
    end = raw_text.find(SUMMARY_MARKER, body_start)
    if end == -1:
        raise MissingSection(
            TRANSCRIPT_SECTION, "It must appear before the summary section."
        )
    block = raw_text[body_start:end].strip()
    if not block:
        raise EmptySection(TRANSCRIPT_SECTION)
    return block


def extract_sections(raw_text: str) -> Tuple[str, str]:
    """Split ``raw_text`` into ``(transcript_block, summary)``.

    The summary is checked first so that a response without a summary heading
    is always reported as such, whatever the transcript looks like.

    Raises:
        MissingSection: If a heading is absent, or the transcript heading
            comes after the summary heading.
        EmptySection: If a heading has no content after it.
    """
    summary = extract_summary(raw_text)
    return extract_transcript_block(raw_text), summary
