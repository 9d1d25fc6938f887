"""
Plain-text export and playback helpers for processed results.

These functions serve the download endpoints and any renderer that needs to
map transcript timestamps onto an audio position.
"""

import re
from typing import Optional, Sequence

from .models import TranscriptSegment

TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})")
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def format_transcription(segments: Sequence[TranscriptSegment]) -> str:
    """Render segments as ``"[timestamp] speaker: text"`` lines."""
    return "".join(f"{s.timestamp} {s.speaker}: {s.text}\n" for s in segments)


def base_file_name(name: Optional[str]) -> str:
    """Strip the last extension from an uploaded file name.

    ``"download"`` is used when there is no name at all.
    """
    if not name:
        return "download"
    return ".".join(name.split(".")[:-1]) or name


def export_file_name(name: Optional[str], kind: str) -> str:
    """Download name for an export; control characters are dropped."""
    return CONTROL_CHARS.sub("", f"{base_file_name(name)}_{kind}.txt")


def timestamp_to_seconds(text: str) -> int:
    """Return the first ``mm:ss`` pair in ``text`` as seconds, or 0."""
    match = TIME_PATTERN.search(text)
    if not match:
        return 0
    minutes, seconds = match.groups()
    return int(minutes) * 60 + int(seconds)


def segment_start_seconds(segment: TranscriptSegment) -> int:
    return timestamp_to_seconds(segment.timestamp.split(" - ")[0])


def active_segment_index(
    segments: Sequence[TranscriptSegment], current_time: float, duration: float
) -> int:
    """Find the segment being played at ``current_time``.

    A segment runs from its start until the next segment starts; the last
    one runs until ``duration``.  Returns -1 when no segment covers the time.
    """
    for index, segment in enumerate(segments):
        start = segment_start_seconds(segment)
        if index + 1 < len(segments):
            end = segment_start_seconds(segments[index + 1])
        else:
            end = duration
        if start <= current_time < end:
            return index
    return -1
