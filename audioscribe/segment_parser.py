"""
Transcript line parsing.

Each non-blank line of the transcript block must look like::

    [00:01 - 00:05] Speaker 1, [Judge 1]: Good morning.

that is, a bracketed token, one space, a speaker label ending in ``": "`` and
the spoken text.  The bracketed token is not interpreted, so bare tags such
as ``[noise]`` or ``[multiple]`` are accepted in place of a timestamp.

Lines are parsed independently.  A line that does not match is logged and
skipped; only a block in which *no* line matches is an error.
"""

import logging
import re
from typing import List, Optional

from .errors import NoSegmentsParsed
from .models import TranscriptSegment

logger = logging.getLogger(__name__)

# Group 1: bracketed timestamp or tag, group 2: speaker block, group 3: text.
LINE_PATTERN = re.compile(r"^(\[.*?\])\s(.*?):\s(.*)$")


def parse_line(line: str) -> Optional[TranscriptSegment]:
    """Parse a single transcript line, returning ``None`` if it is malformed."""
    match = LINE_PATTERN.match(line)
    if not match:
        return None
    timestamp, speaker, text = (group.strip() for group in match.groups())
    return TranscriptSegment(timestamp=timestamp, speaker=speaker, text=text)


def parse_segments(block: str) -> List[TranscriptSegment]:
    """Convert a transcript block into segments in source order.

    Args:
        block: The trimmed transcript body.

    Returns:
        One segment per well-formed line.  Empty when the block holds no
        non-blank lines.

    Raises:
        NoSegmentsParsed: If there were non-blank lines but none matched.
    """
    lines = [line for line in block.split("\n") if line.strip()]
    segments: List[TranscriptSegment] = []
    for line in lines:
        segment = parse_line(line)
        if segment is None:
            logger.warning("Skipping malformed transcription line: %r", line)
            continue
        segments.append(segment)
    if lines and not segments:
        raise NoSegmentsParsed(len(lines))
    if len(segments) < len(lines):
        logger.info("Parsed %d of %d transcription lines", len(segments), len(lines))
    return segments
