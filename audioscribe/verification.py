"""
Entry point that turns raw model text into a :class:`ProcessedResult`.
"""

import logging

from .errors import VerificationError
from .models import ProcessedResult
from .response_extractor import extract_sections
from .segment_parser import parse_segments

logger = logging.getLogger(__name__)


def parse_and_verify(raw_text: str) -> ProcessedResult:
    """Parse and structurally verify a model response.

    Args:
        raw_text: The complete, buffered response text.

    Returns:
        The summary and transcript segments.

    Raises:
        VerificationError: If the response does not follow the expected
            layout.  The exception's ``raw_text`` holds the input unchanged.
    """
    try:
        block, summary = extract_sections(raw_text)
        segments = parse_segments(block)
    except VerificationError as exc:
        exc.raw_text = raw_text
        logger.warning("Model output failed verification: %s", exc.message)
        raise
    return ProcessedResult(summary=summary, transcription=tuple(segments))
