"""
Data types shared by the verification core and the HTTP layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple


@dataclass(frozen=True)
class TranscriptSegment:
    """One timestamped, speaker-attributed utterance."""

    timestamp: str
    speaker: str
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"timestamp": self.timestamp, "speaker": self.speaker, "text": self.text}


@dataclass(frozen=True)
class ProcessedResult:
    """A verified summary plus the transcript segments in source order."""

    summary: str
    transcription: Tuple[TranscriptSegment, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "transcription": [segment.to_dict() for segment in self.transcription],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProcessedResult":
        """Rebuild a result from its JSON shape.

        Raises:
            ValueError: If a field is missing or not a string.
        """
        summary = data.get("summary")
        if not isinstance(summary, str):
            raise ValueError("'summary' must be a string")
        segments = data.get("transcription")
        if not isinstance(segments, list):
            raise ValueError("'transcription' must be a list")
        return cls(summary=summary, transcription=tuple(_segments_from(segments)))


def _segments_from(items: Iterable[Any]) -> Iterable[TranscriptSegment]:
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"transcription[{index}] must be an object")
        values = [item.get(key) for key in ("timestamp", "speaker", "text")]
        if not all(isinstance(value, str) for value in values):
            raise ValueError(
                f"transcription[{index}] needs string 'timestamp', 'speaker' and 'text'"
            )
        yield TranscriptSegment(*values)


@dataclass(frozen=True)
class ProcessingStats:
    """Timing and cost figures reported next to a processed result."""

    processing_time: float
    input_tokens: int
    output_tokens: int
    estimated_cost: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "processingTime": self.processing_time,
            "inputTokens": self.input_tokens,
            "outputTokens": self.output_tokens,
            "estimatedCost": self.estimated_cost,
        }
