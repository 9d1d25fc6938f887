"""
Exception types raised while verifying model output.

Every verification failure derives from :class:`VerificationError`, which
keeps a reference to the raw model text so that callers can show operators
exactly what the model produced.
"""

from __future__ import annotations

from typing import Optional

TRANSCRIPT_SECTION = "transcript"
SUMMARY_SECTION = "summary"


class VerificationError(ValueError):
    """Base class for structural problems in the model's response."""

    def __init__(self, message: str, *, raw_text: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.raw_text = raw_text


class MissingSection(VerificationError):
    """A required section heading was not found in the response."""

    def __init__(self, section: str, detail: Optional[str] = None) -> None:
        message = f"Could not find the '{section}' section in the model's output."
        if detail:
            message = f"{message} {detail}"
        super().__init__(message)
        self.section = section


class EmptySection(VerificationError):
    """A section heading was found but nothing follows it."""

    def __init__(self, section: str) -> None:
        super().__init__(f"The '{section}' section in the model's output is empty.")
        self.section = section


class NoSegmentsParsed(VerificationError):
    """Every non-blank transcript line deviated from the expected format."""

    def __init__(self, line_count: int) -> None:
        super().__init__(
            f"Found {line_count} transcription line(s) but could not parse any of them. "
            "The model's output format may have deviated from the instructions."
        )
        self.line_count = line_count


class ConfigurationError(RuntimeError):
    """Raised when generation settings are missing or invalid."""
