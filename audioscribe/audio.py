"""
Audio upload helpers.

The generative model accepts audio inline together with its MIME type.  The
browser usually supplies one with the upload; when it does not, the type is
derived from the file extension.
"""

from pathlib import Path
from typing import Optional

DEFAULT_MIME_TYPE = "audio/mpeg"

SUPPORTED_EXTENSIONS = {
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".m4a": "audio/mp4",
    ".mp4": "audio/mp4",
    ".aac": "audio/aac",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
    ".webm": "audio/webm",
    ".aiff": "audio/aiff",
}


def is_supported_audio(file_name: str) -> bool:
    """Check whether ``file_name`` has a supported audio extension."""
    return Path(file_name).suffix.lower() in SUPPORTED_EXTENSIONS


def resolve_mime_type(file_name: str, declared: Optional[str] = None) -> str:
    """Pick the MIME type to send with the audio.

    An ``audio/*`` type declared by the client wins; otherwise the extension
    decides, falling back to :data:`DEFAULT_MIME_TYPE`.
    """
    if declared and declared.startswith("audio/"):
        return declared
    return SUPPORTED_EXTENSIONS.get(Path(file_name).suffix.lower(), DEFAULT_MIME_TYPE)
