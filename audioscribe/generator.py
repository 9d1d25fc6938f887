"""
Gemini generation client.

:func:`generate_response` sends one audio recording to the model together
with the system instruction from a :class:`~audioscribe.config.GenerationSettings`
and returns the complete response text.  The response is streamed by the
service but buffered here, since verification needs the whole text.
"""

from __future__ import annotations

import logging

import google.generativeai as genai
from tenacity import retry, stop_after_attempt, wait_exponential

from .config import USER_PROMPT, GenerationSettings

logger = logging.getLogger(__name__)


@retry(wait=wait_exponential(multiplier=1), stop=stop_after_attempt(3), reraise=True)
def generate_response(audio: bytes, mime_type: str, settings: GenerationSettings) -> str:
    """Transcribe and summarise ``audio`` with the configured model.

    Args:
        audio: Raw bytes of the uploaded recording.
        mime_type: MIME type of ``audio``.
        settings: Credentials, model name, instructions and temperature.

    Returns:
        The concatenated text of every streamed chunk.
    """
    genai.configure(api_key=settings.api_key)
    model = genai.GenerativeModel(
        settings.model_name,
        system_instruction=settings.system_instruction,
        generation_config=settings.generation_config,
    )
    logger.info(
        "Calling generative model %s with temperature %s",
        settings.model_name,
        settings.temperature,
    )
    response = model.generate_content(
        [{"mime_type": mime_type, "data": audio}, USER_PROMPT],
        stream=True,
    )
    text = "".join(chunk.text for chunk in response)
    logger.info("Received %d characters from %s", len(text), settings.model_name)
    return text
