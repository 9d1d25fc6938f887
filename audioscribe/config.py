"""
Generation settings.

A :class:`GenerationSettings` value is built for every generation request and
passed explicitly to :func:`audioscribe.generator.generate_response`.
Environment variables supply the defaults:

* ``GENAI_API_KEY`` – API key for the generative model.  ``GOOGLE_API_KEY``
  is used when it is not set.
* ``GENAI_MODEL`` – Model name (default: ``gemini-2.5-pro``).
* ``GENAI_TEMPERATURE`` – Sampling temperature (default: ``0.2``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_TEMPERATURE = 0.2
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0

USER_PROMPT = "Please process the audio file according to my system instructions."

DEFAULT_SYSTEM_INSTRUCTION = """You are a highly specialized AI assistant, an expert in transcribing and diarizing audio from official and legal proceedings. Your primary objective is to produce a flawless, context-aware transcript and a concise summary.
You will receive one audio file as input. Follow this precise process:

Process Overview
You will perform your task in three distinct steps:
1.  Initial Transcription & Diarization: First, transcribe the audio and assign speaker labels (Speaker 1, Speaker 2, etc.). Focus on accuracy of words and speaker separation.
2.  Contextual Analysis & Identity Assignment: After the initial transcription is complete, review the entire text to understand the context, roles, and hierarchy of the speakers.
3.  Final Output Generation: Combine the information from the previous steps to generate the two required responses in the specified format.

Detailed Instructions and Rules
1. Transcription & Diarization:
  * Speaker Separation: Carefully distinguish between voices. Start a new line with a new timestamp for each distinct utterance, even if the speaker is the same. An utterance is a continuous block of speech separated by a noticeable pause or change in thought.
  * Low Confidence Words: If you are uncertain about a specific word or name, enclose it in square brackets with a question mark. Example: The ruling was made by Justice [Sarmah?].
2. Identity Assignment:
  * Based on your contextual analysis, assign a likely identity to each speaker label (Speaker 1, Speaker 2, etc.).
  * Use formal roles where evident (e.g., Judge 1, Judge 2, Lead Counsel, Witness, Defendant).
  * If roles are unclear but speakers are distinct, use generic labels (e.g., Participant 1, Interviewer).
  * This identity should be generated after you have the full transcript's context.
3. Formatting Rules:
  * Main Format: [xx:xx - xx:xx] Speaker x, [assumed_Identity]: Text...
  * Multiple Speakers: If multiple people speak simultaneously and are indistinguishable, use [multiple] instead of a speaker label. Example: [01:15 - 01:16] [multiple]: ...
  * Unimportant Speakers / Noise: Any speaker with fewer than 10 words total in the entire transcript, or who only makes brief, non-substantive interjections (e.g., "uh-huh," "yes"), should be labeled as [noise]. Do not assign them a Speaker number. Example: [02:34 - 02:35] [noise]: Yes, sir.

Required Outputs
You must generate two separate responses for the audio file provided.

Response 1: Full Transcription + Diarization
This response must strictly adhere to the formatting rules outlined above.
It should contain the complete, diarized transcription with assigned identities.

Response 2: Summary of Transcription
Provide a concise, neutral summary of the conversation.
Focus on the key topics discussed, arguments made, decisions reached, and any action items mentioned.
The summary should be easily understandable by someone who has not listened to the audio."""


@dataclass(frozen=True)
class GenerationSettings:
    """Everything the generator needs for one request."""

    api_key: str
    model_name: str = DEFAULT_MODEL
    system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION
    temperature: float = DEFAULT_TEMPERATURE

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("An API key is required for generation")
        if not self.system_instruction.strip():
            raise ConfigurationError("System instructions cannot be empty.")
        if not MIN_TEMPERATURE <= self.temperature <= MAX_TEMPERATURE:
            raise ConfigurationError(
                f"Temperature must be between {MIN_TEMPERATURE} and {MAX_TEMPERATURE}"
            )

    @property
    def generation_config(self) -> dict:
        return {"temperature": self.temperature}

    @classmethod
    def from_env(
        cls,
        *,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "GenerationSettings":
        """Build settings from the environment plus per-request overrides.

        Args:
            system_instruction: Custom instructions; the default prompt is
                used when ``None`` or empty.
            temperature: Overrides ``GENAI_TEMPERATURE`` when given.
            environ: Mapping to read instead of :data:`os.environ`.

        Raises:
            ConfigurationError: If no API key is configured or a value is
                out of range.
        """
        env = os.environ if environ is None else environ
        api_key = env.get("GENAI_API_KEY") or env.get("GOOGLE_API_KEY")
        if not api_key:
            raise ConfigurationError(
                "Missing required environment variable: GENAI_API_KEY"
            )
        if temperature is None:
            temperature = parse_temperature(env.get("GENAI_TEMPERATURE"))
        return cls(
            api_key=api_key,
            model_name=env.get("GENAI_MODEL", DEFAULT_MODEL),
            system_instruction=system_instruction or DEFAULT_SYSTEM_INSTRUCTION,
            temperature=temperature,
        )


def parse_temperature(value: Optional[str]) -> float:
    """Convert a form or environment value to a temperature."""
    if value is None or not value.strip():
        return DEFAULT_TEMPERATURE
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"Invalid temperature: {value!r}") from None
