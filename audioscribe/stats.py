"""
Processing statistics shown next to a transcription.

Token counts are rough estimates (four characters per token); they are not
read back from the model service.
"""

from .models import ProcessingStats

CHARS_PER_TOKEN = 4
INPUT_PRICE_PER_MILLION_TOKENS = 3.5
OUTPUT_PRICE_PER_MILLION_TOKENS = 10.5


def estimate_tokens(text: str) -> int:
    return round(len(text) / CHARS_PER_TOKEN)


def estimate_stats(system_instruction: str, raw_text: str, elapsed: float) -> ProcessingStats:
    """Estimate token usage and cost for one generation request.

    Args:
        system_instruction: The instructions sent to the model.
        raw_text: The complete response text.
        elapsed: Wall-clock seconds spent on the request.
    """
    input_tokens = estimate_tokens(system_instruction)
    output_tokens = estimate_tokens(raw_text)
    cost = (
        input_tokens / 1_000_000 * INPUT_PRICE_PER_MILLION_TOKENS
        + output_tokens / 1_000_000 * OUTPUT_PRICE_PER_MILLION_TOKENS
    )
    return ProcessingStats(
        processing_time=round(elapsed, 2),
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        estimated_cost=float(f"{cost:.4g}"),
    )
