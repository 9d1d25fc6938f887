from audioscribe.stats import estimate_stats, estimate_tokens


def test_estimate_tokens():
    assert estimate_tokens("") == 0
    assert estimate_tokens("abcdefgh") == 2


def test_estimate_stats():
    stats = estimate_stats("x" * 4000, "y" * 40000, 3.14159)
    assert stats.processing_time == 3.14
    assert stats.input_tokens == 1000
    assert stats.output_tokens == 10000
    # 1000 * 3.5e-6 + 10000 * 10.5e-6
    assert stats.estimated_cost == 0.1085
    assert stats.to_dict() == {
        "processingTime": 3.14,
        "inputTokens": 1000,
        "outputTokens": 10000,
        "estimatedCost": 0.1085,
    }
