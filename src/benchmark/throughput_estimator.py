"""Estimates generation throughput from response length and elapsed time."""
from .constants import BenchmarkConstants


class ThroughputEstimator:
    """Character-count heuristic for tokens per second."""

    @staticmethod
    def estimate_tokens_per_second(response_text: str, elapsed_ms: float) -> float:
        """
        Estimate tokens/sec assuming a fixed number of characters per token.

        Args:
            response_text: Generated text.
            elapsed_ms: Wall-clock generation time in milliseconds.

        Returns:
            Estimated tokens per second, 0.0 when no time elapsed.
        """
        estimated_tokens = len(response_text) // BenchmarkConstants.CHARS_PER_TOKEN
        elapsed_seconds = elapsed_ms / 1000
        if elapsed_seconds > 0:
            return estimated_tokens / elapsed_seconds
        return 0.0
