"""Latency and score statistics over benchmark iterations."""
from typing import Sequence

import numpy as np

from .constants import BenchmarkConstants
from .models import LatencyResults


class LatencyAnalyzer:
    """Reduces per-iteration measurements to summary statistics."""

    @staticmethod
    def compute_percentiles(latencies_ms: Sequence[float]) -> LatencyResults:
        """
        Compute p50, p90, p95 of elapsed times.

        Args:
            latencies_ms: Per-iteration elapsed times in milliseconds.

        Returns:
            LatencyResults with the percentiles, all zero for no data.
        """
        if not latencies_ms:
            return LatencyResults(p50=0.0, p90=0.0, p95=0.0)

        p50, p90, p95 = np.percentile(latencies_ms, BenchmarkConstants.LATENCY_PERCENTILES)
        return LatencyResults(p50=float(p50), p90=float(p90), p95=float(p95))

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Arithmetic mean, 0.0 for no data."""
        if not values:
            return 0.0
        return float(np.mean(values))

    @staticmethod
    def truncated_mean_ms(latencies_ms: Sequence[int]) -> int:
        """Arithmetic mean truncated to whole milliseconds."""
        return int(LatencyAnalyzer.mean(latencies_ms))
