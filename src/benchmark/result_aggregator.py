"""Reduces iteration records to comparison reports."""
import logging
from typing import List, Optional, Tuple

from .constants import BenchmarkConstants
from .exceptions import BenchmarkExecutionError
from .latency_analyzer import LatencyAnalyzer
from .models import (
    AggregatedReport,
    BenchmarkConfiguration,
    ComparisonReport,
    IterationRecord,
    JudgeVerdict,
    ModelResponseRecord,
)


# Configure logging
logger = logging.getLogger(__name__)


class ResultAggregator:
    """Computes averages, win counts and relative differences."""

    @staticmethod
    def faster_model(mlx_time_ms: float, ollama_time_ms: float) -> str:
        """Label of the target with the lower time, or the tie label when equal."""
        if mlx_time_ms < ollama_time_ms:
            return BenchmarkConstants.MLX_LABEL
        if ollama_time_ms < mlx_time_ms:
            return BenchmarkConstants.OLLAMA_LABEL
        return BenchmarkConstants.TIE_LABEL

    @staticmethod
    def speed_difference_percent(mlx_time_ms: float, ollama_time_ms: float) -> float:
        """
        How much faster the faster target is, relative to the slower one.

        Args:
            mlx_time_ms: MLX elapsed time.
            ollama_time_ms: Ollama elapsed time.

        Returns:
            Percentage of the slower time saved, 0.0 when both times are zero.
        """
        slower = max(mlx_time_ms, ollama_time_ms)
        if slower <= 0:
            return 0.0
        return abs(mlx_time_ms - ollama_time_ms) / slower * 100

    @staticmethod
    def tokens_per_second_difference_percent(mlx_tps: float, ollama_tps: float) -> Optional[float]:
        """
        How much higher the higher throughput is, relative to the lower one.

        Args:
            mlx_tps: MLX tokens per second.
            ollama_tps: Ollama tokens per second.

        Returns:
            Percentage above the lower throughput, 0.0 when equal, or None when
            the lower throughput is zero and the figures cannot be compared.
        """
        if mlx_tps == ollama_tps:
            return 0.0
        lower = min(mlx_tps, ollama_tps)
        if lower <= 0:
            logger.warning(
                f"Throughput not comparable: MLX={mlx_tps:.2f} tokens/s, Ollama={ollama_tps:.2f} tokens/s"
            )
            return None
        return abs(mlx_tps - ollama_tps) / lower * 100

    @staticmethod
    def count_outcomes(verdicts: List[JudgeVerdict]) -> Tuple[int, int, int]:
        """Return (mlx_wins, ollama_wins, ties); unrecognised winners count as ties."""
        mlx_wins = ollama_wins = ties = 0
        for verdict in verdicts:
            winner = verdict.winner.casefold()
            if winner == BenchmarkConstants.MLX_LABEL.casefold():
                mlx_wins += 1
            elif winner == BenchmarkConstants.OLLAMA_LABEL.casefold():
                ollama_wins += 1
            else:
                ties += 1
        return mlx_wins, ollama_wins, ties

    @staticmethod
    def higher_quality_model(mlx_wins: int, ollama_wins: int) -> str:
        if mlx_wins > ollama_wins:
            return BenchmarkConstants.MLX_LABEL
        if ollama_wins > mlx_wins:
            return BenchmarkConstants.OLLAMA_LABEL
        return BenchmarkConstants.TIE_LABEL

    @classmethod
    def compare(
        cls,
        mlx_result: ModelResponseRecord,
        ollama_result: ModelResponseRecord,
        quality_judgment: Optional[JudgeVerdict] = None,
    ) -> ComparisonReport:
        """Build a single-shot comparison from one response per target."""
        return ComparisonReport(
            mlx_result=mlx_result,
            ollama_result=ollama_result,
            speed_difference_percent=cls.speed_difference_percent(
                mlx_result.execution_time_ms, ollama_result.execution_time_ms
            ),
            mlx_faster=mlx_result.execution_time_ms < ollama_result.execution_time_ms,
            faster_model=cls.faster_model(mlx_result.execution_time_ms, ollama_result.execution_time_ms),
            tokens_per_second_difference_percent=cls.tokens_per_second_difference_percent(
                mlx_result.tokens_per_second, ollama_result.tokens_per_second
            ),
            quality_judgment=quality_judgment,
        )

    @classmethod
    def aggregate(cls, config: BenchmarkConfiguration, records: List[IterationRecord]) -> AggregatedReport:
        """
        Summarise all iterations of a run.

        Args:
            config: Configuration the records were produced with.
            records: Iteration records in iteration order.

        Returns:
            AggregatedReport over the records.

        Raises:
            BenchmarkExecutionError: If there are no records.
        """
        if not records:
            raise BenchmarkExecutionError("Cannot aggregate a benchmark with no iterations")

        mlx_times = [record.mlx_time_ms for record in records]
        ollama_times = [record.ollama_time_ms for record in records]
        avg_mlx_time_ms = LatencyAnalyzer.truncated_mean_ms(mlx_times)
        avg_ollama_time_ms = LatencyAnalyzer.truncated_mean_ms(ollama_times)
        avg_mlx_tps = LatencyAnalyzer.mean([record.mlx_tokens_per_second for record in records])
        avg_ollama_tps = LatencyAnalyzer.mean([record.ollama_tokens_per_second for record in records])

        verdicts = [record.judge_result for record in records]
        mlx_wins, ollama_wins, ties = cls.count_outcomes(verdicts)

        return AggregatedReport(
            prompt=config.prompt,
            mlx_model_name=config.mlx_model,
            ollama_model_name=config.ollama_model,
            judge_model_name=config.judge_model,
            total_iterations=len(records),
            iterations=list(records),
            avg_mlx_time_ms=avg_mlx_time_ms,
            avg_ollama_time_ms=avg_ollama_time_ms,
            avg_mlx_tokens_per_second=avg_mlx_tps,
            avg_ollama_tokens_per_second=avg_ollama_tps,
            avg_mlx_quality_score=LatencyAnalyzer.mean([v.mlx_quality_score for v in verdicts]),
            avg_ollama_quality_score=LatencyAnalyzer.mean([v.ollama_quality_score for v in verdicts]),
            mlx_wins=mlx_wins,
            ollama_wins=ollama_wins,
            ties=ties,
            mlx_faster=avg_mlx_time_ms < avg_ollama_time_ms,
            faster_model=cls.faster_model(avg_mlx_time_ms, avg_ollama_time_ms),
            speed_difference_percent=cls.speed_difference_percent(avg_mlx_time_ms, avg_ollama_time_ms),
            tokens_per_second_difference_percent=cls.tokens_per_second_difference_percent(
                avg_mlx_tps, avg_ollama_tps
            ),
            higher_quality_model=cls.higher_quality_model(mlx_wins, ollama_wins),
            mlx_latency=LatencyAnalyzer.compute_percentiles(mlx_times),
            ollama_latency=LatencyAnalyzer.compute_percentiles(ollama_times),
        )
