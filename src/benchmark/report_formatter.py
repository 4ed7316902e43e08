"""Human-readable and JSON renderings of benchmark reports."""
import json
from typing import List, Optional, Union

from .constants import BenchmarkConstants
from .models import AggregatedReport, ComparisonReport


class ReportFormatter:
    """Formats reports for the console."""

    SEPARATOR = "-" * 45

    @staticmethod
    def format_percent(value: Optional[float]) -> str:
        if value is None:
            return "n/a"
        return f"{value:.2f}%"

    @classmethod
    def _speed_line(cls, faster_model: str, speed_difference_percent: float) -> str:
        if faster_model == BenchmarkConstants.TIE_LABEL:
            return "Faster model: none (equal times)"
        return f"Faster model: {faster_model} ({cls.format_percent(speed_difference_percent)} faster)"

    @classmethod
    def comparison_lines(cls, report: ComparisonReport) -> List[str]:
        lines = [
            cls.SEPARATOR,
            "Comparing Results",
            cls.SEPARATOR,
            f"MLX '{report.mlx_result.model_name}': {report.mlx_result.execution_time_ms}ms, "
            f"{report.mlx_result.tokens_per_second:.2f} tokens/s",
            f"Ollama '{report.ollama_result.model_name}': {report.ollama_result.execution_time_ms}ms, "
            f"{report.ollama_result.tokens_per_second:.2f} tokens/s",
            cls._speed_line(report.faster_model, report.speed_difference_percent),
            f"Tokens per second difference: {cls.format_percent(report.tokens_per_second_difference_percent)}",
        ]
        judgment = report.quality_judgment
        if judgment is not None:
            lines.extend([
                f"Quality ({judgment.judge_model_name}): MLX={judgment.mlx_quality_score}, "
                f"Ollama={judgment.ollama_quality_score}, winner={judgment.winner}",
                f"Reasoning: {judgment.reasoning}",
            ])
        lines.append(cls.SEPARATOR)
        return lines

    @classmethod
    def aggregated_lines(cls, report: AggregatedReport) -> List[str]:
        return [
            cls.SEPARATOR,
            f"Benchmark Summary ({report.total_iterations} iterations)",
            cls.SEPARATOR,
            f"MLX model: {report.mlx_model_name}",
            f"Ollama model: {report.ollama_model_name}",
            f"Judge model: {report.judge_model_name}",
            f"Average time: MLX={report.avg_mlx_time_ms}ms, Ollama={report.avg_ollama_time_ms}ms",
            f"Latency p50/p90/p95: MLX={report.mlx_latency.p50:.0f}/{report.mlx_latency.p90:.0f}/"
            f"{report.mlx_latency.p95:.0f}ms, Ollama={report.ollama_latency.p50:.0f}/"
            f"{report.ollama_latency.p90:.0f}/{report.ollama_latency.p95:.0f}ms",
            f"Average tokens/s: MLX={report.avg_mlx_tokens_per_second:.2f}, "
            f"Ollama={report.avg_ollama_tokens_per_second:.2f}",
            cls._speed_line(report.faster_model, report.speed_difference_percent),
            f"Tokens per second difference: {cls.format_percent(report.tokens_per_second_difference_percent)}",
            f"Average quality: MLX={report.avg_mlx_quality_score:.1f}, Ollama={report.avg_ollama_quality_score:.1f}",
            f"Wins: MLX={report.mlx_wins}, Ollama={report.ollama_wins}, Ties={report.ties}",
            f"Higher quality model: {report.higher_quality_model}",
            cls.SEPARATOR,
        ]

    @classmethod
    def format(cls, report: Union[AggregatedReport, ComparisonReport]) -> str:
        if isinstance(report, AggregatedReport):
            return "\n".join(cls.aggregated_lines(report))
        return "\n".join(cls.comparison_lines(report))

    @staticmethod
    def to_json(report: Union[AggregatedReport, ComparisonReport]) -> str:
        return json.dumps(report.to_dict(), indent=2)
