"""Unit tests for report formatting."""

import json

from src.benchmark.model_benchmark import ModelBenchmark
from src.benchmark.models import JudgeVerdict, ModelResponseRecord, ModelType
from src.benchmark.report_formatter import ReportFormatter
from src.benchmark.result_aggregator import ResultAggregator
from tests.test_const import TEST_MLX_MODEL, TEST_OLLAMA_MODEL, TEST_JUDGE_MODEL, TEST_PROMPT


def make_response(model_name, model_type, time_ms, tps):
    return ModelResponseRecord(
        model_name=model_name,
        model_type=model_type,
        prompt=TEST_PROMPT,
        response="text",
        execution_time_ms=time_ms,
        tokens_per_second=tps,
    )


class TestReportFormatter:
    """Test cases for ReportFormatter."""

    def test_format_percent(self):
        assert ReportFormatter.format_percent(50.0) == "50.00%"
        assert ReportFormatter.format_percent(None) == "n/a"

    def test_comparison_report(self):
        report = ResultAggregator.compare(
            make_response(TEST_MLX_MODEL, ModelType.MLX_LM_STUDIO, 1000, 1.0),
            make_response(TEST_OLLAMA_MODEL, ModelType.OLLAMA_STANDARD, 500, 0.0),
            JudgeVerdict(TEST_JUDGE_MODEL, 80, 60, "MLX", "clearer"),
        )

        text = ReportFormatter.format(report)

        assert "Faster model: OLLAMA (50.00% faster)" in text
        assert "Tokens per second difference: n/a" in text
        assert "winner=MLX" in text
        assert "Reasoning: clearer" in text

    def test_tie_wording(self):
        report = ResultAggregator.compare(
            make_response(TEST_MLX_MODEL, ModelType.MLX_LM_STUDIO, 750, 1.0),
            make_response(TEST_OLLAMA_MODEL, ModelType.OLLAMA_STANDARD, 750, 1.0),
        )

        text = ReportFormatter.format(report)

        assert "Faster model: none (equal times)" in text
        assert "Reasoning" not in text

    def test_aggregated_report(self, benchmark_config, stub_generator, fake_clock):
        report = ModelBenchmark(benchmark_config, stub_generator, clock=fake_clock).run_benchmark()

        text = ReportFormatter.format(report)

        assert "Benchmark Summary (3 iterations)" in text
        assert "Average time: MLX=1000ms, Ollama=500ms" in text
        assert "Wins: MLX=3, Ollama=0, Ties=0" in text
        assert "Higher quality model: MLX" in text

    def test_to_json(self, benchmark_config, stub_generator, fake_clock):
        report = ModelBenchmark(benchmark_config, stub_generator, clock=fake_clock).run_benchmark()

        data = json.loads(ReportFormatter.to_json(report))

        assert data["avg_mlx_time_ms"] == 1000
        assert data["faster_model"] == "OLLAMA"
        assert len(data["iterations"]) == 3
