"""Benchmark package initialization."""
from .models import (
    AggregatedReport,
    BenchmarkConfiguration,
    ComparisonReport,
    IterationRecord,
    JudgeVerdict,
    LatencyResults,
    ModelResponseRecord,
    ModelType,
)
from .constants import BenchmarkConstants
from .exceptions import BenchmarkExecutionError, GenerationError, InvalidResponseFormatError
from .throughput_estimator import ThroughputEstimator
from .judge_parser import JudgeOutputParser, ParsedJudgment
from .pair_judge import PairJudge
from .iteration_runner import IterationRunner
from .latency_analyzer import LatencyAnalyzer
from .result_aggregator import ResultAggregator
from .model_benchmark import ModelBenchmark
from .generation_executor import GenerationExecutor
from .report_formatter import ReportFormatter
from .runner import BenchmarkRunner

__all__ = [
    'AggregatedReport',
    'BenchmarkConfiguration',
    'ComparisonReport',
    'IterationRecord',
    'JudgeVerdict',
    'LatencyResults',
    'ModelResponseRecord',
    'ModelType',
    'BenchmarkConstants',
    'BenchmarkExecutionError',
    'GenerationError',
    'InvalidResponseFormatError',
    'ThroughputEstimator',
    'JudgeOutputParser',
    'ParsedJudgment',
    'PairJudge',
    'IterationRunner',
    'LatencyAnalyzer',
    'ResultAggregator',
    'ModelBenchmark',
    'GenerationExecutor',
    'ReportFormatter',
    'BenchmarkRunner'
]
