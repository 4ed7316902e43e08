"""Main class for running MLX vs Ollama judged benchmarks."""
import logging
import time
from typing import Callable, List

from .models import AggregatedReport, BenchmarkConfiguration, ComparisonReport, IterationRecord
from .iteration_runner import IterationRunner
from .pair_judge import GenerateFn
from .result_aggregator import ResultAggregator


# Configure logging
logger = logging.getLogger(__name__)


class ModelBenchmark:
    """Runs iterations sequentially and hands the records to the aggregator."""

    def __init__(
        self,
        config: BenchmarkConfiguration,
        generate: GenerateFn,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.config = config
        self.iteration_runner = IterationRunner(config, generate, clock=clock)
        self.result_aggregator = ResultAggregator()

    def run_iterations(self) -> List[IterationRecord]:
        """Run iterations 1..N in order; the first failure aborts the run."""
        records = []
        for index in range(1, self.config.iterations + 1):
            records.append(self.iteration_runner.run_iteration(index))
        return records

    def run_benchmark(self) -> AggregatedReport:
        """
        Run every configured iteration and summarise them.

        Returns:
            AggregatedReport over all iterations.
        """
        logger.info(
            f"Benchmarking MLX '{self.config.mlx_model}' vs Ollama '{self.config.ollama_model}' "
            f"({self.config.iterations} iterations, judge '{self.config.judge_model}')"
        )
        records = self.run_iterations()
        return self.result_aggregator.aggregate(self.config, records)

    def run_single(self) -> ComparisonReport:
        """
        Run one iteration and compare the two responses directly.

        Returns:
            ComparisonReport including the judge's verdict.
        """
        logger.info(f"Single-shot comparison of MLX '{self.config.mlx_model}' vs Ollama '{self.config.ollama_model}'")
        record = self.iteration_runner.run_iteration(1)
        return self.result_aggregator.compare(record.mlx_result, record.ollama_result, record.judge_result)
