"""Benchmark runner to orchestrate the execution of benchmarks."""
import logging
from typing import Optional, Union

from src.shared.config import Config
from .generation_executor import GenerationExecutor
from .model_benchmark import ModelBenchmark
from .models import AggregatedReport, ComparisonReport
from .report_formatter import ReportFormatter


# Configure logging
logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Wires configuration and backends together, runs the benchmark and reports."""

    def __init__(
        self,
        settings: Config,
        single_shot: bool = False,
        as_json: bool = False,
        executor: Optional[GenerationExecutor] = None,
    ):
        self.settings = settings
        self.single_shot = single_shot
        self.as_json = as_json
        self.executor = executor or GenerationExecutor(settings)
        self.benchmark = ModelBenchmark(settings.to_benchmark_configuration(), self.executor)

    def run(self) -> Union[AggregatedReport, ComparisonReport]:
        """Run the benchmark and log the summary; a generation failure aborts with no report."""
        try:
            if self.single_shot:
                report = self.benchmark.run_single()
            else:
                report = self.benchmark.run_benchmark()

            for line in ReportFormatter.format(report).splitlines():
                logger.info(line)
            if self.as_json:
                print(ReportFormatter.to_json(report))

            logger.info("Benchmark completed successfully!")
            return report

        except Exception as e:
            logger.error(f"Benchmark failed: {e}", stack_info=True)
            raise
        finally:
            self.executor.close()
