"""Runs one benchmark iteration: both targets, then the judge."""
import logging
import time
from typing import Callable

from .constants import BenchmarkConstants
from .models import BenchmarkConfiguration, IterationRecord, ModelResponseRecord, ModelType
from .pair_judge import GenerateFn, PairJudge
from .throughput_estimator import ThroughputEstimator


# Configure logging
logger = logging.getLogger(__name__)


class IterationRunner:
    """Drives the two target models and the judge for a single iteration."""

    def __init__(
        self,
        config: BenchmarkConfiguration,
        generate: GenerateFn,
        clock: Callable[[], float] = time.perf_counter,
    ):
        self.config = config
        self.generate = generate
        self.clock = clock
        self.judge = PairJudge(generate)

    def run_target(self, model: str, model_type: ModelType) -> ModelResponseRecord:
        """
        Send the configured prompt to one target and time the call.

        Args:
            model: Model identifier.
            model_type: Which target this is.

        Returns:
            ModelResponseRecord with elapsed time and estimated throughput.
        """
        start_time = self.clock()
        response = self.generate(model, BenchmarkConstants.TARGET_TEMPERATURE, self.config.prompt)
        end_time = self.clock()

        elapsed_ms = max(0, int(round((end_time - start_time) * 1000)))
        tokens_per_second = ThroughputEstimator.estimate_tokens_per_second(response, elapsed_ms)
        logger.info(f"{model_type.label} '{model}': {elapsed_ms}ms, {tokens_per_second:.2f} tokens/s")

        return ModelResponseRecord(
            model_name=model,
            model_type=model_type,
            prompt=self.config.prompt,
            response=response,
            execution_time_ms=elapsed_ms,
            tokens_per_second=tokens_per_second,
        )

    def run_iteration(self, index: int) -> IterationRecord:
        """
        Run target A, target B and the judge, in that order.

        Args:
            index: 1-based iteration number.

        Returns:
            IterationRecord for this iteration.
        """
        logger.info(f"Iteration {index}/{self.config.iterations}")
        mlx_result = self.run_target(self.config.mlx_model, ModelType.MLX_LM_STUDIO)
        ollama_result = self.run_target(self.config.ollama_model, ModelType.OLLAMA_STANDARD)

        verdict = self.judge.judge_pair(
            self.config.judge_model,
            self.config.prompt,
            mlx_result.response,
            ollama_result.response,
        )

        return IterationRecord(
            iteration_number=index,
            mlx_result=mlx_result,
            ollama_result=ollama_result,
            judge_result=verdict,
        )
