"""Asks a judge model to score an MLX/Ollama response pair."""
import logging
from typing import Callable, Optional

from .constants import BenchmarkConstants, JUDGE_PROMPT_TEMPLATE
from .judge_parser import JudgeOutputParser
from .models import JudgeVerdict


# Configure logging
logger = logging.getLogger(__name__)

# generate(model, temperature, prompt) -> completion text
GenerateFn = Callable[[str, float, str], str]


class PairJudge:
    """Builds the evaluation instruction, calls the judge once and parses its reply."""

    def __init__(self, generate: GenerateFn, parser: Optional[JudgeOutputParser] = None):
        self.generate = generate
        self.parser = parser or JudgeOutputParser()

    @staticmethod
    def build_prompt(original_prompt: str, response_a: str, response_b: str) -> str:
        """Embed the rubric, the original prompt and both labelled responses."""
        return JUDGE_PROMPT_TEMPLATE.format(
            prompt=original_prompt,
            response_a=response_a,
            response_b=response_b,
            label_a=BenchmarkConstants.MLX_LABEL,
            label_b=BenchmarkConstants.OLLAMA_LABEL,
        )

    def judge_pair(self, judge_model: str, original_prompt: str, response_a: str, response_b: str) -> JudgeVerdict:
        """
        Score response A (MLX) against response B (Ollama).

        Args:
            judge_model: Model identifier of the judge.
            original_prompt: Prompt both targets answered.
            response_a: MLX response.
            response_b: Ollama response.

        Returns:
            JudgeVerdict, with fallback values for anything the judge left out.

        Raises:
            Whatever the generate callable raises; there is no retry.
        """
        instruction = self.build_prompt(original_prompt, response_a, response_b)
        logger.info(f"Asking judge '{judge_model}' to compare responses...")
        raw_output = self.generate(judge_model, BenchmarkConstants.JUDGE_TEMPERATURE, instruction)

        parsed = self.parser.parse(
            raw_output,
            label_a=BenchmarkConstants.MLX_LABEL,
            label_b=BenchmarkConstants.OLLAMA_LABEL,
        )
        logger.info(
            f"Judge scores: {BenchmarkConstants.MLX_LABEL}={parsed.score_a}, "
            f"{BenchmarkConstants.OLLAMA_LABEL}={parsed.score_b}, winner={parsed.winner}"
        )
        return JudgeVerdict(
            judge_model_name=judge_model,
            mlx_quality_score=parsed.score_a,
            ollama_quality_score=parsed.score_b,
            winner=parsed.winner,
            reasoning=parsed.reasoning,
        )
