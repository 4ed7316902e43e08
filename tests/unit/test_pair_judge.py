"""Unit tests for the single-pair judge step."""

from unittest.mock import MagicMock

import pytest

from src.benchmark.models import JudgeVerdict
from src.benchmark.pair_judge import PairJudge
from tests.test_const import (
    TEST_JUDGE_MODEL, TEST_PROMPT, JUDGE_OUTPUT_MLX_WINS, JUDGE_OUTPUT_NO_LABELS,
    JUDGE_TEMPERATURE,
)


class TestPairJudge:
    """Test PairJudge."""

    def test_build_prompt_contents(self):
        prompt = PairJudge.build_prompt("What is 2+2?", "four", "4")

        for criterion in ["Factual accuracy", "Completeness", "Reasoning quality", "Clarity and organization"]:
            assert criterion in prompt
        assert "What is 2+2?" in prompt
        assert "Response A (MLX):\nfour" in prompt
        assert "Response B (OLLAMA):\n4" in prompt
        for line in ["MLX_SCORE:", "OLLAMA_SCORE:", "WINNER:", "REASONING:"]:
            assert line in prompt

    def test_build_prompt_tolerates_braces(self):
        prompt = PairJudge.build_prompt("Return {json}", "{\"a\": 1}", "}{")
        assert "Return {json}" in prompt
        assert "{\"a\": 1}" in prompt

    def test_judge_pair_calls_judge_once(self):
        generate = MagicMock(return_value=JUDGE_OUTPUT_MLX_WINS)
        judge = PairJudge(generate)

        verdict = judge.judge_pair(TEST_JUDGE_MODEL, TEST_PROMPT, "resp a", "resp b")

        assert verdict == JudgeVerdict(
            judge_model_name=TEST_JUDGE_MODEL,
            mlx_quality_score=80,
            ollama_quality_score=60,
            winner="MLX",
            reasoning="ok",
        )
        generate.assert_called_once()
        model, temperature, instruction = generate.call_args[0]
        assert model == TEST_JUDGE_MODEL
        assert temperature == JUDGE_TEMPERATURE
        assert instruction == PairJudge.build_prompt(TEST_PROMPT, "resp a", "resp b")

    def test_judge_pair_malformed_output(self):
        judge = PairJudge(MagicMock(return_value=JUDGE_OUTPUT_NO_LABELS))

        verdict = judge.judge_pair(TEST_JUDGE_MODEL, TEST_PROMPT, "a", "b")

        assert (verdict.mlx_quality_score, verdict.ollama_quality_score) == (50, 50)
        assert verdict.winner == "Tie"
        assert verdict.reasoning == "No reasoning provided"

    def test_judge_pair_canonical_winner(self):
        judge = PairJudge(MagicMock(return_value="MLX_SCORE: 70\nOLLAMA_SCORE: 75\nwinner: ollama\nREASONING: r"))

        verdict = judge.judge_pair(TEST_JUDGE_MODEL, TEST_PROMPT, "a", "b")

        assert verdict.winner == "OLLAMA"
        assert verdict.to_dict()["winner"] == "OLLAMA"

    def test_judge_pair_propagates_failure(self):
        judge = PairJudge(MagicMock(side_effect=RuntimeError("judge down")))

        with pytest.raises(RuntimeError, match="judge down"):
            judge.judge_pair(TEST_JUDGE_MODEL, TEST_PROMPT, "a", "b")
