"""Extracts scores, winner and reasoning from free-form judge output."""
import logging
import re
from typing import NamedTuple, Optional

from .constants import BenchmarkConstants


# Configure logging
logger = logging.getLogger(__name__)


class ParsedJudgment(NamedTuple):
    """Fields pulled out of a judge reply, fallbacks already applied."""
    score_a: int
    score_b: int
    winner: str
    reasoning: str


class JudgeOutputParser:
    """Tolerant per-field extraction of the judge's four-line answer.

    Every field is searched for on its own, so a judge that garbles one line
    still yields the others. Missing fields fall back to fixed values and the
    parser never raises.
    """

    WINNER_PATTERN = re.compile(r"WINNER:[^\w\n]*(\w+)", re.IGNORECASE)
    REASONING_PATTERN = re.compile(r"REASONING:[ \t]*(.*)", re.IGNORECASE)

    @staticmethod
    def _score_pattern(label: str) -> "re.Pattern[str]":
        return re.compile(rf"\b{re.escape(label)}_SCORE:[^\d\n]*0*(\d+)", re.IGNORECASE)

    @classmethod
    def parse_score(cls, text: str, label: str) -> int:
        """Return the score after `<label>_SCORE:`, clamped to 0-100, or the fallback."""
        match = cls._score_pattern(label).search(text)
        if not match:
            logger.warning(f"No {label}_SCORE found in judge output, using {BenchmarkConstants.FALLBACK_SCORE}")
            return BenchmarkConstants.FALLBACK_SCORE
        digits = match.group(1)
        # No leading zeros, so four or more digits exceeds MAX_SCORE
        if len(digits) > 3:
            return BenchmarkConstants.MAX_SCORE
        return max(BenchmarkConstants.MIN_SCORE, min(BenchmarkConstants.MAX_SCORE, int(digits)))

    @classmethod
    def parse_winner(
        cls,
        text: str,
        label_a: str = BenchmarkConstants.MLX_LABEL,
        label_b: str = BenchmarkConstants.OLLAMA_LABEL,
    ) -> str:
        """Return the winner token, canonicalised when it names a target or a tie."""
        match = cls.WINNER_PATTERN.search(text)
        if not match:
            logger.warning(f"No WINNER found in judge output, using {BenchmarkConstants.FALLBACK_WINNER}")
            return BenchmarkConstants.FALLBACK_WINNER
        token = match.group(1)
        for label in (label_a, label_b, BenchmarkConstants.TIE_LABEL):
            if token.casefold() == label.casefold():
                return label
        return token

    @classmethod
    def parse_reasoning(cls, text: str) -> str:
        match = cls.REASONING_PATTERN.search(text)
        reasoning = match.group(1).strip() if match else ""
        if not reasoning:
            logger.warning("No REASONING found in judge output")
            return BenchmarkConstants.FALLBACK_REASONING
        return reasoning

    @classmethod
    def parse(
        cls,
        text: Optional[str],
        label_a: str = BenchmarkConstants.MLX_LABEL,
        label_b: str = BenchmarkConstants.OLLAMA_LABEL,
    ) -> ParsedJudgment:
        """
        Parse judge output into (score_a, score_b, winner, reasoning).

        Args:
            text: Raw judge reply, may be empty or None.
            label_a: Label used for the first response's score line.
            label_b: Label used for the second response's score line.

        Returns:
            ParsedJudgment with every field populated.
        """
        text = text or ""
        return ParsedJudgment(
            score_a=cls.parse_score(text, label_a),
            score_b=cls.parse_score(text, label_b),
            winner=cls.parse_winner(text, label_a, label_b),
            reasoning=cls.parse_reasoning(text),
        )
