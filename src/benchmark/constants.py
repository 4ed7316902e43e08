"""Constants for the benchmarking system."""


class BenchmarkConstants:
    """Centralized constants for benchmark configuration."""
    TARGET_TEMPERATURE = 0.2
    JUDGE_TEMPERATURE = 0.3
    CHARS_PER_TOKEN = 4
    MLX_LABEL = "MLX"
    OLLAMA_LABEL = "OLLAMA"
    TIE_LABEL = "Tie"
    MIN_SCORE = 0
    MAX_SCORE = 100
    FALLBACK_SCORE = 50
    FALLBACK_WINNER = TIE_LABEL
    FALLBACK_REASONING = "No reasoning provided"
    LATENCY_PERCENTILES = (50, 90, 95)


JUDGE_PROMPT_TEMPLATE = """You are an impartial expert judge comparing two answers to the same prompt.

Evaluate both responses on these criteria:
1. Factual accuracy: are the facts, figures and calculations correct?
2. Completeness: does the response address every part of the prompt?
3. Reasoning quality: is the reasoning sound, explicit and well supported?
4. Clarity and organization: is the response clear, concise and well structured?

Original prompt:
{prompt}

Response A ({label_a}):
{response_a}

Response B ({label_b}):
{response_b}

Score each response from 0 to 100 and pick a winner.
Respond in exactly this format, with nothing else:
{label_a}_SCORE: <integer 0-100>
{label_b}_SCORE: <integer 0-100>
WINNER: <{label_a}, {label_b} or TIE>
REASONING: <one paragraph explaining your decision>"""
