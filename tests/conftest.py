"""Shared test configuration and fixtures for all tests."""

import pytest
from unittest.mock import MagicMock

from src.benchmark.models import BenchmarkConfiguration
from .test_const import (
    TEST_MLX_MODEL, TEST_OLLAMA_MODEL, TEST_JUDGE_MODEL, TEST_PROMPT,
    MLX_RESPONSE, OLLAMA_RESPONSE, MLX_SECONDS, OLLAMA_SECONDS,
    JUDGE_OUTPUT_MLX_WINS,
)


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubGenerator:
    """Deterministic generate(model, temperature, prompt) stand-in.

    Target models return a fixed text and advance the clock by a fixed time;
    any other model is treated as the judge.
    """

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.targets = {}
        self.judge_outputs = [JUDGE_OUTPUT_MLX_WINS]
        self.calls = []

    def with_target(self, model: str, response: str, seconds: float):
        self.targets[model] = (response, seconds)
        return self

    def with_judge_outputs(self, *outputs: str):
        self.judge_outputs = list(outputs)
        return self

    def __call__(self, model: str, temperature: float, prompt: str) -> str:
        self.calls.append((model, temperature, prompt))
        if model in self.targets:
            response, seconds = self.targets[model]
            self.clock.advance(seconds)
            return response
        judge_calls = sum(1 for call in self.calls if call[0] not in self.targets)
        return self.judge_outputs[(judge_calls - 1) % len(self.judge_outputs)]


@pytest.fixture
def fake_clock():
    """Fake clock fixture."""
    return FakeClock()


@pytest.fixture
def stub_generator(fake_clock):
    """Stub generator: MLX 'AAAA' in 1000ms, Ollama 'AAAAAAAA' in 500ms, judge picks MLX."""
    return (
        StubGenerator(fake_clock)
        .with_target(TEST_MLX_MODEL, MLX_RESPONSE, MLX_SECONDS)
        .with_target(TEST_OLLAMA_MODEL, OLLAMA_RESPONSE, OLLAMA_SECONDS)
    )


@pytest.fixture
def benchmark_config():
    """Three-iteration benchmark configuration fixture."""
    return BenchmarkConfiguration(
        prompt=TEST_PROMPT,
        mlx_model=TEST_MLX_MODEL,
        ollama_model=TEST_OLLAMA_MODEL,
        judge_model=TEST_JUDGE_MODEL,
        iterations=3,
    )


@pytest.fixture
def mock_settings():
    """Mock settings fixture with test model names and the judge on LM Studio."""
    settings = MagicMock()
    settings.mlx_model = TEST_MLX_MODEL
    settings.ollama_model = TEST_OLLAMA_MODEL
    settings.judge_model = TEST_JUDGE_MODEL
    settings.judge_uses_ollama = False
    settings.lmstudio_url = "http://localhost:1234"
    settings.ollama_url = "http://localhost:11434"
    settings.request_timeout = 300
    return settings
