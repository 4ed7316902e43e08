"""Data models for the benchmarking system."""
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import BenchmarkConstants


class BenchmarkConfiguration(BaseModel):
    """Immutable settings for one benchmark run."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    prompt: str = Field(..., description="Prompt sent to both target models")
    mlx_model: str = Field(..., min_length=1, description="Model identifier for target A (LM Studio / MLX)")
    ollama_model: str = Field(..., min_length=1, description="Model identifier for target B (Ollama)")
    judge_model: str = Field(..., min_length=1, description="Model identifier for the judge")
    iterations: int = Field(default=1, ge=1, description="Number of benchmark iterations")


class ModelType(Enum):
    """Which target a response belongs to."""
    MLX_LM_STUDIO = BenchmarkConstants.MLX_LABEL
    OLLAMA_STANDARD = BenchmarkConstants.OLLAMA_LABEL

    @property
    def label(self) -> str:
        return self.value


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ModelResponseRecord:
    """A single target model response with its timing."""
    model_name: str
    model_type: ModelType
    prompt: str
    response: str
    execution_time_ms: int
    tokens_per_second: float
    total_tokens: Optional[int] = None
    timestamp: int = field(default_factory=_now_ms)
    iteration_count: int = 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model_name": self.model_name,
            "model_type": self.model_type.name,
            "response_length": len(self.response),
            "execution_time_ms": self.execution_time_ms,
            "tokens_per_second": self.tokens_per_second,
            "total_tokens": self.total_tokens,
            "timestamp": self.timestamp,
            "iteration_count": self.iteration_count,
        }


@dataclass(frozen=True)
class JudgeVerdict:
    """Judge model's scoring of one MLX/Ollama response pair."""
    judge_model_name: str
    mlx_quality_score: int
    ollama_quality_score: int
    winner: str
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "judge_model_name": self.judge_model_name,
            "mlx_quality_score": self.mlx_quality_score,
            "ollama_quality_score": self.ollama_quality_score,
            "winner": self.winner,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class IterationRecord:
    """Raw data for one benchmark iteration."""
    iteration_number: int
    mlx_result: ModelResponseRecord
    ollama_result: ModelResponseRecord
    judge_result: JudgeVerdict

    @property
    def mlx_response(self) -> str:
        return self.mlx_result.response

    @property
    def ollama_response(self) -> str:
        return self.ollama_result.response

    @property
    def mlx_time_ms(self) -> int:
        return self.mlx_result.execution_time_ms

    @property
    def ollama_time_ms(self) -> int:
        return self.ollama_result.execution_time_ms

    @property
    def mlx_tokens_per_second(self) -> float:
        return self.mlx_result.tokens_per_second

    @property
    def ollama_tokens_per_second(self) -> float:
        return self.ollama_result.tokens_per_second

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iteration_number": self.iteration_number,
            "mlx": self.mlx_result.to_dict(),
            "ollama": self.ollama_result.to_dict(),
            "judge": self.judge_result.to_dict(),
        }


@dataclass(frozen=True)
class LatencyResults:
    """Container for latency percentiles."""
    p50: float
    p90: float
    p95: float


@dataclass(frozen=True)
class ComparisonReport:
    """Single-shot comparison of one MLX and one Ollama response."""
    mlx_result: ModelResponseRecord
    ollama_result: ModelResponseRecord
    speed_difference_percent: float
    mlx_faster: bool
    faster_model: str
    tokens_per_second_difference_percent: Optional[float]
    quality_judgment: Optional[JudgeVerdict] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mlx": self.mlx_result.to_dict(),
            "ollama": self.ollama_result.to_dict(),
            "speed_difference_percent": self.speed_difference_percent,
            "mlx_faster": self.mlx_faster,
            "faster_model": self.faster_model,
            "tokens_per_second_difference_percent": self.tokens_per_second_difference_percent,
            "quality_judgment": self.quality_judgment.to_dict() if self.quality_judgment else None,
        }


@dataclass(frozen=True)
class AggregatedReport:
    """Summary statistics over all iterations of a benchmark run."""
    prompt: str
    mlx_model_name: str
    ollama_model_name: str
    judge_model_name: str
    total_iterations: int
    iterations: List[IterationRecord]
    avg_mlx_time_ms: int
    avg_ollama_time_ms: int
    avg_mlx_tokens_per_second: float
    avg_ollama_tokens_per_second: float
    avg_mlx_quality_score: float
    avg_ollama_quality_score: float
    mlx_wins: int
    ollama_wins: int
    ties: int
    mlx_faster: bool
    faster_model: str
    speed_difference_percent: float
    tokens_per_second_difference_percent: Optional[float]
    higher_quality_model: str
    mlx_latency: LatencyResults
    ollama_latency: LatencyResults

    def to_dict(self, include_iterations: bool = True) -> Dict[str, Any]:
        data = {
            "mlx_model_name": self.mlx_model_name,
            "ollama_model_name": self.ollama_model_name,
            "judge_model_name": self.judge_model_name,
            "total_iterations": self.total_iterations,
            "avg_mlx_time_ms": self.avg_mlx_time_ms,
            "avg_ollama_time_ms": self.avg_ollama_time_ms,
            "avg_mlx_tokens_per_second": self.avg_mlx_tokens_per_second,
            "avg_ollama_tokens_per_second": self.avg_ollama_tokens_per_second,
            "avg_mlx_quality_score": self.avg_mlx_quality_score,
            "avg_ollama_quality_score": self.avg_ollama_quality_score,
            "mlx_wins": self.mlx_wins,
            "ollama_wins": self.ollama_wins,
            "ties": self.ties,
            "mlx_faster": self.mlx_faster,
            "faster_model": self.faster_model,
            "speed_difference_percent": self.speed_difference_percent,
            "tokens_per_second_difference_percent": self.tokens_per_second_difference_percent,
            "higher_quality_model": self.higher_quality_model,
            "mlx_latency_ms": self.mlx_latency.__dict__,
            "ollama_latency_ms": self.ollama_latency.__dict__,
        }
        if include_iterations:
            data["iterations"] = [record.to_dict() for record in self.iterations]
        return data
