import json
from pathlib import Path
from typing import Dict, Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.const import (
    BACKEND_LMSTUDIO,
    BACKEND_OLLAMA,
    CONFIG_FILE_NAME,
    DEFAULT_ITERATIONS,
    DEFAULT_JUDGE_MODEL,
    DEFAULT_LMSTUDIO_HOST,
    DEFAULT_LMSTUDIO_PORT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MLX_MODEL,
    DEFAULT_OLLAMA_HOST,
    DEFAULT_OLLAMA_PORT,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_PROMPT,
    LIBRARY_LOG_LEVELS,
    REQUEST_TIMEOUT,
)


class Config(BaseSettings):
    """Global configuration settings for the benchmark harness."""

    lmstudio_host: str = DEFAULT_LMSTUDIO_HOST
    lmstudio_port: int = DEFAULT_LMSTUDIO_PORT
    ollama_host: str = DEFAULT_OLLAMA_HOST
    ollama_port: int = DEFAULT_OLLAMA_PORT
    mlx_model: str = DEFAULT_MLX_MODEL
    ollama_model: str = DEFAULT_OLLAMA_MODEL
    judge_model: str = DEFAULT_JUDGE_MODEL
    judge_backend: Literal["lmstudio", "ollama"] = BACKEND_LMSTUDIO
    iterations: int = Field(default=DEFAULT_ITERATIONS, ge=1)
    prompt: str = DEFAULT_PROMPT
    request_timeout: float = REQUEST_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        protected_namespaces=('settings_',),
        env_prefix='LLM_BENCH_',
    )

    @property
    def lmstudio_url(self) -> str:
        return f"{self.lmstudio_host}:{self.lmstudio_port}"

    @property
    def ollama_url(self) -> str:
        return f"{self.ollama_host}:{self.ollama_port}"

    @property
    def judge_uses_ollama(self) -> bool:
        return self.judge_backend == BACKEND_OLLAMA

    def to_benchmark_configuration(self):
        """Build the immutable value object handed to the benchmark core."""
        from src.benchmark.models import BenchmarkConfiguration

        return BenchmarkConfiguration(
            prompt=self.prompt,
            mlx_model=self.mlx_model,
            ollama_model=self.ollama_model,
            judge_model=self.judge_model,
            iterations=self.iterations,
        )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from config.json file."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
