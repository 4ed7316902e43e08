"""Routes text generation calls to the LM Studio or Ollama backend."""
import logging
from typing import Optional

import httpx
import ollama

from src.shared.config import Config
from src.shared.lmstudio_client import LMStudioClient
from src.shared.ollama_client import OllamaClient
from .exceptions import GenerationError, InvalidResponseFormatError


# Configure logging
logger = logging.getLogger(__name__)


class GenerationExecutor:
    """The generate(model, temperature, prompt) capability backed by real servers.

    The configured MLX model goes to LM Studio and the Ollama model to Ollama.
    The judge model, and any model not otherwise configured, goes to the
    backend named by `judge_backend`.
    """

    def __init__(
        self,
        config: Config,
        lmstudio_client: Optional[LMStudioClient] = None,
        ollama_client: Optional[OllamaClient] = None,
    ):
        self.config = config
        self.lmstudio_client = lmstudio_client or LMStudioClient(config.lmstudio_url, config.request_timeout)
        self.ollama_client = ollama_client or OllamaClient(config.ollama_url, config.request_timeout)

    def uses_ollama(self, model: str) -> bool:
        """Whether a model identifier is served by Ollama."""
        if model == self.config.mlx_model:
            return False
        if model == self.config.ollama_model:
            return True
        return self.config.judge_uses_ollama

    def __call__(self, model: str, temperature: float, prompt: str) -> str:
        return self.generate(model, temperature, prompt)

    def generate(self, model: str, temperature: float, prompt: str) -> str:
        """
        Generate a completion with the backend serving `model`.

        Args:
            model: Model identifier.
            temperature: Sampling temperature.
            prompt: Prompt text.

        Returns:
            Completion text.

        Raises:
            GenerationError: If the backend call fails.
            InvalidResponseFormatError: If LM Studio returns no completion text.
        """
        if self.uses_ollama(model):
            return self._generate_ollama(model, temperature, prompt)
        return self._generate_lmstudio(model, temperature, prompt)

    def _generate_ollama(self, model: str, temperature: float, prompt: str) -> str:
        try:
            return self.ollama_client.generate(model, prompt, temperature)
        except (ollama.ResponseError, httpx.HTTPError, ConnectionError) as e:
            logger.error(f"Ollama generation with '{model}' failed: {e}")
            raise GenerationError(f"Ollama generation with '{model}' failed") from e

    def _generate_lmstudio(self, model: str, temperature: float, prompt: str) -> str:
        try:
            data = self.lmstudio_client.chat(model, prompt, temperature)
        except httpx.HTTPError as e:
            logger.error(f"LM Studio generation with '{model}' failed: {e}")
            raise GenerationError(f"LM Studio generation with '{model}' failed") from e
        except ValueError as e:
            logger.error(f"LM Studio returned a non-JSON body for '{model}': {e}")
            raise InvalidResponseFormatError(f"LM Studio response for '{model}' is not JSON") from e

        content = LMStudioClient.extract_content(data)
        if content is None:
            raise InvalidResponseFormatError(f"LM Studio response for '{model}' has no message content")
        return content

    def close(self) -> None:
        self.lmstudio_client.close()
        self.ollama_client.close()
