from typing import Optional

import ollama

from .config import Config


class OllamaClient:
    """Synchronous text completion against an Ollama daemon."""

    def __init__(self, host: Optional[str] = None, timeout: Optional[float] = None):
        if host is None or timeout is None:
            config = Config()
            host = host or config.ollama_url
            timeout = timeout if timeout is not None else config.request_timeout
        self._client = ollama.Client(host=host, timeout=timeout)

    def generate(self, model: str, prompt: str, temperature: float) -> str:
        """Generate a completion and return only its text."""
        response = self._client.generate(
            model=model,
            prompt=prompt,
            options={"temperature": temperature},
            stream=False,
        )
        return response["response"]

    def close(self) -> None:
        # ollama.Client keeps its httpx.Client as _client
        self._client._client.close()
