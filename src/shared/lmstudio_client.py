"""Client for LM Studio's OpenAI-compatible completion endpoint."""

from typing import Any, Dict, Optional

import httpx

from .config import Config
from src.const import (
    CHOICES_FIELD,
    CONTENT_FIELD,
    LMSTUDIO_CHAT_PATH,
    MESSAGE_FIELD,
    MESSAGES_FIELD,
    MODEL_FIELD,
    ROLE_FIELD,
    STREAM_FIELD,
    TEMPERATURE_FIELD,
    USER_ROLE,
)


class LMStudioClient:
    """Synchronous chat completion against an LM Studio server hosting MLX models."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        if base_url is None or timeout is None:
            config = Config()
            base_url = base_url or config.lmstudio_url
            timeout = timeout if timeout is not None else config.request_timeout
        self.base_url = base_url
        self._client = httpx.Client(
            timeout=httpx.Timeout(
                connect=timeout,
                read=timeout,
                write=timeout,
                pool=timeout,
            )
        )

    def chat(self, model: str, prompt: str, temperature: float) -> Dict[str, Any]:
        """Send a single-turn, non-streaming chat request and return the decoded body."""
        payload = {
            MODEL_FIELD: model,
            MESSAGES_FIELD: [{ROLE_FIELD: USER_ROLE, CONTENT_FIELD: prompt}],
            TEMPERATURE_FIELD: temperature,
            STREAM_FIELD: False,
        }
        response = self._client.post(f"{self.base_url}{LMSTUDIO_CHAT_PATH}", json=payload)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def extract_content(data: Dict[str, Any]) -> Optional[str]:
        """Pull the first choice's message content out of a completion body."""
        try:
            return data[CHOICES_FIELD][0][MESSAGE_FIELD][CONTENT_FIELD]
        except (KeyError, IndexError, TypeError):
            return None

    def close(self) -> None:
        self._client.close()
