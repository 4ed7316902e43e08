"""Unit tests for the LM Studio client."""

from unittest.mock import MagicMock, patch

import pytest

from src.shared.lmstudio_client import LMStudioClient


class TestLMStudioClient:
    """Test LMStudioClient."""

    @patch('src.shared.lmstudio_client.httpx')
    def test_chat_posts_payload(self, mock_httpx):
        """Test chat sends a single-turn, non-streaming request."""
        mock_http = MagicMock()
        mock_httpx.Client.return_value = mock_http
        mock_http.post.return_value.json.return_value = {"choices": []}

        client = LMStudioClient("http://localhost:1234", timeout=10)
        result = client.chat("mlx-model", "Hello", 0.2)

        assert result == {"choices": []}
        mock_http.post.assert_called_once_with(
            "http://localhost:1234/v1/chat/completions",
            json={
                "model": "mlx-model",
                "messages": [{"role": "user", "content": "Hello"}],
                "temperature": 0.2,
                "stream": False,
            },
        )
        mock_http.post.return_value.raise_for_status.assert_called_once()

    @patch('src.shared.lmstudio_client.Config')
    @patch('src.shared.lmstudio_client.httpx')
    def test_explicit_arguments_skip_config(self, mock_httpx, mock_config):
        LMStudioClient("http://localhost:1234", timeout=10)

        mock_config.assert_not_called()
        mock_httpx.Timeout.assert_called_once_with(connect=10, read=10, write=10, pool=10)

    @patch('src.shared.lmstudio_client.httpx')
    def test_close(self, mock_httpx):
        client = LMStudioClient("http://localhost:1234")
        client.close()
        mock_httpx.Client.return_value.close.assert_called_once()

    def test_extract_content(self):
        data = {"choices": [{"message": {"role": "assistant", "content": "answer"}}]}
        assert LMStudioClient.extract_content(data) == "answer"

    @pytest.mark.parametrize("data", [
        {},
        {"choices": []},
        {"choices": [{}]},
        {"choices": [{"message": None}]},
        None,
    ])
    def test_extract_content_missing(self, data):
        assert LMStudioClient.extract_content(data) is None
