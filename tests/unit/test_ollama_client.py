"""Unit tests for the Ollama client wrapper."""

from unittest.mock import MagicMock, patch

from src.shared.ollama_client import OllamaClient


class TestOllamaClient:
    """Test OllamaClient synchronous wrapper."""

    @patch('src.shared.ollama_client.ollama')
    def test_init_uses_given_host(self, mock_ollama):
        """Test the ollama client is built with the given host and timeout."""
        OllamaClient("http://gpu-box:11434", timeout=12)

        mock_ollama.Client.assert_called_once_with(host="http://gpu-box:11434", timeout=12)

    @patch('src.shared.ollama_client.ollama')
    def test_init_defaults_from_config(self, mock_ollama):
        """Test host and timeout default to configuration."""
        OllamaClient()

        mock_ollama.Client.assert_called_once_with(host="http://localhost:11434", timeout=300)

    @patch('src.shared.ollama_client.ollama')
    def test_generate(self, mock_ollama):
        """Test generate passes temperature as an option and returns only the text."""
        mock_client = MagicMock()
        mock_ollama.Client.return_value = mock_client
        mock_client.generate.return_value = {"response": "generated text", "done": True}

        client = OllamaClient()
        result = client.generate("test-model", "Test prompt", 0.2)

        assert result == "generated text"
        mock_client.generate.assert_called_once_with(
            model="test-model",
            prompt="Test prompt",
            options={"temperature": 0.2},
            stream=False,
        )

    @patch('src.shared.ollama_client.Config')
    @patch('src.shared.ollama_client.ollama')
    def test_explicit_arguments_skip_config(self, mock_ollama, mock_config):
        """Test no settings are loaded when host and timeout are both given."""
        OllamaClient("http://gpu-box:11434", timeout=12)

        mock_config.assert_not_called()

    @patch('src.shared.ollama_client.ollama')
    def test_close(self, mock_ollama):
        """Test close releases the ollama client's HTTP connection pool."""
        client = OllamaClient("http://localhost:11434", timeout=5)
        client.close()

        mock_ollama.Client.return_value._client.close.assert_called_once()
