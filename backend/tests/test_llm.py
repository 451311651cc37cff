from unittest.mock import MagicMock, patch

import pytest

from backend.llm.config import LLMConfig
from backend.llm.groq_client import GroqTextModel

ENABLED_CONFIG = LLMConfig(api_key="test-key", enabled=True)
DISABLED_CONFIG = LLMConfig(api_key="test-key", enabled=False)
NO_KEY_CONFIG = LLMConfig(api_key="", enabled=True)


def _mock_groq_response(content: str | None) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


@patch("backend.llm.groq_client.Groq")
def test_complete_returns_model_text(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(
        'Sure! [{"id": "1", "relevance": 0.9}]'
    )

    model = GroqTextModel(ENABLED_CONFIG)
    result = model.complete("recommend something")

    assert result == 'Sure! [{"id": "1", "relevance": 0.9}]'
    mock_groq_cls.assert_called_once_with(api_key="test-key", timeout=ENABLED_CONFIG.timeout)
    kwargs = mock_groq_cls.return_value.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == ENABLED_CONFIG.model
    assert kwargs["messages"][-1] == {"role": "user", "content": "recommend something"}


@patch("backend.llm.groq_client.Groq")
def test_complete_reuses_client(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("[]")

    model = GroqTextModel(ENABLED_CONFIG)
    model.complete("a")
    model.complete("b")

    assert mock_groq_cls.call_count == 1


@patch("backend.llm.groq_client.Groq")
def test_complete_empty_content(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(None)

    assert GroqTextModel(ENABLED_CONFIG).complete("a") == ""


@patch("backend.llm.groq_client.Groq")
def test_complete_propagates_api_error(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")

    with pytest.raises(Exception, match="API timeout"):
        GroqTextModel(ENABLED_CONFIG).complete("a")


@patch("backend.llm.groq_client.Groq")
def test_complete_disabled(mock_groq_cls):
    assert GroqTextModel(DISABLED_CONFIG).complete("a") == ""
    assert GroqTextModel(NO_KEY_CONFIG).complete("a") == ""
    mock_groq_cls.assert_not_called()
