from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from bizpilot.generate.clients.echo_dev_client import EchoDevClient
from bizpilot.generate.clients.openai_client import OpenAIClient
from bizpilot.generate.modes import AssistantMode
from bizpilot.generate.types import Message


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_openai_client_sends_mode_parameters():
    client = OpenAIClient(model="gpt-4", api_key="sk-test")
    client.client = MagicMock()
    client.client.chat.completions.create.return_value = _completion("hello")

    msgs = [Message("system", "be brief"), Message("user", "hi")]
    text, meta = client.generate(msgs, AssistantMode.PERSONA.params)

    assert text == "hello"
    assert meta == {"engine": "openai", "model": "gpt-4"}
    client.client.chat.completions.create.assert_called_once_with(
        model="gpt-4",
        messages=[{"role": "system", "content": "be brief"}, {"role": "user", "content": "hi"}],
        temperature=0.9,
        max_tokens=1000,
        presence_penalty=0.6,
        frequency_penalty=0.3,
    )


def test_openai_client_missing_content_is_none():
    client = OpenAIClient(api_key="sk-test")
    client.client = MagicMock()
    client.client.chat.completions.create.return_value = _completion(None)
    text, _ = client.generate([Message("user", "hi")], AssistantMode.SUCCESS_MANAGER.params)
    assert text is None


def test_openai_client_errors_propagate():
    client = OpenAIClient(api_key="sk-test")
    client.client = MagicMock()
    client.client.chat.completions.create.side_effect = RuntimeError("rate limited")
    with pytest.raises(RuntimeError):
        client.generate([Message("user", "hi")], AssistantMode.SUCCESS_MANAGER.params)
    assert client.client.chat.completions.create.call_count == 1


def test_echo_client_marks_grounded_prompts():
    echo = EchoDevClient()
    params = AssistantMode.PERSONA.params
    plain, meta = echo.generate([Message("system", "sys"), Message("user", "hi")], params)
    grounded, _ = echo.generate(
        [Message("system", "sys\n\nRelevant information from your knowledge base:\n\n[1] x"), Message("user", "hi")],
        params,
    )
    assert plain == "[ECHO] hi"
    assert grounded == "[ECHO +context] hi"
    assert meta["engine"] == "echo"
