"""
Tests for the Ollama HTTP client, with the requests session mocked out.
"""

import warnings
from unittest.mock import MagicMock

import pytest
import requests

from assistant_cli.ollama_api.client import (
    OllamaAPIError,
    OllamaClient,
    OllamaConnectionError,
)
from assistant_cli.ollama_api.data_models import GenerateOptions, GenerateRequest

HOST = "http://localhost:11434"


def _response(ok=True, status_code=200, reason="OK", json_data=None, lines=None):
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.reason = reason
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    response.iter_lines.return_value = iter(lines or [])
    return response


def _client(response=None, side_effect=None):
    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.request.side_effect = side_effect
    else:
        session.request.return_value = response
    return OllamaClient(HOST + "/", session=session), session


def _request(stream=True):
    return GenerateRequest(
        model="llama3.2",
        prompt="Hello",
        stream=stream,
        options=GenerateOptions(temperature=0.3),
    )


def test_generate_posts_payload_and_parses_reply():
    client, session = _client(_response(json_data={"model": "llama3.2", "response": "Hi there", "done": True}))
    result = client.generate(_request(stream=True))

    assert result.response == "Hi there"
    session.request.assert_called_once_with(
        "POST",
        HOST + "/api/generate",
        timeout=300,
        json={
            "model": "llama3.2",
            "prompt": "Hello",
            "stream": False,
            "options": {"temperature": 0.3},
        },
    )


def test_generate_error_body_raises():
    client, _ = _client(_response(json_data={"error": "model runner crashed"}))
    with pytest.raises(OllamaAPIError, match="model runner crashed"):
        client.generate(_request(stream=False))


def test_generate_stream_yields_until_done():
    lines = [
        '{"response": "The", "done": false}',
        "",
        "not json at all",
        '{"response": " answer", "done": false}',
        '{"response": "", "done": true, "total_duration": 12}',
        '{"response": "ignored", "done": false}',
    ]
    response = _response(lines=lines)
    client, session = _client(response)

    chunks = list(client.generate_stream(_request()))

    assert [c.response for c in chunks] == ["The", " answer", ""]
    assert chunks[-1].done is True
    _, kwargs = session.request.call_args
    assert kwargs["stream"] is True
    assert kwargs["json"]["stream"] is True
    response.iter_lines.assert_called_once_with(decode_unicode=True)
    response.close.assert_called_once()


def test_generate_stream_accepts_bytes_lines():
    client, _ = _client(_response(lines=[b'{"response": "ok", "done": true}']))
    chunks = list(client.generate_stream(_request()))
    assert chunks[0].response == "ok"


def test_generate_stream_error_line_raises():
    lines = ['{"response": "par", "done": false}', '{"error": "out of memory"}']
    client, _ = _client(_response(lines=lines))
    stream = client.generate_stream(_request())
    assert next(stream).response == "par"
    with pytest.raises(OllamaAPIError, match="out of memory"):
        next(stream)


def test_http_error_includes_server_detail():
    response = _response(
        ok=False, status_code=404, reason="Not Found", json_data={"error": "model 'nope' not found"}
    )
    client, _ = _client(response)
    with pytest.raises(OllamaAPIError) as excinfo:
        client.generate(_request())
    assert str(excinfo.value) == "Request failed: 404 Not Found (model 'nope' not found)"
    assert excinfo.value.status_code == 404


def test_http_error_without_json_body():
    response = _response(ok=False, status_code=500, reason="Internal Server Error", json_data=ValueError("no json"))
    client, _ = _client(response)
    with pytest.raises(OllamaAPIError, match="Request failed: 500 Internal Server Error"):
        list(client.generate_stream(_request()))


def test_connection_error_names_host():
    client, _ = _client(side_effect=requests.exceptions.ConnectionError("refused"))
    with pytest.raises(OllamaConnectionError, match="Could not connect to Ollama at http://localhost:11434"):
        client.list_models()


def test_timeout_raises_connection_error():
    client, _ = _client(side_effect=requests.exceptions.ReadTimeout("slow"))
    with pytest.raises(OllamaConnectionError, match="Timed out"):
        client.generate(_request())


def test_list_models_parses_tags():
    data = {
        "models": [
            {"name": "llama3.2:latest", "size": 2019393189, "digest": "abc"},
            {"name": "codellama:7b", "size": 3825819519},
        ]
    }
    client, session = _client(_response(json_data=data))
    tags = client.list_models()

    session.request.assert_called_once_with("GET", HOST + "/api/tags", timeout=300)
    assert [m.name for m in tags.models] == ["llama3.2:latest", "codellama:7b"]
    assert tags.models[0].size_mb == 1925


def test_list_models_without_models_key():
    client, _ = _client(_response(json_data={}))
    assert client.list_models().models is None


def test_request_payload_emits_no_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        payload = _request().to_payload()
    assert payload["options"] == {"temperature": 0.3}
