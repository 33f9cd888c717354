"""
HTTP client for the Ollama REST API.
"""

import json
from typing import Iterator, Optional

import requests
from pydantic import ValidationError

from ..utils.logger import get_logger
from .data_models import GenerateChunk, GenerateRequest, GenerateResponse, TagsResponse

log = get_logger(__name__)

DEFAULT_TIMEOUT = 300  # seconds

GENERATE_PATH = "/api/generate"
TAGS_PATH = "/api/tags"


class OllamaError(Exception):
    """Base class for failures talking to the Ollama server."""


class OllamaConnectionError(OllamaError):
    """The server could not be reached."""


class OllamaAPIError(OllamaError):
    """The server answered with an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _error_detail(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return ""
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return ""


class OllamaClient:
    def __init__(
        self,
        host: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.host = host.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.host}{path}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        log.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            raise OllamaConnectionError(f"Timed out waiting for Ollama at {self.host}") from e
        except requests.exceptions.ConnectionError as e:
            raise OllamaConnectionError(
                f"Could not connect to Ollama at {self.host}. Is the server running?"
            ) from e
        self._check_response(response)
        return response

    @staticmethod
    def _check_response(response: requests.Response) -> None:
        if response.ok:
            return
        message = f"Request failed: {response.status_code} {response.reason or ''}".rstrip()
        detail = _error_detail(response)
        if detail:
            message = f"{message} ({detail})"
        response.close()
        raise OllamaAPIError(message, status_code=response.status_code)

    def list_models(self) -> TagsResponse:
        """Return the models installed on the server."""
        response = self._request("GET", TAGS_PATH)
        try:
            return TagsResponse(**response.json())
        except (ValueError, TypeError, ValidationError) as e:
            raise OllamaAPIError(f"Unexpected response from {TAGS_PATH}: {e}") from e

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """Send a non-streamed generate request and return the full reply."""
        payload = request.to_payload()
        payload["stream"] = False
        response = self._request("POST", GENERATE_PATH, json=payload)
        try:
            data = response.json()
        except ValueError as e:
            raise OllamaAPIError(f"Unexpected response from {GENERATE_PATH}: {e}") from e
        if isinstance(data, dict) and data.get("error"):
            raise OllamaAPIError(str(data["error"]))
        try:
            return GenerateResponse(**data)
        except (TypeError, ValidationError) as e:
            raise OllamaAPIError(f"Unexpected response from {GENERATE_PATH}: {e}") from e

    def generate_stream(self, request: GenerateRequest) -> Iterator[GenerateChunk]:
        """
        Send a streamed generate request and yield each chunk as it arrives.
        Stops after the chunk marked done.
        """
        payload = request.to_payload()
        payload["stream"] = True
        response = self._request("POST", GENERATE_PATH, json=payload, stream=True)
        try:
            for line in response.iter_lines(decode_unicode=True):
                if not line:
                    continue
                if isinstance(line, bytes):
                    line = line.decode("utf-8", errors="replace")
                try:
                    data = json.loads(line)
                except json.JSONDecodeError:
                    log.debug("Skipping unparseable stream line: %r", line)
                    continue
                if not isinstance(data, dict):
                    log.debug("Skipping non-object stream line: %r", line)
                    continue
                if data.get("error"):
                    raise OllamaAPIError(str(data["error"]))
                try:
                    chunk = GenerateChunk(**data)
                except ValidationError:
                    log.debug("Skipping malformed stream chunk: %r", line)
                    continue
                yield chunk
                if chunk.done:
                    return
        except requests.exceptions.RequestException as e:
            raise OllamaConnectionError(f"Connection to Ollama at {self.host} was interrupted") from e
        finally:
            response.close()
