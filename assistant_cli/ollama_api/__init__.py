"""
Client and data models for the Ollama REST API.
"""

from .client import OllamaAPIError, OllamaClient, OllamaConnectionError, OllamaError
from .data_models import (
    GenerateChunk,
    GenerateOptions,
    GenerateRequest,
    GenerateResponse,
    ModelInfo,
    TagsResponse,
)

__all__ = [
    "OllamaClient",
    "OllamaError",
    "OllamaAPIError",
    "OllamaConnectionError",
    "GenerateChunk",
    "GenerateOptions",
    "GenerateRequest",
    "GenerateResponse",
    "ModelInfo",
    "TagsResponse",
]
