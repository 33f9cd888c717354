"""
Data models for the Ollama REST payloads used by the CLI.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

BYTES_PER_MB = 1024 * 1024


class GenerateOptions(BaseModel):
    temperature: float


class GenerateRequest(BaseModel):
    model: str
    prompt: str
    stream: bool = True
    options: GenerateOptions

    def to_payload(self) -> dict:
        return self.model_dump()


class GenerateResponse(BaseModel):
    response: str = ""
    model: Optional[str] = None
    done: bool = True

    model_config = ConfigDict(extra="allow")


class GenerateChunk(BaseModel):
    """One NDJSON line of a streamed /api/generate reply."""

    response: str = ""
    done: bool = False

    model_config = ConfigDict(extra="allow")


class ModelInfo(BaseModel):
    name: str = "unknown"
    size: int = 0

    model_config = ConfigDict(extra="allow")

    @property
    def size_mb(self) -> int:
        return self.size // BYTES_PER_MB


class TagsResponse(BaseModel):
    models: Optional[List[ModelInfo]] = None

    model_config = ConfigDict(extra="allow")
