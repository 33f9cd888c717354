"""
assistant-cli: command-line interface for prompting Ollama models.

Sends a prompt to a locally reachable Ollama server and prints or streams the
reply, with a small persisted configuration for the default model, host,
temperature and streaming.
"""

__version__ = "0.1.0"
__author__ = "assistant-cli contributors"

# Import the main CLI app for entry point
from .assistant import app  # noqa: E402

__all__ = ["app", "__version__"]
