import sys
from typing import List, Optional, TextIO

from ..ollama_api.client import OllamaClient
from ..ollama_api.data_models import GenerateOptions, GenerateRequest
from ..utils.config import AssistantConfig
from ..utils.format_utils import console, format_thinking, rule
from ..utils.input_utils import build_prompt, read_multiline_prompt, read_piped_input, stream_is_tty
from ..utils.logger import get_logger

log = get_logger(__name__)


def collect_prompt(
    words: Optional[List[str]], stdin: Optional[TextIO] = None, read_stdin: bool = True
) -> str:
    """
    Build the prompt from inline words (plus any piped stdin unless
    read_stdin is False), or read it interactively when no words were given.
    """
    stdin = stdin or sys.stdin
    if words:
        piped = read_piped_input(stdin) if read_stdin else ""
        return build_prompt(words, piped)

    if stream_is_tty(stdin):
        console.print()
        console.print("[dim]Enter your prompt (Ctrl+D or type 'END' on a new line to finish):[/dim]")
        console.print(rule())
    return read_multiline_prompt(stdin)


def build_request(
    prompt: str,
    config: AssistantConfig,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    stream: Optional[bool] = None,
) -> GenerateRequest:
    """Merge command-line overrides over the stored configuration."""
    return GenerateRequest(
        model=model or config.default_model,
        prompt=prompt,
        stream=config.stream if stream is None else stream,
        options=GenerateOptions(
            temperature=config.temperature if temperature is None else temperature
        ),
    )


def _print_streamed(client: OllamaClient, request: GenerateRequest) -> str:
    parts = []
    console.print()
    console.print(rule())
    console.print("[bold cyan]Assistant:[/bold cyan]", end=" ")
    finished = False
    for chunk in client.generate_stream(request):
        if chunk.response:
            parts.append(chunk.response)
            console.out(chunk.response, end="", highlight=False)
        finished = chunk.done
    if not finished:
        log.warning("Stream ended before the server reported completion")
    console.print()
    console.print(rule())
    return "".join(parts)


def _print_blocking(client: OllamaClient, request: GenerateRequest) -> str:
    result = client.generate(request)
    console.print()
    console.print(rule())
    console.print("[bold cyan]Assistant:[/bold cyan]", end=" ")
    console.out(result.response, highlight=False)
    console.print(rule())
    return result.response


def handle_prompt(
    client: OllamaClient,
    config: AssistantConfig,
    words: Optional[List[str]] = None,
    model: Optional[str] = None,
    temperature: Optional[float] = None,
    stream: Optional[bool] = None,
    stdin: Optional[TextIO] = None,
    read_stdin: bool = True,
) -> Optional[str]:
    """Send the prompt to Ollama and print the reply. Returns the reply text."""
    prompt = collect_prompt(words, stdin, read_stdin=read_stdin)
    if not prompt:
        console.print("[yellow]No prompt provided. Use --help for usage information.[/yellow]")
        return None

    request = build_request(prompt, config, model=model, temperature=temperature, stream=stream)
    console.print()
    console.print(format_thinking(request.model))
    log.debug(
        "Sending prompt (%d chars) to %s, temperature=%s, stream=%s",
        len(prompt), request.model, request.options.temperature, request.stream,
    )

    if request.stream:
        return _print_streamed(client, request)
    return _print_blocking(client, request)
