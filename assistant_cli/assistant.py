#!/usr/bin/env python3
import logging
from typing import List, Optional

import typer

from . import __version__
from .commands.config_command import handle_reset, handle_set_default, handle_show_config
from .commands.list_command import handle_list_models
from .commands.prompt_command import handle_prompt
from .ollama_api.client import OllamaClient, OllamaError
from .utils.config import ConfigError, get_config_path, load_config, load_env_vars, resolve_host
from .utils.format_utils import console, print_error
from .utils.logger import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(
    name="assistant",
    help="CLI tool for interacting with Ollama AI models.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"assistant {__version__}")
        raise typer.Exit()


@app.command()
def main(
    prompt: Optional[List[str]] = typer.Argument(
        None, help="The prompt to send (if not provided, enters interactive mode)."
    ),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model to use (overrides default)."),
    temperature: Optional[float] = typer.Option(
        None, "--temperature", "-t", min=0.0, max=2.0, help="Temperature for generation (0.0 to 2.0)."
    ),
    stream: Optional[bool] = typer.Option(
        None, "--stream/--no-stream", help="Stream the reply as it is generated (overrides config)."
    ),
    host: Optional[str] = typer.Option(None, "--host", help="Ollama host URL for this invocation only."),
    set_default: Optional[str] = typer.Option(None, "--set-default", help="Set new default model."),
    list_models: bool = typer.Option(False, "--list", "-l", help="List available models."),
    show_config: bool = typer.Option(False, "--config", help="Show current configuration."),
    reset: bool = typer.Option(False, "--reset", help="Reset configuration to defaults."),
    no_stdin: bool = typer.Option(
        False, "--no-stdin", help="Do not append piped stdin to an inline prompt (for shell loops)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """Send a prompt to an Ollama model and print the reply."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    load_env_vars()

    try:
        config_path = get_config_path()

        # Configuration commands take precedence over prompts
        if set_default is not None:
            handle_set_default(set_default, config_path)
            return

        # --reset never reads the file, so it can recover a corrupt config
        if reset and not (list_models or show_config):
            handle_reset(config_path)
            return

        config = load_config(config_path)
        client = OllamaClient(resolve_host(host, config))

        if list_models:
            handle_list_models(client, config)
            return

        if show_config:
            handle_show_config(config, config_path)
            return

        handle_prompt(
            client,
            config,
            words=prompt,
            model=model,
            temperature=temperature,
            stream=stream,
            read_stdin=not no_stdin,
        )
    except (ConfigError, OllamaError) as e:
        log.debug("Command failed", exc_info=True)
        print_error(str(e))
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(code=130)


if __name__ == "__main__":
    app()
