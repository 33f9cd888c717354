from ..ollama_api.client import OllamaClient
from ..utils.config import AssistantConfig
from ..utils.format_utils import console, format_model_line, rule


def handle_list_models(client: OllamaClient, config: AssistantConfig) -> None:
    """List the models installed on the Ollama server, starring the default."""
    tags = client.list_models()

    console.print()
    console.print("[bold cyan]Available Models:[/bold cyan]")
    console.print(rule(40))

    if not tags.models:
        console.print("  [red]No models found[/red]")
    else:
        for model in tags.models:
            console.print(format_model_line(model, config.default_model))

    console.print()
