from pathlib import Path

from rich.markup import escape

from ..utils.config import AssistantConfig, reset_config, set_default_model
from ..utils.format_utils import console, format_config_lines


def handle_show_config(config: AssistantConfig, path: Path) -> None:
    """Print the current configuration and where it lives."""
    for line in format_config_lines(config, path):
        console.print(line)


def handle_set_default(model: str, path: Path) -> AssistantConfig:
    """Persist a new default model."""
    config = set_default_model(model, path)
    console.print(f"✅ Default model set to: [bold green]{escape(config.default_model)}[/bold green]")
    return config


def handle_reset(path: Path) -> AssistantConfig:
    """Restore the built-in defaults and show them."""
    config = reset_config(path)
    console.print("✅ Configuration reset to defaults")
    handle_show_config(config, path)
    return config
