from pathlib import Path
from typing import List

from rich.console import Console
from rich.markup import escape

from ..ollama_api.data_models import ModelInfo
from .config import AssistantConfig

console = Console(soft_wrap=True, emoji=False)
error_console = Console(stderr=True, soft_wrap=True, emoji=False)

RULE_CHAR = "─"


def rule(width: int = 60) -> str:
    """A dimmed horizontal separator."""
    return f"[dim]{RULE_CHAR * width}[/dim]"


def format_thinking(model: str) -> str:
    return f"🤖 [dim]Using[/dim] [bold green]{escape(model)}[/bold green] [dim](thinking)[/dim]..."


def format_model_line(model: ModelInfo, default_model: str) -> str:
    """Format one entry of the model list, starring the configured default."""
    marker = " [bright_yellow]⭐[/bright_yellow]" if model.name == default_model else ""
    return f"  [green]{escape(model.name)}[/green] ([yellow]{model.size_mb}[/yellow] MB){marker}"


def format_config_lines(config: AssistantConfig, path: Path) -> List[str]:
    """Format the configuration block shown by --config and --reset."""
    return [
        "",
        "[bold cyan]Current Configuration:[/bold cyan]",
        rule(40),
        f"  [bold]Default Model[/bold]: [green]{escape(config.default_model)}[/green]",
        f"  [bold]Ollama Host[/bold]: [yellow]{escape(config.ollama_host)}[/yellow]",
        f"  [bold]Temperature[/bold]: [yellow]{config.temperature}[/yellow]",
        f"  [bold]Stream[/bold]: [yellow]{str(config.stream).lower()}[/yellow]",
        f"  [bold]Config Path[/bold]: [dim]{escape(str(path))}[/dim]",
        "",
    ]


def print_error(message: str) -> None:
    error_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
