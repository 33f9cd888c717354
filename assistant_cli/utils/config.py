"""
Configuration utilities for the assistant CLI.
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

from .logger import get_logger

log = get_logger(__name__)

APP_NAME = "assistant-cli"
ENV_FILE_NAME = ".assistant-cli.env"
RESET_HINT = "Run 'assistant --reset' to restore the defaults."
CONFIG_PATH_ENV = "ASSISTANT_CONFIG_PATH"
HOST_ENV = "ASSISTANT_OLLAMA_HOST"

DEFAULT_MODEL = "llama3.2"
DEFAULT_HOST = "http://host.docker.internal:11434"
DEFAULT_TEMPERATURE = 0.7


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or updated."""


class AssistantConfig(BaseModel):
    default_model: str = DEFAULT_MODEL
    ollama_host: str = DEFAULT_HOST
    temperature: float = DEFAULT_TEMPERATURE
    stream: bool = True

    model_config = ConfigDict(extra="ignore")


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .assistant-cli.env in the current directory
    2. .assistant-cli.env in the user's home directory
    """
    if os.path.exists(ENV_FILE_NAME):
        load_dotenv(ENV_FILE_NAME)

    home_env = Path.home() / ENV_FILE_NAME
    if home_env.exists():
        load_dotenv(home_env)


def get_config_path() -> Path:
    """Return the config file location, honouring ASSISTANT_CONFIG_PATH."""
    override = os.getenv(CONFIG_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path(typer.get_app_dir(APP_NAME)) / "config.json"


def save_config(config: AssistantConfig, path: Optional[Path] = None) -> Path:
    """
    Writes the config record to disk as JSON, creating parent directories.
    Returns the path written.
    """
    config_path = path or get_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as cf:
            json.dump(config.model_dump(), cf, indent=4)
            cf.write("\n")
    except OSError as e:
        raise ConfigError(f"Could not write config file {config_path}: {e}") from e
    log.debug("Wrote configuration to %s", config_path)
    return config_path


def load_config(path: Optional[Path] = None) -> AssistantConfig:
    """
    Loads the config record from disk. Missing fields fall back to defaults.
    A missing file is created with the defaults.
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        log.debug("No config at %s, writing defaults", config_path)
        config = AssistantConfig()
        save_config(config, config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as cf:
            raw = json.load(cf)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Could not parse config file {config_path}: {e}. {RESET_HINT}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config file {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object. {RESET_HINT}")

    try:
        return AssistantConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid value in config file {config_path}: {e}\n{RESET_HINT}") from e


def set_default_model(model: str, path: Optional[Path] = None) -> AssistantConfig:
    """Update the default model and persist."""
    if not model or not model.strip():
        raise ConfigError("Model name must not be empty")
    config = load_config(path)
    config.default_model = model.strip()
    save_config(config, path)
    return config


def reset_config(path: Optional[Path] = None) -> AssistantConfig:
    """Overwrite the config file with the built-in defaults."""
    config = AssistantConfig()
    save_config(config, path)
    return config


def normalize_host(host: str) -> str:
    host = host.strip().rstrip("/")
    if "://" not in host:
        host = f"http://{host}"
    return host


def resolve_host(override: Optional[str], config: AssistantConfig) -> str:
    """
    Pick the Ollama host for this invocation: --host flag, then
    ASSISTANT_OLLAMA_HOST, then the configured host. Never persisted.
    """
    host = override or os.getenv(HOST_ENV) or config.ollama_host
    return normalize_host(host)
