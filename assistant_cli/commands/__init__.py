"""
This __init__.py file makes the 'commands' directory a Python package.

Each module defines a handler for one or more CLI operations.
"""

from .config_command import handle_reset, handle_set_default, handle_show_config
from .list_command import handle_list_models
from .prompt_command import handle_prompt

__all__ = [
    "handle_prompt",
    "handle_list_models",
    "handle_show_config",
    "handle_set_default",
    "handle_reset",
]
