"""Host-bindable navigation commands and their default key sequences."""

from .models import NavigationCommand
from .registry import CommandConflictError, CommandRegistry, CommandRegistryStats
from .defaults import DEFAULT_COMMANDS, load_default_commands

__all__ = [
    "CommandConflictError",
    "CommandRegistry",
    "CommandRegistryStats",
    "DEFAULT_COMMANDS",
    "NavigationCommand",
    "load_default_commands",
]
