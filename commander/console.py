# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Commander CLI applications."""
from rich.console import Console

from commander.themes import get_theme

console = Console(theme=get_theme())
error_console = Console(stderr=True, theme=get_theme())
