# GetOptions — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for GetOptions output."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "error": "bold red",
        "usage": "bold",
    }
)

console = Console(theme=theme)
