# Flagline Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the Flagline command-line tool."""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
