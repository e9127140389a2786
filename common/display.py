"""Console output shared by the fetchers and the AI helpers."""

from rich.console import Console

# Diagnostics (errors, warnings, truncation notices) go to stderr
err_console = Console(stderr=True, highlight=False)


def format_size(num_chars: int) -> str:
    """Format a character or byte count for log lines, e.g. "12,345 chars"."""
    return f"{num_chars:,} chars"
