"""ANSI color helpers for terminal output."""

COLORS = {
    "red": "\033[91m",
    "green": "\033[92m",
    "yellow": "\033[93m",
    "blue": "\033[94m",
    "magenta": "\033[95m",
    "cyan": "\033[96m",
    "gray": "\033[90m",
    "reset": "\033[0m",
}


def color_text(text, color):
    """Return ANSI-colored text for terminal output."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"
