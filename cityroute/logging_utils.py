"""Logging utilities for cityroute.

Provides color-coded console output so route requests, animation progress
and failures stand apart in a terminal session.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Routing computations
    YELLOW = "\033[93m"    # Animation progress
    RED = "\033[91m"       # Errors and rejected requests
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if CITYROUTE_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("CITYROUTE_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_routing(message: str) -> None:
    """Log a routing computation (blue)."""
    print(colored(f"{LOG_TAG_ROUTING} {message}", Color.BLUE))


def log_animation(message: str) -> None:
    """Log an animation event (yellow)."""
    print(colored(f"{LOG_TAG_ANIMATION} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_ROUTING = "[•]"
LOG_TAG_ANIMATION = "[>]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
