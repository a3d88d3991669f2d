"""Console output helpers for the pyterraform CLI."""

import sys

# None = auto-detect, True = force on, False = force off
_color_enabled = None


def set_color_enabled(enabled: bool) -> None:
    """
    Set global color output preference.

    Parameters
    ----------
    enabled : bool
        True to enable colors, False to disable.
    """
    global _color_enabled
    _color_enabled = enabled


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


def supports_color() -> bool:
    """
    Check if the terminal supports color output.

    Returns
    -------
    bool
        The explicit preference if one was set, otherwise whether stdout
        is a TTY on a non-Windows platform.
    """
    if _color_enabled is not None:
        return _color_enabled

    return sys.stdout.isatty() and not sys.platform.startswith("win")


def colorize(text: str, color: str) -> str:
    """Wrap text in an ANSI color code when colors are supported."""
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    symbol = colorize("✓", Colors.GREEN)
    print(f"{symbol} {message}")


def error(message: str) -> None:
    """Print error message with red X symbol to stderr."""
    symbol = colorize("✗", Colors.RED)
    print(f"{symbol} {message}", file=sys.stderr)


def warning(message: str) -> None:
    """Print warning message with yellow warning symbol."""
    symbol = colorize("⚠", Colors.YELLOW)
    print(f"{symbol} {message}")


def info(message: str) -> None:
    """Print informational message with indentation."""
    print(f"  {message}")


def ask_confirmation(message: str, default: bool = False) -> bool:
    """
    Ask user for yes/no confirmation.

    Parameters
    ----------
    message : str
        Confirmation question to ask.
    default : bool, optional
        Default value if user just presses Enter, by default False.

    Returns
    -------
    bool
        True if user confirmed (y/yes), False otherwise.
    """
    if default:
        prompt = f"{message} [Y/n]: "
    else:
        prompt = f"{message} [y/N]: "

    try:
        response = input(prompt).strip().lower()
        if not response:
            return default
        return response in ("y", "yes")
    except (EOFError, KeyboardInterrupt):
        print()
        return False
