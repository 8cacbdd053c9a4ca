"""Terminal output helpers for the deployconf CLI."""

from typing import Iterable, Tuple

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
YELLOW = "\033[33m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"


def section_header(title: str) -> None:
    """Print a section header."""
    print()
    print(f"--- {title} ---")


def error(message: str) -> None:
    """Print an error message in red."""
    print(f"{RED}[error]{RESET} {message}")


def info(message: str) -> None:
    """Print an info message in blue."""
    print(f"{BLUE}[info]{RESET} {message}")


def success(message: str) -> None:
    """Print a success message in green."""
    print(f"{GREEN}[success]{RESET} {message}")


def result(message: str) -> None:
    """Print a result message in cyan."""
    print(f"{CYAN}[result]{RESET} {message}")


def bold(message: str) -> str:
    return f"{BOLD}{message}{RESET}"


def bold_red(message: str) -> str:
    return f"{BOLD}{RED}{message}{RESET}"


def bold_yellow(message: str) -> str:
    return f"{BOLD}{YELLOW}{message}{RESET}"


def environment_label(name: str) -> str:
    """Production-like stages in red, everything else in yellow."""
    if name in ("production", "mainnet"):
        return bold_red(name)
    return bold_yellow(name)


def print_table(title: str, rows: Iterable[Tuple[str, str]]) -> None:
    """Print a titled two-column listing."""
    print()
    print(f"=== {title} ===")
    for key, value in rows:
        print(f"{bold(key)}: {value}")
    print()
