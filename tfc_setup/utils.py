"""Utility functions for the setup tool."""
import logging
import os
import shutil
from pathlib import Path

import typer


def command_exists(command: str) -> bool:
    """Check if a command exists in the system PATH."""
    return shutil.which(command) is not None


def get_real_home() -> str:
    """Get the real user's home directory (handles sudo)."""
    sudo_user = os.environ.get('SUDO_USER')
    if sudo_user:
        return os.path.expanduser(f'~{sudo_user}')
    return os.environ.get('HOME', str(Path.home()))


def log_info(message: str) -> None:
    """Log an informational message."""
    print(f"[INFO] {message}")


def log_action(message: str) -> None:
    """Log an action being performed."""
    print(f"  -> {message}")


def info(message: str) -> None:
    """Print a highlighted message."""
    typer.secho(message, fg=typer.colors.MAGENTA)


def success(message: str) -> None:
    """Print a success message."""
    typer.secho(message, fg=typer.colors.GREEN)


def fail(message: str) -> None:
    """Print an error message."""
    typer.secho(message, fg=typer.colors.RED)


def divider() -> None:
    """Print a horizontal rule between sections."""
    typer.secho("=" * 72, bold=True)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
