"""Utility functions for the virtual host setup tool."""
import logging
import os
import shutil
import sys

from vhost.errors import NotElevatedError


def command_exists(command: str) -> bool:
    """Check if a command exists in the system PATH."""
    return shutil.which(command) is not None


def is_root() -> bool:
    """Check if the script is running as root."""
    return os.geteuid() == 0


def ensure_elevated() -> None:
    """Abort unless the process runs with root privileges."""
    if not is_root():
        raise NotElevatedError("This tool must be run as root. Please rerun it with 'sudo'.")


def get_real_home() -> str:
    """Get the real user's home directory (handles sudo)."""
    sudo_user = os.environ.get('SUDO_USER')
    if sudo_user:
        return os.path.expanduser(f'~{sudo_user}')
    return os.environ.get('HOME', '')


def expand_home(path: str) -> str:
    """Replace a leading ``~`` with the invoking user's home directory.

    Only ``~`` on its own or followed by ``/`` is expanded; ``~other`` is
    left alone. Expanding an already expanded path is a no-op.
    """
    if path == '~' or path.startswith('~/'):
        return get_real_home() + path[1:]
    return path


def log_info(message: str) -> None:
    """Log an informational message."""
    print(f"[INFO] {message}")


def log_action(message: str) -> None:
    """Log an action being performed."""
    print(f"  -> {message}")


def log_error(message: str) -> None:
    """Log an error message to stderr."""
    print(f"[ERROR] {message}", file=sys.stderr)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )
