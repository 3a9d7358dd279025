"""External commands: the runner, package installs and git checkouts."""
import logging
import shlex
from pathlib import Path
from typing import Optional, Type, Union

import sh
from rich.console import Console

from vhost.errors import CloneError, InstallationError, ProvisionError
from vhost.utils import command_exists, log_action, log_info

logger = logging.getLogger(__name__)
console = Console()


def format_command(command: str, *args: str) -> str:
    return " ".join(shlex.quote(str(part)) for part in (command, *args))


def run(
    command: str,
    *args: Union[str, Path],
    message: str,
    error: Type[ProvisionError] = ProvisionError,
    dry_run: bool = False,
) -> Optional[str]:
    """Run an external command synchronously behind a spinner.

    The spinner only draws while the call blocks; the exit status is always
    checked and a failing command raises ``error``.
    """
    cmdline = format_command(command, *args)
    if dry_run:
        log_action(f"[DRY RUN] Would run: {cmdline}")
        return None

    log_action(message)
    logger.debug("Running %s", cmdline)
    try:
        with console.status(f"{message}", spinner="line"):
            output = sh.Command(command)(*[str(a) for a in args])
    except sh.ErrorReturnCode as e:
        stderr = e.stderr.decode(errors="replace").strip() if e.stderr else ""
        logger.debug("%s exited with %s: %s", cmdline, e.exit_code, stderr)
        raise error(f"'{cmdline}' failed with exit code {e.exit_code}" + (f": {stderr}" if stderr else "")) from e
    except sh.CommandNotFound as e:
        raise error(f"Command not found: {command}") from e
    print("[✔] Done!")
    return str(output)


def ensure_installed(package: str, command: Optional[str] = None, dry_run: bool = False) -> None:
    """Install an apt package unless its command is already on PATH."""
    command = command or package
    if command_exists(command):
        log_info(f"{package} is already installed.")
        return

    log_info(f"{package} not found. Installing...")
    run("apt-get", "update", message="Refreshing package index...", error=InstallationError, dry_run=dry_run)
    run("apt-get", "install", "-y", package, message=f"Installing {package}...",
        error=InstallationError, dry_run=dry_run)
    if dry_run:
        return
    if not command_exists(command):
        raise InstallationError(f"{package} was installed but '{command}' is still not on PATH")


def clone_repository(url: str, destination: Path, dry_run: bool = False) -> None:
    """Clone a git repository into ``destination``."""
    run("git", "clone", url, destination, message="Cloning the repository...",
        error=CloneError, dry_run=dry_run)
    if not dry_run:
        log_info(f"Repository successfully cloned to {destination}.")
