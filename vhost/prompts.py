"""Interactive input and its validation."""
import os
from pathlib import Path

import typer

from vhost.config import Settings
from vhost.errors import CollisionError, ValidationError
from vhost.utils import expand_home, log_action, log_info


def ask(text: str) -> str:
    """Read one line of input; an empty answer is returned as ''."""
    return typer.prompt(text, default="", show_default=False).strip()


def hostname_registered(hostname: str, hosts_file: Path) -> bool:
    """Check if ``hostname`` is already mapped in the hosts file."""
    try:
        lines = Path(hosts_file).read_text().splitlines()
    except FileNotFoundError:
        return False
    for line in lines:
        entry = line.split('#', 1)[0].split()
        if hostname in entry[1:]:
            return True
    return False


def validate_project_name(name: str, settings: Settings) -> str:
    if not name:
        raise ValidationError("Project name cannot be empty. Aborting.")
    if any(ch.isspace() for ch in name):
        raise ValidationError("Project name cannot contain spaces. Aborting.")
    if settings.vhost_path(name).exists():
        raise CollisionError(f"A virtual host configuration for '{name}' already exists. Aborting.")
    hostname = settings.hostname(name)
    if hostname_registered(hostname, settings.hosts_file):
        raise CollisionError(f"The hostname '{hostname}' already exists in {settings.hosts_file}. Aborting.")
    return name


def prompt_project_name(settings: Settings) -> str:
    # Validated unstripped: surrounding whitespace is rejected too.
    name = typer.prompt("Enter the project name (no spaces allowed)", default="", show_default=False)
    return validate_project_name(name, settings)


def prompt_existing_path(settings: Settings) -> Path:
    """Ask for an existing project directory, giving up after a few tries."""
    for _ in range(settings.max_path_attempts):
        answer = expand_home(ask(
            "Enter the full path to the Laravel project "
            "(e.g., /home/user/Projects/my-laravel-project or /var/www/my-laravel-project)"
        ))
        if answer and os.path.isdir(answer):
            return Path(os.path.abspath(answer))
        log_info("The specified path does not exist. Please enter a valid path.")
    raise ValidationError(f"No valid project path given after {settings.max_path_attempts} attempts. Aborting.")


def prompt_repository_url() -> str:
    url = ask("Enter the Git repository link")
    if not url:
        raise ValidationError("Git repository link cannot be empty. Aborting.")
    return url


def prompt_clone_destination(dry_run: bool = False) -> Path:
    """Ask where to clone the project, creating the directory if needed."""
    answer = expand_home(ask("Enter the full path where the project should be cloned (e.g., /home/user/Projects)"))
    if not answer:
        raise ValidationError("Clone path cannot be empty. Aborting.")
    destination = Path(os.path.abspath(answer))
    if destination.is_dir():
        return destination

    if dry_run:
        log_action(f"[DRY RUN] Would create {destination}")
        return destination
    log_action("The specified path does not exist. Creating it...")
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ValidationError(f"Could not create {destination}: {e}") from e
    return destination
