"""Setup workflows and the menus that choose between them."""
from typing import Dict

from vhost import prompts
from vhost.apache import activate_site, write_vhost
from vhost.config import Settings
from vhost.errors import CloneError
from vhost.permissions import apply_permissions
from vhost.project import Project
from vhost.system import clone_repository, ensure_installed
from vhost.utils import log_info


def finish_setup(project: Project, settings: Settings, dry_run: bool = False) -> str:
    """Permissions, site file and activation, shared by both workflows."""
    apply_permissions(project, settings, dry_run=dry_run)
    write_vhost(project, settings, dry_run=dry_run)
    return activate_site(project, settings, dry_run=dry_run)


def setup_existing_project(settings: Settings, dry_run: bool = False) -> str:
    """Register a project that is already on disk."""
    name = prompts.prompt_project_name(settings)
    path = prompts.prompt_existing_path(settings)
    project = Project.build(name, path, settings)
    return finish_setup(project, settings, dry_run=dry_run)


def setup_project_from_git(settings: Settings, dry_run: bool = False) -> str:
    """Clone a project with git, then register it."""
    log_info("Checking Git installation...")
    ensure_installed("git", dry_run=dry_run)

    url = prompts.prompt_repository_url()
    destination = prompts.prompt_clone_destination(dry_run=dry_run)
    name = prompts.prompt_project_name(settings)

    project_path = destination / name
    if project_path.exists():
        raise CloneError(f"{project_path} already exists. Aborting.")
    clone_repository(url, project_path, dry_run=dry_run)

    project = Project.build(name, project_path, settings)
    return finish_setup(project, settings, dry_run=dry_run)


PROJECT_TYPES: Dict[str, str] = {"1": "Laravel"}

ACTIONS: Dict[str, str] = {
    "1": "Setup Virtual Host for existing project",
    "2": "Setup new project with git",
}


def choose(title: str, options: Dict[str, str]) -> str:
    print(title)
    for key, label in options.items():
        print(f"{key}. {label}")
    print("Press any other key to cancel.")
    return prompts.ask("Choice")


def run_setup(settings: Settings, dry_run: bool = False) -> str:
    """Main workflow: pick a project type and action, then run it.

    Returns the project URL, or an empty string when the operator cancels.
    """
    if choose("Select the type of project setup:", PROJECT_TYPES) not in PROJECT_TYPES:
        log_info("Setup canceled.")
        return ""

    action = choose("Select the action:", ACTIONS)
    if action == "1":
        return setup_existing_project(settings, dry_run=dry_run)
    if action == "2":
        return setup_project_from_git(settings, dry_run=dry_run)
    log_info("Setup canceled.")
    return ""
