"""Ownership, mode and ACL setup for a project's writable directories."""
from vhost.config import Settings
from vhost.errors import PermissionSetupError
from vhost.project import Project
from vhost.system import ensure_installed, run
from vhost.utils import log_action, log_info


def create_writable_dirs(project: Project, dry_run: bool = False) -> None:
    """Create missing writable directories so the mode and ACL steps can apply."""
    for path in project.writable_paths:
        if path.is_dir():
            continue
        if dry_run:
            log_action(f"[DRY RUN] Would create {path}")
            continue
        log_action(f"Creating missing directory {path}...")
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PermissionSetupError(f"Could not create {path}: {e}") from e


def make_writable(project: Project, dry_run: bool = False) -> None:
    run("chmod", "-R", "775", *project.writable_paths,
        message="Setting writable permissions for storage and cache directories...",
        error=PermissionSetupError, dry_run=dry_run)


def grant_web_user(project: Project, settings: Settings, dry_run: bool = False) -> None:
    """Give the web server identity group ownership and rwx ACLs."""
    ensure_installed("acl", "setfacl", dry_run=dry_run)

    run("chgrp", "-R", settings.web_user, project.path,
        message=f"Changing group ownership to {settings.web_user}...",
        error=PermissionSetupError, dry_run=dry_run)
    make_writable(project, dry_run=dry_run)

    acl = f"u:{settings.web_user}:rwx"
    run("setfacl", "-R", "-m", acl, *project.writable_paths,
        message="Applying ACL permissions...", error=PermissionSetupError, dry_run=dry_run)
    run("setfacl", "-dR", "-m", acl, *project.writable_paths,
        message="Applying default ACL permissions...", error=PermissionSetupError, dry_run=dry_run)


def apply_permissions(project: Project, settings: Settings, dry_run: bool = False) -> None:
    """Apply the permission scheme matching where the project lives.

    Projects under the default root already carry the web server's
    ownership, so only the mode bits change there.
    """
    create_writable_dirs(project, dry_run=dry_run)
    if project.inside_default_root:
        log_info(f"Setting permissions for a project inside {settings.default_root}...")
        make_writable(project, dry_run=dry_run)
    else:
        log_info(f"Setting permissions for a project outside {settings.default_root}...")
        grant_web_user(project, settings, dry_run=dry_run)
