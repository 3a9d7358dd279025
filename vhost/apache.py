"""Apache virtual host rendering and site activation."""
from pathlib import Path

from vhost.config import Settings
from vhost.errors import CollisionError, ConfigValidationError, ProvisionError
from vhost.project import Project
from vhost.system import run
from vhost.utils import log_action, log_info

VHOST_TEMPLATE = """\
<VirtualHost *:80>
    ServerAdmin admin@{hostname}
    ServerName {hostname}
    DocumentRoot {path}/public

    <Directory {path}>
        Options Indexes FollowSymLinks
        AllowOverride All
        Require all granted
    </Directory>

    ErrorLog ${{APACHE_LOG_DIR}}/error.log
    CustomLog ${{APACHE_LOG_DIR}}/access.log combined
</VirtualHost>
"""


def render_vhost(name: str, path, tld: str = "test") -> str:
    """Render the virtual host block for a project."""
    return VHOST_TEMPLATE.format(hostname=f"{name}.{tld}", path=path)


def write_vhost(project: Project, settings: Settings, dry_run: bool = False) -> Path:
    """Write the project's site file, never replacing an existing one."""
    vhost_path = settings.vhost_path(project.name)
    content = render_vhost(project.name, project.path, settings.tld)

    if dry_run:
        log_action(f"[DRY RUN] Would write {vhost_path}")
        return vhost_path

    log_action("Creating virtual host configuration...")
    try:
        with open(vhost_path, 'x') as f:
            f.write(content)
    except FileExistsError as e:
        raise CollisionError(f"A virtual host configuration for '{project.name}' already exists. Aborting.") from e
    except OSError as e:
        raise ProvisionError(f"Could not write {vhost_path}: {e}") from e
    return vhost_path


def add_hosts_entry(hostname: str, settings: Settings, dry_run: bool = False) -> None:
    """Map ``hostname`` to the loopback address in the hosts file."""
    entry = f"127.0.0.1   {hostname}\n"
    if dry_run:
        log_action(f"[DRY RUN] Would add '{entry.strip()}' to {settings.hosts_file}")
        return

    log_action(f"Adding entry to {settings.hosts_file}...")
    hosts_file = Path(settings.hosts_file)
    try:
        existing = hosts_file.read_text() if hosts_file.exists() else ""
        with open(hosts_file, 'a') as f:
            if existing and not existing.endswith('\n'):
                f.write('\n')
            f.write(entry)
    except OSError as e:
        raise ProvisionError(f"Could not update {hosts_file}: {e}") from e


def activate_site(project: Project, settings: Settings, dry_run: bool = False) -> str:
    """Enable the site once Apache accepts the configuration.

    A failed configuration test leaves the site file on disk but disabled.
    Returns the URL the project is served at.
    """
    hostname = settings.hostname(project.name)

    run("apache2ctl", "configtest", message="Testing Apache configuration...",
        error=ConfigValidationError, dry_run=dry_run)

    run("a2ensite", f"{project.name}.conf", message="Enabling the virtual host...", dry_run=dry_run)
    add_hosts_entry(hostname, settings, dry_run=dry_run)
    run("systemctl", "reload", settings.apache_service, message="Reloading Apache...", dry_run=dry_run)

    url = f"http://{hostname}"
    log_info(f"{hostname} is enabled and Apache has been reloaded.")
    return url
