"""CLI interface for the virtual host setup tool."""
from pathlib import Path

import typer

from . import utils
from . import steps
from .config import Settings
from .errors import ConfigValidationError, ProvisionError


def setup(
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview changes without applying them"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    sites_dir: Path = typer.Option(Settings.sites_available_dir, "--sites-dir", envvar="VHOST_SITES_DIR",
                                   help="Apache sites-available directory"),
    hosts_file: Path = typer.Option(Settings.hosts_file, "--hosts-file", envvar="VHOST_HOSTS_FILE",
                                    help="Hosts file to register the hostname in"),
    default_root: str = typer.Option(Settings.default_root, "--default-root", envvar="VHOST_DEFAULT_ROOT",
                                     help="Web server default document root"),
    web_user: str = typer.Option(Settings.web_user, "--web-user", envvar="VHOST_WEB_USER",
                                 help="Identity the web server runs as"),
    tld: str = typer.Option(Settings.tld, "--tld", envvar="VHOST_TLD", help="Top-level domain for local hostnames"),
    max_path_attempts: int = typer.Option(Settings.max_path_attempts, "--max-path-attempts", min=1,
                                          help="How often to ask for a project path"),
):
    """Configure an Apache virtual host for a Laravel project."""
    utils.setup_logging(verbose)

    try:
        utils.ensure_elevated()
    except ProvisionError as e:
        typer.echo(f"❗ {e}")
        raise typer.Exit(1)

    settings = Settings(
        sites_available_dir=sites_dir,
        hosts_file=hosts_file,
        default_root=default_root,
        web_user=web_user,
        tld=tld,
        max_path_attempts=max_path_attempts,
    )

    try:
        url = steps.run_setup(settings, dry_run)
    except ConfigValidationError as e:
        utils.log_error(str(e))
        typer.echo("Apache configuration test failed. Please check the virtual host file.")
        raise typer.Exit(0)
    except ProvisionError as e:
        utils.log_error(str(e))
        raise typer.Exit(1)

    if url:
        typer.echo(f"✅ Virtual host setup complete. You can now access {url}")


app = typer.Typer(
    name="vhost-setup",
    help="Interactive Apache virtual host setup for Laravel projects.",
    add_completion=False,
    invoke_without_command=True,
    callback=setup,
)


if __name__ == "__main__":
    app()
