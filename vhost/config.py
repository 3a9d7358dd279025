"""Host layout settings for Apache on Debian-family systems."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Settings:
    """Where Apache, the hosts file and the web server identity live."""

    sites_available_dir: Path = Path("/etc/apache2/sites-available")
    hosts_file: Path = Path("/etc/hosts")
    default_root: str = "/var/www"
    web_user: str = "www-data"
    tld: str = "test"
    apache_service: str = "apache2"
    writable_dirs: Tuple[str, ...] = ("storage", "bootstrap/cache")
    max_path_attempts: int = 3

    def hostname(self, name: str) -> str:
        return f"{name}.{self.tld}"

    def vhost_path(self, name: str) -> Path:
        return Path(self.sites_available_dir) / f"{name}.conf"
