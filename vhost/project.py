"""Project descriptor passed through the setup workflows."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple, Union

from vhost.config import Settings


def is_inside_default_root(path: Union[str, Path], default_root: str) -> bool:
    """Check if a project path lives under the web server's default root."""
    return str(path).startswith(default_root)


@dataclass(frozen=True)
class Project:
    """A validated project: its name, location and permission branch."""

    name: str
    path: Path
    inside_default_root: bool
    writable_dirs: Tuple[str, ...]

    @classmethod
    def build(cls, name: str, path: Union[str, Path], settings: Settings) -> "Project":
        return cls(
            name=name,
            path=Path(path),
            inside_default_root=is_inside_default_root(path, settings.default_root),
            writable_dirs=settings.writable_dirs,
        )

    @property
    def document_root(self) -> Path:
        return self.path / "public"

    @property
    def writable_paths(self) -> Tuple[Path, ...]:
        return tuple(self.path / d for d in self.writable_dirs)
