"""Project value type shared by the listers, the selector and the orchestrators."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from workflows.config import get_projects_dir


@dataclass(frozen=True)
class Repo:
    """A project, either present under the projects directory or on GitHub."""

    name: str
    local: bool
    url: Optional[str] = None
    owner: Optional[str] = None
    projects_dir: Path = field(default_factory=get_projects_dir, repr=False)

    def __post_init__(self) -> None:
        if not self.local and not self.url:
            raise ValueError(f"Remote project {self.name!r} needs a url")

    @property
    def project_root(self) -> Path:
        """Where the project lives (or will be cloned to)."""
        return self.projects_dir / self.name

    @property
    def full_name(self) -> str:
        """owner/name when the owner is known, otherwise the bare name."""
        if self.owner:
            return f"{self.owner}/{self.name}"
        return self.name

    def __str__(self) -> str:
        return f"Repo({self.name}, {'local' if self.local else 'remote'})"


def find_project(name: str, projects: list[Repo]) -> Optional[Repo]:
    """Resolve a selected name back to its Repo.

    Args:
        name: Name picked in the selector (empty when aborted)
        projects: Merged project list

    Returns:
        The first Repo with that name, or None
    """
    if not name:
        return None
    for project in projects:
        if project.name == name:
            return project
    return None
