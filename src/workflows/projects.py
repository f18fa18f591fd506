"""Local and remote project listing."""

import shutil
from pathlib import Path
from typing import Optional

from workflows.config import DEFAULT_REPO_LIMIT, get_projects_dir
from workflows.repo import Repo
from workflows.repo_provider import RepoProvider


def get_local_projects(projects_dir: Optional[Path] = None) -> list[Repo]:
    """List the projects under ~/Projects/.

    Every immediate subdirectory is a project; anything else is ignored.

    Args:
        projects_dir: Override for the projects directory

    Returns:
        Local Repo objects sorted by name

    Raises:
        OSError: If the projects directory cannot be read
    """
    root = projects_dir if projects_dir is not None else get_projects_dir()

    projects = [
        Repo(name=entry.name, local=True, projects_dir=root)
        for entry in root.iterdir()
        if entry.is_dir()
    ]
    return sorted(projects, key=lambda repo: repo.name)


def get_users_repos(
    local_projects: list[Repo],
    provider: RepoProvider,
    limit: int = DEFAULT_REPO_LIMIT,
    projects_dir: Optional[Path] = None,
) -> list[Repo]:
    """List the user's remote repositories that are not already local.

    Args:
        local_projects: Projects found under the projects directory
        provider: Hosting service to ask
        limit: Maximum number of repositories to fetch
        projects_dir: Directory the repos would be cloned into

    Returns:
        Remote Repo objects whose names are not in local_projects

    Raises:
        RuntimeError: If the provider fails
    """
    local_names = {project.name for project in local_projects}
    repos = provider.list_repos(limit=limit, projects_dir=projects_dir)
    return [repo for repo in repos if repo.name not in local_names]


def delete_local_project(repo: Repo) -> None:
    """Recursively delete a project from ~/Projects/.

    Raises:
        OSError: If the directory cannot be removed
    """
    shutil.rmtree(repo.project_root)
