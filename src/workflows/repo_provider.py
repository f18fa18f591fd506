"""Abstract base class for repository providers (GitHub, GitLab, etc.)."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from workflows.repo import Repo


class RepoProvider(ABC):
    """Abstract base class for repository providers.

    Implementations wrap the hosting service's CLI: listing the
    authenticated user's repositories and cloning one of them.
    """

    @abstractmethod
    def list_repos(self, limit: int, projects_dir: Optional[Path] = None) -> list[Repo]:
        """List the authenticated user's repositories.

        Args:
            limit: Maximum number of repositories to fetch.
            projects_dir: Directory the returned repos would be cloned into.

        Returns:
            List of remote Repo objects.

        Raises:
            RuntimeError: If the operation fails.
        """
        pass

    @abstractmethod
    def clone_repo(self, repo: Repo) -> None:
        """Clone a repository into its project root.

        Args:
            repo: Remote repository to clone.

        Raises:
            RuntimeError: If the clone fails.
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider's CLI tool is available.

        Returns:
            True if the CLI tool is installed and accessible.
        """
        pass
