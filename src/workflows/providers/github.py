"""GitHub repository provider using gh CLI."""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Optional

from workflows.config import get_projects_dir
from workflows.repo import Repo
from workflows.repo_provider import RepoProvider


class GitHubProvider(RepoProvider):
    """Repository provider for GitHub using the gh CLI."""

    def is_available(self) -> bool:
        """Check if gh CLI is installed.

        Returns:
            True if gh is available in PATH.
        """
        return shutil.which("gh") is not None

    def list_repos(self, limit: int, projects_dir: Optional[Path] = None) -> list[Repo]:
        """List the authenticated user's repositories using gh CLI.

        Args:
            limit: Maximum number of repositories to fetch.
            projects_dir: Directory the repos would be cloned into.

        Returns:
            List of remote Repo objects.

        Raises:
            RuntimeError: If gh command fails or prints unexpected output.
        """
        cmd = [
            "gh", "repo", "list",
            "--limit", str(limit),
            "--json", "name,url,owner",
        ]

        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
        )

        if result.returncode != 0:
            raise RuntimeError(f"Failed to list repositories: {result.stderr.strip()}")

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Unexpected output from gh repo list: {e}") from e

        root = projects_dir if projects_dir is not None else get_projects_dir()
        return [self._parse_repo(item, root) for item in data]

    def clone_repo(self, repo: Repo) -> None:
        """Clone a repository into ~/Projects/<name> using gh CLI.

        Args:
            repo: Remote repository to clone.

        Raises:
            RuntimeError: If gh command fails.
        """
        cmd = ["gh", "repo", "clone", repo.full_name, str(repo.project_root)]

        # Not capturing output: gh shows clone progress on the terminal
        result = subprocess.run(cmd)

        if result.returncode != 0:
            raise RuntimeError(f"Failed to clone {repo.full_name} (exit code {result.returncode})")

    def _parse_repo(self, data: dict[str, Any], projects_dir: Path) -> Repo:
        """Parse repository data from gh JSON output.

        Args:
            data: Dictionary from gh JSON output.
            projects_dir: Directory the repo would be cloned into.

        Returns:
            Remote Repo object.
        """
        # Owner comes as a dict with 'login' key
        owner = data.get("owner") or {}

        return Repo(
            name=data["name"],
            local=False,
            url=data["url"],
            owner=owner.get("login"),
            projects_dir=projects_dir,
        )
