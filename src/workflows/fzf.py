"""fzf integration: pick one project out of the merged local + remote list."""

import shutil
import subprocess
from functools import partial
from pathlib import Path
from typing import Callable, Optional

from workflows.config import DEFAULT_REPO_LIMIT, Border, FzfConfig
from workflows.projects import get_users_repos
from workflows.repo import Repo
from workflows.repo_provider import RepoProvider

DELETE_PROMPT = "Delete: "


def _names(projects: list[Repo]) -> str:
    return "".join(f"{project.name}\n" for project in projects)


class Fzf:
    """Runs fzf as a child process fed with project names on stdin."""

    def __init__(self, config: FzfConfig, executable: str = "fzf") -> None:
        self.config = config
        self.executable = executable

    def is_available(self) -> bool:
        """Check if fzf is installed."""
        return shutil.which(self.executable) is not None

    def build_args(self, prompt: str) -> list[str]:
        """Translate the config into fzf command line flags.

        Args:
            prompt: Prompt shown in front of the query

        Returns:
            Full command, executable first
        """
        args = [self.executable, f"--layout={self.config.get_layout().value}"]

        border = self.config.get_border()
        if border is not Border.NONE:
            args.append(f"--border={border.value}")

        label = self.config.get_border_label()
        if label:
            args.append(f"--border-label={label}")

        args.append(f"--prompt={prompt}")
        return args

    def select(
        self,
        prompt: str,
        local_projects: list[Repo],
        load_remote: Optional[Callable[[], list[Repo]]] = None,
    ) -> tuple[str, list[Repo]]:
        """Let the user pick a project.

        Local names are written straight away so they show up while the
        remote list is still loading; remote names follow once
        load_remote returns.

        Args:
            prompt: Prompt shown in fzf
            local_projects: Projects shown immediately
            load_remote: Called after fzf started, its projects are appended

        Returns:
            (selected name or "" when aborted, local + remote projects)

        Raises:
            OSError: If fzf cannot be started
        """
        process = subprocess.Popen(
            self.build_args(prompt),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            text=True,
        )

        remote_projects: list[Repo] = []
        try:
            try:
                process.stdin.write(_names(local_projects))
                process.stdin.flush()
            except BrokenPipeError:
                # fzf already exited, the selection is on stdout
                pass

            if load_remote is not None:
                remote_projects = load_remote()
        except BaseException:
            # SIGTERM lets fzf restore the terminal
            process.terminate()
            process.wait()
            raise

        # communicate() writes the rest, closes stdin and ignores a closed pipe
        stdout, _ = process.communicate(_names(remote_projects) or None)

        selected = (stdout or "").strip()
        return selected, local_projects + remote_projects


def run_fzf(
    prompt: str,
    delete_mode: bool,
    config: FzfConfig,
    local_projects: list[Repo],
    provider: Optional[RepoProvider] = None,
    repo_limit: int = DEFAULT_REPO_LIMIT,
    projects_dir: Optional[Path] = None,
) -> tuple[str, list[Repo]]:
    """Run fzf to select a project.

    In delete mode only local projects are offered and the provider is
    never queried.

    Args:
        prompt: Prompt to display in the fzf menu
        delete_mode: Whether the selected project will be deleted
        config: fzf section of the configuration
        local_projects: Projects under the projects directory
        provider: Hosting service for remote projects
        repo_limit: Maximum number of remote repositories
        projects_dir: Directory remote repos would be cloned into

    Returns:
        (selected name, merged list of local and remote projects)
    """
    load_remote = None
    if not delete_mode and provider is not None:
        load_remote = partial(
            get_users_repos,
            local_projects,
            provider,
            limit=repo_limit,
            projects_dir=projects_dir,
        )

    return Fzf(config).select(prompt, local_projects, load_remote)
