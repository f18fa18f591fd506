"""Implementation of opening a project: select, clone if needed, start tmuxinator."""

from pathlib import Path
from typing import Optional

import click

from workflows.config import WorkflowsConfig, get_projects_dir
from workflows.fzf import run_fzf
from workflows.logger import WorkflowsLogger
from workflows.projects import get_local_projects
from workflows.providers.github import GitHubProvider
from workflows.repo import Repo, find_project
from workflows.repo_provider import RepoProvider
from workflows.tmuxinator import TmuxinatorManager


def get_provider() -> RepoProvider:
    """Get the repository provider.

    Raises:
        click.ClickException: If the provider's CLI is not available.
    """
    provider = GitHubProvider()
    if not provider.is_available():
        raise click.ClickException(
            "GitHub CLI (gh) is not installed. "
            "Install it from: https://cli.github.com/"
        )
    return provider


def run_open(
    config: WorkflowsConfig,
    logger: WorkflowsLogger,
    provider: Optional[RepoProvider] = None,
    tmuxinator: Optional[TmuxinatorManager] = None,
    projects_dir: Optional[Path] = None,
) -> None:
    """Run the open flow.

    Args:
        config: Loaded configuration.
        logger: Run logger.
        provider: Repository provider (default: GitHub through gh).
        tmuxinator: Session manager (default: ~/.config/tmuxinator/).
        projects_dir: Projects directory (default: ~/Projects/).
    """
    root = projects_dir if projects_dir is not None else get_projects_dir()
    provider = provider if provider is not None else get_provider()
    tmuxinator = tmuxinator if tmuxinator is not None else TmuxinatorManager()

    local_projects = get_local_projects(root)

    name, projects = run_fzf(
        config.fzf.get_open_prompt(),
        False,
        config.fzf,
        local_projects,
        provider=provider,
        repo_limit=config.github.get_repo_limit(),
        projects_dir=root,
    )

    project = find_project(name, projects)
    if project is None:
        logger.event(WorkflowsLogger.SELECTION_ABORTED, selected=name)
        return

    logger.event(WorkflowsLogger.PROJECT_SELECTED, project=project.name, local=project.local)

    if not project.local and not clone_project(project, config, provider, logger):
        return

    open_project(project, config, tmuxinator, logger)


def clone_project(
    project: Repo,
    config: WorkflowsConfig,
    provider: RepoProvider,
    logger: WorkflowsLogger,
) -> bool:
    """Clone a remote project, asking first when confirm_cloning is set.

    Returns:
        False if the user declined, True once the clone is done.

    Raises:
        RuntimeError: If the clone fails.
    """
    if config.github.get_confirm_cloning() and not click.confirm(
        f"Project is not local, clone it to {project.projects_dir}/?",
        default=True,
    ):
        logger.event(WorkflowsLogger.CLONE_DECLINED, project=project.full_name)
        return False

    logger.event(WorkflowsLogger.CLONE_START, project=project.full_name, dest=project.project_root)
    provider.clone_repo(project)
    return True


def open_project(
    project: Repo,
    config: WorkflowsConfig,
    tmuxinator: TmuxinatorManager,
    logger: WorkflowsLogger,
) -> None:
    """Hand the terminal over to the project's tmuxinator session."""
    # start() does not come back, log before handing over
    if tmuxinator.needs_config(project, config.tmuxinator):
        logger.event(
            WorkflowsLogger.CONFIG_CREATED,
            project=project.name,
            path=tmuxinator.config_path(project),
        )

    logger.event(WorkflowsLogger.SESSION_START, project=project.name)
    tmuxinator.start(project, config.tmuxinator)
