"""Implementation of deleting a project from ~/Projects/."""

from pathlib import Path
from typing import Callable, Optional

import click

from workflows.config import WorkflowsConfig, get_projects_dir
from workflows.fzf import DELETE_PROMPT, run_fzf
from workflows.git_utils import is_branch_pushed, is_working_tree_clean
from workflows.logger import WorkflowsLogger
from workflows.projects import delete_local_project, get_local_projects
from workflows.repo import Repo, find_project
from workflows.tmuxinator import TmuxinatorManager


def run_delete(
    config: WorkflowsConfig,
    logger: WorkflowsLogger,
    tmuxinator: Optional[TmuxinatorManager] = None,
    projects_dir: Optional[Path] = None,
) -> None:
    """Run the delete flow: pick a local project, check it, delete it.

    Remote projects are never offered.

    Args:
        config: Loaded configuration.
        logger: Run logger.
        tmuxinator: Session manager (default: ~/.config/tmuxinator/).
        projects_dir: Projects directory (default: ~/Projects/).
    """
    root = projects_dir if projects_dir is not None else get_projects_dir()
    tmuxinator = tmuxinator if tmuxinator is not None else TmuxinatorManager()

    local_projects = get_local_projects(root)
    name, projects = run_fzf(DELETE_PROMPT, True, config.fzf, local_projects)

    project = find_project(name, projects)
    if project is None:
        logger.event(WorkflowsLogger.SELECTION_ABORTED, selected=name, mode="delete")
        return

    logger.event(WorkflowsLogger.PROJECT_SELECTED, project=project.name, mode="delete")
    delete_project(project, tmuxinator, logger)


def _run_check(label: str, check: Callable[[], bool]) -> bool:
    """Print a pending status line, run the check, then overwrite the line with the verdict."""
    pending = click.style("~", fg="bright_yellow", bold=True)
    click.echo(f"[{pending}] {label}...", nl=False)

    passed = check()

    if passed:
        mark = click.style("✓", fg="bright_green", bold=True)
    else:
        mark = click.style("⨯", fg="bright_red", bold=True)
    click.echo(f"\r[{mark}] {label}   \n")
    return passed


def delete_project(
    project: Repo,
    tmuxinator: TmuxinatorManager,
    logger: WorkflowsLogger,
) -> bool:
    """Delete a project and its tmuxinator config after the safety checks.

    The git checks are advisory: a dirty tree or unpushed branch is shown
    but does not block deletion. Only the confirmation prompt does.

    Returns:
        True if the project was deleted, False if the user declined.

    Raises:
        RuntimeError: If git cannot run the checks.
        OSError: If the config or the directory cannot be removed.
    """
    clean = _run_check("clean working tree", lambda: is_working_tree_clean(project.project_root))
    pushed = _run_check("main pushed", lambda: is_branch_pushed(project.project_root))
    logger.event(WorkflowsLogger.DELETE_CHECKS, project=project.name, clean=clean, pushed=pushed)

    note = click.style("NOTE", fg="bright_red", bold=True)
    click.echo(f"{note}: These checks are only for the main branch of the repo\n")

    if not click.confirm(f"Delete {project.name}?", default=False):
        logger.event(WorkflowsLogger.DELETE_DECLINED, project=project.name)
        return False

    click.echo("Deleting tmuxinator config")
    tmuxinator.delete_config(project)

    click.echo(f"Deleting project from {project.projects_dir}/")
    delete_local_project(project)

    logger.event(WorkflowsLogger.PROJECT_DELETED, project=project.name, path=project.project_root)
    click.echo(click.style(f"Deleted {project.name}!", fg="green"))
    return True
