"""Workflows CLI - open or delete a project picked with fzf."""

import click

from workflows import __version__
from workflows.config import load_config
from workflows.fzf import Fzf
from workflows.logger import WorkflowsLogger


@click.command()
@click.option(
    "--delete",
    "delete_mode",
    is_flag=True,
    help="Pick a local project and delete it (with its tmuxinator config).",
)
@click.version_option(version=__version__, prog_name="workflows")
def cli(delete_mode: bool) -> None:
    """Workflows - open a project in tmux.

    Lists the projects in ~/Projects/ together with your GitHub
    repositories, lets you pick one with fzf, clones it if needed and
    starts a tmuxinator session for it.

    Configuration is read from ~/.config/workflows/config.toml.

    Examples:

      # Open a project
      workflows

      # Delete a local project
      workflows --delete
    """
    config = load_config()
    try:
        logger = WorkflowsLogger()
    except OSError as e:
        raise click.ClickException(f"Cannot create log directory: {e}") from e

    for warning in config.warnings:
        logger.event(WorkflowsLogger.CONFIG_FALLBACK, level="WARNING", detail=warning)

    if not Fzf(config.fzf).is_available():
        raise click.ClickException(
            "fzf is not installed or not in PATH. "
            "Install it from: https://github.com/junegunn/fzf"
        )

    try:
        if delete_mode:
            from workflows.commands._delete_impl import run_delete

            run_delete(config, logger)
        else:
            from workflows.commands._open_impl import run_open

            run_open(config, logger)
    except (OSError, RuntimeError) as e:
        logger.event(WorkflowsLogger.FATAL_ERROR, level="ERROR", error=str(e))
        raise click.ClickException(str(e)) from e


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
