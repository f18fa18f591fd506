"""tmuxinator integration: session config files and session launch."""

import os
import shutil
from pathlib import Path
from typing import Optional

from workflows.config import TmuxinatorConfig, get_tmuxinator_config_dir
from workflows.repo import Repo


class TmuxinatorManager:
    """Manages ~/.config/tmuxinator/<project>.yml and starts sessions from it."""

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self.config_dir = config_dir if config_dir is not None else get_tmuxinator_config_dir()

    def is_available(self) -> bool:
        """Check if tmuxinator is installed."""
        return shutil.which("tmuxinator") is not None

    def config_path(self, project: Repo) -> Path:
        """Path of the session config for a project."""
        return self.config_dir / f"{project.name}.yml"

    def config_exists(self, project: Repo) -> bool:
        """Check if the project already has a tmuxinator config."""
        return self.config_path(project).is_file()

    def render_config(self, project: Repo, config: TmuxinatorConfig) -> str:
        """Render the session config for a project.

        Args:
            project: Project the session is for
            config: tmuxinator section of the configuration

        Returns:
            YAML text: name, root and a single window running on_open
        """
        lines = [
            f"# {self.config_path(project).absolute()}",
            "",
            f"name: {project.name}",
            f"root: {project.project_root.absolute()}",
            "",
            "windows:",
            f"  - {config.get_window_name()}: {config.get_on_open()}",
        ]
        return "\n".join(lines) + "\n"

    def create_config(self, project: Repo, config: TmuxinatorConfig) -> Path:
        """Write (or overwrite) the tmuxinator config for a project.

        Returns:
            Path of the written file

        Raises:
            OSError: If the config directory is not writable
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        path = self.config_path(project)
        path.write_text(self.render_config(project, config))
        return path

    def delete_config(self, project: Repo) -> bool:
        """Delete the tmuxinator config for a project, if there is one.

        Returns:
            True if a file was removed, False if there was nothing to remove
        """
        if not self.config_exists(project):
            return False
        self.config_path(project).unlink()
        return True

    def needs_config(self, project: Repo, config: TmuxinatorConfig) -> bool:
        """Whether the config has to be (re)generated before starting."""
        # fresh_config first, it skips the filesystem lookup
        return config.get_fresh_config() or not self.config_exists(project)

    def ensure_config(self, project: Repo, config: TmuxinatorConfig) -> Optional[Path]:
        """Generate the config when it is missing or fresh_config is set.

        Returns:
            Path of the written file, or None if the existing one was kept
        """
        if not self.needs_config(project, config):
            return None
        return self.create_config(project, config)

    def launch(self, project: Repo) -> None:
        """Replace the current process with `tmuxinator start <project>`.

        Raises:
            OSError: If tmuxinator cannot be executed
        """
        os.execvp("tmuxinator", ["tmuxinator", "start", project.name])

    def start(self, project: Repo, config: TmuxinatorConfig) -> None:
        """Start the project's session, creating its config first if needed.

        tmuxinator takes over the terminal; this does not return on success.

        Raises:
            OSError: If the config cannot be written or tmuxinator cannot run
        """
        self.ensure_config(project, config)
        self.launch(project)
