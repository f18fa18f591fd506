"""Tests for the tmuxinator integration."""

from unittest.mock import patch

import pytest
import yaml

from workflows.config import TmuxinatorConfig
from workflows.repo import Repo
from workflows.tmuxinator import TmuxinatorManager


@pytest.fixture
def manager(tmp_path):
    """Session manager writing into a temporary config dir."""
    return TmuxinatorManager(config_dir=tmp_path / "tmuxinator")


@pytest.fixture
def project(tmp_path):
    """A local project."""
    root = tmp_path / "Projects"
    (root / "workflows").mkdir(parents=True)
    return Repo(name="workflows", local=True, projects_dir=root)


class TestCreateConfig:
    """Tests for session config generation."""

    def test_render_format(self, manager, project):
        """Test the exact file layout."""
        config = TmuxinatorConfig(window_name="editor", on_open="nvim .")

        text = manager.render_config(project, config)

        assert text == (
            f"# {manager.config_dir / 'workflows.yml'}\n"
            "\n"
            "name: workflows\n"
            f"root: {project.project_root}\n"
            "\n"
            "windows:\n"
            "  - editor: nvim .\n"
        )

    def test_reparses_as_yaml(self, manager, project):
        """Test the written file parses to name, root and one window."""
        path = manager.create_config(project, TmuxinatorConfig(window_name="code", on_open="hx ."))

        data = yaml.safe_load(path.read_text())

        assert data["name"] == "workflows"
        assert data["root"] == str(project.project_root)
        assert data["windows"] == [{"code": "hx ."}]

    def test_uses_defaults(self, manager, project):
        """Test an empty section falls back to the default window."""
        path = manager.create_config(project, TmuxinatorConfig())

        data = yaml.safe_load(path.read_text())

        assert data["windows"] == [{"editor": "nvim ."}]

    def test_creates_config_dir(self, manager, project):
        """Test a missing tmuxinator directory is created."""
        assert not manager.config_dir.exists()

        path = manager.create_config(project, TmuxinatorConfig())

        assert path == manager.config_dir / "workflows.yml"
        assert path.is_file()

    def test_overwrites_existing(self, manager, project):
        """Test regeneration replaces the old file."""
        manager.config_dir.mkdir()
        manager.config_path(project).write_text("stale")

        manager.create_config(project, TmuxinatorConfig())

        assert "stale" not in manager.config_path(project).read_text()


class TestConfigExists:
    """Tests for the existence check."""

    def test_missing(self, manager, project):
        """Test no file means no config."""
        assert manager.config_exists(project) is False

    def test_present(self, manager, project):
        """Test an existing file is found."""
        manager.create_config(project, TmuxinatorConfig())
        assert manager.config_exists(project) is True

    def test_other_project_file(self, manager, project, tmp_path):
        """Test another project's config does not count."""
        other = Repo(name="workflows-old", local=True, projects_dir=tmp_path)
        manager.create_config(other, TmuxinatorConfig())

        assert manager.config_exists(project) is False


class TestDeleteConfig:
    """Tests for delete_config."""

    def test_deletes_existing(self, manager, project):
        """Test an existing config is removed."""
        manager.create_config(project, TmuxinatorConfig())

        assert manager.delete_config(project) is True
        assert not manager.config_path(project).exists()

    def test_missing_is_noop(self, manager, project):
        """Test deleting a missing config is not an error."""
        assert manager.delete_config(project) is False


class TestStart:
    """Tests for the session launcher."""

    def test_generates_when_missing(self, manager, project):
        """Test a missing config is generated before launching."""
        with patch("os.execvp") as mock_exec:
            manager.start(project, TmuxinatorConfig())

        assert manager.config_exists(project)
        mock_exec.assert_called_once_with("tmuxinator", ["tmuxinator", "start", "workflows"])

    def test_keeps_existing_config(self, manager, project):
        """Test an existing config is left alone when fresh_config is off."""
        manager.config_dir.mkdir()
        manager.config_path(project).write_text("custom: true\n")

        with patch("os.execvp"):
            manager.start(project, TmuxinatorConfig(fresh_config=False))

        assert manager.config_path(project).read_text() == "custom: true\n"

    def test_fresh_config_regenerates(self, manager, project):
        """Test fresh_config regenerates an existing config."""
        manager.config_dir.mkdir()
        manager.config_path(project).write_text("custom: true\n")

        with patch("os.execvp"):
            manager.start(project, TmuxinatorConfig(fresh_config=True))

        assert "name: workflows" in manager.config_path(project).read_text()

    def test_ensure_config_reports_write(self, manager, project):
        """Test ensure_config returns the path only when it wrote."""
        assert manager.ensure_config(project, TmuxinatorConfig()) == manager.config_path(project)
        assert manager.ensure_config(project, TmuxinatorConfig()) is None

    def test_spawn_failure(self, manager, project):
        """Test a missing tmuxinator binary is fatal."""
        with patch("os.execvp", side_effect=FileNotFoundError("tmuxinator")):
            with pytest.raises(OSError):
                manager.start(project, TmuxinatorConfig())
