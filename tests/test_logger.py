"""Tests for WorkflowsLogger."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from workflows.logger import WorkflowsLogger


class TestWorkflowsLogger:
    """Tests for WorkflowsLogger."""

    def test_init_creates_log_directory(self, tmp_path: Path) -> None:
        """Test the log directory is created."""
        log_dir = tmp_path / "logs"
        WorkflowsLogger(log_dir=log_dir)
        assert log_dir.exists()

    def test_default_log_dir(self, tmp_path: Path) -> None:
        """Test logs go under the config dir by default."""
        with patch("workflows.logger.get_config_dir", return_value=tmp_path):
            logger = WorkflowsLogger()
        assert logger.log_dir == tmp_path / "logs"

    def test_log_writes_json_to_file(self, tmp_path: Path) -> None:
        """Test entries are written as JSON lines."""
        log_dir = tmp_path / "logs"
        logger = WorkflowsLogger(log_dir=log_dir)

        logger.log("INFO", "Test message", project="dotfiles")

        log_files = list(log_dir.glob("workflows-*.log"))
        assert len(log_files) == 1

        with open(log_files[0]) as f:
            entry = json.loads(f.readline())

        assert entry["level"] == "INFO"
        assert entry["message"] == "Test message"
        assert entry["project"] == "dotfiles"
        assert "timestamp" in entry

    def test_console_off_by_default(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test nothing is printed unless console is enabled."""
        logger = WorkflowsLogger(log_dir=tmp_path)

        logger.log("INFO", "Quiet")

        assert capsys.readouterr().out == ""

    def test_console_output(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test text output when console is enabled."""
        logger = WorkflowsLogger(log_dir=tmp_path, console=True)

        logger.log("WARNING", "Loud")

        captured = capsys.readouterr()
        assert "[WARNING]" in captured.out
        assert "Loud" in captured.out

    def test_event_level(self, tmp_path: Path) -> None:
        """Test events default to INFO and keep an explicit level."""
        logger = WorkflowsLogger(log_dir=tmp_path)

        logger.event(WorkflowsLogger.SESSION_START, project="a")
        logger.event(WorkflowsLogger.FATAL_ERROR, level="ERROR", error="boom")

        levels = [entry["level"] for entry in logger.read_entries()]
        assert levels == ["INFO", "ERROR"]

    def test_event_serialises_paths(self, tmp_path: Path) -> None:
        """Test events carry their name and non-JSON values are stringified."""
        logger = WorkflowsLogger(log_dir=tmp_path)

        logger.event(WorkflowsLogger.PROJECT_DELETED, project="app", path=tmp_path / "app")

        entries = logger.read_entries(WorkflowsLogger.PROJECT_DELETED)
        assert len(entries) == 1
        assert entries[0]["message"] == "project_deleted"
        assert entries[0]["path"] == str(tmp_path / "app")

    def test_read_entries_filters(self, tmp_path: Path) -> None:
        """Test read_entries filters by event name."""
        logger = WorkflowsLogger(log_dir=tmp_path)

        logger.event(WorkflowsLogger.CLONE_START, project="a")
        logger.event(WorkflowsLogger.SESSION_START, project="a")
        logger.log("INFO", "plain")

        assert len(logger.read_entries()) == 3
        assert len(logger.read_entries(WorkflowsLogger.SESSION_START)) == 1

    def test_read_entries_without_file(self, tmp_path: Path) -> None:
        """Test reading before any write returns nothing."""
        assert WorkflowsLogger(log_dir=tmp_path).read_entries() == []
