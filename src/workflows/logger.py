"""
Workflows log output.

File: one JSON object per line, appended to a daily log file.
Console: off by default so log lines never draw over the fzf UI.
"""

from __future__ import annotations

import fcntl
import json
from datetime import datetime
from pathlib import Path
from typing import Any

from workflows.config import get_config_dir


class WorkflowsLogger:
    """
    Structured run log.

    Writes to ~/.config/workflows/logs/workflows-YYYYMMDD.log.
    """

    # Event names
    CONFIG_FALLBACK = "config_fallback"
    PROJECT_SELECTED = "project_selected"
    SELECTION_ABORTED = "selection_aborted"
    CLONE_START = "clone_start"
    CLONE_DECLINED = "clone_declined"
    CONFIG_CREATED = "session_config_created"
    SESSION_START = "session_start"
    DELETE_CHECKS = "delete_checks"
    DELETE_DECLINED = "delete_declined"
    PROJECT_DELETED = "project_deleted"
    FATAL_ERROR = "fatal_error"

    def __init__(
        self,
        name: str = "workflows",
        log_dir: Path | None = None,
        console: bool = False,
    ) -> None:
        """
        Args:
            name: Logger name, used as the log file prefix
            log_dir: Log directory (default: ~/.config/workflows/logs/)
            console: Also print a text line per entry
        """
        self.name = name
        self.log_dir = log_dir if log_dir else get_config_dir() / "logs"
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.console = console

    def _get_log_file(self) -> Path:
        """Today's log file path."""
        today = datetime.now().strftime("%Y%m%d")
        return self.log_dir / f"{self.name}-{today}.log"

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """
        Write a structured log entry.

        Args:
            level: DEBUG, INFO, WARNING or ERROR
            message: Log message
            **kwargs: Extra structured data
        """
        now = datetime.now()

        if self.console:
            time_str = now.strftime("%H:%M:%S")
            print(f"{time_str} [{level}] {message}")

        log_entry = {
            "timestamp": now.isoformat(),
            "level": level,
            "message": message,
            **kwargs,
        }

        # Several launchers can run at once, lock around the append
        with open(self._get_log_file(), "a") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                f.write(json.dumps(log_entry, ensure_ascii=False, default=str) + "\n")
                f.flush()
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

    def event(self, event_type: str, level: str = "INFO", **kwargs: Any) -> None:
        """Log a named event; the event name is also the message."""
        self.log(level, event_type, event=event_type, **kwargs)

    def read_entries(self, event_type: str | None = None) -> list[dict]:
        """
        Read today's entries back (for analysis and tests).

        Args:
            event_type: Only return entries of this event. None returns all
        """
        log_file = self._get_log_file()
        if not log_file.exists():
            return []

        entries = []
        with open(log_file) as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    entry = json.loads(line)
                except json.JSONDecodeError:
                    continue
                if event_type is None or entry.get("event") == event_type:
                    entries.append(entry)

        return entries
