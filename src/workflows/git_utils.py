"""Git utilities for the safety checks run before deleting a project."""

import subprocess
from pathlib import Path

# stderr fragments meaning "there is nothing upstream to compare with"
_NO_UPSTREAM_MARKERS = (
    "no upstream",
    "no such branch",
    "unknown revision",
    "bad revision",
    "ambiguous argument",
)


def is_working_tree_clean(repo_path: Path) -> bool:
    """Check if the git working tree is clean.

    Args:
        repo_path: Path of the repository.

    Returns:
        True if there are no uncommitted or untracked changes.

    Raises:
        RuntimeError: If git status fails (e.g. not a repository).
    """
    result = subprocess.run(
        ["git", "status", "--porcelain"],
        cwd=repo_path,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        raise RuntimeError(f"Failed to check working tree of {repo_path}: {result.stderr.strip()}")

    return result.stdout.strip() == ""


def is_branch_pushed(repo_path: Path, branch: str = "main") -> bool:
    """Check if every commit of a branch is on its upstream.

    A branch without an upstream (or a missing branch) counts as not pushed.

    Args:
        repo_path: Path of the repository.
        branch: Branch to check (default: main).

    Returns:
        True if the branch has no commits missing from its upstream.

    Raises:
        RuntimeError: If git fails for any other reason.
    """
    result = subprocess.run(
        ["git", "rev-list", "--count", f"{branch}@{{upstream}}..{branch}"],
        cwd=repo_path,
        capture_output=True,
        text=True,
    )

    if result.returncode != 0:
        stderr = result.stderr.lower()
        if any(marker in stderr for marker in _NO_UPSTREAM_MARKERS):
            return False
        raise RuntimeError(f"Failed to compare {branch} with upstream: {result.stderr.strip()}")

    return result.stdout.strip() == "0"
