"""Workflows configuration management.

Reads ~/.config/workflows/config.toml. Every field is optional: a missing file,
a broken file or a bad value never fails startup, defaults apply instead.
"""

import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

DEFAULT_LAYOUT = "default"
DEFAULT_BORDER = "none"
DEFAULT_BORDER_LABEL = ""

# The prompt fzf shows when opening a project
DEFAULT_OPEN_PROMPT = "Open: "

DEFAULT_WINDOW_NAME = "editor"
DEFAULT_ON_OPEN = "nvim ."
DEFAULT_FRESH_CONFIG = False

DEFAULT_CONFIRM_CLONING = True
DEFAULT_REPO_LIMIT = 1000


class Layout(Enum):
    """fzf layouts."""

    DEFAULT = "default"
    REVERSE = "reverse"
    REVERSE_LIST = "reverse-list"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Layout":
        """Map a raw config value to a layout, falling back to the default."""
        for layout in cls:
            if layout.value == value:
                return layout
        return cls(DEFAULT_LAYOUT)


class Border(Enum):
    """fzf border styles."""

    NONE = "none"
    ROUNDED = "rounded"
    SHARP = "sharp"
    BOLD = "bold"
    DOUBLE = "double"
    BLOCK = "block"
    THINBLOCK = "thinblock"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Border":
        """Map a raw config value to a border, falling back to the default."""
        for border in cls:
            if border.value == value:
                return border
        return cls(DEFAULT_BORDER)


@dataclass
class FzfConfig:
    """The [fzf] section.

    Raw fields keep whatever the user wrote; the get_* accessors resolve
    them to usable values.
    """

    layout: Optional[str] = None
    border: Optional[str] = None
    border_label: Optional[str] = None
    open_prompt: Optional[str] = None

    def get_layout(self) -> Layout:
        """What layout fzf should use. Default: `default`."""
        return Layout.parse(self.layout)

    def get_border(self) -> Border:
        """What border fzf should use. Default: `none`."""
        return Border.parse(self.border)

    def get_border_label(self) -> str:
        """Label shown in the border, requires a border other than none."""
        if self.border_label is None:
            return DEFAULT_BORDER_LABEL
        return self.border_label

    def get_open_prompt(self) -> str:
        """The prompt fzf displays when opening a project."""
        if self.open_prompt is None:
            return DEFAULT_OPEN_PROMPT
        return self.open_prompt


@dataclass
class TmuxinatorConfig:
    """The [tmuxinator] section."""

    window_name: Optional[str] = None
    on_open: Optional[str] = None
    fresh_config: Optional[bool] = None

    def get_window_name(self) -> str:
        if self.window_name is None:
            return DEFAULT_WINDOW_NAME
        return self.window_name

    def get_on_open(self) -> str:
        if self.on_open is None:
            return DEFAULT_ON_OPEN
        return self.on_open

    def get_fresh_config(self) -> bool:
        """Regenerate the session config on every launch."""
        if self.fresh_config is None:
            return DEFAULT_FRESH_CONFIG
        return self.fresh_config


@dataclass
class GithubConfig:
    """The [github] section."""

    confirm_cloning: Optional[bool] = None
    repo_limit: Optional[int] = None

    def get_confirm_cloning(self) -> bool:
        """Ask before cloning a project that is not local."""
        if self.confirm_cloning is None:
            return DEFAULT_CONFIRM_CLONING
        return self.confirm_cloning

    def get_repo_limit(self) -> int:
        if self.repo_limit is None or self.repo_limit <= 0:
            return DEFAULT_REPO_LIMIT
        return self.repo_limit


@dataclass
class WorkflowsConfig:
    """Whole program configuration, built once at startup."""

    fzf: FzfConfig = field(default_factory=FzfConfig)
    tmuxinator: TmuxinatorConfig = field(default_factory=TmuxinatorConfig)
    github: GithubConfig = field(default_factory=GithubConfig)
    # Keys that were present but ignored because of a wrong type
    warnings: list[str] = field(default_factory=list, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WorkflowsConfig":
        """Build a config from parsed TOML, dropping values of the wrong type.

        Args:
            data: Parsed TOML document

        Returns:
            WorkflowsConfig with every usable value applied
        """
        warnings: list[str] = []

        fzf = _section(data, "fzf", warnings)
        tmuxinator = _section(data, "tmuxinator", warnings)
        github = _section(data, "github", warnings)

        return cls(
            fzf=FzfConfig(
                layout=_typed(fzf, "fzf", "layout", str, warnings),
                border=_typed(fzf, "fzf", "border", str, warnings),
                border_label=_typed(fzf, "fzf", "border_label", str, warnings),
                open_prompt=_typed(fzf, "fzf", "open_prompt", str, warnings),
            ),
            tmuxinator=TmuxinatorConfig(
                window_name=_typed(tmuxinator, "tmuxinator", "window_name", str, warnings),
                on_open=_typed(tmuxinator, "tmuxinator", "on_open", str, warnings),
                fresh_config=_typed(tmuxinator, "tmuxinator", "fresh_config", bool, warnings),
            ),
            github=GithubConfig(
                confirm_cloning=_typed(github, "github", "confirm_cloning", bool, warnings),
                repo_limit=_typed(github, "github", "repo_limit", int, warnings),
            ),
            warnings=warnings,
        )

    @classmethod
    def from_toml(cls, text: str) -> "WorkflowsConfig":
        """Parse a TOML document.

        Raises:
            tomllib.TOMLDecodeError: If the document is not valid TOML
        """
        return cls.from_dict(tomllib.loads(text))


def _section(data: dict[str, Any], name: str, warnings: list[str]) -> dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        warnings.append(f"[{name}] is not a table, using defaults")
        return {}
    return value


def _typed(
    section: dict[str, Any],
    section_name: str,
    key: str,
    expected: type,
    warnings: list[str],
) -> Any:
    value = section.get(key)
    if value is None:
        return None
    # bool is a subclass of int, so `repo_limit = true` must not pass as 1
    if expected is int and isinstance(value, bool):
        value_ok = False
    else:
        value_ok = isinstance(value, expected)
    if not value_ok:
        warnings.append(
            f"{section_name}.{key} should be {expected.__name__}, "
            f"got {type(value).__name__}; using default"
        )
        return None
    return value


def get_config_dir() -> Path:
    """Get the workflows configuration directory path."""
    return Path.home() / ".config" / "workflows"


def get_config_path() -> Path:
    """Get the path of the config file."""
    return get_config_dir() / "config.toml"


def get_projects_dir() -> Path:
    """Get the directory holding local projects (~/Projects/)."""
    return Path.home() / "Projects"


def get_tmuxinator_config_dir() -> Path:
    """Get the tmuxinator project config directory (~/.config/tmuxinator/)."""
    return Path.home() / ".config" / "tmuxinator"


def load_config(config_path: Optional[Path] = None) -> WorkflowsConfig:
    """Load the configuration file.

    A missing file gives the default config. A file that cannot be read or
    parsed also gives the default config, with the reason recorded in
    `warnings`.

    Args:
        config_path: Override for the config file location

    Returns:
        Loaded configuration
    """
    path = config_path if config_path is not None else get_config_path()

    if not path.exists():
        return WorkflowsConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        return WorkflowsConfig(warnings=[f"Could not load {path}: {e}; using defaults"])

    return WorkflowsConfig.from_dict(data)
