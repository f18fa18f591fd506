"""Workflows - fuzzy-pick a project and open it in a tmuxinator session."""

__version__ = "0.1.0"
