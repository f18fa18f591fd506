"""Repository provider implementations."""

from workflows.providers.github import GitHubProvider

__all__ = ["GitHubProvider"]
