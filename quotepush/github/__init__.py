"""GitHub integration helpers."""

from .contents_client import GitHubContentsClient, GitHubContentsError

__all__ = ["GitHubContentsClient", "GitHubContentsError"]
