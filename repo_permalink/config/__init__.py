"""Configuration for repo-permalink."""

from repo_permalink.config.settings import PermalinkSettings

__all__ = ["PermalinkSettings"]
