"""Utility modules for repo-permalink."""
