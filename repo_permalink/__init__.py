"""repo-permalink: resolve a file and line in a git working tree to permalink parts."""

__version__ = "0.1.0"
