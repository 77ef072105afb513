"""Custom exception hierarchy for repo-permalink.

Exception Hierarchy:
    RepoPermalinkError (base)
    ├── ConfigurationError
    └── GitOperationError
        └── GitResolutionError (see repo_permalink.git.exceptions)

Precondition violations (for example an empty remote name) are signalled
with the builtin ValueError instead, so call sites can tell programming
errors apart from data errors.

Example Usage:
    >>> from repo_permalink.exceptions import ConfigurationError
    >>> try:
    ...     PermalinkSettings.from_yaml(path)
    ... except ConfigurationError as e:
    ...     print(e.message)
"""


class RepoPermalinkError(Exception):
    """Base exception for all repo-permalink errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(RepoPermalinkError):
    """Configuration-related errors.

    Examples:
        - Configuration file not found
        - Invalid YAML syntax
        - Invalid configuration values
    """

    pass


class GitOperationError(RepoPermalinkError):
    """Git operation errors.

    Base class for errors about repository state. See
    repo_permalink.git.exceptions for the specific types.
    """

    pass
