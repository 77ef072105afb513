"""Git resolution exceptions.

All exceptions inherit from GitResolutionError and carry an optional hint
telling the user how to fix their repository setup.

Most of these are never raised by the resolution components: they are built
to produce the text of a user-facing notification. InconsistentRemoteError is
the exception, since it signals git metadata that contradicts itself.

Example:
    >>> from repo_permalink.git.exceptions import NoRemotesError
    >>> print(NoRemotesError())
    Git repo has no remote

    Hint: Add a remote with: git remote add origin <url>
"""

from repo_permalink.exceptions import GitOperationError


class GitResolutionError(GitOperationError):
    """Base exception for remote and revision resolution errors.

    Attributes:
        message: Error message
        hint: Optional hint for resolution
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            hint: Optional hint for resolution
        """
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        """Format error message with hint.

        Returns:
            Formatted error message with optional hint
        """
        if self.hint:
            return f"{self.message}\n\nHint: {self.hint}"
        return self.message


class RemoteUriParseError(GitResolutionError):
    """Raised when a remote URI cannot be split into host and repo path.

    Attributes:
        uri: The URI that failed to parse
        errors: Ordered diagnostics, one per failed parsing stage
    """

    def __init__(self, uri: str, errors: list[str]) -> None:
        """Initialize exception.

        Args:
            uri: The URI that failed to parse
            errors: Diagnostics collected while parsing (never empty)
        """
        super().__init__(
            message="; ".join(errors),
            hint=(
                "Expected formats:\n"
                "  - git@host:owner/repo.git\n"
                "  - https://host[:port]/owner/repo.git\n"
                "  - ssh://user@host[:port]/owner/repo.git"
            ),
        )
        self.uri = uri
        self.errors = list(errors)


class NoRemotesError(GitResolutionError):
    """Repository has no remotes configured."""

    def __init__(self) -> None:
        """Initialize exception."""
        super().__init__(
            message="Git repo has no remote",
            hint="Add a remote with: git remote add origin <url>",
        )


class AmbiguousRemoteError(GitResolutionError):
    """Several remotes exist and the current branch tracks none of them.

    Attributes:
        remotes: Names of the configured remotes
    """

    def __init__(self, remotes: list[str]) -> None:
        """Initialize exception.

        Args:
            remotes: Names of the configured remotes
        """
        remote_list = ", ".join(f"'{r}'" for r in remotes)
        super().__init__(
            message=f"Multiple remotes available ({remote_list}) and all of them can be used",
            hint=(
                "Either set up a remote tracking branch for your current branch "
                "(git push -u) or set an existing one "
                "(git branch --set-upstream-to=<remote>/<branch>).\n"
                "Otherwise choose one of them with --remote <name> "
                "or REPO_PERMALINK_REMOTE=<name>."
            ),
        )
        self.remotes = remotes


class InconsistentRemoteError(GitResolutionError):
    """The upstream branch does not point at any configured remote.

    Attributes:
        upstream_branch: Short name of the upstream branch (e.g. 'origin/main')
        parsed_remote: Remote name parsed from it, None if none could be parsed
    """

    def __init__(self, upstream_branch: str, parsed_remote: str | None = None) -> None:
        """Initialize exception.

        Args:
            upstream_branch: Short name of the upstream branch
            parsed_remote: Remote name parsed from the upstream branch
        """
        if parsed_remote is None:
            message = f"Could not parse remote name from remote branch '{upstream_branch}'"
        else:
            message = f"Parsed remote '{parsed_remote}' from remote branch '{upstream_branch}' is not a valid remote"
        super().__init__(
            message=message,
            hint="Check the output of 'git remote' and 'git rev-parse --abbrev-ref @{u}'.",
        )
        self.upstream_branch = upstream_branch
        self.parsed_remote = parsed_remote


class RevisionNotFoundError(GitResolutionError):
    """No revision visible on the remote could be found.

    Attributes:
        remote: The remote that was searched
    """

    def __init__(self, remote: str) -> None:
        """Initialize exception.

        Args:
            remote: The remote that was searched
        """
        super().__init__(
            message=f"Failed to get closest revision that exists in remote '{remote}'",
            hint=f"Push your branch with: git push {remote} HEAD",
        )
        self.remote = remote
