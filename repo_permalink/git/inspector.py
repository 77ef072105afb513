"""Queries about remotes, revisions and files.

RemoteInspector wraps the git commands the resolution components need and
turns each into a plain Python value. A failing command becomes None, False
or an empty list; no git failure propagates out of this module.

Example:
    >>> from repo_permalink.git.executor import GitCommandExecutor
    >>> from repo_permalink.git.inspector import RemoteInspector
    >>> inspector = RemoteInspector(GitCommandExecutor())
    >>> inspector.list_remotes()
    ['origin', 'upstream']
    >>> inspector.get_remote_uri("origin")
    'git@github.com:owner/repo.git'
    >>> inspector.get_tracking_branch("origin")
    'main'
"""

import re

from repo_permalink.git.executor import GitExecutor
from repo_permalink.utils.logging_config import get_logger

log = get_logger(__name__)

# Returned by get_tracking_branch when no upstream can be determined.
# This is a guess, not something read from the repository.
DEFAULT_TRACKING_BRANCH = "origin/master"


class RemoteInspector:
    """Reads remote and revision metadata through a GitExecutor.

    Attributes:
        executor: Runs the git commands
        fallback_tracking_branch: Value of get_tracking_branch() when the
            current branch has no usable upstream
    """

    def __init__(self, executor: GitExecutor, fallback_tracking_branch: str = DEFAULT_TRACKING_BRANCH) -> None:
        self.executor = executor
        self.fallback_tracking_branch = fallback_tracking_branch

    def list_remotes(self) -> list[str]:
        """Names of the configured remotes, in the order git reports them."""
        result = self.executor.run(["remote"])
        if not result.succeeded:
            return []
        return [line.strip() for line in result.output_lines if line.strip()]

    def get_remote_uri(self, remote: str) -> str | None:
        """URI of a remote.

        Args:
            remote: Remote name

        Returns:
            The URI, or None if git cannot report one

        Raises:
            ValueError: If remote is empty
        """
        if not remote:
            raise ValueError("remote cannot be empty")
        return self.executor.run(["remote", "get-url", remote]).first_line

    def get_rev(self, revspec: str) -> str | None:
        """Commit id that revspec resolves to, None if it does not resolve."""
        return self.executor.run(["rev-parse", revspec]).first_line

    def get_rev_name(self, revspec: str) -> str | None:
        """Short symbolic name of revspec (e.g. 'origin/main' for '@{u}')."""
        return self.executor.run(["rev-parse", "--abbrev-ref", revspec]).first_line

    def is_rev_in_remote(self, revspec: str, remote: str) -> bool:
        """Whether revspec is reachable from a branch of the given remote.

        Args:
            revspec: Revision to look for
            remote: Remote name

        Raises:
            ValueError: If remote is empty
        """
        if not remote:
            raise ValueError("remote cannot be empty")

        result = self.executor.run(["branch", "--remotes", "--contains", revspec])
        if not result.succeeded:
            return False

        prefix = f"{remote}/"
        return any(line.strip().startswith(prefix) for line in result.output_lines)

    def get_tracking_branch(self, remote: str) -> str:
        """Branch of ``remote`` that the current branch tracks.

        Resolves the symbolic HEAD, reads its configured upstream and strips
        the ``<remote>/`` prefix from it.

        Args:
            remote: Remote name

        Returns:
            Branch name without the remote prefix (e.g. 'main'), or
            ``fallback_tracking_branch`` when the branch is detached, has no
            upstream, or tracks a different remote
        """
        sym_ref = self.executor.run(["symbolic-ref", "-q", "HEAD"]).first_line
        if not sym_ref:
            log.debug("tracking_branch_fallback", remote=remote, reason="no_symbolic_ref")
            return self.fallback_tracking_branch

        upstream = self.executor.run(["for-each-ref", "--format=%(upstream:short)", sym_ref]).first_line
        if not upstream:
            log.debug("tracking_branch_fallback", remote=remote, reason="no_upstream", ref=sym_ref)
            return self.fallback_tracking_branch

        match = re.match(rf"^{re.escape(remote)}/(.+)$", upstream)
        if not match:
            log.debug("tracking_branch_fallback", remote=remote, reason="other_remote", upstream=upstream)
            return self.fallback_tracking_branch
        return match.group(1)

    def get_git_root(self) -> str | None:
        """Absolute path of the top of the working tree."""
        return self.executor.run(["rev-parse", "--show-toplevel"]).first_line

    def is_file_in_rev(self, file: str, revspec: str) -> bool:
        """Whether ``file`` (relative to the repository root) exists in revspec."""
        return self.executor.run(["cat-file", "-e", f"{revspec}:{file}"]).succeeded

    def has_file_changed(self, file: str, rev: str) -> bool:
        """Whether the working-tree ``file`` differs from its content in rev."""
        return not self.executor.run(["diff", "--exit-code", rev, "--", file]).succeeded
