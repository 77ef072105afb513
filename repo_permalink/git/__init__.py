"""Remote and revision resolution for git permalinks.

Resolves a git working tree to the pieces a permalink URL is built from:
host, optional port, repository path, and a revision the remote is known to
have. Git itself is driven through a GitExecutor; everything else is plain
Python over its output.

Example:
    >>> from repo_permalink.git import (
    ...     GitCommandExecutor, RemoteInspector, RemoteSelector, RepoDataAssembler
    ... )
    >>> inspector = RemoteInspector(GitCommandExecutor("."))
    >>> remote = RemoteSelector(inspector).select_remote()
    >>> RepoDataAssembler(inspector).get_repo_data(remote)
    RepoData(host='github.com', port=None, repo_path='owner/repo', rev='main')

Error Handling:
    User-facing problems are sent to a NotificationSink and the call returns
    None. Only InconsistentRemoteError (contradictory git metadata) and
    ValueError (empty remote name) are raised.
"""

from repo_permalink.git.assembler import RepoDataAssembler
from repo_permalink.git.exceptions import (
    AmbiguousRemoteError,
    GitResolutionError,
    InconsistentRemoteError,
    NoRemotesError,
    RemoteUriParseError,
    RevisionNotFoundError,
)
from repo_permalink.git.executor import GitCommandExecutor, GitExecutor, GitResult
from repo_permalink.git.inspector import DEFAULT_TRACKING_BRANCH, RemoteInspector
from repo_permalink.git.models import ParsedRepo, PermalinkTarget, RepoData
from repo_permalink.git.parser import RemoteUriScanner, parse_remote_uri
from repo_permalink.git.revision import DEFAULT_MAX_ANCESTOR_DEPTH, RevisionResolver
from repo_permalink.git.selector import RemoteSelector

__all__ = [
    # Components
    "GitCommandExecutor",
    "GitExecutor",
    "GitResult",
    "RemoteInspector",
    "RevisionResolver",
    "RemoteSelector",
    "RepoDataAssembler",
    # Parser
    "RemoteUriScanner",
    "parse_remote_uri",
    # Models
    "ParsedRepo",
    "RepoData",
    "PermalinkTarget",
    # Defaults
    "DEFAULT_MAX_ANCESTOR_DEPTH",
    "DEFAULT_TRACKING_BRANCH",
    # Exceptions
    "GitResolutionError",
    "RemoteUriParseError",
    "NoRemotesError",
    "AmbiguousRemoteError",
    "InconsistentRemoteError",
    "RevisionNotFoundError",
]
