"""Choosing which remote a permalink should point at.

With a single remote there is nothing to choose. With several, the remote
of the current branch's upstream wins; without an upstream the user has to
decide, so a warning is emitted instead of guessing.
"""

import re

from repo_permalink.git.exceptions import AmbiguousRemoteError, InconsistentRemoteError, NoRemotesError
from repo_permalink.git.inspector import RemoteInspector
from repo_permalink.notifications import LogNotificationSink, Notification, NotificationSink, Severity
from repo_permalink.utils.logging_config import get_logger

log = get_logger(__name__)

REMOTE_PREFIX = re.compile(r"^([A-Za-z0-9_.\-]+)/")


class RemoteSelector:
    """Picks a remote among the configured ones.

    Attributes:
        inspector: Source of remote and upstream data
        sink: Receives the no-remote error and the ambiguity warning
    """

    def __init__(self, inspector: RemoteInspector, sink: NotificationSink | None = None) -> None:
        self.inspector = inspector
        self.sink = sink if sink is not None else LogNotificationSink()

    def select_remote(self) -> str | None:
        """Remote to use for the current branch.

        Returns:
            Remote name, or None after notifying the user when there is no
            remote or the choice is ambiguous

        Raises:
            InconsistentRemoteError: If the upstream branch name has no
                remote prefix or names a remote that is not configured
        """
        remotes = self.inspector.list_remotes()
        if not remotes:
            self.sink.notify(Notification(Severity.ERROR, str(NoRemotesError())))
            return None

        if len(remotes) == 1:
            return remotes[0]

        upstream_branch = self.inspector.get_rev_name("@{u}")
        if not upstream_branch:
            self.sink.notify(Notification(Severity.WARNING, str(AmbiguousRemoteError(remotes))))
            return None

        match = REMOTE_PREFIX.match(upstream_branch)
        if not match:
            raise InconsistentRemoteError(upstream_branch)

        remote = match.group(1)
        if remote not in remotes:
            raise InconsistentRemoteError(upstream_branch, parsed_remote=remote)

        log.debug("remote_selected", remote=remote, upstream=upstream_branch)
        return remote
