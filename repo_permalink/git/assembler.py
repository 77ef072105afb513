"""Assembling RepoData for a remote.

Combines the remote URI, its parsed form and the tracking branch. Either a
complete RepoData comes back or None, with the reason already sent to the
notification sink.
"""
from repo_permalink.git.exceptions import RemoteUriParseError
from repo_permalink.git.inspector import RemoteInspector
from repo_permalink.git.models import RepoData
from repo_permalink.git.parser import parse_remote_uri
from repo_permalink.notifications import LogNotificationSink, Notification, NotificationSink, Severity
from repo_permalink.utils.logging_config import get_logger

log = get_logger(__name__)


class RepoDataAssembler:
    """Builds RepoData from git metadata.

    Attributes:
        inspector: Source of the remote URI and tracking branch
        sink: Receives retrieval and parse errors
    """

    def __init__(self, inspector: RemoteInspector, sink: NotificationSink | None = None) -> None:
        self.inspector = inspector
        self.sink = sink if sink is not None else LogNotificationSink()

    def get_repo_data(self, remote: str) -> RepoData | None:
        """Host, port, repo path and tracking branch for ``remote``.

        Args:
            remote: Remote name

        Returns:
            RepoData, or None if the URI is missing or cannot be parsed

        Raises:
            ValueError: If remote is empty
        """
        header = f"Failed to retrieve repo data for remote '{remote}'"

        remote_uri = self.inspector.get_remote_uri(remote)
        if not remote_uri:
            self._error(f"{header}: cannot retrieve url from remote '{remote}'")
            return None

        try:
            parsed = parse_remote_uri(remote_uri)
        except RemoteUriParseError as e:
            log.debug("remote_uri_parse_failed", remote=remote, uri=remote_uri, errors=e.errors)
            self._error(f"{header}: {'; '.join(e.errors)}")
            return None

        rev = self.inspector.get_tracking_branch(remote)
        return RepoData(host=parsed.host, port=parsed.port, repo_path=parsed.repo_path, rev=rev)

    def _error(self, message: str) -> None:
        self.sink.notify(Notification(Severity.ERROR, message))
