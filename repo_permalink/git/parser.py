"""Remote URI parsing.

Turns the URI of a git remote into the host, optional port, and repository
path a permalink is built from. There is no single grammar for git remote
URIs, so parsing runs as a small scanner with one stage per component; each
stage can be called on its own and reports its own failure.

Stages, in order:
    1. strip_transport: remove ``scheme://`` (plus any ``user@``) or the
       ``user@`` of the SSH shorthand
    2. strip_dot_git: remove a trailing ``.git``
    3. scan_host: leading run of host characters followed by ``:`` or ``/``
    4. scan_port: ``:<digits>`` directly after the host, followed by a separator
    5. scan_repo_path: everything after the separator, up to the end

Supported URI formats (examples):
    - https://github.com/owner/repo.git
    - https://gitlab.example.com:8443/group/sub/repo
    - git@github.com:owner/repo.git
    - ssh://git@host.example.com:2222/owner/repo.git
    - git://host.example.com/~user/repo.git

Ports are only reported for http(s) remotes. A number after the host of an
SSH remote is the SSH port, which has no meaning in a web URL.

Example:
    >>> from repo_permalink.git.parser import parse_remote_uri
    >>> parsed = parse_remote_uri("https://example.com:8443/group/repo")
    >>> parsed.host, parsed.port, parsed.repo_path
    ('example.com', '8443', 'group/repo')
    >>> parse_remote_uri("git@example.com:2222/group/repo.git").port is None
    True

Thread Safety:
    Parsing is pure; scanner instances are never shared between calls.
"""

import re

from repo_permalink.git.exceptions import RemoteUriParseError
from repo_permalink.git.models import ParsedRepo

# Characters allowed in schemes, users, hosts and remote names
ALLOWED_CHARS = r"[A-Za-z0-9_.\-]"
HOST_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_.-")
PATH_CHARS = HOST_CHARS | frozenset("~/")
SEPARATORS = frozenset(":/")

SCHEME_PREFIX = re.compile(rf"^{ALLOWED_CHARS}+://")
USER_PREFIX = re.compile(rf"^{ALLOWED_CHARS}+@")
HTTP_PREFIX = re.compile(r"^https?://")


class RemoteUriScanner:
    """Stage-by-stage scanner over a single remote URI.

    Each ``scan_*``/``strip_*`` method consumes a string and returns what it
    extracted; failures are appended to ``errors``. ``parse()`` runs the
    stages in order and stops at the first stage whose result the later ones
    depend on.

    Attributes:
        uri: The URI as given (surrounding whitespace removed)
        errors: Diagnostics collected so far, in stage order
    """

    def __init__(self, uri: str) -> None:
        self.uri = uri.strip()
        self.errors: list[str] = []

    def strip_transport(self, uri: str) -> str | None:
        """Remove the transport prefix.

        Accepts ``<chars>://`` (optionally followed by userinfo ending in
        ``@`` before the first ``/``) or the SSH shorthand ``<chars>@``.

        Returns:
            The URI without prefix, or None if no prefix was recognised
        """
        match = SCHEME_PREFIX.match(uri)
        if match:
            rest = uri[match.end() :]
            authority = rest.split("/", 1)[0]
            if "@" in authority:
                rest = rest[authority.rindex("@") + 1 :]
            return rest

        match = USER_PREFIX.match(uri)
        if match:
            return uri[match.end() :]

        self.errors.append(f"remote uri '{uri}' uses an unsupported protocol format")
        return None

    @staticmethod
    def strip_dot_git(stripped_uri: str) -> str:
        """Remove a trailing '.git', keeping at least one character."""
        if stripped_uri.endswith(".git") and len(stripped_uri) > len(".git"):
            return stripped_uri[: -len(".git")]
        return stripped_uri

    def scan_host(self, stripped_uri: str) -> str | None:
        """Read the host at the start of the prefix-less URI.

        Returns:
            The host, or None if the URI does not start with host characters
            followed by ':' or '/'
        """
        end = 0
        while end < len(stripped_uri) and stripped_uri[end] in HOST_CHARS:
            end += 1

        if end == 0 or end == len(stripped_uri) or stripped_uri[end] not in SEPARATORS:
            self.errors.append(f"cannot parse the hostname from uri '{stripped_uri}'")
            return None
        return stripped_uri[:end]

    @staticmethod
    def scan_port(stripped_uri: str, host: str) -> str | None:
        """Read ``:<digits>`` right after the host.

        The digits must be followed by a separator and at least one more
        character, otherwise there is no port. A missing port is not an error.
        """
        rest = stripped_uri[len(host) :]
        if not rest.startswith(":"):
            return None

        end = 1
        while end < len(rest) and rest[end].isascii() and rest[end].isdigit():
            end += 1

        if end == 1 or end + 1 >= len(rest) or rest[end] not in SEPARATORS:
            return None
        return rest[1:end]

    def scan_repo_path(self, stripped_uri: str, host: str, port: str | None) -> str | None:
        """Read the repository path after host, port and separator.

        The path runs to the end of the string and may contain further
        slashes (nested groups) and '~' (home-relative paths).

        Returns:
            The path, or None if it is missing or has invalid characters
        """
        offset = len(host)
        if port is not None:
            offset += len(port) + 1

        rest = stripped_uri[offset:]
        path = rest[1:]
        if not rest or rest[0] not in SEPARATORS or not path or any(c not in PATH_CHARS for c in path):
            self.errors.append(f"cannot parse the repo path from uri '{stripped_uri}'")
            return None
        return path

    def parse(self) -> ParsedRepo:
        """Run all stages.

        Returns:
            ParsedRepo with host, port (http(s) only) and repo path

        Raises:
            RemoteUriParseError: If any stage failed; carries every
                diagnostic collected
        """
        stripped = self.strip_transport(self.uri)
        if stripped is None:
            raise RemoteUriParseError(self.uri, self.errors)

        stripped = self.strip_dot_git(stripped)

        host = self.scan_host(stripped)
        if host is None:
            raise RemoteUriParseError(self.uri, self.errors)

        port = self.scan_port(stripped, host)
        repo_path = self.scan_repo_path(stripped, host, port)
        if repo_path is None or self.errors:
            raise RemoteUriParseError(self.uri, self.errors)

        if not HTTP_PREFIX.match(self.uri):
            port = None

        return ParsedRepo(host=host, port=port, repo_path=repo_path)


def parse_remote_uri(uri: str) -> ParsedRepo:
    """Parse a git remote URI.

    Args:
        uri: Remote URI as printed by ``git remote get-url``

    Returns:
        ParsedRepo for the URI

    Raises:
        RemoteUriParseError: If the URI cannot be parsed. ``errors`` lists
            every diagnostic, in stage order.
    """
    return RemoteUriScanner(uri).parse()
