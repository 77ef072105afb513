"""Data models for permalink resolution.

ParsedRepo is what a remote URI breaks down into; RepoData adds the revision
and is what the URL rendering layer consumes. All models are immutable.

Example:
    >>> from repo_permalink.git.models import RepoData
    >>> data = RepoData(host="github.com", repo_path="owner/repo", rev="main")
    >>> data.port is None
    True
"""

from pydantic import BaseModel, ConfigDict, field_validator


class ParsedRepo(BaseModel):
    """Connection data parsed from a remote URI.

    Attributes:
        host: Hostname of the Git server (case preserved)
        port: Port, only kept for http(s) remotes with an explicit port
        repo_path: Path of the repository on the host, without '.git'
    """

    model_config = ConfigDict(frozen=True)

    host: str
    port: str | None = None
    repo_path: str

    @field_validator("host", "repo_path")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Ensure host and repo_path are not empty.

        Args:
            v: The value to validate

        Returns:
            The unchanged value

        Raises:
            ValueError: If value is empty
        """
        if not v:
            raise ValueError("host and repo_path must not be empty")
        return v

    @field_validator("port")
    @classmethod
    def validate_port_digits(cls, v: str | None) -> str | None:
        """Ensure the port, when present, is numeric."""
        if v is not None and not v.isdigit():
            raise ValueError(f"port must be numeric, got '{v}'")
        return v


class RepoData(ParsedRepo):
    """Parsed remote plus the revision a permalink should point at.

    Attributes:
        rev: Revision name or commit id
    """

    rev: str

    @field_validator("rev")
    @classmethod
    def validate_rev(cls, v: str) -> str:
        if not v:
            raise ValueError("rev must not be empty")
        return v


class PermalinkTarget(BaseModel):
    """Everything needed to render a permalink for a file and line range.

    Attributes:
        repo: Remote connection data and tracking revision
        rev: Commit that is visible on the remote
        file: Path of the file relative to the repository root
        line_start: First line (1-based)
        line_end: Last line, None for a single line
    """

    model_config = ConfigDict(frozen=True)

    repo: RepoData
    rev: str
    file: str
    line_start: int
    line_end: int | None = None
