"""Excepciones del dominio.

Two families:
- `FetchError`: per-domain failures. The orchestrator recovers from them,
  logs them and keeps going with the other domains.
- `EnvironmentFailure`: fatal problems (unsupported OS, hosts file I/O).
  They propagate up to the CLI, which reports them and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class GithubDNSError(Exception):
    """Base class for every error raised by githubdns."""


class FetchError(GithubDNSError):
    """A domain could not be looked up."""

    def __init__(self, domain: str, message: str) -> None:
        super().__init__(f"{domain}: {message}")
        self.domain = domain
        self.message = message


class LookupFailure(FetchError):
    """Connection, TLS, read or decoding error while querying the lookup service."""


class EnvironmentFailure(GithubDNSError):
    """The run cannot continue on this machine."""


class UnsupportedPlatformError(EnvironmentFailure):
    def __init__(self, platform_name: str) -> None:
        super().__init__(f"unsupported operating system: {platform_name!r}")
        self.platform_name = platform_name


class HostsFileError(EnvironmentFailure):
    """Reading or writing the hosts file failed."""

    def __init__(self, path: Path, operation: str, cause: BaseException) -> None:
        super().__init__(f"{operation} {path} failed: {cause}")
        self.path = path
        self.operation = operation
        self.cause = cause


class LineDelimiterMismatch(GithubDNSError, ValueError):
    """The hosts content does not use the configured line delimiter."""

    def __init__(self, line_delimiter: str) -> None:
        super().__init__(
            f"content is not split by {line_delimiter!r}; set GITHUBDNS_LINE_DELIMITER to match the file"
        )
        self.line_delimiter = line_delimiter
