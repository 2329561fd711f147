"""Modelos del dominio (Pydantic v2).

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Todos son inmutables (`frozen=True`): se crean una vez por ejecución.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

MARKER_LINE = "# ----Generated By githubdns ---"

SUPPORTED_LINE_DELIMITERS: tuple[str, ...] = ("\n", "\r", "\r\n")


class LookupTarget(BaseModel):
    """Where to ask the lookup service about a domain."""

    model_config = ConfigDict(frozen=True)

    service_host: str = Field(
        ...,
        min_length=1,
        description="Host of the lookup page, e.g. 'fastly.net.ipaddress.com'.",
    )
    request_path: str = Field(
        default="/",
        pattern=r"^/",
        description="'/' for apex domains, '/<domain>' for subdomains.",
    )

    @property
    def url(self) -> str:
        return f"https://{self.service_host}{self.request_path}"


class ResolvedRecord(BaseModel):
    """Outcome of resolving one domain.

    `address` is a dotted-quad IPv4 string or empty when nothing was found.
    `error` is set only when the lookup itself failed.
    """

    model_config = ConfigDict(frozen=True)

    domain: str = Field(..., min_length=1)
    address: str = Field(default="")
    error: str | None = Field(default=None)

    @property
    def resolved(self) -> bool:
        return bool(self.address)

    @property
    def failed(self) -> bool:
        return self.error is not None


class ResolutionResult(BaseModel):
    """All records of a run, in configuration order."""

    model_config = ConfigDict(frozen=True)

    records: tuple[ResolvedRecord, ...] = Field(default_factory=tuple)

    def as_map(self) -> dict[str, str]:
        """Domain -> address mapping handed to the hosts editor.

        Failed lookups are left out; extraction misses keep an empty address.
        """

        return {r.domain: r.address for r in self.records if not r.failed}

    @property
    def resolved(self) -> list[ResolvedRecord]:
        return [r for r in self.records if r.resolved]

    @property
    def failed(self) -> list[ResolvedRecord]:
        return [r for r in self.records if r.failed]


class HostsLocation(BaseModel):
    """Hosts file path plus the line delimiter used on this platform."""

    model_config = ConfigDict(frozen=True)

    path: Path
    line_delimiter: str = Field(default="\n")
