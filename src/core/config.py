"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Resuelve una sola vez la ubicación del fichero hosts y su delimitador de
  línea, que después se pasa explícitamente al editor.
"""

from __future__ import annotations

import os
import platform
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import SUPPORTED_LINE_DELIMITERS, HostsLocation
from core.errors import UnsupportedPlatformError
from core.services.resolution import normalize_domains

DEFAULT_DOMAINS = (
    "github.com,github.global.ssl.fastly.net,codeload.github.com,assets-cdn.github.com"
)

WINDOWS_HOSTS_PATH = Path(r"C:\Windows\System32\drivers\etc\hosts")
UNIX_HOSTS_PATH = Path("/etc/hosts")

_PLATFORM_DEFAULTS: dict[str, tuple[Path, str]] = {
    "linux": (UNIX_HOSTS_PATH, "\n"),
    "darwin": (UNIX_HOSTS_PATH, "\n"),
    "windows": (WINDOWS_HOSTS_PATH, "\r\n"),
}

_DELIMITER_ALIASES: dict[str, str] = {
    "lf": "\n",
    "cr": "\r",
    "crlf": "\r\n",
    "\\n": "\n",
    "\\r": "\r",
    "\\r\\n": "\r\n",
}


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "githubdns"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "githubdns"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "githubdns"
    return Path.home() / ".config" / "githubdns"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def parse_domains(raw: str) -> list[str]:
    """Split a comma-separated domain list, dropping blanks and duplicates."""

    return normalize_domains(raw.split(","))


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Every field can be set through a `GITHUBDNS_<FIELD>` environment variable
    or a `.env` file (project first, then the per-user config directory).
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUBDNS_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    domains: str = Field(
        default=DEFAULT_DOMAINS,
        min_length=1,
        description="Comma-separated domains to pin in the hosts file.",
    )
    lookup_suffix: str = Field(
        default="ipaddress.com",
        min_length=1,
        description="Domain of the IP lookup service.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="githubdns/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to the lookup service.",
    )
    hosts_path: Path | None = Field(
        default=None,
        description="Override for the hosts file path (platform default otherwise).",
    )
    line_delimiter: str | None = Field(
        default=None,
        description="Override for the line delimiter: lf, cr or crlf.",
    )
    atomic_write: bool = Field(
        default=True,
        description="Write through a temp file + rename. Disable for bind-mounted hosts files.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("line_delimiter")
    @classmethod
    def _normalize_delimiter(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = _DELIMITER_ALIASES.get(value.strip().lower(), value)
        if normalized not in SUPPORTED_LINE_DELIMITERS:
            raise ValueError(f"unsupported line delimiter: {value!r}")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper()

    def domain_list(self) -> list[str]:
        return parse_domains(self.domains)


def get_hosts_location(
    settings: AppSettings | None = None,
    *,
    platform_name: str | None = None,
) -> HostsLocation:
    """Resuelve ruta del hosts y delimitador para el sistema actual.

    Settings overrides win over the platform defaults. When both the path and
    the delimiter are overridden the platform is not consulted at all.

    Raises:
        UnsupportedPlatformError: the OS is not Linux, macOS or Windows and
            no full override was given.
    """

    settings = settings or AppSettings()
    if settings.hosts_path is not None and settings.line_delimiter is not None:
        return HostsLocation(path=settings.hosts_path, line_delimiter=settings.line_delimiter)

    name = platform_name if platform_name is not None else platform.system()
    defaults = _PLATFORM_DEFAULTS.get(name.strip().lower())
    if defaults is None:
        raise UnsupportedPlatformError(name)

    path, delimiter = defaults
    return HostsLocation(
        path=settings.hosts_path or path,
        line_delimiter=settings.line_delimiter or delimiter,
    )
