"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects para todas las peticiones.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    TLS verification is left on: the certificate is checked against the
    lookup service hostname.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
