"""Resolvedor concreto: ipaddress.com.

Flujo por dominio:
- dominio -> `LookupTarget` (host + path)
- GET https://<host><path> (TLS verificado contra <host>)
- cuerpo UTF-8 -> `extract_address`
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client
from adapters.lookup.extractor import extract_address
from adapters.lookup.url_builder import build_lookup_target
from core.config import AppSettings
from core.domain.models import LookupTarget
from core.errors import LookupFailure
from core.interfaces.resolver import DomainResolver

logger = logging.getLogger(__name__)


class IPAddressComResolver(DomainResolver):
    """Obtiene la IPv4 actual de un dominio desde su página en ipaddress.com.

    A shared `client` can be passed so that all concurrent lookups of a run
    reuse one connection pool; otherwise each call opens its own client.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def resolve(self, domain: str) -> str:
        target = build_lookup_target(domain, self._settings.lookup_suffix)
        logger.info("get %s,%s (for %s)", target.service_host, target.request_path, domain)

        try:
            if self._client is not None:
                response = await self._fetch(self._client, target)
            else:
                async with build_async_client(self._settings) as client:
                    response = await self._fetch(client, target)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise LookupFailure(domain, f"{type(exc).__name__}: {exc}") from exc

        try:
            body = response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LookupFailure(domain, "response body is not valid UTF-8 text") from exc

        logger.debug("%s: HTTP %s, %d bytes", domain, response.status_code, len(response.content))
        return extract_address(body, domain)

    @staticmethod
    async def _fetch(client: httpx.AsyncClient, target: LookupTarget) -> httpx.Response:
        return await client.get(target.url, headers={"Host": target.service_host})
