"""Dominio -> página de lookup en ipaddress.com."""

from __future__ import annotations

from core.domain.models import LookupTarget

LOOKUP_SUFFIX = "ipaddress.com"


def build_lookup_target(domain: str, suffix: str = LOOKUP_SUFFIX) -> LookupTarget:
    """Construye host y path de la página de lookup.

    - `github.com` -> `github.com.ipaddress.com`, path `/`
    - `github.global.ssl.fastly.net` -> `fastly.net.ipaddress.com`,
      path `/github.global.ssl.fastly.net`
    """

    if not domain:
        raise ValueError("domain must not be empty")

    labels = domain.split(".")
    if len(labels) > 2:
        return LookupTarget(
            service_host=f"{'.'.join(labels[-2:])}.{suffix}",
            request_path=f"/{domain}",
        )
    return LookupTarget(service_host=f"{domain}.{suffix}", request_path="/")
