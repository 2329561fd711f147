"""Extracción de la IPv4 desde el HTML de ipaddress.com.

The lookup page lists the current addresses of a domain as
`<ul class="comma-separated"><li>1.2.3.4</li>...</ul>`.
"""

from __future__ import annotations

import ipaddress
import logging

from bs4 import BeautifulSoup

ADDRESS_LIST_SELECTOR = "ul.comma-separated"

logger = logging.getLogger(__name__)


def extract_first_ipv4(html: str, selector: str = ADDRESS_LIST_SELECTOR) -> str | None:
    """Primera IPv4 dentro del contenedor `selector`.

    Returns:
        None when the container is missing, "" when it holds no IPv4 entry,
        otherwise the dotted-quad address of the first IPv4 `li` child.
    """

    soup = BeautifulSoup(html, "html.parser")
    container = soup.select_one(selector)
    if container is None:
        return None

    for item in container.find_all("li", recursive=False):
        try:
            address = ipaddress.ip_address(item.get_text().strip())
        except ValueError:
            continue
        if isinstance(address, ipaddress.IPv4Address):
            return str(address)
    return ""


def extract_address(html: str, domain: str) -> str:
    """Like `extract_first_ipv4` but logs a missing container and returns ""."""

    address = extract_first_ipv4(html)
    if address is None:
        logger.warning("%s: address list not found in lookup page, data=%s", domain, html)
        return ""
    if not address:
        logger.warning("%s: lookup page lists no IPv4 address", domain)
    return address
