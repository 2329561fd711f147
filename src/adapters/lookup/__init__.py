"""Lookup de direcciones vía ipaddress.com.

- `url_builder`: dominio -> página de lookup.
- `extractor`: HTML -> primera IPv4.
- `ipaddress_com`: resolvedor concreto (HTTP + extracción).
"""

from adapters.lookup.extractor import extract_address, extract_first_ipv4
from adapters.lookup.ipaddress_com import IPAddressComResolver
from adapters.lookup.url_builder import build_lookup_target

__all__ = [
    "IPAddressComResolver",
    "build_lookup_target",
    "extract_address",
    "extract_first_ipv4",
]
