"""Contrato de resolución de dominios.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El orquestador solo conoce `resolve`; el servicio concreto de lookup (y su
  parser HTML) se puede sustituir, o falsear en tests, sin tocarlo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DomainResolver(Protocol):
    """Contrato mínimo para un resolvedor.

    Reglas de diseño:
    - `resolve` es asíncrono porque hace I/O de red.
    - Devuelve la dirección IPv4 o "" si la página no tenía ninguna.
    - Lanza `core.errors.FetchError` cuando el lookup falla.
    """

    async def resolve(self, domain: str) -> str:
        ...
