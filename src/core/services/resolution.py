"""Resolution orchestration.

Runs the resolver over every configured domain concurrently and collects the
outcomes. Each task writes only its own slot of a pre-sized list, so there is
no shared mapping to lock; the final order is the configuration order, not
the completion order.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from core.domain.models import ResolutionResult, ResolvedRecord
from core.errors import FetchError
from core.interfaces.resolver import DomainResolver

logger = logging.getLogger(__name__)


def normalize_domains(domains: Iterable[str]) -> list[str]:
    """Strip, drop blanks and drop duplicates keeping the first occurrence."""

    seen: set[str] = set()
    out: list[str] = []
    for raw in domains:
        domain = raw.strip()
        if not domain or domain in seen:
            continue
        seen.add(domain)
        out.append(domain)
    return out


async def resolve_all(
    domains: Iterable[str],
    resolver: DomainResolver,
) -> ResolutionResult:
    """Resolve every domain; one failing domain never aborts the others."""

    ordered = normalize_domains(domains)
    slots: list[ResolvedRecord | None] = [None] * len(ordered)

    async def resolve_one(index: int, domain: str) -> None:
        try:
            address = await resolver.resolve(domain)
        except FetchError as exc:
            logger.warning("get domain %s, err %s", domain, exc.message)
            slots[index] = ResolvedRecord(domain=domain, error=exc.message)
            return
        slots[index] = ResolvedRecord(domain=domain, address=address)

    await asyncio.gather(*(resolve_one(i, d) for i, d in enumerate(ordered)))

    records = tuple(r for r in slots if r is not None)
    logger.info(
        "resolved %d/%d domains (%d failed)",
        sum(1 for r in records if r.resolved),
        len(records),
        sum(1 for r in records if r.failed),
    )
    return ResolutionResult(records=records)
