"""Tests for the concurrent resolution orchestrator."""

import asyncio

from core.domain.models import ResolutionResult
from core.errors import LookupFailure
from core.services.resolution import normalize_domains, resolve_all


class FakeResolver:
    """Resolver returning canned answers, failing for selected domains."""

    def __init__(self, answers: dict[str, str], failing: set[str] = frozenset(), delays: dict[str, float] | None = None) -> None:
        self.answers = answers
        self.failing = failing
        self.delays = delays or {}
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def resolve(self, domain: str) -> str:
        self.calls.append(domain)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(domain, 0.01))
            if domain in self.failing:
                raise LookupFailure(domain, "ConnectError: boom")
            return self.answers.get(domain, "")
        finally:
            self.in_flight -= 1


def _run(domains, resolver) -> ResolutionResult:
    return asyncio.run(resolve_all(domains, resolver))


class TestResolveAll:
    """Verify fan-out, isolation and ordering."""

    def test_all_resolved(self) -> None:
        """Every domain should end up in the map."""
        resolver = FakeResolver({"github.com": "1.1.1.1", "codeload.github.com": "2.2.2.2"})
        result = _run(["github.com", "codeload.github.com"], resolver)
        assert result.as_map() == {"github.com": "1.1.1.1", "codeload.github.com": "2.2.2.2"}
        assert result.failed == []

    def test_partial_failure(self) -> None:
        """One failing domain must not stop the other two."""
        resolver = FakeResolver(
            {"a.com": "1.1.1.1", "c.com": "3.3.3.3"},
            failing={"b.com"},
        )
        result = _run(["a.com", "b.com", "c.com"], resolver)
        assert result.as_map() == {"a.com": "1.1.1.1", "c.com": "3.3.3.3"}
        assert [r.domain for r in result.failed] == ["b.com"]
        assert result.failed[0].address == ""
        assert "boom" in result.failed[0].error

    def test_runs_concurrently(self) -> None:
        """All lookups should be in flight at the same time."""
        resolver = FakeResolver({d: "1.1.1.1" for d in ("a.com", "b.com", "c.com", "d.com")})
        _run(["a.com", "b.com", "c.com", "d.com"], resolver)
        assert resolver.max_in_flight == 4

    def test_configuration_order_kept(self) -> None:
        """Records follow the input order, not the completion order."""
        resolver = FakeResolver(
            {"slow.com": "1.1.1.1", "fast.com": "2.2.2.2"},
            delays={"slow.com": 0.05, "fast.com": 0.0},
        )
        result = _run(["slow.com", "fast.com"], resolver)
        assert [r.domain for r in result.records] == ["slow.com", "fast.com"]
        assert list(result.as_map()) == ["slow.com", "fast.com"]

    def test_miss_keeps_empty_address(self) -> None:
        """A domain with no address found stays in the map with ''."""
        resolver = FakeResolver({"a.com": "1.1.1.1"})
        result = _run(["a.com", "b.com"], resolver)
        assert result.as_map() == {"a.com": "1.1.1.1", "b.com": ""}
        assert [r.domain for r in result.resolved] == ["a.com"]

    def test_duplicates_resolved_once(self) -> None:
        """Repeated domains should be looked up once."""
        resolver = FakeResolver({"a.com": "1.1.1.1"})
        _run(["a.com", " a.com ", ""], resolver)
        assert resolver.calls == ["a.com"]

    def test_empty_input(self) -> None:
        """No domains should give an empty result."""
        assert _run([], FakeResolver({})).records == ()


class TestNormalizeDomains:
    """Verify the input clean-up."""

    def test_strip_and_dedupe(self) -> None:
        """Blanks are dropped, duplicates keep the first position."""
        assert normalize_domains([" b.com", "a.com", "", "b.com"]) == ["b.com", "a.com"]
