"""Tests for event discriminator computation and caching."""

from __future__ import annotations

import base64
import threading

from solkit.monitoring.discriminator import DiscriminatorCache, compute_event_discriminator
from tests.conftest import anchor_discriminator

EVENT_NAMES = ["TestEvent", "TransferEvent", "Deposit", "Withdraw", "CreateEvent", "TradeEvent", ""]


class TestDiscriminatorCache:
    def test_matches_reference(self) -> None:
        cache = DiscriminatorCache()
        assert cache.get("TransferEvent") == anchor_discriminator("TransferEvent")
        assert len(cache.get("TransferEvent")) == 8

    def test_deterministic(self) -> None:
        cache = DiscriminatorCache()
        assert cache.get("TestEvent") == cache.get("TestEvent")
        assert DiscriminatorCache().get("TestEvent") == compute_event_discriminator("TestEvent")

    def test_distinct_names_distinct_discriminators(self) -> None:
        cache = DiscriminatorCache()
        values = {cache.get(name) for name in EVENT_NAMES}
        assert len(values) == len(EVENT_NAMES)

    def test_caches_by_name(self) -> None:
        cache = DiscriminatorCache()
        first = cache.get("Deposit")
        assert "Deposit" in cache
        assert len(cache) == 1
        assert cache.get("Deposit") is first
        assert len(cache) == 1

    def test_base64(self) -> None:
        cache = DiscriminatorCache()
        encoded = cache.get_base64("TestEvent")
        assert base64.b64decode(encoded) == cache.get("TestEvent")

    def test_concurrent_first_lookups_agree(self) -> None:
        cache = DiscriminatorCache()
        results = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(cache.get("RacedEvent"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)
        assert len(cache) == 1


class TestMatches:
    def test_matching_prefix(self) -> None:
        cache = DiscriminatorCache()
        assert cache.matches(anchor_discriminator("TestEvent") + b"\x01\x02", "TestEvent")

    def test_exactly_eight_bytes(self) -> None:
        cache = DiscriminatorCache()
        assert cache.matches(anchor_discriminator("TestEvent"), "TestEvent")

    def test_non_matching(self) -> None:
        cache = DiscriminatorCache()
        assert not cache.matches(anchor_discriminator("Other") + b"\x01", "TestEvent")

    def test_short_data_never_matches(self) -> None:
        cache = DiscriminatorCache()
        for name in EVENT_NAMES:
            for length in range(8):
                assert cache.matches(anchor_discriminator(name)[:length], name) is False
