"""Concurrent access tests for Translator.

Lookups on one chain are serialized by the chain lock; clones share that
lock. These tests hammer a shared chain from many threads and check that
every result is the one a single-threaded lookup produces.

Note: use_isolating=False is used throughout so assertions compare plain text.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from ftlchain import MappingCatalog, Translator

_CALLS = [
    ("valid-key", None, "キー"),
    ("only-in-english", None, "not translated"),
    ("two-args-key", {"one": 1, "two": 2.5}, "1と2.5"),
    ("plural", {"hats": 3}, "You have 3 hats."),
    ("missing-key", None, "missing-key"),
]


class TestConcurrentLookupBasic:
    """Essential thread safety tests that run in every CI build."""

    def test_shared_translator(self, catalog: MappingCatalog) -> None:
        translator = Translator(["ja"], catalog, use_isolating=False)

        def run(index: int) -> bool:
            key, args, expected = _CALLS[index % len(_CALLS)]
            return translator.lookup(key, args) == expected

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(run, range(400)))

        assert all(results)

    def test_clones_across_threads(self, catalog: MappingCatalog) -> None:
        translator = Translator(["ja"], catalog, use_isolating=False)
        mismatches: list[str] = []
        lock = threading.Lock()

        def worker(handle: Translator) -> None:
            for key, args, expected in _CALLS * 20:
                result = handle.lookup(key, args)
                if result != expected:
                    with lock:
                        mismatches.append(result)

        threads = [
            threading.Thread(target=worker, args=(translator.clone(),)) for _ in range(10)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert mismatches == []


class TestConcurrentLookupIntensive:
    """Property-based concurrency tests (fuzz-marked)."""

    @pytest.mark.fuzz
    @given(st.lists(st.sampled_from(range(len(_CALLS))), min_size=1, max_size=50))
    @settings(max_examples=20, deadline=None)
    def test_random_call_mix(self, catalog: MappingCatalog, indices: list[int]) -> None:
        translator = Translator(["ja"], catalog, use_isolating=False)

        def run(index: int) -> bool:
            key, args, expected = _CALLS[index]
            return translator.lookup(key, args) == expected

        with ThreadPoolExecutor(max_workers=4) as executor:
            assert all(executor.map(run, indices))
