"""
Concurrency tests for singleton construction strategies.

This module checks, under real threads:
1. Correct strategies construct exactly once and hand out one identity
2. The unsynchronized strategy can construct more than once
3. Eager providers are built before any caller runs
4. Timing of the synchronized and double-checked paths with a slow factory
"""

import threading
import time

import pytest

from pattern_catalog.core.singleton import (
    SingletonProvider,
    Strategy,
    instance_factory,
    run_concurrent_callers,
)

CORRECT_STRATEGIES = [Strategy.SYNCHRONIZED, Strategy.DOUBLE_CHECKED, Strategy.EAGER]


def _provider(strategy: Strategy, delay: float = 0.0) -> SingletonProvider:
    provider = SingletonProvider.create(strategy, instance_factory(strategy), delay)
    provider.initialize()
    return provider


def _race(provider: SingletonProvider, callers: int):
    """Release ``callers`` threads at once and collect what they got."""
    barrier = threading.Barrier(callers)
    results = []
    errors = []

    def call():
        barrier.wait()
        try:
            results.append(provider.get_instance())
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=call) for _ in range(callers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    return results, errors


class TestCorrectStrategies:
    """Strategies that must construct exactly once."""

    @pytest.mark.parametrize("strategy", CORRECT_STRATEGIES)
    @pytest.mark.parametrize("callers", [2, 3, 20])
    def test_single_construction_under_concurrency(self, strategy, callers):
        """creation_count stays at 1 no matter how many callers race."""
        provider = _provider(strategy, delay=0.01)

        results, errors = _race(provider, callers)

        assert errors == []
        assert len(results) == callers
        assert provider.creation_count == 1

    @pytest.mark.parametrize("strategy", CORRECT_STRATEGIES)
    def test_all_callers_receive_same_instance(self, strategy):
        provider = _provider(strategy, delay=0.01)

        results, _ = _race(provider, 10)

        first = results[0]
        assert all(result is first for result in results)

    @pytest.mark.parametrize("strategy", CORRECT_STRATEGIES)
    def test_repeated_runs_are_deterministic(self, strategy):
        for _ in range(5):
            provider = _provider(strategy, delay=0.005)
            _race(provider, 8)
            assert provider.creation_count == 1

    def test_eager_constructed_without_any_access(self):
        """Eager providers count one construction even if never called."""
        provider = _provider(Strategy.EAGER, delay=0.0)

        assert provider.creation_count == 1
        assert provider.is_ready

    def test_eager_access_does_not_construct_again(self):
        provider = _provider(Strategy.EAGER)

        first = provider.get_instance()
        second = provider.get_instance()

        assert first is second
        assert provider.creation_count == 1


class TestUnsynchronizedStrategy:
    """The unsynchronized strategy is a negative example."""

    def test_race_can_construct_more_than_once(self):
        """Under an artificial delay at least one run constructs more than once.

        The race is inherently timing dependent, so this asserts the
        capability across a few attempts rather than on every run.
        """
        observed = []
        for _ in range(5):
            provider = _provider(Strategy.UNSYNCHRONIZED, delay=0.05)
            _race(provider, 5)
            observed.append(provider.creation_count)
            if provider.creation_count > 1:
                break

        assert max(observed) > 1, f"Expected a lost race, got counts {observed}"

    def test_race_does_not_crash_and_last_write_wins(self):
        provider = _provider(Strategy.UNSYNCHRONIZED, delay=0.05)

        results, errors = _race(provider, 5)

        assert errors == []
        assert len(results) == 5
        # Whatever happened, the slot ends up holding one of the built instances
        assert provider.get_instance() in results

    def test_sequential_access_constructs_once(self):
        """Without concurrency the naive check is enough."""
        provider = _provider(Strategy.UNSYNCHRONIZED, delay=0.0)

        first = provider.get_instance()
        second = provider.get_instance()

        assert first is second
        assert provider.creation_count == 1


class TestTiming:
    """Wall-clock behaviour with a 100ms construction delay and 3 callers."""

    DELAY = 0.1

    def test_synchronized_waits_for_construction(self):
        provider = _provider(Strategy.SYNCHRONIZED, delay=self.DELAY)

        report = run_concurrent_callers(provider, callers=3, emit=lambda _: None)

        assert len(report.observations) == 3
        assert report.errors == []
        assert report.elapsed >= self.DELAY
        assert report.creation_count == 1

    def test_double_checked_only_first_caller_pays(self):
        provider = _provider(Strategy.DOUBLE_CHECKED, delay=self.DELAY)

        report = run_concurrent_callers(provider, callers=3, emit=lambda _: None)

        assert report.creation_count == 1
        assert report.elapsed >= self.DELAY
        # One construction, not three back to back
        assert report.elapsed < self.DELAY * 3

    def test_double_checked_fast_path_after_ready(self):
        provider = _provider(Strategy.DOUBLE_CHECKED, delay=self.DELAY)
        provider.get_instance()

        started = time.perf_counter()
        for _ in range(100):
            provider.get_instance()
        elapsed = time.perf_counter() - started

        assert elapsed < self.DELAY
