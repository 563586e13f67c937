#!/usr/bin/env python3
"""
Performance Test Script for the ordered map

Tests (run once per balance policy):
1. Sequential insert throughput
2. Random insert throughput
3. Random search throughput
4. Range scan performance
5. Random delete throughput

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Rotations / recolors performed
- Final tree height
"""

import logging
import os
import random
import statistics
import sys
import time
from typing import List

from ordmap.models.sortedcontainers import OrderedTree

logger = logging.getLogger(__name__)


class PerformanceTest:
    def __init__(self, policy: str):
        self.policy = policy
        self.tree: OrderedTree | None = None

    def setup(self):
        """Create a fresh tree."""
        self.tree = OrderedTree(self.policy)
        logger.debug(f"Benchmark tree ready: {self.tree!r}")

    @staticmethod
    def generate_key(i: int, prefix: str = "key") -> str:
        """Generate a key with zero-padding for sorting."""
        return f"{prefix}_{i:010d}"

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_us": min(latencies) / 1_000,
            "max_us": max(latencies) / 1_000,
            "mean_us": statistics.mean(latencies) / 1_000,
            "median_us": statistics.median(latencies) / 1_000,
            "p95_us": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000,
            "p99_us": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000,
        }

    def _timed(self, name: str, keys: List[str], operation) -> dict:
        print(f"\n{'='*60}")
        print(f"{name} [{self.policy}]: {len(keys)} operations")
        print(f"{'='*60}")

        stats_before = self.tree.stats.snapshot()
        latencies = []
        start_time = time.perf_counter_ns()

        for key in keys:
            op_start = time.perf_counter_ns()
            operation(key)
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000
        stats_after = self.tree.stats

        results = {
            "test": name,
            "policy": self.policy,
            "count": len(keys),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(keys) / elapsed if elapsed else float("inf"),
            "rotations": stats_after.rotations - stats_before.rotations,
            "recolors": stats_after.recolors - stats_before.recolors,
            "height": self.tree.height(),
            **self.calculate_stats(latencies),
        }

        self.print_results(results)
        return results

    def test_sequential_insert(self, count: int) -> dict:
        """Test sequential insert performance (worst case for an unbalanced BST)."""
        keys = [self.generate_key(i) for i in range(count)]
        return self._timed("Sequential Insert", keys, lambda k: self.tree.insert(k, k))

    def test_random_insert(self, count: int) -> dict:
        """Test random insert performance."""
        keys = [self.generate_key(i, "rnd") for i in range(count)]
        random.shuffle(keys)
        return self._timed("Random Insert", keys, lambda k: self.tree.insert(k, k))

    def test_random_search(self, count: int, key_range: int) -> dict:
        """Test random search performance (includes misses)."""
        keys = [self.generate_key(random.randint(0, key_range * 2)) for _ in range(count)]
        return self._timed("Random Search", keys, self.tree.search)

    def test_range_scan(self, num_queries: int, range_size: int, total_keys: int) -> dict:
        """Test bounded range iteration."""
        starts = [random.randint(0, max(total_keys - range_size, 0)) for _ in range(num_queries)]
        keys = [self.generate_key(i) for i in starts]

        def scan(start_key: str) -> None:
            end_key = self.generate_key(int(start_key.split("_")[1]) + range_size)
            for _ in self.tree.iterator(start_key, end_key):
                pass

        return self._timed("Range Scan", keys, scan)

    def test_random_delete(self, count: int, key_range: int) -> dict:
        """Test random delete performance."""
        keys = [self.generate_key(i) for i in random.sample(range(key_range), count)]
        return self._timed("Random Delete", keys, self.tree.delete)

    def verify(self):
        """Validate invariants after the run."""
        self.tree.validate()
        print(f"\n  Invariants OK: {self.tree.size()} entries, height {self.tree.height()}")

    @staticmethod
    def print_results(results: dict):
        """Pretty-print a results dict."""
        print(f"\n  Results:")
        print(f"    Elapsed: {results['elapsed_sec']:.3f} s")
        print(f"    Throughput: {results['ops_per_sec']:.2f} ops/sec")
        print(f"    Rotations: {results['rotations']}  Recolors: {results['recolors']}")
        print(f"    Tree height: {results['height']}")
        if "median_us" in results:
            print(f"    Latency p50: {results['median_us']:.2f} us")
            print(f"    Latency p95: {results['p95_us']:.2f} us")
            print(f"    Latency p99: {results['p99_us']:.2f} us")


def run_suite(policy: str, count: int) -> list[dict]:
    test = PerformanceTest(policy)
    test.setup()

    all_results = [
        test.test_sequential_insert(count=count),
        test.test_random_insert(count=count),
        test.test_random_search(count=count, key_range=count),
        test.test_range_scan(num_queries=count // 100, range_size=100, total_keys=count),
        test.test_random_delete(count=count // 2, key_range=count),
    ]
    test.verify()
    return all_results


def run_comprehensive_tests(count: int = 100_000):
    """Run the full suite for both policies and print a comparison."""
    all_results = []

    print(f"\n{'#'*60}")
    print(f"# Ordered Map Performance Test Suite")
    print(f"# Operations per test: {count}")
    print(f"{'#'*60}")

    for policy in ("avl", "red_black"):
        all_results.extend(run_suite(policy, count))

    print(f"\n{'#'*60}")
    print(f"# SUMMARY")
    print(f"{'#'*60}")

    for i, result in enumerate(all_results, 1):
        print(f"\n{i}. {result['test']} [{result['policy']}]")
        print(f"   Throughput: {result['ops_per_sec']:.2f} ops/sec")
        print(f"   Rotations: {result['rotations']}, height: {result['height']}")
        if "median_us" in result:
            print(f"   Latency p50: {result['median_us']:.2f} us")

    print(f"\n{'#'*60}")
    print(f"# Test Complete!")
    print(f"{'#'*60}\n")


def run_quick_tests():
    """Run quick performance tests for faster feedback."""
    run_comprehensive_tests(count=10_000)


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_quick_tests()
    else:
        run_comprehensive_tests()
