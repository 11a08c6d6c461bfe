#!/usr/bin/env python3
"""
Lexer Throughput Benchmark
==========================

Measures how fast the letlang lexer turns generated programs into tokens.

Features:
- Programs of increasing size built from typical definitions
- Pull-based scanning (next_token loop) vs. tokenize()
- Memory usage tracking
- Statistical analysis of repeated runs
"""

import time
import psutil
import platform
import statistics
from typing import Callable, List
from dataclasses import dataclass
from contextlib import contextmanager
import gc
import sys
import os

# Add the project root to the path so the benchmark runs from a checkout
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from letlang.lexer import Lexer, TokenType


SNIPPET = """
let five = 5: I32;
let ten = 10: I32;

let add(x,y) = {
    x + y
}: (I32, I32) -> I32;

let sub(x,y) = { x - y }: (I32, I32) -> I32;

let result = add(five, ten): I32;
"""


@dataclass
class BenchmarkResult:
    """Results from a single benchmark configuration."""
    method_name: str
    source_chars: int
    token_count: int
    median_time_ms: float
    tokens_per_second: float
    memory_delta_mb: float


def generate_program(copies: int) -> str:
    return SNIPPET * copies


def scan_pull(source: str) -> int:
    lexer = Lexer(source)
    count = 0
    while lexer.next_token().type != TokenType.EOF:
        count += 1
    return count + 1


def scan_tokenize(source: str) -> int:
    return len(Lexer(source).tokenize())


class LexerBenchmark:
    """Runs the scanning methods over programs of several sizes."""

    def __init__(self, repeats: int = 5):
        self.repeats = repeats
        self.process = psutil.Process()

    @contextmanager
    def _memory_tracker(self):
        """Track resident memory around a block; yields a one-item list."""
        gc.collect()
        before = self.process.memory_info().rss
        delta = [0.0]
        try:
            yield delta
        finally:
            after = self.process.memory_info().rss
            delta[0] = (after - before) / (1024 * 1024)

    def benchmark_method(self, name: str, method: Callable[[str], int], source: str) -> BenchmarkResult:
        timings = []
        token_count = 0
        with self._memory_tracker() as memory:
            for _ in range(self.repeats):
                start = time.perf_counter()
                token_count = method(source)
                timings.append(time.perf_counter() - start)

        median = statistics.median(timings)
        return BenchmarkResult(
            method_name=name,
            source_chars=len(source),
            token_count=token_count,
            median_time_ms=median * 1000,
            tokens_per_second=token_count / median if median > 0 else float("inf"),
            memory_delta_mb=memory[0],
        )

    def run(self, sizes: List[int]) -> List[BenchmarkResult]:
        results = []
        for copies in sizes:
            source = generate_program(copies)
            results.append(self.benchmark_method("next_token loop", scan_pull, source))
            results.append(self.benchmark_method("tokenize()", scan_tokenize, source))
        return results

    def print_system_info(self):
        print(f"Python {platform.python_version()} on {platform.platform()}")
        print(f"CPU: {platform.processor() or 'unknown'}, "
              f"{psutil.cpu_count(logical=True)} logical cores")
        print()

    def print_results_summary(self, results: List[BenchmarkResult]):
        print(f"{'method':<18}{'chars':>10}{'tokens':>10}{'median ms':>12}{'tok/s':>14}{'mem MB':>9}")
        print("-" * 73)
        for r in results:
            print(f"{r.method_name:<18}{r.source_chars:>10}{r.token_count:>10}"
                  f"{r.median_time_ms:>12.2f}{r.tokens_per_second:>14,.0f}{r.memory_delta_mb:>9.2f}")


def main():
    benchmark = LexerBenchmark()
    benchmark.print_system_info()
    results = benchmark.run([10, 100, 1000])
    benchmark.print_results_summary(results)


if __name__ == "__main__":
    main()
