"""Benchmark tokenizer throughput.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

import pytest

from fsmlex import LexerConfig, Tokenizer, pattern_table_for, tokenize


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_clean_source(benchmark, large_source):
    """Tokenize error-free source."""
    tokens = benchmark(tokenize, large_source)
    assert tokens[-1].is_end


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_noisy_source(benchmark, noisy_source):
    """Tokenize source that exercises deletion and insertion recovery."""

    def run():
        tokenizer = Tokenizer(noisy_source)
        list(tokenizer.tokenize())
        return tokenizer.diagnostics

    diagnostics = benchmark(run)
    assert len(diagnostics) == 2 * 250


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_strings(benchmark, string_heavy_source):
    """Tokenize string literals with escapes."""
    tokens = benchmark(tokenize, string_heavy_source)
    assert tokens[2].kind.name == "STRING"


@pytest.mark.benchmark(group="setup")
def test_benchmark_build_table(benchmark):
    """Uncached pattern table construction."""

    def build():
        pattern_table_for.cache_clear()
        return pattern_table_for(LexerConfig())

    table = benchmark(build)
    assert len(table) > 0
