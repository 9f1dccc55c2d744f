"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_source() -> str:
    """Generate a large C-like source file (~100KB)."""
    functions = []
    for i in range(250):
        functions.append(f"""
/* Function {i}
 * computes a running total
 */
int total_{i}(int limit) {{
    int sum = 0;
    float ratio = {i}.5;
    for (int k = 0; k <= limit; k++) {{
        if (k % 2 == 0 && sum != {i}) {{
            sum += k; // even
        }} else {{
            sum -= 1;
        }}
    }}
    return sum;
}}
""")
    return "\n".join(functions)


@pytest.fixture
def noisy_source(large_source: str) -> str:
    """Large source with recoverable lexical errors sprinkled in."""
    return large_source.replace("sum -= 1;", "sum @-= 1 & 1;")


@pytest.fixture
def string_heavy_source() -> str:
    """Many string literals with escapes."""
    line = 'msg = "value \\"{i}\\" at index\\t{i}\\n";\n'
    return "".join(line.format(i=i) for i in range(2000))
