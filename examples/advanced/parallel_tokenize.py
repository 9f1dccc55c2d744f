"""Tokenize 1000 units in parallel on one shared pattern table."""

from concurrent.futures import ThreadPoolExecutor

from fsmlex import tokenize

units = [f"int value_{i} = {i};\nreturn value_{i} * 2;" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize, units))

print(f"Tokenized {len(results)} units in parallel")
print("First unit tokens:", len(results[0]))
print("Last unit tokens:", len(results[-1]))
