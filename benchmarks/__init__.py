"""
Benchmark suite for flexjson parsing performance.

Compares the tolerant parser and the streaming decoder against strict
JSON libraries on complete documents:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

and measures the cost of re-parsing truncated snapshots versus streaming.
"""
