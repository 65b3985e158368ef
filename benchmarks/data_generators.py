"""
Test data generators for flexjson benchmarks.

Creates JSON objects of different shapes, plus the truncated snapshots and
token-sized chunks a streamed model response is delivered as:
- small/large flat-ish objects
- deep nesting
- string-heavy content with escape sequences
"""

import json
import random
import string
from typing import Any

_SEED = 1337
_ESCAPE_PROBABILITY = 0.3


def generate_test_data(data_type: str) -> str:
    """Generates a complete JSON object of the specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    rng = random.Random(_SEED)
    return generators[data_type](rng)


def truncate(text: str, fraction: float) -> str:
    """Cuts a document off after the given fraction of its characters."""
    if not 0.0 <= fraction <= 1.0:
        raise ValueError("fraction must be between 0 and 1")
    return text[: int(len(text) * fraction)]


def token_chunks(text: str, min_size: int = 1, max_size: int = 6) -> list[str]:
    """Splits text into chunks sized like generator tokens."""
    rng = random.Random(_SEED)
    chunks = []
    pos = 0
    while pos < len(text):
        size = rng.randint(min_size, max_size)
        chunks.append(text[pos : pos + size])
        pos += size
    return chunks


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small tool-call style object (< 1KB)."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object(rng: random.Random) -> str:
    """Generates a large object (> 10KB) with records and arrays."""
    data = {
        "user_id": rng.randint(1000000, 9999999),
        "preferences": {
            "language": rng.choice(["en", "es", "fr", "de", "zh"]),
            "notifications": {
                "email": rng.choice([True, False]),
                "push": rng.choice([True, False]),
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(rng, 20)}",
                "status": rng.choice(["completed", "pending", None]),
            }
            for i in range(80)
        ],
        "scores": [rng.randint(-1000, 1000) for _ in range(200)],
    }
    return json.dumps(data)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a deeply nested object."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "data": _random_string(rng, 15),
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(6))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates an object with many string escape sequences."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(['"', "\\", "/", "\n", "\t"]))
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    data = {
        "strings": [create_escaped_string() for _ in range(100)],
        "mixed_content": {
            f"key_{i}": {
                "description": create_escaped_string(),
                "path": f"C:\\Users\\{_random_string(rng, 8)}\\file_{i}.txt",
            }
            for i in range(20)
        },
    }
    return json.dumps(data)


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
