"""
Pytest configuration and shared fixtures for flexjson tests.

Provides immutable test data shared by the batch parser and streaming
decoder suites.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@pytest.fixture
def complete_objects() -> list[JsonTestCase]:
    """
    Provides complete, well-formed JSON objects.

    Both front-ends must produce the same mapping for every one of them.
    """
    return [
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("single integer", '{"key": 123}', False, {"key": 123}),
        JsonTestCase(
            "mixed scalars",
            '{"string":"hello","number":42,"float":3.14,'
            '"bool":true,"off":false,"null":null}',
            False,
            {
                "string": "hello",
                "number": 42,
                "float": 3.14,
                "bool": True,
                "off": False,
                "null": None,
            },
        ),
        JsonTestCase(
            "nested object",
            '{"person":{"name":"John","age":30},"active":true}',
            False,
            {"person": {"name": "John", "age": 30}, "active": True},
        ),
        JsonTestCase(
            "arrays",
            '{"numbers":[1,2,3],"names":["John","Jane"],"empty":[]}',
            False,
            {"numbers": [1, 2, 3], "names": ["John", "Jane"], "empty": []},
        ),
        JsonTestCase(
            "objects inside arrays",
            '{"items": [{"id": 1, "tags": ["a", "b"]}, {"id": 2}, {}],'
            ' "count": 3}',
            False,
            {
                "items": [{"id": 1, "tags": ["a", "b"]}, {"id": 2}, {}],
                "count": 3,
            },
        ),
        JsonTestCase(
            "nested arrays",
            '{"matrix": [[1, 2], [3, [4, 5]], []], "after": -1.5e2}',
            False,
            {"matrix": [[1, 2], [3, [4, 5]], []], "after": -150.0},
        ),
        JsonTestCase(
            "whitespace everywhere",
            '{\n  "a" : 1 ,\r\n\t"b" : [ true , null ] ,\n  "c" : { } \n}',
            False,
            {"a": 1, "b": [True, None], "c": {}},
        ),
        JsonTestCase(
            "unicode text",
            '{"unicode": "😀🌍🚀", "accent": "café"}',
            False,
            {"unicode": "😀🌍🚀", "accent": "café"},
        ),
        JsonTestCase(
            "raw escapes",
            r'{"escaped": "hello\\world\"quoted\"\n", "k\"ey": 1}',
            False,
            {"escaped": r"hello\\world\"quoted\"\n", r"k\"ey": 1},
        ),
        JsonTestCase(
            "structural characters inside strings",
            '{"text": "a, b} [c] {d}: e"}',
            False,
            {"text": "a, b} [c] {d}: e"},
        ),
    ]


@pytest.fixture
def truncated_objects() -> list[JsonTestCase]:
    """
    Provides truncated snapshots and the best-effort batch parse of each.
    """
    return [
        JsonTestCase("open brace only", "{", False, {}),
        JsonTestCase(
            "missing closing brace", '{"key": 123', False, {"key": 123}
        ),
        JsonTestCase(
            "dangling colon",
            '{"key": 1234, "key2":',
            False,
            {"key": 1234, "key2": None},
        ),
        JsonTestCase(
            "trailing comma",
            '{"key1": "value", "key2": false,',
            False,
            {"key1": "value", "key2": False},
        ),
        JsonTestCase(
            "truncated key",
            '{"key1": true, "key2',
            False,
            {"key1": True, "key2": None},
        ),
        JsonTestCase(
            "key without colon",
            '{"key1": true, "key2"',
            False,
            {"key1": True, "key2": None},
        ),
        JsonTestCase(
            "truncated string value",
            '{"key1": 1, "key2": "hal',
            False,
            {"key1": 1, "key2": None},
        ),
        JsonTestCase(
            "truncated literal",
            '{"key1": 1, "key2": tr',
            False,
            {"key1": 1, "key2": None},
        ),
        JsonTestCase(
            "truncated exponent",
            '{"key1": 1, "key2": 1e',
            False,
            {"key1": 1, "key2": None},
        ),
        JsonTestCase(
            "partial nested object",
            '{"key1": {"nested": 42',
            False,
            {"key1": {"nested": 42}},
        ),
        JsonTestCase(
            "partial array",
            '{"key1": [1, 2,',
            False,
            {"key1": [1, 2]},
        ),
        JsonTestCase(
            "partial array in nested object",
            '{"a": {"b": [1, [2, 3',
            False,
            {"a": {"b": [1, [2, 3]]}},
        ),
        JsonTestCase(
            "nested incomplete objects",
            '{"obj1": {"key1": 1, "obj2": {"key2":',
            False,
            {"obj1": {"key1": 1, "obj2": {"key2": None}}},
        ),
        JsonTestCase(
            "mixed types",
            '{"str": "hello", "num": 42, "bool": true, "null": null, '
            '"arr": [1,',
            False,
            {
                "str": "hello",
                "num": 42,
                "bool": True,
                "null": None,
                "arr": [1],
            },
        ),
        JsonTestCase(
            "unicode characters",
            '{"unicode": "😀🌍🚀", "key2":',
            False,
            {"unicode": "😀🌍🚀", "key2": None},
        ),
        JsonTestCase(
            "deeply nested structure",
            '{"l1": {"l2": {"l3": {"l4": {"l5":',
            False,
            {"l1": {"l2": {"l3": {"l4": {"l5": None}}}}},
        ),
    ]


@pytest.fixture
def malformed_inputs() -> list[JsonTestCase]:
    """
    Provides inputs the batch parser must reject even though more input
    remains after the fault.
    """
    return [
        JsonTestCase("structural token as value", '{"a": }', True),
        JsonTestCase("colon as value", '{"a": :1}', True),
        JsonTestCase("unquoted key", '{a: 1, "b": 2}', True),
        JsonTestCase("numeric key", '{1: 2}', True),
        JsonTestCase("missing colon", '{"a" 1}', True),
        JsonTestCase("comma instead of colon", '{"a", 1}', True),
        JsonTestCase("missing delimiter", '{"a": 1 "b": 2}', True),
        JsonTestCase("missing array delimiter", "[1 2]", True),
        JsonTestCase("trailing comma before brace", '{"a": 1,}', True),
        JsonTestCase("closing bracket at top level", "]", True),
    ]
