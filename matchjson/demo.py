"""A short tour of JSON pattern matching, printed to standard output."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, List, Optional, Sequence

from .exclude import Exclude
from .patterns import (
    AnyOf,
    Array,
    Bind,
    JsonType,
    Object,
    Typed,
    Wildcard,
    match_json,
    matches,
)


def _show(value: Any) -> str:
    """Render a matched value: strings as they are, JSON values as compact JSON."""
    if isinstance(value, Exclude):
        return str(value)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def _string_binding() -> Optional[str]:
    return match_json(
        "123",
        (Typed(JsonType.STR, "x"), lambda x: x),
        (Wildcard(), None),
    )


def _object_destructuring() -> str:
    value = {"a": 1, "b": "2", "c": [1, 2, 3, 4, 5, 6, 7, 8, 9], "d": 4}
    pattern = Object(
        {
            "a": Bind("a"),
            "b": Typed(JsonType.STR, "b"),
            "c": Bind("e", Array((1, 2), "c", (8, 9))),
        },
        rest="d",
    )
    return match_json(
        value,
        (pattern, lambda a, b, c, d, e: f"{_show(a)} {b} {c!r} {d} {_show(e)}"),
        (Bind("x"), lambda x: _show(x)),
    )


def _alternatives_with_outer_binding() -> str:
    pattern = AnyOf(
        Object({"value": Bind("y", Typed(JsonType.I64))}),
        Array((Bind("y", Typed(JsonType.STR)),)),
    )
    return match_json(
        ["1"],
        (pattern, lambda y: _show(y)),
        (Wildcard(), "err"),
    )


def _alternatives_with_typed_binding() -> str:
    pattern = AnyOf(
        Object({"value": Typed(JsonType.I64, "x")}),
        Array((Typed(JsonType.I64, "x"),)),
    )
    return match_json(
        [1],
        (pattern, lambda x: str(x)),
        (Wildcard(), "err"),
    )


def _match_as_expression() -> str:
    pattern = AnyOf(
        Object({"value": Bind("y", Typed(JsonType.I64, "x"))}),
        Array((Bind("y", Typed(JsonType.I64, "x")),)),
    )
    result = match_json(
        [1],
        (pattern, lambda x, y: y),
        (Wildcard(), None),
    )
    return _show(result)


_EXAMPLES: List[Callable[[], Optional[str]]] = [
    _string_binding,
    _object_destructuring,
    _alternatives_with_outer_binding,
    _alternatives_with_typed_binding,
    _match_as_expression,
]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the examples and print one line for each match that prints."""
    parser = argparse.ArgumentParser(
        prog="matchjson-demo",
        description="Show structural pattern matching over JSON values.",
    )
    parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    for example in _EXAMPLES:
        line = example()
        if line is not None:
            print(line)

    if not matches({"a": "b"}, Object({"a": "b"})):
        raise RuntimeError("a literal object pattern failed to match its own value")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())