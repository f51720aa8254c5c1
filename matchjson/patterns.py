"""Structural patterns over JSON values, with variable bindings."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .exclude import Exclude

Bindings = Dict[str, Any]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    """An integer that a JSON number holds exactly (within 64 bits)."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and _I64_MIN <= value <= _U64_MAX
    )


def _as_float(value: Any) -> Optional[float]:
    try:
        return float(value)
    except OverflowError:
        return None


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise TypeError(f"binding name must be a string, not {type(name).__name__}")
    if not name.isidentifier() or name == "_":
        raise ValueError(f"invalid binding name: {name!r}")
    return name


def _merge_names(*groups: Tuple[str, ...]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(name for group in groups for name in group))


def _coerce(obj: Any) -> "Pattern":
    """Turn a plain value into the pattern that matches it."""
    if isinstance(obj, Pattern):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, (bool, str, int, float)):
        return Literal(obj)
    raise TypeError(f"cannot use {type(obj).__name__} as a pattern")


class JsonType(enum.Enum):
    """The scalar types a typed pattern can require."""

    STR = "str"
    BOOL = "bool"
    I64 = "i64"
    U64 = "u64"
    F64 = "f64"

    def check(self, value: Any) -> bool:
        """Whether ``value`` is stored as this type.

        F64 holds only for numbers that are not exact 64-bit integers.
        """
        if self is JsonType.STR:
            return isinstance(value, str)
        if self is JsonType.BOOL:
            return isinstance(value, bool)
        if self is JsonType.I64:
            return _is_integer(value) and value <= _I64_MAX
        if self is JsonType.U64:
            return _is_integer(value) and value >= 0
        return _is_number(value) and not _is_integer(value)

    def _extract(self, value: Any) -> Tuple[bool, Any]:
        # A named f64 takes any number and binds it as a float.
        if self is JsonType.F64:
            if not _is_number(value):
                return False, None
            converted = _as_float(value)
            return converted is not None, converted
        if self.check(value):
            return True, value
        return False, None


class Pattern(ABC):
    """A pattern that a JSON value may match."""

    @abstractmethod
    def match(self, value: Any) -> Optional[Bindings]:
        """The bindings made by matching ``value``, or None if it fails."""

    @abstractmethod
    def names(self) -> Tuple[str, ...]:
        """The names this pattern may bind, in order of first appearance."""

    def __or__(self, other: Any) -> "AnyOf":
        return AnyOf(self, other)

    def __and__(self, other: Any) -> "AllOf":
        return AllOf(self, other)


@dataclass
class Wildcard(Pattern):
    """Matches anything and binds nothing."""

    def match(self, value: Any) -> Optional[Bindings]:
        return {}

    def names(self) -> Tuple[str, ...]:
        return ()


@dataclass
class Bind(Pattern):
    """Binds the value to a name, optionally requiring a sub-pattern."""

    name: str
    pattern: Optional[Pattern] = None

    def __post_init__(self) -> None:
        _check_name(self.name)
        if self.pattern is not None:
            self.pattern = _coerce(self.pattern)

    def match(self, value: Any) -> Optional[Bindings]:
        if self.pattern is None:
            return {self.name: value}
        inner = self.pattern.match(value)
        if inner is None:
            return None
        return {self.name: value, **inner}

    def names(self) -> Tuple[str, ...]:
        inner = self.pattern.names() if self.pattern is not None else ()
        return _merge_names((self.name,), inner)


@dataclass
class Literal(Pattern):
    """Matches a string, boolean or number equal to the given one."""

    value: Any

    def __post_init__(self) -> None:
        if self.value is None or not isinstance(self.value, (bool, str, int, float)):
            raise TypeError(
                f"literal must be a str, bool, int or float, not {type(self.value).__name__}"
            )

    def match(self, value: Any) -> Optional[Bindings]:
        literal = self.value
        if isinstance(literal, bool):
            equal = isinstance(value, bool) and value == literal
        elif isinstance(literal, str):
            equal = isinstance(value, str) and value == literal
        elif isinstance(literal, int):
            equal = _is_integer(value) and value == literal
        else:
            equal = _is_number(value) and _as_float(value) == literal
        return {} if equal else None

    def names(self) -> Tuple[str, ...]:
        return ()


@dataclass
class Null(Pattern):
    """Matches JSON null."""

    def match(self, value: Any) -> Optional[Bindings]:
        return {} if value is None else None

    def names(self) -> Tuple[str, ...]:
        return ()


@dataclass
class Typed(Pattern):
    """Matches a value of a scalar type, binding it when a name is given."""

    kind: JsonType
    name: Optional[str] = None

    def __post_init__(self) -> None:
        self.kind = JsonType(self.kind)
        if self.name is not None:
            _check_name(self.name)

    def match(self, value: Any) -> Optional[Bindings]:
        if self.name is None:
            return {} if self.kind.check(value) else None
        ok, converted = self.kind._extract(value)
        return {self.name: converted} if ok else None

    def names(self) -> Tuple[str, ...]:
        return (self.name,) if self.name is not None else ()


@dataclass
class Object(Pattern):
    """Matches an object holding the given keys; other keys are allowed.

    With ``rest`` the remaining keys are bound: to an ``Exclude`` view when
    fields are given, to the object itself when there are none.
    """

    fields: Mapping = field(default_factory=dict)
    rest: Optional[str] = None

    def __post_init__(self) -> None:
        coerced = {}
        for key, pattern in dict(self.fields).items():
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, not {type(key).__name__}")
            coerced[key] = _coerce(pattern)
        self.fields = coerced
        if self.rest is not None:
            _check_name(self.rest)

    def match(self, value: Any) -> Optional[Bindings]:
        if not isinstance(value, Mapping):
            return None
        bindings: Bindings = {}
        for key, pattern in self.fields.items():
            if key not in value:
                return None
            inner = pattern.match(value[key])
            if inner is None:
                return None
            bindings.update(inner)
        if self.rest is not None:
            bindings[self.rest] = Exclude(value, self.fields) if self.fields else value
        return bindings

    def names(self) -> Tuple[str, ...]:
        rest = (self.rest,) if self.rest is not None else ()
        return _merge_names(*(p.names() for p in self.fields.values()), rest)


@dataclass
class Array(Pattern):
    """Matches an array by its leading and trailing elements.

    ``rest`` is None for an array of exactly ``prefix``'s length, ``...``
    to allow any elements between prefix and suffix, or a name to bind them.
    """

    prefix: Tuple[Any, ...] = ()
    rest: Any = None
    suffix: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        self.prefix = tuple(_coerce(p) for p in self.prefix)
        self.suffix = tuple(_coerce(p) for p in self.suffix)
        if self.rest is None:
            if self.suffix:
                raise ValueError("a suffix needs a rest between it and the prefix")
        elif self.rest is not Ellipsis:
            _check_name(self.rest)

    def match(self, value: Any) -> Optional[Bindings]:
        if not isinstance(value, (list, tuple)):
            return None
        length, head, tail = len(value), len(self.prefix), len(self.suffix)
        if self.rest is None:
            if length != head:
                return None
        elif length < head + tail:
            return None
        bindings: Bindings = {}
        for pattern, item in zip(self.prefix, value):
            inner = pattern.match(item)
            if inner is None:
                return None
            bindings.update(inner)
        for pattern, item in zip(reversed(self.suffix), reversed(value)):
            inner = pattern.match(item)
            if inner is None:
                return None
            bindings.update(inner)
        if isinstance(self.rest, str):
            bindings[self.rest] = list(value[head:length - tail])
        return bindings

    def names(self) -> Tuple[str, ...]:
        rest = (self.rest,) if isinstance(self.rest, str) else ()
        return _merge_names(
            *(p.names() for p in self.prefix),
            *(p.names() for p in reversed(self.suffix)),
            rest,
        )


class AnyOf(Pattern):
    """Matches when any alternative does; the first that matches binds."""

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("AnyOf needs at least one alternative")
        self.alternatives = tuple(_coerce(a) for a in args)

    def match(self, value: Any) -> Optional[Bindings]:
        for alternative in self.alternatives:
            bindings = alternative.match(value)
            if bindings is not None:
                return bindings
        return None

    def names(self) -> Tuple[str, ...]:
        return _merge_names(*(a.names() for a in self.alternatives))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyOf) and other.alternatives == self.alternatives

    def __repr__(self) -> str:
        return f"AnyOf({', '.join(map(repr, self.alternatives))})"


class AllOf(Pattern):
    """Matches when every part does, combining their bindings."""

    def __init__(self, *args: Any) -> None:
        if not args:
            raise ValueError("AllOf needs at least one part")
        self.parts = tuple(_coerce(a) for a in args)

    def match(self, value: Any) -> Optional[Bindings]:
        bindings: Bindings = {}
        for part in self.parts:
            inner = part.match(value)
            if inner is None:
                return None
            bindings.update(inner)
        return bindings

    def names(self) -> Tuple[str, ...]:
        return _merge_names(*(p.names() for p in self.parts))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AllOf) and other.parts == self.parts

    def __repr__(self) -> str:
        return f"AllOf({', '.join(map(repr, self.parts))})"


@dataclass
class Arm:
    """A pattern and what to do when it matches.

    A callable action is called with every name of the pattern as a keyword
    argument (None for names the taken branch left unbound); any other
    action is returned as it is.
    """

    pattern: Pattern
    action: Any

    def __post_init__(self) -> None:
        self.pattern = _coerce(self.pattern)

    def _run(self, bindings: Bindings) -> Any:
        if not callable(self.action):
            return self.action
        return self.action(**{name: bindings.get(name) for name in self.pattern.names()})


def _is_irrefutable(pattern: Pattern) -> bool:
    return isinstance(pattern, Wildcard) or (
        isinstance(pattern, Bind) and pattern.pattern is None
    )


def match_json(value: Any, *args: Any) -> Any:
    """Run the first arm whose pattern matches ``value``.

    Arms are ``Arm`` objects or ``(pattern, action)`` pairs. The last arm
    must be a wildcard or a bare binding, so that some arm always matches.
    """
    arms = [arg if isinstance(arg, Arm) else Arm(*arg) for arg in args]
    if not arms:
        raise ValueError("match_json needs at least one arm")
    *refutable, last = arms
    if not _is_irrefutable(last.pattern):
        raise ValueError("the last arm must be a wildcard or a bare binding")
    for arm in refutable:
        bindings = arm.pattern.match(value)
        if bindings is not None:
            return arm._run(bindings)
    return last._run(last.pattern.match(value))


def matches(value: Any, pattern: Any) -> bool:
    """Whether ``value`` matches ``pattern``."""
    return _coerce(pattern).match(value) is not None