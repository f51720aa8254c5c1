# matchjson

Structural pattern matching for JSON values that have already been parsed
into plain Python objects (`dict`, `list`, `str`, `int`, `float`, `bool`,
`None`), for example by `json.loads`.

## Patterns

Patterns live in `matchjson.patterns`. Each is a `Pattern` with two methods:
`match(value)` returns a dict of bindings, or `None` when the value does not
match, and `names()` returns the names the pattern may bind, in order of first
appearance.

- `Wildcard()` matches anything and binds nothing.
- `Literal(value)` matches a string, boolean or number equal to the one given.
  Booleans match only booleans, strings only strings; an integer literal
  matches only integers, a float literal any number equal to it.
- `Null()` matches `None`.
- `Typed(kind, name=None)` matches a value of a `JsonType` (`STR`, `BOOL`,
  `I64`, `U64`, `F64`) and binds it when a name is given. As a check, `F64`
  holds only for numbers that are not exact 64-bit integers; with a name, `F64`
  takes any number and binds it as a `float`. `JsonType.check(value)` performs
  the check on its own.
- `Bind(name, pattern=None)` binds the whole value to `name`, requiring the
  inner pattern to match when one is given.
- `Object(fields, rest=None)` matches a mapping that holds every key in
  `fields`, each value matching its pattern; other keys are allowed. With
  `rest`, the remaining keys are bound: to an `Exclude` view when fields are
  given, to the object itself when there are none.
- `Array(prefix=(), rest=None, suffix=())` matches a list or tuple by its
  leading and trailing elements. With `rest=None` the array must have exactly
  the prefix's length; `rest=...` allows any elements between prefix and
  suffix; a name binds those middle elements as a list.
- `AnyOf(*alternatives)` matches when any alternative does; the first match
  supplies the bindings. `AllOf(*parts)` matches when every part does and
  merges their bindings. `p | q` and `p & q` build these as well.

Wherever a pattern is expected, a plain `str`, `bool`, `int` or `float` stands
for a `Literal` and `None` for `Null`. Binding names must be identifiers other
than `_`.

## Matching

`matches(value, pattern)` answers whether a value fits a pattern:

```python
from matchjson.patterns import Object, matches

matches({"a": "b"}, Object({"a": "b"}))   # True
matches({"a": "c"}, Object({"a": "b"}))   # False
```

`match_json(value, *arms)` tries arms in order and runs the first whose
pattern matches. An arm is an `Arm(pattern, action)` or a `(pattern, action)`
pair. A callable action is called with every name of its pattern as a keyword
argument (`None` for names the matched branch left unbound); any other action
is returned as it is. The last arm must be a `Wildcard()` or a bare
`Bind(name)`, otherwise `ValueError` is raised.

```python
from matchjson.patterns import JsonType, Typed, Wildcard, match_json

match_json(
    [1],
    (Typed(JsonType.I64, "x") , "not an array"),
    (Wildcard(), "other"),
)  # "other"
```

## Rest of an object

`matchjson.exclude.Exclude(obj, excluded)` is a read-only mapping over an
object that hides a set of keys, each of which must be present (otherwise
`ValueError`). Visible keys are iterated in sorted order. It supports `len()`,
`in`, indexing, iteration, `items()`, `get()`, `get_key_value()`,
`is_empty()` and the `excluded` property, and renders the visible part as
compact JSON with sorted keys through `str()`, or as indented JSON with
`to_json(pretty=True)`.

## Demo

A short tour of the matching features prints its results to standard output:

```
matchjson-demo
```

## What it does not do

matchjson works on values already in memory: it neither reads nor parses JSON
text, and patterns are built from Python objects rather than written in a
pattern language.

## Installation and tests

```
pip install ".[test]"
pytest
```