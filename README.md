# valueguard

`valueguard` turns loosely typed data, such as decoded JSON or query
parameters, into Python values. When the input does not fit, it reports
where the problem is and what was expected, in words a person can read.

It has no dependencies beyond the standard library.

## Install

    pip install valueguard

## Deserializers

A deserializer is a plain callable `(value, location, error)`:

- `value` is the raw input. It may be `None`, `bool`, `int`, `float`,
  `str`, a `list` or `tuple`, or a mapping.
- `location` is a `ValuePointer` that says where the value sits in the
  document. It defaults to the origin.
- `error` is the error class used for the report. It defaults to
  `DeserializeError`.

`valueguard.core.deserialize` runs a deserializer from the origin:

```python
from valueguard.core import deserialize
from valueguard.json_error import JsonError
from valueguard.scalars import string
from valueguard.collections import sequence_of

deserialize(sequence_of(string), ["a", "b"], JsonError)   # ['a', 'b']
```

If the input is wrong, an instance of the error class is raised:

```python
deserialize(sequence_of(string), ["a", 10], JsonError)
# JsonError: Invalid value type at `[1]`: expected a string,
#            but found a positive integer: `10`
```

### Building blocks

- `valueguard.scalars`
  - `null_value` accepts only `None`.
  - `boolean` accepts only a boolean.
  - `string` accepts only a string.
  - `number` accepts an integer or a float and returns a `float`.
  - `IntegerType(name, minimum, maximum)` is a bounded integer
    deserializer. The ready-made instances are `U8`, `U16`, `U32`, `U64`,
    `USIZE`, `I8`, `I16`, `I32`, `I64` and `ISIZE`. Unsigned types reject
    negative integers as the wrong kind of value. An out-of-range value is
    reported as, for example, ``value: `256` is too large to be
    deserialized, maximum value authorized is `255` ``.
- `valueguard.collections`
  - `sequence_of(item)` reads a sequence into a list.
  - `set_of(item)` reads a sequence into a set.
  - `optional(inner)` maps `None` to `None` and passes anything else to
    `inner`.
  - `mapping_of(item, key=str)` reads a map into a dict and converts each
    key with `key`. A key that `key` rejects with `ValueError` or
    `TypeError` is reported at the map.
  - `pair_of(first, second)` and `triple_of(first, second, third)` read a
    sequence of exactly two or three elements into a tuple.
- `valueguard.extras`
  - `json_value` accepts any value and returns it as plain lists, dicts and
    scalars. It rejects NaN and infinite floats.
  - `comma_separated(parse)` reads a string such as `"1,2,3"` into a list,
    converting each piece with `parse`.
- `valueguard.filters` is a worked example of hand-written deserializers.
  - `deserialize_filter` reads a string as `Direct` and a (nested) sequence
    as `Array`.
  - `deserialize_query` reads a map with exactly the fields `name` and
    `filter` into a `Query`. It rejects unknown fields and reports missing
    ones.

The container deserializers let the error class decide what happens when
one element fails. The class can stop at that element or go on and
collect more errors.

### Error styles

Every deserializer accepts either of two error styles:

- `valueguard.json_error.JsonError` writes locations as JSON paths, such as
  `` at `.key[2]` ``, and describes JSON types, such as "a positive
  integer" or "an object".
- `valueguard.query_params.QueryParamError` writes locations as parameter
  names, such as `` for parameter `key[2]` ``, and always expects "a
  string".

Both stop at the first error. The helper functions
`location_json_description`, `value_kinds_description_json`,
`value_description_with_kind_json` and their `*_query_param` counterparts
are public.

To define your own style, subclass `valueguard.core.DeserializeError` and
override the class methods `error(current, kind, location)` and
`merge(current, other, location)`. Each returns `Continue(err)` to keep
collecting errors or `Break(err)` to stop at once. The error kinds are
`IncorrectValueKind`, `MissingField`, `UnknownKey`, `UnknownValue` and
`Unexpected`. `fail(error, kind, location)` builds an error ready to
raise. The base class uses the `repr` of the kind as its message.

### Locations and kinds

```python
from valueguard.value import ValuePointer, kind_of

ptr = ValuePointer().push_key("a").push_index(2)
ptr.path            # ('a', 2)
ptr.first_field()   # 'a'
ptr.last_field()    # 'a'
ptr.is_origin()     # False

kind_of(-3)         # ValueKind.NEGATIVE_INTEGER
```

## What it does not do

- It does not build deserializers for your classes automatically. Each
  record type needs a function written by hand, in the way of
  `deserialize_query`.
- It does not parse JSON text and has no web-framework integration. Decode
  the input first, for example with `json.loads`, then pass the result in.
- It has no command-line interface.

## Running the tests

    pip install -e ".[test]"
    pytest