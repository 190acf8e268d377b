# codemark

`codemark` reads *markers* out of documentation comments. A marker is a line
that starts with `+` followed by an identifier of three colon-separated
parts (`domain:resource:option`), optionally with a value:

```text
Some documentation text.
+jsonschema:validation:maximum=3
+codemark:example:name="a string"
+codemark:example:tags=["a", "b", "c"]
+codemark:example:enabled
```

A marker must start a line (leading spaces and tabs are allowed); a `+` in
the middle of text is ignored. A marker with no value, followed by a newline
or the end of the text, is the boolean `true`. Values may be:

- strings in double quotes with backslash escapes, or in backticks for
  multi-line text (backtick strings are not allowed inside lists);
- integers: decimal, hex (`0x`), octal (`0o` or a leading `0`), binary (`0b`),
  with an optional sign, within the signed 64-bit range;
- floats such as `99.99`;
- complex numbers written either way round, e.g. `3+3i` or `9i+9`;
- `true` or `false`;
- flat lists of the above, e.g. `[99, 99.99, 9i+9, true, "s"]`, with no space
  right after `[` and no trailing comma.

Only a newline may follow a finished marker on the same line.

## Installation

```sh
pip install codemark
```

The package has no runtime dependencies.

## Parsing markers

```python
from codemark.parser import parse, ParseError

markers = parse('''
Lorem ipsum documentation
+codemark:parser:int=3
+codemark:parser:float=3.3
+codemark:parser:list=[1, "two", true]
''')
for m in markers:
    print(m.ident, m.kind, m.value)
    print(str(m))   # the marker as it would be written in a comment
```

`parse` returns a list of `codemark.marker.Marker` objects, each with
`ident`, `kind` (a `MarkerKind`: `STRING`, `INT`, `FLOAT`, `COMPLEX`, `BOOL`
or `LIST`) and `value` (a `str`, `int`, `float`, `complex`, `bool` or `list`).
On the first lexing or parsing failure it raises `ParseError`; its `markers`
attribute holds the markers built before the failure.

## Tokens

`codemark.lexer.tokenize(text)` returns the list of `codemark.tokens.Token`
values for a text, ending with an `EOF` token, or with an `ERROR` token whose
value is the error message. A `codemark.lexer.Lexer` can also be iterated
over, or read one token at a time with `next_token()`.

## Markers

`codemark.marker` also provides:

- `Marker.validate()` – raises `InvalidMarkerError` for a bad identifier or a
  `None` value;
- `Marker.is_equal(value)` – compares values with matching types;
- `fake(kind, value)` – a marker in the `codemark:fake:*` namespace;
- `type_of(kind)` and `kind_from_rtype(rtype)` – map between marker kinds and
  runtime types;
- `is_typed_list(rtype, values)` – raises `TypeError` unless every element
  fits the scalar type behind `rtype`.

## Identifiers

`codemark.validate.validate_ident(ident)` raises `InvalidIdentError` unless
the identifier has at least two colons, does not start with `+`, and every
segment ends with a letter or digit.

## Runtime types

`codemark.rtypes` describes the types an option's value converts to:
`basic(TypeKind.STRING)`, `pointer_to`, `slice_of`, `array_of`, `map_of`,
`chan_of` and `named`, with predicates such as `is_int`, `is_primitive`,
`is_supported` and `is_valid_slice`. `name_for(rtype)` gives a left-to-right
name such as `map.string.ptr.int`.

## Options and registries

An `Option` ties an identifier to a runtime type and to the targets it may be
used on:

```python
from codemark import rtypes
from codemark.option import make_option, Target
from codemark.registry import Registry, merge

opt = make_option("codemark:example:name", rtypes.basic(rtypes.TypeKind.STRING),
                  None, False, Target.ANY)
reg = Registry()
reg.define(opt)
assert reg.get("codemark:example:name") is opt
```

`make_option` raises `InvalidOptionError` for a bad identifier, a missing
type or no targets. Defining the same identifier twice raises
`OptionExistsError`; looking up an unknown one raises `OptionNotFoundError`.
`Registry.doc_of(ident)` returns an option's `OptionDoc`, `Registry.all()`
a copy of all options, and `merge(*registries)` combines registries into a
new one. `domain_of`, `resource_of` and `option_of` split an identifier.

## Testing helpers

- `codemark.randgen` – random ints, floats, booleans, strings, complex
  numbers and identifiers.
- `codemark.markertest` – `new_ident`, `new_marker`, and `rand_marker(rtype)`
  for a marker with a random value of a supported type.
- `codemark.registrytest` – named types for every supported scalar, pointer
  and list type, `new_opts_set()` with one option per type, and
  `new_registry(opts)`.

## What it does not do

`codemark` works on text you hand it. It does not read source files or
projects to find declarations and their comments, and it does not convert a
parsed marker's value into the type declared by a registered option; the
registry only stores definitions. There is no command-line tool.