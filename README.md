# rtlib

Small building blocks for a ray tracer that reads scene description files.

The text functions treat their arguments as NUL-terminated strings. A `"\0"`
character ends the text, and anything after it is ignored. Where a C string
function would return a pointer, these functions return an index or `None`.
Invalid arguments raise `ValueError`. Examples are a multi-character string
where a single character is expected, or a negative size.

## Modules

- `rtlib.textsearch` finds characters and substrings and compares strings by
  character code.
  - `strchr(s, c)` and `strrchr(s, c)` give the first and last index of `c`.
    Searching for `"\0"` gives the index of the terminator.
  - `strncmp(s1, s2, n)` and `strcmp(s1, s2)` return the difference of the
    first differing character codes. The end of a string counts as code 0.
    They return 0 when the compared parts are equal.
  - `strnstr(haystack, needle, length)` finds `needle` only where it lies wholly
    within the first `length` characters.
- `rtlib.textops` reshapes text.
  - `split(s, sep)` returns the non-empty words between runs of `sep`.
  - `strtrim(s, charset)` strips the characters of `charset` from both ends.
  - `substr(s, start, length)` returns a slice of the text.
  - `strjoin(s1, s2)` joins two strings.
  - `strlcpy(src, size)` and `strlcat(dest, src, size)` model copying into a
    buffer of fixed size. Each returns a `(text, length)` pair, where `length`
    is the length the result would have had if there were room enough.
  - `strmapi(s, func)` builds a string from `func(index, char)`.
  - `striteri(s, func)` does the same, except that when `func` returns `None`
    the character is kept as it was.
- `rtlib.strbuilder` holds `StringBuilder(initial_capacity)`, a text buffer
  that tracks its capacity and grows it by doubling.
  - Appending: `append_char`, `append_n`, `append_str`.
  - Capacity: `ensure_capacity`, `shrink_to_fit`, `capacity()`.
  - Content: `clear`, `build()`, `len()`.
- `rtlib.scene` holds frozen dataclasses for the records of a scene.
  - The records are `AmbientLighting`, `Camera`, `Light`, `Sphere`, `Plane`
    and `Cylinder`.
  - An `Element` pairs an identifier with its record. The identifiers are
    `"A"`, `"C"`, `"L"`, `"sp"`, `"pl"` and `"cy"`, as listed by
    `ElementKind`.
  - `Vec3` is a point or vector.
  - `Color` is an 8-bit RGB colour. `Color.from_hex` and `Color.hex()` convert
    to and from the packed 32-bit form, with red in the low byte.
  - Constructors check ranges and raise `ValueError` when a value is out of
    range:
    - brightness must lie in [0, 1];
    - field of view must lie in [0, 180];
    - direction components must lie in [-1, 1];
    - the record type must match the element identifier.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from rtlib.textops import split, strtrim
from rtlib.textsearch import strcmp, strchr

split("sp 0,0,20 12.6 10,0,255", " ")
# ['sp', '0,0,20', '12.6', '10,0,255']

strtrim("  hello  ", " ")   # 'hello'
strcmp("abc", "abd")        # -1
strchr("abc", "\0")         # 3
```

```python
from rtlib.strbuilder import StringBuilder

sb = StringBuilder(4)
sb.append_str("Hello")
sb.append_char(",")
sb.append_str(" world")
sb.build()       # 'Hello, world'
len(sb)          # 12
sb.capacity()    # 16
```

```python
from rtlib.scene import Color, Element, Sphere, Vec3

red = Color.from_hex(0x000000FF)
red.hex()        # 255

ball = Element("sp", Sphere(Vec3(0.0, 0.0, 20.0), 12.6, Color(10, 0, 255)))
ball.kind()      # ElementKind.SPHERE
```

## What this package does not do

The package defines the scene records but provides no reader for scene files.
It does not render images. It has no command-line program.