# flexon

Building blocks for a lenient JSON / JSONC parser, in pure Python with no
dependencies.

## What it provides

- `flexon.config`: parser settings. `RTConfig` is a frozen dataclass set
  at run time with `require_comma(v)`, `allow_trailing_comma(v)` and
  `allow_comments(v)`. Each of these returns a new configuration.
  `CTConfig` is a fixed preset built with `optional_comma()`,
  `allow_trailing_comma()` and `allow_comments()`. Each of those may be
  used only once, and a second use raises `TypeError`. Both classes answer
  `comma()`, `trailing_comma()` and `comments()`.
- `flexon.lookup`: byte classification helpers. `is_number_char`,
  `digit_value`, `unescape` and `is_literal_end` take a byte value from 0
  to 255 and raise `ValueError` for any other value.
- `flexon.comment`: `Comment`, a single-line or multi-line comment with its
  text and an optional `(start, end)` byte span. `len()` of a comment is
  its length in UTF-8 bytes. `start()` and `end()` raise `ValueError` when
  no span was recorded.
- `flexon.fast_float`: exact decimal-to-double conversion.
  - `limits`: IEEE-754 double constants and `pow10_fast_path`.
  - `common`: `AdjustedMantissa`, a binary significand and biased
    exponent. A `power2` of -1 marks that the fast method could not decide.
  - `number`: `Number`, with `is_fast_path()` and `try_fast_path()` for
    values that plain float arithmetic converts exactly.
  - `table`: the 128-bit powers-of-five table and `power_of_five_128(q)`.
  - `binary`: the Eisel–Lemire step, `compute_float(q, w)`, with
    `power`, `full_multiplication` and `compute_product_approx`.
  - `bigdecimal`: the `Decimal` big-decimal type, `parse_decimal(data, start)`
    and `number_of_digits_decimal_left_shift`.
  - `simple`: `parse_long_mantissa(data, start)`, the exact fallback for
    numbers that the fast path cannot round.

## Example

```python
import struct

from flexon.comment import Comment
from flexon.config import CTConfig, RTConfig
from flexon.fast_float.number import Number
from flexon.fast_float.simple import parse_long_mantissa
from flexon.lookup import unescape

config = RTConfig().require_comma(False)
assert config.trailing_comma()
assert CTConfig().optional_comma().comma()

assert unescape(ord("n")) == ord("\n")

note = Comment("note", multiline=False, span=(0, 6))
assert len(note) == 4 and note.start() == 0

assert Number(exponent=-2, mantissa=314159).try_fast_path() == 3141.59

am = parse_long_mantissa(b"1.5", 0)
bits = (am.power2 << 52) | am.mantissa
assert struct.unpack("<d", bits.to_bytes(8, "little"))[0] == 1.5
```

## What it does not do

The package does not parse JSON documents. It has no parser, no value
types, no JSON pointer lookup and no serialisation. It also has no error
type for reporting parse failures. The float conversion works on a
significand and exponent, or on a number's bytes at a given offset. Nothing
joins the fast path and the fallback into a single float-reading function.
The caller picks the path: try `Number.try_fast_path`, then
`compute_float`, and use `parse_long_mantissa` when `power2` is negative.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```