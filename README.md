# spongetcp

Sequence-number arithmetic for TCP streams.

TCP carries sequence and acknowledgment numbers as 32-bit values. These
values start at an arbitrary initial sequence number (ISN) and wrap around.
Inside a TCP implementation it is easier to work with zero-based 64-bit
"absolute" sequence numbers. This package converts between the two forms.

## Installation

```
pip install spongetcp
```

To run the test suite:

```
pip install "spongetcp[test]"
pytest
```

## Usage

```python
from spongetcp.wrapping_integers import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# absolute -> relative
seqno = wrap(5, isn)
print(seqno)                   # 3

# relative -> absolute, choosing the value closest to a recent checkpoint
print(unwrap(seqno, isn, 0))   # 5

# arithmetic wraps at 2**32
a = WrappingInt32(10)
print(a + 5)                   # 15
print(a - 20)                  # 4294967286
print(WrappingInt32(3) - WrappingInt32(2**32 - 1))   # 4  (signed offset)
```

### `WrappingInt32`

An immutable 32-bit value, defined as a frozen dataclass.

- `WrappingInt32(raw_value)` builds a value from an `int` in the range
  `0 <= raw_value < 2**32`. A value outside that range raises `ValueError`.
  A value that is not an `int`, including a `bool`, raises `TypeError`.
- `.raw_value` holds the stored unsigned 32-bit integer.
- `a + n` and `a - n`, where `n` is an integer, step forwards or backwards.
  The result wraps at 2**32.
- `a - b`, where `b` is another `WrappingInt32`, gives the signed 32-bit
  offset from `b` to `a`. The offset is negative when stepping backwards
  takes no more steps than stepping forwards.
- Equality and hashing compare raw values.
- `str()` gives the raw value.

### `wrap(n, isn)`

Turns `n`, a 64-bit absolute sequence number, into a `WrappingInt32`
relative to `isn`. `n` must be an `int` with `0 <= n < 2**64`. Otherwise
`wrap` raises `TypeError` or `ValueError`.

### `unwrap(n, isn, checkpoint)`

Turns a `WrappingInt32` back into the absolute sequence number that wraps to
`n` and lies closest to `checkpoint`, where `checkpoint` is a recently seen
absolute sequence number. `checkpoint` must be an unsigned 64-bit `int`.
Otherwise `unwrap` raises `TypeError` or `ValueError`. Each direction of a
TCP connection has its own ISN.

## What this package does not do

This package provides only sequence-number arithmetic. It does not include:

- a byte stream
- a stream reassembler
- a TCP sender, receiver or connection
- any network interface or packet parsing