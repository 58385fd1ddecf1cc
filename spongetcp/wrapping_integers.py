"""32-bit sequence numbers relative to an initial sequence number."""

from __future__ import annotations

from dataclasses import dataclass

_MOD32 = 1 << 32
_MOD64 = 1 << 64
_INT32_HALF = 1 << 31


def _as_int32(value: int) -> int:
    """Interpret ``value`` modulo 2**32 as a signed 32-bit integer."""
    value %= _MOD32
    return value - _MOD32 if value >= _INT32_HALF else value


@dataclass(frozen=True)
class WrappingInt32:
    """A 32-bit integer that wraps around, used for TCP seqnos and acknos."""

    raw_value: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise TypeError(f"raw value must be an int, not {type(self.raw_value).__name__}")
        if not 0 <= self.raw_value < _MOD32:
            raise ValueError(f"raw value {self.raw_value} does not fit in 32 bits")

    def __add__(self, other: int) -> WrappingInt32:
        """The point ``other`` steps past this one."""
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) % _MOD32)

    def __sub__(self, other):
        """Signed offset to another WrappingInt32, or the point ``other`` steps before this one.

        The offset is negative when the number of decrements needed is less than
        or equal to the number of increments.
        """
        if isinstance(other, WrappingInt32):
            return _as_int32(self.raw_value - other.raw_value)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value - other) % _MOD32)

    def __str__(self) -> str:
        return str(self.raw_value)


def _check_absolute(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} {value} is not a 64-bit unsigned integer")


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Turn an absolute 64-bit sequence number into a relative 32-bit one."""
    _check_absolute("n", n)
    return isn + (n % _MOD32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to ``n`` and is closest to ``checkpoint``."""
    _check_absolute("checkpoint", checkpoint)
    diff = n - wrap(checkpoint, isn)
    unwrapped = diff + checkpoint
    if unwrapped < 0:
        unwrapped += _MOD32
    return unwrapped % _MOD64