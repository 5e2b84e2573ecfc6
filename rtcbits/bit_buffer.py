"""Bit-granular reading and writing over a byte sequence.

Values are big-endian (network order): the first bit read is the most
significant bit of the first byte. Besides plain bit fields the buffer
supports unsigned and signed exponential-Golomb codes.
"""

from __future__ import annotations

UINT32_MAX = 0xFFFFFFFF
INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
_MAX_PEEK_BITS = 32
_MAX_WRITE_BITS = 64


class BitBufferError(Exception):
    """Raised when a read, write or seek does not fit the buffer."""


def _check_count(bit_count: int, maximum: int) -> None:
    if bit_count < 0 or bit_count > maximum:
        raise ValueError(f"bit count must be in [0, {maximum}], got {bit_count}")


def _check_unsigned(val: int, width: int) -> None:
    if not 0 <= val < (1 << width):
        raise ValueError(f"value {val} does not fit in {width} unsigned bits")


class BitBuffer:
    """Reads bit-sized fields from a byte sequence without copying it."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data).cast("B")
        self._byte_count = len(self._data)
        self._byte_offset = 0
        self._bit_offset = 0

    @property
    def offset(self) -> tuple[int, int]:
        """The current position as (byte offset, bit offset in [0, 7])."""
        return self._byte_offset, self._bit_offset

    @property
    def remaining_bit_count(self) -> int:
        """Number of bits left between the current position and the end."""
        return (self._byte_count - self._byte_offset) * 8 - self._bit_offset

    def read_uint8(self) -> int:
        """Read an 8-bit unsigned value."""
        return self.read_bits(8)

    def read_uint16(self) -> int:
        """Read a 16-bit unsigned value."""
        return self.read_bits(16)

    def read_uint32(self) -> int:
        """Read a 32-bit unsigned value."""
        return self.read_bits(32)

    def peek_bits(self, bit_count: int) -> int:
        """Return the next ``bit_count`` bits (1..32) without moving."""
        if bit_count < 1:
            raise ValueError("bit count must be positive")
        if bit_count > self.remaining_bit_count or bit_count > _MAX_PEEK_BITS:
            raise BitBufferError(
                f"cannot read {bit_count} bits, "
                f"{self.remaining_bit_count} remaining"
            )
        start = self._byte_offset * 8 + self._bit_offset
        end = start + bit_count
        first_byte = start // 8
        last_byte = (end + 7) // 8
        chunk = int.from_bytes(self._data[first_byte:last_byte], "big")
        return (chunk >> (last_byte * 8 - end)) & ((1 << bit_count) - 1)

    def read_bits(self, bit_count: int) -> int:
        """Read the next ``bit_count`` bits (1..32) and advance past them."""
        value = self.peek_bits(bit_count)
        self.consume_bits(bit_count)
        return value

    def read_exponential_golomb(self) -> int:
        """Read an unsigned exponential-Golomb value.

        The leading zero bits are consumed while they are counted, so a
        failed read leaves the position after them.
        """
        zero_bit_count = 0
        while self.remaining_bit_count > 0 and self.peek_bits(1) == 0:
            zero_bit_count += 1
            self.consume_bits(1)
        value_bit_count = zero_bit_count + 1
        if value_bit_count > _MAX_PEEK_BITS:
            raise BitBufferError("exponential-Golomb value does not fit 32 bits")
        return self.read_bits(value_bit_count) - 1

    def read_signed_exponential_golomb(self) -> int:
        """Read a signed exponential-Golomb value (0, 1, -1, 2, -2, ...)."""
        unsigned_val = self.read_exponential_golomb()
        if unsigned_val & 1 == 0:
            return -(unsigned_val // 2)
        return (unsigned_val + 1) // 2

    def consume_bytes(self, byte_count: int) -> None:
        """Advance the position by ``byte_count`` bytes."""
        self.consume_bits(byte_count * 8)

    def consume_bits(self, bit_count: int) -> None:
        """Advance the position by ``bit_count`` bits."""
        if bit_count < 0:
            raise ValueError("bit count must not be negative")
        if bit_count > self.remaining_bit_count:
            raise BitBufferError(
                f"cannot consume {bit_count} bits, "
                f"{self.remaining_bit_count} remaining"
            )
        total = self._bit_offset + bit_count
        self._byte_offset += total // 8
        self._bit_offset = total % 8

    def seek(self, byte_offset: int, bit_offset: int) -> None:
        """Move to the given byte offset and bit offset within that byte."""
        if (
            byte_offset < 0
            or bit_offset < 0
            or byte_offset > self._byte_count
            or bit_offset > 7
            or (byte_offset == self._byte_count and bit_offset > 0)
        ):
            raise BitBufferError(
                f"cannot seek to byte {byte_offset}, bit {bit_offset}"
            )
        self._byte_offset = byte_offset
        self._bit_offset = bit_offset


class BitBufferWriter(BitBuffer):
    """A bit buffer over writable memory; reads and writes share one position."""

    def __init__(self, data: bytearray | memoryview) -> None:
        view = memoryview(data)
        if view.readonly:
            raise TypeError("BitBufferWriter needs writable memory")
        super().__init__(view)

    def write_uint8(self, val: int) -> None:
        """Write an 8-bit unsigned value."""
        _check_unsigned(val, 8)
        self.write_bits(val, 8)

    def write_uint16(self, val: int) -> None:
        """Write a 16-bit unsigned value."""
        _check_unsigned(val, 16)
        self.write_bits(val, 16)

    def write_uint32(self, val: int) -> None:
        """Write a 32-bit unsigned value."""
        _check_unsigned(val, 32)
        self.write_bits(val, 32)

    def write_bits(self, val: int, bit_count: int) -> None:
        """Write the lowest ``bit_count`` bits (0..64) of ``val``."""
        _check_count(bit_count, _MAX_WRITE_BITS)
        if val < 0:
            raise ValueError("value must not be negative")
        if bit_count > self.remaining_bit_count:
            raise BitBufferError(
                f"cannot write {bit_count} bits, "
                f"{self.remaining_bit_count} remaining"
            )
        if bit_count == 0:
            return
        val &= (1 << bit_count) - 1
        start = self._byte_offset * 8 + self._bit_offset
        end = start + bit_count
        first_byte = start // 8
        last_byte = (end + 7) // 8
        width = (last_byte - first_byte) * 8
        shift = last_byte * 8 - end
        mask = ((1 << bit_count) - 1) << shift
        old = int.from_bytes(self._data[first_byte:last_byte], "big")
        new = (old & ~mask & ((1 << width) - 1)) | (val << shift)
        self._data[first_byte:last_byte] = new.to_bytes(width // 8, "big")
        self.consume_bits(bit_count)

    def write_exponential_golomb(self, val: int) -> None:
        """Write ``val`` as an unsigned exponential-Golomb code."""
        _check_unsigned(val, 32)
        if val == UINT32_MAX:
            raise BitBufferError("the largest 32-bit value cannot be encoded")
        val_to_encode = val + 1
        self.write_bits(val_to_encode, val_to_encode.bit_length() * 2 - 1)

    def write_signed_exponential_golomb(self, val: int) -> None:
        """Write ``val`` as a signed exponential-Golomb code."""
        if not INT32_MIN <= val <= INT32_MAX:
            raise ValueError(f"value {val} does not fit in 32 signed bits")
        if val == 0:
            self.write_exponential_golomb(0)
        elif val > 0:
            self.write_exponential_golomb(val * 2 - 1)
        else:
            if val == INT32_MIN:
                raise BitBufferError("the smallest 32-bit value cannot be encoded")
            self.write_exponential_golomb(-val * 2)