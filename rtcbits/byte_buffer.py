"""Byte-granular serialisation of integers, varints and strings.

Multi-byte values are written in network order (big-endian) by default, or
in the byte order of the host. Helpers for reading and writing fixed-width
big- and little-endian integers at an offset are provided as well.
"""

from __future__ import annotations

import enum
import struct
import sys

from rtcbits.buffer import Buffer

DEFAULT_CAPACITY = 4096
_UINT64_MASK = (1 << 64) - 1
_MAX_VARINT_SHIFT = 64


class ByteOrder(enum.Enum):
    """Byte order used for multi-byte values in a byte buffer."""

    NETWORK = 0
    HOST = 1


class ByteBufferError(Exception):
    """Raised when a read needs more data than the buffer holds."""


def is_host_big_endian() -> bool:
    """Return True when the host stores integers most significant byte first."""
    return sys.byteorder == "big"


def _unpack(fmt: str, data, offset: int) -> int:
    try:
        return struct.unpack_from(fmt, data, offset)[0]
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _pack(fmt: str, data, offset: int, value: int) -> None:
    try:
        struct.pack_into(fmt, data, offset, value)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def get_be16(data, offset: int = 0) -> int:
    """Read a big-endian 16-bit unsigned value at ``offset``."""
    return _unpack(">H", data, offset)


def get_be32(data, offset: int = 0) -> int:
    """Read a big-endian 32-bit unsigned value at ``offset``."""
    return _unpack(">I", data, offset)


def get_be64(data, offset: int = 0) -> int:
    """Read a big-endian 64-bit unsigned value at ``offset``."""
    return _unpack(">Q", data, offset)


def get_le16(data, offset: int = 0) -> int:
    """Read a little-endian 16-bit unsigned value at ``offset``."""
    return _unpack("<H", data, offset)


def get_le32(data, offset: int = 0) -> int:
    """Read a little-endian 32-bit unsigned value at ``offset``."""
    return _unpack("<I", data, offset)


def get_le64(data, offset: int = 0) -> int:
    """Read a little-endian 64-bit unsigned value at ``offset``."""
    return _unpack("<Q", data, offset)


def set_be16(data, offset: int, value: int) -> None:
    """Store a big-endian 16-bit unsigned value at ``offset``."""
    _pack(">H", data, offset, value)


def set_be32(data, offset: int, value: int) -> None:
    """Store a big-endian 32-bit unsigned value at ``offset``."""
    _pack(">I", data, offset, value)


def set_be64(data, offset: int, value: int) -> None:
    """Store a big-endian 64-bit unsigned value at ``offset``."""
    _pack(">Q", data, offset, value)


def set_le16(data, offset: int, value: int) -> None:
    """Store a little-endian 16-bit unsigned value at ``offset``."""
    _pack("<H", data, offset, value)


def set_le32(data, offset: int, value: int) -> None:
    """Store a little-endian 32-bit unsigned value at ``offset``."""
    _pack("<I", data, offset, value)


def set_le64(data, offset: int, value: int) -> None:
    """Store a little-endian 64-bit unsigned value at ``offset``."""
    _pack("<Q", data, offset, value)


def _endian(order: ByteOrder) -> str:
    return "big" if order is ByteOrder.NETWORK else sys.byteorder


def _check_unsigned(val: int, width: int) -> None:
    if not 0 <= val < (1 << width):
        raise ValueError(f"value {val} does not fit in {width} unsigned bits")


class ByteBufferWriter:
    """An append-only byte buffer that grows as values are written."""

    def __init__(
        self,
        initial: bytes | bytearray | memoryview | None = None,
        byte_order: ByteOrder = ByteOrder.NETWORK,
    ) -> None:
        self._byte_order = byte_order
        self._buffer = Buffer()
        if initial is not None:
            self._buffer.append_data(initial)
        else:
            self._buffer.ensure_capacity(DEFAULT_CAPACITY)

    @property
    def byte_order(self) -> ByteOrder:
        """The byte order used for multi-byte values."""
        return self._byte_order

    @property
    def data(self) -> bytes:
        """A copy of everything written so far."""
        return bytes(self._buffer)

    @property
    def capacity(self) -> int:
        """Number of bytes that fit without reallocating."""
        return self._buffer.capacity

    def __len__(self) -> int:
        return len(self._buffer)

    def _write_int(self, val: int, size: int) -> None:
        self.write_bytes(val.to_bytes(size, _endian(self._byte_order)))

    def write_uint8(self, val: int) -> None:
        """Append an 8-bit unsigned value."""
        _check_unsigned(val, 8)
        self._write_int(val, 1)

    def write_uint16(self, val: int) -> None:
        """Append a 16-bit unsigned value."""
        _check_unsigned(val, 16)
        self._write_int(val, 2)

    def write_uint24(self, val: int) -> None:
        """Append the low 24 bits of a 32-bit unsigned value."""
        _check_unsigned(val, 32)
        self._write_int(val & 0xFFFFFF, 3)

    def write_uint32(self, val: int) -> None:
        """Append a 32-bit unsigned value."""
        _check_unsigned(val, 32)
        self._write_int(val, 4)

    def write_uint64(self, val: int) -> None:
        """Append a 64-bit unsigned value."""
        _check_unsigned(val, 64)
        self._write_int(val, 8)

    def write_uvarint(self, val: int) -> None:
        """Append a 64-bit unsigned value as a base-128 varint."""
        _check_unsigned(val, 64)
        out = bytearray()
        while val >= 0x80:
            out.append((val & 0x7F) | 0x80)
            val >>= 7
        out.append(val)
        self.write_bytes(out)

    def write_string(self, val: str | bytes) -> None:
        """Append a string (UTF-8 encoded) or raw bytes."""
        self.write_bytes(val.encode("utf-8") if isinstance(val, str) else val)

    def write_bytes(self, val: bytes | bytearray | memoryview) -> None:
        """Append raw bytes."""
        self._buffer.append_data(val)

    def reserve_write_buffer(self, length: int) -> memoryview:
        """Grow the buffer by ``length`` bytes and return a view of them."""
        if length < 0:
            raise ValueError("length must not be negative")
        old_size = len(self._buffer)
        self._buffer.set_size(old_size + length)
        return self._buffer.data[old_size:]

    def resize(self, size: int) -> None:
        """Truncate or extend the written data to ``size`` bytes."""
        self._buffer.set_size(size)

    def clear(self) -> None:
        """Discard all written data."""
        self._buffer.clear()


class ByteBufferReader:
    """Reads values sequentially from a byte sequence."""

    def __init__(
        self,
        data: bytes | bytearray | memoryview | Buffer,
        byte_order: ByteOrder = ByteOrder.NETWORK,
    ) -> None:
        self._bytes = bytes(data)
        self._byte_order = byte_order
        self._start = 0
        self._end = len(self._bytes)

    @classmethod
    def from_writer(cls, writer: ByteBufferWriter) -> ByteBufferReader:
        """Create a reader over a writer's data, using its byte order."""
        return cls(writer.data, writer.byte_order)

    @property
    def byte_order(self) -> ByteOrder:
        """The byte order used for multi-byte values."""
        return self._byte_order

    @property
    def data(self) -> bytes:
        """The unread part of the data."""
        return self._bytes[self._start : self._end]

    def __len__(self) -> int:
        return self._end - self._start

    def read_bytes(self, length: int) -> bytes:
        """Read and return the next ``length`` bytes."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length > len(self):
            raise ByteBufferError(
                f"cannot read {length} bytes, {len(self)} remaining"
            )
        chunk = self._bytes[self._start : self._start + length]
        self._start += length
        return chunk

    def _read_int(self, size: int) -> int:
        return int.from_bytes(self.read_bytes(size), _endian(self._byte_order))

    def read_uint8(self) -> int:
        """Read an 8-bit unsigned value."""
        return self._read_int(1)

    def read_uint16(self) -> int:
        """Read a 16-bit unsigned value."""
        return self._read_int(2)

    def read_uint24(self) -> int:
        """Read a 24-bit unsigned value."""
        return self._read_int(3)

    def read_uint32(self) -> int:
        """Read a 32-bit unsigned value."""
        return self._read_int(4)

    def read_uint64(self) -> int:
        """Read a 64-bit unsigned value."""
        return self._read_int(8)

    def read_uvarint(self) -> int:
        """Read a base-128 varint of at most 64 bits.

        Bytes read before a failure stay consumed.
        """
        value = 0
        for shift in range(0, _MAX_VARINT_SHIFT, 7):
            byte = self.read_bytes(1)[0]
            value = (value | ((byte & 0x7F) << shift)) & _UINT64_MASK
            if byte < 0x80:
                return value
        raise ByteBufferError("varint is longer than 64 bits")

    def read_string(self, length: int) -> str:
        """Read ``length`` bytes and decode them as UTF-8."""
        if 0 <= length <= len(self):
            text = self._bytes[self._start : self._start + length].decode("utf-8")
            self._start += length
            return text
        return self.read_bytes(length).decode("utf-8")

    def consume(self, size: int) -> None:
        """Skip ``size`` bytes."""
        self.read_bytes(size)