"""A growable byte buffer with explicit capacity management.

Unlike ``bytearray`` the buffer separates its size from its allocated
capacity, grows by at least half its capacity when appending, and can
optionally wipe every byte of memory it stops using.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

Setter = Callable[[memoryview], int]


def explicit_zero_memory(data: bytearray | memoryview) -> None:
    """Overwrite every byte of a writable buffer with zeros."""
    view = memoryview(data)
    if view.readonly:
        raise TypeError("cannot zero read-only memory")
    view = view.cast("B")
    view[:] = bytes(len(view))


def _as_bytes(data: bytes | bytearray | memoryview | int) -> bytes:
    if isinstance(data, int):
        if not 0 <= data <= 0xFF:
            raise ValueError(f"byte value out of range: {data}")
        return bytes((data,))
    return bytes(data)


class Buffer:
    """A byte buffer whose size can be grown and shrunk dynamically.

    ``Buffer(initial)`` copies a bytes-like ``initial``; ``Buffer(n)`` makes a
    buffer of ``n`` bytes. ``capacity`` reserves room beyond the size. With
    ``zero_on_free`` all memory is wiped before it is released or reused.
    """

    def __init__(
        self,
        initial: bytes | bytearray | memoryview | int = b"",
        capacity: int = 0,
        *,
        zero_on_free: bool = False,
    ) -> None:
        if isinstance(initial, int):
            if initial < 0:
                raise ValueError("size must not be negative")
            content = None
            size = initial
        else:
            content = bytes(initial)
            size = len(content)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._zero_on_free = zero_on_free
        self._size = size
        self._capacity = max(size, capacity)
        self._storage = bytearray(self._capacity)
        if content:
            self._storage[:size] = content

    def __del__(self) -> None:
        if getattr(self, "_zero_on_free", False):
            self._maybe_zero_complete_buffer()

    @property
    def zero_on_free(self) -> bool:
        """Whether released memory is wiped."""
        return self._zero_on_free

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer can hold without reallocating."""
        return self._capacity

    @property
    def data(self) -> memoryview:
        """A writable view of the current contents."""
        return memoryview(self._storage)[: self._size]

    def __len__(self) -> int:
        return self._size

    def __bytes__(self) -> bytes:
        return bytes(self._storage[: self._size])

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self))

    def __getitem__(self, index):
        item = self.data[index]
        return bytes(item) if isinstance(item, memoryview) else item

    def __setitem__(self, index, value) -> None:
        self.data[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return bytes(self) == bytes(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Buffer({bytes(self)!r}, capacity={self._capacity})"

    def set_data(self, data: bytes | bytearray | memoryview | int) -> None:
        """Replace the contents with ``data``."""
        content = _as_bytes(data)
        old_size = self._size
        self._size = 0
        self.append_data(content)
        if self._zero_on_free and self._size < old_size:
            self._zero_trailing_data(old_size - self._size)

    def set_with(self, max_elements: int, setter: Setter) -> int:
        """Replace the contents with at most ``max_elements`` bytes from ``setter``.

        ``setter`` receives a writable view of exactly ``max_elements`` bytes
        and returns how many it filled. The count is returned.
        """
        old_size = self._size
        self._size = 0
        written = self.append_with(max_elements, setter)
        if self._zero_on_free and self._size < old_size:
            self._zero_trailing_data(old_size - self._size)
        return written

    def append_data(self, data: bytes | bytearray | memoryview | int) -> None:
        """Append bytes, or a single byte given as an integer."""
        content = _as_bytes(data)
        new_size = self._size + len(content)
        self._ensure_capacity_with_headroom(new_size, extra_headroom=True)
        self._storage[self._size : new_size] = content
        self._size = new_size

    def append_with(self, max_elements: int, setter: Setter) -> int:
        """Append at most ``max_elements`` bytes written by ``setter``.

        ``setter`` receives a writable view of exactly ``max_elements`` bytes
        and returns how many it filled; unused space must be at the end.
        """
        if max_elements < 0:
            raise ValueError("max_elements must not be negative")
        old_size = self._size
        self.set_size(old_size + max_elements)
        view = memoryview(self._storage)[old_size : old_size + max_elements]
        try:
            written = setter(view)
        finally:
            view.release()
        if not 0 <= written <= max_elements:
            self._size = old_size
            raise ValueError(
                f"setter reported {written} bytes written, at most "
                f"{max_elements} allowed"
            )
        self._size = old_size + written
        return written

    def set_size(self, size: int) -> None:
        """Truncate or extend the buffer; new space is not cleared."""
        if size < 0:
            raise ValueError("size must not be negative")
        old_size = self._size
        self._ensure_capacity_with_headroom(size, extra_headroom=True)
        self._size = size
        if self._zero_on_free and self._size < old_size:
            self._zero_trailing_data(old_size - self._size)

    def ensure_capacity(self, capacity: int) -> None:
        """Make room for at least ``capacity`` bytes, without extra headroom."""
        self._ensure_capacity_with_headroom(capacity, extra_headroom=False)

    def clear(self) -> None:
        """Reset the size to zero, keeping the capacity."""
        self._maybe_zero_complete_buffer()
        self._size = 0

    def take(self, size: int) -> bytes:
        """Remove and return the first ``size`` bytes."""
        if size < 0 or size > self._size:
            raise ValueError(
                f"cannot take {size} bytes from a buffer of {self._size}"
            )
        chunk = bytes(self._storage[:size])
        self._storage[: self._size - size] = self._storage[size : self._size]
        self.set_size(self._size - size)
        return chunk

    def swap(self, other: Buffer) -> None:
        """Exchange contents and capacity with another buffer."""
        self._size, other._size = other._size, self._size
        self._capacity, other._capacity = other._capacity, self._capacity
        self._storage, other._storage = other._storage, self._storage

    def _ensure_capacity_with_headroom(
        self, capacity: int, extra_headroom: bool
    ) -> None:
        if capacity <= self._capacity:
            return
        if extra_headroom:
            new_capacity = max(capacity, self._capacity + self._capacity // 2)
        else:
            new_capacity = capacity
        new_storage = bytearray(new_capacity)
        new_storage[: self._size] = self._storage[: self._size]
        self._maybe_zero_complete_buffer()
        self._storage = new_storage
        self._capacity = new_capacity

    def _maybe_zero_complete_buffer(self) -> None:
        if self._zero_on_free and self._capacity > 0:
            explicit_zero_memory(self._storage)

    def _zero_trailing_data(self, count: int) -> None:
        self._storage[self._size : self._size + count] = bytes(count)