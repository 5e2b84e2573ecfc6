import pytest

from rtcbits.buffer import Buffer, explicit_zero_memory


def test_construct_from_bytes():
    buf = Buffer(b"abc")
    assert len(buf) == 3
    assert bytes(buf) == b"abc"
    assert buf.capacity == 3


def test_construct_with_size_and_capacity():
    buf = Buffer(4, 10)
    assert len(buf) == 4
    assert buf.capacity == 10
    assert Buffer(10, 4).capacity == 10


def test_empty_buffer():
    buf = Buffer()
    assert len(buf) == 0
    assert buf.capacity == 0
    assert bytes(buf) == b""


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Buffer(-1)


def test_append_grows_by_half():
    buf = Buffer(b"abcd")
    buf.append_data(b"e")
    assert bytes(buf) == b"abcde"
    assert buf.capacity == 6


def test_append_large_grows_to_request():
    buf = Buffer(b"ab")
    buf.append_data(b"x" * 50)
    assert len(buf) == 52
    assert buf.capacity == 52


def test_ensure_capacity_is_exact_and_keeps_contents():
    buf = Buffer(b"abc")
    buf.ensure_capacity(100)
    assert buf.capacity == 100
    assert bytes(buf) == b"abc"
    buf.ensure_capacity(5)
    assert buf.capacity == 100


def test_append_single_byte_value():
    buf = Buffer(b"xy")
    buf.append_data(0x41)
    assert bytes(buf) == b"xyA"
    with pytest.raises(ValueError):
        buf.append_data(256)


def test_set_data_replaces_contents():
    buf = Buffer(b"hello")
    buf.set_data(b"hi")
    assert bytes(buf) == b"hi"
    assert buf.capacity == 5


def test_shrink_then_grow_keeps_stale_bytes():
    buf = Buffer(b"abc")
    buf.set_size(1)
    buf.set_size(3)
    assert bytes(buf) == b"abc"


def test_shrink_then_grow_zeroes_with_zero_on_free():
    buf = Buffer(b"abc", zero_on_free=True)
    buf.set_size(1)
    buf.set_size(3)
    assert bytes(buf) == b"a\x00\x00"


def test_set_data_zeroes_trailing_with_zero_on_free():
    buf = Buffer(b"abcdef", zero_on_free=True)
    view = memoryview(buf._storage)
    buf.set_data(b"xy")
    assert bytes(view) == b"xy\x00\x00\x00\x00"


def test_reallocation_wipes_old_memory_with_zero_on_free():
    buf = Buffer(b"secret", zero_on_free=True)
    old_view = buf.data
    buf.append_data(b"!" * 20)
    assert bytes(old_view) == bytes(len(old_view))
    assert bytes(buf) == b"secret" + b"!" * 20


def test_reallocation_leaves_old_memory_without_zero_on_free():
    buf = Buffer(b"plain")
    old_view = buf.data
    buf.append_data(b"!" * 20)
    assert bytes(old_view) == b"plain"


def test_clear_keeps_capacity():
    buf = Buffer(b"abcdef")
    buf.clear()
    assert len(buf) == 0
    assert buf.capacity == 6


def test_clear_wipes_with_zero_on_free():
    buf = Buffer(b"abcdef", zero_on_free=True)
    view = buf.data
    buf.clear()
    assert bytes(view) == bytes(6)


def test_take_removes_prefix():
    buf = Buffer(b"hello world")
    assert buf.take(5) == b"hello"
    assert bytes(buf) == b" world"
    assert buf.take(6) == b" world"
    assert len(buf) == 0


def test_take_too_much_raises_and_keeps_data():
    buf = Buffer(b"abc")
    with pytest.raises(ValueError):
        buf.take(4)
    assert bytes(buf) == b"abc"


def test_append_with_setter():
    buf = Buffer(b"ab")
    seen = []

    def setter(view):
        seen.append(len(view))
        view[:2] = b"xy"
        return 2

    assert buf.append_with(5, setter) == 2
    assert seen == [5]
    assert bytes(buf) == b"abxy"


def test_append_with_overreport_raises():
    buf = Buffer(b"ab")
    with pytest.raises(ValueError):
        buf.append_with(2, lambda view: 3)
    assert bytes(buf) == b"ab"


def test_set_with_replaces_contents():
    buf = Buffer(b"old contents")

    def setter(view):
        view[:3] = b"new"
        return 3

    assert buf.set_with(4, setter) == 3
    assert bytes(buf) == b"new"


def test_swap_exchanges_everything():
    a = Buffer(b"one", 10)
    b = Buffer(b"three")
    a.swap(b)
    assert bytes(a) == b"three"
    assert a.capacity == 5
    assert bytes(b) == b"one"
    assert b.capacity == 10


def test_equality_compares_contents_only():
    a = Buffer(b"abc", 10)
    b = Buffer(b"abc")
    assert a == b
    b.append_data(b"d")
    assert not a == b


def test_indexing_reads_and_writes():
    buf = Buffer(b"abc")
    assert buf[1] == ord("b")
    buf[1] = ord("z")
    assert bytes(buf) == b"azc"
    assert buf[0:2] == b"az"
    with pytest.raises(IndexError):
        buf[3]


def test_data_view_writes_through():
    buf = Buffer(b"abc")
    buf.data[0] = ord("q")
    assert bytes(buf) == b"qbc"
    assert list(buf) == list(b"qbc")


def test_explicit_zero_memory_clears_bytearray():
    data = bytearray(b"sensitive")
    explicit_zero_memory(data)
    assert data == bytearray(len(b"sensitive"))


def test_explicit_zero_memory_rejects_readonly():
    with pytest.raises(TypeError):
        explicit_zero_memory(b"readonly")