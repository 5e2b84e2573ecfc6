# rtcbits

Small building blocks for real-time media code, using only the standard library:

- `rtcbits.audio_util` converts samples between 16-bit integer PCM, float in
  `[-1.0, 1.0]` and float in the 16-bit range. Float results are rounded to
  single precision. It also converts between dB and linear values, and it
  interleaves, deinterleaves, upmixes and downmixes channels. Integer downmixes
  truncate toward zero.
- `rtcbits.audio_level` holds `AudioLevel`, a peak-level meter. The published
  level (`level_full_range`) is refreshed on every eleventh block, and the
  running peak then decays by a factor of four. The meter also keeps
  `total_energy` and `total_duration`. `clear()` resets the peak tracking but
  keeps those two totals. `max_abs_value_w16` returns the peak of a block of
  samples, saturated to 32767.
- `rtcbits.bit_buffer` holds `BitBuffer` and `BitBufferWriter`. They read and
  write big-endian bit fields and exponential-Golomb codes, signed or
  unsigned. A read, write or seek that does not fit the buffer raises
  `BitBufferError`. The current position is available as `offset`, a
  `(byte, bit)` tuple, and the bits left as `remaining_bit_count`.
- `rtcbits.buffer` holds `Buffer`, a growable byte buffer. Its size is
  separate from its `capacity`, and it can wipe released memory when created
  with `zero_on_free=True`. `take(n)` removes and returns the first `n` bytes.
  `explicit_zero_memory` overwrites a writable bytes-like object with zeros.
- `rtcbits.byte_buffer` holds `ByteBufferWriter` and `ByteBufferReader`. They
  write and read 8, 16, 24, 32 and 64-bit unsigned integers, base-128 varints,
  strings and raw bytes. Values are in network or host byte order, as chosen by
  `ByteOrder`. A short read raises `ByteBufferError`. The module also has
  `get_be16` … `get_le64` and `set_be16` … `set_le64`, which read and write
  fixed-width integers at an offset, and `is_host_big_endian()`.
- `rtcbits.strsearch` has `find`, `rfind`, `find_first_of`, `find_last_of`,
  `find_first_not_of` and `find_last_not_of`, for `str` and `bytes`. Each
  returns an index, or `NPOS` (-1) when nothing matches.
- `rtcbits.strview` has `compare` (returns -1, 0 or 1), `substr`, which raises
  `IndexError` for a start past the end, `clipped_substr`, which clamps the
  start, and `pad`, which pads a string to a field width.

## Installation

```
pip install rtcbits
```

## Examples

```python
from rtcbits.audio_util import float_to_s16, s16_to_float, downmix_interleaved_to_mono

float_to_s16(1.0)                                 # 32767
s16_to_float(-32768)                              # -1.0
downmix_interleaved_to_mono([10, 20, 30, 50], 2)  # [15, 40]
```

```python
from rtcbits.audio_level import AudioLevel

meter = AudioLevel()
for _ in range(11):
    meter.compute_level([0, 1000, -2000], duration=0.01)
meter.level_full_range   # 2000
meter.total_duration     # about 0.11
```

```python
from rtcbits.bit_buffer import BitBuffer, BitBufferWriter

storage = bytearray(4)
writer = BitBufferWriter(storage)
writer.write_exponential_golomb(5)
writer.write_signed_exponential_golomb(-3)

reader = BitBuffer(bytes(storage))
reader.read_exponential_golomb()          # 5
reader.read_signed_exponential_golomb()   # -3
reader.offset                             # (1, 2)
```

```python
from rtcbits.byte_buffer import ByteBufferWriter, ByteBufferReader

writer = ByteBufferWriter()
writer.write_uint16(0x1234)
writer.write_uvarint(300)

reader = ByteBufferReader.from_writer(writer)
reader.read_uint16()    # 0x1234
reader.read_uvarint()   # 300
```

```python
from rtcbits.buffer import Buffer

buf = Buffer()
buf.append_data(b"hello world")
buf.take(5)     # b"hello"; the buffer now holds b" world"
```

```python
from rtcbits.strsearch import find_first_not_of
from rtcbits.strview import pad

find_first_not_of("   text", " ")   # 3
pad("7", 3, "0")                    # "007"
```

## What it does not do

This is a library only. It has no command-line tool, and it does not capture,
play or decode audio. The audio helpers work on sample values that you pass in.

## Running the tests

```
pip install -e ".[test]"
pytest
```