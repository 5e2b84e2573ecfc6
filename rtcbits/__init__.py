"""Audio sample helpers, level metering, bit and byte buffers, and string utilities."""

__version__ = "0.1.0"

__all__ = [
    "audio_util",
    "audio_level",
    "bit_buffer",
    "buffer",
    "byte_buffer",
    "strsearch",
    "strview",
]