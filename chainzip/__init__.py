"""Lossless byte compressor built on a frequency-ranked chain prefix code."""

from .codec import compress, decompress
from .errors import CodecError

__all__ = ["compress", "decompress", "CodecError"]
