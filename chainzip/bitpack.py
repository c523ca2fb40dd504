from typing import Iterable, Tuple

import numpy as np

from .errors import TruncatedBitstreamError

def pack_bits(bits) -> Tuple[bytes, int]:
    """
    Pack a flat sequence of 0/1 into bytes (MSB-first).
    Returns (packed, padding) where padding is the number of zero bits
    appended to fill the last byte.
    """
    b = np.asarray(bits, dtype=np.uint8).ravel()
    if b.size and b.max() > 1:
        raise ValueError("bits must be 0/1")
    padding = (8 - b.size % 8) % 8
    return np.packbits(b).tobytes(), padding

def unpack_bits(data: bytes, nbits: int) -> np.ndarray:
    """
    Unpack bytes -> uint8 0/1 array length nbits (MSB-first).
    """
    if nbits < 0 or nbits > len(data) * 8:
        raise ValueError(f"nbits={nbits} out of range for {len(data)} bytes")
    arr = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.unpackbits(arr, count=nbits)

class BitWriter:
    def __init__(self):
        self._buf = bytearray()
        self._cur = 0
        self._nbits = 0  # bits currently in _cur (0..7 between writes)

    def write_code(self, code: int, length: int):
        """Write 'length' bits of code (MSB-first)."""
        self._cur = (self._cur << length) | (code & ((1 << length) - 1))
        self._nbits += length
        if self._nbits >= 8:
            nbytes, rem = divmod(self._nbits, 8)
            self._buf += (self._cur >> rem).to_bytes(nbytes, "big")
            self._cur &= (1 << rem) - 1
            self._nbits = rem

    def write_bits(self, bits: Iterable[int]):
        for bit in bits:
            self.write_code(bit, 1)

    def __len__(self):
        return len(self._buf) * 8 + self._nbits

    def finish(self) -> Tuple[bytes, int]:
        """Pad remaining bits with zeros; returns (bytes, padding)."""
        padding = (8 - self._nbits) % 8
        if self._nbits > 0:
            self._buf.append(self._cur << padding)
            self._cur = 0
            self._nbits = 0
        return bytes(self._buf), padding

class BitReader:
    def __init__(self, data: bytes, nbits: int):
        if nbits < 0 or nbits > len(data) * 8:
            raise ValueError(f"nbits={nbits} out of range for {len(data)} bytes")
        self.data = data
        self.nbits = nbits
        self.pos = 0  # bits consumed, MSB-first

    @property
    def remaining(self) -> int:
        return self.nbits - self.pos

    def read_bit(self) -> int:
        if self.pos >= self.nbits:
            raise TruncatedBitstreamError("Unexpected end of bitstream")
        i, bit = self.pos >> 3, self.pos & 7
        self.pos += 1
        return (self.data[i] >> (7 - bit)) & 1
