import struct
from dataclasses import dataclass

from .chain_tree import CodeTree, build_chain_tree
from .errors import MalformedContainerError, MalformedTreeError
from .ranking import MAX_SYMBOLS

# Container layout:
# padding(u8) symbol_count(u8) symbols(symbol_count) packed_data(rest)
# symbol_count 0 stands for 256 (0 and 1 are never valid counts)
HEADER_FMT = "<BB"
HEADER_SIZE = struct.calcsize(HEADER_FMT)

@dataclass(frozen=True)
class Container:
    padding: int
    tree: bytes   # serialized tree, count byte included
    data: bytes

def _count_to_byte(n: int) -> int:
    if not (2 <= n <= MAX_SYMBOLS):
        raise MalformedTreeError(f"symbol count out of range (2..256): {n}")
    return n % MAX_SYMBOLS

def _byte_to_count(b: int) -> int:
    return b or MAX_SYMBOLS

def serialize_tree(tree: CodeTree) -> bytes:
    return bytes([_count_to_byte(len(tree.ranked))]) + bytes(tree.ranked)

def deserialize_tree(buf: bytes) -> CodeTree:
    if len(buf) < 1:
        raise MalformedTreeError("Malformed tree: missing symbol count")
    n = _byte_to_count(buf[0])
    if 1 + n > len(buf):
        raise MalformedTreeError(
            f"Malformed tree: {n} symbols declared, {len(buf) - 1} available")
    symbols = list(buf[1:1 + n])
    if len(set(symbols)) != n:
        raise MalformedTreeError("Malformed tree: repeated symbols")
    return build_chain_tree(symbols)

def to_bytes(padding: int, tree: bytes, data: bytes) -> bytes:
    if not (0 <= padding <= 7):
        raise MalformedContainerError(f"padding out of range (0..7): {padding}")
    return bytes([padding]) + bytes(tree) + bytes(data)

def from_bytes(buf: bytes) -> Container:
    if len(buf) < HEADER_SIZE:
        raise MalformedContainerError("Malformed stream: header too short")
    padding, count = struct.unpack_from(HEADER_FMT, buf)
    n = _byte_to_count(count)
    end = HEADER_SIZE + n
    if end > len(buf):
        raise MalformedContainerError(
            f"Malformed stream: tree needs {end} bytes, stream has {len(buf)}")
    if padding > 7:
        raise MalformedContainerError(f"Bad padding: {padding}")
    data = bytes(buf[end:])
    if padding and not data:
        raise MalformedContainerError("Malformed stream: padding without data")
    return Container(padding=padding, tree=bytes(buf[1:end]), data=data)
