from typing import Tuple

from .bitpack import BitReader, BitWriter
from .bitstream import deserialize_tree, from_bytes, serialize_tree, to_bytes
from .chain_tree import Codebook, build_chain_tree, build_codebook, decode_one_symbol
from .errors import MalformedContainerError, UnknownSymbolError
from .ranking import rank_symbols

def encode_symbols(data: bytes, codes: Codebook) -> Tuple[bytes, int]:
    """Pack the codeword of every byte of `data`; returns (payload_bytes, padding)."""
    bw = BitWriter()
    for sym in data:
        try:
            code, L = codes[sym]
        except KeyError:
            raise UnknownSymbolError(f"Byte {sym} has no codeword") from None
        bw.write_code(code, L)
    return bw.finish()

def encode_chain(data: bytes) -> Tuple[int, bytes, bytes]:
    """
    Returns:
      padding: zero bits appended to the last payload byte (0..7)
      tree_bytes: serialized chain tree, [count][symbols in rank order]
      payload_bytes: MSB-first packed codewords
    """
    tree = build_chain_tree(rank_symbols(data))
    codes = build_codebook(tree)  # sym -> (code_int, L)
    payload_bytes, padding = encode_symbols(data, codes)
    return padding, serialize_tree(tree), payload_bytes

def decode_chain(padding: int, tree_bytes: bytes, payload_bytes: bytes) -> bytes:
    tree = deserialize_tree(tree_bytes)
    total_bits = len(payload_bytes) * 8 - padding
    if not (0 <= padding <= 7) or total_bits < 0:
        raise MalformedContainerError(f"Bad padding {padding} for {len(payload_bytes)} payload bytes")
    br = BitReader(payload_bytes, total_bits)

    out = bytearray()
    while br.remaining:
        out.append(decode_one_symbol(tree, br))
    return bytes(out)

def compress(data: bytes) -> bytes:
    padding, tree_bytes, payload_bytes = encode_chain(data)
    return to_bytes(padding, tree_bytes, payload_bytes)

def decompress(blob: bytes) -> bytes:
    c = from_bytes(blob)
    return decode_chain(c.padding, c.tree, c.data)
