import numpy as np

from .ranking import count_frequencies

def compression_ratio(original_size: int, encoded_size: int) -> float:
    if encoded_size == 0:
        return float("inf")
    return float(original_size) / float(encoded_size)

def entropy_bits(data: bytes) -> float:
    """Zeroth-order Shannon entropy in bits per byte."""
    counts = count_frequencies(data)
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts[counts > 0].astype(np.float64) / float(total)
    return float(-(p * np.log2(p)).sum())

def mean_code_length(data: bytes, codebook) -> float:
    """Average codeword length (bits per byte) of `data` under `codebook`."""
    counts = count_frequencies(data)
    total = counts.sum()
    if total == 0:
        return 0.0
    lengths = np.zeros(counts.shape, dtype=np.float64)
    for sym, (_, L) in codebook.items():
        lengths[sym] = L
    return float((counts * lengths).sum() / total)
