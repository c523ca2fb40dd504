from typing import List

import numpy as np

from .errors import EmptyInputError

MAX_SYMBOLS = 256

def count_frequencies(data: bytes) -> np.ndarray:
    """Occurrence count of every byte value (length 256, int64)."""
    b = np.frombuffer(bytes(data), dtype=np.uint8)
    return np.bincount(b, minlength=MAX_SYMBOLS).astype(np.int64)

def rank_symbols(data: bytes) -> List[int]:
    """
    Distinct byte values of `data`, most frequent first.
    Ties go to the smaller byte value, so the order is reproducible.
    """
    if len(data) == 0:
        raise EmptyInputError("Nothing to rank: input is empty")
    counts = count_frequencies(data)
    # stable sort over 0..255 keeps ascending symbol order inside a tie
    order = np.argsort(-counts, kind="stable")
    return [int(s) for s in order if counts[s] > 0]
