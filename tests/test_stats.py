import math

import pytest

from chainzip.chain_tree import build_chain_tree, build_codebook
from chainzip.ranking import rank_symbols
from chainzip.stats import compression_ratio, entropy_bits, mean_code_length


def test_compression_ratio():
	assert compression_ratio(10, 5) == 2.0
	assert math.isinf(compression_ratio(10, 0))


def test_entropy_bits():
	assert entropy_bits(b"ab") == pytest.approx(1.0)
	assert entropy_bits(b"abcd") == pytest.approx(2.0)
	assert entropy_bits(b"aaaa") == 0.0
	assert entropy_bits(b"") == 0.0


def test_mean_code_length():
	data = b"abcdefghijabcdefghij"
	codes = build_codebook(build_chain_tree(rank_symbols(data)))
	assert mean_code_length(data, codes) == pytest.approx(108 / 20)
	assert mean_code_length(b"", codes) == 0.0


def test_chain_code_never_beats_entropy():
	data = b"a" * 20 + b"b"
	codes = build_codebook(build_chain_tree(rank_symbols(data)))
	assert mean_code_length(data, codes) >= entropy_bits(data)
