import pytest

from chainzip.bitpack import BitReader
from chainzip.chain_tree import build_chain_tree, build_codebook, decode_one_symbol
from chainzip.errors import (
	CodecError,
	InsufficientSymbolsError,
	MalformedTreeError,
	TruncatedBitstreamError,
)


def _as_str(code, length):
	return format(code, f"0{length}b")


@pytest.mark.parametrize("ranked", [[], [65]])
def test_build_rejects_fewer_than_two_symbols(ranked):
	with pytest.raises(InsufficientSymbolsError):
		build_chain_tree(ranked)


@pytest.mark.parametrize("ranked", [[1, 2, 1], [1, 256], [-1, 3]])
def test_build_rejects_bad_symbols(ranked):
	with pytest.raises(MalformedTreeError) as exc_info:
		build_chain_tree(ranked)
	assert isinstance(exc_info.value, CodecError)


def test_chain_levels():
	tree = build_chain_tree([1, 2, 3, 4])
	assert list(tree.levels()) == [(1, None), (2, None), (3, 4)]
	assert len(tree) == 4


def test_two_symbol_tree_is_single_level():
	tree = build_chain_tree([7, 9])
	assert list(tree.levels()) == [(7, 9)]
	assert build_codebook(tree) == {7: (0, 1), 9: (1, 1)}


def test_codebook_chain_codes():
	codes = build_codebook(build_chain_tree([10, 20, 30, 40]))
	assert {s: _as_str(*c) for s, c in codes.items()} == {
		10: "0",
		20: "10",
		30: "110",
		40: "111",
	}


def test_code_lengths_follow_rank():
	ranked = list(range(255, -1, -1))
	codes = build_codebook(build_chain_tree(ranked))
	n = len(ranked)
	for k, sym in enumerate(ranked, start=1):
		expected = k if k <= n - 2 else n - 1
		assert codes[sym][1] == expected
	# last two differ only in the final bit
	a, b = codes[ranked[-2]], codes[ranked[-1]]
	assert a[0] ^ b[0] == 1


def test_codebook_is_prefix_free():
	codes = build_codebook(build_chain_tree([5, 4, 3, 2, 1, 0]))
	words = [_as_str(*c) for c in codes.values()]
	for w in words:
		for other in words:
			if w is not other:
				assert not other.startswith(w)


def test_decode_one_symbol_walks_the_chain():
	tree = build_chain_tree([ord("a"), ord("b"), ord("c")])
	# a=0 b=10 c=11 -> "c a b" = 11 0 10
	br = BitReader(bytes([0b11010000]), 5)
	assert [decode_one_symbol(tree, br) for _ in range(3)] == [ord("c"), ord("a"), ord("b")]
	assert br.remaining == 0


def test_decode_one_symbol_stops_mid_symbol():
	tree = build_chain_tree([1, 2, 3])
	br = BitReader(bytes([0b10000000]), 1)
	with pytest.raises(TruncatedBitstreamError):
		decode_one_symbol(tree, br)
