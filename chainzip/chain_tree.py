from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import InsufficientSymbolsError, MalformedTreeError

Codebook = Dict[int, Tuple[int, int]]  # sym -> (code_int, code_len)

@dataclass
class _Node:
    sym: Optional[int] = None
    left: int = -1   # arena index, -1 on leaves
    right: int = -1

    @property
    def is_leaf(self) -> bool:
        return self.sym is not None

class CodeTree:
    """
    Chain-shaped prefix tree stored as an arena of nodes.

    Every branch has a leaf on its left. Its right child is either the next
    branch or, on the last level, a second leaf.
    """

    def __init__(self, nodes: List[_Node], root: int, ranked: List[int]):
        self.nodes = nodes
        self.root = root
        self.ranked = ranked  # symbols in the order the chain was built from

    def __len__(self):
        return len(self.ranked)

    def levels(self) -> Iterator[Tuple[int, Optional[int]]]:
        """Yield (left_sym, right_sym) per level; right_sym is None unless terminal."""
        node = self.nodes[self.root]
        while True:
            left = self.nodes[node.left]
            right = self.nodes[node.right]
            if right.is_leaf:
                yield left.sym, right.sym
                return
            yield left.sym, None
            node = right

def build_chain_tree(ranked: Sequence[int]) -> CodeTree:
    """
    First ranked symbol -> left leaf of the current level, the rest hang off
    the right. Rank k gets a k-bit code; the last two share length n-1.
    """
    ranked = [int(s) for s in ranked]
    if len(ranked) < 2:
        raise InsufficientSymbolsError(
            f"Chain code needs at least 2 distinct symbols, got {len(ranked)}")
    if len(set(ranked)) != len(ranked):
        raise MalformedTreeError("Ranked symbols must be distinct")
    if any(not (0 <= s <= 255) for s in ranked):
        raise MalformedTreeError("Symbols must be byte values (0..255)")

    nodes: List[_Node] = []

    def add(node: _Node) -> int:
        nodes.append(node)
        return len(nodes) - 1

    root = add(_Node())
    branch = root
    last = len(ranked) - 2
    for i, sym in enumerate(ranked[:-1]):
        nodes[branch].left = add(_Node(sym=sym))
        if i == last:
            nodes[branch].right = add(_Node(sym=ranked[-1]))
        else:
            nxt = add(_Node())
            nodes[branch].right = nxt
            branch = nxt
    return CodeTree(nodes, root, ranked)

def build_codebook(tree: CodeTree) -> Codebook:
    code: Codebook = {}
    prefix, L = 0, 0
    node = tree.nodes[tree.root]
    while True:
        code[tree.nodes[node.left].sym] = (prefix << 1, L + 1)
        prefix, L = (prefix << 1) | 1, L + 1
        right = tree.nodes[node.right]
        if right.is_leaf:
            code[right.sym] = (prefix, L)
            return code
        node = right

def decode_one_symbol(tree: CodeTree, bitreader) -> int:
    node = tree.nodes[tree.root]
    while True:
        b = bitreader.read_bit()
        child = tree.nodes[node.right if b else node.left]
        if child.is_leaf:
            return child.sym
        node = child
