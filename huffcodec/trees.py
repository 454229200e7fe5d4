"""
trees.py

Building a Huffman tree from symbol counts, deriving its codes, and writing
the tree to / reading it from the bit header of a compressed stream.

Every traversal here keeps its own stack so tree depth is never limited by
the interpreter's recursion limit.
"""


import heapq
import numpy as np
from typing import Any, List, Optional, Tuple

from .errors import FormatError, TruncatedHeaderError
from .logger import Logger, TreeBuildLog, SymbolCodeLog, HeaderLeafLog
from .models import HuffmanNode, HuffmanLeaf, HuffmanInternal, Code
from .settings import ALPH_SIZE, PSEUDO_EOF, LEAF_VALUE_BITS


def make_tree_from_counts(counts: Any, logger: Optional[Logger] = None) -> HuffmanNode:
    """
    Build a Huffman tree by repeatedly merging the two lightest nodes.

    Args:
        counts (Any): Frequency table indexed by symbol (numpy array or sequence of ints).
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        HuffmanNode: The root. A leaf when only one symbol has a non-zero count.

    Raises:
        ValueError: If every count is zero.
    """
    counts = np.asarray(counts, dtype=np.int64)
    if counts.ndim != 1:
        raise ValueError("Frequency table must be one-dimensional")

    heap: List[HuffmanNode] = [HuffmanLeaf(int(symbol), int(counts[symbol])) for symbol in np.flatnonzero(counts > 0)]
    if not heap:
        raise ValueError("Frequency table has no symbols")
    heapq.heapify(heap)

    if logger is not None:
        logger.log(TreeBuildLog(len(heap)))

    while len(heap) > 1:
        left = heapq.heappop(heap)
        right = heapq.heappop(heap)
        heapq.heappush(heap, HuffmanInternal(left, right, left.weight + right.weight))

    return heap[0]


def make_codings_from_tree(root: HuffmanNode, logger: Optional[Logger] = None) -> List[Optional[Code]]:
    """
    Derive the code of every leaf, indexed by symbol. Symbols absent from the
    tree map to None. A tree made of a single leaf gives that symbol an empty code.
    """
    codings: List[Optional[Code]] = [None] * (ALPH_SIZE + 1)
    stack: List[Tuple[HuffmanNode, Code]] = [(root, Code())]
    while stack:
        node, code = stack.pop()
        if isinstance(node, HuffmanLeaf):
            codings[node.symbol] = code
            if logger is not None:
                logger.log(SymbolCodeLog(node.symbol, code))
        else:
            stack.append((node.right, code.append(1)))
            stack.append((node.left, code.append(0)))
    return codings


def write_tree_header(root: HuffmanNode, bit_out: Any, logger: Optional[Logger] = None) -> None:
    """
    Write the tree in preorder: 0 for an internal node followed by its left
    then right subtree, 1 for a leaf followed by its symbol in LEAF_VALUE_BITS bits.

    Args:
        root (HuffmanNode): The tree to write.
        bit_out (BitOutputStream): Destination of the header bits.
        logger (Optional[Logger]): Logger instance for logging.
    """
    stack: List[HuffmanNode] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, HuffmanLeaf):
            bit_out.write_bits(1, 1)
            bit_out.write_bits(LEAF_VALUE_BITS, node.symbol)
            if logger is not None:
                logger.log(HeaderLeafLog(node.symbol))
        else:
            bit_out.write_bits(1, 0)
            stack.append(node.right)
            stack.append(node.left)


def read_tree_header(bit_in: Any) -> HuffmanNode:
    """
    Rebuild a tree written by write_tree_header. Weights of the rebuilt nodes are 0.

    Args:
        bit_in (BitInputStream): Source positioned at the first header bit.

    Returns:
        HuffmanNode: The root of the rebuilt tree.

    Raises:
        TruncatedHeaderError: If the input ends inside the header.
        FormatError: If a leaf holds a value that is not a symbol.
    """
    # each entry holds the children read so far for an open internal node
    pending: List[List[HuffmanNode]] = []
    while True:
        bit = bit_in.read_bits(1)
        if bit == -1:
            raise TruncatedHeaderError("Input ended while reading the tree header")
        if bit == 0:
            pending.append([])
            continue

        value = bit_in.read_bits(LEAF_VALUE_BITS)
        if value == -1:
            raise TruncatedHeaderError("Input ended while reading a leaf value")
        if value > PSEUDO_EOF:
            raise FormatError(f"Leaf value {value} is not a valid symbol")

        node: HuffmanNode = HuffmanLeaf(value)
        while pending and len(pending[-1]) == 1:
            left = pending.pop()[0]
            node = HuffmanInternal(left, node)
        if not pending:
            return node
        pending[-1].append(node)
