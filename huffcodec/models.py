"""
models.py

The shared objects used in huffcodec: the nodes of a Huffman tree and the
bit codes derived from it.

"""


from typing import List


class HuffmanNode:
    """
    Base class for tree nodes. Nodes order by weight so they can be kept in a heap.
    """
    def __init__(self, weight: int) -> None:
        self.weight: int = weight

    @property
    def is_leaf(self) -> bool:
        return False

    def __lt__(self, other: 'HuffmanNode') -> bool:
        return self.weight < other.weight


class HuffmanLeaf(HuffmanNode):
    """
    A leaf owns one symbol and has no children.
    """
    def __init__(self, symbol: int, weight: int = 0) -> None:
        super().__init__(weight)
        self.symbol: int = symbol

    @property
    def is_leaf(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HuffmanLeaf):
            return self.symbol == other.symbol
        return False

    def __hash__(self) -> int:
        return hash(("leaf", self.symbol))

    def __repr__(self) -> str:
        return f"HuffmanLeaf({self.symbol}, {self.weight})"


class HuffmanInternal(HuffmanNode):
    """
    An internal node owns exactly two children. Its weight is the sum of
    theirs while the tree is being built and 0 once read back from a header.
    """
    def __init__(self, left: HuffmanNode, right: HuffmanNode, weight: int = 0) -> None:
        super().__init__(weight)
        self.left: HuffmanNode = left
        self.right: HuffmanNode = right

    def __eq__(self, other: object) -> bool:
        """Two internal nodes are equal when their subtrees have the same shape and leaves."""
        if isinstance(other, HuffmanInternal):
            return self.left == other.left and self.right == other.right
        return False

    def __hash__(self) -> int:
        return hash(("internal", hash(self.left), hash(self.right)))

    def __repr__(self) -> str:
        return f"HuffmanInternal({self.left!r}, {self.right!r})"


def collect_leaves(root: HuffmanNode) -> List[HuffmanLeaf]:
    """
    Collect the leaves of a tree, left to right.

    Args:
        root (HuffmanNode): The root of the tree.

    Returns:
        List[HuffmanLeaf]: The leaves in left-to-right order.
    """
    leaves: List[HuffmanLeaf] = []
    stack: List[HuffmanNode] = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, HuffmanLeaf):
            leaves.append(node)
        else:
            stack.append(node.right)
            stack.append(node.left)
    return leaves


class Code:
    """
    A bit path from the root to a leaf, stored as a bit count and an integer
    whose most significant bit is the first step taken (0 = left, 1 = right).
    """
    def __init__(self, length: int = 0, value: int = 0) -> None:
        if length < 0:
            raise ValueError("Code length must be non-negative")
        if value < 0 or value >= (1 << length):
            raise ValueError("Code value does not fit in its length")
        self.length: int = length
        self.value: int = value

    def append(self, bit: int) -> 'Code':
        """Return the code one step further down the tree."""
        return Code(self.length + 1, (self.value << 1) | bit)

    def is_prefix_of(self, other: 'Code') -> bool:
        if self.length > other.length:
            return False
        return (other.value >> (other.length - self.length)) == self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Code):
            return self.length == other.length and self.value == other.value
        return False

    def __hash__(self) -> int:
        return hash((self.length, self.value))

    def __str__(self) -> str:
        if self.length == 0:
            return ""
        return format(self.value, f"0{self.length}b")

    def __repr__(self) -> str:
        return f"Code({self.length}, {self.value})"
