from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Union

from min_heap import MinHeap

class EmptyInputError(ValueError):
    """Input has no bytes: the frequency table is all-zero and there is no tree."""

@dataclass(frozen=True)
class Leaf:
    symbol: int
    freq: int

@dataclass(frozen=True)
class Internal:
    freq: int
    left: "Node"
    right: "Node"

Node = Union[Leaf, Internal]

def build_heap(freqs) -> MinHeap:
    """One leaf per byte value with count > 0, inserted in ascending byte order."""
    heap = MinHeap()
    for b, f in enumerate(freqs):
        f = int(f)
        if f > 0:
            heap.insert(Leaf(symbol=b, freq=f))
    return heap

def build_tree(heap: MinHeap) -> Node:
    if len(heap) == 0:
        raise EmptyInputError("empty input: no symbols to build a Huffman tree from")
    while len(heap) > 1:
        a = heap.extract_min()
        b = heap.extract_min()
        heap.insert(Internal(freq=a.freq + b.freq, left=a, right=b))
    return heap.extract_min()

def tree_from_frequencies(freqs) -> Node:
    return build_tree(build_heap(freqs))

def iter_leaves(root: Node) -> Iterator[Leaf]:
    """Leaves left to right."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)

def tree_depth(root: Node) -> int:
    depth = 0
    stack = [(root, 0)]
    while stack:
        node, d = stack.pop()
        if isinstance(node, Leaf):
            depth = max(depth, d)
        else:
            stack.append((node.left, d + 1))
            stack.append((node.right, d + 1))
    return depth
