from __future__ import annotations
from typing import Dict

from huff_tree import Leaf, Node

Codebook = Dict[int, str]  # byte value -> bit string of '0'/'1'

def generate_codes(root: Node) -> Codebook:
    """
    Walk the tree depth-first: left appends '0', right appends '1'.
    Leaves are reached left to right, which fixes the dict order.
    A lone leaf at the root gets the 1-bit code "0".
    """
    if isinstance(root, Leaf):
        return {root.symbol: "0"}
    codes: Codebook = {}
    stack = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if isinstance(node, Leaf):
            codes[node.symbol] = prefix
        else:
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))
    return codes

def code_lengths(codes: Codebook) -> Dict[int, int]:
    return {sym: len(c) for sym, c in codes.items()}

def is_prefix_free(codes: Codebook) -> bool:
    # after sorting, a prefix always sorts immediately before some code it prefixes
    words = sorted(codes.values())
    for a, b in zip(words, words[1:]):
        if b.startswith(a):
            return False
    return all(words)

def build_decode_trie(codes: Codebook):
    """
    Build a binary trie for decoding bits -> symbol.
    """
    root = {}
    for sym, bits in codes.items():
        if not bits:
            raise ValueError(f"empty code for symbol {sym}")
        cur = root
        for ch in bits:
            if "sym" in cur:
                raise ValueError("codebook is not prefix-free")
            cur = cur.setdefault(int(ch), {})
        if len(cur) > 0:
            raise ValueError("codebook is not prefix-free")
        cur["sym"] = sym
    return root

def decode_one_symbol(trie, bitreader) -> int:
    cur = trie
    while "sym" not in cur:
        b = bitreader.read_bit()
        if b not in cur:
            raise ValueError("Invalid Huffman code (corrupt stream)")
        cur = cur[b]
    return cur["sym"]
