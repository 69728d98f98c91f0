"""Huffman tree construction and prefix codes."""

from __future__ import annotations

import heapq
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from itertools import count

__all__ = ["HuffmanNode", "build_tree", "huffman_codes"]


@dataclass
class HuffmanNode:
    """Node of a Huffman tree; internal nodes have ``symbol`` None."""

    symbol: Hashable | None
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _pairs(
    frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]],
) -> list[tuple[Hashable, int]]:
    if isinstance(frequencies, Mapping):
        return list(frequencies.items())
    return [(symbol, freq) for symbol, freq in frequencies]


def build_tree(
    frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]],
) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two lightest nodes.

    Among equal frequencies, the node created earlier is taken first.
    """
    pairs = _pairs(frequencies)
    if not pairs:
        raise ValueError("at least one symbol is needed")
    if any(freq < 0 for _, freq in pairs):
        raise ValueError("frequencies must be non-negative")
    order = count()
    heap = [(freq, next(order), HuffmanNode(symbol, freq)) for symbol, freq in pairs]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(order), HuffmanNode(None, total, left, right)))
    return heap[0][2]


def huffman_codes(
    frequencies: Mapping[Hashable, int] | Iterable[tuple[Hashable, int]],
) -> dict[Hashable, str]:
    """Return the code of every symbol, in pre-order of the tree.

    A left branch adds ``0`` and a right branch ``1``. A lone symbol gets
    the empty code.
    """
    codes: dict[Hashable, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(build_tree(frequencies), "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes