import pytest

from dsakit.huffman import build_tree, huffman_codes

SAMPLE = {"a": 5, "b": 9, "c": 12, "d": 13, "e": 16, "f": 45}


def _leaves(node):
    if node.is_leaf:
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def _all_nodes(root):
    nodes = []
    stack = [root]
    while stack:
        node = stack.pop()
        nodes.append(node)
        if not node.is_leaf:
            stack.extend((node.left, node.right))
    return nodes


def test_worked_example():
    assert huffman_codes(SAMPLE) == {
        "f": "0",
        "c": "100",
        "d": "101",
        "a": "1100",
        "b": "1101",
        "e": "111",
    }


def test_codes_are_prefix_free():
    codes = list(huffman_codes(SAMPLE).values())
    for i, first in enumerate(codes):
        for second in codes[i + 1 :]:
            assert not first.startswith(second)
            assert not second.startswith(first)


def test_every_symbol_gets_a_binary_code():
    codes = huffman_codes(SAMPLE)
    assert set(codes) == set(SAMPLE)
    assert all(set(code) <= {"0", "1"} for code in codes.values())


def test_root_frequency_is_total():
    assert build_tree(SAMPLE).freq == sum(SAMPLE.values())


def test_internal_nodes_sum_children():
    nodes = _all_nodes(build_tree(SAMPLE))
    internal = [node for node in nodes if not node.is_leaf]
    leaves = [node for node in nodes if node.is_leaf]
    assert len(internal) == len(SAMPLE) - 1
    assert len(leaves) == len(SAMPLE)
    assert all(node.symbol is None for node in internal)
    assert all(node.freq == node.left.freq + node.right.freq for node in internal)
    assert all(node.symbol is not None for node in leaves)


def test_leaves_hold_input_symbols():
    leaves = _leaves(build_tree(SAMPLE))
    assert {leaf.symbol: leaf.freq for leaf in leaves} == SAMPLE


def test_more_frequent_symbols_have_no_longer_codes():
    codes = huffman_codes(SAMPLE)
    ranked = sorted(SAMPLE, key=SAMPLE.get)
    lengths = [len(codes[symbol]) for symbol in ranked]
    assert lengths == sorted(lengths, reverse=True)


def test_accepts_pairs():
    assert huffman_codes(list(SAMPLE.items())) == huffman_codes(SAMPLE)


def test_single_symbol_has_empty_code():
    assert huffman_codes({"x": 7}) == {"x": ""}


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        build_tree({})


def test_negative_frequency_rejected():
    with pytest.raises(ValueError):
        huffman_codes({"a": 1, "b": -2})