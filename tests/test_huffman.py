import pytest

from algoritma.huffman import HuffmanNode, build_huffman_tree, huffman_codes

SYMBOLS = ["a", "b", "c", "d", "e", "f"]
FREQUENCIES = [5, 9, 12, 13, 16, 45]


def _codes():
    return huffman_codes(build_huffman_tree(SYMBOLS, FREQUENCIES))


def test_every_symbol_gets_a_code():
    assert set(_codes()) == set(SYMBOLS)


def test_codes_are_prefix_free():
    codes = list(_codes().values())
    for first in codes:
        for second in codes:
            if first is not second:
                assert not second.startswith(first)


def test_root_frequency_is_total():
    root = build_huffman_tree(SYMBOLS, FREQUENCIES)
    assert root.frequency == sum(FREQUENCIES)
    assert root.symbol is None


def test_weighted_length_is_optimal():
    codes = _codes()
    cost = sum(len(codes[s]) * f for s, f in zip(SYMBOLS, FREQUENCIES))
    assert cost == 224


def test_frequent_symbol_has_shortest_code():
    codes = _codes()
    assert all(len(codes["f"]) <= len(code) for code in codes.values())


def test_rarer_symbol_goes_left():
    codes = huffman_codes(build_huffman_tree(["a", "b"], [1, 2]))
    assert codes == {"a": "0", "b": "1"}


def test_single_symbol_has_empty_code():
    root = build_huffman_tree(["x"], [3])
    assert root.is_leaf
    assert huffman_codes(root) == {"x": ""}


def test_leaf_node_property():
    node = HuffmanNode(4, "z")
    assert node.is_leaf


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        build_huffman_tree(["a", "b"], [1])


def test_empty_raises():
    with pytest.raises(ValueError):
        build_huffman_tree([], [])