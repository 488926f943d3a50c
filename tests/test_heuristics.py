import math

import pytest

from expression import OPERATIONS, OpenNode, LeafNode, Node
from heuristics import HEURISTICS, get_heuristic, remaining_count, open_slots, difference, ratio_large, ratio_small


NUMBERS = (1, 2, 3)


def test_remaining_count():
    h = remaining_count(10, NUMBERS)
    assert h(OpenNode()) == 3
    assert h(Node(OPERATIONS.ADD, LeafNode(1))) == 2
    assert h(Node(OPERATIONS.ADD, Node(OPERATIONS.SUB, LeafNode(1), LeafNode(2)))) == 1


def test_open_slots():
    h = open_slots(10, NUMBERS)
    assert h(OpenNode()) == 1
    assert h(Node(OPERATIONS.ADD)) == 2
    assert h(Node(OPERATIONS.ADD, LeafNode(1))) == 1


def test_difference():
    h = difference(10, NUMBERS)
    assert h(Node(OPERATIONS.ADD, LeafNode(3))) == 7
    assert h(OpenNode()) == 10


def test_ratios_fold_around_one():
    assert ratio_large(12, NUMBERS)(Node(OPERATIONS.ADD, LeafNode(3))) == 4
    assert ratio_large(3, NUMBERS)(Node(OPERATIONS.ADD, LeafNode(12))) == 4
    assert ratio_small(12, NUMBERS)(Node(OPERATIONS.ADD, LeafNode(3))) == 0.25
    assert ratio_small(3, NUMBERS)(Node(OPERATIONS.ADD, LeafNode(12))) == 0.25
    assert ratio_large(-12, NUMBERS)(Node(OPERATIONS.ADD, LeafNode(3))) == 4


def test_ratios_with_zero():
    assert math.isinf(ratio_large(12, NUMBERS)(OpenNode()))
    assert ratio_small(12, NUMBERS)(OpenNode()) == 0
    assert ratio_large(0, NUMBERS)(OpenNode()) == 1
    assert math.isinf(ratio_large(0, NUMBERS)(Node(OPERATIONS.ADD, LeafNode(3))))
    assert ratio_small(0, NUMBERS)(Node(OPERATIONS.ADD, LeafNode(3))) == 0


def test_registry():
    for name in HEURISTICS:
        h = get_heuristic(name, 25, NUMBERS)
        assert isinstance(h(OpenNode()), (int, float))
    with pytest.raises(ValueError):
        get_heuristic("nope", 25, NUMBERS)
