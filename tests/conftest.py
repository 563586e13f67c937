"""
Shared pytest fixtures for ordered map tests.
"""

import random

import pytest

from ordmap.models.sortedcontainers import AVLTree, OrderedTree, RedBlackTree


@pytest.fixture
def avl_tree():
    """Provide an empty AVL tree that validates itself after every mutation."""
    return AVLTree(check_invariants=True)


@pytest.fixture
def rb_tree():
    """Provide an empty Red-Black tree that validates itself after every mutation."""
    return RedBlackTree(check_invariants=True)


@pytest.fixture(params=["avl", "red_black"])
def tree(request):
    """Provide an empty self-validating tree for each balance policy."""
    return OrderedTree(request.param, check_invariants=True)


@pytest.fixture
def sample_keys():
    """Provide the classic seven-key balanced sample."""
    return [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def large_sample_keys():
    """Provide a shuffled key sample for stress testing."""
    keys = list(range(2000))
    random.Random(1234).shuffle(keys)
    return keys
