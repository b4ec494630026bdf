import gc

import pytest

from bstengine.exception import InvalidKeyError
from bstengine.tree import bstree
from bstengine.tree.bstnode import BSTNode

from common import SAMPLE_KEYS, build


def test_construct_makes_a_lone_leaf():
    x = bstree.construct(5)
    assert x.key == 5
    assert x.left is None and x.right is None and x.parent is None
    assert x.is_root() and x.is_leaf()
    assert repr(x) == "BSTNode(5)"


@pytest.mark.parametrize("key", [None, "5", 1.5, True])
def test_non_integer_keys_are_rejected(key):
    with pytest.raises(InvalidKeyError):
        BSTNode(key)


def test_insert_none_is_rejected():
    root = build([1, 2])
    with pytest.raises(InvalidKeyError):
        bstree.insert(root, None)


def test_parent_assignment_and_clearing():
    p = BSTNode(2)
    c = BSTNode(1)
    c.parent = p
    assert c.parent is p
    assert not c.is_root()
    c.parent = None
    assert c.parent is None


def test_parent_link_does_not_keep_parent_alive():
    p = BSTNode(2)
    c = BSTNode(1)
    c.parent = p
    del p
    gc.collect()
    assert c.parent is None


def test_dropping_the_root_frees_the_tree():
    root = build(SAMPLE_KEYS)
    leaf = bstree.search(root, 2)
    parent_key = leaf.parent.key
    assert parent_key == 3
    del root
    gc.collect()
    # ancestors of the retained leaf were only owned through the root
    assert leaf.parent is None
    assert bstree.root_of(leaf) is leaf


def test_detach_clears_every_link():
    root = build([2, 1, 3])
    root.detach()
    assert root.is_leaf() and root.is_root()
