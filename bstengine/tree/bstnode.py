import numbers
import weakref

from ..exception import InvalidKeyError

def _check_key(k):
    if k is None or isinstance(k, bool) or not isinstance(k, numbers.Integral):
        raise InvalidKeyError(k)
    return k

class BSTNode(object):
    """A node of an unbalanced binary search tree.

    left and right own their subtrees. parent is only a weak reference back
    up the tree, so a subtree never keeps its ancestors alive.
    """

    def __init__(self, k):
        self.key = _check_key(k)

        self.left = None
        self.right = None
        self._parent = None

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node):
        if node is None:
            self._parent = None
        else:
            self._parent = weakref.ref(node)

    def is_root(self):
        return self.parent is None

    def is_leaf(self):
        return self.left is None and self.right is None

    def detach(self):
        """Drop every link of this node."""
        self.left = None
        self.right = None
        self._parent = None

    def __repr__(self):
        return "BSTNode({0!r})".format(self.key)
