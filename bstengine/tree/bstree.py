from .. import log
from ..exception import NodeNotInTreeError
from .bstnode import BSTNode

# An empty tree is an absent root: every function below that returns a root
# returns None once the last node is gone.

def construct(value):
    """Creates a new leaf node with key value."""
    return BSTNode(value)


def search(root, k):
    """Finds the node with key k. Returns None if k is not found.

    Time complexity: O(h)"""
    x = root
    while x is not None and k != x.key:
        if k < x.key:
            x = x.left
        else:
            x = x.right
    return x


def minimum(x):
    """Finds the node with the minimal key in the subtree rooted at x.

    Time complexity: O(h)"""
    while x.left is not None:
        x = x.left
    return x

def maximum(x):
    """Finds the node with the maximum key in the subtree rooted at x.

    Time complexity: O(h)"""
    while x.right is not None:
        x = x.right
    return x


def root_of(x):
    """Follows the parent links of x up to the root of its tree.

    Time complexity: O(h)"""
    p = x.parent
    while p is not None:
        x = p
        p = x.parent
    return x


def successor(x):
    """Finds the successor of node x in sorted order

    Returns None if x holds the largest key of its tree.
    Time complexity: O(h)"""
    if x.right is not None:
        return minimum(x.right)
    y = x.parent
    while y is not None and x is y.right:
        x = y
        y = y.parent
    return y

def predecessor(x):
    """Finds the predecessor of node x in sorted order

    Returns None if x holds the smallest key of its tree.
    Time complexity: O(h)"""
    if x.left is not None:
        return maximum(x.left)
    y = x.parent
    while y is not None and x is y.left:
        x = y
        y = y.parent
    return y


def insert_node(root, new):
    """Inserts the unlinked node new into the tree rooted at root.

    A node whose key is already in the tree is not inserted; a warning is
    logged and the tree is left untouched.
    Returns the (possibly new) root.
    Time complexity: O(h)"""
    y = None
    x = root
    while x is not None:
        if new.key == x.key:
            log.warn("key ", new.key, " already exists, not inserting")
            return root
        y = x
        if new.key < x.key:
            x = x.left
        else:
            x = x.right

    new.left = None
    new.right = None
    new.parent = y
    if y is None:
        log.debug2("inserted ", new.key, " into empty tree")
        return new
    elif new.key < y.key:
        y.left = new
    else:
        y.right = new
    log.debug3("inserted ", new.key, " below ", y.key)
    return root

def insert(root, k):
    """Inserts key k into the tree rooted at root (which may be None).

    Returns the (possibly new) root."""
    return insert_node(root, construct(k))


def transplant(root, old, new):
    """Replace subtree rooted at node old with the subtree rooted at node new

    new may be None. Returns the root of the tree afterwards, which is new
    if old was the root.
    Time complexity: O(1)"""
    p = old.parent
    if p is None:
        if new is not None:
            new.parent = None
        log.debug2("transplant: root ", old.key, " replaced by ",
                   new.key if new is not None else "nothing")
        return new
    elif old is p.left:
        p.left = new
    else:
        p.right = new
    if new is not None:
        new.parent = p
    return root


def delete(root, z):
    """Delete node z from the tree rooted at root.

    z must be a member of that tree. The in-order successor is moved into
    z's place when z has two children; keys are never copied between nodes.
    z is left fully unlinked.
    Returns the new root, None if the tree is now empty.
    Time complexity: O(h)"""
    if z.left is None:
        root = transplant(root, z, z.right)
    elif z.right is None:
        root = transplant(root, z, z.left)
    else:
        y = minimum(z.right)
        if y.parent is not z:
            root = transplant(root, y, y.right)
            y.right = z.right
            y.right.parent = y
        root = transplant(root, z, y)
        y.left = z.left
        y.left.parent = y
    z.detach()
    log.debug3("deleted ", z.key)
    return root


def inorder(root, f):
    """Does an inorder traversal and calls f(x) for every node x.

    Time complexity: O(n)
    """
    stack = []
    x = root
    while stack or x is not None:
        if x is not None:
            stack.append(x)
            x = x.left
        else:
            x = stack.pop()
            f(x)
            x = x.right

def iter_nodes(root):
    """Yields every node reachable from root in pre-order.

    Nothing is modified, so this is safe to hand to read-only consumers.
    """
    stack = [] if root is None else [root]
    while stack:
        x = stack.pop()
        yield x
        if x.right is not None:
            stack.append(x.right)
        if x.left is not None:
            stack.append(x.left)


class BSTree(object):
    """An unbalanced binary search tree holding distinct integer keys."""

    def __init__(self, keys=None, node_type=BSTNode):
        self.node_type = node_type
        self.root = None
        self._size = 0
        if keys is not None:
            for k in keys:
                self.insert(k)

    def contains(self, k):
        return self.find(k) is not None

    def __contains__(self, k):
        return self.contains(k)

    def find(self, k):
        return search(self.root, k)

    def minimum(self):
        return minimum(self.root) if self.root is not None else None

    def maximum(self):
        return maximum(self.root) if self.root is not None else None

    def successor(self, x):
        return successor(x)

    def predecessor(self, x):
        return predecessor(x)

    def insert(self, k):
        """Insert key k.

        Returns a tuple (node, was_inserted). For a key that is already
        present the existing node is returned together with False."""
        new = self.node_type(k)
        self.root = insert_node(self.root, new)
        if new is self.root or new.parent is not None:
            self._size += 1
            return (new, True)
        return (self.find(k), False)

    def delete(self, node):
        """Removes node from the tree. Returns the removed node."""
        if self.root is None or root_of(node) is not self.root:
            raise NodeNotInTreeError(node)
        self.root = delete(self.root, node)
        self._size -= 1
        return node

    def deletekey(self, k):
        node = self.find(k)
        if node is not None:
            node = self.delete(node)
        return node

    def inorder(self, f):
        inorder(self.root, f)

    def keys(self):
        keys = []
        self.inorder(lambda n: keys.append(n.key))
        return keys

    def __iter__(self):
        nodes = []
        self.inorder(nodes.append)
        return iter(nodes)

    def size(self):
        """Returns the number of nodes stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def __len__(self):
        return self._size

    def is_empty(self):
        return self.root is None
