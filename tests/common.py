from bstengine.tree import bstree

SAMPLE_KEYS = [15, 6, 18, 17, 20, 3, 7, 2, 4, 13, 9]


def build(keys):
    root = None
    for k in keys:
        root = bstree.insert(root, k)
    return root


def keys_of(root):
    keys = []
    bstree.inorder(root, lambda n: keys.append(n.key))
    return keys


def shape(node):
    if node is None:
        return None
    return (node.key, shape(node.left), shape(node.right))


def check_tree(root):
    """Assert ordering and parent consistency for every node under root."""
    if root is None:
        return
    assert root.parent is None
    stack = [(root, None, None)]
    while stack:
        x, lo, hi = stack.pop()
        if lo is not None:
            assert x.key > lo
        if hi is not None:
            assert x.key < hi
        if x.left is not None:
            assert x.left.parent is x
            stack.append((x.left, lo, x.key))
        if x.right is not None:
            assert x.right.parent is x
            stack.append((x.right, x.key, hi))
