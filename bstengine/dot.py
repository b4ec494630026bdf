import gzip

from . import log
from .exception import DotExportError
from .tree.bstree import iter_nodes

def _open(filename, mode):
    if filename.endswith(".gz"):
        return gzip.open(filename, mode + 't', encoding="utf-8")
    return open(filename, mode, encoding="utf-8")

def _node_id(node):
    # negative keys would not make valid graphviz ids
    if node.key < 0:
        return "nm" + str(-node.key)
    return "n" + str(node.key)

def to_dot(root, name="bst", show_parents=False):
    """Render the tree rooted at root as a graphviz digraph.

    Children are labelled L or R. If a node has only one child, an invisible
    placeholder is drawn on the other side so the child keeps its side.
    """
    lines = ["digraph " + name + " {",
             "    node [shape=circle];"]
    nil_count = 0
    for x in iter_nodes(root):
        xid = _node_id(x)
        lines.append('    {0} [label="{1}"];'.format(xid, x.key))
        if x.left is None and x.right is None:
            continue
        for side, child in (("L", x.left), ("R", x.right)):
            if child is None:
                nil = "nil" + str(nil_count)
                nil_count += 1
                lines.append('    {0} [shape=point, style=invis];'.format(nil))
                lines.append('    {0} -> {1} [style=invis];'.format(xid, nil))
            else:
                lines.append('    {0} -> {1} [label="{2}"];'.format(
                    xid, _node_id(child), side))
        if show_parents:
            for child in (x.left, x.right):
                if child is not None and child.parent is x:
                    lines.append(
                        '    {0} -> {1} [style=dashed, color=gray];'.format(
                            _node_id(child), xid))
    lines.append("}")
    return '\n'.join(lines) + '\n'

def write_dot(root, filename, name="bst", show_parents=False):
    log.debug1("writing tree graph to ", filename)
    try:
        with _open(filename, "w") as f:
            f.write(to_dot(root, name=name, show_parents=show_parents))
    except OSError as e:
        raise DotExportError(filename, e.strerror or e)
