import gzip

import pytest

from bstengine.dot import to_dot, write_dot
from bstengine.exception import DotExportError
from bstengine.tree import bstree

from common import SAMPLE_KEYS, build, shape


def test_dot_lists_every_node_and_side():
    root = build(SAMPLE_KEYS)
    text = to_dot(root)
    assert text.startswith("digraph bst {\n")
    assert text.endswith("}\n")
    for k in SAMPLE_KEYS:
        assert 'n{0} [label="{0}"];'.format(k) in text
    assert 'n15 -> n6 [label="L"];' in text
    assert 'n15 -> n18 [label="R"];' in text
    assert 'n13 -> n9 [label="L"];' in text
    # 7 only has a right child, so its left side gets a placeholder
    assert 'n7 -> nil0 [style=invis];' in text
    assert "dashed" not in text


def test_dot_parent_edges():
    root = build([2, 1, 3])
    text = to_dot(root, show_parents=True)
    assert 'n1 -> n2 [style=dashed, color=gray];' in text
    assert 'n3 -> n2 [style=dashed, color=gray];' in text


def test_dot_negative_keys_and_empty_tree():
    assert 'nm5 [label="-5"];' in to_dot(build([-5]))
    assert to_dot(None, name="empty") == \
        "digraph empty {\n    node [shape=circle];\n}\n"


def test_dot_export_does_not_modify_tree():
    root = build(SAMPLE_KEYS)
    before = shape(root)
    to_dot(root, show_parents=True)
    assert shape(root) == before
    assert bstree.root_of(bstree.minimum(root)) is root


def test_write_dot(tmp_path):
    root = build(SAMPLE_KEYS)
    plain = tmp_path / "tree.dot"
    write_dot(root, str(plain))
    assert plain.read_text() == to_dot(root)

    packed = tmp_path / "tree.dot.gz"
    write_dot(root, str(packed))
    with gzip.open(str(packed), "rt") as f:
        assert f.read() == to_dot(root)


def test_write_dot_failure(tmp_path):
    with pytest.raises(DotExportError) as e:
        write_dot(build([1]), str(tmp_path / "missing" / "tree.dot"))
    assert "tree.dot" in str(e.value)
