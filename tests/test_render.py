from llrbtree.render import save_tree_png, tree_to_dot
from llrbtree.tree import Tree


def _build(items):
    tree = Tree()
    for key, value in items:
        tree.insert(key, value)
    return tree


def test_empty_graph():
    text = tree_to_dot(Tree())
    assert text.startswith("graph LLRB {")
    assert text.rstrip().endswith("}")
    assert "label" not in text


def test_single_black_node():
    text = tree_to_dot(_build([(5, "five")]))
    assert 'label="5: five"' in text
    assert 'fillcolor="#DDDDDD"' in text
    assert 'style="filled,rounded"' in text
    assert " -- " not in text


def test_red_child_and_edge():
    text = tree_to_dot(_build([(1, "a"), (2, "b")]))
    assert 'fillcolor="#FFDDDD"' in text
    edges = [line for line in text.splitlines() if " -- " in line]
    assert len(edges) == 1
    assert 'color="red"' in edges[0]
    assert 'penwidth="1.5"' in edges[0]


def test_edge_count_is_nodes_minus_one():
    tree = _build((k, str(k)) for k in range(30))
    lines = tree_to_dot(tree).splitlines()
    nodes = [line for line in lines if "label=" in line]
    edges = [line for line in lines if " -- " in line]
    assert len(nodes) == len(tree)
    assert len(edges) == len(tree) - 1


def test_label_quoting():
    text = tree_to_dot(_build([(1, 'a"b')]))
    assert 'label="1: a\\"b"' in text


def test_png_written(tmp_path):
    path = tmp_path / "llrb.png"
    save_tree_png(_build((k, str(k)) for k in range(10)), path)
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_png_of_empty_tree(tmp_path):
    path = tmp_path / "empty.png"
    save_tree_png(Tree(), path)
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"