import os

from oslab.forktree import Node, process_tree, run_tree, walk


def test_walk_order_matches_creation_order():
    names = [node.name for node in walk(process_tree())]
    assert names == ["P1", "P2", "P9", "P3", "P7", "P4", "P6", "P5", "P8"]


def test_tree_shape():
    root = process_tree()
    assert root.name == "P1"
    p2 = root.children[0]
    assert [c.name for c in p2.children] == ["P9", "P3", "P5"]
    leaves = [n.name for n in walk(root) if not n.children]
    assert sorted(leaves) == ["P6", "P7", "P8", "P9"]


def test_walk_single_node():
    leaf = Node("X")
    assert list(walk(leaf)) == [leaf]


def test_run_tree_reports_every_process_in_order():
    written = []
    results = run_tree(written.append)
    expected = [node.name for node in walk(process_tree())]
    assert [name for name, _ in results] == expected
    assert written == [str(pid) for _, pid in results]


def test_run_tree_root_is_current_process_and_pids_are_distinct():
    results = run_tree(lambda text: None)
    pids = [pid for _, pid in results]
    assert pids[0] == os.getpid()
    assert len(set(pids)) == len(pids)
    assert os.getpid() not in pids[1:]