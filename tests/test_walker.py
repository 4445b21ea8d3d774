"""
Tests for the iterative value graph walker.
"""

import pytest

from structclone.errors import CloneLimitExceeded
from structclone.examples import build_deep_chain, build_self_referencing_list, build_shared_rows
from structclone.options import CloneLimits
from structclone.values import Attribute, ValueKind
from structclone.walker import walk


def test_preorder_insertion_order():
    """Nodes come out depth-first, first slot first."""
    nodes = list(walk({"a": [1, 2], "b": 3}))
    assert [n.path for n in nodes] == [(), ("a",), ("a", 0), ("a", 1), ("b",)]
    assert [n.depth for n in nodes] == [0, 1, 2, 2, 1]
    assert nodes[0].kind is ValueKind.KEYED


def test_leaf_root():
    nodes = list(walk(42))
    assert len(nodes) == 1
    assert nodes[0].kind is ValueKind.PRIMITIVE
    assert nodes[0].path == ()


def test_shared_container_not_expanded_twice():
    source = build_shared_rows(2)
    nodes = list(walk(source))
    second = [n for n in nodes if n.path == (1,)][0]
    assert second.shared
    assert not second.cycle
    # root + row + 3 cells + second reference to the row
    assert len(nodes) == 6


def test_cycle_flagged():
    nodes = list(walk(build_self_referencing_list()))
    back = nodes[-1]
    assert back.path == (2,)
    assert back.cycle
    assert back.shared


def test_sibling_reuse_is_not_a_cycle():
    """A row referenced by two siblings is shared, not cyclic."""
    row = [1]
    nodes = list(walk({"a": row, "b": row}))
    assert not any(n.cycle for n in nodes)


def test_deep_chain_without_recursion():
    nodes = list(walk(build_deep_chain(3000)))
    assert max(n.depth for n in nodes) == 3001


def test_depth_limit():
    with pytest.raises(CloneLimitExceeded) as excinfo:
        list(walk(build_deep_chain(4), limits=CloneLimits(max_depth=2)))
    assert excinfo.value.limit == "max_depth"
    assert excinfo.value.maximum == 2
    assert excinfo.value.path == (0, 0, 0)


def test_node_limit():
    with pytest.raises(CloneLimitExceeded, match=r"max_nodes of 3 exceeded at \$\[2\]"):
        list(walk([1, 2, 3], limits=CloneLimits(max_nodes=3)))


class _Box:
    def __init__(self, content):
        self.content = content


def test_objects_are_leaves_by_default():
    nodes = list(walk([_Box([1])]))
    assert [n.path for n in nodes] == [(), (0,)]
    assert nodes[1].kind is ValueKind.OBJECT


def test_object_attributes_expanded_on_request():
    box = _Box({"n": 1})
    nodes = list(walk([box], objects=True))
    assert [n.path for n in nodes] == [
        (),
        (0,),
        (0, Attribute("content")),
        (0, Attribute("content"), "n"),
    ]


def test_object_self_reference_is_a_cycle():
    box = _Box(None)
    box.content = box
    nodes = list(walk(box, objects=True))
    assert len(nodes) == 2
    assert nodes[1].cycle
