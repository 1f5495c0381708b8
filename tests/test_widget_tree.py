"""
Tests for the depth-first widget search
"""

from utils.widget_tree import find_widgets


class Node:
    def __init__(self, name, *children):
        self.name = name
        self.children = list(children)


def _children(node):
    return node.children


def test_collects_nested_matches_in_preorder():
    tree = Node("root",
                Node("group1", Node("img1"), Node("text"), Node("group2", Node("img2"))),
                Node("img3"))
    found = find_widgets(tree, lambda n: n.name.startswith("img"), _children)
    assert [n.name for n in found] == ["img1", "img2", "img3"]


def test_root_is_not_tested():
    tree = Node("img-root", Node("leaf"))
    assert find_widgets(tree, lambda n: n.name.startswith("img"), _children) == []


def test_matching_container_is_still_descended():
    tree = Node("root", Node("img-group", Node("img-child")))
    found = find_widgets(tree, lambda n: n.name.startswith("img"), _children)
    assert [n.name for n in found] == ["img-group", "img-child"]


def test_empty_tree():
    assert find_widgets(Node("root"), lambda n: True, _children) == []
