import pytest

from bintree.tree import Node


def build_sample():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_constructor_sets_links():
    parent = Node(98)
    child = Node(12, parent)
    assert child.value == 12
    assert child.parent is parent
    assert child.left is None and child.right is None
    assert parent.left is None


def test_insert_left_on_empty_slot():
    root = Node(98)
    node = root.insert_left(54)
    assert root.left is node
    assert node.parent is root
    assert node.value == 54
    assert node.left is None


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_left(12)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    old = root.insert_right(402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_is_leaf_and_is_root():
    root = Node(98)
    root.left = Node(12, root)
    root.insert_right(402)
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_root() is True
    assert root.is_leaf() is False
    assert root.right.is_root() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True
    assert root.right.right.is_root() is False


def test_depth_of_root_is_zero():
    assert Node(98).depth() == 0


@pytest.mark.parametrize("path", ["l", "r", "lr", "rrl", "rrr"])
def test_depth_grows_by_one_per_level(path):
    node = build_sample()
    for step in path:
        child = node.left if step == "l" else node.right
        assert child.depth() == node.depth() + 1
        node = child
    assert node.depth() == len(path)


def test_sibling():
    root = build_sample()
    assert root.left.sibling() is root.right
    assert root.right.sibling() is root.left
    assert root.right.left.sibling() is root.right.right
    assert root.left.right.sibling() is root.left.left
    assert root.sibling() is None


def test_sibling_missing_returns_none():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle():
    root = build_sample()
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_delete_detaches_subtree():
    root = build_sample()
    branch = root.right
    grandchild = branch.right
    branch.delete()
    assert root.right is None
    assert root.left is not None and root.left.value == 12
    assert branch.parent is None
    assert branch.left is None and branch.right is None
    assert grandchild.parent is None
    assert grandchild.left is None and grandchild.right is None


def test_delete_root_unlinks_everything():
    root = build_sample()
    leaf = root.left.left
    root.delete()
    assert root.is_leaf() and root.is_root()
    assert leaf.is_root()