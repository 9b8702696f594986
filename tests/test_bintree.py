import pytest

from condraw.bintree import (
    BOX_HEIGHT,
    DOWN_CONNECTOR,
    UP_CONNECTOR,
    X_PADDING,
    BinaryTree,
    Node,
)
from condraw.screen import Screen, glyph


def _in_order(node):
    if node is None:
        return []
    return _in_order(node.left) + [node.value] + _in_order(node.right)


def _tree(values, x=40, y=5):
    tree = BinaryTree(x, y)
    for value in values:
        tree.insert(value)
    return tree


def test_first_insert_places_root_at_tree_position():
    tree = _tree([50], x=12, y=4)
    assert (tree.root.value, tree.root.x, tree.root.y) == (50, 12, 4)
    assert tree.root.left is None and tree.root.right is None


@pytest.mark.parametrize("values", [[5, 3, 8, 1, 4, 7, 9], [10, 20, 30], [3, 2, 1], [4, 4, 2, 2, 6]])
def test_in_order_is_sorted_without_duplicates(values):
    tree = _tree(values)
    assert _in_order(tree.root) == sorted(set(values))


def test_children_are_symmetric_around_parent():
    tree = _tree([50, 30, 70])
    root, left, right = tree.root, tree.root.left, tree.root.right
    assert root.x - left.x == right.x - root.x
    assert left.y == right.y
    assert left.y > root.y


def test_first_level_offset_pinned():
    tree = _tree([50, 30], x=40, y=5)
    assert tree.root.left.x == 18
    assert tree.root.left.x < tree.root.x - X_PADDING + 5


def test_offsets_shrink_with_depth():
    tree = _tree([50, 30, 20])
    child, grandchild = tree.root.left, tree.root.left.left
    assert tree.root.x - child.x > child.x - grandchild.x
    assert grandchild.y - child.y == child.y - tree.root.y


def test_set_root_replaces_tree():
    tree = _tree([50, 30, 70])
    tree.set_root(9, 1, 2)
    assert _in_order(tree.root) == [9]
    assert (tree.root.x, tree.root.y) == (1, 2)


def test_clear_then_insert_uses_tree_position():
    tree = _tree([50, 30], x=33, y=7)
    tree.clear()
    assert tree.root is None
    tree.insert(8)
    assert (tree.root.value, tree.root.x, tree.root.y) == (8, 33, 7)


def test_is_full_cases():
    assert BinaryTree().is_full() is True
    assert _tree([5]).is_full() is True
    assert _tree([5, 3]).is_full() is False
    assert _tree([5, 3, 8]).is_full() is True
    assert _tree([5, 3, 8, 9]).is_full() is False


def test_is_full_only_inspects_right_spine():
    assert _tree([5, 3, 8, 1]).is_full() is True


def test_is_complete_cases():
    assert BinaryTree().is_complete() is False
    assert _tree([5]).is_complete() is False
    assert _tree([5, 3]).is_complete() is True
    assert _tree([5, 8]).is_complete() is False
    assert _tree([5, 3, 8]).is_complete() is False
    assert _tree([5, 3, 8, 7]).is_complete() is True


def test_draw_empty_tree_leaves_screen_blank():
    screen = Screen()
    BinaryTree().draw(screen)
    assert screen.render().strip() == ""


def test_draw_writes_value_in_box():
    screen = Screen()
    tree = _tree([50], x=40, y=5)
    tree.draw(screen)
    assert screen.char_at(37, 2) == glyph(218)
    assert "50" in screen.render()


def test_draw_connects_child_to_parent():
    screen = Screen()
    tree = _tree([50, 30], x=40, y=5)
    tree.draw(screen)
    root, child = tree.root, tree.root.left
    assert screen.char_at(child.x, child.y - BOX_HEIGHT - 1) == glyph(UP_CONNECTOR)
    assert screen.char_at(root.x, root.y - 1) == glyph(DOWN_CONNECTOR)
    assert "30" in screen.render()


def test_node_defaults_have_no_children():
    node = Node(1, 2, 3)
    assert node.left is None and node.right is None
    assert (node.value, node.x, node.y) == (1, 2, 3)