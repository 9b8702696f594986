"""A binary search tree laid out and drawn on a character screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from condraw.connect import link
from condraw.rectangle import draw_box
from condraw.screen import Screen

BOX_WIDTH = 6
BOX_HEIGHT = 2
X_PADDING = 25
Y_STEP = 5
X_SHRINK = 3
UP_CONNECTOR = 193
DOWN_CONNECTOR = 194

_BOX_OFFSET = 3


@dataclass(eq=False)
class Node:
    """A tree node holding a value and its screen position."""

    value: int
    x: int
    y: int
    left: Node | None = None
    right: Node | None = None


class BinaryTree:
    """A binary search tree whose nodes are placed for drawing as they are inserted.

    A node at depth ``d`` sits ``X_PADDING - 3 * d`` columns to the side of
    its parent and ``5 * d`` rows below the root. Duplicate values are ignored.
    """

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.x = x
        self.y = y
        self.root: Node | None = None

    def set_root(self, value: int, x: int, y: int) -> None:
        """Replace the whole tree with a single root at ``(x, y)``."""
        self.root = Node(value, x, y)

    def insert(self, value: int) -> None:
        """Insert ``value``, placing a new root at the tree's own position."""
        if self.root is None:
            self.root = Node(value, self.x, self.y)
            return
        node = self.root
        level = 0
        while value != node.value:
            level += 1
            go_left = value < node.value
            child = node.left if go_left else node.right
            if child is None:
                offset = X_PADDING - level * X_SHRINK
                x = node.x - offset if go_left else node.x + offset
                new = Node(value, x, self.root.y + level * Y_STEP)
                if go_left:
                    node.left = new
                else:
                    node.right = new
                return
            node = child

    def draw(self, screen: Screen) -> None:
        """Draw every node in a box, linked to its parent, right subtrees first."""
        if self.root is None:
            return
        stack: list[tuple[Node, Node | None]] = [(self.root, None)]
        while stack:
            node, parent = stack.pop()
            draw_box(
                screen,
                node.x - _BOX_OFFSET,
                node.y - _BOX_OFFSET,
                BOX_WIDTH,
                BOX_HEIGHT,
                str(node.value),
            )
            if parent is not None:
                top = node.y - BOX_HEIGHT - 1
                link(screen, parent.x, parent.y, node.x, top)
                screen.put(node.x, top, UP_CONNECTOR)
                screen.put(parent.x, parent.y - 1, DOWN_CONNECTOR)
            if node.left is not None:
                stack.append((node.left, node))
            if node.right is not None:
                stack.append((node.right, node))

    def clear(self) -> None:
        """Remove every node."""
        self.root = None

    def _right_spine(self) -> Iterator[Node]:
        node = self.root
        while node is not None:
            yield node
            node = node.right

    def is_full(self) -> bool:
        """Return False if a node on the root's right spine has exactly one child."""
        return all((node.left is None) == (node.right is None) for node in self._right_spine())

    def is_complete(self) -> bool:
        """Return True if the right spine has no right-only node and ends in a left-only node."""
        for node in self._right_spine():
            if node.left is None and node.right is not None:
                return False
            if node.right is None:
                return node.left is not None
        return False