"""Binary and n-ary tree traversals."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """Node of a binary tree."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass
class NaryNode:
    """Node of a tree whose nodes may have any number of children."""

    val: int
    children: list[NaryNode | None] = field(default_factory=list)


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Values in left, node, right order."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def level_order(root: NaryNode | None) -> list[list[int]]:
    """Values grouped by depth, each level left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    queue = deque([root])
    while queue:
        level: list[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            queue.extend(child for child in node.children if child is not None)
        levels.append(level)
    return levels


def vertical_traversal(root: TreeNode | None) -> list[list[int]]:
    """Values grouped by column from left to right.

    Within a column, nodes come top to bottom; nodes sharing a row and a
    column are ordered by value.
    """
    if root is None:
        return []
    columns: defaultdict[int, list[int]] = defaultdict(list)
    level: list[tuple[TreeNode, int]] = [(root, 0)]
    while level:
        for val, column in sorted((node.val, column) for node, column in level):
            columns[column].append(val)
        level = [
            (child, column + offset)
            for node, column in level
            for child, offset in ((node.left, -1), (node.right, 1))
            if child is not None
        ]
    return [columns[column] for column in sorted(columns)]