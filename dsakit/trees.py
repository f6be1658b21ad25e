"""Binary trees: traversals, measurements, transformations and a text format."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_NULL = "null"


@dataclass(eq=False)
class TreeNode:
    """Node of a binary tree; nodes compare by identity."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Values level by level, each level from left to right."""
    return [[node.value for node in level] for level in _levels(root)]


def zigzag_level_order(root: TreeNode | None) -> list[list[Any]]:
    """Values level by level, alternating left-to-right and right-to-left."""
    result = []
    for depth, level in enumerate(_levels(root)):
        values = [node.value for node in level]
        result.append(values if depth % 2 == 0 else values[::-1])
    return result


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def _height_and_diameter(node: TreeNode | None) -> tuple[int, int]:
    if node is None:
        return 0, 0
    left_height, left_best = _height_and_diameter(node.left)
    right_height, right_best = _height_and_diameter(node.right)
    best = max(left_best, right_best, left_height + right_height)
    return 1 + max(left_height, right_height), best


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    return _height_and_diameter(root)[1]


def _balanced_height(node: TreeNode | None) -> tuple[int, bool]:
    if node is None:
        return 0, True
    left_height, left_ok = _balanced_height(node.left)
    right_height, right_ok = _balanced_height(node.right)
    ok = left_ok and right_ok and abs(left_height - right_height) <= 1
    return 1 + max(left_height, right_height), ok


def is_balanced(root: TreeNode | None) -> bool:
    """True when no node's subtrees differ in height by more than one."""
    return _balanced_height(root)[1]


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode, q: TreeNode
) -> TreeNode | None:
    """Deepest node having both ``p`` and ``q`` as descendants (or itself)."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def tree_paths(root: TreeNode | None) -> list[str]:
    """Every root-to-leaf path, written as values joined by ``->``."""
    paths: list[str] = []

    def walk(node: TreeNode | None, prefix: str) -> None:
        if node is None:
            return
        path = prefix + str(node.value)
        if node.left is None and node.right is None:
            paths.append(path)
        else:
            walk(node.left, path + "->")
            walk(node.right, path + "->")

    walk(root, "")
    return paths


def _is_mirror(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.value == right.value
        and _is_mirror(left.left, right.right)
        and _is_mirror(left.right, right.left)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """True when the tree is a mirror image of itself."""
    return root is None or _is_mirror(root.left, root.right)


def invert(root: TreeNode | None) -> TreeNode | None:
    """Swap the children of every node in place and return the root."""
    if root is not None:
        root.left, root.right = invert(root.right), invert(root.left)
    return root


def max_path_sum(root: TreeNode | None) -> Any:
    """Largest sum of values along any path between two nodes."""
    if root is None:
        raise ValueError("max_path_sum() needs a non-empty tree")
    best = root.value

    def gain(node: TreeNode | None) -> Any:
        nonlocal best
        if node is None:
            return 0
        left = max(0, gain(node.left))
        right = max(0, gain(node.right))
        best = max(best, left + right + node.value)
        return max(left, right) + node.value

    gain(root)
    return best


def vertical_order(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped by column from left to right, top to bottom in each."""
    columns: defaultdict[int, list[Any]] = defaultdict(list)
    pending: deque[tuple[TreeNode, int]] = deque()
    if root is not None:
        pending.append((root, 0))
    while pending:
        node, column = pending.popleft()
        columns[column].append(node.value)
        if node.left is not None:
            pending.append((node.left, column - 1))
        if node.right is not None:
            pending.append((node.right, column + 1))
    return [columns[column] for column in sorted(columns)]


def serialize(root: TreeNode | None) -> str:
    """Comma-separated preorder listing with ``null`` for missing children."""
    if root is None:
        return _NULL
    return f"{root.value},{serialize(root.left)},{serialize(root.right)}"


def deserialize(data: str) -> TreeNode | None:
    """Rebuild an integer tree from the text that :func:`serialize` writes."""
    tokens = iter(data.split(","))

    def build() -> TreeNode | None:
        token = next(tokens, None)
        if token is None:
            raise ValueError("serialized tree ends too early")
        if token == _NULL:
            return None
        try:
            value = int(token)
        except ValueError:
            raise ValueError(f"bad token {token!r} in serialized tree") from None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()