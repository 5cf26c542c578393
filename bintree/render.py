"""Text rendering of a binary tree as an ASCII diagram."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.measures import height
from bintree.tree import Node


class _Canvas:
    def __init__(self, rows: int) -> None:
        self.rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, col: int, char: str) -> None:
        if col < 0:
            return
        line = self.rows[row]
        if col >= len(line):
            line.extend(" " * (col + 1 - len(line)))
        line[col] = char

    def lines(self) -> list[str]:
        result = []
        for chars in self.rows:
            line = "".join(chars)
            result.append(line[:2] + line[2:].rstrip(" "))
        return result


def _draw(node: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _draw(node.left, offset, depth + 1, canvas)
    right = _draw(node.right, offset + left + width, depth + 1, canvas)
    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)
    if depth:
        if is_left:
            start, count = offset + left + width // 2, width + right
        else:
            start, count = offset - width // 2, left + width
        for i in range(count):
            canvas.put(depth - 1, start + i, "-")
        canvas.put(depth - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[Node]) -> str:
    """Return the diagram of the tree, one newline-terminated line per level."""
    if tree is None:
        return ""
    canvas = _Canvas(height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the diagram of the tree to file (standard output by default)."""
    (file if file is not None else sys.stdout).write(render(tree))