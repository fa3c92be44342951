"""Left-leaning red-black tree keyed by integers with string values."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike


class Color(enum.Enum):
    """Colour of the link from a node's parent to the node."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node:
    """A single tree node."""

    key: int
    value: str
    color: Color = Color.RED
    left: Node | None = None
    right: Node | None = None


class TreeLoadError(Exception):
    """Raised when a tree cannot be loaded from a text file."""


class ParseError(TreeLoadError):
    """Raised when a key line in a tree file is not a number."""


class ReadError(TreeLoadError):
    """Raised when a key in a tree file has no value line after it."""


def _is_red(node: Node | None) -> bool:
    return node is not None and node.color is Color.RED


def _toggle(node: Node | None) -> None:
    if node is not None:
        node.color = Color.BLACK if node.color is Color.RED else Color.RED


def _rotate_left(old_parent: Node | None) -> Node | None:
    if old_parent is None or old_parent.right is None:
        return old_parent
    new_parent = old_parent.right
    old_parent.right = new_parent.left
    new_parent.left = old_parent
    new_parent.color = old_parent.color
    old_parent.color = Color.RED
    return new_parent


def _rotate_right(old_parent: Node | None) -> Node | None:
    if old_parent is None or old_parent.left is None:
        return old_parent
    new_parent = old_parent.left
    old_parent.left = new_parent.right
    new_parent.right = old_parent
    new_parent.color = old_parent.color
    old_parent.color = Color.RED
    return new_parent


def _flip_colors(h: Node | None) -> None:
    if h is None:
        return
    _toggle(h)
    _toggle(h.left)
    _toggle(h.right)


def _move_red_left(h: Node | None) -> Node | None:
    if h is None or h.right is None:
        return h
    _flip_colors(h)
    if _is_red(h.right.left):
        h.right = _rotate_right(h.right)
        h = _rotate_left(h)
        _flip_colors(h)
    return h


def _move_red_right(h: Node | None) -> Node | None:
    if h is None or h.left is None:
        return h
    _flip_colors(h)
    if _is_red(h.left.left):
        h = _rotate_right(h)
        _flip_colors(h)
    return h


def _fix_up(h: Node | None) -> Node | None:
    if h is None:
        return None
    if _is_red(h.right):
        h = _rotate_left(h)
    if _is_red(h.left) and _is_red(h.left.left):
        h = _rotate_right(h)
    if _is_red(h.left) and _is_red(h.right):
        _flip_colors(h)
    return h


def _min_node(h: Node) -> Node:
    while h.left is not None:
        h = h.left
    return h


def _delete_min(h: Node | None) -> Node | None:
    if h is None or h.left is None:
        return None
    if not _is_red(h.left) and not _is_red(h.left.left):
        h = _move_red_left(h)
    h.left = _delete_min(h.left)
    return _fix_up(h)


def _delete(h: Node | None, key: int) -> tuple[Node | None, bool]:
    if h is None:
        return None, False
    if key < h.key:
        if h.left is not None and not _is_red(h.left) and not _is_red(h.left.left):
            h = _move_red_left(h)
        h.left, deleted = _delete(h.left, key)
    else:
        if _is_red(h.left):
            h = _rotate_right(h)
        if key == h.key and h.right is None:
            return None, True
        if h.right is not None and not _is_red(h.right) and not _is_red(h.right.left):
            h = _move_red_right(h)
        if key == h.key:
            successor = _min_node(h.right)
            h.key, h.value = successor.key, successor.value
            h.right = _delete_min(h.right)
            deleted = True
        else:
            h.right, deleted = _delete(h.right, key)
    return _fix_up(h), deleted


class Tree:
    """An ordered map from integer keys to string values."""

    def __init__(self) -> None:
        self.root: Node | None = None
        self._size = 0

    def insert(self, key: int, value: str) -> None:
        """Insert a key, replacing the value if the key is already present."""
        self.root = self._insert(self.root, key, value)
        self.root.color = Color.BLACK

    def _insert(self, node: Node | None, key: int, value: str) -> Node:
        if node is None:
            self._size += 1
            return Node(key, value)
        if key < node.key:
            node.left = self._insert(node.left, key, value)
        elif key > node.key:
            node.right = self._insert(node.right, key, value)
        else:
            node.value = value
            return node
        if _is_red(node.right) and not _is_red(node.left):
            node = _rotate_left(node)
        if _is_red(node.left) and _is_red(node.left.left):
            node = _rotate_right(node)
        if _is_red(node.left) and _is_red(node.right):
            _flip_colors(node)
        return node

    def delete(self, key: int) -> bool:
        """Remove a key; return whether it was present."""
        if self.root is None:
            return False
        self.root, deleted = _delete(self.root, key)
        if self.root is not None:
            self.root.color = Color.BLACK
        if deleted:
            self._size -= 1
        return deleted

    def search(self, key: int) -> Node | None:
        """Return the node holding key, or None."""
        current = self.root
        while current is not None:
            if current.key < key:
                current = current.right
            elif current.key > key:
                current = current.left
            else:
                return current
        return None

    def lower_bound(self, key: int) -> Node | None:
        """Return the node with key, else the one with the greatest smaller key."""
        result = None
        current = self.root
        while current is not None:
            if current.key == key:
                return current
            if current.key < key:
                result = current
                current = current.right
            else:
                current = current.left
        return result

    def inorder(self) -> Iterator[Node]:
        """Yield nodes from the greatest key to the smallest."""
        stack: list[Node] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.right
            current = stack.pop()
            yield current
            current = current.left

    def format_inorder(self) -> str:
        """Render the descending traversal as 'key(C) ' items."""
        return "".join(
            f"{node.key}({'R' if node.color is Color.RED else 'B'}) "
            for node in self.inorder()
        )

    def format(self) -> str:
        """Render the tree as indented lines, one node per line."""
        lines: list[str] = []

        def walk(node: Node, prefix: str, is_left: bool) -> None:
            branch = "├──" if is_left else "└──"
            color = "R" if node.color is Color.RED else "B"
            lines.append(f"{prefix}{branch}{node.key},{color}\n")
            child_prefix = prefix + ("|   " if is_left else "    ")
            if node.left is not None:
                walk(node.left, child_prefix, True)
            if node.right is not None:
                walk(node.right, child_prefix, False)

        if self.root is not None:
            walk(self.root, "", False)
        return "".join(lines)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        """Yield nodes in ascending key order."""
        stack: list[Node] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current
            current = current.right


_KEY_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")
_ULONG_MAX = 2**64 - 1


def _parse_key(text: str) -> int:
    if text == "":
        return 0
    match = _KEY_RE.fullmatch(text)
    if match is None:
        raise ParseError(f"invalid key {text!r}")
    sign, digits = match.groups()
    magnitude = int(digits)
    if magnitude > _ULONG_MAX:
        value = _ULONG_MAX
    else:
        value = (-magnitude if sign == "-" else magnitude) % 2**64
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def load_tree_from_text_file(path: str | PathLike[str]) -> Tree:
    """Build a tree from a file of alternating key and value lines."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise TreeLoadError(f"failed to open file '{path}'") from exc

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()

    tree = Tree()
    rows = iter(lines)
    for key_line in rows:
        key = _parse_key(key_line)
        value = next(rows, None)
        if value is None:
            raise ReadError(f"no value for key {key}")
        tree.insert(key, value)
    return tree