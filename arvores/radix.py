"""Radix (compressed prefix) tree mapping string keys to values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class _Node:
    key: str
    value: Any = None
    terminal: bool = False
    children: dict[str, _Node] = field(default_factory=dict)

    def sorted_children(self) -> list[_Node]:
        return [self.children[c] for c in sorted(self.children)]

    def absorb_only_child(self) -> None:
        child = next(iter(self.children.values()))
        self.key += child.key
        self.value = child.value
        self.terminal = child.terminal
        self.children = child.children


def _common_prefix_length(a: str, b: str) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def _insert(node: _Node, key: str, value: Any) -> bool:
    common = _common_prefix_length(node.key, key)
    if common == len(node.key):
        if common == len(key):
            added = not node.terminal
            node.terminal = True
            node.value = value
            return added
        rest = key[common:]
        child = node.children.get(rest[0])
        if child is None:
            node.children[rest[0]] = _Node(rest, value, True)
            return True
        return _insert(child, rest, value)

    tail = _Node(node.key[common:], node.value, node.terminal, node.children)
    node.key = node.key[:common]
    node.value = None
    node.terminal = False
    node.children = {tail.key[0]: tail}
    if common == len(key):
        node.value = value
        node.terminal = True
    else:
        rest = key[common:]
        node.children[rest[0]] = _Node(rest, value, True)
    return True


def _find(node: _Node, key: str) -> _Node | None:
    while True:
        common = _common_prefix_length(node.key, key)
        if common != len(node.key):
            return None
        if common == len(key):
            return node if node.terminal else None
        key = key[common:]
        child = node.children.get(key[0])
        if child is None:
            return None
        node = child


def _delete(node: _Node, key: str) -> tuple[_Node | None, bool]:
    common = _common_prefix_length(node.key, key)
    if common != len(node.key):
        return node, False
    if common == len(key):
        if not node.terminal:
            return node, False
        node.terminal = False
        node.value = None
        if not node.children:
            return None, True
        if len(node.children) == 1:
            node.absorb_only_child()
        return node, True

    rest = key[common:]
    deleted = False
    child = node.children.get(rest[0])
    if child is not None:
        new_child, deleted = _delete(child, rest)
        if new_child is None:
            del node.children[rest[0]]
    if not node.terminal and len(node.children) == 1:
        node.absorb_only_child()
    return node, deleted


class RadixTree:
    """Map from strings to values stored as a compressed prefix tree."""

    def __init__(self) -> None:
        self._root = _Node("")
        self._size = 0

    def insert(self, key: str, value: Any) -> bool:
        """Store a value; return True if the key is new, False if it was replaced."""
        added = _insert(self._root, key, value)
        if added:
            self._size += 1
        return added

    def search(self, key: str) -> Any:
        """Return the value stored for key, or None if the key is absent."""
        node = _find(self._root, key)
        return None if node is None else node.value

    def delete(self, key: str) -> bool:
        """Remove a key; return whether it was present."""
        root, deleted = _delete(self._root, key)
        self._root = root if root is not None else _Node("")
        if deleted:
            self._size -= 1
        return deleted

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield (key, value) pairs, shorter prefixes first, siblings by character."""

        def walk(node: _Node, prefix: str) -> Iterator[tuple[str, Any]]:
            full = prefix + node.key
            if node.terminal:
                yield full, node.value
            for child in node.sorted_children():
                yield from walk(child, full)

        yield from walk(self._root, "")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and _find(self._root, key) is not None

    def render(self) -> str:
        """Describe the tree structure, one node per line, indented by depth."""
        lines = [f"Radix Tree (size: {self._size}):"]

        def walk(node: _Node, prefix: str, depth: int) -> None:
            full = prefix + node.key
            indent = "  " * depth
            if node.terminal:
                lines.append(f"{indent}'{full}' -> {node.value!r} (terminal)")
            else:
                lines.append(f"{indent}'{node.key}' (internal)")
            for child in node.sorted_children():
                walk(child, full, depth + 1)

        walk(self._root, "", 0)
        return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Run a demonstration of insertion, search, traversal and deletion."""
    tree = RadixTree()
    keys = ["hello", "help", "hell", "world", "word", "work", "test", "testing", "tea", "team"]

    print("=== Radix Tree Test ===\n")
    print("Inserting keys:")
    for value, key in enumerate(keys, start=1):
        result = tree.insert(key, value)
        print(f"Insert '{key}': {'SUCCESS' if result else 'FAILED'}")
    print()

    print(tree.render())

    print("Searching for keys:")
    for key in keys:
        if key in tree:
            print(f"Search '{key}': FOUND (value: {tree.search(key)})")
        else:
            print(f"Search '{key}': NOT FOUND")
    print(f"Search 'nonexistent': {'FOUND' if 'nonexistent' in tree else 'NOT FOUND'}")
    print()

    print("Tree traversal:")
    for key, value in tree.items():
        print(f"Key: '{key}', Value: {value!r}")
    print()

    print("Deleting keys:")
    for key in ("help", "test", "word"):
        result = tree.delete(key)
        print(f"Delete '{key}': {'SUCCESS' if result else 'FAILED'}")
    print()

    print("Tree after deletion:")
    print(tree.render())

    print("Final tree traversal:")
    for key, value in tree.items():
        print(f"Key: '{key}', Value: {value!r}")
    return 0