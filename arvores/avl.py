"""Self-balancing binary search tree that records a balance factor per node."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    info: int
    left: _Node | None = None
    right: _Node | None = None
    fb: int = 0


def _rotate_right(p: _Node) -> _Node:
    q = p.left
    assert q is not None
    p.left = q.right
    q.right = p
    return q


def _rotate_left(p: _Node) -> _Node:
    q = p.right
    assert q is not None
    p.right = q.left
    q.left = p
    return q


def _balance(p: _Node) -> _Node:
    if p.fb <= -2:
        if p.left.fb > 0:
            p.left = _rotate_left(p.left)
        return _rotate_right(p)
    if p.right.fb < 0:
        p.right = _rotate_right(p.right)
    return _rotate_left(p)


def _update(node: _Node | None) -> tuple[_Node | None, int]:
    """Recompute balance factors bottom-up, rotating where needed; return height."""
    if node is None:
        return None, 0
    node.left, hl = _update(node.left)
    node.right, hr = _update(node.right)
    node.fb = hr - hl
    if abs(node.fb) >= 2:
        node = _balance(node)
        node.left, hl = _update(node.left)
        node.right, hr = _update(node.right)
        node.fb = hr - hl
    return node, max(hl, hr) + 1


def _height(node: _Node | None) -> int:
    if node is None:
        return 0
    return max(_height(node.left), _height(node.right)) + 1


class AVLTree:
    """Set of integers kept in a height-balanced binary search tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: int) -> bool:
        """Insert a value and rebalance; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
        else:
            node = self._root
            while True:
                if value == node.info:
                    return False
                if value < node.info:
                    if node.left is None:
                        node.left = _Node(value)
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = _Node(value)
                        break
                    node = node.right
        self._size += 1
        self._root, _ = _update(self._root)
        return True

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.info:
                return True
            node = node.left if value < node.info else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.info
            node = node.right

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def render(self) -> str:
        """Draw the tree sideways with each node's balance factor."""
        lines: list[str] = []

        def walk(node: _Node | None, depth: int) -> None:
            if node is None:
                return
            walk(node.right, depth + 1)
            lines.append(f"{'   ' * depth}{node.info} (fb={node.fb})")
            walk(node.left, depth + 1)

        walk(self._root, 0)
        return "".join(line + "\n" for line in lines)

    def to_dot(self) -> str:
        """Graphviz description of the tree."""
        parts = [
            "digraph AVL {\n",
            "node [shape=ellipse, style=filled, fillcolor=lightblue];\n",
        ]

        def walk(node: _Node) -> None:
            parts.append(f'    {node.info} [label="{node.info}\\nFB={node.fb}"];\n')
            for child in (node.left, node.right):
                if child is not None:
                    parts.append(f"    {node.info} -> {child.info};\n")
                    walk(child)

        if self._root is not None:
            walk(self._root)
        parts.append("}\n")
        return "".join(parts)

    def export_dot(self, path: str | os.PathLike[str]) -> None:
        """Write the Graphviz description to a file; an empty tree is an error."""
        if self._root is None:
            raise ValueError("empty tree, nothing to export")
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.to_dot())


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            print("Entrada invalida")


def main(argv: list[str] | None = None) -> int:
    """Interactive menu for inserting numbers, showing and exporting the tree."""
    tree = AVLTree()
    try:
        while True:
            option = _read_int(
                "\n1 - Inserir numero\n2 - Exibir arvore\n3 - Exportar para DOT\n0 - Sair\nEscolha: "
            )
            if option == 1:
                while True:
                    number = _read_int("Insira um numero ou 0 para sair: ")
                    if number == 0:
                        break
                    tree.insert(number)
            elif option == 2:
                print("\nÁrvore:")
                print(tree.render(), end="")
            elif option == 3:
                filename = "arvore.dot"
                try:
                    tree.export_dot(filename)
                except ValueError:
                    print("Árvore vazia. Nenhum arquivo gerado.")
                except OSError as exc:
                    print(f"Erro ao criar o arquivo: {exc}")
                else:
                    print(f"Arquivo DOT gerado com sucesso: {filename}")
            elif option == 0:
                break
    except EOFError:
        pass
    return 0