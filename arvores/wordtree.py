"""Radix tree of words with a Graphviz export of its structure."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from itertools import count

MAX_INPUT = 100
DEFAULT_DOT_FILE = "radix_tree_teste.dot"

_DOT_HEADER = (
    "digraph RadixTree {\n"
    "    rankdir=TB;\n"
    '    node [shape=record, fontname="Arial", fontsize=10];\n'
    '    edge [fontname="Arial", fontsize=8];\n'
    "    \n"
)


@dataclass
class _Node:
    key: str
    terminal: bool = False
    children: dict[str, _Node] = field(default_factory=dict)


def _common_prefix_length(a: str, b: str) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def _insert(node: _Node, word: str) -> bool:
    common = _common_prefix_length(node.key, word)
    if common == len(node.key):
        if common == len(word):
            added = not node.terminal
            node.terminal = True
            return added
        rest = word[common:]
        child = node.children.get(rest[0])
        if child is None:
            node.children[rest[0]] = _Node(rest, True)
            return True
        return _insert(child, rest)

    tail = _Node(node.key[common:], node.terminal, node.children)
    node.key = node.key[:common]
    node.terminal = False
    node.children = {tail.key[0]: tail}
    if common == len(word):
        node.terminal = True
    else:
        rest = word[common:]
        node.children[rest[0]] = _Node(rest, True)
    return True


def _escape(text: str) -> str:
    return "".join("\\" + ch if ch in '"\\\n' else ch for ch in text)


def _edge_label(ch: str) -> str:
    code = ord(ch)
    if 32 <= code <= 126:
        return f"'{ch}'" if ch in '"\\' else ch
    return f"\\\\x{code:02X}"


class WordRadixTree:
    """Set of non-empty words stored as a compressed prefix tree."""

    def __init__(self) -> None:
        self._root = _Node("")
        self._size = 0

    def add(self, word: str) -> bool:
        """Add a word; return False if it was already present."""
        if not word:
            raise ValueError("word must not be empty")
        added = _insert(self._root, word)
        if added:
            self._size += 1
        return added

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self._root
        while True:
            common = _common_prefix_length(node.key, word)
            if common != len(node.key):
                return False
            if common == len(word):
                return node.terminal
            word = word[common:]
            child = node.children.get(word[0])
            if child is None:
                return False
            node = child

    def __len__(self) -> int:
        return self._size

    def to_dot(self) -> str:
        """Graphviz description: nodes numbered in preorder, edges labelled by character."""
        parts = [_DOT_HEADER]
        ids = count()

        def walk(node: _Node, prefix: str) -> None:
            current = next(ids)
            full = prefix + node.key
            if not node.key:
                if node.terminal:
                    parts.append(
                        f'    node{current} [label="{{ROOT|PALAVRA}}", '
                        "style=filled, fillcolor=lightblue];\n"
                    )
                else:
                    parts.append(
                        f'    node{current} [label="ROOT", style=filled, fillcolor=lightgray];\n'
                    )
            else:
                kind, color = ("palavra", "lightgreen") if node.terminal else ("prefixo", "lightyellow")
                parts.append(
                    f'    node{current} [label="{{{_escape(node.key)}|{kind}: {_escape(full)}}}", '
                    f"style=filled, fillcolor={color}];\n"
                )
            for ch in sorted(node.children):
                child_id = _peek(ids)
                walk(node.children[ch], full)
                parts.append(f'    node{current} -> node{child_id} [label="{_edge_label(ch)}"];\n')

        def _peek(counter: count) -> int:
            nonlocal ids
            value = next(counter)
            ids = count(value)
            return value

        walk(self._root, "")
        parts.append("}\n")
        return "".join(parts)

    def export_dot(self, path: str | os.PathLike[str]) -> None:
        """Write the Graphviz description to a file."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.to_dot())


_MENU = (
    "\n========================================\n"
    "    RADIX TREE\n"
    "========================================\n"
    "1. Adicionar palavra\n"
    "2. Buscar palavra\n"
    "3. Exportar para Graphviz (.dot)\n"
    "0. Sair\n"
    "========================================\n"
    "Escolha uma opcao: "
)


def _read_word(prompt: str) -> str:
    return input(prompt)[: MAX_INPUT - 1]


def main(argv: list[str] | None = None) -> int:
    """Interactive menu for adding, searching and exporting words."""
    print("=== INICIALIZANDO RADIX TREE ===")
    tree = WordRadixTree()
    try:
        while True:
            try:
                option = int(input(_MENU).strip())
            except ValueError:
                print(" Entrada Invalida! Digite um numero.")
                continue
            if option == 1:
                print("\n--- ADICIONAR PALAVRA ---")
                word = _read_word("Digite a palavra: ")
                if not word:
                    print(" Palavra nao pode estar vazia!")
                elif tree.add(word):
                    print(f"Palavra '{word}' adicionada com sucesso!")
                    print(f"Total de palavras: {len(tree)}")
                else:
                    print(f"Palavra '{word}' ja existe")
            elif option == 2:
                print("\n--- BUSCAR PALAVRA ---")
                word = _read_word("Digite a palavra para buscar: ")
                if not word:
                    print(" Palavra nao pode estar vazia!")
                elif word in tree:
                    print(f"Palavra '{word}' encontrada!")
                else:
                    print(f"Palavra '{word}' nao encontrada.")
            elif option == 3:
                print("\n--- EXPORTAR PARA GRAPHVIZ ---")
                if len(tree) == 0:
                    print("O dicionario esta vazio.")
                else:
                    try:
                        tree.export_dot(DEFAULT_DOT_FILE)
                    except OSError:
                        print(f"Error: Could not open file {DEFAULT_DOT_FILE} for writing")
                    else:
                        print(f"Arquivo Graphviz exportado para: {DEFAULT_DOT_FILE}")
            elif option == 0:
                print("\n Finalizando programa...")
                break
            else:
                print(" Opcao invalida")
    except EOFError:
        pass
    return 0