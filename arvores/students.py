"""Binary search tree of student records keyed by RA."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

GRADE_COUNT = 4


@dataclass
class Student:
    """A student record: registration number (RA), name, age and four grades."""

    ra: int
    name: str
    age: int
    grades: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        self.grades = tuple(float(g) for g in self.grades)
        if len(self.grades) != GRADE_COUNT:
            raise ValueError(f"expected {GRADE_COUNT} grades, got {len(self.grades)}")


@dataclass
class _Node:
    student: Student
    left: _Node | None = None
    right: _Node | None = None


@dataclass
class StudentTree:
    """Unbalanced binary search tree ordered by RA; equal RAs go to the right."""

    _root: _Node | None = field(default=None, init=False, repr=False)
    _size: int = field(default=0, init=False)

    def __init__(self) -> None:
        self._root = None
        self._size = 0

    def insert(self, student: Student) -> None:
        """Add a student below the leaf where its RA belongs."""
        new = _Node(student)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if student.ra < node.student.ra:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Student]:
        """Yield students in ascending RA order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.student
            node = node.right

    def render(self) -> str:
        """Draw the tree sideways: right subtree on top, three spaces per level."""
        lines: list[str] = []
        stack: list[tuple[_Node, int]] = []
        node = self._root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            lines.append("   " * depth + str(node.student.ra))
            node = node.left
            depth += 1
        return "".join(line + "\n" for line in lines)


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            print("Entrada invalida")


def _read_float(prompt: str) -> float:
    while True:
        text = input(prompt).strip()
        try:
            return float(text)
        except ValueError:
            print("Entrada invalida")


def main(argv: list[str] | None = None) -> int:
    """Interactive menu for inserting students and showing the RA tree."""
    tree = StudentTree()
    try:
        while True:
            option = _read_int("\n1 - Inserir aluno\n2 - Exibir arvore (RAs)\n0 - Sair\nEscolha: ")
            if option == 1:
                ra = _read_int("RA: ")
                name = input("Nome: ")
                age = _read_int("Idade: ")
                grades = tuple(_read_float(f"Nota {i}: ") for i in range(1, GRADE_COUNT + 1))
                tree.insert(Student(ra, name, age, grades))
            elif option == 2:
                print("\nArvore de RAs:")
                print(tree.render(), end="")
            elif option == 0:
                break
    except EOFError:
        pass
    return 0