import io

import pytest

from arvores.students import Student, StudentTree, main


def make(ra, name="Ana"):
    return Student(ra, name, 20, (1, 2, 3, 4))


def test_iteration_is_sorted_by_ra():
    tree = StudentTree()
    ras = [50, 30, 70, 20, 40, 60, 80]
    for ra in ras:
        tree.insert(make(ra))
    assert [s.ra for s in tree] == sorted(ras)
    assert len(tree) == len(ras)


def test_empty_tree():
    tree = StudentTree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.render() == ""


def test_duplicates_keep_insertion_order():
    tree = StudentTree()
    tree.insert(make(5, "first"))
    tree.insert(make(5, "second"))
    assert [s.name for s in tree] == ["first", "second"]


def test_render_sideways():
    tree = StudentTree()
    for ra in (50, 30, 70):
        tree.insert(make(ra))
    assert tree.render() == "   70\n50\n   30\n"


def test_degenerate_tree_is_handled():
    tree = StudentTree()
    for ra in range(3000):
        tree.insert(make(ra))
    assert [s.ra for s in tree] == list(range(3000))
    assert tree.render().count("\n") == 3000


def test_grades_must_be_four():
    with pytest.raises(ValueError):
        Student(1, "Ana", 20, (1, 2, 3))


def test_grades_become_floats():
    student = Student(1, "Ana", 20, [1, 2, 3, 4])
    assert student.grades == (1.0, 2.0, 3.0, 4.0)


def test_main_inserts_and_prints(monkeypatch, capsys):
    data = "1\n10\nAna Maria\n20\n7\n8\n9\n10\n1\n5\nBia\n19\n1\n2\n3\n4\n2\n0\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Arvore de RAs:" in out
    assert "10\n   5\n" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main() == 0
    assert "Escolha: " in capsys.readouterr().out