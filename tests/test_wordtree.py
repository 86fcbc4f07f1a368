import pytest

from arvores.wordtree import WordRadixTree, main

HEADER = (
    "digraph RadixTree {\n"
    "    rankdir=TB;\n"
    '    node [shape=record, fontname="Arial", fontsize=10];\n'
    '    edge [fontname="Arial", fontsize=8];\n'
    "    \n"
)


def _tree(*words):
    tree = WordRadixTree()
    for word in words:
        tree.add(word)
    return tree


def test_add_new_and_duplicate():
    tree = WordRadixTree()
    assert tree.add("hello") is True
    assert tree.add("hello") is False
    assert len(tree) == 1


def test_membership_after_splits():
    words = ["hello", "help", "hell", "world", "word", "work", "test", "testing", "tea", "team"]
    tree = _tree(*words)
    assert len(tree) == len(words)
    for word in words:
        assert word in tree
    for absent in ["he", "hel", "te", "wor", "nonexistent", "testings", ""]:
        assert absent not in tree


def test_prefix_becomes_word():
    tree = _tree("testing")
    assert "test" not in tree
    assert tree.add("test") is True
    assert "test" in tree
    assert len(tree) == 2


def test_empty_word_rejected():
    tree = WordRadixTree()
    with pytest.raises(ValueError):
        tree.add("")
    assert len(tree) == 0


def test_non_string_not_contained():
    tree = _tree("1")
    assert 1 not in tree


def test_empty_tree_dot():
    dot = WordRadixTree().to_dot()
    assert dot.startswith(HEADER)
    assert '    node0 [label="ROOT", style=filled, fillcolor=lightgray];\n' in dot
    assert dot.endswith("}\n")


def test_single_word_dot():
    expected = (
        HEADER
        + '    node0 [label="ROOT", style=filled, fillcolor=lightgray];\n'
        + '    node1 [label="{a|palavra: a}", style=filled, fillcolor=lightgreen];\n'
        + '    node0 -> node1 [label="a"];\n'
        + "}\n"
    )
    assert _tree("a").to_dot() == expected


def test_prefix_node_and_preorder_ids():
    dot = _tree("test", "team").to_dot()
    assert '[label="{te|prefixo: te}", style=filled, fillcolor=lightyellow]' in dot
    assert "palavra: team}" in dot
    assert "palavra: test}" in dot
    lines = dot.splitlines()
    node_lines = [line for line in lines if "[label=\"{" in line or 'label="ROOT"' in line]
    ids = [line.split()[0] for line in node_lines]
    assert ids == [f"node{i}" for i in range(len(ids))]
    # "am" sorts before "st", so team's node is numbered before test's
    assert any(line.startswith("    node2 ") and "team" in line for line in lines)
    # edges come after the child subtree
    assert lines.index('    node1 -> node2 [label="a"];') > lines.index(
        next(line for line in lines if line.startswith("    node2 "))
    )


def test_children_sorted_by_character():
    dot = _tree("b", "a").to_dot()
    assert dot.index("palavra: a}") < dot.index("palavra: b}")


def test_escaping_in_labels():
    dot = _tree('a"b').to_dot()
    assert '{a\\"b|palavra: a\\"b}' in dot


def test_edge_label_for_quote_and_nonprintable():
    dot = _tree('"x', "\x01y").to_dot()
    assert "[label=\"'\"'\"];" in dot
    assert '[label="\\\\x01"];' in dot


def test_export_dot_writes_same_text(tmp_path):
    tree = _tree("hello", "help")
    path = tmp_path / "out.dot"
    tree.export_dot(path)
    assert path.read_text(encoding="utf-8") == tree.to_dot()


def test_main_add_and_search(monkeypatch, capsys):
    answers = iter(["1", "hello", "1", "hello", "2", "hello", "2", "help", "x", "9", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Palavra 'hello' adicionada com sucesso!" in out
    assert "Total de palavras: 1" in out
    assert "Palavra 'hello' ja existe" in out
    assert "Palavra 'hello' encontrada!" in out
    assert "Palavra 'help' nao encontrada." in out
    assert " Entrada Invalida! Digite um numero." in out
    assert " Opcao invalida" in out


def test_main_export(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    answers = iter(["3", "1", "word", "3", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main() == 0
    out = capsys.readouterr().out
    assert "O dicionario esta vazio." in out
    assert "Arquivo Graphviz exportado para: radix_tree_teste.dot" in out
    assert (tmp_path / "radix_tree_teste.dot").read_text(encoding="utf-8") == _tree("word").to_dot()


def test_main_ends_on_eof(monkeypatch):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert main() == 0