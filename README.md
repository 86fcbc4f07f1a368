# arvores

A small collection of tree data structures. Each one can be drawn as text on the
terminal, and the AVL tree and the word tree can also be exported as a Graphviz
DOT file.

- `arvores.students`: `Student` records (RA, name, age, four grades) kept in an
  unbalanced binary search tree, `StudentTree`, ordered by RA. Equal RAs go to the
  right.
- `arvores.avl`: `AVLTree`, a self-balancing set of integers. Each node carries its
  balance factor (right height minus left height).
- `arvores.radix`: `RadixTree`, a compressed prefix tree mapping string keys to
  values, with insertion, search and deletion.
- `arvores.wordtree`: `WordRadixTree`, a compressed prefix tree holding a set of
  non-empty words, with a labelled Graphviz export.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Student tree

```python
from arvores.students import Student, StudentTree

tree = StudentTree()
tree.insert(Student(ra=20, name="Ana", age=19, grades=(7.5, 8.0, 9.0, 6.5)))
tree.insert(Student(ra=10, name="Bruno", age=21, grades=(5.0, 6.0, 7.0, 8.0)))
len(tree)                       # 2
[s.ra for s in tree]            # [10, 20]  (ascending RA)
print(tree.render(), end="")    # sideways drawing, right subtree on top
```

A `Student` must have exactly four grades; anything else raises `ValueError`.

### AVL tree

```python
from arvores.avl import AVLTree

tree = AVLTree()
for n in (10, 20, 30, 40, 50):
    tree.insert(n)              # True when added, False for a duplicate
30 in tree                      # True
list(tree)                      # [10, 20, 30, 40, 50]
tree.height()                   # 3
print(tree.render(), end="")    # each value shown as "value (fb=...)"
dot = tree.to_dot()             # Graphviz text
tree.export_dot("arvore.dot")   # render with: dot -Tpng arvore.dot
```

`export_dot` raises `ValueError` when the tree is empty.

### Radix tree

```python
from arvores.radix import RadixTree

tree = RadixTree()
tree.insert("hello", 1)         # True: new key
tree.insert("help", 2)
tree.insert("help", 3)          # False: value replaced
tree.search("help")             # 3
tree.search("missing")          # None
"hello" in tree                 # True
tree.delete("help")             # True
list(tree.items())              # [("hello", 1)]
print(tree.render(), end="")
```

`items()` yields shorter prefixes before longer ones, and siblings in character
order.

### Word tree

```python
from arvores.wordtree import WordRadixTree

words = WordRadixTree()
words.add("tea")                # True
words.add("team")               # True
words.add("tea")                # False: already present
"tea" in words                  # True
len(words)                      # 2
dot = words.to_dot()
words.export_dot("radix_tree_teste.dot")
```

`add("")` raises `ValueError`. In the DOT output, nodes that end a word are green,
prefix-only nodes yellow, and edges are labelled with the first character of the
child's key.

## Commands

- `arvores-students`: menu to insert students and show the tree of RAs.
- `arvores-avl`: menu to insert numbers (0 ends a run of numbers), show the
  balanced tree, and export it to `arvore.dot` in the current directory.
- `arvores-radix`: runs a fixed demonstration of insertion, search, traversal and
  deletion, printing the results.
- `arvores-words`: menu to add and look up words and export the tree to
  `radix_tree_teste.dot` in the current directory. Words are cut to 99 characters.

The menus read from standard input and stop on option 0 or end of input. The
commands take no command-line arguments.

## What it does not do

Nothing is saved between runs: every tree lives in memory only, and the only files
written are the DOT exports. `StudentTree` has no lookup or removal by RA, and
`AVLTree` and `WordRadixTree` have no removal.