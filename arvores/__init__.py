"""Binary search, AVL and radix trees with text rendering and Graphviz export."""

__version__ = "0.1.0"
__all__ = ["students", "avl", "radix", "wordtree"]