"""Generic prefix tree for word lookup and autocompletion.

This package provides a character-keyed trie that maps strings to
caller-owned values:

- PrefixTree: insert, exact lookup, prefix checks, autocomplete,
  traversal and erase with pruning
- TrieNode: a single node of the tree

Example:
    from prefixtree import PrefixTree

    tree = PrefixTree()
    tree.insert("A red fruit", "apple")
    tree.insert("A software program", "application")

    tree.autocomplete("app")  # ["A red fruit", "A software program"]
"""

from .protocols import Visitor
from .trie import PrefixTree, TrieNode

__all__ = [
    # Protocols
    'Visitor',
    # Data structures
    'PrefixTree',
    'TrieNode',
]
