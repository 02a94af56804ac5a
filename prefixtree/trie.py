"""Prefix trie data structure for word lookup and autocompletion.

This module provides a character-keyed trie that associates caller-supplied
values with strings. Values are stored by reference and are never copied or
released by the trie.
"""

from dataclasses import dataclass, field
from typing import Optional, List, TypeVar, Generic, Dict, Tuple, Iterator

from .protocols import Visitor

T = TypeVar('T')


@dataclass
class TrieNode(Generic[T]):
    """Node in a prefix trie.

    Attributes:
        children: Child nodes keyed by a single character.
        value: Associated value if this node is a terminal.
        is_terminal: Whether this node ends a stored key.
    """
    children: Dict[str, 'TrieNode[T]'] = field(default_factory=dict)
    value: Optional[T] = None
    is_terminal: bool = False

    def is_dead_end(self) -> bool:
        """Return True if the node holds no value and has no children."""
        return not self.is_terminal and not self.children


class PrefixTree(Generic[T]):
    """Trie mapping strings to values, one node per character.

    Supports:
    - Insert a key with an associated value (last write wins)
    - Exact lookup and prefix existence checks in O(k), k = key length
    - Autocomplete in lexicographic key order
    - Erase with pruning of branches left empty

    Example:
        tree = PrefixTree()
        tree.insert("A red fruit", "apple")
        tree.insert("To make a request", "apply")

        tree.word_exists("apple")     # Returns "A red fruit"
        tree.prefix_exists("app")     # Returns True
        tree.autocomplete("app")      # Returns ["A red fruit", "To make a request"]
        tree.erase("apple")           # Returns True
    """

    def __init__(self):
        """Initialize an empty tree."""
        self._root: TrieNode[T] = TrieNode()
        self._size = 0

    def insert(self, value: T, key: str) -> None:
        """Insert a key with associated value.

        Missing nodes along the key's path are created. An existing
        value for the same key is overwritten.

        Args:
            value: Value to associate with this key. Stored by reference.
            key: The key to insert. May be empty (maps to the root).
        """
        node = self._root
        for ch in key:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            self._size += 1
        node.value = value
        node.is_terminal = True

    def word_exists(self, key: str) -> Optional[T]:
        """Look up the value stored for an exact key.

        Args:
            key: The key to look up.

        Returns:
            The stored value, or None if the key is not stored. A key
            that is only a prefix of stored keys is not stored.
        """
        node = self._find(key)
        if node is None or not node.is_terminal:
            return None
        return node.value

    def prefix_exists(self, prefix: str) -> bool:
        """Check if any stored key starts with prefix.

        Args:
            prefix: The prefix to check. The empty prefix always exists.

        Returns:
            True if a node exists at the end of the prefix path.
        """
        return self._find(prefix) is not None

    def autocomplete(self, prefix: str) -> List[T]:
        """Find all values whose keys start with prefix.

        Args:
            prefix: The prefix to complete.

        Returns:
            List of values ordered lexicographically by their keys,
            or an empty list if no key starts with prefix.

        Example:
            With "car", "cart", "cat" and "dog" stored,
            autocomplete("ca") returns the values for
            "car", "cart", "cat" in that order.
        """
        results: List[T] = []
        self.traverse(results.append, prefix)
        return results

    def traverse(self, visitor: Visitor, prefix: str = '') -> None:
        """Apply visitor to every stored value under prefix.

        Values are visited in the same order autocomplete returns them.

        Args:
            visitor: Callable invoked once per stored value.
            prefix: Restrict the walk to keys starting with prefix.
                   Defaults to the whole tree.
        """
        node = self._find(prefix)
        if node is not None:
            for _, terminal in self._walk(node, prefix):
                visitor(terminal.value)

    def items(self, prefix: str = '') -> List[Tuple[str, T]]:
        """Return (key, value) pairs for keys starting with prefix.

        Args:
            prefix: The prefix to enumerate under.

        Returns:
            Pairs in lexicographic key order.
        """
        results: List[Tuple[str, T]] = []
        node = self._find(prefix)
        if node is not None:
            for path, terminal in self._walk(node, prefix):
                results.append((''.join(path), terminal.value))
        return results

    def keys(self, prefix: str = '') -> List[str]:
        """Return stored keys starting with prefix, in lexicographic order."""
        return [key for key, _ in self.items(prefix)]

    def erase(self, key: str) -> bool:
        """Remove a key and prune nodes left without content.

        The stored value itself is not touched.

        Args:
            key: The key to remove.

        Returns:
            True if the key was stored and has been removed, False if
            the key was not stored (including keys that are only a
            prefix of stored keys).
        """
        node = self._find(key)
        if node is None or not node.is_terminal:
            return False
        self._remove(key)
        self._size -= 1
        return True

    def clear(self) -> None:
        """Remove every key, including a value stored at the root."""
        self._root.children.clear()
        self._root.value = None
        self._root.is_terminal = False
        self._size = 0

    def __len__(self) -> int:
        """Return number of stored keys."""
        return self._size

    def __contains__(self, key: object) -> bool:
        """Check if key is stored, even when its value is None."""
        if not isinstance(key, str):
            return False
        node = self._find(key)
        return node is not None and node.is_terminal

    def _find(self, prefix: str) -> Optional[TrieNode[T]]:
        """Follow prefix from the root.

        Args:
            prefix: Characters to follow.

        Returns:
            Node at the end of the path, or None if the path is missing.
        """
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _walk(
        self,
        node: TrieNode[T],
        prefix: str,
    ) -> Iterator[Tuple[List[str], TrieNode[T]]]:
        """Yield terminal nodes under node in lexicographic key order.

        Pre-order on an explicit stack: a node's own value comes before
        its children, so "car" precedes "cart".

        Args:
            node: Node reached by prefix.
            prefix: Key characters leading to node.

        Yields:
            (path, node) pairs. path is the key as a list of characters
            and is reused between steps; copy or join it before the next
            step.
        """
        path = list(prefix)
        stack: List[Tuple[TrieNode[T], int, Optional[str]]] = [
            (node, len(path), None)
        ]
        while stack:
            node, depth, ch = stack.pop()
            del path[depth:]
            if ch is not None:
                path.append(ch)
            if node.is_terminal:
                yield path, node
            for child_ch in sorted(node.children, reverse=True):
                stack.append((node.children[child_ch], len(path), child_ch))

    def _remove(self, key: str) -> None:
        """Clear a stored key and unlink nodes that become dead ends.

        Each level reports whether it is left without value or children;
        its parent then unlinks it and reports in turn. Unwinding stops
        at the first node with content left, or at the root.

        Args:
            key: A key known to be stored.
        """
        trail: List[Tuple[TrieNode[T], str]] = []
        node = self._root
        for ch in key:
            trail.append((node, ch))
            node = node.children[ch]

        node.value = None
        node.is_terminal = False

        while trail and node.is_dead_end():
            parent, ch = trail.pop()
            del parent.children[ch]
            node = parent
