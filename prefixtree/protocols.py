"""Protocols for callers of the prefix tree.

This module defines the callback shape accepted by PrefixTree.traverse.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Visitor(Protocol):
    """Callable applied to each stored value during traversal.

    The return value is ignored. Visitors must not mutate the tree
    they are visiting.

    Examples:
        - list.append to collect values
        - print to dump a dictionary
    """

    def __call__(self, value: Any) -> Any:
        ...
