"""Build a PrefixTree from a parsed dictionary document."""

from typing import Any, Dict, Optional

from prefixtree.trie import PrefixTree

from .parser import DictionaryConfig, DictionaryParseError


def normalize_key(key: str, config: Dict[str, Any], strict: bool = True) -> str:
    """Apply the document's key settings to a single key.

    Folds case when 'lowercase' is set, then checks every character
    against 'alphabet' when one is configured and strict is set.

    Args:
        key: Raw key from the document or the command line
        config: The document's config mapping
        strict: Reject characters outside the alphabet. Queries pass
               False since an out-of-alphabet key simply matches nothing.

    Returns:
        The key as stored in the tree

    Raises:
        DictionaryParseError: If the key has a character outside the alphabet
    """
    if config.get('lowercase', False):
        key = key.lower()

    alphabet: Optional[str] = config.get('alphabet')
    if strict and alphabet is not None:
        for ch in key:
            if ch not in alphabet:
                raise DictionaryParseError(
                    f"Key '{key}' contains character {ch!r} "
                    f"outside the configured alphabet"
                )
    return key


def yaml_to_tree(config: DictionaryConfig) -> PrefixTree:
    """Insert every entry of a parsed document into a new tree.

    Entries whose keys collide after normalization keep the value that
    appears last in the document.

    Args:
        config: Parsed dictionary document

    Returns:
        PrefixTree mapping normalized words to their descriptions
    """
    tree: PrefixTree = PrefixTree()
    for word, description in config.entries.items():
        tree.insert(description, normalize_key(word, config.config))
    return tree
