"""YAML-based word dictionaries for prefixtree.

This module loads a declarative YAML document of words and descriptions
into a PrefixTree and queries it from the command line.

Example dictionary.yaml:
    config:
      lowercase: true
      alphabet: "abcdefghijklmnopqrstuvwxyz"

    entries:
      apple: "A red fruit"
      application: "A software program"
      apply: "To make a request"
      banana: "A yellow fruit"

Usage:
    from prefixtree.yaml import load_dictionary
    tree = load_dictionary('dictionary.yaml')
    tree.autocomplete('app')

CLI:
    python -m prefixtree.yaml dictionary.yaml --complete app
"""

from .parser import parse_yaml_file, DictionaryConfig, DictionaryParseError
from .loader import yaml_to_tree, normalize_key
from .runner import load_dictionary, main

__all__ = [
    'parse_yaml_file',
    'DictionaryConfig',
    'DictionaryParseError',
    'yaml_to_tree',
    'normalize_key',
    'load_dictionary',
    'main',
]
