"""Dictionary runner for YAML dictionary documents.

This module provides the main entry point for loading a dictionary file
into a PrefixTree and querying it from the command line.
"""

import sys
from pathlib import Path
from typing import List, Optional, Tuple, Union

from prefixtree.trie import PrefixTree

from .parser import parse_yaml_file, DictionaryConfig
from .loader import yaml_to_tree, normalize_key


def load_dictionary(
    yaml_path: Union[str, Path],
    verbose: bool = False,
) -> PrefixTree:
    """Load a dictionary document into a PrefixTree.

    Args:
        yaml_path: Path to the YAML file
        verbose: Print progress information

    Returns:
        PrefixTree mapping words to their descriptions

    Example:
        tree = load_dictionary('dictionary.yaml')
        for description in tree.autocomplete('app'):
            print(description)
    """
    _, tree = _load(Path(yaml_path), verbose)
    return tree


def _load(yaml_path: Path, verbose: bool) -> Tuple[DictionaryConfig, PrefixTree]:
    config = parse_yaml_file(yaml_path)
    tree = yaml_to_tree(config)

    if verbose:
        print(f"Loaded {len(tree)} word(s) from {yaml_path}")

    return config, tree


def main(args: Optional[List[str]] = None) -> int:
    """CLI entry point for querying a dictionary.

    Usage:
        python -m prefixtree.yaml [options] [yaml_file]

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description='Query a word dictionary stored in a YAML file',
        prog='python -m prefixtree.yaml',
    )
    parser.add_argument(
        'yaml_file',
        nargs='?',
        default='dictionary.yaml',
        help='Path to the YAML file (default: dictionary.yaml)',
    )
    parser.add_argument(
        '-c', '--complete',
        action='append',
        default=[],
        metavar='PREFIX',
        help='List words starting with PREFIX (repeatable)',
    )
    parser.add_argument(
        '-l', '--lookup',
        action='append',
        default=[],
        metavar='WORD',
        help='Show the description stored for WORD (repeatable)',
    )
    parser.add_argument(
        '-p', '--prefix',
        action='append',
        default=[],
        metavar='PREFIX',
        help='Report whether any word starts with PREFIX (repeatable)',
    )
    parser.add_argument(
        '-e', '--erase',
        action='append',
        default=[],
        metavar='WORD',
        help='Remove WORD before running queries (repeatable)',
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='List every word in the dictionary',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print progress information',
    )

    parsed = parser.parse_args(args)

    try:
        yaml_path = Path(parsed.yaml_file)
        config, tree = _load(yaml_path, parsed.verbose)

        def norm(key: str) -> str:
            return normalize_key(key, config.config, strict=False)

        for word in parsed.erase:
            if tree.erase(norm(word)):
                if parsed.verbose:
                    print(f"Removed '{word}'")
            else:
                print(f"Cannot remove '{word}': not found", file=sys.stderr)

        if parsed.list:
            print(f"All words ({len(tree)}):")
            for word, description in tree.items():
                print(f"  - {word}: {description}")

        for prefix in parsed.complete:
            matches = tree.items(norm(prefix))
            print(f"Words starting with '{prefix}':")
            if not matches:
                print("  (none)")
            for word, description in matches:
                print(f"  - {word}: {description}")

        for word in parsed.lookup:
            key = norm(word)
            if key in tree:
                print(f"Search for '{word}': {tree.word_exists(key)}")
            else:
                print(f"Search for '{word}': Not found")

        for prefix in parsed.prefix:
            found = 'yes' if tree.prefix_exists(norm(prefix)) else 'no'
            print(f"Prefix '{prefix}' exists: {found}")

        return 0

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
