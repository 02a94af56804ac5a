"""CLI entry point for prefixtree.yaml module.

Usage:
    python -m prefixtree.yaml [options] [yaml_file]

Example:
    python -m prefixtree.yaml words.yaml --complete app
    python -m prefixtree.yaml --lookup apple --prefix ban
    python -m prefixtree.yaml --erase apple --list words.yaml
"""

from .runner import main
import sys

if __name__ == '__main__':
    sys.exit(main())
