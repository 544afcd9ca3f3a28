#!/usr/bin/env python3
"""
Basic example of finding files with DazzleFind.

This example demonstrates:
- Searching the working directory or a list of directories
- Combining ready-made and hand-written predicates
- Handling the single-match finder's outcomes
"""

import os
import re
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlefind import (
    InvalidRootError,
    MultipleMatchError,
    find_all_sync,
    find_only_one_sync,
    of_basename,
    of_glob,
)


def is_small(path: str) -> bool:
    """Keep regular files under 10 KB."""
    return os.path.isfile(path) and os.path.getsize(path) < 10_000


def main():
    """Demonstrate the blocking finders."""
    roots = sys.argv[1:] or None

    print(f"Searching: {roots or os.getcwd()}")
    print("-" * 50)

    try:
        sources = find_all_sync(roots, of_glob("*.py"), is_small)
    except InvalidRootError as e:
        print(f"Cannot search {e.path}: {e}")
        return 1

    print(f"Small Python files: {len(sources)}")
    for path in sources:
        print(f"  {path}")

    try:
        readme = find_only_one_sync(roots, of_basename(re.compile(r"^README", re.I)))
    except MultipleMatchError as e:
        print(f"\nSeveral READMEs: {', '.join(e.matches)}")
    else:
        print(f"\nREADME: {readme or 'none'}")
    return 0


if __name__ == "__main__":
    print("DazzleFind - Basic Find Example")
    print("=" * 50)
    sys.exit(main())
