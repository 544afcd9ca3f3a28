#!/usr/bin/env python3
"""
Comparison between the sync and async finders.

This example demonstrates:
- The same search run through both flavours
- Async predicates mixed with plain ones
- Identical results from both
"""

import asyncio
import os
import sys
import time
from pathlib import Path
from typing import Tuple

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlefind import FinderConfig, MatchSet, find_all, find_all_sync, of_glob


def is_file(path: str) -> bool:
    return os.path.isfile(path)


async def is_file_async(path: str) -> bool:
    """Async predicate: stat in a worker thread."""
    return await asyncio.to_thread(os.path.isfile, path)


def sync_search(roots) -> Tuple[MatchSet, float]:
    """Search with the blocking finder."""
    start_time = time.perf_counter()
    matches = find_all_sync(roots, is_file, of_glob("*.py", "*.md"))
    return matches, time.perf_counter() - start_time


async def async_search(roots, max_concurrent: int) -> Tuple[MatchSet, float]:
    """Search with the async finder."""
    start_time = time.perf_counter()
    config = FinderConfig(max_concurrent=max_concurrent)
    matches = await find_all(roots, is_file_async, of_glob("*.py", "*.md"), config=config)
    return matches, time.perf_counter() - start_time


async def main():
    """Run both flavours over the same directories."""
    roots = sys.argv[1:] or [str(Path.cwd())]
    print(f"Searching: {', '.join(roots)}")
    print("-" * 50)

    sync_matches, sync_time = sync_search(roots)
    async_matches, async_time = await async_search(roots, max_concurrent=8)

    print(f"Sync:  {len(sync_matches):,} matches in {sync_time * 1000:.1f} ms")
    print(f"Async: {len(async_matches):,} matches in {async_time * 1000:.1f} ms")
    print(f"Identical results: {sync_matches == async_matches}")


if __name__ == "__main__":
    print("DazzleFind - Sync vs Async Example")
    print("=" * 50)
    asyncio.run(main())
