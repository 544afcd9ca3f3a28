"""Directory specification handling.

Turns the caller-facing ``directories`` argument into an ordered list of
absolute root paths, and splits a finder's positional arguments into that
argument and the predicates that follow it.
"""

import logging
import os
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

PathType = Union[str, 'os.PathLike[str]']
DirectorySpec = Union[None, PathType, Iterable[PathType]]


def resolve_absolute(path: PathType, cwd: Optional[str] = None) -> str:
    """Return the absolute, normalized form of path.

    Relative paths are joined to cwd (the process working directory when
    None, looked up only when needed). Symbolic links are left in place: a
    root reached through a link keeps the link's path.

    Raises:
        TypeError: If path is not a str or str-based PathLike
    """
    try:
        path = os.fspath(path)
    except TypeError:
        raise TypeError(f"directory must be a str or os.PathLike, got {type(path).__name__}") from None
    if not isinstance(path, str):
        raise TypeError(f"directory must be a str path, got {type(path).__name__}")

    if not os.path.isabs(path):
        path = os.path.join(cwd if cwd is not None else os.getcwd(), path)
    return os.path.normpath(path)


def is_single_path(spec: Any) -> bool:
    """True if spec names one directory rather than a collection of them."""
    return isinstance(spec, (str, bytes, os.PathLike))


def normalize_directories(
    spec: DirectorySpec,
    cwd: Optional[str] = None,
    resolver: Callable[[PathType, Optional[str]], str] = resolve_absolute,
) -> List[str]:
    """Normalize a directory specification into absolute root paths.

    Args:
        spec: None for the working directory, a single path, or an iterable
            of paths. Iteration order and duplicates are preserved.
        cwd: Base for relative paths (process working directory when None,
            looked up only if spec is None or holds a relative path)
        resolver: Callable turning (path, cwd) into an absolute path

    Returns:
        Ordered list of absolute directory paths; empty for an empty iterable

    Raises:
        TypeError: If spec or one of its elements is not a path
    """
    if spec is None:
        directories = [os.path.normpath(cwd if cwd is not None else os.getcwd())]
    elif is_single_path(spec):
        directories = [resolver(spec, cwd)]
    else:
        try:
            iterator = iter(spec)
        except TypeError:
            raise TypeError(
                f"directories must be a path or an iterable of paths, got {type(spec).__name__}"
            ) from None
        directories = [resolver(item, cwd) for item in iterator]

    logger.debug("Normalized directories: %s", directories)
    return directories


async def normalize_directories_async(
    spec: Any,
    cwd: Optional[str] = None,
    resolver: Callable[[PathType, Optional[str]], str] = resolve_absolute,
) -> List[str]:
    """Async counterpart of normalize_directories.

    Additionally accepts an async iterable of paths, which is drained in
    order before resolution.
    """
    if hasattr(spec, '__aiter__'):
        spec = [item async for item in spec]
    return normalize_directories(spec, cwd, resolver)


def split_arguments(args: Tuple[Any, ...]) -> Tuple[DirectorySpec, Tuple[Any, ...]]:
    """Split finder positional arguments into (directories, predicates).

    A leading callable is already a predicate, in which case no directories
    were given. Anything else in first position, None included, is the
    directory specification.
    """
    if args and not callable(args[0]):
        return args[0], tuple(args[1:])
    return None, tuple(args)
