# stubkit/repository/walker.py
"""
Directory walker for stub repositories.

Walks a root directory depth-first, visiting entries of each directory in
name order so results are stable for a given tree. Each pass is driven by a
caller-supplied predicate or mapper; the walker knows nothing about formats.

Traversal failures (unreadable directories, a root that vanished) are logged
and end the pass with whatever was collected so far. Errors raised by the
predicate or mapper itself, other than OSError, propagate to the caller.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Iterator, List, TypeVar, Union

from stubkit.logging.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class DirectoryWalker:
    """
    Recursively collects files under a root directory.

    Usage:
        walker = DirectoryWalker()
        mappings = walker.collect(root, lambda p: p.suffix == ".json")
    """

    def __init__(self, follow_symlinks: bool = False) -> None:
        """
        Initialize the walker.

        Args:
            follow_symlinks: Descend into symlinked directories. There is no
                cycle detection, so only enable this for trusted trees.
        """
        self._follow_symlinks = follow_symlinks

    def walk(self, root: Union[str, Path]) -> Iterator[Path]:
        """
        Yield every regular file under root.

        Raises:
            OSError: If a directory cannot be listed.
        """
        root_path = Path(root)
        if not root_path.exists():
            return
        yield from self._walk_directory(root_path)

    def collect(self, root: Union[str, Path], predicate: Callable[[Path], bool]) -> List[Path]:
        """Files under root for which predicate returns True, in traversal order."""
        return self.flat_map(root, lambda path: (path,) if predicate(path) else ())

    def flat_map(
        self,
        root: Union[str, Path],
        mapper: Callable[[Path], Iterable[T]],
    ) -> List[T]:
        """Concatenate mapper results for every file under root, in traversal order."""
        results: List[T] = []
        try:
            for path in self.walk(root):
                results.extend(mapper(path))
        except OSError as e:
            logger.warning(f"Exception occurred while walking {root}: {e}")
        return results

    def _walk_directory(self, directory: Path) -> Iterator[Path]:
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                if entry.is_symlink() and not self._follow_symlinks:
                    continue
                yield from self._walk_directory(entry)
            elif entry.is_file():
                yield entry


__all__ = ["DirectoryWalker"]
