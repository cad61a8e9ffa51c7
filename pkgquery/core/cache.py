"""
Bounded in-memory cache for package ownership lookups.

Asking a package manager who owns a file means starting an external
process, which is slow compared to everything else a file browser does.
QueryCache remembers the answers, including the empty "nobody owns this"
answer, and evicts the least recently used entry once the capacity is
reached.

Usage:
    from pkgquery.core.cache import QueryCache

    cache = QueryCache(max_size=500)
    cache.put("/usr/bin/ls", "coreutils")
    cache.get("/usr/bin/ls")       # 'coreutils'
    cache.get("/no/such/path")     # None
"""

from collections import OrderedDict
from typing import Optional

# Default number of paths kept in the cache
CACHE_SIZE = 500


class QueryCache:
    """
    Least-recently-used map from path to owning package name.

    An empty string is a valid value: it means the path was queried and no
    package owns it. get() returns None only for paths never stored (or
    evicted since).

    Attributes:
        max_size: Maximum number of entries kept
    """

    def __init__(self, max_size: int = CACHE_SIZE):
        """
        Initialize cache.

        Args:
            max_size: Maximum number of entries (must be at least 1)

        Raises:
            ValueError: If max_size is less than 1
        """
        if max_size < 1:
            raise ValueError(f"Cache size must be at least 1, got {max_size}")

        self.max_size = max_size
        self._entries: "OrderedDict[str, str]" = OrderedDict()

    def get(self, path: str) -> Optional[str]:
        """
        Look up a path.

        Args:
            path: Filesystem path used as key

        Returns:
            Cached package name (possibly empty), or None if not cached
        """
        if path not in self._entries:
            return None

        self._entries.move_to_end(path)
        return self._entries[path]

    def put(self, path: str, pkg: str) -> None:
        """
        Store the owning package of a path, evicting the oldest entry if full.

        Args:
            path: Filesystem path used as key
            pkg: Owning package name, empty if no package owns the path
        """
        self._entries[path] = pkg
        self._entries.move_to_end(path)

        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
