"""Search path set with a context-local override.

The generic loader walks an ordered, duplicate-free list of directories.
While it runs on behalf of the views namespace, the views root must be
invisible to it, or ``views/foo/bar.py`` would also be found as plain
``foo.bar``. :meth:`SearchPathSet.excluding` hides directories for the
duration of a ``with`` block.

Thread safety:
    The override lives in a ``ContextVar``: thread-local under free
    threading, task-local under asyncio. Concurrent requests never see
    each other's exclusions. No locks on the read path; baseline edits
    take a lock.

Nested scopes restore the enclosing override on exit (token reset), so
scopes are reentrant.
"""

import os
import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path


def _normalize(path: str | Path) -> Path:
    return Path(os.path.abspath(os.path.expanduser(path)))


class SearchPathSet:
    """Ordered, duplicate-free directories consulted by the generic loader.

    Entries are stored as absolute, normalised paths, so a relative and an
    absolute spelling of one directory are the same entry.

    Usage::

        paths = SearchPathSet(["app/models", "app/views"])
        with paths.excluding("app/views"):
            list(paths)  # only app/models
    """

    __slots__ = ("_baseline", "_lock", "_override")

    def __init__(self, paths: Iterable[str | Path] = ()) -> None:
        self._baseline: tuple[Path, ...] = ()
        self._lock = threading.Lock()
        self._override: ContextVar[tuple[Path, ...] | None] = ContextVar(
            f"perch_search_paths_{id(self):x}", default=None
        )
        for path in paths:
            self.add(path)

    # -- Baseline --

    def add(self, path: str | Path) -> None:
        """Append *path* to the baseline unless already present."""
        path = _normalize(path)
        with self._lock:
            if path not in self._baseline:
                self._baseline = (*self._baseline, path)

    def remove(self, path: str | Path) -> None:
        """Drop *path* from the baseline. Missing paths are ignored."""
        path = _normalize(path)
        with self._lock:
            self._baseline = tuple(p for p in self._baseline if p != path)

    @property
    def baseline(self) -> tuple[Path, ...]:
        return self._baseline

    # -- Override --

    @property
    def override(self) -> tuple[Path, ...] | None:
        """The override active in the current context, or ``None``."""
        return self._override.get()

    def effective(self) -> tuple[Path, ...]:
        """What readers see: the override when one is active, else the baseline."""
        override = self._override.get()
        return self._baseline if override is None else override

    @contextmanager
    def excluding(self, *paths: str | Path) -> Iterator[tuple[Path, ...]]:
        """Hide *paths* from :meth:`effective` for the current context.

        The override is ``baseline - paths`` computed on entry. It is removed
        on every exit path, including exceptions.
        """
        hidden = {_normalize(p) for p in paths}
        override = tuple(p for p in self._baseline if p not in hidden)
        token = self._override.set(override)
        try:
            yield override
        finally:
            self._override.reset(token)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.effective())

    def __len__(self) -> int:
        return len(self.effective())

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return _normalize(path) in self.effective()

    def __repr__(self) -> str:
        return f"<SearchPathSet {[str(p) for p in self.effective()]!r}>"


@dataclass(frozen=True, slots=True)
class SearchPathScope:
    """Runs delegated lookups with namespace roots hidden from the search path.

    Attributes:
        search_paths: The set whose effective view is overridden.
        excluded: Directories hidden while the action runs.
    """

    search_paths: SearchPathSet
    excluded: tuple[Path, ...]

    def run[T](self, action: Callable[[], T]) -> T:
        """Call *action* with the excluded roots hidden, then restore."""
        with self.search_paths.excluding(*self.excluded):
            return action()
