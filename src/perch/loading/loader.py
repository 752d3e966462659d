"""Generic module loader with pluggable namespace handling.

Maps ``/``-separated path suffixes (derived from dotted module names) onto
files and package directories found in a :class:`SearchPathSet`. Special
namespaces plug in through two registration points instead of patching
the generic rules:

- a *namespace resolver* answers "which root holds the package for this
  suffix?" (``resolve_namespace_root``)
- a *file finder* answers "which file holds the module for this suffix?"
  (``resolve``)

Both return ``DELEGATE`` for suffixes they do not own. Delegated lookups
run with every registrant's ``root`` hidden from the search path, so the
generic rules never rediscover a namespace root and re-enter it.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from perch.loading.search_paths import SearchPathScope, SearchPathSet
from perch.namespace.types import DELEGATE, FileResolution, NamespaceResolution

logger = logging.getLogger("perch.loader")


class NamespaceResolver(Protocol):
    """Owns the package lookup for one namespace root."""

    @property
    def root(self) -> Path: ...

    def resolve_namespace_root(self, path_suffix: str) -> NamespaceResolution: ...


class FileFinder(Protocol):
    """Owns the file lookup for one namespace root."""

    @property
    def root(self) -> Path: ...

    def resolve(self, path_suffix: str) -> FileResolution: ...


class ModuleLoader:
    """Resolves path suffixes against search paths and registered namespaces.

    Usage::

        loader = ModuleLoader(["app/models"])
        loader.search_for_file("user")        # Path("app/models/user.py")
        loader.autoloadable_module("admin")   # Path("app/models") if admin/ exists
    """

    __slots__ = ("_extension", "_file_finders", "_namespace_resolvers", "search_paths")

    def __init__(
        self,
        search_paths: SearchPathSet | Iterable[str | Path] = (),
        *,
        extension: str = ".py",
    ) -> None:
        if not isinstance(search_paths, SearchPathSet):
            search_paths = SearchPathSet(search_paths)
        self.search_paths = search_paths
        self._extension = extension
        self._namespace_resolvers: list[NamespaceResolver] = []
        self._file_finders: list[FileFinder] = []

    # -- Registration --

    def register_namespace_resolver(self, resolver: NamespaceResolver) -> None:
        self._namespace_resolvers.append(resolver)

    def register_file_finder(self, finder: FileFinder) -> None:
        self._file_finders.append(finder)

    def add_search_path(self, path: str | Path) -> None:
        self.search_paths.add(path)

    def remove_search_path(self, path: str | Path) -> None:
        self.search_paths.remove(path)

    def delegation_scope(self) -> SearchPathScope:
        """Scope hiding every registered namespace root."""
        roots = {r.root for r in self._namespace_resolvers} | {f.root for f in self._file_finders}
        return SearchPathScope(self.search_paths, tuple(roots))

    # -- Lookups --

    def autoloadable_module(self, path_suffix: str) -> Path | None:
        """Return the search path holding the package for *path_suffix*."""
        for resolver in self._namespace_resolvers:
            result = resolver.resolve_namespace_root(path_suffix)
            if result is not DELEGATE:
                return result

        logger.debug("delegating package lookup for %r", path_suffix)
        return self.delegation_scope().run(lambda: self._generic_autoloadable_module(path_suffix))

    def search_for_file(self, path_suffix: str) -> Path | None:
        """Return the source file for *path_suffix*, or ``None``.

        A registered finder's ``None`` is final: the suffix targets its tree
        and nothing is there.
        """
        for finder in self._file_finders:
            result = finder.resolve(path_suffix)
            if result is not DELEGATE:
                return result

        logger.debug("delegating file lookup for %r", path_suffix)
        return self.delegation_scope().run(lambda: self._generic_search_for_file(path_suffix))

    # -- Generic rules --

    def _generic_autoloadable_module(self, path_suffix: str) -> Path | None:
        for root in self.search_paths:
            if (root / path_suffix).is_dir():
                return root
        return None

    def _generic_search_for_file(self, path_suffix: str) -> Path | None:
        if not path_suffix.endswith(self._extension):
            path_suffix += self._extension
        for root in self.search_paths:
            candidate = root / path_suffix
            if candidate.is_file():
                return candidate
        return None
