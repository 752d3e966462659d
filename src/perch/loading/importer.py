"""Import hook that autoloads modules through a :class:`ModuleLoader`.

Appended to ``sys.meta_path``, so regular imports always win and the hook
only sees names nothing else could find. For ``views.user.password`` it
asks the loader for ``views/user/password``:

- a source file becomes a module (a package too, when the same suffix is
  also a directory, so children stay importable)
- a package directory with no file becomes an empty package; this is how
  the bare ``views`` package and its sub-namespaces come into existence
- anything else falls through to ``ModuleNotFoundError``

Packages created here have an empty ``__path__``. The default path finder
therefore never searches inside them, and every child import comes back
through this hook and the namespace rules.
"""

import importlib.abc
import importlib.machinery
import importlib.util
import logging
import sys
import types
from collections.abc import Sequence

from perch.loading.loader import ModuleLoader
from perch.naming import module_to_suffix

logger = logging.getLogger("perch.loader")


class _PackageLoader(importlib.abc.Loader):
    """Loader for directory-only packages: nothing to execute."""

    def create_module(self, spec: importlib.machinery.ModuleSpec) -> types.ModuleType | None:
        return None

    def exec_module(self, module: types.ModuleType) -> None:
        pass


_PACKAGE_LOADER = _PackageLoader()


class ViewsFinder(importlib.abc.MetaPathFinder):
    """Meta path finder backed by a :class:`ModuleLoader`."""

    def __init__(self, loader: ModuleLoader) -> None:
        self.loader = loader

    def find_spec(
        self,
        fullname: str,
        path: Sequence[str] | None = None,
        target: types.ModuleType | None = None,
    ) -> importlib.machinery.ModuleSpec | None:
        suffix = module_to_suffix(fullname)

        source = self.loader.search_for_file(suffix)
        if source is not None:
            is_package = self.loader.autoloadable_module(suffix) is not None
            logger.debug("autoload %s from %s", fullname, source)
            return importlib.util.spec_from_file_location(
                fullname,
                source,
                loader=importlib.machinery.SourceFileLoader(fullname, str(source)),
                submodule_search_locations=[] if is_package else None,
            )

        root = self.loader.autoloadable_module(suffix)
        if root is not None:
            logger.debug("autoload package %s under %s", fullname, root)
            return importlib.machinery.ModuleSpec(
                fullname, _PACKAGE_LOADER, origin=str(root), is_package=True
            )

        return None

    # -- Installation --

    def install(self) -> None:
        """Append to ``sys.meta_path``. Idempotent."""
        if self not in sys.meta_path:
            sys.meta_path.append(self)
            logger.debug("installed %r", self)

    def uninstall(self) -> None:
        """Remove from ``sys.meta_path``. Idempotent."""
        if self in sys.meta_path:
            sys.meta_path.remove(self)
            logger.debug("uninstalled %r", self)

    @property
    def installed(self) -> bool:
        return self in sys.meta_path

    def __repr__(self) -> str:
        return f"<ViewsFinder {list(map(str, self.loader.search_paths.baseline))!r}>"
