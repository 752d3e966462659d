"""Generic module loading: search paths, the loader, and the import hook."""

from perch.loading.importer import ViewsFinder
from perch.loading.loader import FileFinder, ModuleLoader, NamespaceResolver
from perch.loading.search_paths import SearchPathScope, SearchPathSet

__all__ = [
    "FileFinder",
    "ModuleLoader",
    "NamespaceResolver",
    "SearchPathScope",
    "SearchPathSet",
    "ViewsFinder",
]
