"""Perch — view modules under a virtual namespace.

Views live in an ordinary directory tree but import under a dedicated
top-level package, so ``app/views/user/password.py`` is
``views.user.password`` and never collides with an application module
``user.password``.

Basic usage::

    from perch import ViewSystem, ViewsConfig

    system = ViewSystem(ViewsConfig.for_project("."))
    with system:
        from views.user import password

Partial lookups::

    from perch import LookupDetails

    system.find_templates("card", "shared", True, LookupDetails())
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "DELEGATE",
    "ConfigurationError",
    "FoundTemplate",
    "LookupDetails",
    "ModuleLoader",
    "PerchError",
    "SearchPathSet",
    "TemplateNotFoundError",
    "ViewLoadError",
    "ViewSystem",
    "ViewsConfig",
]

_LAZY_IMPORTS: dict[str, str] = {
    "DELEGATE": "perch.namespace.types",
    "ConfigurationError": "perch.errors",
    "FoundTemplate": "perch.templating.lookup",
    "LookupDetails": "perch.templating.lookup",
    "ModuleLoader": "perch.loading.loader",
    "PerchError": "perch.errors",
    "SearchPathSet": "perch.loading.search_paths",
    "TemplateNotFoundError": "perch.errors",
    "ViewLoadError": "perch.errors",
    "ViewSystem": "perch.system",
    "ViewsConfig": "perch.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
