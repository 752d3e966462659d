"""ViewSystem — wires the views namespace into a loader and a template search.

One ``ViewsConfig`` in, every collaborator out::

    system = ViewSystem(ViewsConfig.for_project("."), search_paths=["app/models"])

    with system:  # finder installed for the block
        from views.user import password

    system.find_templates("card", "shared", True, LookupDetails())

The views root is appended to the loader's search paths, and the namespace
mapper and path resolver are registered with the loader, so the loader's
generic rules never see the views root directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from types import ModuleType
from typing import Any

from kida import Environment

from perch.config import ViewsConfig
from perch.errors import TemplateNotFoundError
from perch.loading.importer import ViewsFinder
from perch.loading.loader import ModuleLoader
from perch.loading.search_paths import SearchPathScope, SearchPathSet
from perch.namespace.candidates import FileCandidateSelector
from perch.namespace.mapper import NamespaceMapper
from perch.namespace.probe import DirectoryProbe
from perch.namespace.resolver import PathResolver
from perch.namespace.types import FileResolution, NamespaceResolution
from perch.templating.integration import create_environment, load_view, render_template
from perch.templating.lookup import (
    FoundTemplate,
    LookupDetails,
    PartialFallbackResolver,
    TemplatePathResolver,
)

logger = logging.getLogger("perch.loader")


class ViewSystem:
    """The views namespace, configured once and shared by every request."""

    def __init__(
        self,
        config: ViewsConfig,
        *,
        search_paths: Iterable[str | Path] = (),
        probe: DirectoryProbe | None = None,
    ) -> None:
        self.config = config
        probe = probe or DirectoryProbe()

        self.mapper = NamespaceMapper(config, probe)
        self.resolver = PathResolver(config, probe, FileCandidateSelector(config, probe))

        self.loader = ModuleLoader(SearchPathSet(search_paths), extension=config.extension)
        self.loader.register_namespace_resolver(self.mapper)
        self.loader.register_file_finder(self.resolver)
        self.loader.add_search_path(config.views_root)

        self.templates = PartialFallbackResolver(
            TemplatePathResolver(config.views_root, marker=config.marker),
            handler=config.handler,
        )
        self.finder = ViewsFinder(self.loader)
        self._env: Environment | None = None
        logger.debug("views namespace %r rooted at %s", config.namespace, config.views_root)

    @property
    def search_paths(self) -> SearchPathSet:
        return self.loader.search_paths

    # -- Namespace --

    def resolve_namespace_root(self, path_suffix: str) -> NamespaceResolution:
        return self.mapper.resolve_namespace_root(path_suffix)

    def resolve(self, path_suffix: str) -> FileResolution:
        return self.resolver.resolve(path_suffix)

    def with_namespace_root_excluded[T](self, action: Callable[[], T]) -> T:
        """Run *action* with the views root hidden from the search paths."""
        return SearchPathScope(self.search_paths, (self.config.views_root,)).run(action)

    # -- Templates --

    def find_templates(
        self, name: str, prefix: str, partial: bool, details: LookupDetails | None = None
    ) -> list[FoundTemplate]:
        return self.templates.find_templates(name, prefix, partial, details or LookupDetails())

    def find_template(
        self, name: str, prefix: str, partial: bool, details: LookupDetails | None = None
    ) -> FoundTemplate:
        """Like :meth:`find_templates` but returns the best match or raises."""
        templates = self.find_templates(name, prefix, partial, details)
        if not templates:
            raise TemplateNotFoundError(name, prefix, partial)
        return templates[0]

    @property
    def env(self) -> Environment:
        """Kida environment over the views root, created on first use."""
        if self._env is None:
            self._env = create_environment(self.config)
        return self._env

    def render(self, template: FoundTemplate, **context: Any) -> str:
        return render_template(self.env, template, context)

    def load_view(self, template: FoundTemplate) -> ModuleType:
        return load_view(self.config, template)

    # -- Import hook --

    def install(self) -> None:
        self.finder.install()

    def uninstall(self) -> None:
        self.finder.uninstall()

    def __enter__(self) -> ViewSystem:
        self.install()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.uninstall()

    def __repr__(self) -> str:
        return f"<ViewSystem {self.config.namespace}={self.config.views_root}>"
