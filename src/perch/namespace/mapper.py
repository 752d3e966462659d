"""Namespace root mapping — is a path suffix a package under the views root?

The generic loader asks "which search path holds the package for this
suffix?". For ``views`` and ``views/<dir>`` where ``<dir>`` exists below the
views root, the answer is the views root itself. Everything else is handed
back to the generic loader, so unrelated packages that merely start with the
token are never hijacked.
"""

import logging
from pathlib import Path

from perch.config import ViewsConfig
from perch.namespace.probe import DirectoryProbe
from perch.namespace.types import DELEGATE, NamespaceResolution
from perch.naming import match_namespace

logger = logging.getLogger("perch.loader")


class NamespaceMapper:
    """Answers namespace-root questions for the views namespace."""

    __slots__ = ("_config", "_probe")

    def __init__(self, config: ViewsConfig, probe: DirectoryProbe | None = None) -> None:
        self._config = config
        self._probe = probe or DirectoryProbe()

    @property
    def root(self) -> Path:
        """The directory this mapper owns (excluded from delegated searches)."""
        return self._config.views_root

    def resolve_namespace_root(self, path_suffix: str) -> NamespaceResolution:
        """Return the views root if *path_suffix* names a views package.

        The bare token always resolves; a subpath resolves only when the
        matching directory exists. Otherwise returns ``DELEGATE``.
        """
        subpath = match_namespace(path_suffix, self._config.namespace)
        if subpath is None:
            return DELEGATE

        root = self._config.views_root
        if not subpath or self._probe.is_directory(root / subpath):
            logger.debug("namespace %r -> %s", path_suffix, root)
            return root

        return DELEGATE
