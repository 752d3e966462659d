"""Path resolution — turn a requested suffix into a view source file.

Accepts both the namespaced form (``views/foo/bar``) and a fully qualified
path under the views root (``/srv/app/views/foo/bar``), each with or
without the source extension. Anything else is delegated.

Once a suffix targets the views tree and its directory exists, a missing
file is a real miss (``None``), not a delegation.
"""

import logging
import posixpath
from pathlib import Path

from perch.config import ViewsConfig
from perch.namespace.candidates import FileCandidateSelector
from perch.namespace.probe import DirectoryProbe
from perch.namespace.types import DELEGATE, FileResolution
from perch.naming import match_subpath, strip_extension, strip_root

logger = logging.getLogger("perch.loader")


class PathResolver:
    """Finds view source files for the generic loader."""

    __slots__ = ("_config", "_probe", "_selector")

    def __init__(
        self,
        config: ViewsConfig,
        probe: DirectoryProbe | None = None,
        selector: FileCandidateSelector | None = None,
    ) -> None:
        self._config = config
        self._probe = probe or DirectoryProbe()
        self._selector = selector or FileCandidateSelector(config, self._probe)

    @property
    def root(self) -> Path:
        """The directory this resolver owns (excluded from delegated searches)."""
        return self._config.views_root

    def subpath_for(self, path_suffix: str) -> str | None:
        """The part of *path_suffix* below the views root, if it targets it."""
        normalized = strip_extension(path_suffix, self._config.extension)
        found = match_subpath(normalized, self._config.namespace)
        if found is None:
            found = strip_root(normalized, str(self._config.views_root))
        return found

    def resolve(self, path_suffix: str) -> FileResolution:
        """Return the view file for *path_suffix*, ``None``, or ``DELEGATE``."""
        subpath = self.subpath_for(path_suffix)
        if subpath is None:
            return DELEGATE

        dirname, base_filename = posixpath.split(subpath)
        if not base_filename:
            return DELEGATE

        directory = self._config.views_root / dirname
        if not self._probe.is_directory(directory):
            return DELEGATE

        filename = self._selector.select_file(directory, base_filename)
        if filename is None:
            logger.debug("no view file for %r in %s", path_suffix, directory)
            return None

        logger.debug("view file %r -> %s", path_suffix, directory / filename)
        return directory / filename
