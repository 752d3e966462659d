"""View system configuration.

ViewsConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. Every component receives it at construction.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from perch.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ViewsConfig:
    """View system configuration. Immutable after creation.

    ``views_root`` is expanded to an absolute path when the config is built
    and never changes afterwards::

        config = ViewsConfig(views_root="app/views", debug=True)
        config.views_root  # PosixPath('/srv/site/app/views')
    """

    # Namespace
    views_root: str | Path = "app/views"
    namespace: str = "views"  # Virtual top-level package for view modules
    extension: str = ".py"  # Source extension of view modules
    marker: str = "_"  # Leading character of partial variants

    # Templates (kida)
    debug: bool = False
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    def __post_init__(self) -> None:
        root = Path(os.path.abspath(os.path.expanduser(self.views_root)))
        object.__setattr__(self, "views_root", root)

        if not self.namespace.isidentifier():
            msg = f"namespace must be a valid identifier, got {self.namespace!r}"
            raise ConfigurationError(msg)
        if not self.extension.startswith(".") or len(self.extension) < 2:
            msg = f"extension must look like '.py', got {self.extension!r}"
            raise ConfigurationError(msg)
        if len(self.marker) != 1:
            msg = f"marker must be a single character, got {self.marker!r}"
            raise ConfigurationError(msg)

    @property
    def handler(self) -> str:
        """Template handler name served by view modules (``"py"``)."""
        return self.extension[1:]

    @classmethod
    def for_project(cls, project_root: str | Path, **overrides: object) -> ViewsConfig:
        """Build a config whose views root is ``<project_root>/app/views``."""
        return cls(views_root=Path(project_root) / "app" / "views", **overrides)  # type: ignore[arg-type]
