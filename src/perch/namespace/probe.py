"""Filesystem queries used by the resolvers.

Read-only and uncached. ``OSError`` subclasses other than "does not exist"
propagate to the caller unchanged.
"""

from pathlib import Path

from perch.namespace.types import FileCandidate


class DirectoryProbe:
    """Thin wrapper over the filesystem calls the resolvers make.

    Subclass and override to resolve against something other than the
    local disk.
    """

    __slots__ = ()

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def list_candidates(self, directory: Path) -> list[FileCandidate]:
        """List the entries of *directory*, noting which are regular files."""
        return [
            FileCandidate(name=item.name, is_file=self.is_file(item))
            for item in directory.iterdir()
        ]
