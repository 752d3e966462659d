"""Value types shared by the namespace resolvers.

Resolution outcomes are plain values: a ``Path`` when found, ``None`` for a
genuine miss inside the views tree, and :data:`DELEGATE` when the request is
not ours and belongs to the generic loader.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal

from perch.naming import is_marked


class Delegate(Enum):
    """Outcome meaning "not ours, hand it to the generic loader"."""

    DELEGATE = "delegate"

    def __repr__(self) -> str:
        return "DELEGATE"


DELEGATE = Delegate.DELEGATE

type Delegated = Literal[Delegate.DELEGATE]

# NamespaceMapper: the views root, or delegate
type NamespaceResolution = Path | Delegated

# PathResolver: a file, a miss, or delegate
type FileResolution = Path | None | Delegated


@dataclass(frozen=True, slots=True)
class FileCandidate:
    """A directory entry considered while searching for a view file.

    Built fresh on every lookup; files come and go between requests in
    development, so nothing here is cached.

    Attributes:
        name: Entry name within its directory.
        is_file: Whether the entry is (or links to) a regular file.
    """

    name: str
    is_file: bool

    @property
    def length(self) -> int:
        """Length of the name in bytes, as the filesystem stores it."""
        return len(os.fsencode(self.name))

    def is_marked(self, marker: str) -> bool:
        return is_marked(self.name, marker)
