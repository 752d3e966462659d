"""Resolution of names and files in the virtual views namespace."""

from perch.namespace.candidates import FileCandidateSelector
from perch.namespace.mapper import NamespaceMapper
from perch.namespace.probe import DirectoryProbe
from perch.namespace.resolver import PathResolver
from perch.namespace.types import DELEGATE, Delegate, FileCandidate

__all__ = [
    "DELEGATE",
    "Delegate",
    "DirectoryProbe",
    "FileCandidate",
    "FileCandidateSelector",
    "NamespaceMapper",
    "PathResolver",
]
