"""Name matching for the virtual views namespace.

Pure string functions, no filesystem access. Every rule about how a requested
path suffix relates to the namespace token, the views root, and the source
extension lives here so the resolvers never inline a pattern.

Path suffixes use ``/`` separators and mirror dotted module names::

    module_to_suffix("views.user.password")  # "views/user/password"
    match_namespace("views/user")            # "user"
    match_namespace("Views")                 # ""
    match_namespace("viewsy")                # None
"""

import re
from functools import lru_cache
from pathlib import PurePosixPath

NAMESPACE = "views"
EXTENSION = ".py"
MARKER = "_"


@lru_cache(maxsize=32)
def _namespace_re(token: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(token)}(?:/(.*))?", re.IGNORECASE | re.DOTALL)


@lru_cache(maxsize=32)
def _subpath_re(token: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(token)}/(.*)", re.IGNORECASE | re.DOTALL)


@lru_cache(maxsize=256)
def _candidate_re(base: str, marker: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(marker)}?{re.escape(base)}\.")


def match_namespace(suffix: str, token: str = NAMESPACE) -> str | None:
    """Return the subpath of *suffix* below the namespace token.

    ``"views"`` yields ``""`` (the namespace root itself), ``"views/a/b"``
    yields ``"a/b"``. Anything not starting with the token as a whole
    segment yields ``None``. Case-insensitive.
    """
    match = _namespace_re(token).fullmatch(suffix)
    if match is None:
        return None
    return (match.group(1) or "").strip("/")


def match_subpath(suffix: str, token: str = NAMESPACE) -> str | None:
    """Like :func:`match_namespace` but requires at least ``token/``.

    The bare token names a package, never a file, so file searches use this.
    """
    match = _subpath_re(token).fullmatch(suffix)
    return match.group(1).strip("/") if match else None


def strip_root(suffix: str, root: str) -> str | None:
    """Return the part of *suffix* after ``root/``, or ``None``.

    Accepts callers that already hold a fully qualified filesystem path.
    The comparison ignores case, like the namespace token match.
    """
    prefix = root.rstrip("/") + "/"
    if suffix[: len(prefix)].lower() == prefix.lower():
        return suffix[len(prefix) :].strip("/")
    return None


def strip_extension(suffix: str, extension: str = EXTENSION) -> str:
    """Drop one trailing source extension, if present."""
    return suffix.removesuffix(extension)


def is_marked(name: str, marker: str = MARKER) -> bool:
    """True when *name* is a marker-prefixed (partial) variant."""
    return name.startswith(marker)


def is_candidate(
    entry: str,
    base: str,
    *,
    extension: str = EXTENSION,
    marker: str = MARKER,
) -> bool:
    """Does directory entry *entry* qualify as a file for base name *base*?

    Qualifies when it equals *base* exactly, or when it reads
    ``[marker]base.<anything>`` and ends with the source extension
    (the extension check ignores case). For base ``foo``: ``foo.py``,
    ``foo.html.py``, ``_foo.py`` and ``_foo.html.py`` all qualify.
    """
    if entry == base:
        return True
    return (
        _candidate_re(base, marker).match(entry) is not None
        and entry.lower().endswith(extension.lower())
    )


def module_to_suffix(fullname: str) -> str:
    """``"views.user.password"`` -> ``"views/user/password"``."""
    return fullname.replace(".", "/")


def view_module_name(
    relative: str,
    *,
    token: str = NAMESPACE,
    marker: str = MARKER,
) -> str:
    """Map a file path relative to the views root to its dotted module name.

    The marker and every qualifier after the first dot of the basename are
    dropped, so ``foo/_bar.html.py`` becomes ``views.foo.bar``.
    """
    path = PurePosixPath(relative)
    stem = path.name.split(".", 1)[0].removeprefix(marker)
    return ".".join([token, *path.parent.parts, stem])
