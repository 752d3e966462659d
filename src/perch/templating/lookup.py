"""Template lookup by name, prefix, and partial flag.

:class:`TemplatePathResolver` is the generic search: in ``<root>/<prefix>/``
it matches ``[_]name[.locale][.format].handler`` where the marker is
required exactly when a partial is requested.

:class:`PartialFallbackResolver` wraps any such search. View modules are
plain Python files, so a partial ``card`` may live in ``card.py`` as well
as ``_card.py``. When a partial search that accepts the view handler comes
back empty, it retries once as a non-partial search restricted to that
handler.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger("perch.templating")


@dataclass(frozen=True, slots=True)
class LookupDetails:
    """Acceptable variants for a lookup, in preference order.

    Attributes:
        handlers: Handler names (final extension without the dot).
        formats: Format qualifiers such as ``"html"``.
        locales: Locale qualifiers such as ``"en"``.
    """

    handlers: tuple[str, ...] = ("html", "py")
    formats: tuple[str, ...] = ("html",)
    locales: tuple[str, ...] = ()

    def with_handlers(self, *handlers: str) -> LookupDetails:
        return dataclasses.replace(self, handlers=handlers)


@dataclass(frozen=True, slots=True)
class FoundTemplate:
    """A template file matched by a lookup.

    Attributes:
        path: Absolute path of the file.
        virtual_path: Path relative to the search root, ``/``-separated.
        handler: Final extension without the dot.
        format: Format qualifier, if the name carries one.
        locale: Locale qualifier, if the name carries one.
    """

    path: Path
    virtual_path: str
    handler: str
    format: str | None = None
    locale: str | None = None


class TemplateSearch(Protocol):
    def find_templates(
        self, name: str, prefix: str, partial: bool, details: LookupDetails
    ) -> list[FoundTemplate]: ...


def _alternation(values: tuple[str, ...]) -> str:
    return "|".join(re.escape(v) for v in values)


def _rank(value: str | None, preferred: tuple[str, ...]) -> int:
    if value is None or value not in preferred:
        return len(preferred)
    return preferred.index(value)


class TemplatePathResolver:
    """Filesystem template search rooted at one directory.

    Usage::

        search = TemplatePathResolver("app/views")
        search.find_templates("card", "shared", True, LookupDetails())
        # [FoundTemplate(path=.../shared/_card.html, handler="html", ...)]
    """

    __slots__ = ("_marker", "_root")

    def __init__(self, root: str | Path, *, marker: str = "_") -> None:
        self._root = Path(root)
        self._marker = marker

    def find_templates(
        self, name: str, prefix: str, partial: bool, details: LookupDetails
    ) -> list[FoundTemplate]:
        """Return matching templates, most preferred first. Never raises on a miss."""
        if not details.handlers:
            return []

        directory = self._root / prefix if prefix else self._root
        if not directory.is_dir():
            return []

        basename = f"{self._marker}{name}" if partial else name
        locale = rf"(?:\.(?P<locale>{_alternation(details.locales)}))?" if details.locales else ""
        fmt = rf"(?:\.(?P<format>{_alternation(details.formats)}))?" if details.formats else ""
        pattern = re.compile(
            rf"{re.escape(basename)}{locale}{fmt}\.(?P<handler>{_alternation(details.handlers)})"
        )

        found: list[FoundTemplate] = []
        for item in directory.iterdir():
            match = pattern.fullmatch(item.name)
            if match is None or not item.is_file():
                continue
            groups = match.groupdict()
            found.append(
                FoundTemplate(
                    path=item,
                    virtual_path=item.relative_to(self._root).as_posix(),
                    handler=groups["handler"],
                    format=groups.get("format"),
                    locale=groups.get("locale"),
                )
            )

        found.sort(
            key=lambda t: (
                _rank(t.handler, details.handlers),
                _rank(t.format, details.formats),
                _rank(t.locale, details.locales),
                t.virtual_path,
            )
        )
        return found


class PartialFallbackResolver:
    """Retries empty partial lookups as full lookups for view modules.

    Args:
        search: The generic search to wrap.
        handler: The handler served by view modules (``"py"``).
    """

    __slots__ = ("_handler", "_search")

    def __init__(self, search: TemplateSearch, handler: str = "py") -> None:
        self._search = search
        self._handler = handler

    def find_templates(
        self, name: str, prefix: str, partial: bool, details: LookupDetails
    ) -> list[FoundTemplate]:
        templates = self._search.find_templates(name, prefix, partial, details)
        if partial and not templates and self._handler in details.handlers:
            logger.debug("no partial %r in %r, retrying as %s view", name, prefix, self._handler)
            templates = self._search.find_templates(
                name, prefix, False, details.with_handlers(self._handler)
            )
        return templates
