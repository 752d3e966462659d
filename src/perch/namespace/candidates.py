"""Choosing one view file among the variants present in a directory.

For base name ``card`` a directory may hold ``card.py``, ``card.html.py``,
``_card.py`` and ``_card.html.py`` at once. Selection rules:

1. Only regular files that qualify (see :func:`perch.naming.is_candidate`).
2. Unmarked files beat marked (partial) ones when both exist.
3. The longest name wins; extra qualifiers before the extension make a
   file more specific. Equal lengths fall back to the lexicographically
   greatest name, which is deterministic but carries no meaning.
"""

from pathlib import Path

from perch.config import ViewsConfig
from perch.namespace.probe import DirectoryProbe
from perch.naming import is_candidate


class FileCandidateSelector:
    __slots__ = ("_config", "_probe")

    def __init__(self, config: ViewsConfig, probe: DirectoryProbe | None = None) -> None:
        self._config = config
        self._probe = probe or DirectoryProbe()

    def select_file(self, directory: Path, base_filename: str) -> str | None:
        """Return the entry name to load for *base_filename*, or ``None``."""
        candidates = [
            candidate
            for candidate in self._probe.list_candidates(directory)
            if candidate.is_file
            and is_candidate(
                candidate.name,
                base_filename,
                extension=self._config.extension,
                marker=self._config.marker,
            )
        ]
        if not candidates:
            return None

        unmarked = [c for c in candidates if not c.is_marked(self._config.marker)]
        if unmarked:
            candidates = unmarked

        return max(candidates, key=lambda c: (c.length, c.name)).name
