"""Tests for perch.namespace.candidates — picking one file among variants."""

from collections.abc import Callable
from pathlib import Path

from perch.config import ViewsConfig
from perch.namespace.candidates import FileCandidateSelector
from perch.namespace.probe import DirectoryProbe
from perch.namespace.types import FileCandidate


class TestSelectFile:
    def test_unmarked_preferred(self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]) -> None:
        touch("bar.py", "_bar.py")
        assert FileCandidateSelector(config).select_file(views_root, "bar") == "bar.py"

    def test_unmarked_beats_longer_marked(
        self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]
    ) -> None:
        touch("bar.py", "_bar.html.py")
        assert FileCandidateSelector(config).select_file(views_root, "bar") == "bar.py"

    def test_longest_wins(self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]) -> None:
        touch("_bar.html.py", "_bar.py")
        assert FileCandidateSelector(config).select_file(views_root, "bar") == "_bar.html.py"

    def test_longest_unmarked_wins(
        self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]
    ) -> None:
        touch("bar.py", "bar.html.py", "_bar.text.html.py")
        assert FileCandidateSelector(config).select_file(views_root, "bar") == "bar.html.py"

    def test_tie_is_deterministic(self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]) -> None:
        touch("bar.aa.py", "bar.zz.py", "bar.mm.py")
        assert FileCandidateSelector(config).select_file(views_root, "bar") == "bar.zz.py"

    def test_length_in_bytes(self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]) -> None:
        """card.é.py and card.ab.py are both 10 bytes; the name tie-break decides."""
        touch("card.ab.py", "card.é.py")
        assert FileCandidateSelector(config).select_file(views_root, "card") == "card.é.py"

    def test_no_match(self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]) -> None:
        touch("baz.py", "barn.py", "bar.html")
        assert FileCandidateSelector(config).select_file(views_root, "bar") is None

    def test_empty_directory(self, config: ViewsConfig, views_root: Path) -> None:
        assert FileCandidateSelector(config).select_file(views_root, "bar") is None

    def test_directories_ignored(self, config: ViewsConfig, views_root: Path) -> None:
        (views_root / "bar.py").mkdir()
        assert FileCandidateSelector(config).select_file(views_root, "bar") is None

    def test_exact_name_without_extension(
        self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]
    ) -> None:
        touch("bar")
        assert FileCandidateSelector(config).select_file(views_root, "bar") == "bar"

    def test_extension_case_insensitive(
        self, config: ViewsConfig, views_root: Path, touch: Callable[..., None]
    ) -> None:
        touch("bar.PY")
        assert FileCandidateSelector(config).select_file(views_root, "bar") == "bar.PY"

    def test_uses_probe(self, config: ViewsConfig) -> None:
        """Selection works on whatever the probe reports, not the real disk."""

        class FakeProbe(DirectoryProbe):
            def list_candidates(self, directory: Path) -> list[FileCandidate]:
                return [
                    FileCandidate("card.py", is_file=True),
                    FileCandidate("card.html.py", is_file=False),
                ]

        selector = FileCandidateSelector(config, FakeProbe())
        assert selector.select_file(Path("/nowhere"), "card") == "card.py"


class TestFileCandidate:
    def test_attributes(self) -> None:
        candidate = FileCandidate("_card.html.py", is_file=True)
        assert candidate.length == len("_card.html.py")
        assert candidate.is_marked("_")
        assert not FileCandidate("card.py", is_file=True).is_marked("_")

    def test_length_counts_bytes(self) -> None:
        assert FileCandidate("carte.é.py", is_file=True).length == 11


class TestDirectoryProbe:
    def test_lists_files_and_directories(self, views_root: Path, touch: Callable[..., None]) -> None:
        touch("card.py")
        (views_root / "shared").mkdir()

        entries = {c.name: c.is_file for c in DirectoryProbe().list_candidates(views_root)}
        assert entries == {"card.py": True, "shared": False}

    def test_is_directory(self, views_root: Path) -> None:
        probe = DirectoryProbe()
        assert probe.is_directory(views_root)
        assert not probe.is_directory(views_root / "missing")
