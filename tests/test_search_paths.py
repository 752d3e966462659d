"""Tests for perch.loading.search_paths — scoped search path overrides."""

import threading
from pathlib import Path

import pytest

from perch.loading.search_paths import SearchPathScope, SearchPathSet

MODELS = Path("/srv/app/models")
VIEWS = Path("/srv/app/views")
LIB = Path("/srv/lib")


class TestBaseline:
    def test_ordered_and_unique(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS, MODELS])
        assert paths.baseline == (MODELS, VIEWS)

    def test_add_and_remove(self) -> None:
        paths = SearchPathSet()
        paths.add("/srv/app/models")
        paths.add(VIEWS)
        paths.add(VIEWS)
        paths.remove(MODELS)
        paths.remove(LIB)

        assert list(paths) == [VIEWS]

    def test_container_protocol(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS])
        assert len(paths) == 2
        assert VIEWS in paths
        assert LIB not in paths

    def test_relative_and_absolute_spellings_dedupe(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        paths = SearchPathSet(["app/views", tmp_path / "app" / "views", "app/../app/views"])

        assert paths.baseline == (tmp_path / "app" / "views",)
        assert "app/views" in paths

    def test_remove_any_spelling(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        paths = SearchPathSet([tmp_path / "lib"])
        paths.remove("lib")
        assert paths.baseline == ()


class TestExcluding:
    def test_override_hides_paths(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS, LIB])

        with paths.excluding(VIEWS) as override:
            assert override == (MODELS, LIB)
            assert paths.override == (MODELS, LIB)
            assert list(paths) == [MODELS, LIB]
            assert VIEWS not in paths

        assert paths.override is None
        assert list(paths) == [MODELS, VIEWS, LIB]

    def test_hides_every_spelling(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        views = tmp_path / "app" / "views"
        paths = SearchPathSet(["app/models", "app/views"])

        with paths.excluding(views):
            assert list(paths) == [tmp_path / "app" / "models"]
        with paths.excluding("app/views"):
            assert list(paths) == [tmp_path / "app" / "models"]

    def test_cleared_after_exception(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS])

        with pytest.raises(RuntimeError), paths.excluding(VIEWS):
            raise RuntimeError("boom")

        assert paths.override is None

    def test_nested_scopes_restore_outer(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS, LIB])

        with paths.excluding(VIEWS):
            with paths.excluding(VIEWS, LIB):
                assert list(paths) == [MODELS]
            assert list(paths) == [MODELS, LIB]

        assert paths.override is None

    def test_override_is_thread_local(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS])
        seen: list[tuple[Path, ...]] = []
        inside = threading.Event()
        done = threading.Event()

        def other_thread() -> None:
            inside.wait()
            seen.append(paths.effective())
            done.set()

        worker = threading.Thread(target=other_thread)
        worker.start()
        with paths.excluding(VIEWS):
            inside.set()
            done.wait(timeout=5)
            assert paths.effective() == (MODELS,)
        worker.join()

        assert seen == [(MODELS, VIEWS)]

    def test_sets_are_independent(self) -> None:
        first = SearchPathSet([MODELS, VIEWS])
        second = SearchPathSet([MODELS, VIEWS])

        with first.excluding(VIEWS):
            assert second.override is None


class TestSearchPathScope:
    def test_returns_action_result(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS])
        scope = SearchPathScope(paths, (VIEWS,))

        assert scope.run(lambda: list(paths)) == [MODELS]
        assert paths.override is None

    def test_override_cleared_when_action_raises(self) -> None:
        paths = SearchPathSet([MODELS, VIEWS])
        scope = SearchPathScope(paths, (VIEWS,))

        def action() -> None:
            raise ValueError("delegated lookup failed")

        with pytest.raises(ValueError, match="delegated lookup failed"):
            scope.run(action)
        assert paths.override is None
