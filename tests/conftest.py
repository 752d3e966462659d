"""Shared fixtures: a views tree on disk and a config pointing at it."""

from collections.abc import Callable
from pathlib import Path

import pytest

from perch.config import ViewsConfig


@pytest.fixture
def views_root(tmp_path: Path) -> Path:
    root = tmp_path / "app" / "views"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def config(views_root: Path) -> ViewsConfig:
    return ViewsConfig(views_root=views_root)


@pytest.fixture
def touch(views_root: Path) -> Callable[..., None]:
    """Create files (and their directories) below the views root."""

    def _touch(*relative: str, content: str = "") -> None:
        for rel in relative:
            path = views_root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")

    return _touch
