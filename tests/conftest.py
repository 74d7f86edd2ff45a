"""
Shared fixtures: a views directory on disk and a factory built on it
"""
from pathlib import Path

import pytest

from laraview.support import Config
from laraview.view import ViewComposer, ViewFactory


def write_view(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding='utf-8')
    return path


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    root = tmp_path / 'views'
    root.mkdir()
    return root


@pytest.fixture
def make_factory(views_dir: Path):
    """Build a factory over views_dir with the given composer config"""
    def _make(composers=None):
        return ViewFactory(ViewComposer(composers or {}), views_dir)
    return _make


@pytest.fixture(autouse=True)
def clean_config():
    yield
    Config.clear_runtime_overrides()
