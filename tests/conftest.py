import pathlib

import pytest

from contentgen.adapters.sources.filesystem import FilesystemSource
from contentgen.adapters.warnings.sinks import CollectingWarningSink


def write_item(root: pathlib.Path, collection: str, slug: str, meta: str | None = None, files=()):
    """Create <root>/<collection>/<slug>/ with an optional meta.txt and extra files."""
    item_dir = root / collection / slug
    item_dir.mkdir(parents=True, exist_ok=True)
    if meta is not None:
        (item_dir / "meta.txt").write_text(meta, encoding="utf-8")
    for name in files:
        target = item_dir / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(b"\x89PNG")
    return item_dir


@pytest.fixture
def content_root(tmp_path):
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def source(content_root):
    return FilesystemSource(root=content_root)


@pytest.fixture
def sink():
    return CollectingWarningSink()
