"""Shared test fixtures for burrow."""

from __future__ import annotations

from pathlib import Path

import pytest


def make_pages(pages: Path, *names: str) -> Path:
    """Create empty page files (and their directories) under *pages*."""
    for name in names:
        page = pages / name
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text("---\n---\n")
    return pages


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project root with an empty ``src/pages`` directory."""
    (tmp_path / "src" / "pages").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def pages_dir(project: Path) -> Path:
    """A small pages tree with ignored files alongside real pages.

    Routes: ``/``, ``/blog``, ``/blog/[slug]``.
    """
    return make_pages(
        project / "src" / "pages",
        "index.astro",
        "blog/index.astro",
        "blog/[slug].astro",
        "_draft.astro",
        "api/hello.ts",
    )
