"""Tests for burrow.pages.scanner — route discovery from a pages tree."""

from __future__ import annotations

import errno
from pathlib import Path

import pytest

from burrow.pages.scanner import RouteEntry, _derive_route_path, is_page_file, scan
from conftest import make_pages


def _paths(entries: tuple[RouteEntry, ...]) -> list[str]:
    return [entry.route_path for entry in entries]


# ---------------------------------------------------------------------------
# RouteEntry dataclass
# ---------------------------------------------------------------------------


class TestRouteEntry:
    """Verify RouteEntry is frozen and well-behaved."""

    def test_frozen(self) -> None:
        entry = RouteEntry(route_path="/about", params=(), source=Path("about.astro"))
        with pytest.raises(AttributeError):
            entry.route_path = "/other"  # type: ignore[misc]

    def test_equality(self) -> None:
        a = RouteEntry(route_path="/a", params=(), source=Path("a.md"))
        b = RouteEntry(route_path="/a", params=(), source=Path("a.md"))
        assert a == b

    def test_is_dynamic(self) -> None:
        entry = RouteEntry(route_path="/[id]", params=("id",), source=Path("[id].md"))
        assert entry.is_dynamic
        assert not RouteEntry(route_path="/", params=(), source=Path("index.md")).is_dynamic


# ---------------------------------------------------------------------------
# _derive_route_path
# ---------------------------------------------------------------------------


class TestDeriveRoutePath:
    """Route path derivation from file position relative to the pages dir."""

    def test_root_index(self, tmp_path: Path) -> None:
        assert _derive_route_path(tmp_path / "index.astro", tmp_path) == "/"

    def test_simple_file(self, tmp_path: Path) -> None:
        assert _derive_route_path(tmp_path / "about.md", tmp_path) == "/about"

    def test_nested_index(self, tmp_path: Path) -> None:
        assert _derive_route_path(tmp_path / "blog" / "index.astro", tmp_path) == "/blog"

    def test_deep_index(self, tmp_path: Path) -> None:
        page = tmp_path / "docs" / "guides" / "setup" / "index.mdx"
        assert _derive_route_path(page, tmp_path) == "/docs/guides/setup"

    def test_dynamic_directory(self, tmp_path: Path) -> None:
        page = tmp_path / "[lang]" / "[...path].astro"
        assert _derive_route_path(page, tmp_path) == "/[lang]/[...path]"

    def test_index_matches_directory_path(self, tmp_path: Path) -> None:
        """An index file routes to the same path as a sibling file named after its dir."""
        index = _derive_route_path(tmp_path / "blog" / "index.astro", tmp_path)
        named = _derive_route_path(tmp_path / "blog.astro", tmp_path)
        assert index == named == "/blog"


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------


class TestScan:
    """scan() — depth-first, ignore rules, best-effort."""

    def test_pages_tree(self, pages_dir: Path) -> None:
        """Drafts and the api/ subtree are excluded."""
        entries = scan(pages_dir)
        assert sorted(_paths(entries)) == ["/", "/blog", "/blog/[slug]"]

    def test_params_attached(self, pages_dir: Path) -> None:
        by_path = {entry.route_path: entry for entry in scan(pages_dir)}
        assert by_path["/blog/[slug]"].params == ("slug",)
        assert by_path["/blog"].params == ()
        assert by_path["/"].params == ()

    def test_source_recorded(self, pages_dir: Path) -> None:
        by_path = {entry.route_path: entry for entry in scan(pages_dir)}
        assert by_path["/blog"].source == pages_dir / "blog" / "index.astro"

    def test_siblings_sorted_depth_first(self, pages_dir: Path) -> None:
        assert _paths(scan(pages_dir)) == ["/blog/[slug]", "/blog", "/"]

    def test_repeated_scans_equal(self, pages_dir: Path) -> None:
        assert scan(pages_dir) == scan(pages_dir)

    def test_accepts_str(self, pages_dir: Path) -> None:
        assert scan(str(pages_dir)) == scan(pages_dir)

    def test_missing_root_returns_empty(self, tmp_path: Path) -> None:
        assert scan(tmp_path / "nope") == ()

    def test_empty_root(self, tmp_path: Path) -> None:
        assert scan(tmp_path) == ()

    def test_error_pages_ignored(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "404.astro", "500.md", "about.astro")
        assert _paths(scan(tmp_path)) == ["/about"]

    def test_underscore_directory_ignored(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "_components/card.astro", "about.astro")
        assert _paths(scan(tmp_path)) == ["/about"]

    def test_nested_api_directory_ignored(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "v1/api/users.ts", "v1/index.astro")
        assert _paths(scan(tmp_path)) == ["/v1"]

    def test_api_page_file_is_a_route(self, tmp_path: Path) -> None:
        """Only a directory named api is skipped, not a page file named api."""
        make_pages(tmp_path, "api.astro")
        assert _paths(scan(tmp_path)) == ["/api"]

    def test_non_page_files_skipped(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "about.astro", "logo.svg", "notes.txt")
        assert _paths(scan(tmp_path)) == ["/about"]

    def test_catch_all_route(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "docs/[...path].mdx")
        (entry,) = scan(tmp_path)
        assert entry.route_path == "/docs/[...path]"
        assert entry.params == ("...path",)

    def test_params_in_order_across_directories(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "blog/[category]/[slug].astro")
        (entry,) = scan(tmp_path)
        assert entry.params == ("category", "slug")

    def test_duplicates_kept(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "blog.astro", "blog/index.md")
        assert _paths(scan(tmp_path)) == ["/blog", "/blog"]

    def test_no_trailing_slash(self, tmp_path: Path) -> None:
        make_pages(tmp_path, "a/b/index.astro", "a/index.astro", "index.astro")
        for path in _paths(scan(tmp_path)):
            assert path.startswith("/")
            assert path == "/" or not path.endswith("/")

    def test_unsearchable_subtree_skipped(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Entries of a listable but unsearchable directory cannot be stat-ed."""
        make_pages(tmp_path, "about.astro", "locked/secret.astro")
        locked = tmp_path / "locked"
        real_is_dir = Path.is_dir

        def is_dir(self: Path) -> bool:
            if self.parent == locked:
                raise PermissionError(errno.EACCES, "Permission denied", str(self))
            return real_is_dir(self)

        monkeypatch.setattr(Path, "is_dir", is_dir)
        assert _paths(scan(tmp_path)) == ["/about"]

    def test_unlistable_subtree_skipped(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        make_pages(tmp_path, "about.astro", "locked/secret.astro", "open/page.md")
        locked = tmp_path / "locked"
        real_iterdir = Path.iterdir

        def iterdir(self: Path):  # noqa: ANN202
            if self == locked:
                raise PermissionError(errno.EACCES, "Permission denied", str(self))
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)
        assert _paths(scan(tmp_path)) == ["/about", "/open/page"]


# ---------------------------------------------------------------------------
# is_page_file
# ---------------------------------------------------------------------------


class TestIsPageFile:
    """Watcher-event filter: under the pages root with a page extension."""

    def test_page_under_root(self, tmp_path: Path) -> None:
        pages = tmp_path / "src" / "pages"
        assert is_page_file(pages / "blog" / "post.md", pages)

    def test_wrong_extension(self, tmp_path: Path) -> None:
        pages = tmp_path / "src" / "pages"
        assert not is_page_file(pages / "logo.png", pages)

    def test_outside_root(self, tmp_path: Path) -> None:
        pages = tmp_path / "src" / "pages"
        assert not is_page_file(tmp_path / "src" / "components" / "Card.astro", pages)

    def test_sibling_with_shared_prefix(self, tmp_path: Path) -> None:
        pages = tmp_path / "src" / "pages"
        assert not is_page_file(tmp_path / "src" / "pages-old" / "a.astro", pages)

    def test_accepts_strings(self, tmp_path: Path) -> None:
        pages = tmp_path / "pages"
        assert is_page_file(str(pages / "index.astro"), str(pages))
