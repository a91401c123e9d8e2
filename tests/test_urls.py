"""Tests for burrow.urls — URL resolution from route references."""

from __future__ import annotations

import pytest

from burrow._errors import RouteReferenceError, UnresolvedParamError
from burrow.urls import RouteOptions, path, resolve


class TestRouteOptions:

    def test_frozen(self) -> None:
        options = RouteOptions(to="/about")
        with pytest.raises(AttributeError):
            options.to = "/other"  # type: ignore[misc]

    def test_defaults(self) -> None:
        options = RouteOptions(to="/about")
        assert options.params is None
        assert options.locale is None
        assert options.search is None
        assert options.hash is None


class TestResolve:
    """The four stages: params, locale, search, hash."""

    def test_simple_path(self) -> None:
        assert resolve(RouteOptions(to="/about")) == "/about"

    def test_root(self) -> None:
        assert resolve(RouteOptions(to="/")) == "/"

    def test_dynamic_param(self) -> None:
        options = RouteOptions(to="/blog/[slug]", params={"slug": "hello"})
        assert resolve(options) == "/blog/hello"

    def test_multiple_params(self) -> None:
        options = RouteOptions(
            to="/blog/[category]/[slug]",
            params={"category": "tech", "slug": "astro"},
        )
        assert resolve(options) == "/blog/tech/astro"

    def test_catch_all_param(self) -> None:
        options = RouteOptions(to="/docs/[...path]", params={"...path": "guides/setup"})
        assert resolve(options) == "/docs/guides/setup"

    def test_locale(self) -> None:
        assert resolve(RouteOptions(to="/about", locale="fr")) == "/fr/about"

    def test_locale_on_root(self) -> None:
        assert resolve(RouteOptions(to="/", locale="fr")) == "/fr/"

    def test_empty_locale_ignored(self) -> None:
        assert resolve(RouteOptions(to="/about", locale="")) == "/about"

    def test_search(self) -> None:
        options = RouteOptions(to="/search", search={"q": "react", "sort": "desc"})
        assert resolve(options) == "/search?q=react&sort=desc"

    def test_search_insertion_order(self) -> None:
        options = RouteOptions(to="/search", search={"sort": "desc", "q": "react"})
        assert resolve(options) == "/search?sort=desc&q=react"

    def test_empty_search(self) -> None:
        assert resolve(RouteOptions(to="/search", search={})) == "/search"

    def test_search_is_encoded(self) -> None:
        options = RouteOptions(to="/search", search={"q": "a b&c", "tag": "c++"})
        assert resolve(options) == "/search?q=a+b%26c&tag=c%2B%2B"

    def test_search_form_encoding(self) -> None:
        options = RouteOptions(to="/search", search={"q": "a*b~c", "k-1": "x.y_z"})
        assert resolve(options) == "/search?q=a*b%7Ec&k-1=x.y_z"

    def test_hash(self) -> None:
        assert resolve(RouteOptions(to="/about", hash="team")) == "/about#team"

    def test_hash_not_encoded(self) -> None:
        assert resolve(RouteOptions(to="/about", hash="a b")) == "/about#a b"

    def test_empty_hash_ignored(self) -> None:
        assert resolve(RouteOptions(to="/about", hash="")) == "/about"

    def test_combines_everything(self) -> None:
        options = RouteOptions(
            to="/blog/[slug]",
            params={"slug": "post-1"},
            locale="en",
            search={"sort": "asc"},
            hash="comments",
        )
        assert resolve(options) == "/en/blog/post-1?sort=asc#comments"

    def test_search_and_hash(self) -> None:
        options = RouteOptions(to="/about", search={"ref": "nav"}, hash="team")
        assert resolve(options) == "/about?ref=nav#team"

    def test_param_value_with_question_mark_not_encoded(self) -> None:
        """Params are substituted verbatim before the query is appended."""
        options = RouteOptions(to="/q/[term]", params={"term": "why?"}, search={"a": "1"})
        assert resolve(options) == "/q/why??a=1"

    def test_idempotent(self) -> None:
        options = RouteOptions(to="/blog/[slug]", params={"slug": "x"}, locale="de")
        assert resolve(options) == resolve(options)


class TestParamSubstitution:
    """Edge cases of the substitution stage."""

    def test_missing_param_left_in_place(self) -> None:
        assert resolve(RouteOptions(to="/blog/[slug]")) == "/blog/[slug]"

    def test_extra_param_ignored(self) -> None:
        options = RouteOptions(to="/about", params={"slug": "x"})
        assert resolve(options) == "/about"

    def test_replaces_first_occurrence_only(self) -> None:
        options = RouteOptions(to="/[id]/compare/[id]", params={"id": "1"})
        assert resolve(options) == "/1/compare/[id]"

    def test_strict_missing_param(self) -> None:
        with pytest.raises(UnresolvedParamError, match="slug"):
            resolve(RouteOptions(to="/blog/[slug]"), strict=True)

    def test_strict_repeated_placeholder(self) -> None:
        options = RouteOptions(to="/[id]/compare/[id]", params={"id": "1"})
        with pytest.raises(UnresolvedParamError, match="id"):
            resolve(options, strict=True)

    def test_strict_satisfied(self) -> None:
        options = RouteOptions(to="/blog/[slug]", params={"slug": "[draft]"})
        assert resolve(options, strict=True) == "/blog/[draft]"

    def test_unresolved_is_reference_error(self) -> None:
        assert issubclass(UnresolvedParamError, RouteReferenceError)


class TestValidation:
    """Malformed references fail fast."""

    def test_empty_to(self) -> None:
        with pytest.raises(RouteReferenceError, match="non-empty"):
            resolve(RouteOptions(to=""))

    def test_relative_to(self) -> None:
        with pytest.raises(RouteReferenceError, match="start with '/'"):
            resolve(RouteOptions(to="about"))

    def test_non_string_param(self) -> None:
        with pytest.raises(RouteReferenceError, match="params"):
            resolve(RouteOptions(to="/p/[id]", params={"id": 3}))  # type: ignore[dict-item]

    def test_non_string_search(self) -> None:
        with pytest.raises(RouteReferenceError, match="search"):
            resolve(RouteOptions(to="/s", search={"page": 2}))  # type: ignore[dict-item]

    def test_non_mapping_search(self) -> None:
        with pytest.raises(RouteReferenceError, match="mapping"):
            resolve(RouteOptions(to="/s", search=[("a", "b")]))  # type: ignore[arg-type]

    def test_non_string_locale(self) -> None:
        with pytest.raises(RouteReferenceError, match="locale"):
            resolve(RouteOptions(to="/s", locale=1))  # type: ignore[arg-type]

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            resolve(RouteOptions(to=""))


class TestPath:
    """path() — keyword shorthand."""

    def test_matches_resolve(self) -> None:
        assert path("/blog/[slug]", {"slug": "hello"}, locale="fr") == "/fr/blog/hello"

    def test_plain(self) -> None:
        assert path("/about") == "/about"

    def test_strict(self) -> None:
        with pytest.raises(UnresolvedParamError):
            path("/blog/[slug]", strict=True)
