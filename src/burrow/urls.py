"""URL builder — turn a route reference into a URL string.

Resolution runs four stages, always in this order::

    1. substitute params     /blog/[slug]        -> /blog/hello
    2. prefix locale         /blog/hello         -> /fr/blog/hello
    3. append search         /fr/blog/hello      -> /fr/blog/hello?ref=nav
    4. append hash           ...?ref=nav         -> ...?ref=nav#top

The builder does not consult a route table.  Use
:meth:`burrow.pages.table.RouteTable.check` or
:func:`burrow.routes.create_route` to validate a reference first.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote_plus, urlencode

from burrow._errors import RouteReferenceError, UnresolvedParamError
from burrow._types import ParamValues
from burrow.pages.segments import extract_param_names


@dataclass(frozen=True, slots=True)
class RouteOptions:
    """A reference to a route, resolved by :func:`resolve`.

    Attributes:
        to: Route path pattern, e.g. ``"/about"`` or ``"/blog/[slug]"``.
        params: Values for the ``[name]`` placeholders in ``to``.
        locale: Locale prefix, e.g. ``"fr"`` -> ``/fr/about``.
        search: Query parameters, serialised in insertion order.
        hash: Fragment, appended without encoding.

    """

    to: str
    params: ParamValues | None = None
    locale: str | None = None
    search: Mapping[str, str] | None = None
    hash: str | None = None


def resolve(options: RouteOptions, *, strict: bool = False) -> str:
    """Build a URL string from *options*.

    A placeholder without a matching param is left in the output as-is,
    unless *strict* is set.  Params without a matching placeholder are
    ignored.

    Raises:
        RouteReferenceError: If *options* is malformed (empty or relative
            ``to``, non-string values).
        UnresolvedParamError: If *strict* and a placeholder was not filled.

    """
    _validate(options)
    url = options.to

    if options.params:
        for key, value in options.params.items():
            url = url.replace(f"[{key}]", value, 1)
    if strict:
        _check_unresolved(options.to, options.params or {})

    if options.locale:
        url = f"/{options.locale}{url}"

    if options.search:
        url = f"{url}?{urlencode(list(options.search.items()), quote_via=_form_quote)}"

    if options.hash:
        url = f"{url}#{options.hash}"

    return url


def path(
    to: str,
    params: Mapping[str, str] | None = None,
    *,
    locale: str | None = None,
    search: Mapping[str, str] | None = None,
    hash: str | None = None,  # noqa: A002
    strict: bool = False,
) -> str:
    """Keyword shorthand for ``resolve(RouteOptions(...))``.

    Example::

        path("/blog/[slug]", {"slug": "hello"}, locale="fr")  # "/fr/blog/hello"

    """
    options = RouteOptions(to=to, params=params, locale=locale, search=search, hash=hash)
    return resolve(options, strict=strict)


def _form_quote(value: str, safe: str = "", encoding: str | None = None,
                errors: str | None = None) -> str:
    # application/x-www-form-urlencoded: "*" stays literal, "~" is escaped
    return quote_plus(value, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def _check_unresolved(to: str, params: Mapping[str, str]) -> None:
    # Each supplied key fills one occurrence of its placeholder
    remaining = list(extract_param_names(to))
    for key in params:
        if key in remaining:
            remaining.remove(key)
    if remaining:
        msg = f"Unresolved params in {to!r}: {', '.join(remaining)}"
        raise UnresolvedParamError(msg)


def _validate(options: RouteOptions) -> None:
    """Fail fast on references that would produce a malformed URL."""
    if not isinstance(options.to, str) or not options.to:
        msg = f"Route 'to' must be a non-empty string, got {options.to!r}"
        raise RouteReferenceError(msg)
    if not options.to.startswith("/"):
        msg = f"Route 'to' must start with '/', got {options.to!r}"
        raise RouteReferenceError(msg)

    for field_name in ("params", "search"):
        mapping = getattr(options, field_name)
        if mapping is None:
            continue
        if not isinstance(mapping, Mapping):
            msg = f"Route {field_name!r} must be a mapping, got {type(mapping).__name__}"
            raise RouteReferenceError(msg)
        for key, value in mapping.items():
            if not isinstance(key, str) or not isinstance(value, str):
                msg = (
                    f"Route {field_name!r} entries must be str -> str, "
                    f"got {key!r}: {value!r}"
                )
                raise RouteReferenceError(msg)

    for field_name in ("locale", "hash"):
        value = getattr(options, field_name)
        if value is not None and not isinstance(value, str):
            msg = f"Route {field_name!r} must be a string, got {type(value).__name__}"
            raise RouteReferenceError(msg)
