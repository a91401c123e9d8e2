"""Shared type definitions for burrow."""

from collections.abc import Mapping
from typing import Literal

# Route path pattern (e.g., "/", "/blog/[slug]")
type RoutePath = str

# Raw parameter name token (e.g., "slug", "...path")
type ParamName = str

# Parameter values keyed by raw name
type ParamValues = Mapping[str, str]

# What to do when two page files produce the same route path
type CollisionPolicy = Literal["error", "last-wins"]
