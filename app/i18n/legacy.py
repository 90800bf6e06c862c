"""
Legacy route classification

The site used to serve un-prefixed URLs (/posts, /tags/python, ...). Those
URLs are still linked from the outside, so instead of 404ing they are
recognised here and redirected onto the locale-prefixed scheme.

Routes are a table of tagged variants:

    ExactRoute("about", "/about")                       literal path
    PatternRoute("post", ("posts", Param("slug")))      literal + free segments

Matching walks the request segments against each variant's segments. Paths
arrive percent-encoded; each segment is decoded only for matching, and the
matched path is kept encoded as the redirect remainder. The table must not
contain two variants that can match the same path; that is checked once at
startup by `validate_legacy_routes`.

Every variant matches a fixed number of segments. The old site also caught
deeper shapes such as /posts/2024/my-post under "/posts/anything"; those
cannot coexist with /posts/page/{page:int} in a non-overlapping table, so
they are not legacy routes here and fall through to ordinary routing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any
from urllib.parse import unquote

from app.exceptions import LegacyRouteConfigError
from app.i18n.locale import LocaleRegistry, registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Param:
    """A free path segment. `kind` is "slug" (any segment) or "int" (digits only)."""

    name: str
    kind: str = "slug"

    def accepts(self, segment: str) -> bool:
        if self.kind == "int":
            return segment.isdigit()
        return bool(segment)

    def convert(self, segment: str) -> Any:
        return int(segment) if self.kind == "int" else segment


Segment = str | Param


def _segments_overlap(a: Segment, b: Segment) -> bool:
    if isinstance(a, Param) and isinstance(b, Param):
        # every kind accepts some digit-only segment
        return True
    if isinstance(a, Param):
        return a.accepts(b)
    if isinstance(b, Param):
        return b.accepts(a)
    return a == b


@dataclass(frozen=True)
class ExactRoute:
    name: str
    path: str

    @property
    def segments(self) -> tuple[Segment, ...]:
        return tuple(s for s in self.path.split("/") if s)

    @property
    def is_static(self) -> bool:
        return True

    @property
    def pattern(self) -> str:
        return self.path


@dataclass(frozen=True)
class PatternRoute:
    name: str
    segments: tuple[Segment, ...]

    @property
    def is_static(self) -> bool:
        return False

    @property
    def pattern(self) -> str:
        parts = []
        for segment in self.segments:
            if isinstance(segment, Param):
                parts.append(f"{{{segment.name}:{segment.kind}}}" if segment.kind != "slug" else f"{{{segment.name}}}")
            else:
                parts.append(segment)
        return "/" + "/".join(parts)


LegacyEntry = ExactRoute | PatternRoute


@dataclass(frozen=True)
class LegacyRoute:
    """A matched legacy path. `remainder` is the original path, kept verbatim."""

    route: LegacyEntry
    remainder: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.route.name

    @property
    def is_static(self) -> bool:
        return self.route.is_static


LEGACY_ROUTES: tuple[LegacyEntry, ...] = (
    ExactRoute("post_list", "/posts"),
    ExactRoute("tag_list", "/tags"),
    ExactRoute("archives", "/archives"),
    ExactRoute("search", "/search"),
    ExactRoute("about", "/about"),
    ExactRoute("not_found", "/404"),
    PatternRoute("post", ("posts", Param("slug"))),
    PatternRoute("post_list_page", ("posts", "page", Param("page", "int"))),
    PatternRoute("tag", ("tags", Param("tag"))),
    PatternRoute("tag_page", ("tags", Param("tag"), "page", Param("page", "int"))),
)


def split_segments(path: str) -> list[str] | None:
    """
    Split a path for matching. One trailing slash is tolerated; empty
    segments anywhere else mean the path cannot be a legacy route.
    """
    if not path.startswith("/"):
        return None
    body = path[1:]
    if body.endswith("/"):
        body = body[:-1]
    if not body:
        return []
    segments = body.split("/")
    if any(not s for s in segments):
        return None
    return segments


def match_entry(entry: LegacyEntry, segments: Sequence[str]) -> dict[str, Any] | None:
    """Structural match of (encoded) request segments against one table entry."""
    if len(segments) != len(entry.segments):
        return None
    params: dict[str, Any] = {}
    for expected, raw in zip(entry.segments, segments):
        actual = unquote(raw)
        if isinstance(expected, Param):
            if not expected.accepts(actual):
                return None
            params[expected.name] = expected.convert(actual)
        elif expected != actual:
            return None
    return params


def routes_overlap(a: LegacyEntry, b: LegacyEntry) -> bool:
    if len(a.segments) != len(b.segments):
        return False
    return all(_segments_overlap(x, y) for x, y in zip(a.segments, b.segments))


def validate_legacy_routes(
    routes: Iterable[LegacyEntry] = LEGACY_ROUTES,
    locales: LocaleRegistry = registry,
) -> None:
    """
    Check the table once at startup.

    Raises LegacyRouteConfigError if any two entries can match the same path.
    Raises ValueError for an entry that could never be redirected: one that
    starts with a locale prefix, targets the root, or looks like a file.
    """
    routes = list(routes)
    for entry in routes:
        segments = entry.segments
        if not segments:
            raise ValueError(f"Legacy route '{entry.name}' matches the root path")
        head = segments[0]
        if isinstance(head, str) and locales.locale_for_prefix(head) is not None:
            raise ValueError(f"Legacy route '{entry.name}' starts with locale prefix '{head}'")
        last = segments[-1]
        if isinstance(last, str) and "." in last:
            raise ValueError(f"Legacy route '{entry.name}' ends in a file name")

    for a, b in combinations(routes, 2):
        if routes_overlap(a, b):
            raise LegacyRouteConfigError(a.pattern, b.pattern)

    logger.debug(f"Validated {len(routes)} legacy routes")


def classify(path: str, routes: Iterable[LegacyEntry] = LEGACY_ROUTES) -> LegacyRoute | None:
    """
    Return the legacy route `path` belongs to, or None.

    `path` is the raw request path; the returned remainder is that same
    string, so "/posts/a%3Fb" redirects as "/posts/a%3Fb" and not "/posts/a?b".
    """
    segments = split_segments(path)
    if not segments:
        return None
    for entry in routes:
        params = match_entry(entry, segments)
        if params is not None:
            return LegacyRoute(route=entry, remainder=path, params=params)
    return None
