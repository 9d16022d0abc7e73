"""Paging configuration and the page window returned to list clients."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pagingsample.config import parse_bool


@dataclass(frozen=True)
class PagingConfig:
    """How the cheese list is split into loads.

    ``page_size`` should fill at least a screen worth of rows on a large
    device so the user is unlikely to scroll onto an unloaded row.
    ``max_size`` caps how many rows a single load may return.
    """

    page_size: int = 30
    enable_placeholders: bool = True
    max_size: int = 200
    prefetch_distance: int | None = None
    initial_load_size_hint: int | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("Page size must be a positive number")

        # Frozen dataclass: fill derived defaults through object.__setattr__.
        if self.prefetch_distance is None:
            object.__setattr__(self, "prefetch_distance", self.page_size)
        if self.initial_load_size_hint is None:
            object.__setattr__(self, "initial_load_size_hint", self.page_size * 3)

        if not self.enable_placeholders and self.prefetch_distance == 0:
            raise ValueError(
                "Placeholders and prefetch are the only ways to trigger loading of more "
                "data, so either placeholders must be enabled, or prefetch distance must be > 0"
            )
        if self.max_size < self.page_size + 2 * int(self.prefetch_distance or 0):
            raise ValueError(
                f"Maximum size must be at least pageSize + 2*prefetchDist, "
                f"pageSize={self.page_size}, prefetchDist={self.prefetch_distance}, "
                f"maxSize={self.max_size}"
            )

    @classmethod
    def from_mapping(cls, config: Any) -> "PagingConfig":
        """Build from Flask-style config keys."""

        return cls(
            page_size=int(config.get("PAGE_SIZE", 30)),
            enable_placeholders=parse_bool(config.get("ENABLE_PLACEHOLDERS"), True),
            max_size=int(config.get("MAX_SIZE", 200)),
        )

    def resolve_limit(self, offset: int, limit: int | None = None) -> int:
        if limit is None:
            limit = int(self.initial_load_size_hint or self.page_size) if offset == 0 else self.page_size
        return max(1, min(int(limit), self.max_size))


@dataclass(frozen=True)
class Page:
    """One loaded window of the ordered list."""

    items: Sequence[Any]
    offset: int
    total_count: int
    placeholders_before: int = 0
    placeholders_after: int = 0
    generation: int = 0


def build_page(
    items: Sequence[Any],
    offset: int,
    total_count: int,
    config: PagingConfig,
    generation: int = 0,
) -> Page:
    if not config.enable_placeholders:
        return Page(items=items, offset=offset, total_count=total_count, generation=generation)

    before = min(offset, total_count)
    after = max(total_count - offset - len(items), 0)
    return Page(
        items=items,
        offset=offset,
        total_count=total_count,
        placeholders_before=before,
        placeholders_after=after,
        generation=generation,
    )
