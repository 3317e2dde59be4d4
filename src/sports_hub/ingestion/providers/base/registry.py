from __future__ import annotations

from collections.abc import Iterable
from typing import Callable

from .source import DataSource

SourceFactory = Callable[[], DataSource]


class SourceRegistry:
    def __init__(self) -> None:
        self._factories: dict[str, SourceFactory] = {}

    def register(self, source_key: str, factory: SourceFactory) -> None:
        if source_key in self._factories:
            raise ValueError(f"Duplicate source registration: {source_key}")
        self._factories[source_key] = factory

    def build(self, order: Iterable[str]) -> list[DataSource]:
        """Instantiate sources in priority order."""

        sources: list[DataSource] = []
        seen: set[str] = set()
        for key in order:
            if key in seen:
                raise ValueError(f"Source listed twice in order: {key}")
            factory = self._factories.get(key)
            if factory is None:
                raise ValueError(
                    f"No source registered for {key!r}; known: {sorted(self._factories)}"
                )
            seen.add(key)
            sources.append(factory())
        return sources
