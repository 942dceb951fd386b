"""Collection-scoped shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from tally.errors import FixtureError
from tally.testing.capabilities import Disposable, Initializable
from tally.testing.invoke import failure_message, invoke
from tally.testing.models import CollectionDefinition


logger = logging.getLogger(__name__)


class FixtureRegistry:
    """Fixtures acquired during one run, in acquisition order.

    Owned by a single run and only touched from the engine's task.
    """

    def __init__(self) -> None:
        self._fixtures: dict[str, Any] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._fixtures

    def __len__(self) -> int:
        return len(self._fixtures)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._fixtures))

    def get(self, name: str) -> Any | None:
        return self._fixtures.get(name)

    def add(self, name: str, fixture: Any) -> None:
        self._fixtures[name] = fixture

    def pop(self, name: str) -> Any | None:
        return self._fixtures.pop(name, None)

    def drain(self) -> list[tuple[str, Any]]:
        """Remove and return every fixture, oldest first."""
        items = list(self._fixtures.items())
        self._fixtures.clear()
        return items


class FixtureManager:
    """Creates, shares and disposes one fixture per collection."""

    def __init__(
        self,
        definitions: Mapping[str, CollectionDefinition],
        registry: FixtureRegistry | None = None,
    ) -> None:
        self.definitions = dict(definitions)
        self.registry = registry if registry is not None else FixtureRegistry()

    async def acquire(self, name: str) -> Any | None:
        """Return the collection's fixture, creating and initializing it once.

        Returns None when the collection has no definition.

        Raises:
            FixtureError: If construction or initialization fails.
        """
        if name in self.registry:
            return self.registry.get(name)

        definition = self.definitions.get(name)
        if definition is None:
            return None

        try:
            fixture = definition.fixture_type()
            if isinstance(fixture, Initializable):
                await invoke(fixture.initialize)
        except Exception as exc:
            raise FixtureError(name, exc) from exc

        self.registry.add(name, fixture)
        logger.info("Shared fixture created for collection: %s", name)
        return fixture

    async def release(self, name: str) -> None:
        """Dispose the collection's fixture if it is still held."""
        if name not in self.registry:
            return
        await self._dispose(name, self.registry.pop(name))

    async def release_all(self) -> None:
        """Dispose every fixture still held, exactly once each, and clear the registry."""
        for name, fixture in self.registry.drain():
            await self._dispose(name, fixture)

    async def _dispose(self, name: str, fixture: Any) -> None:
        if not isinstance(fixture, Disposable):
            return
        try:
            await invoke(fixture.dispose)
        except Exception as exc:
            logger.warning(
                "Disposing shared fixture for collection %s failed: %s",
                name,
                failure_message(exc),
            )
        else:
            logger.info("Shared fixture disposed for collection: %s", name)


__all__ = ["FixtureManager", "FixtureRegistry"]
