"""
Interval Registry - the canonicalization table.

Every interval is interned by its textual key (quality letter + number),
so two requests for the same interval return the same object and identity
comparison is enough for equality.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tonic_intervals.core.interval import Interval

logger = logging.getLogger(__name__)


class IntervalRegistry:
    """
    Process-wide mapping from interval key to canonical instance.

    Inserts are atomic: concurrent requests for the same key always
    converge on one instance. The lock is re-entrant so a factory (or a
    memoized derivation) may intern other intervals while it is held.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._instances: dict[str, Interval] = {}

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding the table and per-instance memoized links."""
        return self._lock

    def get(self, key: str) -> Interval | None:
        """Get an interned interval by key, or None."""
        return self._instances.get(key)

    def intern(self, key: str, factory: Callable[[], Interval]) -> Interval:
        """
        Return the interval for key, creating it with factory if absent.

        Args:
            key: Interval key (e.g., 'M3')
            factory: Builds the interval on first request

        Returns:
            The canonical instance for key
        """
        existing = self._instances.get(key)
        if existing is not None:
            return existing

        with self._lock:
            existing = self._instances.get(key)
            if existing is not None:
                return existing
            interval = factory()
            self._instances[key] = interval
            logger.debug("Interned interval %s", key)
            return interval

    def keys(self) -> list[str]:
        """All interned keys, in insertion order."""
        with self._lock:
            return list(self._instances)

    def __contains__(self, key: object) -> bool:
        return key in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def __iter__(self) -> Iterator[Interval]:
        with self._lock:
            return iter(list(self._instances.values()))


_registry: IntervalRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> IntervalRegistry:
    """Get the process-wide registry, creating it on first use."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = IntervalRegistry()
    return _registry
