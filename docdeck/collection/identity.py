# docdeck/collection/identity.py
# ============================================================
# Identity Allocator — Unique Item Ids
# ============================================================
# Issues opaque ids for items entering a collection. An id is
# never reused, not even after its item has been removed.
#
# Strategies:
#   - uuid:    random 128-bit value (canonical hex string)
#   - counter: "<prefix>-<n>", monotonically increasing per allocator
#
# Usage:
#   from docdeck.collection.identity import make_allocator
#   allocator = make_allocator("counter")
#   allocator.allocate()   # → "item-1"
# ============================================================

import itertools
import threading
import uuid
from typing import NewType, Optional, Protocol

from config.settings import settings

ItemId = NewType("ItemId", str)


class IdentityAllocator(Protocol):
    """Anything with an ``allocate()`` returning a fresh ItemId."""

    def allocate(self) -> ItemId:
        ...


class UuidAllocator:
    """Random uuid4 ids. Collision probability is negligible."""

    def allocate(self) -> ItemId:
        return ItemId(str(uuid.uuid4()))


class CounterAllocator:
    """
    Sequential ids scoped to this allocator instance.

    Two collections with separate CounterAllocators may issue the same
    id string; ids are only unique within the issuing allocator.
    """

    def __init__(self, prefix: Optional[str] = None, start: int = 1):
        self.prefix = prefix if prefix is not None else settings.id_prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def allocate(self) -> ItemId:
        with self._lock:
            n = next(self._counter)
        return ItemId(f"{self.prefix}-{n}")


def make_allocator(strategy: Optional[str] = None) -> IdentityAllocator:
    """
    Build an allocator for the given strategy name.

    Args:
        strategy: "uuid" or "counter". Default: from settings.

    Returns:
        A fresh allocator instance.

    Raises:
        ValueError: If the strategy name is unknown.
    """
    strategy = strategy or settings.id_strategy

    if strategy == "uuid":
        return UuidAllocator()
    if strategy == "counter":
        return CounterAllocator()

    raise ValueError(
        f"Unknown id strategy: '{strategy}'. Available: uuid, counter"
    )
