# docdeck/collection/__init__.py
# ============================================================
# Ordered Collection Package
# ============================================================
# The ordered, reorderable list of inputs behind every tool.
#
# Key classes:
#   - OrderedCollection: Store with append/remove/move/snapshot
#   - ReorderSession: Drag/hover state machine over a store
#   - Item: Frozen (id, payload) record
#   - make_allocator: Builds the id allocator (uuid | counter)
# ============================================================

from docdeck.collection.identity import (
    CounterAllocator,
    IdentityAllocator,
    ItemId,
    UuidAllocator,
    make_allocator,
)
from docdeck.collection.session import ReorderSession, SessionState
from docdeck.collection.store import (
    CollectionEvent,
    EventKind,
    Item,
    OrderedCollection,
)

__all__ = [
    "CollectionEvent",
    "CounterAllocator",
    "EventKind",
    "IdentityAllocator",
    "Item",
    "ItemId",
    "OrderedCollection",
    "ReorderSession",
    "SessionState",
    "UuidAllocator",
    "make_allocator",
]
