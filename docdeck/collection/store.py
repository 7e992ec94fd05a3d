# docdeck/collection/store.py
# ============================================================
# Ordered Collection Store — Items in User-Defined Order
# ============================================================
# Holds the inputs of one tool (uploaded PDFs, images) as an
# ordered sequence of uniquely-identified items. The store is
# the only write path for that order.
#
# Guarantees:
#   1. Ids are unique; no operation duplicates or loses an id.
#   2. remove() keeps the relative order of the remaining items.
#   3. move_to() clamps its target into [0, len-1].
#   4. Every mutation is applied atomically under one lock and
#      listeners only ever observe fully-applied state.
#   5. Stale ids are silent no-ops, never errors.
#
# Usage:
#   from docdeck.collection.store import OrderedCollection
#   store = OrderedCollection(release=lambda handle: handle.close())
#   a = store.append(pdf_handle_a)
#   b = store.append(pdf_handle_b)
#   store.move_to(b, 0)
#   [item.payload for item in store.snapshot()]
# ============================================================

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional

from docdeck.collection.identity import IdentityAllocator, ItemId, make_allocator
from docdeck.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================
# Data Classes
# ============================================================

@dataclass(frozen=True)
class Item:
    """
    One entry of a collection.

    Attributes:
        id: Opaque id, assigned once by the allocator and never changed.
        payload: Handle owned by the upload side (file, image, path...).
                 The store keeps a reference and never inspects it.
    """
    id: ItemId
    payload: Any


class EventKind(str, Enum):
    """Kinds of mutation reported to collection listeners."""
    APPENDED = "appended"
    REMOVED = "removed"
    MOVED = "moved"
    CLEARED = "cleared"


@dataclass(frozen=True)
class CollectionEvent:
    """
    Notification sent to listeners after a mutation has been applied.

    Attributes:
        kind: What happened.
        item_ids: Ids affected by the mutation.
        index: Position of the item after an append or move, or the
               position it was removed from. None for a clear.
    """
    kind: EventKind
    item_ids: tuple[ItemId, ...]
    index: Optional[int] = None


Listener = Callable[[CollectionEvent], None]
ReleaseFn = Callable[[Any], None]


# ============================================================
# Ordered Collection Store
# ============================================================

class OrderedCollection:
    """
    Ordered, uniquely-identified sequence of items.

    The sequence and the id index are always updated together under
    a re-entrant lock. Snapshots are immutable tuples, so a renderer or
    an exporter can iterate one while the user keeps reordering.

    Example:
        >>> store = OrderedCollection()
        >>> a = store.append("a.pdf")
        >>> b = store.append("b.pdf")
        >>> store.move_to(b, 0)
        True
        >>> [item.payload for item in store.snapshot()]
        ['b.pdf', 'a.pdf']
    """

    def __init__(
        self,
        allocator: Optional[IdentityAllocator] = None,
        release: Optional[ReleaseFn] = None,
    ):
        """
        Initialize an empty collection.

        Args:
            allocator: Source of item ids. Default: built from settings.
            release: Called with an item's payload once the item leaves
                     the collection (removal or teardown), so the upload
                     side can free temporary handles.
        """
        self._allocator = allocator or make_allocator()
        self._release = release
        self._items: list[Item] = []
        self._by_id: dict[ItemId, Item] = {}
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    # --------------------------------------------------------
    # Reads
    # --------------------------------------------------------

    def snapshot(self) -> tuple[Item, ...]:
        """Return the current order as an immutable tuple."""
        with self._lock:
            return tuple(self._items)

    def ids(self) -> list[ItemId]:
        with self._lock:
            return [item.id for item in self._items]

    def payloads(self) -> list[Any]:
        with self._lock:
            return [item.payload for item in self._items]

    def get(self, item_id: ItemId) -> Optional[Item]:
        with self._lock:
            return self._by_id.get(item_id)

    def index_of(self, item_id: ItemId) -> Optional[int]:
        """Current position of an item, or None if it is not present."""
        with self._lock:
            item = self._by_id.get(item_id)
            if item is None:
                return None
            return self._items.index(item)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        with self._lock:
            return item_id in self._by_id

    def __iter__(self) -> Iterator[Item]:
        return iter(self.snapshot())

    # --------------------------------------------------------
    # Mutations
    # --------------------------------------------------------

    def append(self, payload: Any) -> ItemId:
        """
        Add a payload at the end of the collection.

        Args:
            payload: Handle provided by the upload side.

        Returns:
            The id allocated for the new item.
        """
        with self._lock:
            item_id = self._allocator.allocate()
            item = Item(id=item_id, payload=payload)
            self._items.append(item)
            self._by_id[item_id] = item
            index = len(self._items) - 1

        logger.debug(f"Appended item {item_id} at index {index}")
        self._notify(CollectionEvent(EventKind.APPENDED, (item_id,), index))
        return item_id

    def extend(self, payloads: Iterable[Any]) -> list[ItemId]:
        """Append several payloads, keeping their given order."""
        return [self.append(payload) for payload in payloads]

    def remove(self, item_id: ItemId) -> bool:
        """
        Remove an item by id.

        Removing an id that is not present is a no-op, so a second
        click on an already-removed item is harmless.

        Args:
            item_id: Id of the item to remove.

        Returns:
            True if an item was removed, False if the id was absent.
        """
        with self._lock:
            item = self._by_id.pop(item_id, None)
            if item is None:
                logger.debug(f"Remove ignored, unknown item {item_id}")
                return False
            index = self._items.index(item)
            del self._items[index]

        logger.debug(f"Removed item {item_id} from index {index}")
        self._release_payload(item)
        self._notify(CollectionEvent(EventKind.REMOVED, (item_id,), index))
        return True

    def move_to(self, item_id: ItemId, target_index: int) -> bool:
        """
        Relocate an item, shifting the items in between by one.

        The target is clamped into [0, len-1], so after the call the
        item sits exactly at ``clamp(target_index, 0, len-1)``.

        Args:
            item_id: Id of the item to move.
            target_index: Desired position in the sequence.

        Returns:
            True if the item is present (moved or already in place),
            False if the id was absent.
        """
        with self._lock:
            item = self._by_id.get(item_id)
            if item is None:
                logger.debug(f"Move ignored, unknown item {item_id}")
                return False

            target = max(0, min(target_index, len(self._items) - 1))
            current = self._items.index(item)
            if current == target:
                return True

            del self._items[current]
            self._items.insert(target, item)

        logger.debug(f"Moved item {item_id}: {current} → {target}")
        self._notify(CollectionEvent(EventKind.MOVED, (item_id,), target))
        return True

    def clear(self) -> None:
        """Tear the collection down, releasing every payload."""
        with self._lock:
            removed = self._items
            self._items = []
            self._by_id = {}

        if not removed:
            return

        for item in removed:
            self._release_payload(item)

        logger.debug(f"Cleared collection ({len(removed)} items)")
        self._notify(
            CollectionEvent(EventKind.CLEARED, tuple(item.id for item in removed))
        )

    def close(self) -> None:
        self.clear()

    def __enter__(self) -> "OrderedCollection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --------------------------------------------------------
    # Listeners
    # --------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called after every applied mutation.

        Args:
            listener: Callable receiving a CollectionEvent.

        Returns:
            A function that unregisters the listener.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: CollectionEvent) -> None:
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                logger.warning(
                    f"Collection listener failed on '{event.kind.value}' event: {e}",
                    exc_info=True,
                )

    def _release_payload(self, item: Item) -> None:
        if self._release is None:
            return
        try:
            self._release(item.payload)
        except Exception as e:
            logger.warning(
                f"Releasing payload of item {item.id} failed: {e}",
                exc_info=True,
            )
