# docdeck/collection/session.py
# ============================================================
# Reorder Session — Drag/Hover State Machine
# ============================================================
# Turns pointer gestures into store moves:
#
#   IDLE ──begin_drag(id)──▶ DRAGGING(id, origin_index)
#   DRAGGING ──hover(over)──▶ DRAGGING   (eager move in the store)
#   DRAGGING ──end_drag()───▶ IDLE       (order already final)
#   DRAGGING ──cancel()─────▶ IDLE       (eager moves stay applied)
#
# Hover commits immediately so the list previews the new order
# while the pointer is still down. The target index of a hover is
# the slot the hovered item occupied in the layout that was on
# screen when the drag began. Items removed mid-drag are taken out
# of that layout and the slots after them close up.
#
# Removing the dragged item (or clearing the collection) cancels
# the session automatically.
#
# Usage:
#   session = ReorderSession(store)
#   session.begin_drag(a)
#   session.hover(c)
#   session.end_drag()
# ============================================================

import threading
from enum import Enum
from typing import Optional

from docdeck.collection.identity import ItemId
from docdeck.collection.store import CollectionEvent, EventKind, OrderedCollection
from docdeck.utils.logger import get_logger

logger = get_logger(__name__)


class SessionState(str, Enum):
    """States of a reorder gesture."""
    IDLE = "idle"
    DRAGGING = "dragging"


class ReorderSession:
    """
    Drag-and-drop reorder controller bound to one collection.

    Only one drag can be active at a time. Every call is total: calls
    made in the wrong state, or naming ids that are gone, are logged
    and ignored.

    Example:
        >>> store = OrderedCollection()
        >>> a, b, c = store.extend(["A", "B", "C"])
        >>> session = ReorderSession(store)
        >>> session.begin_drag(a)
        True
        >>> session.hover(c)
        True
        >>> [item.payload for item in store.snapshot()]
        ['B', 'C', 'A']
    """

    def __init__(self, store: OrderedCollection):
        self.store = store
        self._state = SessionState.IDLE
        self._dragged_id: Optional[ItemId] = None
        self._origin_index: Optional[int] = None
        self._origin_layout: dict[ItemId, int] = {}
        self._lock = threading.RLock()
        self._unsubscribe = store.subscribe(self._on_collection_event)

    # --------------------------------------------------------
    # State
    # --------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_dragging(self) -> bool:
        return self._state is SessionState.DRAGGING

    @property
    def dragged_id(self) -> Optional[ItemId]:
        return self._dragged_id

    @property
    def origin_index(self) -> Optional[int]:
        """Index of the dragged item when the gesture began."""
        return self._origin_index

    # --------------------------------------------------------
    # Transitions
    # --------------------------------------------------------

    def begin_drag(self, item_id: ItemId) -> bool:
        """
        Start dragging an item.

        Args:
            item_id: Id of the item picked up by the pointer.

        Returns:
            True if the session entered DRAGGING. False if the id is not
            in the collection or another drag is already active.
        """
        with self._lock:
            if self.is_dragging:
                logger.warning(
                    f"begin_drag({item_id}) rejected, already dragging {self._dragged_id}"
                )
                return False

            ids = self.store.ids()
            if item_id not in ids:
                logger.debug(f"begin_drag ignored, unknown item {item_id}")
                return False

            self._origin_layout = {iid: idx for idx, iid in enumerate(ids)}
            self._state = SessionState.DRAGGING
            self._dragged_id = item_id
            self._origin_index = self._origin_layout[item_id]

        logger.debug(f"Drag started: {item_id} at index {self._origin_index}")
        return True

    def hover(self, over_id: ItemId) -> bool:
        """
        Report the pointer hovering another item; reorders immediately.

        Args:
            over_id: Id of the item currently under the pointer.

        Returns:
            True if the dragged item changed position. Hovering the slot
            the dragged item already holds returns False.
        """
        with self._lock:
            if not self.is_dragging:
                return False
            if over_id == self._dragged_id:
                return False

            target = self._origin_layout.get(over_id)
            if target is None:
                # Added after the drag began, so it has no slot in that layout
                target = self.store.index_of(over_id)
            if target is None or over_id not in self.store:
                logger.debug(f"hover ignored, unknown item {over_id}")
                return False

            before = self.store.index_of(self._dragged_id)
            if not self.store.move_to(self._dragged_id, target):
                return False
            return self.store.index_of(self._dragged_id) != before

    def end_drag(self) -> bool:
        """
        Drop the dragged item. The order is already final.

        Returns:
            True if a drag was active.
        """
        with self._lock:
            if not self.is_dragging:
                return False
            logger.debug(
                f"Drag finished: {self._dragged_id} "
                f"at index {self.store.index_of(self._dragged_id)}"
            )
            self._reset()
            return True

    def cancel(self) -> bool:
        """
        Abort the drag without further store changes.

        Moves already committed by hover() are kept.

        Returns:
            True if a drag was active.
        """
        with self._lock:
            if not self.is_dragging:
                return False
            logger.debug(f"Drag cancelled: {self._dragged_id}")
            self._reset()
            return True

    def close(self) -> None:
        """Cancel any active drag and stop observing the collection."""
        self.cancel()
        self._unsubscribe()

    # --------------------------------------------------------
    # Internals
    # --------------------------------------------------------

    def _reset(self) -> None:
        self._state = SessionState.IDLE
        self._dragged_id = None
        self._origin_index = None
        self._origin_layout = {}

    def _on_collection_event(self, event: CollectionEvent) -> None:
        if event.kind not in (EventKind.REMOVED, EventKind.CLEARED):
            return
        with self._lock:
            if not self.is_dragging:
                return
            if self._dragged_id in event.item_ids:
                logger.info(
                    f"Dragged item {self._dragged_id} left the collection, "
                    f"cancelling drag"
                )
                self._reset()
                return
            for item_id in event.item_ids:
                self._forget_slot(item_id)

    def _forget_slot(self, item_id: ItemId) -> None:
        """Drop a removed item from the drag layout, closing the gap."""
        slot = self._origin_layout.pop(item_id, None)
        if slot is None:
            return
        for other, other_slot in self._origin_layout.items():
            if other_slot > slot:
                self._origin_layout[other] = other_slot - 1
