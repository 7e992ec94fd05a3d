# docdeck/tools/workspace.py
# ============================================================
# Tool Workspace — One Tool Instance, End to End
# ============================================================
# Binds everything a tool page needs:
#   input list (OrderedCollection) → reorder gestures (ReorderSession)
#   → form inputs (ToolOptions) → export (pluggable collaborator)
#
# Design Decisions:
#   1. Exporters are plain callables (sync or async). The actual PDF
#      merge, compression or background removal lives outside this
#      library; the workspace only hands over the final order.
#   2. Busy flag: one export at a time. A second request while one
#      is in flight is rejected with ToolBusyError, never queued.
#   3. Exporter failures are re-raised as ExportFailedError and the
#      busy flag is always cleared, so the user can simply retry.
#
# Usage:
#   from docdeck.tools.workspace import ToolWorkspace
#   ws = ToolWorkspace("merge_pdf", release=close_handle)
#   ws.add([handle_a, handle_b], media_type="application/pdf")
#   result = await ws.export(merge_with_pypdf)
# ============================================================

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Optional, Union

from docdeck.collection.identity import IdentityAllocator, ItemId
from docdeck.collection.session import ReorderSession
from docdeck.collection.store import Item, OrderedCollection, ReleaseFn
from docdeck.exceptions import (
    EmptyCollectionError,
    ExportFailedError,
    ToolBusyError,
    UnsupportedMediaError,
)
from docdeck.tools.options import ToolOptions, options_for
from docdeck.tools.registry import ToolKind, get_profile
from docdeck.utils.logger import get_logger

logger = get_logger(__name__)


# ============================================================
# Data Classes
# ============================================================

@dataclass(frozen=True)
class ExportRequest:
    """
    Everything an export collaborator needs, frozen at commit time.

    Attributes:
        tool: Tool being exported.
        items: Items in final order. Tools that only process one input
               receive just the first item.
        options: Validated form inputs of the tool.
        filename: Output filename, extension included.
    """
    tool: ToolKind
    items: tuple[Item, ...]
    options: ToolOptions
    filename: str

    @property
    def payloads(self) -> list[Any]:
        return [item.payload for item in self.items]


Exporter = Callable[[ExportRequest], Union[Any, Awaitable[Any]]]


# ============================================================
# Tool Workspace
# ============================================================

class ToolWorkspace:
    """
    State of one tool instance: inputs, reorder gesture, options, busy flag.

    Example:
        >>> ws = ToolWorkspace("img_to_pdf")
        >>> a, b = ws.add(["scan1.png", "scan2.png"], media_type="image/png")
        >>> ws.begin_drag(b) and ws.hover(a) and ws.end_drag()
        True
        >>> [item.payload for item in ws.snapshot()]
        ['scan2.png', 'scan1.png']
    """

    def __init__(
        self,
        kind: Union[ToolKind, str],
        options: Optional[ToolOptions] = None,
        allocator: Optional[IdentityAllocator] = None,
        release: Optional[ReleaseFn] = None,
    ):
        """
        Initialize a workspace for a tool.

        Args:
            kind: Tool this workspace backs.
            options: Pre-filled options. Default: the tool's defaults.
            allocator: Id allocator for the input list. Default: from settings.
            release: Called with each payload once it leaves the list.
                     While an export is running, release is held back
                     until the export finishes.
        """
        self.profile = get_profile(kind)
        self.kind = self.profile.kind
        self.options = options or options_for(self.kind)
        self._release = release
        self._held_releases: list[Any] = []
        self.store = OrderedCollection(
            allocator=allocator,
            release=self._release_or_hold if release is not None else None,
        )
        self.session: Optional[ReorderSession] = (
            ReorderSession(self.store) if self.profile.reorderable else None
        )
        self._busy = False

        logger.info(
            f"ToolWorkspace initialized — tool: [bold]{self.kind.value}[/bold], "
            f"reorderable: {self.profile.reorderable}"
        )

    # --------------------------------------------------------
    # Inputs
    # --------------------------------------------------------

    def add(self, payloads: Iterable[Any], media_type: Optional[str] = None) -> list[ItemId]:
        """
        Accept payloads from the upload side.

        Single-input tools keep only the first payload and replace
        whatever they held before.

        Args:
            payloads: Handles in the order the user selected them.
            media_type: Media type of the selection, checked against
                        the tool's accepted media when given.

        Returns:
            Ids allocated for the accepted payloads.

        Raises:
            UnsupportedMediaError: If the tool does not accept media_type.
        """
        if media_type is not None and not self.profile.accepts(media_type):
            raise UnsupportedMediaError(self.kind.value, media_type)

        payloads = list(payloads)
        if not payloads:
            return []

        if not self.profile.multiple:
            if len(payloads) > 1:
                logger.warning(
                    f"{self.kind.value} takes a single input, "
                    f"ignoring {len(payloads) - 1} extra file(s)"
                )
            self.store.clear()
            payloads = payloads[:1]

        ids = self.store.extend(payloads)
        logger.info(f"Added {len(ids)} input(s) to {self.kind.value} (total: {len(self.store)})")
        return ids

    def remove(self, item_id: ItemId) -> bool:
        return self.store.remove(item_id)

    def snapshot(self) -> tuple[Item, ...]:
        return self.store.snapshot()

    # --------------------------------------------------------
    # Reordering
    # --------------------------------------------------------

    def begin_drag(self, item_id: ItemId) -> bool:
        if self.session is None:
            logger.debug(f"{self.kind.value} does not support reordering")
            return False
        return self.session.begin_drag(item_id)

    def hover(self, over_id: ItemId) -> bool:
        if self.session is None:
            return False
        return self.session.hover(over_id)

    def end_drag(self) -> bool:
        if self.session is None:
            return False
        return self.session.end_drag()

    def cancel_drag(self) -> bool:
        if self.session is None:
            return False
        return self.session.cancel()

    # --------------------------------------------------------
    # Export
    # --------------------------------------------------------

    @property
    def is_busy(self) -> bool:
        return self._busy

    async def export(self, exporter: Exporter) -> Any:
        """
        Run an export collaborator over the final order.

        The busy check happens before the first suspension point, so a
        concurrent second request is rejected without touching the list.

        Args:
            exporter: Callable taking an ExportRequest. May be sync or
                      return an awaitable.

        Returns:
            Whatever the exporter returns (bytes, a path...).

        Raises:
            ToolBusyError: If another export is still running.
            EmptyCollectionError: If there are no inputs.
            ExportFailedError: If the exporter raised.
        """
        if self._busy:
            logger.warning(f"Export rejected, {self.kind.value} is busy")
            raise ToolBusyError(self.kind.value)

        items = self.store.snapshot()
        if not items:
            raise EmptyCollectionError(self.kind.value)
        if not self.profile.uses_all_inputs:
            items = items[:1]

        request = ExportRequest(
            tool=self.kind,
            items=items,
            options=self.options,
            filename=self.options.resolve_filename(self.profile.extension),
        )

        self._busy = True
        logger.info(
            f"Export starting — tool: [bold]{self.kind.value}[/bold], "
            f"inputs: {len(items)}, output: {request.filename}"
        )
        try:
            result = exporter(request)
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.error(f"Export failed for {self.kind.value}: {e}", exc_info=True)
            raise ExportFailedError(self.kind.value, str(e)) from e
        finally:
            self._busy = False
            self._flush_held_releases()

        logger.info(f"Export complete — [green]{request.filename}[/green]")
        return result

    def _release_or_hold(self, payload: Any) -> None:
        # The running exporter may still be reading this payload
        if self._busy:
            self._held_releases.append(payload)
            return
        self._release(payload)

    def _flush_held_releases(self) -> None:
        held, self._held_releases = self._held_releases, []
        for payload in held:
            try:
                self._release(payload)
            except Exception as e:
                logger.warning(f"Releasing held payload failed: {e}", exc_info=True)

    # --------------------------------------------------------
    # Teardown
    # --------------------------------------------------------

    def close(self) -> None:
        """Drop every input (releasing payloads) and stop the session."""
        if self.session is not None:
            self.session.close()
        self.store.close()

    def __enter__(self) -> "ToolWorkspace":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
