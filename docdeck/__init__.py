# docdeck/__init__.py
# ============================================================
# DocDeck — Source Package
# ============================================================
# Ordered input lists for a document utility suite (merge PDFs,
# images to PDF, compression, background removal, signing).
# Sub-packages:
#   - docdeck.collection → Ordered store, ids, reorder session
#   - docdeck.tools      → Tool catalogue, options, layout, workspace
#   - docdeck.utils      → Shared utilities (logging)
# ============================================================

from docdeck.collection import Item, ItemId, OrderedCollection, ReorderSession
from docdeck.exceptions import (
    DocDeckError,
    EmptyCollectionError,
    ExportFailedError,
    ToolBusyError,
    UnsupportedMediaError,
)
from docdeck.tools import ExportRequest, ToolKind, ToolWorkspace

__version__ = "0.1.0"

__all__ = [
    "DocDeckError",
    "EmptyCollectionError",
    "ExportFailedError",
    "ExportRequest",
    "Item",
    "ItemId",
    "OrderedCollection",
    "ReorderSession",
    "ToolBusyError",
    "ToolKind",
    "ToolWorkspace",
    "UnsupportedMediaError",
]
