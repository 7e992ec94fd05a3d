# docdeck/tools/__init__.py
# ============================================================
# Tools Package
# ============================================================
# The document tools built on top of the ordered collection:
#   - registry: Tool catalogue (ToolKind, ToolProfile)
#   - options: Validated per-tool form inputs
#   - layout: Image → PDF page geometry
#   - signature: Sign PDF placement geometry
#   - workspace: One tool instance with busy-guarded export
# ============================================================

from docdeck.tools.layout import Placement, fit_image, page_dimensions, plan_image_pages
from docdeck.tools.options import (
    CompressOptions,
    ImageToPdfOptions,
    SignaturePosition,
    SignOptions,
    ToolOptions,
    options_for,
)
from docdeck.tools.registry import ToolKind, ToolProfile, get_profile, list_tools
from docdeck.tools.signature import SignaturePlacement, drag_signature, signature_placement
from docdeck.tools.workspace import ExportRequest, ToolWorkspace

__all__ = [
    "CompressOptions",
    "ExportRequest",
    "ImageToPdfOptions",
    "Placement",
    "SignOptions",
    "SignaturePlacement",
    "SignaturePosition",
    "ToolKind",
    "ToolOptions",
    "ToolProfile",
    "ToolWorkspace",
    "drag_signature",
    "fit_image",
    "get_profile",
    "list_tools",
    "options_for",
    "page_dimensions",
    "plan_image_pages",
    "signature_placement",
]
