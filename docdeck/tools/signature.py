# docdeck/tools/signature.py
# ============================================================
# Signature Placement — Sign PDF Geometry
# ============================================================
# The signature is dragged over a preview of the document, whose
# pages are stacked vertically. This module turns that gesture
# into a page number plus an offset, then maps it into PDF
# coordinates for stamping:
#
#   pointer drag → clamp into preview → page from cumulative heights
#   → clamp page to the document → flip y (PDF origin is bottom-left)
#
# Preview pixels map 1:1 to PDF points. The signature image is
# rendered at twice its stamped size, hence SIGNATURE_SCALE.
#
# Usage:
#   from docdeck.tools.signature import drag_signature, signature_placement
#   position = drag_signature(320, 900, 10, 5, 600, 1700, [842, 842])
#   opts.position = position
#   placement = signature_placement(opts, (600, 200), [842, 842])
# ============================================================

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from docdeck.tools.options import SignaturePosition, SignOptions

# Footprint of the signature preview used when clamping a drag (px)
SIGNATURE_BOX: tuple[float, float] = (100.0, 50.0)

SIGNATURE_SCALE = 0.5
STAMP_LINE_GAP = 20.0
STAMP_FONT_SIZE = 12


# ============================================================
# Data Classes
# ============================================================

@dataclass(frozen=True)
class TextLine:
    """A line of text stamped under the signature (PDF points)."""
    text: str
    x: float
    y: float
    size: int = STAMP_FONT_SIZE


@dataclass(frozen=True)
class SignaturePlacement:
    """
    Where to stamp the signature in the PDF.

    Attributes:
        page_index: 0-indexed page, clamped to the document.
        x, y: Bottom-left corner of the signature image (PDF points).
        width, height: Stamped size of the signature image.
        date_line: "Date: ..." line, when requested.
        note_line: Additional text line, when provided.
    """
    page_index: int
    x: float
    y: float
    width: float
    height: float
    date_line: Optional[TextLine] = None
    note_line: Optional[TextLine] = None


# ============================================================
# Preview Gesture
# ============================================================

def page_at_offset(y: float, page_heights: Sequence[float]) -> int:
    """
    Find the 1-indexed page under a vertical offset in the preview.

    Pages are stacked top to bottom; an offset past the last page
    resolves to the last page. Without page metrics, page 1.
    """
    cumulative = 0.0
    for number, height in enumerate(page_heights, start=1):
        cumulative += height
        if y < cumulative:
            return number
    return max(len(page_heights), 1)


def clamp_to_container(
    x: float,
    y: float,
    container_width: float,
    container_height: float,
    box: tuple[float, float] = SIGNATURE_BOX,
) -> tuple[float, float]:
    """Keep the signature box inside the preview container."""
    box_width, box_height = box
    return (
        max(0.0, min(container_width - box_width, x)),
        max(0.0, min(container_height - box_height, y)),
    )


def drag_signature(
    pointer_x: float,
    pointer_y: float,
    grab_x: float,
    grab_y: float,
    container_width: float,
    container_height: float,
    page_heights: Sequence[float],
) -> SignaturePosition:
    """
    Position of the signature after a pointer move.

    Args:
        pointer_x: Pointer x relative to the preview container.
        pointer_y: Pointer y relative to the preview container.
        grab_x: Where inside the signature the pointer grabbed it (x).
        grab_y: Where inside the signature the pointer grabbed it (y).
        container_width: Preview container width.
        container_height: Preview container height.
        page_heights: Rendered height of each preview page, in order.

    Returns:
        Clamped position, with the page derived from the y offset.
    """
    x, y = clamp_to_container(
        pointer_x - grab_x,
        pointer_y - grab_y,
        container_width,
        container_height,
    )
    return SignaturePosition(page=page_at_offset(y, page_heights), x=x, y=y)


# ============================================================
# PDF Stamping
# ============================================================

def signature_placement(
    options: SignOptions,
    image_size: tuple[float, float],
    page_heights: Sequence[float],
    on: Optional[date] = None,
) -> SignaturePlacement:
    """
    Map the chosen position into PDF coordinates.

    The page is clamped to the last page of the document. y is
    flipped because PDF coordinates start at the bottom; the date
    line goes 20pt below the image and the extra text 40pt below.

    Args:
        options: Sign options carrying position and extras.
        image_size: Rendered (width, height) of the signature image.
        page_heights: Height of every PDF page, in points.
        on: Date to stamp when include_date is set. Default: today.

    Returns:
        SignaturePlacement for the exporter.

    Raises:
        ValueError: If the document has no pages.
    """
    if not page_heights:
        raise ValueError("Cannot place a signature in a document without pages")

    position = options.position
    page_index = min(position.page - 1, len(page_heights) - 1)
    page_height = page_heights[page_index]

    width = image_size[0] * SIGNATURE_SCALE
    height = image_size[1] * SIGNATURE_SCALE
    y = page_height - position.y - height

    date_line = None
    if options.include_date:
        stamped = (on or date.today()).isoformat()
        date_line = TextLine(f"Date: {stamped}", position.x, y - STAMP_LINE_GAP)

    note_line = None
    if options.additional_text:
        note_line = TextLine(options.additional_text, position.x, y - 2 * STAMP_LINE_GAP)

    return SignaturePlacement(
        page_index=page_index,
        x=position.x,
        y=y,
        width=width,
        height=height,
        date_line=date_line,
        note_line=note_line,
    )
