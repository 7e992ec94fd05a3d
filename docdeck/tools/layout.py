# docdeck/tools/layout.py
# ============================================================
# Page Layout — Image Placement for Image → PDF
# ============================================================
# Computes where each image lands on its PDF page. The image is
# scaled to fill the page's content box along its limiting side
# (aspect ratio preserved) and centred on the page. All values
# are in millimetres, top-left origin.
#
# Usage:
#   from docdeck.tools.layout import page_dimensions, fit_image
#   page_w, page_h = page_dimensions("a4", "portrait")
#   placement = fit_image(1920, 1080, page_w, page_h, margin=10)
#   placements = plan_image_pages(sizes_in_list_order, options)
# ============================================================

from dataclasses import dataclass
from typing import Iterable, Optional

from config.settings import settings
from docdeck.tools.options import ImageToPdfOptions

# Portrait (width, height) in millimetres
PAGE_SIZES_MM: dict[str, tuple[float, float]] = {
    "a4": (210.0, 297.0),
    "letter": (215.9, 279.4),
    "legal": (215.9, 355.6),
}


@dataclass(frozen=True)
class Placement:
    """Position and size of an image on a page (mm, top-left origin)."""
    x: float
    y: float
    width: float
    height: float


def page_dimensions(page_size: str = "a4", orientation: str = "portrait") -> tuple[float, float]:
    """
    Get page width and height for a size and orientation.

    Args:
        page_size: "a4", "letter" or "legal".
        orientation: "portrait" or "landscape".

    Returns:
        (width_mm, height_mm)

    Raises:
        ValueError: If the size or orientation is not recognized.
    """
    key = page_size.lower()
    if key not in PAGE_SIZES_MM:
        raise ValueError(
            f"Unknown page size: '{page_size}'. "
            f"Available: {', '.join(PAGE_SIZES_MM)}"
        )

    width, height = PAGE_SIZES_MM[key]
    if orientation == "portrait":
        return width, height
    if orientation == "landscape":
        return height, width

    raise ValueError(f"Unknown orientation: '{orientation}'. Available: portrait, landscape")


def margin_mm(margin: str = "no") -> float:
    """Margin width for a margin option ("no" | "small" | "big")."""
    margins = {
        "no": 0.0,
        "small": settings.margin_small_mm,
        "big": settings.margin_big_mm,
    }
    if margin not in margins:
        raise ValueError(f"Unknown margin option: '{margin}'. Available: no, small, big")
    return margins[margin]


def fit_image(
    image_width: float,
    image_height: float,
    page_width: float,
    page_height: float,
    margin: Optional[float] = 0.0,
) -> Placement:
    """
    Fit an image inside a page, preserving its aspect ratio.

    The image fills the content box (page minus margin on every side)
    along whichever dimension is limiting, then is centred on the page.

    Args:
        image_width: Image width (any unit; only the ratio matters).
        image_height: Image height.
        page_width: Page width in mm.
        page_height: Page height in mm.
        margin: Margin in mm applied on all four sides.

    Returns:
        Placement of the image on the page.

    Raises:
        ValueError: If a dimension is not positive or the margin
                    leaves no room for content.

    Example:
        >>> fit_image(200, 100, 210, 297)
        Placement(x=0.0, y=96.0, width=210.0, height=105.0)
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Invalid image size: {image_width}x{image_height}")
    if page_width <= 0 or page_height <= 0:
        raise ValueError(f"Invalid page size: {page_width}x{page_height}")

    margin = margin or 0.0
    box_width = page_width - 2 * margin
    box_height = page_height - 2 * margin
    if box_width <= 0 or box_height <= 0:
        raise ValueError(
            f"Margin of {margin}mm leaves no room on a {page_width}x{page_height}mm page"
        )

    aspect = image_width / image_height
    if aspect > box_width / box_height:
        width = box_width
        height = box_width / aspect
    else:
        height = box_height
        width = box_height * aspect

    return Placement(
        x=(page_width - width) / 2,
        y=(page_height - height) / 2,
        width=width,
        height=height,
    )


def plan_image_pages(
    image_sizes: Iterable[tuple[float, float]],
    options: ImageToPdfOptions,
) -> list[Placement]:
    """
    Lay out one page per image, in the given (collection) order.

    Args:
        image_sizes: (width, height) of each image, in final order.
        options: Page setup chosen by the user.

    Returns:
        One Placement per image, on pages of the chosen size.
    """
    page_width, page_height = page_dimensions(options.page_size, options.orientation)
    margin = margin_mm(options.margin)
    return [
        fit_image(width, height, page_width, page_height, margin)
        for width, height in image_sizes
    ]
