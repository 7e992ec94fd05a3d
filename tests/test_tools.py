# tests/test_tools.py
# ============================================================
# Unit Tests — Tool Catalogue, Options & Page Layout
# ============================================================
# Tests tool profiles, per-tool option validation, filename
# resolution and the image → PDF placement math.
#
# Run:
#   pytest tests/test_tools.py -v
# ============================================================

import pytest
from pydantic import ValidationError

from docdeck.tools.layout import (
    Placement,
    fit_image,
    margin_mm,
    page_dimensions,
    plan_image_pages,
)
from docdeck.tools.options import (
    CompressOptions,
    ImageToPdfOptions,
    SignOptions,
    ToolOptions,
    options_for,
)
from docdeck.tools.registry import ToolKind, get_profile, list_tools


# ============================================================
# Registry Tests
# ============================================================

class TestRegistry:
    """Test the tool catalogue."""

    def test_every_tool_has_a_profile(self):
        for kind in ToolKind:
            profile = get_profile(kind)
            assert profile.kind is kind
            assert profile.extension.startswith(".")

    def test_lookup_by_name(self):
        assert get_profile("merge_pdf").kind is ToolKind.MERGE_PDF

    def test_unknown_tool_raises_error(self):
        with pytest.raises(ValueError, match="Unknown tool"):
            get_profile("split_pdf")

    def test_list_tools_returns_all(self):
        tools = list_tools()
        assert len(tools) == len(ToolKind)
        assert "img_to_pdf" in tools

    def test_reorderable_tools(self):
        """Only the multi-input assembly tools support drag reordering."""
        reorderable = {kind for kind in ToolKind if get_profile(kind).reorderable}
        assert reorderable == {ToolKind.MERGE_PDF, ToolKind.IMG_TO_PDF}

    def test_pdf_tools_accept_pdf_only(self):
        profile = get_profile(ToolKind.MERGE_PDF)
        assert profile.accepts("application/pdf")
        assert not profile.accepts("image/png")

    def test_image_wildcard(self):
        profile = get_profile(ToolKind.IMG_TO_PDF)
        assert profile.accepts("image/png")
        assert profile.accepts("IMAGE/JPEG")
        assert not profile.accepts("application/pdf")


# ============================================================
# Options Tests
# ============================================================

class TestOptions:
    """Test per-tool option models."""

    def test_default_filenames_follow_profiles(self):
        assert options_for("merge_pdf").filename == "merged.pdf"
        assert options_for("img_to_pdf").filename == "merged"
        assert options_for("remove_bg").filename == "removed-bg"

    def test_options_model_per_tool(self):
        assert isinstance(options_for("img_to_pdf"), ImageToPdfOptions)
        assert isinstance(options_for("compress_pdf"), CompressOptions)
        assert isinstance(options_for("sign_pdf"), SignOptions)
        assert type(options_for("merge_pdf")) is ToolOptions

    def test_image_defaults(self):
        opts = ImageToPdfOptions()
        assert (opts.orientation, opts.page_size, opts.margin) == ("portrait", "a4", "no")

    def test_compress_default_level(self):
        assert CompressOptions().level == "recommended"

    def test_invalid_choice_rejected(self):
        with pytest.raises(ValidationError):
            options_for("img_to_pdf", orientation="diagonal")
        with pytest.raises(ValidationError):
            options_for("compress_pdf", level="maximum")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            options_for("merge_pdf", orientation="landscape")

    def test_filename_is_stripped(self):
        assert options_for("merge_pdf", filename="  report.pdf ").filename == "report.pdf"

    def test_empty_filename_rejected(self):
        with pytest.raises(ValidationError, match="must not be empty"):
            options_for("merge_pdf", filename="   ")

    def test_path_separator_rejected(self):
        with pytest.raises(ValidationError, match="path separators"):
            SignOptions(filename="../etc/passwd")

    def test_resolve_filename_appends_extension(self):
        assert options_for("img_to_pdf").resolve_filename(".pdf") == "merged.pdf"
        assert options_for("remove_bg").resolve_filename(".png") == "removed-bg.png"

    def test_resolve_filename_keeps_existing_extension(self):
        opts = options_for("merge_pdf", filename="Report.PDF")
        assert opts.resolve_filename(".pdf") == "Report.PDF"


# ============================================================
# Layout Tests
# ============================================================

class TestPageDimensions:
    """Test page sizes and margins."""

    def test_a4_portrait(self):
        assert page_dimensions("a4", "portrait") == (210.0, 297.0)

    def test_landscape_swaps(self):
        assert page_dimensions("a4", "landscape") == (297.0, 210.0)

    def test_unknown_size_raises_error(self):
        with pytest.raises(ValueError, match="Unknown page size"):
            page_dimensions("a3")

    def test_unknown_orientation_raises_error(self):
        with pytest.raises(ValueError, match="Unknown orientation"):
            page_dimensions("a4", "upside-down")

    def test_margins(self):
        assert margin_mm("no") == 0.0
        assert 0 < margin_mm("small") < margin_mm("big")

    def test_unknown_margin_raises_error(self):
        with pytest.raises(ValueError, match="Unknown margin"):
            margin_mm("huge")


class TestFitImage:
    """Test aspect-preserving placement."""

    def test_wide_image_fills_width(self):
        placement = fit_image(200, 100, 210, 297)
        assert placement == Placement(x=0.0, y=96.0, width=210.0, height=105.0)

    def test_tall_image_fills_height(self):
        placement = fit_image(100, 300, 210, 297)
        assert placement.height == 297.0
        assert placement.width == pytest.approx(99.0)
        assert placement.x == pytest.approx((210 - 99) / 2)
        assert placement.y == 0.0

    def test_aspect_ratio_preserved(self):
        placement = fit_image(1920, 1080, 297, 210)
        assert placement.width / placement.height == pytest.approx(1920 / 1080)

    def test_margin_shrinks_content_box(self):
        placement = fit_image(200, 100, 210, 297, margin=10)
        assert placement.width == pytest.approx(190.0)
        assert placement.x == pytest.approx(10.0)

    def test_image_is_centered(self):
        placement = fit_image(300, 300, 210, 297, margin=5)
        assert placement.x + placement.width / 2 == pytest.approx(105.0)
        assert placement.y + placement.height / 2 == pytest.approx(148.5)

    def test_invalid_image_size_raises_error(self):
        with pytest.raises(ValueError, match="Invalid image size"):
            fit_image(0, 100, 210, 297)

    def test_margin_too_large_raises_error(self):
        with pytest.raises(ValueError, match="leaves no room"):
            fit_image(100, 100, 210, 297, margin=105)

    def test_plan_image_pages(self):
        """One placement per image, on pages from the options."""
        opts = ImageToPdfOptions(orientation="landscape", margin="small")
        placements = plan_image_pages([(100, 100), (400, 100)], opts)
        assert len(placements) == 2
        # Landscape A4 with 10mm margin → 277x190 content box
        assert placements[0].height == pytest.approx(190.0)
        assert placements[1].width == pytest.approx(277.0)
