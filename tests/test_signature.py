# tests/test_signature.py
# ============================================================
# Unit Tests — Signature Placement
# ============================================================
# Tests the sign-PDF geometry: page lookup in the stacked preview,
# clamping the dragged signature into the container, page clamping
# and the top-left → bottom-left y flip with the stamped text lines.
#
# Run:
#   pytest tests/test_signature.py -v
# ============================================================

from datetime import date

import pytest
from pydantic import ValidationError

from docdeck.tools.options import SignaturePosition, SignOptions, options_for
from docdeck.tools.signature import (
    STAMP_FONT_SIZE,
    clamp_to_container,
    drag_signature,
    page_at_offset,
    signature_placement,
)

A4_HEIGHT = 842.0


# ============================================================
# Options
# ============================================================

class TestSignOptions:
    """Test the sign tool's form inputs."""

    def test_defaults(self):
        opts = options_for("sign_pdf")
        assert isinstance(opts, SignOptions)
        assert opts.signature_type == "text"
        assert opts.color == "#000000"
        assert opts.font_size == 24
        assert opts.position == SignaturePosition(page=1, x=100, y=100)
        assert opts.include_date is False

    def test_color_is_normalized(self):
        assert SignOptions(color="#1A2B3C").color == "#1a2b3c"

    def test_invalid_color_raises_error(self):
        with pytest.raises(ValidationError, match="hex value"):
            SignOptions(color="red")

    def test_invalid_signature_type_raises_error(self):
        with pytest.raises(ValidationError):
            SignOptions(signature_type="stamp")

    def test_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            SignaturePosition(page=0)

    def test_position_from_dict(self):
        opts = SignOptions(position={"page": 2, "x": 40, "y": 60})
        assert opts.position.page == 2
        assert opts.position.x == 40.0


# ============================================================
# Preview Gesture
# ============================================================

class TestPageAtOffset:
    """Test finding the page under a vertical offset."""

    def test_first_page(self):
        assert page_at_offset(0, [800, 800]) == 1
        assert page_at_offset(799, [800, 800]) == 1

    def test_boundary_belongs_to_next_page(self):
        assert page_at_offset(800, [800, 800]) == 2

    def test_uneven_page_heights(self):
        """Cumulative heights: 500, 1300, 1600."""
        assert page_at_offset(1299, [500, 800, 300]) == 2
        assert page_at_offset(1300, [500, 800, 300]) == 3

    def test_past_last_page_resolves_to_last(self):
        assert page_at_offset(5000, [800, 800]) == 2

    def test_no_pages_resolves_to_first(self):
        assert page_at_offset(120, []) == 1


class TestClampToContainer:
    """Test keeping the 100x50 signature box inside the preview."""

    def test_inside_is_unchanged(self):
        assert clamp_to_container(40, 60, 600, 1600) == (40, 60)

    def test_negative_offsets_clamp_to_zero(self):
        assert clamp_to_container(-15, -3, 600, 1600) == (0, 0)

    def test_right_and_bottom_edges(self):
        assert clamp_to_container(590, 1590, 600, 1600) == (500, 1550)

    def test_container_smaller_than_box(self):
        """Lower bound wins when the box cannot fit at all."""
        assert clamp_to_container(30, 30, 80, 40) == (0, 0)

    def test_custom_box(self):
        assert clamp_to_container(590, 10, 600, 1600, box=(200, 80)) == (400, 10)


class TestDragSignature:
    """Test a full pointer move."""

    def test_grab_offset_is_subtracted(self):
        position = drag_signature(320, 120, 20, 20, 600, 1684, [842, 842])
        assert position == SignaturePosition(page=1, x=300, y=100)

    def test_drag_onto_second_page(self):
        position = drag_signature(200, 1000, 0, 0, 600, 1684, [842, 842])
        assert position.page == 2
        assert position.y == 1000

    def test_drag_outside_is_clamped(self):
        position = drag_signature(900, 5000, 0, 0, 600, 1684, [842, 842])
        assert (position.x, position.y) == (500, 1634)
        assert position.page == 2


# ============================================================
# PDF Stamping
# ============================================================

class TestSignaturePlacement:
    """Test mapping the chosen position into PDF coordinates."""

    def test_y_is_flipped(self):
        opts = SignOptions(position=SignaturePosition(page=1, x=100, y=100))
        placement = signature_placement(opts, (200, 100), [A4_HEIGHT])
        # Image is stamped at half size: 100x50
        assert (placement.width, placement.height) == (100, 50)
        assert placement.x == 100
        assert placement.y == pytest.approx(A4_HEIGHT - 100 - 50)

    def test_page_index_is_zero_based(self):
        opts = SignOptions(position=SignaturePosition(page=2))
        placement = signature_placement(opts, (200, 100), [A4_HEIGHT, 600])
        assert placement.page_index == 1
        assert placement.y == pytest.approx(600 - 100 - 50)

    def test_page_past_end_is_clamped(self):
        opts = SignOptions(position=SignaturePosition(page=9))
        placement = signature_placement(opts, (200, 100), [A4_HEIGHT, A4_HEIGHT])
        assert placement.page_index == 1

    def test_no_extra_lines_by_default(self):
        placement = signature_placement(SignOptions(), (200, 100), [A4_HEIGHT])
        assert placement.date_line is None
        assert placement.note_line is None

    def test_date_line_below_signature(self):
        opts = SignOptions(include_date=True)
        placement = signature_placement(opts, (200, 100), [A4_HEIGHT], on=date(2024, 3, 5))
        assert placement.date_line.text == "Date: 2024-03-05"
        assert placement.date_line.x == placement.x
        assert placement.date_line.y == pytest.approx(placement.y - 20)
        assert placement.date_line.size == STAMP_FONT_SIZE

    def test_additional_text_below_date(self):
        opts = SignOptions(include_date=True, additional_text="Approved")
        placement = signature_placement(opts, (200, 100), [A4_HEIGHT], on=date(2024, 3, 5))
        assert placement.note_line.text == "Approved"
        assert placement.note_line.y == pytest.approx(placement.y - 40)

    def test_additional_text_without_date_keeps_its_offset(self):
        opts = SignOptions(additional_text="Approved")
        placement = signature_placement(opts, (200, 100), [A4_HEIGHT])
        assert placement.date_line is None
        assert placement.note_line.y == pytest.approx(placement.y - 40)

    def test_empty_document_raises_error(self):
        with pytest.raises(ValueError, match="without pages"):
            signature_placement(SignOptions(), (200, 100), [])
