# docdeck/tools/options.py
# ============================================================
# Tool Options — Validated Form Inputs
# ============================================================
# Each tool exposes a few form inputs next to its input list
# (output filename, page orientation, compression level...).
# They are modelled here so an exporter receives validated,
# typed values instead of raw form strings.
#
# Usage:
#   from docdeck.tools.options import options_for
#   opts = options_for("img_to_pdf", orientation="landscape")
#   opts.resolve_filename(".pdf")   # → "merged.pdf"
# ============================================================

import re
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docdeck.tools.registry import ToolKind, get_profile

Orientation = Literal["portrait", "landscape"]
PageSize = Literal["a4", "letter", "legal"]
MarginOption = Literal["no", "small", "big"]
CompressionLevel = Literal["extreme", "recommended", "less"]
SignatureType = Literal["text", "image"]

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class ToolOptions(BaseModel):
    """Options shared by every tool: the output filename."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    filename: str = Field(
        default="output",
        description="Output filename, with or without extension.",
    )

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        if not v:
            raise ValueError("filename must not be empty")
        if "/" in v or "\\" in v:
            raise ValueError("filename must not contain path separators")
        return v

    def resolve_filename(self, extension: str) -> str:
        """
        Output filename with the tool's extension.

        The extension is appended unless the name already ends with
        it (case-insensitive), so "merged" and "merged.pdf" both
        resolve to "merged.pdf".
        """
        if self.filename.lower().endswith(extension.lower()):
            return self.filename
        return f"{self.filename}{extension}"


class ImageToPdfOptions(ToolOptions):
    """Page setup for turning images into PDF pages."""

    filename: str = "merged"
    orientation: Orientation = "portrait"
    page_size: PageSize = "a4"
    margin: MarginOption = "no"


class CompressOptions(ToolOptions):
    filename: str = "compressed.pdf"
    level: CompressionLevel = "recommended"


class SignaturePosition(BaseModel):
    """
    Where the signature sits in the page preview.

    Attributes:
        page: 1-indexed page the signature is dropped on.
        x: Left offset within the page, in preview pixels.
        y: Top offset within the page (top-left origin), in preview pixels.
    """

    page: int = Field(default=1, ge=1)
    x: float = Field(default=100.0, ge=0)
    y: float = Field(default=100.0, ge=0)


class SignOptions(ToolOptions):
    """Signature style, placement and the extras stamped under it."""

    filename: str = "signed"
    signature_type: SignatureType = "text"
    name: str = ""
    color: str = "#000000"
    font_size: int = Field(default=24, gt=0)
    position: SignaturePosition = Field(default_factory=SignaturePosition)
    include_date: bool = False
    additional_text: str = ""

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        if not _HEX_COLOR.fullmatch(v):
            raise ValueError("color must be a hex value like #1a2b3c")
        return v.lower()


_OPTION_MODELS: dict[ToolKind, type[ToolOptions]] = {
    ToolKind.MERGE_PDF: ToolOptions,
    ToolKind.IMG_TO_PDF: ImageToPdfOptions,
    ToolKind.COMPRESS_PDF: CompressOptions,
    ToolKind.REMOVE_BG: ToolOptions,
    ToolKind.SIGN_PDF: SignOptions,
}


def options_for(kind: Union[ToolKind, str], **values) -> ToolOptions:
    """
    Build the options model of a tool.

    The filename defaults to the tool's default filename when not given.

    Args:
        kind: Tool the options belong to.
        **values: Field values to validate.

    Returns:
        A validated options instance of the tool's model.

    Raises:
        ValueError: If the tool is unknown.
        pydantic.ValidationError: If a value is invalid.
    """
    profile = get_profile(kind)
    values.setdefault("filename", profile.default_filename)
    return _OPTION_MODELS[profile.kind](**values)
