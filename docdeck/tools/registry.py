# docdeck/tools/registry.py
# ============================================================
# Tool Catalogue
# ============================================================
# The suite ships five tools. Each one backs its input list with
# an OrderedCollection, but they differ in what they accept and
# in how much of the list the export actually uses:
#
#   merge_pdf     many PDFs, reorderable, all used in order
#   img_to_pdf    many images, reorderable, one page per image
#   compress_pdf  one PDF
#   remove_bg     many images uploaded, only the first processed
#   sign_pdf      one PDF
#
# Usage:
#   from docdeck.tools.registry import ToolKind, get_profile
#   profile = get_profile(ToolKind.MERGE_PDF)
#   profile.accepts("application/pdf")   # → True
# ============================================================

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ToolKind(str, Enum):
    """Tools of the document suite."""
    MERGE_PDF = "merge_pdf"
    IMG_TO_PDF = "img_to_pdf"
    COMPRESS_PDF = "compress_pdf"
    REMOVE_BG = "remove_bg"
    SIGN_PDF = "sign_pdf"


@dataclass(frozen=True)
class ToolProfile:
    """
    Static description of a tool's input list and output.

    Attributes:
        kind: Which tool this profile describes.
        title: Human-readable name.
        accepted_media: Media types the upload side may hand over.
                        "image/*" style wildcards are allowed.
        multiple: Whether several inputs can be selected at once.
                  Single-input tools replace their current item.
        reorderable: Whether the list supports drag reordering.
        uses_all_inputs: False when the export only consumes the
                         first item of the list.
        default_filename: Output filename shown before the user edits it.
        extension: Extension appended to the output filename.
    """
    kind: ToolKind
    title: str
    accepted_media: tuple[str, ...]
    multiple: bool
    reorderable: bool
    uses_all_inputs: bool
    default_filename: str
    extension: str

    def accepts(self, media_type: str) -> bool:
        """Check a media type against the accepted list (wildcards allowed)."""
        media_type = media_type.strip().lower()
        for accepted in self.accepted_media:
            if accepted.endswith("/*"):
                if media_type.startswith(accepted[:-1]):
                    return True
            elif media_type == accepted:
                return True
        return False


_PDF = ("application/pdf",)
_IMAGES = ("image/*",)

_TOOL_PROFILES: dict[ToolKind, ToolProfile] = {
    ToolKind.MERGE_PDF: ToolProfile(
        kind=ToolKind.MERGE_PDF,
        title="Merge PDF",
        accepted_media=_PDF,
        multiple=True,
        reorderable=True,
        uses_all_inputs=True,
        default_filename="merged.pdf",
        extension=".pdf",
    ),
    ToolKind.IMG_TO_PDF: ToolProfile(
        kind=ToolKind.IMG_TO_PDF,
        title="Image to PDF",
        accepted_media=_IMAGES,
        multiple=True,
        reorderable=True,
        uses_all_inputs=True,
        default_filename="merged",
        extension=".pdf",
    ),
    ToolKind.COMPRESS_PDF: ToolProfile(
        kind=ToolKind.COMPRESS_PDF,
        title="Compress PDF",
        accepted_media=_PDF,
        multiple=False,
        reorderable=False,
        uses_all_inputs=False,
        default_filename="compressed.pdf",
        extension=".pdf",
    ),
    # Several images can be queued, but one inference runs at a time
    ToolKind.REMOVE_BG: ToolProfile(
        kind=ToolKind.REMOVE_BG,
        title="Remove Background",
        accepted_media=_IMAGES,
        multiple=True,
        reorderable=False,
        uses_all_inputs=False,
        default_filename="removed-bg",
        extension=".png",
    ),
    ToolKind.SIGN_PDF: ToolProfile(
        kind=ToolKind.SIGN_PDF,
        title="Sign PDF",
        accepted_media=_PDF,
        multiple=False,
        reorderable=False,
        uses_all_inputs=False,
        default_filename="signed",
        extension=".pdf",
    ),
}


def get_profile(kind: Union[ToolKind, str]) -> ToolProfile:
    """
    Get the profile of a tool.

    Args:
        kind: ToolKind member or its string value (e.g. "merge_pdf").

    Returns:
        The tool's ToolProfile.

    Raises:
        ValueError: If the tool is not recognized.
    """
    try:
        kind = ToolKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown tool: {kind}. "
            f"Available tools: {list_tools()}"
        ) from None
    return _TOOL_PROFILES[kind]


def list_tools() -> list[str]:
    """Names of all tools, e.g. ["merge_pdf", "img_to_pdf", ...]."""
    return [kind.value for kind in ToolKind]
