# docdeck/exceptions.py
# ============================================================
# Error Taxonomy
# ============================================================
# Only tool-level failures are raised. The collection store and
# the reorder session never raise for stale ids or out-of-range
# targets: those are silent no-ops or clamps.
# ============================================================


class DocDeckError(Exception):
    """Base class for every error raised by DocDeck."""


class ToolBusyError(DocDeckError):
    """An export was requested while another one is still in flight."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Tool '{tool}' is busy with another export")


class EmptyCollectionError(DocDeckError):
    """An export was requested with no items in the collection."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Tool '{tool}' has nothing to export")


class UnsupportedMediaError(DocDeckError):
    """A payload's media type is not accepted by the tool."""

    def __init__(self, tool: str, media_type: str):
        self.tool = tool
        self.media_type = media_type
        super().__init__(f"Tool '{tool}' does not accept '{media_type}' inputs")


class ExportFailedError(DocDeckError):
    """The export collaborator raised. The original error is chained."""

    def __init__(self, tool: str, reason: str):
        self.tool = tool
        self.reason = reason
        super().__init__(f"Export for tool '{tool}' failed: {reason}")
