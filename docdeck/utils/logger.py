# docdeck/utils/logger.py
# ============================================================
# Logging — One Rich Handler for the Whole Package
# ============================================================
# Every DocDeck module logs under the "docdeck" namespace. The
# Rich console handler is attached once, to the "docdeck" logger;
# module loggers carry no handler of their own and propagate up
# to it, so the level in settings governs the whole package.
#
# Usage:
#   from docdeck.utils.logger import get_logger
#   logger = get_logger(__name__)
#   logger.info("Added 3 input(s) to merge_pdf (total: 3)")
# ============================================================

import logging

from rich.logging import RichHandler

from config.settings import settings

PACKAGE_LOGGER = "docdeck"


def _package_logger() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    if root.handlers:
        return root

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root.setLevel(level)

    handler = RichHandler(
        level=level,
        rich_tracebacks=True,
        show_time=True,
        show_path=False,
        markup=True,                # Tool names are highlighted with [bold]
    )
    handler.setFormatter(logging.Formatter("%(name)s — %(message)s"))
    root.addHandler(handler)

    # Host applications configure their own root logger
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a DocDeck module.

    Names outside the "docdeck" namespace (scripts, tests) are
    nested under it so they share the package handler.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A handler-less child of the "docdeck" logger.

    Example:
        >>> logger = get_logger("docdeck.tools.workspace")
        >>> logger.info("Export complete — merged.pdf")
        [14:02:11] INFO     docdeck.tools.workspace — Export complete — merged.pdf
    """
    root = _package_logger()
    if name == PACKAGE_LOGGER:
        return root
    if not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
