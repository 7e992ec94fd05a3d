# docdeck/utils/__init__.py
# ============================================================
# Shared Utilities Package
# ============================================================
# Provides reusable helpers used across the library:
#   - logger: Structured logging with Rich formatting
# ============================================================

from docdeck.utils.logger import get_logger

__all__ = ["get_logger"]
