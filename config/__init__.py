# config/__init__.py
# ============================================================
# Configuration package for DocDeck.
# Provides centralized, validated settings loaded from .env file.
#
# Usage:
#   from config.settings import settings
#   print(settings.id_strategy)
# ============================================================

from config.settings import settings

__all__ = ["settings"]
