"""Core package initializer for flashdeck.

Holds the card model, the card store and its snapshot files, the session
transcript, and the shared settings/logging helpers:
    from flashdeck.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
