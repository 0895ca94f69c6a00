"""flashdeck package bootstrap.

An interactive command-line flashcard trainer: keep term/definition cards,
quiz yourself on them, and track which ones you keep getting wrong.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
