from __future__ import annotations

from .app import DEMO_WORDS, app, load_words, main, suggest

__all__ = ["DEMO_WORDS", "app", "load_words", "main", "suggest"]
