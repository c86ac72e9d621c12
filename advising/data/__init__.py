"""
Catalog loading and transcript parsing module.

This package handles all catalog file I/O and pasted-transcript parsing.
"""

from .loader import CatalogLoader
from .parser import TranscriptParser

__all__ = ["CatalogLoader", "TranscriptParser"]
