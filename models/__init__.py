"""
Arabic Root Index: Models
==========================
Records stored in the indexes.

    from models import Root, Pattern
"""

from models.root import Root
from models.pattern import Pattern

__all__ = ["Root", "Pattern"]
