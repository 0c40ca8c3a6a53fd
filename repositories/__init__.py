"""
Arabic Root Index: Repositories
================================
Domain-facing wrappers over the index structures.

Components:
  - root_repository: Roots in an AVL tree, ordered by letters
  - pattern_repository: Patterns in a chaining hash table, keyed by id
  - loader: UTF-8 text file loading for both
"""

from repositories.root_repository import RootRepository
from repositories.pattern_repository import PatternRepository, DEFAULT_PATTERNS

__all__ = ["RootRepository", "PatternRepository", "DEFAULT_PATTERNS"]
