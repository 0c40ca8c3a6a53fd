"""
Arabic Root Index: Indexing Module
===================================
In-memory index structures backing the root and pattern repositories.

Components:
  - avl_tree: self-balancing ordered index (roots, ordered by letters)
  - hash_table: separate-chaining hash map with doubling (patterns by id)
  - hash_function: bucket placement for the hash map

Neither structure is thread-safe; callers serialize access.
"""

from indexing.avl_tree import AVLNode, AVLTree
from indexing.hash_function import HASH_PRIME, hash_key
from indexing.hash_table import DEFAULT_CAPACITY, MAX_LOAD_FACTOR, HashNode, HashTable

__all__ = [
    "AVLNode", "AVLTree",
    "HASH_PRIME", "hash_key",
    "DEFAULT_CAPACITY", "MAX_LOAD_FACTOR", "HashNode", "HashTable",
]
