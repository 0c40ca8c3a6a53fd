"""
Bucket Placement Hash
=====================
Maps a key to a bucket index in [0, capacity).

String keys (pattern ids such as "فاعل") use a polynomial rolling hash over
the character code points:

    h = (h * 31 + ord(ch)) % capacity      for each character

Reducing at every step keeps the accumulator below capacity * 31 + 0x10FFFF.
A final (h % capacity + capacity) % capacity normalization guarantees a
non-negative index.

Other hashable keys fall back to Python's hash(), reduced modulo capacity.

The index depends on capacity, so a table that changes capacity must
recompute the bucket of every key.
"""

from typing import Any

HASH_PRIME = 31


def hash_key(key: Any, capacity: int) -> int:
    """Return the bucket index of key for a table of the given capacity."""
    if capacity <= 0:
        raise ValueError(f"Capacity must be positive, got {capacity}")
    if key is None:
        return 0

    if isinstance(key, str):
        h = 0
        for ch in key:
            h = (h * HASH_PRIME + ord(ch)) % capacity
        return (h % capacity + capacity) % capacity

    return hash(key) % capacity
