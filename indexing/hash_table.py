"""
Chaining Hash Table
===================
In-memory key → value map using an array of buckets with singly linked
overflow chains (e.g. Pattern records keyed by pattern id).

Layout:
  - _buckets: fixed-size list of chain heads (None = empty bucket)
  - Each HashNode owns the next node in its chain
  - New keys are prepended to their bucket's chain

Growth:
  - Before a NEW key is placed, if (size + 1) / capacity would reach
    MAX_LOAD_FACTOR (0.75), capacity doubles and every node is rehashed
    into a fresh bucket array. Updates of existing keys never grow.
  - Bucket indices depend on capacity, so growth is a full rehash.

Failure semantics:
  - put(None, ...) and put(..., None) raise ValueError
  - get / contains / remove with a None or missing key return None / False

Concurrency: single-writer, no locking. Callers serialize access.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from indexing.hash_function import hash_key

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 16
MAX_LOAD_FACTOR = 0.75


class HashNode:
    """One chain entry: immutable key, mutable value, next link."""
    __slots__ = ('key', 'value', 'next')

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        self.next: Optional['HashNode'] = None

    def __repr__(self) -> str:
        return f"HashNode({self.key!r}, {self.value!r})"


class HashTable:
    """
    Separate-chaining hash map with automatic doubling.

    Usage:
        table = HashTable()
        table.put("فاعل", pattern)
        table.get("فاعل")          # -> pattern or None
        table.remove("فاعل")       # -> removed pattern or None
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Args:
            capacity: Initial number of buckets (default: 16). Must be > 0.
        """
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._buckets: List[Optional[HashNode]] = [None] * capacity
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[Any]:
        """Yield keys in bucket-then-chain order."""
        for node in self._nodes():
            yield node.key

    # ─── Lookup ─────────────────────────────────────────────────────

    def get(self, key: Any) -> Optional[Any]:
        """Return the value stored under key, or None."""
        node = self._find_node(key)
        return node.value if node is not None else None

    def contains(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def _find_node(self, key: Any) -> Optional[HashNode]:
        if key is None:
            return None
        node = self._buckets[hash_key(key, self._capacity)]
        while node is not None:
            if node.key == key:
                return node
            node = node.next
        return None

    # ─── Insert / Update ────────────────────────────────────────────

    def put(self, key: Any, value: Any) -> None:
        """
        Insert or update key → value.
        Existing key: value replaced in place, size unchanged.
        New key: grow if needed, then prepend to the target bucket.
        """
        if key is None:
            raise ValueError("NULL key cannot be hashed")
        if value is None:
            raise ValueError("NULL value cannot be stored (None means 'absent')")

        existing = self._find_node(key)
        if existing is not None:
            existing.value = value
            return

        if (self._size + 1) / self._capacity >= MAX_LOAD_FACTOR:
            self._resize(self._capacity * 2)

        index = hash_key(key, self._capacity)
        node = HashNode(key, value)
        node.next = self._buckets[index]
        self._buckets[index] = node
        self._size += 1

    def _resize(self, new_capacity: int) -> None:
        """Rehash every node into a fresh bucket array of new_capacity."""
        logger.debug("Growing hash table %d -> %d buckets (size=%d)",
                     self._capacity, new_capacity, self._size)
        new_buckets: List[Optional[HashNode]] = [None] * new_capacity
        for head in self._buckets:
            node = head
            while node is not None:
                following = node.next
                index = hash_key(node.key, new_capacity)
                node.next = new_buckets[index]
                new_buckets[index] = node
                node = following
        self._buckets = new_buckets
        self._capacity = new_capacity

    # ─── Delete ─────────────────────────────────────────────────────

    def remove(self, key: Any) -> Optional[Any]:
        """Unlink the node for key and return its value, or None."""
        if key is None:
            return None
        index = hash_key(key, self._capacity)
        prev: Optional[HashNode] = None
        node = self._buckets[index]
        while node is not None:
            if node.key == key:
                if prev is None:
                    self._buckets[index] = node.next
                else:
                    prev.next = node.next
                node.next = None
                self._size -= 1
                return node.value
            prev = node
            node = node.next
        return None

    def clear(self) -> None:
        """Drop all entries; capacity is kept."""
        self._buckets = [None] * self._capacity
        self._size = 0

    # ─── Bulk Export ────────────────────────────────────────────────

    def _nodes(self) -> Iterator[HashNode]:
        for head in self._buckets:
            node = head
            while node is not None:
                yield node
                node = node.next

    def keys(self) -> List[Any]:
        return [node.key for node in self._nodes()]

    def values(self) -> List[Any]:
        return [node.value for node in self._nodes()]

    def items(self) -> List[Tuple[Any, Any]]:
        return [(node.key, node.value) for node in self._nodes()]

    # ─── Debug / Verification ───────────────────────────────────────

    def _chain_lengths(self) -> List[int]:
        lengths = []
        for head in self._buckets:
            length = 0
            node = head
            while node is not None:
                length += 1
                node = node.next
            lengths.append(length)
        return lengths

    def stats(self) -> Dict[str, Any]:
        """Bucket occupancy summary for diagnostics."""
        lengths = self._chain_lengths()
        used = [n for n in lengths if n > 0]
        return {
            "size": self._size,
            "capacity": self._capacity,
            "load_factor": round(self.load_factor, 4),
            "used_buckets": len(used),
            "empty_buckets": self._capacity - len(used),
            "longest_chain": max(lengths) if lengths else 0,
            "avg_chain_length": round(sum(used) / len(used), 4) if used else 0.0,
        }

    def verify_structure(self) -> List[str]:
        """
        Verify bucket placement, key uniqueness, size accounting and the
        load-factor bound. Returns list of issues found (empty = healthy).
        """
        issues: List[str] = []
        if len(self._buckets) != self._capacity:
            issues.append(
                f"Bucket array length {len(self._buckets)} != capacity {self._capacity}")

        seen: List[Any] = []
        count = 0
        for index, head in enumerate(self._buckets):
            node = head
            while node is not None:
                count += 1
                expected = hash_key(node.key, self._capacity)
                if expected != index:
                    issues.append(
                        f"Key {node.key!r} in bucket {index}, expected {expected}")
                if node.key in seen:
                    issues.append(f"Duplicate key {node.key!r}")
                seen.append(node.key)
                node = node.next

        if count != self._size:
            issues.append(f"Size mismatch: counter={self._size}, nodes={count}")
        if self._size > 0 and self.load_factor >= MAX_LOAD_FACTOR:
            issues.append(f"Load factor {self.load_factor:.3f} at/above {MAX_LOAD_FACTOR}")
        return issues
