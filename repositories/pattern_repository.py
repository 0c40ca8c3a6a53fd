"""
Pattern Repository
==================
Stores Pattern records in a HashTable keyed by pattern_id.
save() is insert-or-replace: a pattern with a known id overwrites the
stored one without changing the count.
"""

from typing import Any, Dict, List, Optional

from indexing.hash_table import DEFAULT_CAPACITY, HashTable
from models.pattern import Pattern

# Built-in patterns seeded when no pattern file is supplied: (id, structure, description)
DEFAULT_PATTERNS = [
    ("فاعل", "فاعل", "Active Participle - one who does"),
    ("مفعول", "مفعول", "Passive Participle - that which is done"),
    ("افتعل", "افتعل", "Form VIII - Reflexive/Reciprocal"),
    ("تفعيل", "تفعيل", "Verbal Noun Form II - Intensive"),
    ("استفعال", "استفعال", "Form X Verbal Noun - Seeking/Requesting"),
    ("فعّال", "فعّال", "Intensive Active - one who does habitually"),
    ("مفعل", "مفعل", "Place or Time noun"),
    ("فعيل", "فعيل", "Adjective form"),
]


class PatternRepository:

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._table = HashTable(capacity)

    def save(self, pattern: Pattern) -> None:
        self._table.put(pattern.pattern_id, pattern)

    def seed_defaults(self) -> int:
        """Save fresh copies of the built-in patterns. Returns how many were saved."""
        for pattern_id, structure, description in DEFAULT_PATTERNS:
            self.save(Pattern(pattern_id, structure, description))
        return len(DEFAULT_PATTERNS)

    def find_by_id(self, pattern_id: Optional[str]) -> Optional[Pattern]:
        return self._table.get(pattern_id)

    def exists(self, pattern_id: Optional[str]) -> bool:
        return self._table.contains(pattern_id)

    def delete(self, pattern_id: Optional[str]) -> Optional[Pattern]:
        """Remove and return the pattern, or None if it was not stored."""
        return self._table.remove(pattern_id)

    def find_all(self) -> List[Pattern]:
        """All patterns, in table order (not sorted)."""
        return self._table.values()

    def find_by_category(self, category: str) -> List[Pattern]:
        return [p for p in self._table.values() if p.category == category]

    def count(self) -> int:
        return self._table.size

    def is_empty(self) -> bool:
        return self._table.is_empty()

    def clear(self) -> None:
        self._table.clear()

    def stats(self) -> Dict[str, Any]:
        return self._table.stats()
