"""
Pattern Record
==============
A morphological template (wazn) such as "فاعل". Letters ف / ع / ل in the
structure stand for the first, second and third root letters.

Identity is the pattern id: two Patterns with the same id are equal even if
their structure or description differ.
"""

from dataclasses import dataclass, field

DEFAULT_CATEGORY = "general"


@dataclass
class Pattern:
    """Template record keyed by pattern_id."""
    pattern_id: str
    structure: str = field(compare=False)
    description: str = field(default="", compare=False)
    category: str = field(default=DEFAULT_CATEGORY, compare=False)

    def __post_init__(self):
        if not self.pattern_id:
            raise ValueError("Pattern id must be a non-empty string")
        if not self.structure:
            raise ValueError(f"Pattern {self.pattern_id!r} has an empty structure")

    def __hash__(self) -> int:
        return hash(self.pattern_id)

    def __str__(self) -> str:
        return self.pattern_id
