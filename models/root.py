"""
Root Record
===========
A triliteral Arabic root such as "كتب" (k-t-b).

Roots are ordered and compared by their letters (code-point order), which
is what the AVL index uses to place them. A Root built from the same
letters is therefore a valid search key for a stored Root.
"""

from dataclasses import dataclass

ROOT_LENGTH = 3


@dataclass(frozen=True, order=True)
class Root:
    """Three-letter root; ordered, hashed and compared by letters."""
    letters: str

    def __post_init__(self):
        if not isinstance(self.letters, str) or len(self.letters) != ROOT_LENGTH:
            raise ValueError(
                f"Root must contain exactly {ROOT_LENGTH} letters, got {self.letters!r}")

    @property
    def r1(self) -> str:
        return self.letters[0]

    @property
    def r2(self) -> str:
        return self.letters[1]

    @property
    def r3(self) -> str:
        return self.letters[2]

    def __str__(self) -> str:
        return self.letters
