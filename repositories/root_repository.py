"""
Root Repository
===============
Stores Root records in an AVLTree. Lookups build a temporary Root from the
requested letters and search the tree with it.

Malformed letters (None, wrong length) are a normal "not found" outcome for
reads and deletes; only save() refuses them (Root() raises ValueError).
"""

from typing import List, Optional

from indexing.avl_tree import AVLTree
from models.root import Root, ROOT_LENGTH


class RootRepository:

    def __init__(self):
        self._tree = AVLTree()

    def save(self, root: Root) -> None:
        """Insert root; saving an already stored root is a no-op."""
        self._tree.insert(root)

    def find_by_letters(self, letters: Optional[str]) -> Optional[Root]:
        key = self._key(letters)
        if key is None:
            return None
        return self._tree.search(key)

    def exists(self, letters: Optional[str]) -> bool:
        return self.find_by_letters(letters) is not None

    def delete(self, letters: Optional[str]) -> None:
        key = self._key(letters)
        if key is not None:
            self._tree.delete(key)

    def find_all(self) -> List[Root]:
        """All roots in ascending letter order."""
        return self._tree.to_list()

    def count(self) -> int:
        return self._tree.size

    def is_empty(self) -> bool:
        return self._tree.is_empty()

    def tree_height(self) -> int:
        return self._tree.height

    def format_tree(self) -> str:
        return self._tree.format_tree()

    @staticmethod
    def _key(letters: Optional[str]) -> Optional[Root]:
        if letters is None or len(letters) != ROOT_LENGTH:
            return None
        return Root(letters)
