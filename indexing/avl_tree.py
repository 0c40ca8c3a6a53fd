"""
AVL Tree Index
==============
In-memory self-balancing binary search tree holding distinct, totally
ordered values (e.g. Root records ordered by their letters).

Structure:
  - Each node owns its left/right children outright. No parent pointers.
  - Every node caches its subtree height (leaf = 1, missing child = 0).
  - Recursive helpers return the new subtree root; the caller relinks it.

Invariants (hold after every public call):
  - left subtree < node < right subtree
  - |height(left) - height(right)| <= 1 at every node
  - size == number of stored values; equal values are never stored twice

Concurrency: single-writer, no locking. Callers serialize access.
NULLs: None cannot be ordered and is rejected with ValueError.
"""

from typing import Any, Iterator, List, Optional


class AVLNode:
    """A tree node: one value, two owned children, cached height."""
    __slots__ = ('value', 'left', 'right', 'height')

    def __init__(self, value: Any):
        self.value = value
        self.left: Optional['AVLNode'] = None
        self.right: Optional['AVLNode'] = None
        self.height: int = 1

    def __repr__(self) -> str:
        return f"AVLNode({self.value!r}, h={self.height})"


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


class AVLTree:
    """
    Self-balancing ordered index.

    Usage:
        tree = AVLTree()
        tree.insert(Root("كتب"))
        tree.search(Root("كتب"))      # -> stored Root or None
        tree.delete(Root("كتب"))
        tree.to_list()                 # ascending
    """

    def __init__(self):
        self._root: Optional[AVLNode] = None
        self._size: int = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        """Height of the whole tree (0 when empty)."""
        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[Any]:
        """Yield stored values in ascending order."""
        return self._inorder(self._root)

    # ─── Search ─────────────────────────────────────────────────────

    def search(self, key: Any) -> Optional[Any]:
        """Return the stored value equal to key, or None if absent."""
        self._check_key(key)
        node = self._root
        while node is not None:
            if key < node.value:
                node = node.left
            elif key > node.value:
                node = node.right
            else:
                return node.value
        return None

    def contains(self, key: Any) -> bool:
        return self.search(key) is not None

    # ─── Insert ─────────────────────────────────────────────────────

    def insert(self, value: Any) -> None:
        """
        Insert value unless an equal value is already stored.
        A duplicate insert leaves the existing instance in place.
        """
        self._check_key(value)
        self._root = self._insert(self._root, value)

    def _insert(self, node: Optional[AVLNode], value: Any) -> AVLNode:
        if node is None:
            self._size += 1
            return AVLNode(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif value > node.value:
            node.right = self._insert(node.right, value)
        else:
            return node

        return self._rebalance(node)

    # ─── Delete ─────────────────────────────────────────────────────

    def delete(self, key: Any) -> None:
        """Remove the value equal to key. Absent key is a no-op."""
        self._check_key(key)
        self._root = self._delete(self._root, key)

    def _delete(self, node: Optional[AVLNode], key: Any) -> Optional[AVLNode]:
        if node is None:
            return None

        if key < node.value:
            node.left = self._delete(node.left, key)
        elif key > node.value:
            node.right = self._delete(node.right, key)
        else:
            if node.left is None or node.right is None:
                # Zero or one child: splice the child (or nothing) in
                self._size -= 1
                return node.left if node.left is not None else node.right

            # Two children: take the in-order successor's value, then
            # remove the successor from the right subtree.
            successor = self._min_node(node.right)
            node.value = successor.value
            node.right = self._delete(node.right, successor.value)

        return self._rebalance(node)

    @staticmethod
    def _min_node(node: AVLNode) -> AVLNode:
        while node.left is not None:
            node = node.left
        return node

    # ─── Rebalancing ────────────────────────────────────────────────

    def _rebalance(self, node: AVLNode) -> AVLNode:
        """
        Restore the balance invariant at node and return the subtree root.

        Left-heavy (bf > 1):
          - left child bf >= 0  → single right rotation
          - left child bf < 0   → left-rotate left child, then right rotation
        Right-heavy (bf < -1) is the mirror image.
        """
        _update_height(node)
        balance = _balance_factor(node)

        if balance > 1:
            if _balance_factor(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            if _balance_factor(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    @staticmethod
    def _rotate_right(y: AVLNode) -> AVLNode:
        """
              y              x
             / \\            / \\
            x   C   →      A   y
           / \\                / \\
          A   B              B   C
        """
        x = y.left
        y.left = x.right
        x.right = y
        _update_height(y)
        _update_height(x)
        return x

    @staticmethod
    def _rotate_left(x: AVLNode) -> AVLNode:
        """Mirror of _rotate_right."""
        y = x.right
        x.right = y.left
        y.left = x
        _update_height(x)
        _update_height(y)
        return y

    # ─── Traversal ──────────────────────────────────────────────────

    def to_list(self) -> List[Any]:
        """All stored values in strictly ascending order."""
        return list(self._inorder(self._root))

    def _inorder(self, node: Optional[AVLNode]) -> Iterator[Any]:
        if node is None:
            return
        yield from self._inorder(node.left)
        yield node.value
        yield from self._inorder(node.right)

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # ─── Helpers ────────────────────────────────────────────────────

    @staticmethod
    def _check_key(key: Any) -> None:
        if key is None:
            raise ValueError("NULL key cannot be ordered in an AVL tree")

    # ─── Debug / Verification ───────────────────────────────────────

    def verify_structure(self) -> List[str]:
        """
        Verify order, balance, cached heights and size accounting.
        Returns list of issues found (empty = healthy).
        """
        issues: List[str] = []
        count = self._verify_node(self._root, None, None, issues)
        if count != self._size:
            issues.append(f"Size mismatch: counter={self._size}, nodes={count}")
        return issues

    def _verify_node(self, node: Optional[AVLNode], low: Any, high: Any,
                     issues: List[str]) -> int:
        """Check the subtree rooted at node; returns its node count."""
        if node is None:
            return 0

        if low is not None and not low < node.value:
            issues.append(f"{node.value!r}: not greater than ancestor {low!r}")
        if high is not None and not node.value < high:
            issues.append(f"{node.value!r}: not less than ancestor {high!r}")

        count = 1
        count += self._verify_node(node.left, low, node.value, issues)
        count += self._verify_node(node.right, node.value, high, issues)

        expected = 1 + max(_height(node.left), _height(node.right))
        if node.height != expected:
            issues.append(
                f"{node.value!r}: cached height {node.height}, actual {expected}")

        balance = _balance_factor(node)
        if abs(balance) > 1:
            issues.append(f"{node.value!r}: balance factor {balance}")

        return count

    def format_tree(self) -> str:
        """
        Sideways dump of the tree, right subtree on top:

                ك
            ع
                د
        """
        if self._root is None:
            return "(empty)"
        lines: List[str] = []
        self._format_node(self._root, 0, lines)
        return "\n".join(lines)

    def _format_node(self, node: Optional[AVLNode], depth: int,
                     lines: List[str]) -> None:
        if node is None:
            return
        self._format_node(node.right, depth + 1, lines)
        lines.append(f"{'    ' * depth}{node.value}")
        self._format_node(node.left, depth + 1, lines)
