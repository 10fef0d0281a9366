#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_set.py
----------------

An ordered set backed by a **Red‑Black** binary search tree.
Elements are kept unique under their total order and every point operation
runs in O(log n).

Features
~~~~~~~~
* `tree.insert(x)`       – add (raises DuplicateElementError if present)
* `tree.add(x)`          – add, returning ``False`` instead of raising
* `tree.remove(x)`       – delete, returning whether anything was removed
* `x in tree`            – membership test (also `tree.contains(x)`)
* `len(tree)`, `bool(tree)`, `tree.is_empty()`, `tree.clear()`
* iteration (`for x in tree:`) – elements in ascending order
* `tree.find_min()`, `tree.find_max()` (``None`` when empty)
* `tree.find_successor(x)`, `tree.find_predecessor(x)` (``None`` if missing)
* `tree.print_tree()`    – diagnostic in‑order dump, one element per line
* `tree.validate()`      – sanity‑check that the red‑black invariants hold

Insertion is the *top‑down* variant: any node met on the way down that has
two red children is recoloured (and rotated if needed) before the descent
continues, so the new leaf can be attached without a second pass up the
tree.  Deletion splices the node out first and then walks upwards through
six repair cases.

Two structural nodes keep the code free of ``None`` checks:

* a single shared sentinel (``self._nil``) stands in for every missing child;
* a header node (``self._header``) whose right child is the root, so the
  root always has a real parent.

Equality is decided by the ordering alone (``not a < b and not b < a``),
never by ``==`` or identity.

Typical usage
~~~~~~~~~~~~~
>>> from red_black_set import RedBlackSet
>>> rbs = RedBlackSet([10, 20, 30, 15, 25, 5])
>>> rbs.find_min(), rbs.find_max()
(5, 30)
>>> rbs.find_successor(15)
20
>>> rbs.remove(20)
True
>>> list(rbs)
[5, 10, 15, 25, 30]
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    Generator,
    Generic,
    Iterable,
    List,
    Optional,
    TextIO,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

# ----------------------------------------------------------------------
#  Element type (must support ``<``, directly or through ``key``)
# ----------------------------------------------------------------------
E = TypeVar("E")

# ----------------------------------------------------------------------
#  Node colour constants – using simple booleans is fastest
# ----------------------------------------------------------------------
RED = True
BLACK = False


class DuplicateElementError(ValueError):
    """Raised by :meth:`RedBlackSet.insert` for an element already stored."""

    def __init__(self, element: Any) -> None:
        super().__init__(f"Element {element!r} already present in set")
        self.element = element


class _Node(Generic[E]):
    """Internal node object – not meant to be used directly by callers."""

    __slots__ = ("element", "color", "left", "right", "parent")

    def __init__(
        self,
        element: Optional[E] = None,
        color: bool = BLACK,
        left: Optional["_Node[E]"] = None,
        right: Optional["_Node[E]"] = None,
        parent: Optional["_Node[E]"] = None,
    ) -> None:
        self.element = element
        self.color = color
        self.left = left
        self.right = right
        self.parent = parent

    def __repr__(self) -> str:
        col = "R" if self.color == RED else "B"
        return f"<{col} {self.element!r}>"


class RedBlackSet(Generic[E]):
    """
    A mutable ordered set implemented with a red‑black binary search tree.

    Parameters
    ----------
    items : iterable of E, optional
        Elements inserted one by one with :meth:`insert`; a repeated element
        raises :class:`DuplicateElementError`.
    key : Callable[[E], Any], optional
        Like ``sorted(..., key=…)``: elements are ordered (and considered
        equal) by ``key(element)`` instead of by the element itself.
    """

    __slots__ = ("_nil", "_header", "_size", "_key")

    def __init__(
        self,
        items: Optional[Iterable[E]] = None,
        *,
        key: Optional[Callable[[E], Any]] = None,
    ) -> None:
        # The sentinel leaf – shared by every leaf, always BLACK, never
        # carries an element.
        self._nil: _Node[E] = _Node()
        self._nil.left = self._nil.right = self._nil.parent = self._nil

        # header.right is the root; header.left stays the sentinel.
        self._header: _Node[E] = _Node(
            left=self._nil, right=self._nil, parent=self._nil
        )

        self._size: int = 0
        self._key = key

        if items is not None:
            for element in items:
                self.insert(element)

    # ------------------------------------------------------------------
    #   Ordering
    # ------------------------------------------------------------------
    def _less(self, a: E, b: E) -> bool:
        if self._key is not None:
            return self._key(a) < self._key(b)
        return a < b  # type: ignore[operator]

    def _compare(self, element: E, node: _Node[E]) -> int:
        """
        Three‑way compare *element* against the element held by *node*.

        Anything compares greater than the header, so a descent that starts
        at the header always enters the root.
        """
        if node is self._header:
            return 1
        if self._less(element, node.element):  # type: ignore[arg-type]
            return -1
        if self._less(node.element, element):  # type: ignore[arg-type]
            return 1
        return 0

    def _find_node(self, element: E) -> _Node[E]:
        """Return the node that holds *element* or the sentinel if absent."""
        cur = self._header.right
        while cur is not self._nil:
            cmp = self._compare(element, cur)
            if cmp < 0:
                cur = cur.left
            elif cmp > 0:
                cur = cur.right
            else:
                return cur
        return self._nil

    # ------------------------------------------------------------------
    #   Container protocol
    # ------------------------------------------------------------------
    def __contains__(self, element: object) -> bool:
        return self.contains(element)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Generator[E, None, None]:
        """Yield elements in ascending order (in‑order traversal)."""
        stack: List[_Node[E]] = []
        cur = self._header.right
        while stack or cur is not self._nil:
            while cur is not self._nil:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.element  # type: ignore[misc]
            cur = cur.right

    def __repr__(self) -> str:
        return f"RedBlackSet({list(self)!r})"

    # ------------------------------------------------------------------
    #   Queries
    # ------------------------------------------------------------------
    def contains(self, element: E) -> bool:
        return self._find_node(element) is not self._nil

    def is_empty(self) -> bool:
        return self._header.right is self._nil

    def clear(self) -> None:
        """Drop every element; the old nodes are left to the garbage collector."""
        self._header.right = self._nil
        self._size = 0
        logger.debug("Cleared set")

    def _subtree_min(self, node: _Node[E]) -> _Node[E]:
        while node.left is not self._nil:
            node = node.left
        return node

    def _subtree_max(self, node: _Node[E]) -> _Node[E]:
        while node.right is not self._nil:
            node = node.right
        return node

    def find_min(self) -> Optional[E]:
        """Return the smallest element, or ``None`` if the set is empty."""
        if self.is_empty():
            return None
        return self._subtree_min(self._header.right).element

    def find_max(self) -> Optional[E]:
        """Return the largest element, or ``None`` if the set is empty."""
        if self.is_empty():
            return None
        return self._subtree_max(self._header.right).element

    def find_successor(self, element: E) -> Optional[E]:
        """
        Return the smallest element greater than *element*.

        ``None`` if *element* is not stored or is the maximum.
        """
        node = self._find_node(element)
        if node is self._nil:
            return None

        if node.right is not self._nil:
            return self._subtree_min(node.right).element

        # Walk up until we leave a left subtree.
        while node.parent is not self._header:
            if node.parent.left is node:
                return node.parent.element
            node = node.parent
        return None

    def find_predecessor(self, element: E) -> Optional[E]:
        """Mirror of :meth:`find_successor`."""
        node = self._find_node(element)
        if node is self._nil:
            return None

        if node.left is not self._nil:
            return self._subtree_max(node.left).element

        while node.parent is not self._header:
            if node.parent.right is node:
                return node.parent.element
            node = node.parent
        return None

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        """Write every element in ascending order, one per line (stdout by default)."""
        for element in self:
            print(element, file=file)

    # ------------------------------------------------------------------
    #   Insertion (top‑down)
    # ------------------------------------------------------------------
    def insert(self, element: E) -> None:
        """
        Add *element* to the set.

        Raises ``DuplicateElementError`` if an element comparing equal is
        already stored; the tree is not touched in that case.
        """
        # Reject before the descent starts recolouring the search path.
        if self._find_node(element) is not self._nil:
            logger.debug("Rejected duplicate element %r", element)
            raise DuplicateElementError(element)

        header = self._header
        nil = self._nil
        current = parent = grand = great = header

        while current is not nil:
            cmp = self._compare(element, current)
            great, grand, parent = grand, parent, current
            current = current.left if cmp < 0 else current.right

            # Two red children: split them now, while the ancestors are known.
            if current.left.color == RED and current.right.color == RED:
                current, parent = self._reorient(
                    element, current, parent, grand, great
                )

        # `current` is the sentinel, `parent` is where we attach.
        current = _Node(element, RED, nil, nil, parent)
        if self._compare(element, parent) < 0:
            parent.left = current
        else:
            parent.right = current
        self._size += 1

        self._reorient(element, current, parent, grand, great)

    def add(self, element: E) -> bool:
        """Like :meth:`insert`, but return ``False`` for a duplicate instead of raising."""
        try:
            self.insert(element)
        except DuplicateElementError:
            return False
        return True

    def _reorient(
        self,
        element: E,
        current: _Node[E],
        parent: _Node[E],
        grand: _Node[E],
        great: _Node[E],
    ) -> Tuple[_Node[E], _Node[E]]:
        """
        Colour flip at *current*, plus a single or double rotation when that
        leaves *current* and *parent* both red.

        Returns the updated ``(current, parent)`` pair for the descent.
        """
        current.color = RED
        for child in (current.left, current.right):
            if child is not self._nil:
                child.color = BLACK

        if parent.color == RED:
            grand.color = RED
            if (self._compare(element, grand) < 0) != (
                self._compare(element, parent) < 0
            ):
                parent = self._rotate(element, grand)  # zig-zag: double rotate
            current = self._rotate(element, great)
            current.color = BLACK

        self._header.right.color = BLACK
        return current, parent

    def _rotate(self, element: E, parent: _Node[E]) -> _Node[E]:
        """
        Rotate the child of *parent* that lies towards *element*, in the
        direction of *element*, and hang the result back on *parent*.
        """
        if self._compare(element, parent) < 0:
            child = parent.left
            if self._compare(element, child) < 0:
                parent.left = self._rotate_right(child)
            else:
                parent.left = self._rotate_left(child)
            return parent.left

        child = parent.right
        if self._compare(element, child) < 0:
            parent.right = self._rotate_right(child)
        else:
            parent.right = self._rotate_left(child)
        return parent.right

    # ------------------------------------------------------------------
    #   Left / right rotations – helper primitives
    # ------------------------------------------------------------------
    def _rotate_left(self, node: _Node[E]) -> _Node[E]:
        """
        Left‑rotate the subtree rooted at *node* and return its new root.
        The caller reattaches the result to *node*'s old parent.
        """
        child = node.right
        if child is self._nil:
            raise RuntimeError("rotate_left called on a node with nil right child")
        node.right = child.left
        if child.left is not self._nil:
            child.left.parent = node
        child.left = node
        child.parent = node.parent
        node.parent = child
        return child

    def _rotate_right(self, node: _Node[E]) -> _Node[E]:
        """Mirror of :meth:`_rotate_left`."""
        child = node.left
        if child is self._nil:
            raise RuntimeError("rotate_right called on a node with nil left child")
        node.left = child.right
        if child.right is not self._nil:
            child.right.parent = node
        child.right = node
        child.parent = node.parent
        node.parent = child
        return child

    def _rotate_at(self, node: _Node[E], to_left: bool) -> None:
        """Rotate at *node* and relink the new subtree root into *node*'s parent."""
        above = node.parent
        if to_left:
            top = self._rotate_left(node)
        else:
            top = self._rotate_right(node)
        if above.left is node:
            above.left = top
        else:
            above.right = top

    # ------------------------------------------------------------------
    #   Deletion – public entry point
    # ------------------------------------------------------------------
    def remove(self, element: Optional[E]) -> bool:
        """
        Remove *element* if present.

        Returns ``True`` if something was removed; ``False`` if the element
        is absent or ``None``.
        """
        if element is None:
            return False

        node = self._find_node(element)
        if node is self._nil:
            return False

        if node.left is not self._nil and node.right is not self._nil:
            # Trade places with the in‑order successor, which has at most
            # one real child, and remove that node instead.
            succ = self._subtree_min(node.right)
            node.element, succ.element = succ.element, node.element
            node = succ

        self._delete_node_with_at_most_one_child(node)
        self._size -= 1
        return True

    def _replace_node(self, node: _Node[E], child: _Node[E]) -> None:
        """Splice *node* out of the tree, putting *child* in its slot."""
        parent = node.parent
        if parent.right is node:
            parent.right = child
        else:
            parent.left = child
        if child is not self._nil:
            child.parent = parent
        node.left = node.right = node.parent = self._nil

    def _delete_node_with_at_most_one_child(self, node: _Node[E]) -> None:
        child = node.left if node.right is self._nil else node.right
        parent = node.parent

        self._replace_node(node, child)
        if node.color == RED:
            return
        if child.color == RED:
            child.color = BLACK
            return
        # A black node was replaced by a black one: paths through `child`
        # are one black node short.
        self._delete_case1(child, parent)

    # ------------------------------------------------------------------
    #   Delete fix‑up: six cases, each mirrored for left / right.
    #   `node` may be the sentinel, so its parent is always passed in.
    # ------------------------------------------------------------------
    def _sibling(self, node: _Node[E], parent: _Node[E]) -> _Node[E]:
        return parent.right if node is parent.left else parent.left

    def _delete_case1(self, node: _Node[E], parent: _Node[E]) -> None:
        """`node` is the root: every path lost one black node, nothing to do."""
        if parent is not self._header:
            self._delete_case2(node, parent)

    def _delete_case2(self, node: _Node[E], parent: _Node[E]) -> None:
        """Red sibling: rotate it above `parent` so the new sibling is black."""
        sibling = self._sibling(node, parent)
        if sibling.color == RED:
            logger.debug("delete case 2 at %r", parent)
            parent.color = RED
            sibling.color = BLACK
            self._rotate_at(parent, to_left=node is parent.left)
        self._delete_case3(node, parent)

    def _delete_case3(self, node: _Node[E], parent: _Node[E]) -> None:
        """All black around `node`: paint the sibling red and move the deficit up."""
        sibling = self._sibling(node, parent)
        if (
            parent.color == BLACK
            and sibling.color == BLACK
            and sibling.left.color == BLACK
            and sibling.right.color == BLACK
        ):
            sibling.color = RED
            self._delete_case1(parent, parent.parent)
        else:
            self._delete_case4(node, parent)

    def _delete_case4(self, node: _Node[E], parent: _Node[E]) -> None:
        """Red parent, black sibling and nephews: swap parent/sibling colours."""
        sibling = self._sibling(node, parent)
        if (
            parent.color == RED
            and sibling.color == BLACK
            and sibling.left.color == BLACK
            and sibling.right.color == BLACK
        ):
            sibling.color = RED
            parent.color = BLACK
        else:
            self._delete_case5(node, parent)

    def _delete_case5(self, node: _Node[E], parent: _Node[E]) -> None:
        """Near nephew red, far nephew black: rotate at the sibling to reach case 6."""
        sibling = self._sibling(node, parent)
        if (
            node is parent.left
            and sibling.right.color == BLACK
            and sibling.left.color == RED
        ):
            logger.debug("delete case 5 at %r", sibling)
            sibling.color = RED
            sibling.left.color = BLACK
            self._rotate_at(sibling, to_left=False)
        elif (
            node is parent.right
            and sibling.left.color == BLACK
            and sibling.right.color == RED
        ):
            logger.debug("delete case 5 at %r", sibling)
            sibling.color = RED
            sibling.right.color = BLACK
            self._rotate_at(sibling, to_left=True)
        self._delete_case6(node, parent)

    def _delete_case6(self, node: _Node[E], parent: _Node[E]) -> None:
        """Far nephew red: rotate at `parent`, giving `node` an extra black ancestor."""
        logger.debug("delete case 6 at %r", parent)
        sibling = self._sibling(node, parent)
        sibling.color = parent.color
        parent.color = BLACK

        if node is parent.left:
            sibling.right.color = BLACK
            self._rotate_at(parent, to_left=True)
        else:
            sibling.left.color = BLACK
            self._rotate_at(parent, to_left=False)

    # ------------------------------------------------------------------
    #   Validation/checking utilities – useful for debugging
    # ------------------------------------------------------------------
    def height(self) -> int:
        """Number of real nodes on the longest root‑to‑leaf path."""

        def depth(node: _Node[E]) -> int:
            if node is self._nil:
                return 0
            return 1 + max(depth(node.left), depth(node.right))

        return depth(self._header.right)

    def validate(self) -> None:
        """
        Verify that the tree satisfies all red‑black invariants.
        Raises ``AssertionError`` with a descriptive message if something is broken.
        """
        nil = self._nil
        root = self._header.right

        assert self._header.color == BLACK, "Header is not black"
        assert nil.color == BLACK, "Sentinel is not black"
        assert nil.element is None, "Sentinel holds an element"
        assert self._header.left is nil, "Header has a left child"
        assert root.color == BLACK, "Root is not black"
        if root is not nil:
            assert root.parent is self._header, "Root's parent is not the header"

        def dfs(node: _Node[E]) -> Tuple[int, int]:
            """Return ``(black_height, node_count)`` for the subtree at *node*."""
            if node is nil:
                return 1, 0

            assert node.color in (RED, BLACK), "Node colour is neither RED nor BLACK"

            if node.color == RED:
                assert node.left.color == BLACK, "Red node has red left child"
                assert node.right.color == BLACK, "Red node has red right child"

            for child in (node.left, node.right):
                if child is not nil:
                    assert child.parent is node, "Broken parent link"

            left_black, left_count = dfs(node.left)
            right_black, right_count = dfs(node.right)
            assert left_black == right_black, "Black-height mismatch"

            bh = left_black + (1 if node.color == BLACK else 0)
            return bh, left_count + right_count + 1

        _, count = dfs(root)
        assert count == self._size, "Size counter out of sync"

        elements = list(self)
        for smaller, larger in zip(elements, elements[1:]):
            assert self._less(
                smaller, larger
            ), "In-order traversal is not strictly increasing"
