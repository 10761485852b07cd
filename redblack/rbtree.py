import enum
import logging
from typing import Any, Callable, Optional

from .errors import InvalidArgument

logger = logging.getLogger(__name__)

Compare = Callable[[Any, Any], int]


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Colour(enum.Enum):
    BLACK = 0
    RED = 1


class Node:

    def __init__(self, element: Any, parent: Optional["Node"] = None):
        self.parent = parent
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        self.colour = Colour.RED
        self.element = element

    def get_child(self, direction: Direction) -> Optional["Node"]:
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def get_direction(self) -> Direction:
        if self.parent is None:
            return Direction.ROOT
        return Direction.LEFT if self is self.parent.left else Direction.RIGHT

    def __repr__(self):
        return f"Node({self.element!r}, {self.colour.name})"


# accessors that treat an absent node as a black leaf with no relatives, so
# the fix-up cases can be written without checking for the edges of the tree

def _parent_of(node: Optional[Node]) -> Optional[Node]:
    return None if node is None else node.parent


def _child_of(node: Optional[Node], direction: Direction) -> Optional[Node]:
    return None if node is None else node.get_child(direction)


def _colour_of(node: Optional[Node]) -> Colour:
    return Colour.BLACK if node is None else node.colour


def _set_colour(node: Optional[Node], colour: Colour):
    if node is not None:
        node.colour = colour


def _natural_order(a, b) -> int:
    return (a > b) - (a < b)


def _height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


class RedBlackTree:
    """Red-black tree of unique elements ordered by a three-way comparison.

    ``compare(a, b)`` must return a negative number, zero or a positive
    number when ``a`` sorts before, equal to or after ``b``. When omitted the
    elements' own ``<`` and ``>`` are used. Inserting an element that compares
    equal to a stored one replaces the stored element in place.
    """

    def __init__(self, compare: Optional[Compare] = None):
        self.root: Optional[Node] = None
        self._size = 0
        self._compare = compare or _natural_order

    def __len__(self):
        return self._size

    def size(self) -> int:
        return self._size

    def is_empty(self):
        return self.root is None

    def insert(self, element):
        if element is None:
            raise InvalidArgument("element must not be None")

        # the simplest case - the element becomes the (black) root and there
        # is nothing to rebalance
        if self.root is None:
            self.root = Node(element)
            self.root.colour = Colour.BLACK
            self._size = 1
            logger.debug("inserted %r as root", element)
            return

        parent = self.root
        while True:
            cmp = self._compare(element, parent.element)
            if cmp == 0:
                # equal elements are an update, the shape of the tree is untouched
                parent.element = element
                logger.debug("replaced %r in place", element)
                return
            direction = Direction(int(cmp > 0))
            child = parent.get_child(direction)
            if child is None:
                break
            parent = child

        node = Node(element, parent)
        parent.set_child(direction, node)
        self._size += 1
        logger.debug("inserted %r as %s child of %r",
                     element, direction.name, parent.element)

        self._fix_after_insert(node)

    def _fix_after_insert(self, node: Node):
        node.colour = Colour.RED

        # the only violation possible at the top of each pass is a red node
        # with a red parent
        while node is not self.root and _colour_of(_parent_of(node)) == Colour.RED:
            parent = _parent_of(node)
            grandparent = _parent_of(parent)
            # a red parent is never the root, so it always hangs off one side
            # of the grandparent; every case below mirrors on that side
            direction = parent.get_direction()
            uncle = _child_of(grandparent, Direction(1 - direction))

            # red uncle: recolour and push the violation two levels up
            if _colour_of(uncle) == Colour.RED:
                _set_colour(parent, Colour.BLACK)
                _set_colour(uncle, Colour.BLACK)
                _set_colour(grandparent, Colour.RED)
                logger.debug("recoloured below %r", grandparent.element)
                node = grandparent
                continue

            if direction == Direction.LEFT:
                rotate_parent, rotate_grandparent = self._rotate_left, self._rotate_right
            else:
                rotate_parent, rotate_grandparent = self._rotate_right, self._rotate_left

            # inner grandchild: rotate the parent so the node becomes the
            # outer grandchild, with the old parent as the node to fix
            if node is _child_of(parent, Direction(1 - direction)):
                node = parent
                rotate_parent(node)

            # outer grandchild: swap colours and rotate the grandparent down,
            # which resolves the violation
            _set_colour(_parent_of(node), Colour.BLACK)
            _set_colour(_parent_of(_parent_of(node)), Colour.RED)
            rotate_grandparent(_parent_of(_parent_of(node)))

        self.root.colour = Colour.BLACK

    # rotations only rearrange links; colours are left as they are, so on
    # their own they do not keep the tree red-black

    def _rotate_left(self, node: Node) -> Node:
        """Rotate ``node`` down to the left; its right child takes its place."""
        return self._rotate_subtree(node, Direction.LEFT)

    def _rotate_right(self, node: Node) -> Node:
        """Rotate ``node`` down to the right; its left child takes its place."""
        return self._rotate_subtree(node, Direction.RIGHT)

    def _rotate_subtree(self, sub: Node, direction: Direction) -> Node:
        # the fix-up only rotates nodes that have the child moving up; these
        # asserts catch a broken case and are stripped under python -O
        assert sub is not None, "cannot rotate an absent node"
        new_root = sub.get_child(Direction(1 - direction))
        assert new_root is not None, (
            f"rotating {direction.name} requires a "
            f"{Direction(1 - direction).name} child of {sub!r}")

        sub_parent = sub.parent
        new_child = new_root.get_child(direction)

        sub.set_child(Direction(1 - direction), new_child)

        if new_child is not None:
            new_child.parent = sub

        new_root.set_child(direction, sub)

        new_root.parent = sub_parent
        sub.parent = new_root
        if sub_parent is not None:
            d = Direction.RIGHT if sub is sub_parent.right else Direction.LEFT
            sub_parent.set_child(d, new_root)
        else:
            self.root = new_root

        logger.debug("rotated %r %s, %r moved up",
                     sub.element, direction.name, new_root.element)
        return new_root

    def height(self) -> int:
        """Number of nodes on the longest path from the root to a leaf"""
        return _height(self.root)

    def pprint(self, node: Optional[Node] = None, depth=0) -> str:
        if depth == 0 and node is None:
            node = self.root
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        direction = node.get_direction()
        return ("\t" * depth + f"|_ {direction.name} | {node.element!r}: {node.colour.name}\n"
                + self.pprint(node.left, depth + 1)
                + self.pprint(node.right, depth + 1))
