from .errors import InvalidArgument
from .rbtree import Colour, Direction, Node, RedBlackTree

__all__ = ["Colour", "Direction", "InvalidArgument", "Node", "RedBlackTree"]
