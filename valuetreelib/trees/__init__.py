"""Concrete tree shapes."""

from .base import Tree
from .general import GeneralTree
from .binary import AbstractBinaryTree, BinaryTree
from .search import BinarySearchTree

__all__ = [
    "Tree",
    "GeneralTree",
    "AbstractBinaryTree",
    "BinaryTree",
    "BinarySearchTree",
]
