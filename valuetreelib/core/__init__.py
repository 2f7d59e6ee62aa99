"""Core abstractions for ValueTreeLib.

Nodes, the identity index, the adapter seam and the traversal algorithms
that every tree shape shares.
"""

from .node import TreeNode, GeneralNode, BinaryNode
from .index import IdentityIndex, check_value
from .adapter import TreeAdapter, GeneralTreeAdapter, BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    InOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    DepthCollector,
    FullNodeCollector,
    ChildCountCollector,
    PathCollector,
    CustomCollector,
)
from .metrics import calculate_depth, calculate_width

__all__ = [
    "TreeNode",
    "GeneralNode",
    "BinaryNode",
    "IdentityIndex",
    "check_value",
    "TreeAdapter",
    "GeneralTreeAdapter",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "InOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "DepthCollector",
    "FullNodeCollector",
    "ChildCountCollector",
    "PathCollector",
    "CustomCollector",
    "calculate_depth",
    "calculate_width",
]
