"""ValueTreeLib - value-addressed in-memory trees.

ValueTreeLib provides general (N-ary), binary and binary-search trees that
are built and queried through the values they hold, never through node
handles. Every tree keeps an identity index for O(1) lookup and shares one
set of lazy traversal algorithms.

Quick start:
━━━━━━━━━━━━
    from valuetreelib import GeneralTree, BinaryTree, BinarySearchTree

    tree = GeneralTree("ROOT")
    tree.add("A")
    tree.add("1", parent="A")
    list(tree.breadth_first())   # ['ROOT', 'A', '1']
━━━━━━━━━━━━
"""

__version__ = "0.3.0"

from .errors import (
    TreeError,
    DuplicateValueError,
    NotFoundError,
    SlotOccupiedError,
    InvalidMoveError,
    InvalidValueError,
    CapabilityMismatchError,
)
from .trees import (
    Tree,
    GeneralTree,
    AbstractBinaryTree,
    BinaryTree,
    BinarySearchTree,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)
from .planning import ExecutionPlan
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_values,
    get_tree_paths,
    get_leaf_values,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Errors
    "TreeError",
    "DuplicateValueError",
    "NotFoundError",
    "SlotOccupiedError",
    "InvalidMoveError",
    "InvalidValueError",
    "CapabilityMismatchError",
    # Trees
    "Tree",
    "GeneralTree",
    "AbstractBinaryTree",
    "BinaryTree",
    "BinarySearchTree",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DataRequirement",
    "FilterConfig",
    "DepthConfig",
    "ExecutionPlan",
    # API
    "traverse_tree",
    "collect_tree_data",
    "count_nodes",
    "find_values",
    "get_tree_paths",
    "get_leaf_values",
    "get_tree_stats",
]
