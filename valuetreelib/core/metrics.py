"""Shape metrics computed over any TreeAdapter."""

from typing import Dict

from .adapter import TreeAdapter
from .node import TreeNode
from .traverser import BreadthFirstTraverser, DepthFirstPostOrderTraverser


def calculate_depth(root: TreeNode, adapter: TreeAdapter) -> int:
    """Number of nodes on the longest root-to-leaf path.

    A root with no children has depth 1.
    """
    deepest = 0
    for _, depth in BreadthFirstTraverser(adapter).traverse(root):
        deepest = depth
    return deepest + 1


def calculate_width(root: TreeNode, adapter: TreeAdapter) -> int:
    """Width of the tree: the number of leaves below ``root``.

    A childless node contributes 1 and any other node contributes the sum of
    its children's widths. For binary trees this is the same as
    ``max(1, width(left) + width(right))`` with empty slots counting 0, so a
    node with a single child is never counted as width 0.
    """
    widths: Dict[int, int] = {}
    for node, _ in DepthFirstPostOrderTraverser(adapter).traverse(root):
        children = list(adapter.get_children(node))
        if not children:
            widths[id(node)] = 1
        else:
            # Post-order guarantees every child is already measured
            widths[id(node)] = sum(widths.pop(id(child)) for child in children)
    return widths[id(root)]
