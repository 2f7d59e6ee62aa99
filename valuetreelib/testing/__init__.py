"""Testing utilities for ValueTreeLib consumers."""

from .fixtures import (
    TreeTestHelper,
    build_symmetric_general_tree,
    build_asymmetric_general_tree,
    build_symmetric_binary_tree,
    build_search_tree,
)

__all__ = [
    'TreeTestHelper',
    'build_symmetric_general_tree',
    'build_asymmetric_general_tree',
    'build_symmetric_binary_tree',
    'build_search_tree',
]
